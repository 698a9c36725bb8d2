"""ProfileCollector.

This module turns raw form answers into a validated ``InputProfile``.  It
does not include any front-end specific logic; it expects the values as the
user typed them (strings or numbers) and either returns a complete profile
or raises a ``ProfileValidationError`` naming the offending field.  Nothing
is defaulted silently: a profile that reaches the calculator is valid.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..core import logic
from ..core.errors import (
    InvalidSexError,
    NonNumericValueError,
    NonPositiveHeightError,
    NonPositiveValueError,
    ProfileValidationError,
    ZeroCalorieDeficitError,
)
from ..core.schema import InputProfile
from ..core.utils import parse_int, parse_number

logger = logging.getLogger(__name__)

_SEX_TOKENS = {
    "male": True,
    "m": True,
    "female": False,
    "f": False,
}


def parse_sex(value: Any) -> bool:
    """Return ``True`` for a male token and ``False`` for a female one.

    Raises:
        InvalidSexError: for any other value.
    """
    if isinstance(value, bool):
        return value
    token = str(value).strip().lower() if value is not None else ""
    try:
        return _SEX_TOKENS[token]
    except KeyError:
        raise InvalidSexError(value) from None


def _required_int(field: str, value: Any) -> int:
    number = parse_int(value)
    if number is None:
        raise NonNumericValueError(field, value)
    return number


def _positive_int(field: str, value: Any) -> int:
    number = _required_int(field, value)
    if number <= 0:
        raise NonPositiveValueError(field, value)
    return number


def _optional_int(field: str, value: Any) -> Optional[int]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return _required_int(field, value)


def collect_profile(
    *,
    sex: Any,
    age: Any,
    height_cm: Any,
    weight_kg: Any,
    activity_level: Any,
    target_weight_kg: Any = None,
    calorie_deficit: Any = 500,
) -> InputProfile:
    """Construct an ``InputProfile`` from raw answers.

    Args:
        sex: "male" or "female" (``m``/``f`` and a bool are accepted too).
        age: Age in years.
        height_cm: Height in centimetres.
        weight_kg: Current weight in kilograms.
        activity_level: One of the activity labels, e.g. ``"sedentary"``.
        target_weight_kg: Desired weight in kilograms; empty means no goal.
        calorie_deficit: Planned calorie deficit in kcal per day, non-zero.

    Returns:
        A validated ``InputProfile``.

    Raises:
        ProfileValidationError: if any field is rejected.
        ZeroCalorieDeficitError: if ``calorie_deficit`` is zero.
    """
    try:
        is_male = parse_sex(sex)
        age_years = _positive_int("age", age)
        height = _required_int("height_cm", height_cm)
        if height <= 0:
            raise NonPositiveHeightError(height_cm)
        weight = _positive_int("weight_kg", weight_kg)
        target = _optional_int("target_weight_kg", target_weight_kg)
        level = logic.activity_level(activity_level)
        deficit = parse_number(calorie_deficit)
        if deficit is None:
            raise NonNumericValueError("calorie_deficit", calorie_deficit)
        if deficit == 0:
            raise ZeroCalorieDeficitError()
    except ProfileValidationError as exc:
        logger.warning("Rejected %s=%r: %s", exc.field, exc.value, exc)
        raise
    profile = InputProfile(
        is_male=is_male,
        age=age_years,
        height_cm=height,
        weight_kg=weight,
        activity_level=level,
        target_weight_kg=target,
        calorie_deficit=deficit,
    )
    logger.debug("collect_profile: %s", profile.model_dump(mode="json"))
    return profile
