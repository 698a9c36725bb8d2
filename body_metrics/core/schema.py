"""Pydantic models for calculator input and output.

``InputProfile`` is what a caller hands to the calculator after validation,
``DerivedMetrics`` is what comes back.  Both are frozen: a metrics record is
built once per calculation and never updated afterwards.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import UnknownActivityLabelError


class ActivityLevel(str, Enum):
    """Habitual activity level used to scale BMR into daily calorie need."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"

    @classmethod
    def parse(cls, label: object) -> "ActivityLevel":
        """Return the level for ``label``, ignoring case and surrounding spaces.

        Raises:
            UnknownActivityLabelError: if ``label`` is not in the factor table.
        """
        if isinstance(label, cls):
            return label
        token = label.strip().lower() if isinstance(label, str) else label
        try:
            return cls(token)
        except ValueError:
            raise UnknownActivityLabelError(label) from None

    def factor(self) -> float:
        """Return the multiplier applied to BMR.

        Example:
            >>> ActivityLevel.MODERATELY_ACTIVE.factor()
            1.55
        """
        return _ACTIVITY_TABLE[self][0]

    def description(self) -> str:
        """Return a human-readable description of the level."""
        return _ACTIVITY_TABLE[self][1]


_ACTIVITY_TABLE: dict[ActivityLevel, tuple[float, str]] = {
    ActivityLevel.SEDENTARY: (1.2, "Minimal physical activity, mostly sitting"),
    ActivityLevel.LIGHTLY_ACTIVE: (1.375, "Light exercise or activity 1-3 days a week"),
    ActivityLevel.MODERATELY_ACTIVE: (1.55, "Moderate exercise or activity 3-5 days a week"),
    ActivityLevel.VERY_ACTIVE: (1.725, "Intense exercise or activity 6-7 days a week"),
    ActivityLevel.EXTRA_ACTIVE: (1.9, "Highly demanding physical work or intense training"),
}


class WeightCategory(str, Enum):
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESITY = "obesity"


class InputProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_male: bool
    age: int
    height_cm: int
    weight_kg: int
    activity_level: ActivityLevel
    target_weight_kg: Optional[int] = None
    calorie_deficit: float = 500

    @field_validator("activity_level", mode="before")
    @classmethod
    def check_activity_level(cls, v: object) -> ActivityLevel:
        return ActivityLevel.parse(v)


class DerivedMetrics(BaseModel):
    """Everything the calculator derives from one ``InputProfile``."""

    model_config = ConfigDict(frozen=True)

    height_m: float
    height_m_squared: float
    activity_factor: float
    activity_description: str
    ideal_body_weight: float
    bmr: float
    daily_calorie_need: float
    bmi: float
    weight_category: WeightCategory
    normal_weight_min: float
    normal_weight_max: float
    weight_difference: float
