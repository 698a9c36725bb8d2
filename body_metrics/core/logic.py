"""Core body metric calculations.

This module contains the formulas for body mass index (BMI), ideal body
weight (IBW), basal metabolic rate (BMR), total daily energy expenditure
and the number of days a calorie deficit needs to reach a given weight.
Values returned from these functions are purely indicative and should not
replace professional advice.
"""

from __future__ import annotations

import logging

from .errors import (
    NonPositiveHeightError,
    NonPositiveValueError,
    ZeroCalorieDeficitError,
)
from .schema import ActivityLevel, DerivedMetrics, InputProfile, WeightCategory

logger = logging.getLogger(__name__)

# Energy stored in one kilogram of body fat.
KCAL_PER_KG_FAT = 7700

NORMAL_BMI_MIN = 18.5
NORMAL_BMI_MAX = 24.9


def height_in_meters(height_cm: float) -> float:
    if height_cm <= 0:
        raise NonPositiveHeightError(height_cm)
    return height_cm / 100


def activity_level(label: str | ActivityLevel) -> ActivityLevel:
    """Return the ``ActivityLevel`` for ``label``.

    Raises:
        UnknownActivityLabelError: if ``label`` is not in the factor table.
    """
    return ActivityLevel.parse(label)


def compute_ideal_body_weight(is_male: bool, height_cm: float) -> float:
    """Estimate ideal body weight with the Devine-style linear formula.

    Args:
        is_male: Whether the person is male.
        height_cm: Height in centimetres.

    Returns:
        Ideal body weight in kilograms.
    """
    base = 50 if is_male else 45.5
    return base + 0.91 * (height_cm - 152.4)


def compute_bmr(is_male: bool, age: int, height_cm: float, weight_kg: float) -> float:
    """Compute basal metabolic rate using the Mifflin–St Jeor equation.

    Args:
        is_male: Whether the person is male.
        age: Age in years.
        height_cm: Height in centimetres.
        weight_kg: Weight in kilograms.

    Returns:
        Estimated BMR in kilocalories per day.
    """
    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if is_male:
        bmr += 5
    else:
        bmr -= 161
    return bmr


def compute_bmi(weight_kg: float, height_cm: float) -> float:
    return weight_kg / height_in_meters(height_cm) ** 2


def weight_category(bmi: float) -> WeightCategory:
    """Classify ``bmi`` into a weight category.

    The bands are half-open: ``[18.5, 25)`` is normal, ``[25, 30)`` is
    overweight and 30 and above is obesity.
    """
    if bmi < 18.5:
        return WeightCategory.UNDERWEIGHT
    if bmi < 25:
        return WeightCategory.NORMAL
    if bmi < 30:
        return WeightCategory.OVERWEIGHT
    return WeightCategory.OBESITY


def normal_weight_range(height_cm: float) -> tuple[float, float]:
    """Return the weight bounds (kg) of a normal BMI for ``height_cm``."""
    height_sq = height_in_meters(height_cm) ** 2
    return height_sq * NORMAL_BMI_MIN, height_sq * NORMAL_BMI_MAX


def days_to_reach_weight(
    current_weight: float, target_weight: float, calorie_deficit: float
) -> float:
    """Return how many days ``calorie_deficit`` kcal/day takes to reach a weight.

    A negative result means ``target_weight`` is above ``current_weight``.

    Raises:
        ZeroCalorieDeficitError: if ``calorie_deficit`` is zero.
    """
    if calorie_deficit == 0:
        raise ZeroCalorieDeficitError()
    return ((current_weight - target_weight) * KCAL_PER_KG_FAT) / calorie_deficit


def validate_profile(profile: InputProfile) -> None:
    """Reject profiles the formulas would turn into nonsense."""
    if profile.height_cm <= 0:
        raise NonPositiveHeightError(profile.height_cm)
    if profile.age <= 0:
        raise NonPositiveValueError("age", profile.age)
    if profile.weight_kg <= 0:
        raise NonPositiveValueError("weight_kg", profile.weight_kg)


def compute_metrics(profile: InputProfile) -> DerivedMetrics:
    """Compute all derived metrics for a profile.

    Args:
        profile: A validated input profile.

    Returns:
        A frozen ``DerivedMetrics`` record.

    Raises:
        ProfileValidationError: if height, age or weight is not positive.
    """
    validate_profile(profile)
    level = activity_level(profile.activity_level)
    height_m = height_in_meters(profile.height_cm)
    ideal = compute_ideal_body_weight(profile.is_male, profile.height_cm)
    bmr = compute_bmr(profile.is_male, profile.age, profile.height_cm, profile.weight_kg)
    bmi = compute_bmi(profile.weight_kg, profile.height_cm)
    normal_min, normal_max = normal_weight_range(profile.height_cm)
    metrics = DerivedMetrics(
        height_m=height_m,
        height_m_squared=height_m ** 2,
        activity_factor=level.factor(),
        activity_description=level.description(),
        ideal_body_weight=ideal,
        bmr=bmr,
        daily_calorie_need=bmr * level.factor(),
        bmi=bmi,
        weight_category=weight_category(bmi),
        normal_weight_min=normal_min,
        normal_weight_max=normal_max,
        weight_difference=abs(ideal - profile.weight_kg),
    )
    logger.debug(
        "compute_metrics: bmi=%.2f category=%s bmr=%.1f tdee=%.1f",
        metrics.bmi,
        metrics.weight_category.value,
        metrics.bmr,
        metrics.daily_calorie_need,
    )
    return metrics
