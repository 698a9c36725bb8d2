import pytest

from body_metrics.collectors.profile_collector import collect_profile, parse_sex
from body_metrics.core.errors import (
    InvalidSexError,
    NonNumericValueError,
    NonPositiveHeightError,
    NonPositiveValueError,
    ProfileValidationError,
    UnknownActivityLabelError,
    ZeroCalorieDeficitError,
)
from body_metrics.core.schema import ActivityLevel


def _answers(**overrides):
    data = dict(
        sex="male",
        age="30",
        height_cm="180 cm",
        weight_kg="90",
        activity_level="moderately_active",
        target_weight_kg="78",
        calorie_deficit="500",
    )
    data.update(overrides)
    return data


def test_collect_profile_from_form_values():
    profile = collect_profile(**_answers())
    assert profile.is_male is True
    assert profile.age == 30
    assert profile.height_cm == 180
    assert profile.weight_kg == 90
    assert profile.target_weight_kg == 78
    assert profile.activity_level is ActivityLevel.MODERATELY_ACTIVE
    assert profile.calorie_deficit == 500


def test_fractional_values_are_truncated():
    profile = collect_profile(**_answers(weight_kg="72.9 kg", height_cm=175.6))
    assert profile.weight_kg == 72
    assert profile.height_cm == 175


def test_empty_target_weight_means_no_goal():
    assert collect_profile(**_answers(target_weight_kg="")).target_weight_kg is None
    assert collect_profile(**_answers(target_weight_kg=None)).target_weight_kg is None


def test_sex_tokens():
    assert parse_sex("Female ") is False
    assert parse_sex("m") is True
    assert parse_sex(False) is False
    with pytest.raises(InvalidSexError):
        parse_sex("other")
    with pytest.raises(InvalidSexError):
        parse_sex(None)


def test_invalid_sex_is_rejected_before_computing():
    with pytest.raises(InvalidSexError) as exc_info:
        collect_profile(**_answers(sex="What"))
    assert exc_info.value.field == "sex"


def test_unknown_activity_label_is_rejected():
    with pytest.raises(UnknownActivityLabelError):
        collect_profile(**_answers(activity_level="jogging"))


def test_non_positive_height_is_rejected():
    with pytest.raises(NonPositiveHeightError):
        collect_profile(**_answers(height_cm="0"))


def test_non_numeric_and_non_positive_values_are_rejected():
    with pytest.raises(NonNumericValueError):
        collect_profile(**_answers(age="thirty"))
    with pytest.raises(NonNumericValueError):
        collect_profile(**_answers(calorie_deficit="lots"))
    with pytest.raises(NonPositiveValueError):
        collect_profile(**_answers(weight_kg="-5"))
    with pytest.raises(ProfileValidationError):
        collect_profile(**_answers(target_weight_kg="soon"))


def test_overflowing_numbers_are_not_numeric():
    with pytest.raises(NonNumericValueError) as exc_info:
        collect_profile(**_answers(height_cm="9" * 400))
    assert exc_info.value.field == "height_cm"
    with pytest.raises(NonNumericValueError) as exc_info:
        collect_profile(**_answers(calorie_deficit="9" * 400))
    assert exc_info.value.field == "calorie_deficit"
    with pytest.raises(NonNumericValueError):
        collect_profile(**_answers(weight_kg=10 ** 400))


def test_zero_deficit_is_rejected_but_negative_is_kept():
    with pytest.raises(ZeroCalorieDeficitError):
        collect_profile(**_answers(calorie_deficit="0"))
    assert collect_profile(**_answers(calorie_deficit="-250")).calorie_deficit == -250
