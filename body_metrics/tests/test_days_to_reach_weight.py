import math

import pytest

from body_metrics.core.errors import InvalidArgumentError, ZeroCalorieDeficitError
from body_metrics.core.logic import days_to_reach_weight


def test_days_to_ideal_weight():
    days = days_to_reach_weight(90, 75.116, 500)
    assert days == pytest.approx(229.2136)


def test_weight_gain_direction_is_negative():
    assert days_to_reach_weight(60, 65, 500) == pytest.approx(-77.0)


def test_zero_deficit_raises_invalid_argument():
    with pytest.raises(InvalidArgumentError):
        days_to_reach_weight(90, 80, 0)
    with pytest.raises(ZeroCalorieDeficitError):
        days_to_reach_weight(90, 80, 0.0)


def test_negative_deficit_is_allowed():
    days = days_to_reach_weight(90, 80, -500)
    assert math.isfinite(days)
    assert days == pytest.approx(-154.0)
