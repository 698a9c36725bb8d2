"""Exceptions raised at the calculator boundary."""

from __future__ import annotations

from typing import Any

__all__ = [
    "MetricsError",
    "ProfileValidationError",
    "InvalidSexError",
    "UnknownActivityLabelError",
    "NonPositiveHeightError",
    "NonPositiveValueError",
    "NonNumericValueError",
    "InvalidArgumentError",
    "ZeroCalorieDeficitError",
]


class MetricsError(ValueError):
    """Base exception for every rejected calculation."""

    pass


class ProfileValidationError(MetricsError):
    """Raised when an input profile field cannot be accepted."""

    def __init__(self, field: str, value: Any, message: str | None = None):
        super().__init__(message or f"Invalid value for {field}: {value!r}")
        self.field = field
        self.value = value


class InvalidSexError(ProfileValidationError):
    """Raised when the sex token is neither male nor female."""

    def __init__(self, value: Any):
        super().__init__("sex", value, f"Unsupported sex: {value!r}")


class UnknownActivityLabelError(ProfileValidationError):
    """Raised when the activity label is not in the factor table."""

    def __init__(self, value: Any):
        super().__init__("activity_level", value, f"Unknown activity level: {value!r}")


class NonPositiveHeightError(ProfileValidationError):
    def __init__(self, value: Any):
        super().__init__("height_cm", value, f"Height must be positive, got {value!r}")


class NonPositiveValueError(ProfileValidationError):
    def __init__(self, field: str, value: Any):
        super().__init__(field, value, f"{field} must be positive, got {value!r}")


class NonNumericValueError(ProfileValidationError):
    def __init__(self, field: str, value: Any):
        super().__init__(field, value, f"{field} is not a number: {value!r}")


class InvalidArgumentError(MetricsError):
    """Raised when a formula is called with an argument it cannot handle."""

    pass


class ZeroCalorieDeficitError(InvalidArgumentError):
    """Raised when a day projection is requested with a zero deficit."""

    def __init__(self) -> None:
        super().__init__("Calorie deficit per day must not be zero")
