"""Collectors package initialization."""

from . import profile_collector

__all__ = [
    "profile_collector",
]
