"""Showcase error types."""

import math


class ShowcaseError(Exception):
    """Base error for all showcase failures."""


class InvalidArgumentError(ShowcaseError):
    """An input violated a documented contract (type, sign, or width)."""


def require_uint(name: str, value: object) -> int:
    """Return *value* if it is a non-negative int, else raise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be an int, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")
    return value


def require_number(name: str, value: object) -> float:
    """Return *value* if it is a finite int or float (bool excluded), else raise."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(
            f"{name} must be a number, got {type(value).__name__}"
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be finite, got {value}")
    return value
