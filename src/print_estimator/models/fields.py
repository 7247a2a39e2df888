"""Field validators shared by the printer and part records."""

import math
from numbers import Integral, Real

from print_estimator.errors import InvalidInputError


def check_finite(name: str, value: object) -> float:
    """Reject values that are not finite real numbers.

    Booleans are refused even though ``bool`` subclasses ``int``.

    Args:
        name: Field name used in the error message
        value: Candidate value

    Returns:
        The value as a float

    Raises:
        InvalidInputError: If value is not a real number, or is NaN or infinite
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value}")
    return float(value)


def check_positive(name: str, value: object) -> None:
    if check_finite(name, value) <= 0:
        raise InvalidInputError(f"{name} must be positive, got {value}")


def check_non_negative(name: str, value: object) -> None:
    if check_finite(name, value) < 0:
        raise InvalidInputError(f"{name} must be non-negative, got {value}")


def check_ratio(name: str, value: object) -> None:
    if not 0 <= check_finite(name, value) <= 1:
        raise InvalidInputError(f"{name} must be between 0 and 1, got {value}")


def check_count(name: str, value: object) -> None:
    """Reject anything that is not a non-negative whole number."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidInputError(f"{name} must be non-negative, got {value}")
