# jam_seismic/formulas/errors.py
"""Precondition checks shared by the closed-form formulas."""

import math


class InvalidInputError(ValueError):
    """Raised when a formula receives a physically meaningless input (e.g. zero length)."""
    pass


def require_positive(**values: float) -> None:
    """
    Reject non-positive or non-finite magnitudes.

    Args:
        **values: name=value pairs, the name is used in the error message

    Raises:
        InvalidInputError: If any value is <= 0, nan or inf
    """
    for name, value in values.items():
        if not math.isfinite(value) or value <= 0:
            raise InvalidInputError(f"{name} must be a positive finite number, got {value!r}")
