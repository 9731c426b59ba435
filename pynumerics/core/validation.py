"""
Input validation utilities for PyNumerics.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np

from pynumerics.core.exceptions import ValidationError


def check_int(value: object, name: str) -> int:
    """
    Verify value is an integer (bool excluded).

    Accepts Python ints and NumPy integer scalars.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not an integer
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    return int(value)


def check_positive_int(value: object, name: str) -> int:
    """
    Verify value is an integer >= 1.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not an integer or is < 1
    """
    result = check_int(value, name)
    if result < 1:
        raise ValidationError(f"{name}: must be >= 1, got {result}")
    return result


def check_callable(f: object, name: str) -> None:
    """
    Verify f can be invoked.

    Args:
        f: Object to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If f is not callable
    """
    if not callable(f):
        raise ValidationError(
            f"{name}: expected a callable, got {type(f).__name__}"
        )


def check_finite_scalar(value: float, name: str) -> float:
    """
    Verify value is a finite real number.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not real, or is NaN/Inf
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    result = float(value)
    if not np.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result


def check_step(step: float, name: str = "step") -> float:
    """
    Verify a grid step is finite and strictly positive.

    A zero or negative step would never reach the right end of the grid.

    Args:
        step: Grid increment
        name: Parameter name for error messages

    Raises:
        ValidationError: If step <= 0
    """
    result = check_finite_scalar(step, name)
    if result <= 0.0:
        raise ValidationError(f"{name}: must be > 0, got {result}")
    return result


def check_interval(left: float, right: float) -> tuple[float, float]:
    """
    Verify [left, right] is a finite, non-reversed interval.

    Args:
        left: Lower bound
        right: Upper bound

    Returns:
        (left, right) as Python floats

    Raises:
        ValidationError: If either bound is non-finite or left > right
    """
    lo = check_finite_scalar(left, "left")
    hi = check_finite_scalar(right, "right")
    if lo > hi:
        raise ValidationError(
            f"interval is reversed: left={lo} > right={hi}"
        )
    return lo, hi
