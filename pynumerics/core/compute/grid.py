"""
Evaluation grids shared by the scanning kernels.

Grid points are always computed as left + k * step rather than by
repeated addition, so the k-th point carries no accumulated drift.
"""

from typing import Iterator, Any

import numpy as np
from numpy.typing import NDArray


def grid_points(left: float, right: float, step: float) -> Iterator[float]:
    """
    Yield left + k*step for k = 0, 1, ... while the point is <= right.

    Args:
        left: First grid point
        right: Inclusive upper bound
        step: Increment, must be > 0 (caller validates)

    Yields:
        Grid points in ascending order
    """
    k = 0
    x = left
    while x <= right:
        yield x
        k += 1
        x = left + k * step


def equal_samples(left: float, right: float, n_steps: int) -> NDArray[np.floating[Any]]:
    """
    Split [left, right] into n_steps equal steps.

    Returns:
        Array of n_steps + 1 points, left + k*(right-left)/n_steps
    """
    step = (right - left) / n_steps
    return left + step * np.arange(n_steps + 1, dtype=np.float64)


def sign(value: float) -> float:
    """
    Sign of value with zero treated as signed.

    +0.0 maps to +1.0 and -0.0 to -1.0, so an exact zero never differs
    from both of its neighbours. NaN maps to NaN.
    """
    if np.isnan(value):
        return float('nan')
    return float(np.copysign(1.0, value))
