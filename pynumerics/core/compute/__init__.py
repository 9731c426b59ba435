"""
Shared compute infrastructure for PyNumerics.

IMPORTANT: This is NOT where component kernels live. Those go in
their own subpackages (calculus, optimize, linalg, distributions). This
module contains shared NUMERIC infrastructure.

Submodules:
    grid: Evaluation grids and signed-zero sign function
    tolerances: Tolerance tiers for numerical comparison
"""

from pynumerics.core.compute.grid import grid_points, equal_samples, sign
from pynumerics.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Grids
    "grid_points",
    "equal_samples",
    "sign",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
