"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different kinds of result the
kernel produces:
- exact arithmetic paths (integer-valued matrices, closed forms): machine precision
- published approximations (Zelen-Severo, Shore, Lanczos): 4 decimal places
- quadrature and root-finding compositions: 4 decimal places

Used by the test suite to compare against reference values.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Closed forms and integer-valued linear algebra
FP64_EXACT = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='fp64_exact',
    description='Double precision, no approximation in the algorithm',
)

# Floating inversion of non-trivial matrices
FP64_ROUNDOFF = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='fp64_roundoff',
    description='Double precision with accumulated rounding error',
)

# Reference values quoted to 4 decimal places
FOUR_DECIMALS = ToleranceTier(
    rtol=0.0,
    atol=1e-4,
    name='four_decimals',
    description='Agreement to the 4th decimal place',
)

# Coarse published approximations checked against exact references
APPROXIMATION = ToleranceTier(
    rtol=0.0,
    atol=1e-2,
    name='approximation',
    description='Published closed-form approximation vs exact reference',
)


def select_tolerance(approximate: bool, rounded: bool = False) -> ToleranceTier:
    """Select a tolerance tier for a comparison."""
    if approximate:
        return APPROXIMATION
    if rounded:
        return FOUR_DECIMALS
    return FP64_EXACT
