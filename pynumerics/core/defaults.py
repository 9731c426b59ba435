"""
Numeric defaults for PyNumerics.

This module is the SINGLE SOURCE OF TRUTH for the fixed numeric
parameters used inside the kernels. Import from here, never repeat the
literal.

There are no hidden settings: every constant here is either exposed as an
explicit keyword argument of the function that uses it, or is part of the
documented algorithm of that function.

Usage:
    from pynumerics.core.defaults import FORWARD_DIFFERENCE_STEP
"""

# Forward-difference step for differentiate()
FORWARD_DIFFERENCE_STEP = 1e-10

# stationary_points() accepts x when f'(x) rounds to 0 at this many decimals
STATIONARY_POINT_DECIMALS = 4

# fzero() samples [left, right] into this many equal steps
FZERO_SAMPLES = 2048

# fzero() bisection budget
FZERO_BISECTIONS = FZERO_SAMPLES // 8

# Simpson subdivisions for incomplete beta / gamma integrals
INCOMPLETE_INTEGRAL_SUBDIVISIONS = 256

# tinv() brackets: the narrow one is used when the target probability is
# strictly inside (T_QUANTILE_TAIL, 1 - T_QUANTILE_TAIL)
T_QUANTILE_NARROW_BRACKET = (-10.0, 10.0)
T_QUANTILE_WIDE_BRACKET = (-128.0, 127.0)  # 8-bit signed range
T_QUANTILE_TAIL = 1e-9

# gammainv() doubles its upper bracket at most this many times
GAMMA_QUANTILE_MAX_DOUBLINGS = 64

# Cofactor expansion is O(n!); warn when it starts above this size
COFACTOR_WARNING_SIZE = 9

__all__ = [
    'FORWARD_DIFFERENCE_STEP',
    'STATIONARY_POINT_DECIMALS',
    'FZERO_SAMPLES',
    'FZERO_BISECTIONS',
    'INCOMPLETE_INTEGRAL_SUBDIVISIONS',
    'T_QUANTILE_NARROW_BRACKET',
    'T_QUANTILE_WIDE_BRACKET',
    'T_QUANTILE_TAIL',
    'GAMMA_QUANTILE_MAX_DOUBLINGS',
    'COFACTOR_WARNING_SIZE',
]
