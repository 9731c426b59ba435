"""
Hybrid sampling/bisection root finder.

Phase 1 samples [left, right] into 2048 equal steps and looks for the
first adjacent pair whose signs differ. Phase 2 bisects that pair for a
fixed budget of 2048 / 8 = 256 halvings.

Unlike a textbook bisection, the bracket is ordered by function value
rather than by sign: `low` is the endpoint with the smaller f-value and
`high` the one with the larger. A positive midpoint value replaces
`high`, anything else replaces `low`.
"""

from __future__ import annotations

from pynumerics.core.compute.grid import equal_samples, sign
from pynumerics.core.defaults import FZERO_SAMPLES, FZERO_BISECTIONS
from pynumerics.core.exceptions import NoRootInRangeError
from pynumerics.core.protocols import ScalarFunction
from pynumerics.core.validation import check_callable, check_interval


def fzero(f: ScalarFunction, left: float, right: float) -> float:
    """
    Find a root of f in [left, right].

    Parameters
    ----------
    f : callable
        Continuous function with a sign change in [left, right].
    left, right : float
        Search interval, left <= right.

    Returns
    -------
    float
        The last bisection midpoint. If f(mid) is exactly zero the
        search stops early and returns that midpoint.

    Raises
    ------
    NoRootInRangeError
        If no adjacent pair of samples changes sign. Signs are compared
        with +0.0 -> +1 and -0.0 -> -1, so a sample that is exactly zero
        is not reported as a root by itself; it only brackets one when
        its neighbour has the opposite signed sign.
    """
    check_callable(f, "f")
    left, right = check_interval(left, right)

    a, b = _bracket(f, left, right)
    return _bisect(f, a, b)


# --- Helpers ---

def _bracket(f, left: float, right: float) -> tuple[float, float]:
    """First adjacent sample pair with differing signs."""
    samples = equal_samples(left, right, FZERO_SAMPLES)

    previous = float(samples[0])
    previous_sign = sign(f(previous))
    for current in samples[1:]:
        current = float(current)
        current_sign = sign(f(current))
        if current_sign * previous_sign < 0.0:
            return previous, current
        previous, previous_sign = current, current_sign

    raise NoRootInRangeError(
        f"no sign change of f found in [{left}, {right}] "
        f"across {FZERO_SAMPLES} sampling steps",
        left=left,
        right=right,
        n_samples=FZERO_SAMPLES,
    )


def _bisect(f, a: float, b: float) -> float:
    """Fixed-budget bisection of a bracket ordered by f-value."""
    if f(a) < f(b):
        low, high = a, b
    else:
        low, high = b, a

    mid = (high + low) * 0.5
    for _ in range(FZERO_BISECTIONS):
        value = f(mid)
        if value == 0.0:
            break
        elif value > 0.0:
            high = mid
        else:
            low = mid
        mid = (high + low) * 0.5

    return float(mid)
