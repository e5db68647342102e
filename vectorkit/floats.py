"""IEEE-754 float helpers.

Python's float division raises ZeroDivisionError, math.acos raises on
arguments outside [-1, 1], and ints too large for a float raise OverflowError
when converted. Vector math here follows IEEE semantics instead: division by
zero yields inf/nan, out-of-range values become inf and NaN propagates.
Division and acos are done in numpy float64 with floating-point warnings
silenced.
"""

from __future__ import annotations

import math

import numpy as np


def fit(value: float) -> float:
    """Return value unchanged, or a signed infinity for an int beyond float range."""
    try:
        float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    return value


def to_float(value: float) -> float:
    """Convert to float, mapping out-of-range ints to a signed infinity."""
    return float(fit(value))


def mul(a: float, b: float) -> float:
    """Product that never raises; ints stay exact while they fit a float."""
    return fit(fit(a) * fit(b))


def norm(*components: float) -> float:
    """Euclidean norm of the components, inf on overflow."""
    return math.sqrt(sum_squares(*components))


def sum_squares(*components: float) -> float:
    """Sum of squares as a float, inf on overflow."""
    total = 0.0
    for component in components:
        value = to_float(component)
        total += value * value
    return total


def ieee_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics (x/0 -> +-inf, 0/0 -> nan)."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(to_float(numerator)) / np.float64(to_float(denominator)))


def safe_acos(cosine: float) -> float:
    """Arc cosine in radians, clamping rounding noise into [-1, 1].

    NaN is passed through unchanged.
    """
    with np.errstate(invalid="ignore"):
        return float(np.arccos(np.clip(np.float64(to_float(cosine)), -1.0, 1.0)))
