"""2D vector value type.

Vector2 is the base of the vector hierarchy: Vector3 extends it and redefines
every operation with the third component.

Numeric edge cases follow IEEE-754 rather than raising: dividing by zero gives
inf/nan components and the angle against a zero vector is nan. The only
guarded case is normalizing the zero vector, which returns the zero vector.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .config import get_config
from .floats import fit, ieee_div, mul, norm, safe_acos, sum_squares, to_float

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D vector.

    Components default to 0 and are stored exactly as given; NaN and
    infinity are accepted and propagate through every operation.

    Examples:
        >>> Vector2(3, 4).magnitude()
        5.0
        >>> Vector2(1, 2).add(Vector2(3, 4))
        Vector2(4, 6)
    """
    x: float = 0.0
    y: float = 0.0

    # =========================================================================
    # Magnitude
    # =========================================================================

    def magnitude(self) -> float:
        """Euclidean length of the vector. Zero for the zero vector."""
        return norm(self.x, self.y)

    @property
    def length(self) -> float:
        """Euclidean length, as a property.

        Subclasses override this with their full component count; distance
        and angle are computed from it.
        """
        return self.magnitude()

    @property
    def length_squared(self) -> float:
        """Squared length (avoids sqrt)."""
        return sum_squares(self.x, self.y)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def add(self, other: Vector2) -> Vector2:
        """Component-wise sum."""
        return Vector2(fit(self.x) + fit(other.x), fit(self.y) + fit(other.y))

    def subtract(self, other: Vector2) -> Vector2:
        """Component-wise difference."""
        return Vector2(fit(self.x) - fit(other.x), fit(self.y) - fit(other.y))

    def multiply(self, scalar: float) -> Vector2:
        """Scale by a scalar."""
        return Vector2(mul(self.x, scalar), mul(self.y, scalar))

    def divide(self, scalar: float) -> Vector2:
        """Divide by a scalar. Dividing by zero gives inf/nan components."""
        return Vector2(ieee_div(self.x, scalar), ieee_div(self.y, scalar))

    def normalize(self) -> Vector2:
        """Unit vector in the same direction.

        Returns the zero vector if the magnitude is exactly zero.
        """
        mag = self.magnitude()
        if mag == 0:
            logger.debug("normalize() on zero-length %r, returning zero vector", self)
            return Vector2()
        return self.divide(mag)

    # =========================================================================
    # Products, Distance, Angle
    # =========================================================================

    def dot(self, other: Vector2) -> float:
        """Dot product."""
        return mul(self.x, other.x) + mul(self.y, other.y)

    def distance(self, other: Vector2) -> float:
        """Euclidean distance to another vector.

        Also usable in two-argument form: ``Vector2.distance(a, b)``.
        """
        return self.subtract(other).length

    def angle(self, other: Vector2) -> float:
        """Angle between this vector and another, in radians (0 to pi).

        Also usable in two-argument form: ``Vector2.angle(a, b)``.
        The result is nan if either vector has zero length.
        """
        return safe_acos(ieee_div(self.dot(other), self.length * other.length))

    # =========================================================================
    # Comparison and Conversion
    # =========================================================================

    def is_close(
        self,
        other: Vector2,
        abs_tol: Optional[float] = None,
        rel_tol: Optional[float] = None,
    ) -> bool:
        """Component-wise approximate equality.

        Tolerances default to the configured ones (see ``vectorkit.config``).
        Vectors of different dimensions are never close.
        """
        if type(self) is not type(other):
            return False
        config = get_config()
        abs_tol = config.abs_tol if abs_tol is None else abs_tol
        rel_tol = config.rel_tol if rel_tol is None else rel_tol
        return all(
            math.isclose(to_float(a), to_float(b), abs_tol=abs_tol, rel_tol=rel_tol)
            for a, b in zip(self.to_tuple(), other.to_tuple(), strict=True)
        )

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    @classmethod
    def zero(cls) -> Vector2:
        """Zero vector."""
        return cls()

    # =========================================================================
    # Operators
    # =========================================================================

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.multiply(scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.multiply(scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.divide(scalar)

    def __neg__(self) -> Vector2:
        return self.multiply(-1)

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"
