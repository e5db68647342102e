"""3D vector value type.

Vector3 extends Vector2 with a z component. Every operation whose result
depends on the component count is redefined here, so a Vector3 never falls
back to planar math. The one deliberate exception is ``magnitude()``, which
stays the planar (x, y) magnitude; the 3D magnitude is the ``length`` property.

Unlike Vector2, ``normalize()`` has no zero guard: a zero vector normalizes to
nan components.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from .floats import fit, ieee_div, mul, norm, safe_acos, sum_squares, to_float
from .vector2 import Vector2

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Vector3(Vector2):
    """Immutable 3D vector."""
    z: float = 0.0

    # =========================================================================
    # Magnitude
    # =========================================================================

    @property
    def length(self) -> float:
        """Euclidean length over all three components."""
        return norm(self.x, self.y, self.z)

    @property
    def length_squared(self) -> float:
        """Squared length over all three components."""
        return sum_squares(self.x, self.y, self.z)

    def magnitude(self) -> float:
        """Planar magnitude of the (x, y) projection.

        Kept two-dimensional for compatibility with Vector2 callers.
        Use ``length`` for the 3D magnitude.
        """
        return norm(self.x, self.y)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def add(self, other: Vector3) -> Vector3:
        """Component-wise sum over all three components."""
        return Vector3(
            fit(self.x) + fit(other.x),
            fit(self.y) + fit(other.y),
            fit(self.z) + fit(other.z),
        )

    def subtract(self, other: Vector3) -> Vector3:
        """Component-wise difference over all three components."""
        return Vector3(
            fit(self.x) - fit(other.x),
            fit(self.y) - fit(other.y),
            fit(self.z) - fit(other.z),
        )

    def multiply(self, scalar: float) -> Vector3:
        """Scale all three components by a scalar."""
        return Vector3(mul(self.x, scalar), mul(self.y, scalar), mul(self.z, scalar))

    def divide(self, scalar: float) -> Vector3:
        """Divide all three components by a scalar. Zero gives inf/nan components."""
        return Vector3(
            ieee_div(self.x, scalar),
            ieee_div(self.y, scalar),
            ieee_div(self.z, scalar),
        )

    def normalize(self) -> Vector3:
        """Unit vector in the same direction. A zero vector gives nan components."""
        length = self.length
        if length == 0:
            logger.debug("normalize() on zero-length %r, components will be nan", self)
        return Vector3(
            ieee_div(self.x, length),
            ieee_div(self.y, length),
            ieee_div(self.z, length),
        )

    # =========================================================================
    # Products, Distance, Angle
    # =========================================================================

    def dot(self, other: Vector3) -> float:
        """Dot product over all three components."""
        return mul(self.x, other.x) + mul(self.y, other.y) + mul(self.z, other.z)

    def cross(self, other: Vector3) -> Vector3:
        """Cross product, orthogonal to both operands."""
        return Vector3(
            mul(self.y, other.z) - mul(self.z, other.y),
            mul(self.z, other.x) - mul(self.x, other.z),
            mul(self.x, other.y) - mul(self.y, other.x),
        )

    def distance_to(self, other: Vector3) -> float:
        """Euclidean distance to another vector."""
        return math.sqrt(self.distance_squared_to(other))

    def distance_squared_to(self, other: Vector3) -> float:
        """Squared distance to another vector (avoids sqrt)."""
        dx = to_float(self.x) - to_float(other.x)
        dy = to_float(self.y) - to_float(other.y)
        dz = to_float(self.z) - to_float(other.z)
        return sum_squares(dx, dy, dz)

    def distance(self, other: Vector3) -> float:
        """Same as ``distance_to``; also callable as ``Vector3.distance(a, b)``."""
        return self.distance_to(other)

    def angle(self, other: Vector3) -> float:
        """Angle between the vectors in radians (0 to pi), nan for a zero operand."""
        return safe_acos(ieee_div(self.dot(other), self.length * other.length))

    # =========================================================================
    # Conversion
    # =========================================================================

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    # =========================================================================
    # Operators
    # =========================================================================

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"


logger.debug("Vector3 initialized.")
