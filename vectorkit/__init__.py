"""Immutable 2D and 3D vector value types."""

from vectorkit.config import VectorConfig, get_config, reset_config, set_tolerances
from vectorkit.vector2 import Vector2
from vectorkit.vector3 import Vector3

__all__ = [
    "Vector2",
    "Vector3",
    "VectorConfig",
    "get_config",
    "reset_config",
    "set_tolerances",
]

__version__ = "0.1.0"
