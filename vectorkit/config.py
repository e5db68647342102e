"""
Vector comparison configuration.

Holds the default tolerances used by ``is_close``.
All settings can be overridden via environment variables.
"""

import logging
import math
import os
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_ABS_TOL = 1e-9
DEFAULT_REL_TOL = 1e-9


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class VectorConfig:
    """Tolerances for approximate vector comparison.

    Frozen; runtime overrides replace the whole instance.
    """

    abs_tol: float = field(default_factory=lambda: _env_float("VECTORKIT_ABS_TOL", DEFAULT_ABS_TOL))
    rel_tol: float = field(default_factory=lambda: _env_float("VECTORKIT_REL_TOL", DEFAULT_REL_TOL))

    @classmethod
    def from_env(cls) -> "VectorConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if math.isnan(self.abs_tol) or self.abs_tol < 0:
            errors.append(f"abs_tol must be a non-negative number, got {self.abs_tol}")
        if math.isnan(self.rel_tol) or self.rel_tol < 0:
            errors.append(f"rel_tol must be a non-negative number, got {self.rel_tol}")
        return errors


# Singleton config instance
_config: Optional[VectorConfig] = None


def get_config() -> VectorConfig:
    """Get the global vector configuration."""
    global _config
    if _config is None:
        _config = VectorConfig.from_env()
    return _config


def set_tolerances(abs_tol: Optional[float] = None, rel_tol: Optional[float] = None) -> VectorConfig:
    """
    Programmatically override the default comparison tolerances.

    Installs a new config instance rather than editing the current one.
    Raises ValueError if the resulting configuration is invalid; the
    current configuration is left in place in that case.
    """
    global _config
    current = get_config()
    candidate = VectorConfig(
        abs_tol=current.abs_tol if abs_tol is None else abs_tol,
        rel_tol=current.rel_tol if rel_tol is None else rel_tol,
    )
    errors = candidate.validate()
    if errors:
        raise ValueError("; ".join(errors))
    _config = candidate
    return candidate


def reset_config() -> None:
    """Drop the cached configuration so the next read re-parses the environment."""
    global _config
    _config = None
