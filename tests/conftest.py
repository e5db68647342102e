"""Shared pytest fixtures for vectorkit tests."""

import pytest

from vectorkit import Vector2, Vector3
from vectorkit import config as config_module


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Start every test from a config built from a clean environment."""
    monkeypatch.delenv("VECTORKIT_ABS_TOL", raising=False)
    monkeypatch.delenv("VECTORKIT_REL_TOL", raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()


# =============================================================================
# Vector Fixtures
# =============================================================================


@pytest.fixture
def planar_vectors() -> list[Vector2]:
    """A spread of non-zero 2D vectors."""
    return [
        Vector2(3, 4),
        Vector2(-1.5, 2.25),
        Vector2(0.001, -7),
        Vector2(1e6, 1e-3),
        Vector2(-2, -2),
    ]


@pytest.fixture
def spatial_vectors() -> list[Vector3]:
    """A spread of non-zero 3D vectors."""
    return [
        Vector3(1, 2, 3),
        Vector3(-4.5, 0.25, 9),
        Vector3(0, 0, -1),
        Vector3(1e3, -2e-2, 7),
        Vector3(2, 2, 2),
    ]
