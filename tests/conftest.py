"""Pytest configuration and shared fixtures for box tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from skapa.domain import BoxParameters, CornerRadii, SolidKernel

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that build full solids with the kernel")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture(scope="session")
def kernel() -> SolidKernel:
    """A set-up kernel handle shared by the whole test session."""
    return SolidKernel().setup()


@pytest.fixture
def default_box() -> BoxParameters:
    """The designer's starting box: 80 x 60 mm, two clip levels."""
    return BoxParameters(height=52.0, width=80.0, depth=60.0, wall=2.0, bottom=3.0)


@pytest.fixture
def default_radii() -> CornerRadii:
    return CornerRadii.uniform(6.0)


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH
