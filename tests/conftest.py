"""Pytest configuration and fixtures."""

import pytest

from speck import VARIANTS, load_vectors, seed_everything


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment with fixed seed."""
    seed_everything(42)
    yield


@pytest.fixture(scope="session")
def vectors():
    """Published test vectors shipped with the package."""
    return load_vectors()


@pytest.fixture(params=sorted(VARIANTS))
def variant(request):
    """Each standard variant class in turn."""
    return VARIANTS[request.param]
