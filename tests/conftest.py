"""
Shared test fixtures — test client with a fresh session store, seeded RNG,
and the three canned performance profiles.
"""

import random

import pytest
from fastapi.testclient import TestClient

from funeral_configurator.main import app
from funeral_configurator.models import PerformanceTier
from funeral_configurator.performance import PERFORMANCE_PROFILES
from funeral_configurator.routers.session import get_store
from funeral_configurator.session import SessionStore


@pytest.fixture
def store():
    """Empty in-memory session store for one test."""
    return SessionStore()


@pytest.fixture
def client(store):
    """FastAPI test client."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def high_profile():
    return PERFORMANCE_PROFILES[PerformanceTier.HIGH]


@pytest.fixture
def medium_profile():
    return PERFORMANCE_PROFILES[PerformanceTier.MEDIUM]


@pytest.fixture
def low_profile():
    return PERFORMANCE_PROFILES[PerformanceTier.LOW]
