"""
Shared fixtures for projection engine testing.
"""

import sys
import os
import pytest

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src', 'backend'))

from models import ProjectionInput


@pytest.fixture
def scenario_inputs():
    """Reference scenario: high saver starting from zero, retiring at 50."""
    return {
        "income": 65000,
        "savingsRate": 40,
        "expenses": 40000,
        "currentSavings": 0,
        "age": 25,
        "returnRate": 8,
        "retirementAge": 50,
        "inflationRate": 2,
    }


@pytest.fixture
def zero_real_rate_inputs():
    """Return equal to inflation so the real rate is exactly zero."""
    return {
        "income": 50000,
        "savingsRate": 30,
        "expenses": 30000,
        "currentSavings": 20000,
        "age": 30,
        "returnRate": 3,
        "retirementAge": 60,
        "inflationRate": 3,
    }


@pytest.fixture
def stalled_inputs():
    """No income and no savings: nothing is ever reached."""
    return {
        "income": 0,
        "savingsRate": 0,
        "expenses": 40000,
        "currentSavings": 0,
        "age": 40,
        "returnRate": 6,
        "retirementAge": 65,
        "inflationRate": 2,
    }


@pytest.fixture
def make_inputs():
    """Factory fixture: build a ProjectionInput from a wire dict plus overrides."""
    def _make(base, **overrides):
        data = dict(base)
        data.update(overrides)
        return ProjectionInput(**data)

    return _make


@pytest.fixture
def scenario(make_inputs, scenario_inputs):
    return make_inputs(scenario_inputs)


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from main import app, cached_projection

    cached_projection.cache_clear()
    return TestClient(app)
