"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from gym_coach.models.equipment import GymEquipment
from gym_coach.models.exercises import COMMON_EXERCISES, Equipment
from gym_coach.models.user_profile import Goal, UserProfile


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def catalog():
    """The built-in exercise catalog."""
    return list(COMMON_EXERCISES)


@pytest.fixture
def catalog_by_id(catalog):
    """The built-in catalog keyed by id."""
    return {ex.id: ex for ex in catalog}


@pytest.fixture
def full_gym():
    """Every piece of equipment, available."""
    return [GymEquipment(user_id=1, name=eq) for eq in Equipment]


@pytest.fixture
def sample_user_profile():
    """Create a sample user profile for testing."""
    return UserProfile(
        name="Test User",
        days_per_week=4,
        minutes_per_session=60,
        goals=[Goal.MUSCLE_GAIN, Goal.REHAB],
        weight_kg=80.0,
        height_cm=180.0,
        age=34,
    )
