"""
Shared pytest configuration and fixtures for panchayat-drills.

This module provides common test fixtures and utilities used across
all test modules.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from election.session import create_election  # noqa: E402


@pytest.fixture
def sample_candidates():
    """Provide sample candidate data for testing."""
    return [
        {"id": "C1", "name": "Sarpanch Ram", "party": "Janata"},
        {"id": "C2", "name": "Pradhan Sita", "party": "Lok"},
        {"id": "C3", "name": "Mukhiya Gita", "party": "Jan Sewa"},
    ]


@pytest.fixture
def sample_voters():
    """Provide sample voter data for testing."""
    return [
        {"id": "V1", "name": "Mohan", "age": 25},
        {"id": "V2", "name": "Sohan", "age": 30},
        {"id": "V3", "name": "Rekha", "age": 45},
        {"id": "V4", "name": "Kavita", "age": 18},
    ]


@pytest.fixture
def election(sample_candidates):
    """Provide a fresh election session over the sample candidates."""
    return create_election(sample_candidates)


@pytest.fixture
def registered_election(election, sample_voters):
    """Provide an election session with all sample voters registered."""
    for voter in sample_voters:
        assert election.register_voter(voter)
    return election


@pytest.fixture
def dhabas():
    """Provide sample dhaba listings for testing."""
    return [
        {"name": "Punjab Dhaba", "rating": 4.5, "price": 200, "city": "Delhi"},
        {"name": "Sharma Ji", "rating": 3.8, "price": 150, "city": "Jaipur"},
        {"name": "Highway King", "rating": 4.0, "price": 300, "city": "Delhi"},
        {"name": "Truck Stop", "rating": 3.2, "price": 100, "city": "Agra"},
    ]


def ok(receipt):
    return ("ok", receipt)


def fail(reason):
    return ("error", reason)


@pytest.fixture
def callbacks():
    """Provide (on_success, on_error) callbacks that tag their argument."""
    return ok, fail


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (scripts and files)",
    )
    config.addinivalue_line(
        "markers", "invariant: marks tests as election invariant validation"
    )
    config.addinivalue_line(
        "markers", "smoke: marks tests as smoke tests (basic functionality check)"
    )
