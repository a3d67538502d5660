"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def sample_entry():
    """Sample detailed report item for testing."""
    return {
        "start": "2024-01-01T09:00:00",
        "end": "2024-01-01T09:30:00",
        "description": "A",
        "project_id": 1,
    }


@pytest.fixture
def sample_entries(sample_entry):
    """Two entries on consecutive days, the second with an unknown project."""
    return [
        sample_entry,
        {
            **sample_entry,
            "start": "2024-01-02T14:00:00",
            "end": "2024-01-02T15:00:00",
            "description": "B",
            "project_id": 2,
        },
    ]


@pytest.fixture
def sample_projects():
    """Project directory for testing."""
    return [{"id": 1, "color": "#ff0000"}]
