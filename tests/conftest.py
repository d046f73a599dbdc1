"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def override_dependency():
    """
    Register FastAPI dependency overrides for a single test.

    Usage:
        def test_x(override_dependency):
            override_dependency(get_planner, lambda: PlannerService(...))
    """
    from main import app

    def _override(dependency, replacement):
        app.dependency_overrides[dependency] = replacement

    yield _override
    app.dependency_overrides.clear()
