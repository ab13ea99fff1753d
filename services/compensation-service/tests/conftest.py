"""
Test configuration and fixtures
"""

import os
import sys
from pathlib import Path

# Add parent directory (compensation-service) to sys.path so 'app' can be imported
service_dir = Path(__file__).parent.parent
sys.path.insert(0, str(service_dir))

# Set test environment variables BEFORE importing app modules
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["CLEAR_DB_ON_STARTUP"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOG_JSON"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.dependencies import get_compensation_service  # noqa: E402
from app.main import app  # noqa: E402
from app.repositories.memory_repository import InMemoryCompensationRepository  # noqa: E402
from app.services.compensation_service import CompensationService  # noqa: E402


@pytest.fixture
def memory_repository():
    """Fresh in-memory employee store."""
    return InMemoryCompensationRepository()


@pytest.fixture
def compensation_service(memory_repository):
    """Compensation service backed by the in-memory store."""
    return CompensationService(memory_repository)


@pytest.fixture
def client(compensation_service):
    """Test client with the compensation service dependency overridden."""
    app.dependency_overrides[get_compensation_service] = lambda: compensation_service
    yield TestClient(app)
    app.dependency_overrides.clear()
