# Test configuration
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))

from calc_service.config import Settings  # noqa: E402
from calc_service.main import create_app  # noqa: E402


@pytest.fixture
def app(tmp_path):
    # Point at an empty directory name so no frontend is mounted
    settings = Settings(STATIC_DIR=str(tmp_path / "missing"))
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)
