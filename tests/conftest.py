"""
Shared fixtures for the dispatch proxy tests.

Run:  pytest tests/ -v
"""

import os
from unittest.mock import MagicMock, patch

import pytest

# Keep the SQLite log handler out of the test run; main.py configures logging on import.
os.environ["LOG_DB_PATH"] = ""

from fastapi.testclient import TestClient  # noqa: E402

from config import Settings  # noqa: E402
from dependencies import get_settings  # noqa: E402
from main import app  # noqa: E402

API_KEY = "test-secret"


@pytest.fixture
def settings():
    return Settings(
        gh_token="ghp_test",
        gh_owner="DrRaSHed",
        gh_repo="farabi-mock",
        workflow_file="apply_change.yml",
        branch="release",
        api_key=API_KEY,
        log_db_path="",
    )


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def valid_payload():
    return {
        "file_no": "F-1029",
        "patient_name_ar": "محمد أحمد",
        "service_name": "Consultation",
        "service_price": 150,
        "policy_expiry": "2027-01-31",
    }


@pytest.fixture
def github_post():
    """Patch the outbound GitHub call; defaults to a 204 No Content reply."""
    with patch("github_dispatch.requests.post") as mock_post:
        mock_post.return_value = MagicMock(status_code=204, text="")
        yield mock_post
