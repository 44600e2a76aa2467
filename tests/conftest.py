"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from h2h_logger.app import app
from h2h_logger.slack.router import get_sheet


@pytest.fixture
def sheet() -> MagicMock:
    """A stand-in worksheet recording append_row calls."""
    return MagicMock()


@pytest.fixture
def client(sheet: MagicMock):
    """TestClient with the worksheet dependency overridden (lifespan not run)."""
    app.dependency_overrides[get_sheet] = lambda: sheet
    yield TestClient(app)
    app.dependency_overrides.clear()
