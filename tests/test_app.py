"""Tests for application startup wiring."""

from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from h2h_logger.app import app
from h2h_logger.config import Settings


def test_lifespan_opens_worksheet_once():
    """The worksheet handle is acquired at startup and stored on app.state."""
    worksheet = MagicMock()
    settings = Settings(_env_file=None, spreadsheet_id="sheet-key", log_level="WARNING")
    with (
        patch("h2h_logger.app.get_settings", return_value=settings),
        patch("h2h_logger.app.configure_logging") as mock_logging,
        patch("h2h_logger.app.open_worksheet", return_value=worksheet) as mock_open,
    ):
        with TestClient(app):
            assert app.state.sheet is worksheet
            assert not hasattr(app.state, "settings")

    mock_logging.assert_called_once_with("WARNING")
    mock_open.assert_called_once_with(settings)


def test_lifespan_without_spreadsheet_sets_no_sheet():
    settings = Settings(_env_file=None, spreadsheet_id="")
    with (
        patch("h2h_logger.app.get_settings", return_value=settings),
        patch("h2h_logger.app.configure_logging"),
    ):
        with TestClient(app):
            assert app.state.sheet is None
