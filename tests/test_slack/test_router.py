"""Integration tests for the /slack/events endpoint."""

import hashlib
import hmac
import json
import time
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from h2h_logger.config import Settings

TEST_SIGNING_SECRET = "test_signing_secret_1234"


def _settings(**overrides) -> Settings:
    values = {
        "slack_workspace_url": "https://acme.slack.com",
        "slack_signing_secret": "",
        "skip_slack_retries": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def _sign_request(body: bytes, secret: str) -> tuple[str, str]:
    """Generate Slack-compatible signature headers."""
    timestamp = str(int(time.time()))
    sig_basestring = f"v0:{timestamp}:{body.decode()}"
    signature = "v0=" + hmac.new(
        secret.encode(), sig_basestring.encode(), hashlib.sha256
    ).hexdigest()
    return timestamp, signature


def _mention_payload(text: str) -> dict:
    return {
        "type": "event_callback",
        "event": {
            "type": "app_mention",
            "user": "U12345",
            "channel": "C0AFQJHAVS6",
            "ts": "1700000000.123456",
            "text": text,
        },
    }


@patch("h2h_logger.slack.router.get_settings")
@patch("h2h_logger.slack.verification.get_settings")
def test_url_verification_challenge(
    mock_verify_settings: MagicMock, mock_router_settings: MagicMock, client: TestClient
):
    """The handshake echoes the challenge and nothing else."""
    mock_verify_settings.return_value = _settings()
    mock_router_settings.return_value = _settings()
    response = client.post(
        "/slack/events", json={"type": "url_verification", "challenge": "abc123"}
    )
    assert response.status_code == 200
    assert response.json() == {"challenge": "abc123"}


@patch("h2h_logger.slack.router.get_settings")
@patch("h2h_logger.slack.verification.get_settings")
def test_app_mention_writes_row(
    mock_verify_settings: MagicMock,
    mock_router_settings: MagicMock,
    client: TestClient,
    sheet: MagicMock,
):
    mock_verify_settings.return_value = _settings()
    mock_router_settings.return_value = _settings()
    payload = _mention_payload("H2H BRI to BCA Total 9000 (5 ffb) notes Insufficient balance")

    response = client.post("/slack/events", json=payload)

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert response.headers["content-type"] == "application/json"
    row = sheet.append_row.call_args.args[0]
    assert row == [
        "2023-11-14T22:13:20.123Z",
        "11/15/2023",
        "5:13:20 AM",
        "BRI",
        "BCA",
        "9000",
        "5",
        "Insufficient balance",
        "https://acme.slack.com/archives/C0AFQJHAVS6/p1700000000123456",
    ]


@patch("h2h_logger.slack.router.get_settings")
@patch("h2h_logger.slack.verification.get_settings")
def test_unrecognized_message_logs_placeholders(
    mock_verify_settings: MagicMock,
    mock_router_settings: MagicMock,
    client: TestClient,
    sheet: MagicMock,
):
    mock_verify_settings.return_value = _settings()
    mock_router_settings.return_value = _settings()

    response = client.post("/slack/events", json=_mention_payload("good morning"))

    assert response.json() == {"success": True}
    row = sheet.append_row.call_args.args[0]
    assert row[3:8] == ["N/A"] * 5
    assert row[8].endswith("/archives/C0AFQJHAVS6/p1700000000123456")


@patch("h2h_logger.slack.router.get_settings")
@patch("h2h_logger.slack.verification.get_settings")
def test_malformed_json_returns_success(
    mock_verify_settings: MagicMock,
    mock_router_settings: MagicMock,
    client: TestClient,
    sheet: MagicMock,
):
    mock_verify_settings.return_value = _settings()
    mock_router_settings.return_value = _settings()
    response = client.post(
        "/slack/events",
        content=b"{this is not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200
    assert response.json() == {"success": True}
    sheet.append_row.assert_not_called()


@patch("h2h_logger.slack.router.get_settings")
@patch("h2h_logger.slack.verification.get_settings")
def test_sheet_failure_returns_success(
    mock_verify_settings: MagicMock,
    mock_router_settings: MagicMock,
    client: TestClient,
    sheet: MagicMock,
):
    mock_verify_settings.return_value = _settings()
    mock_router_settings.return_value = _settings()
    sheet.append_row.side_effect = RuntimeError("APIError: 429")

    response = client.post("/slack/events", json=_mention_payload("H2H BRI Total 1"))

    assert response.status_code == 200
    assert response.json() == {"success": True}


@patch("h2h_logger.slack.router.get_settings")
@patch("h2h_logger.slack.verification.get_settings")
def test_valid_signature_accepted(
    mock_verify_settings: MagicMock, mock_router_settings: MagicMock, client: TestClient
):
    mock_verify_settings.return_value = _settings(slack_signing_secret=TEST_SIGNING_SECRET)
    mock_router_settings.return_value = _settings(slack_signing_secret=TEST_SIGNING_SECRET)
    body = json.dumps({"type": "url_verification", "challenge": "signed"}).encode()
    timestamp, signature = _sign_request(body, TEST_SIGNING_SECRET)

    response = client.post(
        "/slack/events",
        content=body,
        headers={
            "X-Slack-Request-Timestamp": timestamp,
            "X-Slack-Signature": signature,
            "Content-Type": "application/json",
        },
    )
    assert response.status_code == 200
    assert response.json() == {"challenge": "signed"}


@patch("h2h_logger.slack.verification.get_settings")
def test_invalid_signature_returns_403(mock_verify_settings: MagicMock, client: TestClient):
    """With a signing secret configured, unsigned requests never reach the handler."""
    mock_verify_settings.return_value = _settings(slack_signing_secret=TEST_SIGNING_SECRET)
    response = client.post(
        "/slack/events",
        json={"type": "url_verification", "challenge": "abc"},
        headers={
            "X-Slack-Request-Timestamp": str(int(time.time())),
            "X-Slack-Signature": "v0=invalid_signature",
        },
    )
    assert response.status_code == 403


@patch("h2h_logger.slack.router.get_settings")
@patch("h2h_logger.slack.verification.get_settings")
def test_retry_skipped_when_enabled(
    mock_verify_settings: MagicMock,
    mock_router_settings: MagicMock,
    client: TestClient,
    sheet: MagicMock,
):
    mock_verify_settings.return_value = _settings()
    mock_router_settings.return_value = _settings(skip_slack_retries=True)

    response = client.post(
        "/slack/events",
        json=_mention_payload("H2H BRI Total 1"),
        headers={"X-Slack-Retry-Num": "1"},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True}
    sheet.append_row.assert_not_called()


@patch("h2h_logger.slack.router.get_settings")
@patch("h2h_logger.slack.verification.get_settings")
def test_retry_processed_by_default(
    mock_verify_settings: MagicMock,
    mock_router_settings: MagicMock,
    client: TestClient,
    sheet: MagicMock,
):
    mock_verify_settings.return_value = _settings()
    mock_router_settings.return_value = _settings()

    client.post(
        "/slack/events",
        json=_mention_payload("H2H BRI Total 1"),
        headers={"X-Slack-Retry-Num": "1"},
    )

    sheet.append_row.assert_called_once()
