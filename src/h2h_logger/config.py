"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Slack
    slack_workspace_url: str = "https://your-slack-workspace.slack.com"
    slack_signing_secret: str = ""  # Empty disables signature verification
    skip_slack_retries: bool = False

    # Google Sheets
    google_service_account_file: str = ""
    google_service_account_json: str = ""  # Inline JSON wins over the file
    spreadsheet_id: str = ""
    worksheet_name: str = ""  # Empty means the first sheet

    # Rows
    local_timezone: str = "Asia/Jakarta"

    # App
    environment: str = "development"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
