"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from h2h_logger.config import get_settings
from h2h_logger.logging_config import configure_logging
from h2h_logger.sheets import open_worksheet
from h2h_logger.slack.router import router as slack_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and open the worksheet handle."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.sheet = open_worksheet(settings)
    yield


app = FastAPI(
    title="H2H Logger",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "h2h-logger",
        "version": "0.1.0",
    }
