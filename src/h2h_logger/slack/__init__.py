"""Slack ingress: webhook handling, signature verification, and permalinks."""

from h2h_logger.slack.handlers import handle_slack_event
from h2h_logger.slack.permalink import build_permalink
from h2h_logger.slack.router import router

__all__ = [
    "build_permalink",
    "handle_slack_event",
    "router",
]
