"""Summarise a GitHub user's recent public activity."""

from __future__ import annotations

from .client import GitHubEventsClient, GitHubEventsConfig, build_events_url
from .errors import (
    GitHubActivityError,
    GitHubAPIError,
    GitHubConfigError,
    GitHubRequestError,
    GitHubResponseDecodeError,
)
from .models import ErrorEnvelope, FeedEvent, classify_body
from .summary import EventKind, summarise_event, summarise_feed

__all__ = [
    "ErrorEnvelope",
    "EventKind",
    "FeedEvent",
    "GitHubAPIError",
    "GitHubActivityError",
    "GitHubConfigError",
    "GitHubEventsClient",
    "GitHubEventsConfig",
    "GitHubRequestError",
    "GitHubResponseDecodeError",
    "build_events_url",
    "classify_body",
    "summarise_event",
    "summarise_feed",
]
