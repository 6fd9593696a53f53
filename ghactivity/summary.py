"""Render activity feed events as one-line summaries."""

from __future__ import annotations

import enum
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import FeedEvent


class EventKind(enum.StrEnum):
    """Event types that have a dedicated summary."""

    PUSH = "PushEvent"
    ISSUES = "IssuesEvent"
    WATCH = "WatchEvent"


class IssueAction(enum.StrEnum):
    """Issue actions that produce a summary line."""

    OPENED = "opened"
    CLOSED = "closed"


def _summarise_push(event: FeedEvent) -> str:
    return f"- Pushed {event.payload_int('size')} commits to {event.repo_name}"


def _summarise_issue(event: FeedEvent) -> str | None:
    match event.payload_str("action"):
        case IssueAction.OPENED:
            return f"- Opened a new issue in {event.repo_name}"
        case IssueAction.CLOSED:
            return f"- Closed an issue in {event.repo_name}"
        case _:
            return None


def summarise_event(event: FeedEvent) -> str | None:
    """Return the summary line for ``event``.

    Parameters
    ----------
    event : FeedEvent
        Event to describe.

    Returns
    -------
    str | None
        The line to print, or ``None`` for issue events whose action is
        neither ``opened`` nor ``closed``.

    """
    match event.event_type:
        case EventKind.PUSH:
            return _summarise_push(event)
        case EventKind.ISSUES:
            return _summarise_issue(event)
        case EventKind.WATCH:
            return f"- Starred {event.repo_name}"
        case _:
            return f"- Unhandled event type: {event.event_type}"


def summarise_feed(events: cabc.Iterable[FeedEvent]) -> cabc.Iterator[str]:
    """Yield summary lines for ``events`` in feed order, skipping silent ones."""
    for event in events:
        line = summarise_event(event)
        if line is not None:
            yield line


__all__ = ["EventKind", "IssueAction", "summarise_event", "summarise_feed"]
