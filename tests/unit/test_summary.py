"""Unit tests for per-event summary dispatch."""

from __future__ import annotations

import pytest

from ghactivity.models import FeedEvent
from ghactivity.summary import EventKind, summarise_event, summarise_feed
from tests.helpers.github_feed import issues_event, push_event, watch_event


def _summarise(raw: object) -> str | None:
    return summarise_event(FeedEvent.from_raw(raw))


def test_push_event_reports_commit_count() -> None:
    """Push events name the commit count and repository."""
    assert _summarise(push_event("octo/repo", 3)) == "- Pushed 3 commits to octo/repo"


def test_push_event_without_size_reports_zero() -> None:
    """A missing size is reported as zero commits."""
    assert _summarise(push_event("octo/repo")) == "- Pushed 0 commits to octo/repo"


@pytest.mark.parametrize(
    ("action", "expected"),
    [
        ("opened", "- Opened a new issue in octo/repo"),
        ("closed", "- Closed an issue in octo/repo"),
        ("reopened", None),
        (None, None),
    ],
)
def test_issues_event_depends_on_action(action: str | None, expected: str | None) -> None:
    """Only opened and closed issue actions produce a line."""
    assert _summarise(issues_event("octo/repo", action)) == expected


def test_watch_event_reports_star() -> None:
    """Watch events are reported as stars."""
    assert _summarise(watch_event("octo/repo")) == "- Starred octo/repo"


@pytest.mark.parametrize("event_type", ["ForkEvent", "CreateEvent", "pushevent"])
def test_unrecognised_type_is_reported(event_type: str) -> None:
    """Any other type is named in an unhandled-type line."""
    raw = {"type": event_type, "repo": {"name": "octo/repo"}}

    assert _summarise(raw) == f"- Unhandled event type: {event_type}"


def test_missing_type_is_reported_as_unknown() -> None:
    """An event without a type reports the Unknown placeholder."""
    assert _summarise({"repo": {"name": "octo/repo"}}) == (
        "- Unhandled event type: Unknown"
    )


def test_missing_repo_uses_unknown() -> None:
    """A missing repository name is replaced with Unknown."""
    assert _summarise({"type": "WatchEvent"}) == "- Starred Unknown"


def test_event_kind_values_match_api_tags() -> None:
    """Event kinds compare equal to the API's type strings."""
    assert EventKind.PUSH == "PushEvent"
    assert EventKind("WatchEvent") is EventKind.WATCH


def test_summarise_feed_skips_silent_issue_events() -> None:
    """Line count equals event count minus suppressed issue events."""
    raw_events = [
        push_event("octo/a", 1),
        issues_event("octo/b", "opened"),
        issues_event("octo/c", "labeled"),
        issues_event("octo/d", "closed"),
        watch_event("octo/e"),
        issues_event("octo/f", None),
    ]
    events = [FeedEvent.from_raw(raw) for raw in raw_events]

    lines = list(summarise_feed(events))

    assert lines == [
        "- Pushed 1 commits to octo/a",
        "- Opened a new issue in octo/b",
        "- Closed an issue in octo/d",
        "- Starred octo/e",
    ]
    assert len(lines) == len(raw_events) - 2


def test_summarise_feed_continues_past_malformed_events() -> None:
    """A malformed event does not stop later events being summarised."""
    events = [
        FeedEvent.from_raw(None),
        FeedEvent.from_raw({"type": "PushEvent", "payload": []}),
        FeedEvent.from_raw(watch_event("octo/repo")),
    ]

    assert list(summarise_feed(events)) == [
        "- Unhandled event type: Unknown",
        "- Pushed 0 commits to Unknown",
        "- Starred octo/repo",
    ]
