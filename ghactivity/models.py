"""Typed views over the GitHub public events feed.

The events API returns loosely shaped JSON. These models read it with
default-valued field extraction: a missing or wrongly typed field yields a
fixed placeholder rather than an exception, so one malformed event never
stops the rest of the feed from being reported.
"""

from __future__ import annotations

import dataclasses
import typing as typ

UNKNOWN = "Unknown"
UNKNOWN_ERROR = "Unknown error"

# Integers outside the signed 64-bit range count as malformed.
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _as_mapping(value: object) -> dict[str, typ.Any]:
    return value if isinstance(value, dict) else {}


def _str_or(value: object, default: str) -> str:
    return value if isinstance(value, str) else default


def _int_or(value: object, default: int) -> int:
    # bool is an int subclass but never a valid count.
    if isinstance(value, int) and not isinstance(value, bool):
        return value if _I64_MIN <= value <= _I64_MAX else default
    return default


@dataclasses.dataclass(frozen=True, slots=True)
class FeedEvent:
    """One entry of a user's public activity feed."""

    event_type: str
    repo_name: str
    payload: dict[str, typ.Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: object) -> FeedEvent:
        """Build an event from a decoded JSON value, defaulting bad fields.

        Parameters
        ----------
        raw : object
            A single element of the decoded feed array. Non-object values are
            treated as events with every field missing.

        Returns
        -------
        FeedEvent
            The event with ``Unknown`` substituted for a missing type or
            repository name and an empty payload when none is present.

        """
        record = _as_mapping(raw)
        repo = _as_mapping(record.get("repo"))
        return cls(
            event_type=_str_or(record.get("type"), UNKNOWN),
            repo_name=_str_or(repo.get("name"), UNKNOWN),
            payload=_as_mapping(record.get("payload")),
        )

    def payload_int(self, key: str, default: int = 0) -> int:
        """Return an integer payload field or ``default``."""
        return _int_or(self.payload.get(key), default)

    def payload_str(self, key: str, default: str = "") -> str:
        """Return a string payload field or ``default``."""
        return _str_or(self.payload.get(key), default)


@dataclasses.dataclass(frozen=True, slots=True)
class ErrorEnvelope:
    """Object body GitHub returns instead of an event list."""

    message: str

    @classmethod
    def from_raw(cls, raw: dict[str, typ.Any]) -> ErrorEnvelope:
        """Build an envelope, defaulting a missing message."""
        return cls(message=_str_or(raw.get("message"), UNKNOWN_ERROR))


EventFeed = list[FeedEvent]
FeedBody = EventFeed | ErrorEnvelope | None


def classify_body(decoded: object) -> FeedBody:
    """Classify a decoded response body.

    Arrays become an :data:`EventFeed` in the order GitHub supplied them,
    objects become an :class:`ErrorEnvelope`, and any other JSON value
    (number, string, boolean, null) yields ``None``.
    """
    if isinstance(decoded, list):
        return [FeedEvent.from_raw(item) for item in decoded]
    if isinstance(decoded, dict):
        return ErrorEnvelope.from_raw(decoded)
    return None


__all__ = [
    "UNKNOWN",
    "UNKNOWN_ERROR",
    "ErrorEnvelope",
    "EventFeed",
    "FeedBody",
    "FeedEvent",
    "classify_body",
]
