"""GitHub REST client for the public user events feed."""

from __future__ import annotations

import dataclasses
import typing as typ

import httpx
import msgspec

from .errors import (
    GitHubAPIError,
    GitHubConfigError,
    GitHubRequestError,
    GitHubResponseDecodeError,
)
from .logging import get_logger, log_debug, log_exception, log_warning
from .models import classify_body

if typ.TYPE_CHECKING:
    import types

    from .models import FeedBody

logger = get_logger(__name__)

DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_USER_AGENT = "gh-activity/0.1"


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubEventsConfig:
    """Configuration for :class:`GitHubEventsClient`.

    ``timeout_s`` of ``None`` disables the timeout, so a request may block
    until the server answers or the connection fails.
    """

    api_base: str = DEFAULT_API_BASE
    user_agent: str = DEFAULT_USER_AGENT
    timeout_s: float | None = None


def build_events_url(username: str, *, api_base: str = DEFAULT_API_BASE) -> str:
    """Return the public events URL for ``username``.

    The username is interpolated as given; GitHub decides whether it exists.

    Examples
    --------
    >>> build_events_url("octocat")
    'https://api.github.com/users/octocat/events'

    """
    return f"{api_base.rstrip('/')}/users/{username}/events"


def decode_feed_body(content: bytes) -> FeedBody:
    """Decode a response body and classify it.

    Raises
    ------
    GitHubResponseDecodeError
        If ``content`` is not valid JSON.

    """
    try:
        decoded = msgspec.json.decode(content)
    except msgspec.DecodeError as exc:
        log_exception(logger, "GitHub events response is not valid JSON", exc)
        raise GitHubResponseDecodeError.invalid_json(exc) from exc
    return classify_body(decoded)


class GitHubEventsClient:
    """Blocking client that fetches one page of a user's public events."""

    def __init__(
        self,
        config: GitHubEventsConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialise the client, creating an HTTP client when none is given."""
        config = config or GitHubEventsConfig()
        if not config.user_agent.strip():
            raise GitHubConfigError.empty_user_agent()

        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=config.timeout_s,
            follow_redirects=True,
        )
        self._headers = {
            "User-Agent": config.user_agent,
            "Accept": "application/vnd.github+json",
        }

    def close(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> GitHubEventsClient:
        """Return the client for use in a ``with`` block."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close owned resources when leaving a ``with`` block."""
        self.close()

    def fetch_feed(self, username: str) -> FeedBody:
        """Fetch and classify the public events feed for ``username``.

        Returns
        -------
        FeedBody
            The event list, the error envelope GitHub returned in its place,
            or ``None`` when the body is some other JSON value.

        Raises
        ------
        GitHubRequestError
            If no response was received.
        GitHubAPIError
            If the response status is outside the 2xx range.
        GitHubResponseDecodeError
            If the body of a successful response is not valid JSON.

        """
        url = build_events_url(username, api_base=self._config.api_base)
        log_debug(logger, "GET %s", url)
        try:
            response = self._client.get(
                url, headers=self._headers, follow_redirects=True
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            log_warning(logger, "GitHub events request failed: %s", exc)
            raise GitHubRequestError.transport(exc) from exc

        log_debug(logger, "GitHub responded %d for %s", response.status_code, url)
        if not response.is_success:
            log_warning(
                logger,
                "GitHub events request for %s returned %d",
                username,
                response.status_code,
            )
            raise GitHubAPIError.http_error(
                username, response.status_code, response.reason_phrase
            )
        return decode_feed_body(response.content)


__all__ = [
    "DEFAULT_API_BASE",
    "DEFAULT_USER_AGENT",
    "GitHubEventsClient",
    "GitHubEventsConfig",
    "build_events_url",
    "decode_feed_body",
]
