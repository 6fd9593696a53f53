"""GitHub activity feed errors."""

from __future__ import annotations

UNKNOWN_STATUS_REASON = "<unknown status code>"


class GitHubActivityError(RuntimeError):
    """Base class for failures that stop an activity report."""


class GitHubRequestError(GitHubActivityError):
    """Raised when the request fails before any response is received."""

    @classmethod
    def transport(cls, exc: BaseException) -> GitHubRequestError:
        """Return an error wrapping a transport-level failure."""
        return cls(f"Request failed: {exc}")


class GitHubAPIError(GitHubActivityError):
    """Raised when GitHub answers with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        *,
        username: str,
        status_code: int,
        reason: str = "",
    ) -> None:
        """Initialise with the requested username and HTTP status details."""
        self.username = username
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)

    @classmethod
    def http_error(
        cls, username: str, status_code: int, reason: str = ""
    ) -> GitHubAPIError:
        """Return an error for non-2xx HTTP responses."""
        status = f"{status_code} {reason or UNKNOWN_STATUS_REASON}"
        return cls(
            f"Error: Could not fetch activity for user '{username}'. "
            f"Response code: {status}",
            username=username,
            status_code=status_code,
            reason=reason,
        )


class GitHubResponseDecodeError(GitHubActivityError):
    """Raised when a successful response body is not valid JSON."""

    @classmethod
    def invalid_json(cls, exc: BaseException) -> GitHubResponseDecodeError:
        """Return an error wrapping the JSON decoder failure."""
        return cls(f"Failed to parse JSON response: {exc}")


class GitHubConfigError(RuntimeError):
    """Raised when GitHub client configuration is invalid."""

    @classmethod
    def empty_user_agent(cls) -> GitHubConfigError:
        """Return an error when the User-Agent header would be empty."""
        return cls("GitHub requires a non-empty User-Agent header")
