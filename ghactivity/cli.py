"""Command-line entry point that prints a user's recent GitHub activity."""

from __future__ import annotations

import argparse
import sys
import typing as typ

from .client import GitHubEventsClient
from .errors import GitHubAPIError, GitHubActivityError
from .logging import get_logger, log_info
from .models import ErrorEnvelope
from .summary import summarise_feed

if typ.TYPE_CHECKING:
    import httpx

    from .models import FeedBody

logger = get_logger(__name__)

USAGE = "Usage: github-activity <username>"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-activity",
        description=__doc__,
    )
    # Any count parses, unknown options included; main() enforces exactly one.
    parser.add_argument("username", nargs="*", help="GitHub username to report on")
    return parser


def print_feed_body(body: FeedBody) -> int:
    """Print ``body`` to stdout and return the number of lines written.

    An event list prints one line per summarised event, an error envelope
    prints its message, and any other body prints nothing.
    """
    if isinstance(body, ErrorEnvelope):
        print(f"Error: {body.message}")
        return 1
    if body is None:
        return 0
    count = 0
    for line in summarise_feed(body):
        print(line)
        count += 1
    return count


def report_activity(username: str, client: GitHubEventsClient) -> None:
    """Fetch the feed for ``username`` and print its summary.

    Non-success HTTP statuses are reported on stdout; transport and JSON
    failures on stderr. No failure propagates to the caller.
    """
    try:
        body = client.fetch_feed(username)
    except GitHubAPIError as exc:
        print(exc)
        return
    except GitHubActivityError as exc:
        print(exc, file=sys.stderr)
        return

    lines = print_feed_body(body)
    log_info(logger, "Reported %d activity lines for %s", lines, username)


def main(
    argv: list[str] | None = None,
    *,
    http_client: httpx.Client | None = None,
) -> int:
    """Report recent public activity for a single GitHub user.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.
    http_client : httpx.Client | None, optional
        HTTP client to use instead of a freshly created one.

    Returns
    -------
    int
        Exit code. Always 0: a wrong argument count prints the usage notice
        and every fetch failure is reported rather than raised.

    """
    args, extras = _build_parser().parse_known_args(argv)
    usernames = [*args.username, *extras]
    if len(usernames) != 1:
        print(USAGE, file=sys.stderr)
        return 0

    with GitHubEventsClient(http_client=http_client) as client:
        report_activity(usernames[0], client)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
