"""Prints the recent public activity of a GitHub user.

Fetches the user's events from the GitHub events API, describes each one
in a single sentence and prints the twenty most recent.

Usage:
    github-activity <username>

Version: 1.1.0

Changelog:
    - 1.0.0: Initial release.
    - 1.1.0: Report merged pull requests and malformed API responses.
"""

from __future__ import annotations

import logging
from typing import Optional

import click

from gh_activity.display import display_activity
from gh_activity.events import decode_events
from gh_activity.exceptions import ActivityError
from gh_activity.fetcher import ActivityFetcher
from gh_activity.formatter import format_events
from gh_activity.logging import configure_logging

logger = configure_logging()

EXAMPLE = "Example: github-activity kamranahmedse"


def get_activity_lines(
    username: str,
    fetcher: Optional[ActivityFetcher] = None,
) -> list[str]:
    """Fetch and describe the public events of `username`.

    Parameters
    ----------
    username : str
        The GitHub login.
    fetcher : Optional[ActivityFetcher]
        The fetcher to use. Defaults to one targeting api.github.com.

    Returns
    -------
    list[str]
        One display line per describable event, most recent first.

    """
    fetcher = fetcher or ActivityFetcher()
    raw_events = fetcher.fetch(username)
    lines = format_events(decode_events(raw_events))
    logger.info(
        "Described %d of %d events for %s",
        len(lines),
        len(raw_events),
        username,
    )
    return lines


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("username", required=False)
@click.pass_context
def main(ctx: click.Context, username: Optional[str]) -> None:
    """Show recent GitHub activity for USERNAME."""
    username = (username or "").strip()
    if not username:
        click.echo(ctx.get_usage(), err=True)
        click.echo(EXAMPLE, err=True)
        ctx.exit(1)

    click.echo(f"Fetching activity for GitHub user: {username}...")
    try:
        lines = get_activity_lines(username)
    except ActivityError as exc:
        logger.debug("Fetching activity failed", exc_info=True)
        click.echo(f"Error: {exc.message}", err=True)
        ctx.exit(1)

    display_activity(username, lines)


if __name__ == "__main__":
    main()  # pylint: disable=no-value-for-parameter
