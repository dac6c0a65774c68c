"""Console rendering of formatted activity lines."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable

import click

from gh_activity.config import DISPLAY_LIMIT


def display_activity(
    username: str,
    lines: Sequence[str],
    echo: Callable[[str], None] = click.echo,
    limit: int = DISPLAY_LIMIT,
) -> None:
    """Print the most recent activity lines for a user.

    Parameters
    ----------
    username : str
        The GitHub login the lines belong to.
    lines : Sequence[str]
        Formatted lines, most recent first.
    echo : Callable[[str], None], optional
        Output function, one call per printed line.
    limit : int, optional
        Maximum number of activity lines to print.

    """
    if not lines:
        echo(f"No recent activity found for user '{username}'")
        return

    echo(f"Recent activity for {username}:")
    echo("")
    for line in lines[:limit]:
        echo(line)
