"""Turns decoded events into one-line activity descriptions.

Each event kind maps to a renderer returning the sentence for the event, or
None when the event's details match none of the templates for its kind.
Kinds without a renderer fall back to a generic "<Kind> in <repo>" line.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Callable, Optional

from gh_activity.events import (
    CREATE_EVENT,
    DELETE_EVENT,
    FORK_EVENT,
    ISSUES_EVENT,
    PUBLIC_EVENT,
    PULL_REQUEST_EVENT,
    PUSH_EVENT,
    RELEASE_EVENT,
    WATCH_EVENT,
    Event,
)

logger = logging.getLogger("github_activity.formatter")

LINE_PREFIX = "- "
UNKNOWN = "unknown"
EVENT_SUFFIX = "Event"


def capitalize(text: str) -> str:
    """Uppercase the first character, leaving the rest untouched.

    Unlike `str.capitalize`, "reOpened" stays "ReOpened".
    """
    return text[:1].upper() + text[1:]


def _push(event: Event, repo: str) -> Optional[str]:
    count = event.commit_count
    return f"Pushed {count} {'commit' if count == 1 else 'commits'} to {repo}"


def _issues(event: Event, repo: str) -> Optional[str]:
    if event.action == "opened":
        return f"Opened a new issue in {repo}"
    if event.action == "closed":
        return f"Closed an issue in {repo}"
    if event.action:
        return f"{capitalize(event.action)} an issue in {repo}"
    return None


def _watch(_event: Event, repo: str) -> Optional[str]:
    return f"Starred {repo}"


def _fork(_event: Event, repo: str) -> Optional[str]:
    return f"Forked {repo}"


def _create(event: Event, repo: str) -> Optional[str]:
    if event.ref_type == "repository":
        return f"Created repository {repo}"
    if event.ref_type in ("branch", "tag"):
        return f"Created {event.ref_type} {event.ref or UNKNOWN} in {repo}"
    return None


def _delete(event: Event, repo: str) -> Optional[str]:
    ref_type = event.ref_type or "branch"
    return f"Deleted {ref_type} {event.ref or UNKNOWN} in {repo}"


def _pull_request(event: Event, repo: str) -> Optional[str]:
    if event.action == "opened":
        return f"Opened a pull request in {repo}"
    if event.action == "closed":
        verb = "Merged" if event.merged else "Closed"
        return f"{verb} a pull request in {repo}"
    if event.action:
        return f"{capitalize(event.action)} a pull request in {repo}"
    return None


def _release(event: Event, repo: str) -> Optional[str]:
    if event.action == "published":
        return f"Published release {event.tag_name or UNKNOWN} in {repo}"
    return None


def _public(_event: Event, repo: str) -> Optional[str]:
    return f"Made {repo} public"


RENDERERS: dict[str, Callable[[Event, str], Optional[str]]] = {
    PUSH_EVENT: _push,
    ISSUES_EVENT: _issues,
    WATCH_EVENT: _watch,
    FORK_EVENT: _fork,
    CREATE_EVENT: _create,
    DELETE_EVENT: _delete,
    PULL_REQUEST_EVENT: _pull_request,
    RELEASE_EVENT: _release,
    PUBLIC_EVENT: _public,
}


def _generic(kind: str, repo: str) -> str:
    name = kind[: -len(EVENT_SUFFIX)] if kind.endswith(EVENT_SUFFIX) else kind
    return f"{name} in {repo}"


def format_event(event: Event) -> Optional[str]:
    """Describe a single event.

    Parameters
    ----------
    event : Event
        The decoded event.

    Returns
    -------
    Optional[str]
        The display line, prefixed with "- ", or None when the event lacks
        a kind or repository, or matches no template for its kind.

    """
    if not event.is_describable:
        logger.debug("Dropping event without kind or repository: %r", event)
        return None

    # is_describable guarantees both are set
    kind = str(event.kind)
    repo = str(event.repository_name)

    renderer = RENDERERS.get(kind)
    text = renderer(event, repo) if renderer else _generic(kind, repo)
    if text is None:
        logger.debug("No template for %s with %r", kind, event)
        return None
    return LINE_PREFIX + text


def format_events(events: Iterable[Event]) -> list[str]:
    """Describe every event that can be described, in input order."""
    lines = []
    for event in events:
        line = format_event(event)
        if line:
            lines.append(line)
    return lines
