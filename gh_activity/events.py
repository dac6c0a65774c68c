"""Decoded representation of GitHub activity events."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

from gh_activity.types import RawEvent

logger = logging.getLogger("github_activity.events")

PUSH_EVENT = "PushEvent"
ISSUES_EVENT = "IssuesEvent"
PULL_REQUEST_EVENT = "PullRequestEvent"
WATCH_EVENT = "WatchEvent"
FORK_EVENT = "ForkEvent"
CREATE_EVENT = "CreateEvent"
DELETE_EVENT = "DeleteEvent"
RELEASE_EVENT = "ReleaseEvent"
PUBLIC_EVENT = "PublicEvent"

# Used when a push payload carries no usable commit list
DEFAULT_COMMIT_COUNT = 1


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def count_commits(payload: dict[str, Any]) -> int:
    """Count the commits listed in a push payload.

    Parameters
    ----------
    payload : dict[str, Any]
        The `payload` object of a push event.

    Returns
    -------
    int
        The length of the `commits` list, or `DEFAULT_COMMIT_COUNT` when
        the list is missing or is not a list.

    """
    commits = payload.get("commits")
    if isinstance(commits, list):
        return len(commits)
    return DEFAULT_COMMIT_COUNT


@dataclass(frozen=True)
class Event:
    """One activity record, reduced to what the formatter needs.

    Attributes:
    - kind (str | None): The API `type`, e.g. "PushEvent".
    - repository_name (str | None): The `owner/repo` the event happened on.
    - commit_count (int): Commits in a push.
    - action (str | None): Issue, pull request or release action.
    - merged (bool): Whether a closed pull request was merged.
    - ref_type (str | None): "repository", "branch" or "tag".
    - ref (str | None): The branch or tag name.
    - tag_name (str | None): The tag of a release.

    """

    kind: Optional[str]
    repository_name: Optional[str]
    commit_count: int = DEFAULT_COMMIT_COUNT
    action: Optional[str] = None
    merged: bool = False
    ref_type: Optional[str] = None
    ref: Optional[str] = None
    tag_name: Optional[str] = None

    @property
    def is_describable(self) -> bool:
        """Whether the event carries both a kind and a repository."""
        return bool(self.kind) and bool(self.repository_name)

    @classmethod
    def from_api(cls, raw: RawEvent) -> Event:
        """Create an Event from one record of the events API.

        Missing or mistyped fields decode to their fallbacks instead of
        raising.

        Parameters
        ----------
        raw : RawEvent
            A single element of the events API response.

        """
        kind = _as_str(raw.get("type"))
        repository_name = _as_str(_as_dict(raw.get("repo")).get("name"))
        payload = _as_dict(raw.get("payload"))

        fields: dict[str, Any] = {}
        if kind == PUSH_EVENT:
            fields["commit_count"] = count_commits(payload)
        elif kind == ISSUES_EVENT:
            fields["action"] = _as_str(payload.get("action"))
        elif kind == PULL_REQUEST_EVENT:
            fields["action"] = _as_str(payload.get("action"))
            pull_request = _as_dict(payload.get("pull_request"))
            fields["merged"] = pull_request.get("merged") is True
        elif kind in (CREATE_EVENT, DELETE_EVENT):
            fields["ref_type"] = _as_str(payload.get("ref_type"))
            fields["ref"] = _as_str(payload.get("ref"))
        elif kind == RELEASE_EVENT:
            fields["action"] = _as_str(payload.get("action"))
            release = _as_dict(payload.get("release"))
            fields["tag_name"] = _as_str(release.get("tag_name"))

        return cls(kind=kind, repository_name=repository_name, **fields)


def decode_events(raw_events: Iterable[Any]) -> list[Event]:
    """Decode an events API response, preserving its order.

    Items that are not JSON objects are skipped.
    """
    events = []
    for raw in raw_events:
        if not isinstance(raw, dict):
            logger.debug("Skipping non-object event record: %r", raw)
            continue
        events.append(Event.from_api(raw))
    return events
