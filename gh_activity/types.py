"""Type definitions for GitHub events API records.

Only the fields the formatter reads are declared. Every payload key is
optional because the API omits fields freely across event types.
"""

from __future__ import annotations

from typing import TypedDict


class EventRepo(TypedDict, total=False):
    """Represents the repository an event occurred on."""

    id: int
    name: str
    url: str


class PushCommit(TypedDict, total=False):
    """Represents one commit listed in a push payload."""

    sha: str
    message: str


class PullRequestDetails(TypedDict, total=False):
    """Represents the pull request object nested in a payload."""

    number: int
    merged: bool


class ReleaseDetails(TypedDict, total=False):
    """Represents the release object nested in a payload."""

    tag_name: str


class EventPayload(TypedDict, total=False):
    """Represents the union of payload fields used across event kinds."""

    action: str
    commits: list[PushCommit]
    size: int
    ref: str | None
    ref_type: str
    pull_request: PullRequestDetails
    release: ReleaseDetails


class RawEvent(TypedDict, total=False):
    """Represents one record of the events API response."""

    id: str
    type: str
    repo: EventRepo
    payload: EventPayload
    created_at: str
