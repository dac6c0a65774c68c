"""Shared fixtures for the activity tests."""

from unittest.mock import MagicMock, patch

import pytest


def make_raw_event(event_type, repo="octo/repo", **payload):
    """Build an events API record shaped like GitHub's response."""
    raw = {"id": "1", "type": event_type, "payload": payload}
    if repo is not None:
        raw["repo"] = {"id": 1, "name": repo}
    return raw


@pytest.fixture
def raw_events():
    """A small mixed response, most recent first."""
    return [
        make_raw_event("PushEvent", commits=[{"sha": "a"}, {"sha": "b"}]),
        make_raw_event("WatchEvent", repo="a/b"),
        make_raw_event("ReleaseEvent", action="edited", release={"tag_name": "v1"}),
        make_raw_event("IssuesEvent", repo=None, action="opened"),
        make_raw_event("PullRequestEvent", repo="a/b", action="closed",
                       pull_request={"merged": True}),
    ]


@pytest.fixture
def session_cls():
    """Patch requests.Session in the fetcher and return the class mock."""
    with patch("gh_activity.fetcher.requests.Session") as cls:
        yield cls


@pytest.fixture
def mock_session(session_cls):
    """Return the session object the fetcher opens."""
    session = MagicMock()
    session_cls.return_value.__enter__.return_value = session
    return session


def make_response(status_code, json_data=None, json_error=None):
    """Build a response mock usable as a context manager."""
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    response.__enter__.return_value = response
    return response
