"""Tests for turning events into activity lines."""

import pytest

from gh_activity.events import Event
from gh_activity.formatter import capitalize, format_event, format_events


def event(kind, repo="a/b", **fields):
    return Event(kind=kind, repository_name=repo, **fields)


class TestCapitalize:
    def test_only_first_character_changes(self):
        assert capitalize("reOpened") == "ReOpened"

    def test_empty(self):
        assert capitalize("") == ""


class TestPush:
    def test_scenario_three_commits(self):
        line = format_event(event("PushEvent", repo="octo/repo", commit_count=3))
        assert line == "- Pushed 3 commits to octo/repo"

    def test_singular(self):
        assert format_event(event("PushEvent", commit_count=1)) == "- Pushed 1 commit to a/b"

    @pytest.mark.parametrize("count", [0, 2, 50])
    def test_plural(self, count):
        assert format_event(event("PushEvent", commit_count=count)) == (
            f"- Pushed {count} commits to a/b"
        )


class TestIssues:
    @pytest.mark.parametrize(
        ("action", "expected"),
        [
            ("opened", "- Opened a new issue in a/b"),
            ("closed", "- Closed an issue in a/b"),
            ("reopened", "- Reopened an issue in a/b"),
        ],
    )
    def test_actions(self, action, expected):
        assert format_event(event("IssuesEvent", action=action)) == expected

    def test_no_action(self):
        assert format_event(event("IssuesEvent")) is None


class TestPullRequest:
    def test_opened(self):
        line = format_event(event("PullRequestEvent", action="opened"))
        assert line == "- Opened a pull request in a/b"

    def test_scenario_merged(self):
        line = format_event(event("PullRequestEvent", action="closed", merged=True))
        assert line == "- Merged a pull request in a/b"

    def test_closed_unmerged(self):
        line = format_event(event("PullRequestEvent", action="closed", merged=False))
        assert line == "- Closed a pull request in a/b"

    def test_other_action(self):
        line = format_event(event("PullRequestEvent", action="synchronize"))
        assert line == "- Synchronize a pull request in a/b"

    def test_no_action(self):
        assert format_event(event("PullRequestEvent")) is None


class TestCreateAndDelete:
    def test_create_repository(self):
        line = format_event(event("CreateEvent", ref_type="repository"))
        assert line == "- Created repository a/b"

    def test_scenario_branch_without_ref(self):
        line = format_event(event("CreateEvent", ref_type="branch", ref=None))
        assert line == "- Created branch unknown in a/b"

    def test_create_tag(self):
        line = format_event(event("CreateEvent", ref_type="tag", ref="v1.0"))
        assert line == "- Created tag v1.0 in a/b"

    def test_create_unknown_ref_type(self):
        assert format_event(event("CreateEvent", ref_type="wiki")) is None
        assert format_event(event("CreateEvent")) is None

    def test_delete(self):
        line = format_event(event("DeleteEvent", ref_type="tag", ref="v1"))
        assert line == "- Deleted tag v1 in a/b"

    def test_delete_defaults(self):
        assert format_event(event("DeleteEvent")) == "- Deleted branch unknown in a/b"


class TestRelease:
    def test_published(self):
        line = format_event(event("ReleaseEvent", action="published", tag_name="v2"))
        assert line == "- Published release v2 in a/b"

    def test_published_without_tag(self):
        line = format_event(event("ReleaseEvent", action="published"))
        assert line == "- Published release unknown in a/b"

    def test_other_action_suppressed(self):
        assert format_event(event("ReleaseEvent", action="edited", tag_name="v2")) is None


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        ("WatchEvent", "- Starred a/b"),
        ("ForkEvent", "- Forked a/b"),
        ("PublicEvent", "- Made a/b public"),
        ("GollumEvent", "- Gollum in a/b"),
        ("IssueCommentEvent", "- IssueComment in a/b"),
        ("SomethingNew", "- SomethingNew in a/b"),
    ],
)
def test_simple_and_generic_kinds(kind, expected):
    assert format_event(event(kind)) == expected


@pytest.mark.parametrize("kind", ["PushEvent", "WatchEvent", "GollumEvent"])
def test_missing_repository_is_dropped(kind):
    assert format_event(event(kind, repo=None)) is None


def test_missing_kind_is_dropped():
    assert format_event(event(None)) is None


def test_format_events_preserves_order_and_drops():
    events = [
        event("WatchEvent", repo="x/1"),
        event("ReleaseEvent", action="edited"),
        event("ForkEvent", repo=None),
        event("PushEvent", repo="x/2", commit_count=2),
        event("PublicEvent", repo="x/3"),
    ]
    assert format_events(events) == [
        "- Starred x/1",
        "- Pushed 2 commits to x/2",
        "- Made x/3 public",
    ]


def test_format_events_is_repeatable():
    events = [event("WatchEvent"), event("PushEvent", commit_count=5)]
    assert format_events(events) == format_events(events)
