"""Immutable configuration for the activity fetcher."""

from __future__ import annotations

from dataclasses import dataclass

EVENTS_URL_TEMPLATE = "https://api.github.com/users/{username}/events"
USER_AGENT = "GitHub-Activity-CLI/1.0"
ACCEPT = "application/vnd.github.v3+json"
TIMEOUT_SECONDS = 10.0

# Most recent activities shown by the CLI
DISPLAY_LIMIT = 20


@dataclass(frozen=True)
class FetcherConfig:
    """Connection settings for the GitHub events endpoint.

    Attributes:
    - endpoint_template (str): URL with a `{username}` placeholder.
    - user_agent (str): Value of the `User-Agent` header.
    - accept (str): Value of the `Accept` header.
    - connect_timeout (float): Seconds to wait for the connection.
    - read_timeout (float): Seconds to wait for the response body.

    """

    endpoint_template: str = EVENTS_URL_TEMPLATE
    user_agent: str = USER_AGENT
    accept: str = ACCEPT
    connect_timeout: float = TIMEOUT_SECONDS
    read_timeout: float = TIMEOUT_SECONDS

    @property
    def headers(self) -> dict[str, str]:
        """Request headers sent with every call."""
        return {"User-Agent": self.user_agent, "Accept": self.accept}

    @property
    def timeout(self) -> tuple[float, float]:
        """Timeout tuple in the form `requests` expects."""
        return (self.connect_timeout, self.read_timeout)

    def url_for(self, username: str) -> str:
        """Build the events URL for `username`."""
        return self.endpoint_template.format(username=username)
