"""Fetches the public events of a GitHub user."""

from __future__ import annotations

import logging
from typing import Optional, cast

import requests

from gh_activity.config import FetcherConfig
from gh_activity.exceptions import (
    ApiError,
    InvalidInputError,
    MalformedResponseError,
    NetworkError,
    RateLimitedError,
    UserNotFoundError,
)
from gh_activity.types import RawEvent

logger = logging.getLogger("github_activity.fetcher")

STATUS_OK = 200
STATUS_FORBIDDEN = 403
STATUS_NOT_FOUND = 404


class ActivityFetcher:
    """Issues the single events request for a user.

    Parameters
    ----------
    config : FetcherConfig, optional
        Endpoint, headers and timeouts. Defaults to the public GitHub API.

    """

    def __init__(self, config: FetcherConfig | None = None) -> None:
        self.config = config or FetcherConfig()

    def fetch(self, username: Optional[str]) -> list[RawEvent]:
        """Fetch the raw event list for `username`.

        Parameters
        ----------
        username : Optional[str]
            The GitHub login whose public events are requested.

        Returns
        -------
        list[RawEvent]
            The decoded event array, most recent first.

        Raises
        ------
        InvalidInputError
            If `username` is empty or blank.
        FetchError
            If the request fails or GitHub answers with anything but a
            JSON array on HTTP 200.

        """
        username = username.strip() if username else ""
        if not username:
            raise InvalidInputError("Username cannot be empty")

        url = self.config.url_for(username)
        logger.debug("Requesting `%s`", url)

        try:
            with requests.Session() as session, session.get(
                url,
                headers=self.config.headers,
                timeout=self.config.timeout,
            ) as response:
                return self._handle_response(response, username)
        except requests.exceptions.RequestException as exc:
            raise NetworkError(str(exc)) from exc

    @staticmethod
    def _handle_response(
        response: requests.Response,
        username: str,
    ) -> list[RawEvent]:
        logger.debug("GitHub answered HTTP %d", response.status_code)

        if response.status_code == STATUS_NOT_FOUND:
            raise UserNotFoundError(username)
        if response.status_code == STATUS_FORBIDDEN:
            raise RateLimitedError
        if response.status_code != STATUS_OK:
            raise ApiError(response.status_code)

        try:
            events = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                "GitHub returned a response that is not valid JSON",
            ) from exc
        if not isinstance(events, list):
            raise MalformedResponseError(
                "GitHub returned an unexpected response shape",
            )

        logger.debug("Received %d events for %s", len(events), username)
        return cast("list[RawEvent]", events)
