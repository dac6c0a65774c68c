"""Exceptions raised while fetching GitHub activity."""


class ActivityError(Exception):
    """Base error for anything that ends the run."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(ActivityError):
    """The username was empty."""


class FetchError(ActivityError):
    """The events request did not produce a usable event list."""


class UserNotFoundError(FetchError):
    """GitHub answered 404 for the user."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User '{username}' not found")


class RateLimitedError(FetchError):
    """GitHub answered 403, which it uses for exhausted rate limits."""

    def __init__(self):
        super().__init__("API rate limit exceeded. Please try again later")


class ApiError(FetchError):
    """GitHub answered with any other non-200 status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"GitHub API error: HTTP {status_code}")


class NetworkError(FetchError):
    """The request failed before a response arrived."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Network error: {detail}")


class MalformedResponseError(FetchError):
    """A 200 response whose body is not a JSON array of events."""
