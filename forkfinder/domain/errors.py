"""Errors surfaced by a fork fetch cycle."""

from datetime import datetime


class ForkFinderError(Exception):
    """Base class for failures that end a fetch cycle."""
    pass


class NotFound(ForkFinderError):
    """Raised when the repository does not exist or is not visible."""

    def __init__(self):
        super().__init__(
            "Repository not found. Check the owner/name spelling; "
            "the repository may also be private."
        )


class RateLimited(ForkFinderError):
    """Raised when the API rate limit is exhausted."""

    def __init__(self, reset_at: datetime):
        self.reset_at = reset_at
        super().__init__(
            f"API rate limit exceeded. The limit resets at "
            f"{reset_at.strftime('%H:%M:%S')}."
        )


class Moved(ForkFinderError):
    """Raised when the repository has been moved permanently."""

    def __init__(self):
        super().__init__("Repository has moved permanently. Check the new owner/name.")


class Unauthenticated(ForkFinderError):
    """Raised on a 401 response."""

    def __init__(self):
        super().__init__("Authentication error. The API rejected the request credentials.")


class GenericHttpError(ForkFinderError):
    """Raised for any other non-2xx response."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"API error: {status_code} {reason}")


class EmptyResult(ForkFinderError):
    """Raised when the forks list comes back empty."""

    def __init__(self):
        super().__init__("No forks found for this repository.")


class DetailFetchFailure(ForkFinderError):
    """Raised when any per-fork detail request fails. Keeps the cause's message."""
    pass
