"""Service-level exceptions surfaced to API callers."""


class RemoteCallError(Exception):
    """A database call failed. ``message`` is safe to show to the caregiver."""

    def __init__(self, message: str = "Something went wrong. Please try again."):
        super().__init__(message)
        self.message = message


class ReviewValidationError(Exception):
    """A review draft failed a submit-time precondition; nothing was written."""

    def __init__(self, reason: str, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


class ReviewNotFoundError(Exception):
    """An edit targeted a review that does not exist."""
    pass
