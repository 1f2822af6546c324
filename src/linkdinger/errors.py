"""Errors raised by the Linkding client."""


class LinkdingError(Exception):
    """Base class for failures talking to a Linkding instance."""


class NetworkError(LinkdingError):
    """The Linkding instance could not be reached."""


class ServiceError(LinkdingError):
    """Linkding answered with a non-success status code."""

    def __init__(self, status_code: int, reason: str = "", body: str = ""):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"Linkding API error: {status_code} {reason} - {body}")


class MalformedResponse(LinkdingError):
    """A success response whose body could not be parsed."""
