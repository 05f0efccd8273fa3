"""Exception types raised by Nepal Tech News components."""


class NewsError(Exception):
    """Base class for all news service errors."""


class NewsFetchError(NewsError):
    """A news fetch did not produce a usable response.

    Raised for non-2xx statuses, network failures and undecodable bodies.
    An empty but well-formed result is never a ``NewsFetchError``.

    Args:
        message: Human-readable description shown to the user.
        status_code: HTTP status of the failed response, if one was received.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamError(NewsError):
    """The upstream news API could not be queried by the proxy."""


class ContactSubmissionError(NewsError):
    """The contact form backend rejected or never received a message."""
