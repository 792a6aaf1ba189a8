"""Exception hierarchy for the Marqo client.

Every failure raised by a client operation derives from MarqoError so callers
can catch the whole family at once, or one category at a time:

- ValidationError: the request was rejected locally, no I/O was performed
- TransportError: the HTTP round trip itself failed (invalid URL, connect,
  timeout, DNS)
- ServerError: the server answered with a non-2xx status code
- DecodeError: the server answered 2xx but the body did not match the
  expected result shape

Example:
    >>> try:
    ...     client.get_index_stats(GetIndexStatsRequest(index_name="docs"))
    ... except ServerError as exc:
    ...     print(exc.status_code)
"""

from __future__ import annotations

from collections.abc import Iterable


class MarqoError(Exception):
    """Base class for all client errors.

    Attributes:
        operation: Name of the catalog operation that failed, if known
    """

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation


class ValidationError(MarqoError, ValueError):
    """Raised when a request fails local validation.

    Attributes:
        fields: Dotted names of every offending field
    """

    def __init__(
        self,
        message: str,
        fields: Iterable[str] = (),
        operation: str | None = None,
    ) -> None:
        super().__init__(message, operation)
        self.fields = list(fields)


class TransportError(MarqoError):
    """Raised when the HTTP request could not be completed."""

    def __init__(self, operation: str, cause: BaseException) -> None:
        super().__init__(f"{operation}: transport error: {cause}", operation)
        self.cause = cause


class ServerError(MarqoError):
    """Raised when the server responds with a non-2xx status code.

    Attributes:
        status_code: HTTP status code returned by the server
        detail: Raw response text, kept for diagnostics only
    """

    def __init__(self, status_code: int, operation: str, detail: str = "") -> None:
        super().__init__(f"{operation}: status code: {status_code}", operation)
        self.status_code = status_code
        self.detail = detail


class DecodeError(MarqoError):
    """Raised when a successful response cannot be decoded."""

    def __init__(self, operation: str, detail: str) -> None:
        super().__init__(f"{operation}: invalid response: {detail}", operation)
        self.detail = detail
