"""Errors raised by the Red List client.

Every failure aborts the current query. Nothing is returned alongside an
error, so callers only ever see a full result or one of these.
"""


class RedListError(RuntimeError):
    """Base class for all client failures."""


class MissingCredentialError(RedListError):
    pass


class RedListHTTPError(RedListError):
    """Non-success HTTP status from the API."""

    def __init__(self, message, status_code):
        super().__init__(message)
        self.status_code = status_code


class UnauthorizedError(RedListHTTPError):
    def __init__(self, message="Token not valid! (HTTP 401)"):
        super().__init__(message, status_code=401)


class NotFoundError(RedListHTTPError):
    def __init__(self, message="No results returned for query. (HTTP 404)"):
        super().__init__(message, status_code=404)


class ApiError(RedListError):
    """Error document embedded in an otherwise successful response."""


class ParseError(RedListError, ValueError):
    """Body was not valid JSON."""


class ValidationError(RedListError, ValueError):
    """Caller argument failed a type, length or NA check."""


class RedListTransportError(RedListError):
    """Network failure before any response arrived."""
