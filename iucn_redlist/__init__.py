"""Client for the IUCN Red List API v4.

Every call goes through one pipeline: resolve the API key, GET the
endpoint, raise on HTTP or embedded API errors, then parse the JSON.
Paged endpoints are fetched page by page and combined.
"""

from .client import get
from .errors import (
    ApiError,
    MissingCredentialError,
    NotFoundError,
    ParseError,
    RedListError,
    RedListHTTPError,
    RedListTransportError,
    UnauthorizedError,
    ValidationError,
)
from .models import VERSION as __version__
from .models import ApiResponse
from .paging import combine, fetch, page_records
from .parsing import parse
from .settings import resolve_key, save_key

__all__ = [
    "ApiError",
    "ApiResponse",
    "MissingCredentialError",
    "NotFoundError",
    "ParseError",
    "RedListError",
    "RedListHTTPError",
    "RedListTransportError",
    "UnauthorizedError",
    "ValidationError",
    "__version__",
    "combine",
    "fetch",
    "get",
    "page_records",
    "parse",
    "resolve_key",
    "save_key",
]
