"""Data models and constants for the Red List client."""

from dataclasses import dataclass, field

VERSION = "0.1.0"

API_BASE = "https://api.iucnredlist.org/api/v4"
RECORD_FIELD = "assessments"  # Record array concatenated across pages
DEFAULT_TIMEOUT = 30.0

# Query arguments accepted as keyword options by every endpoint function
EXTRA_QUERY_ARGS = ("latest", "scope_code", "year_published")


@dataclass
class Request:
    """A fully built GET request, ready for the transport."""

    url: str
    params: dict = field(default_factory=dict)
    headers: dict = field(default_factory=dict)
    options: dict = field(default_factory=dict)


@dataclass
class ApiResponse:
    """Response from the Red List API, body kept as raw text."""

    status: int
    body: str
    url: str | None = None
