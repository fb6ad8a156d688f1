"""Version, statistics and citation endpoints."""

from .client import get
from .errors import ParseError
from .parsing import parse as parse_body


def _field(path, name, key, **options):
    body = parse_body(get(path, key, **options), False)
    if not isinstance(body, dict) or name not in body:
        raise ParseError(f"{path} response has no {name!r} field")
    return body[name]


def version(key=None, **options):
    """Current Red List version, e.g. "2025-1"."""
    return _field("information/red_list_version", "red_list_version", key, **options)


def api_version(key=None, **options):
    return _field("information/api_version", "api_version", key, **options)


def sp_count(key=None, parse=True, **options):
    """Number of assessed species."""
    return parse_body(get("statistics/count", key, **options), parse)


def citation(key=None, **options):
    """Citation text for the current Red List version."""
    ver = version(key, **options)
    year = ver.split("-")[0]
    return f"IUCN {year}. IUCN Red List of Threatened Species. Version {ver} <www.iucnredlist.org>"
