"""Request pipeline for the IUCN Red List API v4 using httpx.

Every API call goes through ``get``: build the request, send one GET,
classify the response, return the raw JSON text.
"""

import logging
import re

import httpx

from .errors import (
    ApiError,
    NotFoundError,
    RedListHTTPError,
    RedListTransportError,
    UnauthorizedError,
)
from .models import API_BASE, DEFAULT_TIMEOUT, EXTRA_QUERY_ARGS, VERSION, ApiResponse, Request
from .parsing import load_json
from .settings import resolve_key

logger = logging.getLogger(__name__)

USER_AGENT = f"python-httpx/{httpx.__version__} iucn-redlist/{VERSION}"


def space(path):
    """Encode whitespace in an endpoint path as %20."""
    return re.sub(r"\s", "%20", path)


def compact(query):
    """Drop unset query parameters."""
    return {k: v for k, v in (query or {}).items() if v is not None}


def build_request(path, key, query=None, **options):
    """Compose the full GET request for an endpoint path.

    Args:
        path: Endpoint path below the API base, e.g. "taxa/sis/12392"
        key: API token, sent as the Authorization header
        query: Query parameters; None values are dropped
        **options: Passed through to httpx.Client (timeout, proxy, headers, ...)
    """
    url = f"{API_BASE}/{space(path.lstrip('/'))}"
    headers = {"User-Agent": USER_AGENT, "Authorization": key}
    return Request(url=url, params=compact(query), headers=headers, options=options)


def execute(request):
    """Send a single GET. No retries."""
    options = dict(request.options)
    headers = {**(options.pop("headers", None) or {}), **request.headers}
    options.setdefault("timeout", DEFAULT_TIMEOUT)

    logger.debug("GET %s params=%s", request.url, request.params)
    try:
        with httpx.Client(headers=headers, **options) as client:
            resp = client.get(request.url, params=request.params)
    except httpx.TransportError as e:
        raise RedListTransportError(f"Request to {request.url} failed: {e}") from e
    logger.debug("%s -> HTTP %s", resp.url, resp.status_code)

    return ApiResponse(status=resp.status_code, body=resp.text, url=str(resp.url))


def check_response(response):
    """Raise the matching error for a failed response, else return its body."""
    if response.status >= 300:
        if response.status == 401:
            raise UnauthorizedError()
        if response.status == 404:
            raise NotFoundError()
        raise RedListHTTPError(
            f"Red List API error {response.status} for {response.url}",
            status_code=response.status,
        )

    # The API sometimes reports errors inside a 200 body
    body = load_json(response.body)
    if isinstance(body, dict):
        for name in ("message", "error"):
            if name in body:
                raise ApiError(str(body[name]))
    return response.body


def get(path, key=None, query=None, **options):
    """GET an endpoint and return the raw JSON text.

    Args:
        path: Endpoint path below the API base
        key: API token; looked up via ``resolve_key`` when omitted
        query: Query parameters dict
        **options: ``latest``, ``scope_code`` and ``year_published`` are
            moved into the query; the rest go to httpx.Client.

    Returns:
        The response body as a JSON string.
    """
    query = dict(query or {})
    for name in EXTRA_QUERY_ARGS:
        if name in options:
            query[name] = options.pop(name)

    request = build_request(path, resolve_key(key), query, **options)
    return check_response(execute(request))
