"""JSON decoding, optionally simplifying record arrays into DataFrames."""

import json

import pandas as pd

from .errors import ParseError


def load_json(raw: str):
    """Decode a response body, raising ParseError on malformed JSON."""
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise ParseError(f"Response is not valid JSON: {e}") from e


def _simplify(value):
    if isinstance(value, dict):
        return {k: _simplify(v) for k, v in value.items()}
    if isinstance(value, list):
        if value and all(isinstance(item, dict) for item in value):
            return pd.json_normalize(value)
        return [_simplify(item) for item in value]
    return value


def parse(raw: str, flatten: bool = True):
    """Parse a JSON response body.

    Args:
        raw: JSON text as returned by the API.
        flatten: Turn every non-empty array of objects into a DataFrame
            (one row per object, nested objects as dotted columns). When
            False, the document is returned as plain dicts and lists.
    """
    data = load_json(raw)
    return _simplify(data) if flatten else data
