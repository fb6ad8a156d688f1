"""Page through multi-page queries and combine the pages."""

import logging
import sys
from itertools import chain

import pandas as pd

from .client import get
from .models import RECORD_FIELD
from .parsing import load_json, parse

logger = logging.getLogger(__name__)


def _record_count(raw, field):
    body = load_json(raw)
    if not isinstance(body, dict):
        return 0
    records = body.get(field)
    if not isinstance(records, (list, dict)):
        return 0
    return len(records)


def page_records(path, key=None, quiet=False, field=RECORD_FIELD, query=None, **options):
    """Fetch page 1, 2, ... of a query until a page has no records.

    The page after the last one with data is only a probe and is dropped.
    If page 1 itself is empty, it is returned as the only page.

    Returns:
        Raw JSON bodies of the pages holding records, in page order.
    """
    pages = []
    page = 1

    while True:
        raw = get(path, key, query={**(query or {}), "page": page}, **options)

        if not _record_count(raw, field):
            if page == 1:
                pages = [raw]
            break

        if not quiet:
            sys.stderr.write(".")
            sys.stderr.flush()
        pages.append(raw)
        page += 1

    if not quiet and page > 1:
        sys.stderr.write("\n")
        sys.stderr.flush()

    logger.debug("%s: %d page(s) with %s", path, page - 1, field)
    return pages


def _stack(records):
    if records and all(isinstance(r, pd.DataFrame) for r in records):
        return pd.concat(records, ignore_index=True)
    frames = [r.to_dict("records") if isinstance(r, pd.DataFrame) else (r or []) for r in records]
    return list(chain.from_iterable(frames))


def combine(pages, flatten=True, field=RECORD_FIELD):
    """Combine the pages of one query into a single document.

    Metadata comes from the first page; ``field`` is the concatenation of
    every page's records in order (row-stacked when flattened).
    """
    if not pages:
        raise ValueError("combine() needs at least one page")
    if len(pages) == 1:
        return parse(pages[0], flatten)

    parsed = [parse(p, flatten) for p in pages]
    result = parsed[0]
    result[field] = _stack([doc.get(field) for doc in parsed])
    return result


def fetch(path, key=None, parse_json=True, all_pages=True, page=1, quiet=False,
          field=RECORD_FIELD, query=None, **options):
    """GET a paged endpoint, either every page combined or one page."""
    if all_pages:
        pages = page_records(path, key, quiet=quiet, field=field, query=query, **options)
        return combine(pages, flatten=parse_json, field=field)

    raw = get(path, key, query={**(query or {}), "page": page}, **options)
    return parse(raw, parse_json)
