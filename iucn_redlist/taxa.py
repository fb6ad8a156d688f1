"""Assessments grouped by higher taxon."""

from .client import get
from .errors import ValidationError
from .paging import fetch
from .parsing import parse as parse_body
from .validators import check_paging, check_scalar

RANKS = ("kingdom", "phylum", "class", "order", "family")


def taxon(rank, name=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    """Assessments for a named taxon of the given rank.

    Without a name, returns the list of taxon names at that rank.

    Args:
        rank: One of RANKS
        name: Taxon name, e.g. "Felidae"
        key: API token
        parse: Return record arrays as DataFrames (True) or plain lists
        all_pages: Fetch and combine every page; otherwise only ``page``
        page: Page to fetch when ``all_pages`` is False
        quiet: Suppress the progress dots of multi-page downloads
    """
    if rank not in RANKS:
        raise ValidationError(f"rank must be one of {', '.join(RANKS)}")
    check_scalar("name", name, str)
    check_paging(parse, all_pages, page, quiet)

    if name is None:
        return parse_body(get(f"taxa/{rank}/", key, **options), parse)
    return fetch(f"taxa/{rank}/{name}", key, parse_json=parse, all_pages=all_pages,
                 page=page, quiet=quiet, **options)


def kingdom(kingdom=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    return taxon("kingdom", kingdom, key, parse, all_pages, page, quiet, **options)


def phylum(phylum=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    return taxon("phylum", phylum, key, parse, all_pages, page, quiet, **options)


def class_(class_name=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    return taxon("class", class_name, key, parse, all_pages, page, quiet, **options)


def order(order=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    return taxon("order", order, key, parse, all_pages, page, quiet, **options)


def family(family=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    return taxon("family", family, key, parse, all_pages, page, quiet, **options)
