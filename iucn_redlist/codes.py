"""Assessments grouped by classification scheme code.

Every lookup works the same way: without a code it returns the list of
codes for the scheme, with a code it pages through the matching
assessments. Codes are dotted in the IUCN schemes ("1.1") and
underscored in the API paths ("1_1").
"""

from .client import get
from .errors import ValidationError
from .paging import fetch
from .parsing import parse as parse_body
from .validators import check_paging, check_scalar

# Lookup name -> API path
SCHEMES = {
    "habitats": "habitats",
    "threats": "threats",
    "actions": "conservation_actions",
    "research": "research",
    "stresses": "stresses",
    "use_and_trade": "use_and_trade",
    "countries": "countries",
    "realms": "biogeographical_realms",
    "faos": "faos",
    "growth_forms": "growth_forms",
    "systems": "systems",
    "pop_trends": "population_trends",
    "categories": "red_list_categories",
    "scopes": "scopes",
    "comp_groups": "comprehensive_groups",
}

# Paged listings that take no code
LISTINGS = {
    "extinct": "taxa/possibly_extinct",
    "extinct_wild": "taxa/possibly_extinct_in_the_wild",
    "green": "green_status/all",
}


def code_path(scheme, code=None):
    path = SCHEMES[scheme]
    if code is None:
        return f"{path}/"
    return f"{path}/{str(code).replace('.', '_')}"


def lookup(scheme, code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    """Codes of a scheme, or the assessments filed under one code."""
    if scheme not in SCHEMES:
        raise ValidationError(f"unknown scheme {scheme!r}")
    check_scalar("code", code, (str, int))
    check_paging(parse, all_pages, page, quiet)

    if code is None:
        return parse_body(get(code_path(scheme), key, **options), parse)
    return fetch(code_path(scheme, code), key, parse_json=parse, all_pages=all_pages,
                 page=page, quiet=quiet, **options)


def listing(name, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    if name not in LISTINGS:
        raise ValidationError(f"unknown listing {name!r}")
    check_paging(parse, all_pages, page, quiet)
    return fetch(LISTINGS[name], key, parse_json=parse, all_pages=all_pages,
                 page=page, quiet=quiet, **options)


def habitats(code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    """Habitat classification codes, or assessments for one habitat."""
    return lookup("habitats", code, key, parse, all_pages, page, quiet, **options)


def threats(code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    """Threat classification codes, or assessments for one threat."""
    return lookup("threats", code, key, parse, all_pages, page, quiet, **options)


def actions(code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    """Conservation action codes, or assessments for one action."""
    return lookup("actions", code, key, parse, all_pages, page, quiet, **options)


def research(code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    return lookup("research", code, key, parse, all_pages, page, quiet, **options)


def stresses(code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    return lookup("stresses", code, key, parse, all_pages, page, quiet, **options)


def use_and_trade(code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    return lookup("use_and_trade", code, key, parse, all_pages, page, quiet, **options)


def countries(code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    """ISO alpha-2 country codes, or assessments for one country."""
    return lookup("countries", code, key, parse, all_pages, page, quiet, **options)


def realms(code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    return lookup("realms", code, key, parse, all_pages, page, quiet, **options)


def faos(code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    """FAO marine fishing areas."""
    return lookup("faos", code, key, parse, all_pages, page, quiet, **options)


def growth_forms(code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    return lookup("growth_forms", code, key, parse, all_pages, page, quiet, **options)


def systems(code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    return lookup("systems", code, key, parse, all_pages, page, quiet, **options)


def pop_trends(code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    return lookup("pop_trends", code, key, parse, all_pages, page, quiet, **options)


def categories(code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    """Red List categories (CR, EN, VU, ...)."""
    return lookup("categories", code, key, parse, all_pages, page, quiet, **options)


def scopes(code=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    return lookup("scopes", code, key, parse, all_pages, page, quiet, **options)


def comp_groups(group=None, key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    """Comprehensive assessment groups (e.g. "mammals")."""
    return lookup("comp_groups", group, key, parse, all_pages, page, quiet, **options)


def extinct(key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    """Assessments of taxa flagged possibly extinct."""
    return listing("extinct", key, parse, all_pages, page, quiet, **options)


def extinct_wild(key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    """Assessments of taxa flagged possibly extinct in the wild."""
    return listing("extinct_wild", key, parse, all_pages, page, quiet, **options)


def green(key=None, parse=True, all_pages=True, page=1, quiet=False, **options):
    """Assessments with a Green Status."""
    return listing("green", key, parse, all_pages, page, quiet, **options)
