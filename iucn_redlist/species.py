"""Species and assessment lookups."""

from .client import get
from .errors import NotFoundError
from .parsing import parse as parse_body
from .validators import check_scalar, require


def species(genus, species_name, infra=None, subpopulation=None, key=None, parse=True, **options):
    """Taxon summary and assessment list for a scientific name.

    Args:
        genus: Genus name, e.g. "Gorilla"
        species_name: Species epithet, e.g. "gorilla"
        infra: Infraspecific name
        subpopulation: Subpopulation name
        key: API token
        parse: Return record arrays as DataFrames (True) or plain lists
    """
    require("genus", genus)
    require("species_name", species_name)
    for name, value in (("genus", genus), ("species_name", species_name),
                        ("infra", infra), ("subpopulation", subpopulation)):
        check_scalar(name, value, str)
    check_scalar("parse", parse, bool)

    query = {
        "genus_name": genus,
        "species_name": species_name,
        "infra_name": infra,
        "subpopulation_name": subpopulation,
    }
    return parse_body(get("taxa/scientific_name", key, query=query, **options), parse)


def _latest_assessment_id(taxon):
    latest = [a for a in taxon.get("assessments") or [] if a.get("latest")]
    if not latest:
        raise NotFoundError("No latest assessment found for taxon.")
    return latest[0]["assessment_id"]


def species_latest(genus, species_name, infra=None, subpopulation=None, key=None, parse=True, **options):
    """Most recent assessment for a scientific name."""
    taxon = species(genus, species_name, infra, subpopulation, key=key, parse=False, **options)
    return assessment(_latest_assessment_id(taxon), key=key, parse=parse, **options)


def sis(id, key=None, parse=True, **options):
    """Taxon summary and assessment list for a SIS taxon id."""
    require("id", id)
    check_scalar("id", id, int)
    check_scalar("parse", parse, bool)
    return parse_body(get(f"taxa/sis/{id}", key, **options), parse)


def sis_latest(id, key=None, parse=True, **options):
    """Most recent assessment for a SIS taxon id."""
    taxon = sis(id, key=key, parse=False, **options)
    return assessment(_latest_assessment_id(taxon), key=key, parse=parse, **options)


def assessment(id, key=None, parse=True, **options):
    """Full assessment by assessment id."""
    require("id", id)
    check_scalar("id", id, int)
    check_scalar("parse", parse, bool)
    return parse_body(get(f"assessment/{id}", key, **options), parse)
