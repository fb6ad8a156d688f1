"""CLI commands for the Red List client."""

import argparse
import json
import logging
import sys
from pathlib import Path

from .errors import RedListError


def _add_page_args(parser):
    parser.add_argument(
        "--page",
        type=int,
        default=None,
        help="Fetch only this page (default: all pages, combined)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress dots for multi-page downloads",
    )


def _page_kwargs(args):
    if args.page is None:
        return {"all_pages": True, "quiet": args.quiet}
    return {"all_pages": False, "page": args.page, "quiet": args.quiet}


def _query_param(value):
    name, sep, val = value.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return name, val


def _configure_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="redlist",
        description="Query the IUCN Red List API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--key",
        default=None,
        help="API token (default: $IUCN_REDLIST_KEY, then the saved key)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log requests to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # api subcommand
    api_parser = subparsers.add_parser(
        "api",
        help="Make a raw GET call to any endpoint",
    )
    api_parser.add_argument(
        "endpoint",
        help="API endpoint path (e.g., taxa/sis/12392)",
    )
    api_parser.add_argument(
        "--param",
        action="append",
        type=_query_param,
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter (repeatable, e.g., --param year_published=2020)",
    )
    api_parser.add_argument(
        "--all",
        action="store_true",
        help="Page through all results and combine them",
    )
    api_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress dots (with --all)",
    )

    # species subcommand
    species_parser = subparsers.add_parser(
        "species",
        help="Look up a species by scientific name",
    )
    species_parser.add_argument("genus")
    species_parser.add_argument("species")
    species_parser.add_argument("--infra", default=None, help="Infraspecific name")
    species_parser.add_argument("--subpopulation", default=None, help="Subpopulation name")
    species_parser.add_argument(
        "--latest",
        action="store_true",
        help="Return the latest full assessment instead of the summary",
    )

    # assessment subcommand
    assessment_parser = subparsers.add_parser(
        "assessment",
        help="Fetch a full assessment by id",
    )
    assessment_parser.add_argument("id", type=int)

    # taxa subcommand
    from .taxa import RANKS

    taxa_parser = subparsers.add_parser(
        "taxa",
        help="Assessments for a kingdom, phylum, class, order or family",
    )
    taxa_parser.add_argument("rank", choices=RANKS)
    taxa_parser.add_argument("name", nargs="?", default=None, help="Taxon name (omit to list names)")
    _add_page_args(taxa_parser)

    # codes subcommand
    from .codes import LISTINGS, SCHEMES

    codes_parser = subparsers.add_parser(
        "codes",
        help="Classification scheme codes, or assessments for one code",
    )
    codes_parser.add_argument("scheme", choices=sorted(SCHEMES))
    codes_parser.add_argument("code", nargs="?", default=None, help="Code, e.g. 1.1 (omit to list codes)")
    _add_page_args(codes_parser)

    # list subcommand
    list_parser = subparsers.add_parser(
        "list",
        help="Possibly extinct, possibly extinct in the wild, or Green Status assessments",
    )
    list_parser.add_argument("name", choices=[n.replace("_", "-") for n in LISTINGS])
    _add_page_args(list_parser)

    # version subcommand
    subparsers.add_parser(
        "version",
        help="Show the Red List and API versions",
    )

    # set-key subcommand
    key_parser = subparsers.add_parser(
        "set-key",
        help="Save an API token to the config file",
    )
    key_parser.add_argument("token")
    key_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file (default: ~/.config/iucn-redlist/config.env)",
    )

    return parser


def run(args):
    """Run one parsed command and return the JSON-serialisable result."""
    if args.command == "api":
        from . import client, paging
        from .parsing import parse

        params = dict(args.param)

        if args.all:
            pages = paging.page_records(args.endpoint, args.key, quiet=args.quiet, query=params)
            return paging.combine(pages, flatten=False)
        return parse(client.get(args.endpoint, args.key, query=params), flatten=False)
    elif args.command == "species":
        from . import species

        fn = species.species_latest if args.latest else species.species
        return fn(
            args.genus,
            args.species,
            infra=args.infra,
            subpopulation=args.subpopulation,
            key=args.key,
            parse=False,
        )
    elif args.command == "assessment":
        from .species import assessment

        return assessment(args.id, key=args.key, parse=False)
    elif args.command == "taxa":
        from .taxa import taxon

        return taxon(args.rank, args.name, key=args.key, parse=False, **_page_kwargs(args))
    elif args.command == "codes":
        from .codes import lookup

        return lookup(args.scheme, args.code, key=args.key, parse=False, **_page_kwargs(args))
    elif args.command == "list":
        from .codes import listing

        return listing(args.name.replace("-", "_"), key=args.key, parse=False, **_page_kwargs(args))
    elif args.command == "version":
        from . import info

        return {
            "red_list_version": info.version(args.key),
            "api_version": info.api_version(args.key),
        }
    elif args.command == "set-key":
        from .settings import save_key

        path = save_key(args.token, args.config)
        return {"saved": str(path)}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return

    try:
        result = run(args)
    except RedListError as e:
        sys.stderr.write(f"error: {e}\n")
        sys.exit(1)

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
