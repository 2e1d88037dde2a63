"""Routelens CLI — list discovered routes and edit route handler exports.

Entry point registered as ``routelens`` in ``pyproject.toml``::

    [project.scripts]
    routelens = "routelens.cli:main"
"""

import argparse
import logging
import sys

from routelens.source.exports import METHOD_ORDER


def _add_listing_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Project directory (defaults to the current working directory)",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    parser.add_argument(
        "--skip",
        action="append",
        default=[],
        metavar="NAME",
        help="Extra directory name to skip (repeatable)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routelens`` command."""
    parser = argparse.ArgumentParser(
        prog="routelens",
        description="routelens — Inspect App Router routes and edit route handlers.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # -- routelens api ----------------------------------------------------
    api_parser = subparsers.add_parser("api", help="List API handler routes")
    _add_listing_args(api_parser)

    # -- routelens pages --------------------------------------------------
    pages_parser = subparsers.add_parser("pages", help="List page routes with fallback coverage")
    _add_listing_args(pages_parser)

    # -- routelens routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List both route tables with a summary")
    _add_listing_args(routes_parser)

    # -- routelens add-method / remove-method -----------------------------
    method_help = f"HTTP method ({', '.join(METHOD_ORDER)})"
    add_parser = subparsers.add_parser("add-method", help="Append a handler stub to a route file")
    add_parser.add_argument("file", help="Route handler file")
    add_parser.add_argument("method", help=method_help)

    remove_parser = subparsers.add_parser("remove-method", help="Remove a handler from a route file")
    remove_parser.add_argument("file", help="Route handler file")
    remove_parser.add_argument("method", help=method_help)

    # -- routelens add-fallback -------------------------------------------
    fallback_parser = subparsers.add_parser(
        "add-fallback", help="Create a loading or error file next to a page"
    )
    fallback_parser.add_argument("file", help="Page file")
    fallback_parser.add_argument("kind", choices=["loading", "error"], help="Fallback kind")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command in ("api", "pages", "routes"):
        from routelens.cli._list import run_list

        run_list(args)
    elif args.command in ("add-method", "remove-method"):
        from routelens.cli._edit import run_method_edit

        run_method_edit(args)
    elif args.command == "add-fallback":
        from routelens.cli._edit import run_add_fallback

        run_add_fallback(args)
