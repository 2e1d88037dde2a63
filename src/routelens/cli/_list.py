"""``routelens api|pages|routes`` — print discovered route tables.

Tables are plain fixed-width text; ``--json`` prints the wire shape
instead.
"""

import argparse
import json
import logging
import sys

from routelens.config import DEFAULT_CONFIG
from routelens.errors import RouteLensError
from routelens.project import ProjectRoutes, inspect_project_sync
from routelens.routing.types import HandlerRoute, ViewRoute

logger = logging.getLogger("routelens.cli")


def run_list(args: argparse.Namespace) -> None:
    """Discover routes under ``args.directory`` and print them."""
    config = DEFAULT_CONFIG.with_skip_dirs(*args.skip) if args.skip else DEFAULT_CONFIG
    try:
        project = inspect_project_sync(args.directory, config=config)
    except RouteLensError as exc:
        logger.debug("Route discovery failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.json:
        print(json.dumps(_json_payload(args.command, project), indent=2))
        return

    if args.command in ("api", "routes"):
        _print_handlers(project)
    if args.command == "routes":
        print()
    if args.command in ("pages", "routes"):
        _print_views(project)
    if args.command == "routes":
        summary = project.summary()
        print()
        print(
            f"{summary['handlers']} API route(s), {summary['views']} page(s); "
            f"{summary['missingLoading']} without loading, "
            f"{summary['missingError']} without error"
        )


def _json_payload(command: str, project: ProjectRoutes) -> object:
    if command == "api":
        return [route.to_dict() for route in project.handlers]
    if command == "pages":
        return [route.to_dict() for route in project.views]
    return project.to_dict()


def handler_rows(routes: tuple[HandlerRoute, ...]) -> list[tuple[str, ...]]:
    return [(", ".join(route.methods), route.path, route.file) for route in routes]


def view_rows(routes: tuple[ViewRoute, ...]) -> list[tuple[str, ...]]:
    return [
        (route.path, route.loading.value, route.error.value, route.file)
        for route in routes
    ]


def format_table(headers: tuple[str, ...], rows: list[tuple[str, ...]]) -> str:
    """Left-aligned columns separated by two spaces, last column unpadded."""
    widths = [
        max([len(header)] + [len(row[i]) for row in rows])
        for i, header in enumerate(headers)
    ]
    fmt = "  ".join(f"{{:<{w}}}" for w in widths[:-1]) + "  {}"
    lines = [fmt.format(*headers)]
    sep_len = sum(widths) + 2 * (len(widths) - 1)
    lines.append("-" * min(sep_len, 80))
    lines.extend(fmt.format(*row) for row in rows)
    return "\n".join(lines)


def _print_handlers(project: ProjectRoutes) -> None:
    if not project.handlers:
        print(f"No API routes found under {project.root}")
        return
    print(format_table(("METHODS", "PATH", "FILE"), handler_rows(project.handlers)))


def _print_views(project: ProjectRoutes) -> None:
    if not project.views:
        print(f"No page routes found under {project.root}")
        return
    print(format_table(("PATH", "LOADING", "ERROR", "FILE"), view_rows(project.views)))
