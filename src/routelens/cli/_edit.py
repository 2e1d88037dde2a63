"""``routelens add-method|remove-method|add-fallback`` — edit project files."""

import argparse
import logging
import sys
from typing import NoReturn

from routelens.errors import RouteLensError
from routelens.source.mutation import add_method, remove_method, validate_method
from routelens.source.scaffold import create_fallback_file

logger = logging.getLogger("routelens.cli")


def _fail(exc: RouteLensError) -> NoReturn:
    logger.debug("%s failed: %s", exc.kind, exc.message)
    print(f"Error: {exc}", file=sys.stderr)
    raise SystemExit(1) from exc


def run_method_edit(args: argparse.Namespace) -> None:
    """Add or remove ``args.method`` in the handler file ``args.file``."""
    try:
        method = validate_method(args.method)
        if args.command == "add-method":
            add_method(args.file, method)
            print(f"Added {method} to {args.file}")
        else:
            remove_method(args.file, method)
            print(f"Removed {method} from {args.file}")
    except RouteLensError as exc:
        _fail(exc)


def run_add_fallback(args: argparse.Namespace) -> None:
    """Create a ``loading`` or ``error`` file next to ``args.file``."""
    try:
        created = create_fallback_file(args.file, args.kind)
    except RouteLensError as exc:
        _fail(exc)
    print(f"Created {created}")
