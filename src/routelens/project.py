"""Async project inspection.

Walks a project once in a worker thread, then builds handler and view
routes concurrently in an anyio task group.  Each view file resolves its
loading and error fallbacks concurrently as well.  Everything is sorted
after gathering, so the result matches :func:`get_handler_routes` and
:func:`get_view_routes` exactly regardless of completion order.

Usage::

    routes = await inspect_project("~/code/shop")
    for route in routes.handlers:
        print(route.path, route.methods)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import anyio

from routelens.config import DEFAULT_CONFIG, ScanConfig
from routelens.errors import FilesystemError, RouteLensError
from routelens.routing.discovery import (
    build_handler_route,
    is_handler_file,
    is_view_file,
    locate,
    sort_handler_routes,
    sort_view_routes,
    view_route_path,
)
from routelens.routing.fallbacks import resolve_fallback
from routelens.routing.types import FallbackInfo, FallbackStatus, HandlerRoute, ViewRoute
from routelens.routing.walker import walk

logger = logging.getLogger("routelens.project")


def expand_home(target: str) -> str:
    if target == "~":
        return os.path.expanduser("~")
    if target.startswith("~/"):
        return os.path.join(os.path.expanduser("~"), target[2:])
    return target


def ensure_directory(target: str | Path | None) -> Path:
    """Resolve ``target`` (default: cwd) and check it is a directory.

    Raises:
        FilesystemError: If the path is missing or not a directory.
    """
    resolved = Path(expand_home(str(target))).resolve() if target else Path.cwd()
    try:
        is_dir = resolved.is_dir()
        exists = is_dir or resolved.exists()
    except OSError as exc:
        raise FilesystemError(f"Cannot access {resolved}: {exc}", path=str(resolved)) from exc
    if not exists:
        raise FilesystemError(f"Cannot access {resolved}: no such directory", path=str(resolved))
    if not is_dir:
        raise FilesystemError(f"{resolved} is not a directory", path=str(resolved))
    return resolved


@dataclass(frozen=True, slots=True)
class ProjectRoutes:
    """Both route tables for one project.

    Attributes:
        root: The scanned directory.
        handlers: Handler routes, sorted.
        views: View routes, sorted.
    """

    root: Path
    handlers: tuple[HandlerRoute, ...]
    views: tuple[ViewRoute, ...]

    def summary(self) -> dict[str, int]:
        """Counts of routes and of view routes missing each fallback."""
        return {
            "handlers": len(self.handlers),
            "views": len(self.views),
            "missingLoading": sum(1 for v in self.views if v.loading is FallbackStatus.MISSING),
            "missingError": sum(1 for v in self.views if v.error is FallbackStatus.MISSING),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": str(self.root),
            "handlers": [route.to_dict() for route in self.handlers],
            "views": [route.to_dict() for route in self.views],
            "summary": self.summary(),
        }


async def inspect_project(
    root: str | Path | None,
    *,
    config: ScanConfig | None = None,
) -> ProjectRoutes:
    """Discover handler and view routes under ``root`` concurrently."""
    cfg = config or DEFAULT_CONFIG
    base = ensure_directory(root)

    files = await anyio.to_thread.run_sync(_collect_files, base, cfg)
    logger.debug("Walked %s: %d candidate files", base, len(files))

    handler_files = [f for f in files if is_handler_file(f.name, config=cfg)]
    view_files = [f for f in files if is_view_file(f.name, config=cfg)]

    handlers: list[HandlerRoute] = []
    views: list[ViewRoute] = []

    async def _handler(file_path: Path) -> None:
        route = await anyio.to_thread.run_sync(_build_handler, file_path, base, cfg)
        if route is not None:
            handlers.append(route)

    async def _view(file_path: Path) -> None:
        route = await _build_view(file_path, base, cfg)
        if route is not None:
            views.append(route)

    try:
        async with anyio.create_task_group() as tg:
            for file_path in handler_files:
                tg.start_soon(_handler, file_path)
            for file_path in view_files:
                tg.start_soon(_view, file_path)
    except ExceptionGroup as group:
        error = _first_error(group)
        if error is None:
            raise
        raise error from None

    result = ProjectRoutes(
        root=base,
        handlers=tuple(sort_handler_routes(handlers)),
        views=tuple(sort_view_routes(views)),
    )
    logger.debug(
        "Discovered %d handler routes and %d view routes under %s",
        len(result.handlers),
        len(result.views),
        base,
    )
    return result


def inspect_project_sync(root: str | Path | None, *, config: ScanConfig | None = None) -> ProjectRoutes:
    """Blocking wrapper around :func:`inspect_project`."""

    async def _run() -> ProjectRoutes:
        return await inspect_project(root, config=config)

    return anyio.run(_run)


def _first_error(group: BaseExceptionGroup) -> RouteLensError | None:
    """Find the first routelens error in a (possibly nested) task group failure."""
    for exc in group.exceptions:
        if isinstance(exc, RouteLensError):
            return exc
        if isinstance(exc, BaseExceptionGroup):
            found = _first_error(exc)
            if found is not None:
                return found
    return None


def _collect_files(root: Path, config: ScanConfig) -> list[Path]:
    return list(walk(root, config=config))


def _build_handler(file_path: Path, root: Path, config: ScanConfig) -> HandlerRoute | None:
    return build_handler_route(file_path, root, config=config)


async def _build_view(file_path: Path, root: Path, config: ScanConfig) -> ViewRoute | None:
    location = locate(file_path, root, config=config)
    if location is None:
        return None

    view_dir = file_path.parent
    resolved: dict[str, FallbackInfo] = {}

    async def _resolve(kind: str) -> None:
        resolved[kind] = await anyio.to_thread.run_sync(
            lambda: resolve_fallback(
                view_dir, kind, location.app_root, scan_root=root, config=config
            )
        )

    async with anyio.create_task_group() as tg:
        tg.start_soon(_resolve, "loading")
        tg.start_soon(_resolve, "error")

    loading, error = resolved["loading"], resolved["error"]
    return ViewRoute(
        file=location.file,
        path=view_route_path(location),
        loading=loading.status,
        error=error.status,
        loading_path=loading.path,
        error_path=error.path,
    )
