"""Route discovery for App Router style project trees.

Walks a project and builds two tables:

- handler routes: ``route.{ts,tsx,js,jsx}`` files under ``app/api/...``
  that export at least one HTTP verb
- view routes: ``page.*`` files under ``app/``, each annotated with
  loading and error fallback coverage

The routing root is the *last* directory literally named ``app`` on the
way from the scan root to the file.  Files without one are not routes.
Directory names between the routing root and the file are classified
into URL tokens; group ``(name)`` and slot ``@name`` directories are
dropped from the URL but still walked for fallback resolution.

Both tables are sorted by route path, then by file, so discovery order
never shows up in the result.
"""

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from routelens.config import DEFAULT_CONFIG, ScanConfig
from routelens.errors import FilesystemError
from routelens.routing.fallbacks import resolve_fallback
from routelens.routing.segments import build_route_path, route_segments
from routelens.routing.types import HandlerRoute, ViewRoute
from routelens.routing.walker import walk
from routelens.source.exports import extract_methods


@dataclass(frozen=True, slots=True)
class RouteLocation:
    """Where a candidate file sits relative to the scan and routing roots.

    Attributes:
        file: Forward-slash path relative to the scan root.
        app_root: Absolute path of the routing root directory.
        segments: Directory names strictly between the routing root and
            the file.
    """

    file: str
    app_root: Path
    segments: tuple[str, ...]


def locate(file_path: str | Path, root: str | Path, *, config: ScanConfig | None = None) -> RouteLocation | None:
    """Find the routing root for ``file_path``.

    Returns ``None`` if no directory named ``config.app_dir`` sits between
    ``root`` and the file.
    """
    cfg = config or DEFAULT_CONFIG
    base = Path(os.path.abspath(root))
    relative = PurePosixPath(Path(os.path.relpath(os.path.abspath(file_path), base)).as_posix())
    parts = relative.parts
    directories = parts[:-1]

    app_index = _last_index(directories, cfg.app_dir)
    if app_index is None:
        return None

    return RouteLocation(
        file=relative.as_posix(),
        app_root=base.joinpath(*parts[: app_index + 1]),
        segments=tuple(directories[app_index + 1 :]),
    )


def is_handler_file(name: str, *, config: ScanConfig | None = None) -> bool:
    cfg = config or DEFAULT_CONFIG
    stem, ext = os.path.splitext(name)
    return stem == cfg.handler_basename and ext in cfg.handler_extensions


def is_view_file(name: str, *, config: ScanConfig | None = None) -> bool:
    cfg = config or DEFAULT_CONFIG
    stem, ext = os.path.splitext(name)
    return stem == cfg.view_basename and ext in cfg.view_extensions


def handler_route_path(location: RouteLocation, *, config: ScanConfig | None = None) -> str | None:
    """URL pattern for a handler file, or ``None`` if it is outside ``api``."""
    cfg = config or DEFAULT_CONFIG
    segments = route_segments(location.segments)
    if not segments or segments[0].raw != cfg.api_segment:
        return None
    return build_route_path(segments)


def view_route_path(location: RouteLocation) -> str:
    return build_route_path(route_segments(location.segments))


def build_handler_route(
    file_path: str | Path,
    root: str | Path,
    *,
    config: ScanConfig | None = None,
) -> HandlerRoute | None:
    """Build the handler route for one file, or ``None`` if it is not one.

    A file qualifies when it follows the handler naming convention, sits
    under ``app/api``, and exports at least one HTTP verb.
    """
    cfg = config or DEFAULT_CONFIG
    path = Path(file_path)
    if not is_handler_file(path.name, config=cfg):
        return None
    location = locate(path, root, config=cfg)
    if location is None:
        return None
    route_path = handler_route_path(location, config=cfg)
    if route_path is None:
        return None

    methods = extract_methods(_read_source(path))
    if not methods:
        return None
    return HandlerRoute(file=location.file, path=route_path, methods=tuple(methods))


def build_view_route(
    file_path: str | Path,
    root: str | Path,
    *,
    config: ScanConfig | None = None,
) -> ViewRoute | None:
    """Build the view route for one page file, or ``None`` if it is not one."""
    cfg = config or DEFAULT_CONFIG
    path = Path(file_path)
    if not is_view_file(path.name, config=cfg):
        return None
    location = locate(path, root, config=cfg)
    if location is None:
        return None

    view_dir = Path(os.path.abspath(path)).parent
    loading = resolve_fallback(view_dir, "loading", location.app_root, scan_root=root, config=cfg)
    error = resolve_fallback(view_dir, "error", location.app_root, scan_root=root, config=cfg)

    return ViewRoute(
        file=location.file,
        path=view_route_path(location),
        loading=loading.status,
        error=error.status,
        loading_path=loading.path,
        error_path=error.path,
    )


def get_handler_routes(root: str | Path, *, config: ScanConfig | None = None) -> list[HandlerRoute]:
    """Discover every handler route under ``root``, sorted."""
    cfg = config or DEFAULT_CONFIG
    routes: list[HandlerRoute] = []
    for file_path in walk(root, config=cfg):
        route = build_handler_route(file_path, root, config=cfg)
        if route is not None:
            routes.append(route)
    return sort_handler_routes(routes)


def get_view_routes(root: str | Path, *, config: ScanConfig | None = None) -> list[ViewRoute]:
    """Discover every view route under ``root``, sorted."""
    cfg = config or DEFAULT_CONFIG
    routes: list[ViewRoute] = []
    for file_path in walk(root, config=cfg):
        route = build_view_route(file_path, root, config=cfg)
        if route is not None:
            routes.append(route)
    return sort_view_routes(routes)


def sort_handler_routes(routes: Iterable[HandlerRoute]) -> list[HandlerRoute]:
    return sorted(routes, key=lambda r: (r.path, r.file, ",".join(r.methods)))


def sort_view_routes(routes: Iterable[ViewRoute]) -> list[ViewRoute]:
    return sorted(routes, key=lambda r: (r.path, r.file))


def _last_index(parts: tuple[str, ...], value: str) -> int | None:
    for index in range(len(parts) - 1, -1, -1):
        if parts[index] == value:
            return index
    return None


def _read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read {path}: {exc.strerror or exc}"
        raise FilesystemError(msg, path=str(path)) from exc
