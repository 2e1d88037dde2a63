"""Routelens — inspect App Router route trees and edit route handlers.

Turns a project's ``app/`` directory into two sorted tables: API handler
routes with the HTTP verbs they export, and page routes with their
loading/error fallback coverage.  Can also add or remove a single verb
export in a route handler file without a full parser.

Basic usage::

    from routelens import get_handler_routes, get_view_routes

    for route in get_handler_routes("~/code/shop"):
        print(route.path, route.methods)

Concurrent inspection::

    from routelens import inspect_project
    project = await inspect_project("~/code/shop")

Editing handlers::

    from routelens import add_method, remove_method
    add_method("app/api/users/route.ts", "POST")
"""

__version__ = "0.1.0"
__all__ = [
    "FallbackExistsError",
    "FallbackInfo",
    "FallbackStatus",
    "FilesystemError",
    "HandlerRoute",
    "InvalidFallbackKindError",
    "InvalidMethodError",
    "MethodExistsError",
    "MethodNotFoundError",
    "ProjectRoutes",
    "RouteLensError",
    "ScanConfig",
    "Segment",
    "SegmentKind",
    "UnlocatableBlockError",
    "ViewRoute",
    "add_method",
    "classify",
    "create_fallback_file",
    "extract_methods",
    "get_handler_routes",
    "get_view_routes",
    "inspect_project",
    "remove_method",
    "resolve_fallback",
    "walk",
]

_LAZY = {
    "ScanConfig": "routelens.config",
    "FallbackExistsError": "routelens.errors",
    "FilesystemError": "routelens.errors",
    "InvalidFallbackKindError": "routelens.errors",
    "InvalidMethodError": "routelens.errors",
    "MethodExistsError": "routelens.errors",
    "MethodNotFoundError": "routelens.errors",
    "RouteLensError": "routelens.errors",
    "UnlocatableBlockError": "routelens.errors",
    "Segment": "routelens.routing.segments",
    "SegmentKind": "routelens.routing.segments",
    "classify": "routelens.routing.segments",
    "walk": "routelens.routing.walker",
    "FallbackInfo": "routelens.routing.types",
    "FallbackStatus": "routelens.routing.types",
    "HandlerRoute": "routelens.routing.types",
    "ViewRoute": "routelens.routing.types",
    "resolve_fallback": "routelens.routing.fallbacks",
    "get_handler_routes": "routelens.routing.discovery",
    "get_view_routes": "routelens.routing.discovery",
    "extract_methods": "routelens.source.exports",
    "add_method": "routelens.source.mutation",
    "remove_method": "routelens.source.mutation",
    "create_fallback_file": "routelens.source.scaffold",
    "ProjectRoutes": "routelens.project",
    "inspect_project": "routelens.project",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routelens`` from pulling in anyio and kida until needed.
    """
    module_name = _LAZY.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
