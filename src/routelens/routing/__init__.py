"""File-convention route discovery.

Conventions::

    app/
      page.tsx                    # /
      loading.tsx                 # fallback inherited by every page below
      (marketing)/about/page.tsx  # /about  (group dropped from the URL)
      blog/[slug]/page.tsx        # /blog/:slug
      docs/[...parts]/page.tsx    # /docs/:parts*
      api/users/[id]/route.ts     # /api/users/:id  (exports GET, POST, ...)
"""

from routelens.routing.discovery import get_handler_routes, get_view_routes
from routelens.routing.fallbacks import resolve_fallback
from routelens.routing.segments import Segment, SegmentKind, classify
from routelens.routing.types import FallbackInfo, FallbackStatus, HandlerRoute, ViewRoute
from routelens.routing.walker import walk

__all__ = [
    "FallbackInfo",
    "FallbackStatus",
    "HandlerRoute",
    "Segment",
    "SegmentKind",
    "ViewRoute",
    "classify",
    "get_handler_routes",
    "get_view_routes",
    "resolve_fallback",
    "walk",
]
