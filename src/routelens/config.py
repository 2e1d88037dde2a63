"""Scan configuration.

ScanConfig is a frozen dataclass — immutable after creation, passed
explicitly into the walker, route builders, and fallback resolver so each
can be tested in isolation with its own conventions.
"""

from dataclasses import dataclass, field, replace

DEFAULT_SKIP_DIRS = frozenset({
    "node_modules",
    ".git",
    ".next",
    "dist",
    "build",
    ".turbo",
    ".vercel",
    "out",
    "coverage",
})


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Route discovery conventions. Immutable after creation.

    All fields have sensible defaults for an App Router project.
    Override what you need::

        config = ScanConfig(skip_dirs=frozenset({"node_modules", "vendor"}))
    """

    # Walker
    skip_dirs: frozenset[str] = field(default=DEFAULT_SKIP_DIRS)
    follow_symlinks: bool = True

    # Routing root and handler routes
    app_dir: str = "app"
    api_segment: str = "api"
    handler_basename: str = "route"
    handler_extensions: tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx")

    # View routes.  The extension order doubles as fallback probe priority.
    view_basename: str = "page"
    view_extensions: tuple[str, ...] = (
        ".ts",
        ".tsx",
        ".js",
        ".jsx",
        ".mdx",
        ".md",
        ".mjs",
        ".cjs",
    )
    fallback_kinds: tuple[str, ...] = ("loading", "error")

    @property
    def fallback_extensions(self) -> tuple[str, ...]:
        return self.view_extensions

    def with_skip_dirs(self, *names: str) -> "ScanConfig":
        """Return a copy that also prunes the given directory names."""
        return replace(self, skip_dirs=self.skip_dirs | frozenset(names))


DEFAULT_CONFIG = ScanConfig()
