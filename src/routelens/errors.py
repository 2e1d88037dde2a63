"""Routelens exception hierarchy.

Shared across discovery, source mutation, and the CLI so every module
raises and catches the same types.  Errors are value-like: each carries
a stable ``kind`` string and a human-readable message, and serialises
to a small dict for JSON consumers.
"""

from typing import ClassVar


class RouteLensError(Exception):
    """Base for all routelens-specific errors."""

    kind: ClassVar[str] = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "message": self.message}


class FilesystemError(RouteLensError):
    """A directory could not be listed or a file could not be read/written.

    Propagated as-is; the current walk is aborted and nothing is retried.
    """

    kind = "filesystem"

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class MethodError(RouteLensError):
    """Base for errors about a single HTTP verb in a handler file."""

    def __init__(self, message: str, *, method: str, path: str | None = None) -> None:
        super().__init__(message)
        self.method = method
        self.path = path


class InvalidMethodError(MethodError):
    """Requested verb is outside the recognised set.  Raised before any I/O."""

    kind = "invalid_method"

    def __init__(self, method: str) -> None:
        super().__init__(f"Invalid HTTP method: {method}", method=method)


class MethodExistsError(MethodError):
    """``add_method`` found an export already bound to the verb."""

    kind = "method_exists"

    def __init__(self, method: str, *, path: str | None = None) -> None:
        super().__init__(f"Method {method} already exists", method=method, path=path)


class MethodNotFoundError(MethodError):
    """``remove_method`` found no export shape bound to the verb."""

    kind = "method_not_found"

    def __init__(self, method: str, *, path: str | None = None) -> None:
        super().__init__(f"Method {method} not found", method=method, path=path)


class UnlocatableBlockError(MethodError):
    """An export head matched but its terminator could not be found.

    Indicates malformed source; surfaced rather than guessed at.
    """

    kind = "unlocatable_block"

    def __init__(self, method: str, *, path: str | None = None) -> None:
        super().__init__(
            f"Could not locate the end of the {method} handler block",
            method=method,
            path=path,
        )


class InvalidFallbackKindError(RouteLensError):
    """Requested fallback kind is not one of the configured kinds."""

    kind = "invalid_fallback_kind"

    def __init__(self, fallback_kind: str) -> None:
        super().__init__(f"Invalid fallback kind: {fallback_kind}")
        self.fallback_kind = fallback_kind


class FallbackExistsError(RouteLensError):
    """A fallback file already exists next to the view file."""

    kind = "fallback_exists"

    def __init__(self, path: str) -> None:
        super().__init__(f"{path} already exists")
        self.path = path
