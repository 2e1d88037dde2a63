"""Data models for discovered routes.

Immutable frozen dataclasses built fresh on every scan.  ``to_dict()``
produces the JSON wire shape consumed by the CLI and other
collaborators; field names there are part of that contract.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FallbackStatus(str, Enum):
    """Where a view route's fallback UI comes from."""

    CO_LOCATED = "co-located"
    INHERITED = "inherited"
    MISSING = "missing"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Result of resolving one fallback kind for a view file.

    Attributes:
        status: Coverage classification.
        path: Forward-slash path of the fallback file, relative to the
            scan root.  ``None`` when missing.
    """

    status: FallbackStatus
    path: str | None = None


@dataclass(frozen=True, slots=True)
class HandlerRoute:
    """A route backed by a file exporting HTTP verb handlers.

    Attributes:
        file: Forward-slash path relative to the scan root.
        path: URL pattern (e.g., ``/api/users/:id``).
        methods: Verbs in canonical order (e.g., ``("GET", "POST")``).
    """

    file: str
    path: str
    methods: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"file": self.file, "methods": list(self.methods), "path": self.path}


@dataclass(frozen=True, slots=True)
class ViewRoute:
    """A renderable page route annotated with fallback coverage.

    Attributes:
        file: Forward-slash path relative to the scan root.
        path: URL pattern (e.g., ``/blog/:slug``).
        loading: Coverage of the loading fallback.
        error: Coverage of the error fallback.
        loading_path: Where the loading fallback was found, if anywhere.
        error_path: Where the error fallback was found, if anywhere.
    """

    file: str
    path: str
    loading: FallbackStatus
    error: FallbackStatus
    loading_path: str | None = None
    error_path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "file": self.file,
            "path": self.path,
            "loading": self.loading.value,
            "error": self.error.value,
        }
        if self.loading_path is not None:
            data["loadingPath"] = self.loading_path
        if self.error_path is not None:
            data["errorPath"] = self.error_path
        return data
