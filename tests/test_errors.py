"""Tests for routelens.errors — exception hierarchy."""

from routelens.errors import (
    FallbackExistsError,
    FilesystemError,
    InvalidFallbackKindError,
    InvalidMethodError,
    MethodError,
    MethodExistsError,
    MethodNotFoundError,
    RouteLensError,
    UnlocatableBlockError,
)


class TestHierarchy:
    def test_all_inherit_from_base(self) -> None:
        for cls in (
            FilesystemError,
            InvalidMethodError,
            MethodExistsError,
            MethodNotFoundError,
            UnlocatableBlockError,
            InvalidFallbackKindError,
            FallbackExistsError,
        ):
            assert issubclass(cls, RouteLensError)

    def test_method_errors_share_base(self) -> None:
        assert issubclass(MethodExistsError, MethodError)
        assert issubclass(UnlocatableBlockError, MethodError)


class TestValueShape:
    def test_kinds_are_distinct(self) -> None:
        kinds = {
            FilesystemError("x").kind,
            InvalidMethodError("x").kind,
            MethodExistsError("GET").kind,
            MethodNotFoundError("GET").kind,
            UnlocatableBlockError("GET").kind,
        }
        assert len(kinds) == 5

    def test_str_is_message(self) -> None:
        err = MethodExistsError("POST", path="app/api/route.ts")
        assert str(err) == "Method POST already exists"
        assert err.path == "app/api/route.ts"
        assert err.method == "POST"

    def test_to_dict(self) -> None:
        err = FilesystemError("Cannot list directory /x", path="/x")
        assert err.to_dict() == {"kind": "filesystem", "message": "Cannot list directory /x"}
