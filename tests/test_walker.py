"""Tests for routelens.routing.walker — recursive directory traversal."""

import os
from pathlib import Path

import pytest

from routelens.config import ScanConfig
from routelens.errors import FilesystemError
from routelens.routing.walker import walk


def _relative(root: Path, paths: list[Path]) -> list[str]:
    return sorted(p.relative_to(root).as_posix() for p in paths)


class TestWalk:
    def test_yields_regular_files(self, tmp_path: Path, make_tree) -> None:
        make_tree(tmp_path, {"a.txt": "", "b/c.txt": "", "b/d/e.txt": ""})
        assert _relative(tmp_path, list(walk(tmp_path))) == ["a.txt", "b/c.txt", "b/d/e.txt"]

    def test_yields_absolute_paths(self, tmp_path: Path, make_tree) -> None:
        make_tree(tmp_path, {"a.txt": ""})
        assert all(p.is_absolute() for p in walk(tmp_path))

    def test_prunes_skip_dirs(self, tmp_path: Path, make_tree) -> None:
        make_tree(
            tmp_path,
            {
                "app/page.tsx": "",
                "node_modules/x/app/page.tsx": "",
                ".git/HEAD": "",
                ".next/server/app/page.js": "",
            },
        )
        assert _relative(tmp_path, list(walk(tmp_path))) == ["app/page.tsx"]

    def test_skip_set_is_configurable(self, tmp_path: Path, make_tree) -> None:
        make_tree(tmp_path, {"vendor/a.ts": "", "src/b.ts": ""})
        config = ScanConfig().with_skip_dirs("vendor")
        assert _relative(tmp_path, list(walk(tmp_path, config=config))) == ["src/b.ts"]

    def test_skip_matches_directory_names_only(self, tmp_path: Path, make_tree) -> None:
        make_tree(tmp_path, {"build": "a file named build"})
        assert _relative(tmp_path, list(walk(tmp_path))) == ["build"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert list(walk(tmp_path)) == []

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FilesystemError) as exc_info:
            list(walk(tmp_path / "nope"))
        assert exc_info.value.kind == "filesystem"
        assert exc_info.value.path == str(tmp_path / "nope")

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_cycle_terminates(self, tmp_path: Path, make_tree) -> None:
        make_tree(tmp_path, {"app/page.tsx": ""})
        try:
            (tmp_path / "app" / "loop").symlink_to(tmp_path / "app", target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks here")
        assert _relative(tmp_path, list(walk(tmp_path))) == ["app/page.tsx"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinked_directory_is_followed_once(self, tmp_path: Path, make_tree) -> None:
        make_tree(tmp_path, {"shared/page.tsx": "", "app/.keep": ""})
        try:
            (tmp_path / "app" / "linked").symlink_to(tmp_path / "shared", target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks here")
        files = _relative(tmp_path, list(walk(tmp_path)))
        assert len([f for f in files if f.endswith("page.tsx")]) == 1
