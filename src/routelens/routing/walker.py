"""Recursive directory traversal.

Yields every regular file below a root, pruning directories whose name
is in the configured skip-set.  Symlinked directories are followed once:
each directory's resolved real path is remembered and never re-entered,
so symlink cycles terminate.

Traversal order follows ``os.scandir`` and is not stable across
platforms.  Callers sort downstream.
"""

import os
from collections.abc import Iterator
from pathlib import Path

from routelens.config import DEFAULT_CONFIG, ScanConfig
from routelens.errors import FilesystemError


def walk(root: str | Path, *, config: ScanConfig | None = None) -> Iterator[Path]:
    """Walk ``root`` depth-first, yielding absolute paths of regular files.

    Args:
        root: Directory to start from.  Assumed to exist.
        config: Scan conventions; only ``skip_dirs`` and
            ``follow_symlinks`` are consulted.

    Raises:
        FilesystemError: If any directory cannot be listed.
    """
    cfg = config or DEFAULT_CONFIG
    start = Path(root).absolute()
    visited: set[str] = set()
    yield from _walk_directory(start, cfg, visited)


def _walk_directory(directory: Path, config: ScanConfig, visited: set[str]) -> Iterator[Path]:
    real = os.path.realpath(directory)
    if real in visited:
        return
    visited.add(real)

    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as exc:
        msg = f"Cannot list directory {directory}: {exc.strerror or exc}"
        raise FilesystemError(msg, path=str(directory)) from exc

    subdirectories: list[Path] = []
    for entry in entries:
        if entry.is_dir(follow_symlinks=config.follow_symlinks):
            if entry.name in config.skip_dirs:
                continue
            subdirectories.append(directory / entry.name)
            continue
        if entry.is_file(follow_symlinks=config.follow_symlinks):
            yield directory / entry.name

    for subdirectory in subdirectories:
        yield from _walk_directory(subdirectory, config, visited)
