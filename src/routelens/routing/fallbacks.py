"""Fallback UI resolution for view routes.

Starting at the view file's directory, probe each directory up to and
including the routing root for ``{kind}{ext}``.  Extensions are tried in
the configured priority order; the first existing file wins.

- Found in the starting directory: co-located
- Found in a strict ancestor: inherited
- Not found before the root (or the filesystem root): missing
"""

import os
import stat
from pathlib import Path

from routelens.config import DEFAULT_CONFIG, ScanConfig
from routelens.errors import FilesystemError
from routelens.routing.types import FallbackInfo, FallbackStatus


def find_fallback_file(
    directory: Path,
    kind: str,
    extensions: tuple[str, ...],
) -> Path | None:
    """Return the first ``{kind}{ext}`` regular file in ``directory``.

    Raises:
        FilesystemError: a candidate could not be checked for a reason
            other than not existing.
    """
    for extension in extensions:
        candidate = directory / f"{kind}{extension}"
        try:
            mode = os.stat(candidate).st_mode
        except (FileNotFoundError, NotADirectoryError):
            continue
        except OSError as exc:
            msg = f"Cannot check {candidate}: {exc.strerror or exc}"
            raise FilesystemError(msg, path=str(candidate)) from exc
        if stat.S_ISREG(mode):
            return candidate
    return None


def resolve_fallback(
    view_dir: str | Path,
    kind: str,
    app_root: str | Path,
    *,
    scan_root: str | Path | None = None,
    config: ScanConfig | None = None,
) -> FallbackInfo:
    """Classify coverage of one fallback kind for a view directory.

    Args:
        view_dir: Directory containing the view file.
        kind: Fallback basename, e.g. ``"loading"`` or ``"error"``.
        app_root: Routing root; the walk never goes above it.
        scan_root: Base for the reported ``path``.  Defaults to ``app_root``.
        config: Supplies the extension priority order.

    Returns:
        A :class:`FallbackInfo` with the status and, when found, the
        forward-slash relative path of the fallback file.
    """
    cfg = config or DEFAULT_CONFIG
    root = Path(os.path.abspath(app_root))
    base = Path(os.path.abspath(scan_root)) if scan_root is not None else root
    current = Path(os.path.abspath(view_dir))
    first = True

    while _is_within(current, root):
        found = find_fallback_file(current, kind, cfg.fallback_extensions)
        if found is not None:
            status = FallbackStatus.CO_LOCATED if first else FallbackStatus.INHERITED
            return FallbackInfo(status=status, path=_relative(found, base))

        if _same_path(current, root):
            break

        parent = current.parent
        if _same_path(parent, current):
            break

        current = parent
        first = False

    return FallbackInfo(status=FallbackStatus.MISSING)


def _is_within(directory: Path, root: Path) -> bool:
    try:
        directory.relative_to(root)
    except ValueError:
        return False
    return True


def _same_path(a: Path, b: Path) -> bool:
    return os.path.normpath(a) == os.path.normpath(b)


def _relative(path: Path, base: Path) -> str:
    return Path(os.path.relpath(path, base)).as_posix()
