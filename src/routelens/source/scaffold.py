"""Create co-located fallback files for view routes."""

from pathlib import Path

from routelens.config import DEFAULT_CONFIG, ScanConfig
from routelens.errors import FallbackExistsError, FilesystemError, InvalidFallbackKindError
from routelens.source.templates import FALLBACK_TEMPLATES, render_fallback


def create_fallback_file(
    view_file: str | Path,
    kind: str,
    *,
    config: ScanConfig | None = None,
) -> Path:
    """Write a ``loading`` or ``error`` component next to ``view_file``.

    The new file uses the view file's own extension, so ``page.tsx``
    gets ``loading.tsx``.

    Returns:
        Path of the created file.

    Raises:
        InvalidFallbackKindError: ``kind`` is not a configured fallback kind.
        FallbackExistsError: the target file already exists.
        FilesystemError: the file could not be written.
    """
    cfg = config or DEFAULT_CONFIG
    if kind not in cfg.fallback_kinds or kind not in FALLBACK_TEMPLATES:
        raise InvalidFallbackKindError(kind)

    page = Path(view_file)
    target = page.with_name(f"{kind}{page.suffix}")
    if target.exists():
        raise FallbackExistsError(str(target))

    content = render_fallback(kind).rstrip("\n") + "\n"
    try:
        with target.open("x", encoding="utf-8") as fh:
            fh.write(content)
    except FileExistsError:
        raise FallbackExistsError(str(target)) from None
    except OSError as exc:
        msg = f"Cannot write {target}: {exc.strerror or exc}"
        raise FilesystemError(msg, path=str(target)) from exc
    return target
