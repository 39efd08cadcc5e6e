"""Path resolution for entity handles.

Turns user-supplied paths into absolute, lexically normalized locations.
Nothing here touches storage: existence and kind checks are layered on top
by the handle constructors.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from .errors import EmptyPathError
from .types import Kind

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


def denotes_directory(raw: str) -> bool:
    """Return whether ``raw`` is syntactically a directory path.

    True for a trailing separator and for a last segment of ``.`` or ``..``.
    """
    if raw.endswith(_SEPARATORS):
        return True
    last_segment = raw
    for sep in _SEPARATORS:
        last_segment = last_segment.rsplit(sep, 1)[-1]
    return last_segment in (".", "..")


def resolve_location(
    path: str | os.PathLike[str],
    *,
    kind: Kind,
    cwd: Callable[[], Path],
) -> Path:
    """Return the absolute, normalized location for ``path``.

    Raises ``EmptyPathError`` for an empty path, and for a directory-denoting
    path when ``kind`` is ``Kind.FILE``. Relative paths are anchored at
    ``cwd()``. Symlinks are not resolved.
    """
    raw = os.fspath(path)
    if not raw:
        raise EmptyPathError()
    if kind is Kind.FILE and denotes_directory(raw):
        raise EmptyPathError()

    location = Path(raw)
    if not location.is_absolute():
        location = cwd() / location
    return Path(os.path.normpath(location))


def parent_location(location: Path) -> Path | None:
    """Return the immediate ancestor of ``location``, or ``None`` at the root."""
    parent = location.parent
    if parent == location:
        return None
    return parent


def is_plain_name(name: str) -> bool:
    """Return whether ``name`` is a single, real path component."""
    if name in ("", ".", ".."):
        return False
    return not any(sep in name for sep in _SEPARATORS)


def below(base: Path, relative: str | os.PathLike[str]) -> str:
    """Join ``relative`` under ``base`` even when it starts with a separator.

    Trailing separators are kept so directory-denoting input still reads as
    such to ``resolve_location``.
    """
    return os.path.join(os.fspath(base), os.fspath(relative).lstrip("".join(_SEPARATORS)))


def split_extension(name: str) -> tuple[str, str | None]:
    """Split ``name`` into ``(stem, extension)``.

    The extension is whatever follows the last dot. Names without a dot,
    dot-files such as ``.bashrc`` and names ending in a dot have none.
    """
    index = name.rfind(".")
    if index <= 0 or index == len(name) - 1:
        return name, None
    return name[:index], name[index + 1 :]


__all__ = [
    "denotes_directory",
    "resolve_location",
    "parent_location",
    "is_plain_name",
    "below",
    "split_extension",
]
