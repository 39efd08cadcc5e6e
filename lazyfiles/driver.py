"""Storage driver collaborator: raw filesystem calls used by handles.

``StorageDriver`` is the interface handles depend on; ``LocalStorageDriver``
implements it against the local disk. Drivers raise ``OSError`` subclasses
and leave translation into domain errors to the handles.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

from platformdirs import user_documents_dir

from . import config
from .types import ItemAttributes, Kind


class StorageDriver(Protocol):
    """Operations an entity handle needs from the underlying storage."""

    follow_symlinks: bool
    text_encoding: str

    def kind_of(self, location: Path) -> Kind | None: ...

    def list_names(self, location: Path) -> list[str]: ...

    def create_file(self, location: Path, data: bytes) -> None: ...

    def create_directory(self, location: Path, parents: bool) -> None: ...

    def move(self, source: Path, destination: Path) -> None: ...

    def copy(self, source: Path, destination: Path) -> None: ...

    def remove(self, location: Path) -> None: ...

    def read(self, location: Path) -> bytes: ...

    def write(self, location: Path, data: bytes) -> None: ...

    def append(self, location: Path, data: bytes) -> None: ...

    def attributes(self, location: Path) -> ItemAttributes: ...

    def is_symlink(self, location: Path) -> bool: ...

    def real_location(self, location: Path) -> Path: ...

    def current_directory(self) -> Path: ...

    def home_directory(self) -> Path: ...

    def temporary_directory(self) -> Path: ...

    def documents_directory(self) -> Path: ...


class LocalStorageDriver:
    """Local-disk driver built on ``os``, ``shutil`` and ``platformdirs``."""

    def __init__(
        self,
        *,
        follow_symlinks: bool = False,
        text_encoding: str = config.DEFAULT_TEXT_ENCODING,
    ) -> None:
        self.follow_symlinks = follow_symlinks
        self.text_encoding = text_encoding

    @classmethod
    def from_config(cls) -> LocalStorageDriver:
        """Build a driver from the persisted JSON config."""
        return cls(
            follow_symlinks=config.load_follow_symlinks(),
            text_encoding=config.load_text_encoding(),
        )

    def __repr__(self) -> str:
        return (
            f"LocalStorageDriver(follow_symlinks={self.follow_symlinks!r}, "
            f"text_encoding={self.text_encoding!r})"
        )

    def kind_of(self, location: Path) -> Kind | None:
        """Return the kind of the entry at ``location`` following symlinks."""
        try:
            is_dir = location.is_dir()
            exists = is_dir or location.exists()
        except OSError:
            return None
        if not exists:
            return None
        return Kind.FOLDER if is_dir else Kind.FILE

    def list_names(self, location: Path) -> list[str]:
        """Return entry names under ``location`` sorted; ``[]`` when unreadable."""
        try:
            names = os.listdir(location)
        except OSError:
            return []
        return sorted(names)

    def create_file(self, location: Path, data: bytes) -> None:
        location.write_bytes(data)

    def create_directory(self, location: Path, parents: bool) -> None:
        location.mkdir(parents=parents, exist_ok=parents)

    def move(self, source: Path, destination: Path) -> None:
        """Move ``source`` to ``destination``, refusing to overwrite."""
        if os.path.lexists(destination):
            raise FileExistsError(17, "Destination already exists", str(destination))
        if not os.path.lexists(source):
            raise FileNotFoundError(2, "No such file or directory", str(source))
        shutil.move(os.fspath(source), os.fspath(destination))

    def copy(self, source: Path, destination: Path) -> None:
        """Copy a file or a whole folder tree, refusing to overwrite."""
        if os.path.lexists(destination):
            raise FileExistsError(17, "Destination already exists", str(destination))
        if source.is_dir():
            shutil.copytree(source, destination, symlinks=True)
        else:
            shutil.copy2(source, destination)

    def remove(self, location: Path) -> None:
        """Remove files and links directly, folders recursively."""
        if location.is_dir() and not location.is_symlink():
            shutil.rmtree(location)
        else:
            os.unlink(location)

    def read(self, location: Path) -> bytes:
        return location.read_bytes()

    def write(self, location: Path, data: bytes) -> None:
        location.write_bytes(data)

    def append(self, location: Path, data: bytes) -> None:
        # "r+b" instead of "ab" so a deleted file fails instead of being recreated.
        with location.open("r+b") as handle:
            handle.seek(0, os.SEEK_END)
            handle.write(data)

    def attributes(self, location: Path) -> ItemAttributes:
        stat = location.stat()
        return ItemAttributes(
            modification_date=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            size=int(stat.st_size),
            is_symlink=location.is_symlink(),
        )

    def is_symlink(self, location: Path) -> bool:
        try:
            return location.is_symlink()
        except OSError:
            return False

    def real_location(self, location: Path) -> Path:
        return Path(os.path.realpath(location))

    def current_directory(self) -> Path:
        return Path(os.getcwd())

    def home_directory(self) -> Path:
        return Path.home()

    def temporary_directory(self) -> Path:
        return Path(tempfile.gettempdir())

    def documents_directory(self) -> Path:
        return Path(user_documents_dir())


_DEFAULT_DRIVER: LocalStorageDriver | None = None


def default_driver() -> LocalStorageDriver:
    """Return the process-wide local driver, creating it on first use."""
    global _DEFAULT_DRIVER
    if _DEFAULT_DRIVER is None:
        _DEFAULT_DRIVER = LocalStorageDriver()
    return _DEFAULT_DRIVER


__all__ = [
    "StorageDriver",
    "LocalStorageDriver",
    "default_driver",
]
