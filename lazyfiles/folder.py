"""Folder handles: child lookup, creation, listing and bulk content moves.

Folders keep no cached child list; every lookup and every sequence pass
queries the driver again.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from .driver import StorageDriver, default_driver
from .entity import Entity
from .errors import CopyFailedError, CreatingFolderFailedError, PathError, WriteFailedError
from .file import File
from .paths import below
from .traversal import EntitySequence
from .types import Kind

logger = logging.getLogger(__name__)

FileContents = bytes | str


class Folder(Entity):
    """Handle to a directory."""

    kind = Kind.FOLDER

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        *,
        driver: StorageDriver | None = None,
    ) -> None:
        """Open the folder at ``path``; ``None`` opens the current directory."""
        if path is None:
            path = (driver if driver is not None else default_driver()).current_directory()
        super().__init__(path, driver=driver)

    @classmethod
    def current(cls, *, driver: StorageDriver | None = None) -> Folder:
        return cls(driver=driver)

    @classmethod
    def home(cls, *, driver: StorageDriver | None = None) -> Folder:
        driver = driver if driver is not None else default_driver()
        return cls(driver.home_directory(), driver=driver)

    @classmethod
    def temporary(cls, *, driver: StorageDriver | None = None) -> Folder:
        driver = driver if driver is not None else default_driver()
        return cls(driver.temporary_directory(), driver=driver)

    @property
    def files(self) -> EntitySequence[File]:
        """Non-hidden files directly inside this folder."""
        return self.make_file_sequence()

    @property
    def subfolders(self) -> EntitySequence[Folder]:
        """Non-hidden folders directly inside this folder."""
        return self.make_subfolder_sequence()

    def make_file_sequence(self, recursive: bool = False, include_hidden: bool = False) -> EntitySequence[File]:
        """Return the files of this folder, optionally the whole tree depth-first."""
        return EntitySequence(self, File, recursive=recursive, include_hidden=include_hidden)

    def make_subfolder_sequence(
        self,
        recursive: bool = False,
        include_hidden: bool = False,
    ) -> EntitySequence[Folder]:
        """Return the subfolders of this folder, optionally the whole tree depth-first."""
        return EntitySequence(self, type(self), recursive=recursive, include_hidden=include_hidden)

    def file(self, named: str) -> File:
        """Return the file called ``named`` in this folder.

        Lookups always stay below this folder: a leading separator in
        ``named`` is ignored rather than starting a new absolute path.

        Raises ``EmptyPathError`` / ``InvalidPathError`` when there is none.
        """
        return File(below(self.location, named), driver=self.driver)

    def file_at(self, relative_path: str | os.PathLike[str]) -> File:
        """Return the file at ``relative_path`` below this folder."""
        return File(below(self.location, relative_path), driver=self.driver)

    def subfolder(self, named: str) -> Folder:
        return type(self)(below(self.location, named), driver=self.driver)

    def subfolder_at(self, relative_path: str | os.PathLike[str]) -> Folder:
        return type(self)(below(self.location, relative_path), driver=self.driver)

    def contains_file(self, named: str) -> bool:
        try:
            self.file(named)
        except PathError:
            return False
        return True

    def contains_subfolder(self, named: str) -> bool:
        try:
            self.subfolder(named)
        except PathError:
            return False
        return True

    def create_file(self, named: str, contents: FileContents = b"", encoding: str | None = None) -> File:
        """Create (or truncate) the file ``named`` holding ``contents``.

        ``str`` contents are encoded with ``encoding`` or the driver default.
        Raises ``WriteFailedError``.
        """
        location = Path(below(self.location, named))
        try:
            data = contents.encode(encoding or self.driver.text_encoding) if isinstance(contents, str) else contents
            self.driver.create_file(location, data)
            return File(location, driver=self.driver)
        except (OSError, PathError, UnicodeEncodeError, LookupError) as exc:
            logger.warning("Creating file %s failed: %s", location, exc)
            raise WriteFailedError(location) from exc

    def create_file_if_needed(
        self,
        named: str,
        contents: FileContents | Callable[[], FileContents] = b"",
    ) -> File:
        """Return the existing file ``named`` or create it.

        ``contents`` may be a callable; it is only evaluated when the file is
        actually created.
        """
        try:
            return self.file(named)
        except PathError:
            logger.debug("No file %r in %s, creating it", named, self.location)
        data = contents() if callable(contents) else contents
        return self.create_file(named, data)

    def create_subfolder(self, named: str) -> Folder:
        """Create the folder ``named``; it must not exist yet."""
        location = Path(below(self.location, named))
        try:
            self.driver.create_directory(location, parents=False)
            return type(self)(location, driver=self.driver)
        except (OSError, PathError) as exc:
            logger.warning("Creating folder %s failed: %s", location, exc)
            raise CreatingFolderFailedError(location) from exc

    def create_subfolder_if_needed(self, named: str) -> Folder:
        try:
            return self.subfolder(named)
        except PathError:
            logger.debug("No subfolder %r in %s, creating it", named, self.location)
        return self.create_subfolder(named)

    def move_contents(self, to: Folder, include_hidden: bool = False) -> None:
        """Move every file, then every subfolder, into ``to``."""
        self.make_file_sequence(include_hidden=include_hidden).move(to)
        self.make_subfolder_sequence(include_hidden=include_hidden).move(to)

    def empty(self, include_hidden: bool = False) -> None:
        """Delete the folder's contents but keep the folder itself."""
        for file in self.make_file_sequence(include_hidden=include_hidden):
            file.delete()
        for subfolder in self.make_subfolder_sequence(include_hidden=include_hidden):
            subfolder.delete()

    def is_empty(self, include_hidden: bool = False) -> bool:
        return (
            self.make_file_sequence(include_hidden=include_hidden).first() is None
            and self.make_subfolder_sequence(include_hidden=include_hidden).first() is None
        )

    def copy(self, to: Folder) -> Folder:
        """Copy the whole tree into ``to`` and return a handle to the copy."""
        destination = to.location / self.name
        try:
            self.driver.copy(self.location, destination)
            return type(self)(destination, driver=self.driver)
        except (OSError, PathError) as exc:
            logger.warning("Copy of %s into %s failed: %s", self.location, to.location, exc)
            raise CopyFailedError(self) from exc


__all__ = ["Folder"]
