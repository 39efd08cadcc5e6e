"""Root accessor: well-known folders and path-based creation helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .driver import LocalStorageDriver, StorageDriver, default_driver
from .errors import CreatingFolderFailedError, PathError, WriteFailedError
from .file import File
from .folder import FileContents, Folder
from .paths import parent_location, resolve_location
from .types import Kind

logger = logging.getLogger(__name__)


class FileSystem:
    """Entry point bound to one storage driver.

    Creation helpers here accept full paths and create any missing
    intermediate folders on the way.
    """

    def __init__(self, driver: StorageDriver | None = None) -> None:
        self.driver = driver if driver is not None else default_driver()

    @classmethod
    def from_config(cls) -> FileSystem:
        """Build a file system whose driver honors the persisted config."""
        return cls(LocalStorageDriver.from_config())

    @property
    def current_folder(self) -> Folder:
        return Folder(driver=self.driver)

    @property
    def home_folder(self) -> Folder:
        return Folder(self.driver.home_directory(), driver=self.driver)

    @property
    def temporary_folder(self) -> Folder:
        return Folder(self.driver.temporary_directory(), driver=self.driver)

    @property
    def documents_folder(self) -> Folder | None:
        """The user's documents folder, or ``None`` when it does not exist."""
        try:
            return Folder(self.driver.documents_directory(), driver=self.driver)
        except PathError:
            return None

    def create_file(self, at: str | os.PathLike[str], contents: FileContents = b"") -> File:
        """Create the file at ``at`` along with any missing parent folders.

        Every failure, including an unusable path, raises ``WriteFailedError``.
        """
        try:
            location = resolve_location(at, kind=Kind.FILE, cwd=self.driver.current_directory)
        except PathError as exc:
            raise WriteFailedError(Path(os.fspath(at))) from exc
        parent = parent_location(location)
        if parent is None:
            raise WriteFailedError(location)
        try:
            return self.create_folder(parent).create_file(location.name, contents)
        except CreatingFolderFailedError as exc:
            raise WriteFailedError(location) from exc

    def create_file_if_needed(self, at: str | os.PathLike[str], contents: FileContents = b"") -> File:
        try:
            return File(at, driver=self.driver)
        except PathError:
            logger.debug("No file at %s, creating it", at)
        return self.create_file(at, contents)

    def create_folder(self, at: str | os.PathLike[str]) -> Folder:
        """Create the folder at ``at`` and its intermediate folders.

        An existing folder is returned as-is. Raises ``CreatingFolderFailedError``.
        """
        try:
            location = resolve_location(at, kind=Kind.FOLDER, cwd=self.driver.current_directory)
        except PathError as exc:
            raise CreatingFolderFailedError(Path(os.fspath(at))) from exc
        try:
            self.driver.create_directory(location, parents=True)
            return Folder(location, driver=self.driver)
        except (OSError, PathError) as exc:
            logger.warning("Creating folder %s failed: %s", location, exc)
            raise CreatingFolderFailedError(location) from exc

    def create_folder_if_needed(self, at: str | os.PathLike[str]) -> Folder:
        try:
            return Folder(at, driver=self.driver)
        except PathError:
            logger.debug("No folder at %s, creating it", at)
        return self.create_folder(at)


__all__ = ["FileSystem"]
