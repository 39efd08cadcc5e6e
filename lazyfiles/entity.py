"""Entity handle base shared by files and folders.

A handle owns a mutable identity (``location`` and ``name``) and a ``kind``
fixed at construction. Rename and move update the identity in place only
after the driver call succeeds. Delete leaves the handle alive but dangling:
later calls surface the driver's not-found failure through the usual errors.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from .driver import StorageDriver, default_driver
from .errors import (
    DeleteFailedError,
    InvalidPathError,
    MoveFailedError,
    OperationError,
    PathError,
    RenameFailedError,
)
from .paths import is_plain_name, parent_location, resolve_location, split_extension
from .types import Kind

if TYPE_CHECKING:
    from .folder import Folder

logger = logging.getLogger(__name__)


class Entity:
    """Handle to one file-system entry of a fixed kind."""

    kind: ClassVar[Kind]

    def __init__(self, path: str | os.PathLike[str], *, driver: StorageDriver | None = None) -> None:
        self._driver = driver if driver is not None else default_driver()
        location = resolve_location(path, kind=self.kind, cwd=self._driver.current_directory)
        if self._driver.kind_of(location) is not self.kind:
            raise InvalidPathError(location)
        self._location = location
        self._name = location.name or location.anchor
        self._modification_date: datetime | None = None

    @property
    def driver(self) -> StorageDriver:
        return self._driver

    @property
    def location(self) -> Path:
        """Absolute, normalized location this handle currently points at."""
        return self._location

    @property
    def path(self) -> str:
        return os.fspath(self._location)

    @property
    def name(self) -> str:
        """Last path component, extension included."""
        return self._name

    @property
    def extension(self) -> str | None:
        return split_extension(self._name)[1]

    @property
    def name_excluding_extension(self) -> str:
        return split_extension(self._name)[0]

    @property
    def modification_date(self) -> datetime:
        """Last modification date, fetched once and cached for the handle lifetime."""
        if self._modification_date is None:
            self._modification_date = self._driver.attributes(self._location).modification_date
        return self._modification_date

    @property
    def parent(self) -> Folder | None:
        """Folder containing this entry, recomputed on every access.

        ``None`` for the root, or when the parent location no longer holds a
        folder.
        """
        from .folder import Folder

        location = parent_location(self._location)
        if location is None:
            return None
        try:
            return Folder(location, driver=self._driver)
        except PathError:
            return None

    def __fspath__(self) -> str:
        return self.path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.kind is other.kind and self._location == other._location

    # Identity is mutable, so handles cannot be dict keys or set members.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.kind}(name: {self._name}, path: {self._location})"

    def rename(self, new_name: str, keep_extension: bool = True) -> None:
        """Rename the entry inside its current parent folder.

        With ``keep_extension`` the current extension is appended to
        ``new_name`` unless it already ends with it. Raises
        ``RenameFailedError`` for the root, for a ``new_name`` that is not a
        single path component, or when the driver refuses.
        """
        parent = parent_location(self._location)
        if parent is None or not is_plain_name(new_name):
            raise RenameFailedError(self)

        extension = self.extension
        if keep_extension and extension is not None:
            suffix = f".{extension}"
            if not new_name.endswith(suffix):
                new_name += suffix

        self._relocate(parent / new_name, RenameFailedError)

    def move(self, to: Folder) -> None:
        """Move the entry into ``to`` keeping its name. Raises ``MoveFailedError``."""
        self._relocate(to.location / self._name, MoveFailedError)

    def _relocate(self, destination: Path, error: type[OperationError]) -> None:
        """Ask the driver to move the entry and adopt ``destination`` on success."""
        try:
            if destination == self._location:
                # Same place: only confirm the entry still exists.
                if self._driver.kind_of(destination) is None:
                    raise FileNotFoundError(2, "No such file or directory", str(destination))
            else:
                self._driver.move(self._location, destination)
        except OSError as exc:
            logger.warning("Cannot %s %s to %s: %s", error.verb, self._location, destination, exc)
            raise error(self) from exc
        self._location = destination
        self._name = destination.name

    def delete(self) -> None:
        """Remove the entry from storage, recursively for folders.

        The handle stays usable as an object; further operations fail with the
        driver's not-found error wrapped in the matching domain error.
        """
        try:
            self._driver.remove(self._location)
        except OSError as exc:
            logger.warning("Delete of %s failed: %s", self._location, exc)
            raise DeleteFailedError(self) from exc


__all__ = ["Entity"]
