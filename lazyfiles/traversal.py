"""Lazy, restartable traversal of a folder's children.

``EntitySequence`` is the restartable view handed out by folders. Every pass
over it builds a fresh ``EntityIterator``, which lists each directory once
(sorted by name) the first time it is asked for a value and descends into
subfolders only when the walk reaches them.

Order within one iterator: every entry of the folder itself first, then the
queued subfolder iterators in discovery order, each drained completely
before the next one starts.
"""

from __future__ import annotations

import logging
from collections import deque
from pathlib import Path
from typing import TYPE_CHECKING, Generic, TypeVar

from .entity import Entity
from .errors import PathError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .folder import Folder

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."

T = TypeVar("T", bound=Entity)


class EntityIterator(Generic[T]):
    """Single-pass, depth-first cursor over entries of type ``entity_type``."""

    def __init__(
        self,
        folder: Folder,
        entity_type: type[T],
        *,
        recursive: bool = False,
        include_hidden: bool = False,
        visited: set[Path] | None = None,
    ) -> None:
        self._folder = folder
        self._entity_type = entity_type
        self._recursive = recursive
        self._include_hidden = include_hidden
        self._names: deque[str] | None = None
        self._pending: deque[EntityIterator[T]] = deque()
        self._active: EntityIterator[T] | None = None
        # Real locations already descended into; shared by the whole walk.
        self._visited = visited if visited is not None else set()

    def __iter__(self) -> EntityIterator[T]:
        return self

    def __next__(self) -> T:
        while True:
            names = self._item_names()
            if names:
                name = names.popleft()
                if not self._include_hidden and name.startswith(HIDDEN_PREFIX):
                    continue
                location = self._folder.location / name
                item = self._materialize(location)
                if self._recursive:
                    self._queue_descent(location, item)
                if item is None:
                    continue
                return item

            if self._active is not None:
                try:
                    return next(self._active)
                except StopIteration:
                    self._active = None

            if not self._pending:
                raise StopIteration
            self._active = self._pending.popleft()

    def _item_names(self) -> deque[str]:
        if self._names is None:
            driver = self._folder.driver
            self._names = deque(driver.list_names(self._folder.location))
            if driver.follow_symlinks:
                self._visited.add(driver.real_location(self._folder.location))
        return self._names

    def _materialize(self, location: Path) -> T | None:
        try:
            return self._entity_type(location, driver=self._folder.driver)
        except PathError as exc:
            logger.debug("Skipping %s during traversal: %s", location, exc)
            return None

    def _queue_descent(self, location: Path, item: T | None) -> None:
        """Queue a child iterator when ``location`` is a folder we may enter.

        Symlinked folders are entered only when the driver follows symlinks,
        and then never twice for the same real location.
        """
        folder_type = type(self._folder)
        if isinstance(item, folder_type):
            subfolder = item
        else:
            try:
                subfolder = folder_type(location, driver=self._folder.driver)
            except PathError:
                return

        driver = self._folder.driver
        if driver.is_symlink(location):
            if not driver.follow_symlinks:
                return
            if driver.real_location(location) in self._visited:
                logger.debug("Not descending into %s: already visited", location)
                return

        self._pending.append(
            EntityIterator(
                subfolder,
                self._entity_type,
                recursive=True,
                include_hidden=self._include_hidden,
                visited=self._visited,
            )
        )


class EntitySequence(Generic[T]):
    """Restartable view over a folder's files or subfolders.

    Nothing is memoized: every aggregate below walks the folder again.
    """

    def __init__(
        self,
        folder: Folder,
        entity_type: type[T],
        *,
        recursive: bool = False,
        include_hidden: bool = False,
    ) -> None:
        self.folder = folder
        self.entity_type = entity_type
        self.recursive = recursive
        self.include_hidden = include_hidden

    def make_iterator(self) -> EntityIterator[T]:
        """Return a brand-new cursor starting from the first entry."""
        return EntityIterator(
            self.folder,
            self.entity_type,
            recursive=self.recursive,
            include_hidden=self.include_hidden,
        )

    def __iter__(self) -> Iterator[T]:
        return self.make_iterator()

    def count(self) -> int:
        return sum(1 for _ in self)

    def names(self) -> list[str]:
        return [item.name for item in self]

    def first(self) -> T | None:
        return next(self.make_iterator(), None)

    def last(self) -> T | None:
        item: T | None = None
        for item in self:
            pass
        return item

    def move(self, to: Folder) -> None:
        """Move every item into ``to``; the first failure aborts the walk."""
        for item in self:
            item.move(to)

    def __str__(self) -> str:
        return "\n".join(repr(item) for item in self)

    def __repr__(self) -> str:
        return (
            f"EntitySequence({self.entity_type.__name__}, folder={self.folder.location}, "
            f"recursive={self.recursive}, include_hidden={self.include_hidden})"
        )


__all__ = [
    "HIDDEN_PREFIX",
    "EntityIterator",
    "EntitySequence",
]
