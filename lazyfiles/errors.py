"""Exception taxonomy for handle construction, mutation and content I/O.

``PathError`` subclasses are raised only while a handle is being built.
``OperationError`` subclasses are raised only by the mutating verbs of a
handle that already exists. The two families never overlap.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entity import Entity
    from .file import File


class LazyFilesError(Exception):
    """Base class for every error raised by ``lazyfiles``."""


class PathError(LazyFilesError):
    """A path could not be turned into a handle."""


class EmptyPathError(PathError):
    """The path denotes nothing usable for the requested kind."""

    def __init__(self) -> None:
        super().__init__("Empty path given")


class InvalidPathError(PathError):
    """The location does not exist or holds the other kind of entry."""

    def __init__(self, location: Path) -> None:
        self.location = location
        super().__init__(f"Invalid path given: {location}")


class OperationError(LazyFilesError):
    """A mutating verb failed; ``entity`` is left unchanged."""

    verb = "operate on"

    def __init__(self, entity: Entity) -> None:
        self.entity = entity
        super().__init__(f"Failed to {self.verb} item: {entity}")


class RenameFailedError(OperationError):
    verb = "rename"


class MoveFailedError(OperationError):
    verb = "move"


class CopyFailedError(OperationError):
    verb = "copy"


class DeleteFailedError(OperationError):
    verb = "delete"


class FileError(LazyFilesError):
    """Reading or writing the content of a file failed.

    ``file`` is the handle involved, or ``None`` when the failure happened
    while creating a file that has no handle yet.
    """

    message = "Failed to access file"

    def __init__(self, location: Path, file: File | None = None) -> None:
        self.location = location
        self.file = file
        super().__init__(f"{self.message}: {location}")


class ReadFailedError(FileError):
    message = "Failed to read file"


class WriteFailedError(FileError):
    message = "Failed to write to file"


class FolderError(LazyFilesError):
    """Creating a folder failed."""


class CreatingFolderFailedError(FolderError):
    def __init__(self, location: Path) -> None:
        self.location = location
        super().__init__(f"Failed to create folder: {location}")


__all__ = [
    "LazyFilesError",
    "PathError",
    "EmptyPathError",
    "InvalidPathError",
    "OperationError",
    "RenameFailedError",
    "MoveFailedError",
    "CopyFailedError",
    "DeleteFailedError",
    "FileError",
    "ReadFailedError",
    "WriteFailedError",
    "FolderError",
    "CreatingFolderFailedError",
]
