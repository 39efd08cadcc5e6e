"""Public package surface for lazyfiles.

Typed, mutable handles to files and folders on disk plus lazy, restartable
traversal of folder trees. Most implementation lives in submodules.
"""

from __future__ import annotations

import logging

from .driver import LocalStorageDriver, StorageDriver, default_driver
from .entity import Entity
from .errors import (
    CopyFailedError,
    CreatingFolderFailedError,
    DeleteFailedError,
    EmptyPathError,
    FileError,
    FolderError,
    InvalidPathError,
    LazyFilesError,
    MoveFailedError,
    OperationError,
    PathError,
    ReadFailedError,
    RenameFailedError,
    WriteFailedError,
)
from .file import File
from .filesystem import FileSystem
from .folder import Folder
from .traversal import EntityIterator, EntitySequence
from .types import ItemAttributes, Kind

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Entity",
    "File",
    "Folder",
    "FileSystem",
    "Kind",
    "ItemAttributes",
    "EntityIterator",
    "EntitySequence",
    "StorageDriver",
    "LocalStorageDriver",
    "default_driver",
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
