"""Shared datatypes for entity handles and storage drivers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Kind(Enum):
    """Classification fixed on a handle when it is constructed."""

    FILE = "file"
    FOLDER = "folder"

    def __str__(self) -> str:
        return "File" if self is Kind.FILE else "Folder"


@dataclass(frozen=True)
class ItemAttributes:
    """Metadata observed for one storage entry."""

    modification_date: datetime
    size: int
    is_symlink: bool = False


__all__ = [
    "Kind",
    "ItemAttributes",
]
