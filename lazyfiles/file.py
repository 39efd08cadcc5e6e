"""File handles: content read/write on top of the shared entity identity."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from .driver import StorageDriver
from .entity import Entity
from .errors import CopyFailedError, PathError, ReadFailedError, WriteFailedError
from .types import Kind

if TYPE_CHECKING:
    from .folder import Folder

logger = logging.getLogger(__name__)

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


class File(Entity):
    """Handle to a plain file.

    A path that syntactically denotes a directory (trailing separator) is
    rejected with ``EmptyPathError`` before storage is consulted.
    """

    kind = Kind.FILE

    @classmethod
    def named(cls, name: str, *, driver: StorageDriver | None = None) -> File:
        """Open ``name`` relative to the current directory."""
        return cls(name, driver=driver)

    def read_bytes(self) -> bytes:
        try:
            return self.driver.read(self.location)
        except OSError as exc:
            raise ReadFailedError(self.location, self) from exc

    def read_text(self, encoding: str | None = None) -> str:
        """Read and decode the content; undecodable data raises ``ReadFailedError``."""
        data = self.read_bytes()
        try:
            return data.decode(encoding or self.driver.text_encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise ReadFailedError(self.location, self) from exc

    def read_int(self) -> int:
        """Parse the whole text content as a base-10 integer.

        Only an optional sign followed by ASCII digits is accepted. Surrounding
        whitespace and digit-group underscores raise ``ReadFailedError``.
        """
        text = self.read_text()
        if _INTEGER_TEXT.fullmatch(text) is None:
            raise ReadFailedError(self.location, self)
        return int(text)

    def write_bytes(self, data: bytes) -> None:
        """Replace the content with ``data``."""
        try:
            self.driver.write(self.location, data)
        except OSError as exc:
            raise WriteFailedError(self.location, self) from exc

    def write_text(self, text: str, encoding: str | None = None) -> None:
        self.write_bytes(self._encode(text, encoding))

    def append_bytes(self, data: bytes) -> None:
        """Append ``data``; a deleted file is not recreated."""
        try:
            self.driver.append(self.location, data)
        except OSError as exc:
            raise WriteFailedError(self.location, self) from exc

    def append_text(self, text: str, encoding: str | None = None) -> None:
        self.append_bytes(self._encode(text, encoding))

    def _encode(self, text: str, encoding: str | None) -> bytes:
        try:
            return text.encode(encoding or self.driver.text_encoding)
        except (UnicodeEncodeError, LookupError) as exc:
            raise WriteFailedError(self.location, self) from exc

    def copy(self, to: Folder) -> File:
        """Copy into ``to`` and return a handle to the new file.

        The receiving handle is left untouched. Raises ``CopyFailedError``.
        """
        destination = to.location / self.name
        try:
            self.driver.copy(self.location, destination)
            return File(destination, driver=self.driver)
        except (OSError, PathError) as exc:
            logger.warning("Copy of %s into %s failed: %s", self.location, to.location, exc)
            raise CopyFailedError(self) from exc


__all__ = ["File"]
