"""Enumeration of the entry kinds a report can describe."""

from __future__ import annotations

import stat
from enum import Enum

from .errors import UnclassifiableKindError


class FileKind(Enum):
    REGULAR = "regular"
    FOLDER = "folder"
    SYMLINK = "symlink"

    @property
    def label(self) -> str:
        if self is FileKind.REGULAR:
            return "Regular"
        elif self is FileKind.FOLDER:
            return "Folder"
        else:
            return "Symlink"


ALL_KINDS = [FileKind.REGULAR, FileKind.FOLDER, FileKind.SYMLINK]


def classify_kind(mode: int) -> FileKind:
    """Map the file-type bits of ``mode`` to a :class:`FileKind`.

    Sockets, FIFOs and device nodes raise :class:`UnclassifiableKindError`.
    """
    if stat.S_ISREG(mode):
        return FileKind.REGULAR
    if stat.S_ISDIR(mode):
        return FileKind.FOLDER
    if stat.S_ISLNK(mode):
        return FileKind.SYMLINK
    raise UnclassifiableKindError(mode)


__all__ = ["FileKind", "ALL_KINDS", "classify_kind"]
