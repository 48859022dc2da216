"""Collapse POSIX mode bits into the Read/Write/Executable classification."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

EXECUTE_BITS = 0o111
WRITE_BITS = 0o222


class FilePermission(Enum):
    READ = "read"
    WRITE = "write"
    EXECUTABLE = "executable"

    @property
    def label(self) -> str:
        if self is FilePermission.READ:
            return "Read"
        elif self is FilePermission.WRITE:
            return "Write"
        else:
            return "Executable"


PermissionSlots = Tuple[
    Optional[FilePermission], Optional[FilePermission], Optional[FilePermission]
]


def is_readonly(mode: int) -> bool:
    """Return ``True`` when no owner, group or other write bit is set."""
    return mode & WRITE_BITS == 0


def is_executable(mode: int) -> bool:
    """Return ``True`` when any owner, group or other execute bit is set."""
    return mode & EXECUTE_BITS != 0


def classify_permissions(readonly: bool, mode: int) -> PermissionSlots:
    """Return the ``(read, write, executable)`` slots for an entry.

    Owner, group and other classes are not told apart: read is always
    granted, write follows the read-only flag and executable is granted by
    any execute bit.
    """
    write = None if readonly else FilePermission.WRITE
    executable = FilePermission.EXECUTABLE if is_executable(mode) else None
    return (FilePermission.READ, write, executable)


def format_permissions(slots: PermissionSlots) -> str:
    """Join the labels of the present slots with ``+``."""
    return "+".join(slot.label for slot in slots if slot is not None)


__all__ = [
    "FilePermission",
    "PermissionSlots",
    "is_readonly",
    "is_executable",
    "classify_permissions",
    "format_permissions",
]
