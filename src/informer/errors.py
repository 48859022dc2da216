"""Exceptions raised while inspecting filesystem entries."""

from __future__ import annotations

from pathlib import Path


class InformerError(Exception):
    """Base class for every error reported per inspected path."""


class AccessError(InformerError):
    """Raised when a path cannot be opened or its metadata read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(reason)
        self.path = path
        self.reason = reason


class UnclassifiableKindError(InformerError):
    """Raised when an entry is not a regular file, folder or symlink."""

    def __init__(self, mode: int) -> None:
        super().__init__(f"unsupported file type (mode {oct(mode)})")
        self.mode = mode


__all__ = ["InformerError", "AccessError", "UnclassifiableKindError"]
