"""Acquire metadata for one path and turn it into a render-ready record."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .errors import AccessError
from .formatting import UNKNOWN, format_size, format_timestamp
from .kinds import FileKind, classify_kind
from .permissions import PermissionSlots, classify_permissions, is_readonly


@dataclass(frozen=True)
class FileDates:
    created: str
    modified: str
    accessed: str


@dataclass(frozen=True)
class FileReport:
    path: Path
    name: str
    size: str
    permissions: PermissionSlots
    kind: FileKind
    dates: FileDates

    @classmethod
    def from_path(
        cls, path: Union[str, os.PathLike], *, follow_symlinks: bool = False
    ) -> "FileReport":
        """Stat ``path`` and build its report.

        Symlinks are reported as such unless ``follow_symlinks`` is set, in
        which case the target is described instead.

        Raises:
            AccessError: the entry does not exist or its metadata cannot be
                read.
            UnclassifiableKindError: the entry is a socket, FIFO or device.
        """
        target = Path(path)
        try:
            stat_info = os.stat(target, follow_symlinks=follow_symlinks)
        except OSError as err:
            reason = err.strerror or str(err)
            raise AccessError(target, reason) from err

        return cls(
            path=target,
            name=name_for(target),
            size=format_size(stat_info.st_size),
            permissions=classify_permissions(
                is_readonly(stat_info.st_mode), stat_info.st_mode
            ),
            kind=classify_kind(stat_info.st_mode),
            dates=collect_dates(
                stat_info, birthtime=birth_time(target, stat_info, follow_symlinks)
            ),
        )


def name_for(path: Path) -> str:
    """Return the final component of ``path`` or ``"unknown"`` if it has none."""
    name = path.name
    if name in ("", ".", ".."):
        return UNKNOWN
    # Undecodable bytes arrive as surrogates and cannot be printed as-is.
    name = name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    return "".join(ch if ch.isprintable() else "?" for ch in name)


def birth_time(
    path: Path, stat_info: os.stat_result, follow_symlinks: bool = False
) -> Optional[float]:
    """Return the creation time of ``path`` in epoch seconds, if known.

    ``os.stat`` only reports ``st_birthtime`` on macOS, BSD and Windows.  On
    Linux the time comes from ``os.statx`` where the interpreter has it and
    the filesystem fills in ``STATX_BTIME``.
    """
    birthtime = getattr(stat_info, "st_birthtime", None)
    if birthtime is not None:
        return birthtime
    statx = getattr(os, "statx", None)
    mask = getattr(os, "STATX_BTIME", None)
    if statx is None or mask is None:
        return None
    try:
        result = statx(path, mask, follow_symlinks=follow_symlinks)
    except OSError:
        return None
    if not getattr(result, "stx_mask", 0) & mask:
        return None
    return getattr(result, "st_birthtime", None)


def collect_dates(
    stat_info: os.stat_result, birthtime: Optional[float] = None
) -> FileDates:
    """Format the creation, modification and access times of an entry."""
    if birthtime is None:
        birthtime = getattr(stat_info, "st_birthtime", None)
    return FileDates(
        created=format_timestamp(birthtime),
        modified=format_timestamp(stat_info.st_mtime),
        accessed=format_timestamp(stat_info.st_atime),
    )


__all__ = ["FileDates", "FileReport", "name_for", "birth_time", "collect_dates"]
