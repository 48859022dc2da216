"""Small helpers that turn raw file metadata into readable text."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

UNKNOWN = "unknown"
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

SIZE_UNITS = ["bytes", "KB", "MB", "GB", "TB"]


def format_size(size: int) -> str:
    """Convert a byte count into a friendly string such as ``12.4 KB``.

    The largest unit whose value stays below 1024 wins; ``TB`` has no upper
    bound.  Byte counts are shown as whole numbers.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    value = float(size)
    index = 0
    while value >= 1024 and index < len(SIZE_UNITS) - 1:
        value /= 1024
        index += 1
    unit = SIZE_UNITS[index]
    if index == 0:
        return f"{size} {unit}"
    rounded = round(value, 1)
    # Rounding may reach the next threshold (1048575 bytes is 1023.999 KB).
    if rounded >= 1024 and index < len(SIZE_UNITS) - 1:
        rounded = round(value / 1024, 1)
        unit = SIZE_UNITS[index + 1]
    formatted = f"{rounded:.1f}".rstrip("0").rstrip(".")
    return f"{formatted} {unit}"


def format_timestamp(timestamp: Optional[float]) -> str:
    """Render seconds since the Unix epoch as a local date and time.

    The local offset is the one in effect at ``timestamp`` itself, so dates
    on the other side of a DST switch or a historical zone change keep their
    own offset.  Missing or unrepresentable timestamps become ``"unknown"``.
    """
    if timestamp is None:
        return UNKNOWN
    try:
        instant = UNIX_EPOCH + timedelta(seconds=timestamp)
        local = instant.astimezone()
    except (OverflowError, OSError, ValueError):
        return UNKNOWN
    return local.strftime(TIMESTAMP_FORMAT)


__all__ = ["UNKNOWN", "UNIX_EPOCH", "SIZE_UNITS", "format_size", "format_timestamp"]
