"""Draw a :class:`FileReport` as a fixed-width box-drawing panel."""

from __future__ import annotations

import unicodedata
from typing import List

from .permissions import format_permissions
from .report import FileReport

# Box drawing characters
BOX_TOP_LEFT = "╭"
BOX_TOP_RIGHT = "╮"
BOX_BOTTOM_LEFT = "╰"
BOX_BOTTOM_RIGHT = "╯"
BOX_TEE_LEFT = "├"
BOX_TEE_RIGHT = "┤"
BOX_HORIZONTAL = "─"
BOX_VERTICAL = "│"

DEFAULT_WIDTH = 65
MIN_WIDTH = 10


def char_width(ch: str) -> int:
    """Return the number of terminal cells a single character occupies."""
    # Nonspacing marks such as U+0E31 and U+FE0F have combining class 0.
    if unicodedata.combining(ch) or unicodedata.category(ch) in ("Mn", "Me"):
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def cell_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies."""
    return sum(char_width(ch) for ch in text)


def truncate_cells(text: str, max_cells: int) -> str:
    """Cut ``text`` so it occupies at most ``max_cells`` cells."""
    out = []
    used = 0
    for ch in text:
        width = char_width(ch)
        if used + width > max_cells:
            break
        out.append(ch)
        used += width
    return "".join(out)


def fit_cells(text: str, max_cells: int) -> str:
    """Clip or right-pad ``text`` to exactly ``max_cells`` cells."""
    if max_cells <= 0:
        return ""
    clipped = truncate_cells(text, max_cells)
    return clipped + " " * (max_cells - cell_width(clipped))


def center_cells(text: str, max_cells: int) -> str:
    """Clip ``text`` to ``max_cells`` cells and centre it, extra space right."""
    clipped = truncate_cells(text, max_cells)
    spare = max_cells - cell_width(clipped)
    left = spare // 2
    return " " * left + clipped + " " * (spare - left)


def render_panel(report: FileReport, width: int = DEFAULT_WIDTH) -> str:
    """Return the bordered panel for ``report``.

    ``width`` is the number of cells between the two vertical borders; every
    returned line is ``width + 2`` cells wide.
    """
    if width < MIN_WIDTH:
        raise ValueError(f"panel width must be at least {MIN_WIDTH}, got {width}")

    inner = width - 2
    horizontal_line = BOX_HORIZONTAL * width

    def row(text: str) -> str:
        return f"{BOX_VERTICAL} {fit_cells(text, inner)} {BOX_VERTICAL}"

    lines: List[str] = [
        f"{BOX_TOP_LEFT}{horizontal_line}{BOX_TOP_RIGHT}",
        f"{BOX_VERTICAL} {center_cells(report.name, inner)} {BOX_VERTICAL}",
        f"{BOX_TEE_LEFT}{horizontal_line}{BOX_TEE_RIGHT}",
        row(f"Size: {report.size}"),
        row(f"Permissions: {format_permissions(report.permissions)}"),
        row(f"Type: {report.kind.label}"),
        row(f"Created: {report.dates.created}"),
        row(f"Modified: {report.dates.modified}"),
        row(f"Accessed: {report.dates.accessed}"),
        f"{BOX_BOTTOM_LEFT}{horizontal_line}{BOX_BOTTOM_RIGHT}",
    ]
    return "\n".join(lines)


__all__ = [
    "BOX_TOP_LEFT",
    "BOX_TOP_RIGHT",
    "BOX_BOTTOM_LEFT",
    "BOX_BOTTOM_RIGHT",
    "BOX_TEE_LEFT",
    "BOX_TEE_RIGHT",
    "BOX_HORIZONTAL",
    "BOX_VERTICAL",
    "DEFAULT_WIDTH",
    "cell_width",
    "fit_cells",
    "center_cells",
    "truncate_cells",
    "render_panel",
]
