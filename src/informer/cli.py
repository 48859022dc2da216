"""Command-line entry point for informer.

Every path on the command line goes through the same stages:

1. Stat the entry and build a :class:`informer.report.FileReport`.
2. Render the report as a fixed-width panel.
3. Print the panel, or a one-line diagnostic on stderr when the path could not
   be inspected.

A bad path does not stop the batch unless ``--fail-fast`` (or the
``report.fail_fast`` configuration switch) asks for the old behaviour.
"""

from __future__ import annotations

import argparse
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from informer import __version__
from informer.config import DEFAULT_CONFIG, get_panel_width, get_report_settings
from informer.errors import InformerError
from informer.render import MIN_WIDTH, render_panel
from informer.report import FileReport

# Crash dump file location
CRASH_LOG_FILE = Path.home() / "informer.crash.txt"

PROG = "informer"


def write_crash_log(exception: BaseException) -> None:
    """Append a detailed crash report to :data:`CRASH_LOG_FILE`."""
    try:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        crash_info = f"""
================================================================================
Informer Crash Report
================================================================================
Timestamp: {timestamp}
Version: {__version__}
Python: {sys.version}
Platform: {sys.platform}

Exception Type: {type(exception).__name__}
Exception Message: {str(exception)}

Traceback:
{"".join(traceback.format_exception(type(exception), exception, exception.__traceback__))}
================================================================================
"""
        with open(CRASH_LOG_FILE, "a", encoding="utf-8") as f:
            f.write(crash_info)

        print(f"\n{PROG} crashed unexpectedly!", file=sys.stderr)
        print(f"   Crash details saved to: {CRASH_LOG_FILE}", file=sys.stderr)
        print("   Please report this issue with the crash log.", file=sys.stderr)
    except OSError:
        print(f"\n{PROG} crashed and could not write crash log!", file=sys.stderr)
        traceback.print_exception(type(exception), exception, exception.__traceback__)


def _panel_width(text: str) -> int:
    """``argparse`` type for ``--width``."""
    try:
        width = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: {text!r}") from None
    if width < MIN_WIDTH:
        raise argparse.ArgumentTypeError(f"width must be at least {MIN_WIDTH}")
    return width


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Turn the command-line text into structured information."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Show size, permissions, type and timestamps of files.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show version number and exit.",
    )
    parser.add_argument(
        "--fail-fast",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Stop at the first path that cannot be inspected.",
    )
    parser.add_argument(
        "--follow-symlinks",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Describe the target of a symlink instead of the link itself.",
    )
    parser.add_argument(
        "--width",
        type=_panel_width,
        default=None,
        help="Inner width of the panel in terminal cells (default: 65).",
    )
    parser.add_argument("paths", nargs="+", metavar="PATH", help="Entries to inspect.")
    return parser.parse_args(argv)


def inspect_paths(
    paths: Sequence[str],
    *,
    width: int = DEFAULT_CONFIG["panel"]["width"],
    follow_symlinks: bool = False,
    fail_fast: bool = False,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> List[str]:
    """Print a panel for each path in order and return the paths that failed.

    With ``fail_fast`` the first failure ends the batch; remaining paths are
    neither inspected nor reported as failed.
    """
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr
    failed: List[str] = []
    for path in paths:
        try:
            report = FileReport.from_path(path, follow_symlinks=follow_symlinks)
        except InformerError as error:
            print(f"{PROG}: {path}: {error}", file=err)
            failed.append(path)
            if fail_fast:
                break
            continue
        print(render_panel(report, width), file=out)
    return failed


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Inspect every path given on the command line.

    Returns 0 when every path was reported, 1 when any path failed.
    """
    args = parse_args(argv)

    try:
        settings = get_report_settings()
        width = args.width
        if width is None:
            width = get_panel_width()
            if width < MIN_WIDTH:
                print(
                    f"Warning: configured panel width {width} is below {MIN_WIDTH}, using default",
                    file=sys.stderr,
                )
                width = DEFAULT_CONFIG["panel"]["width"]
        follow_symlinks = args.follow_symlinks
        if follow_symlinks is None:
            follow_symlinks = settings["follow_symlinks"]
        fail_fast = args.fail_fast
        if fail_fast is None:
            fail_fast = settings["fail_fast"]

        failed = inspect_paths(
            args.paths,
            width=width,
            follow_symlinks=follow_symlinks,
            fail_fast=fail_fast,
        )
        return 1 if failed else 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        write_crash_log(e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
