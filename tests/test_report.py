"""Tests for metadata acquisition and the FileReport record."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

from informer.errors import AccessError, UnclassifiableKindError
from informer.formatting import UNKNOWN, format_timestamp
from informer.kinds import FileKind
from informer.permissions import FilePermission
from informer.report import FileReport, birth_time, collect_dates, name_for


def test_empty_regular_file(tmp_path: Path) -> None:
    target = tmp_path / "empty.txt"
    target.touch()
    os.chmod(target, 0o644)

    report = FileReport.from_path(target)

    assert report.name == "empty.txt"
    assert report.kind is FileKind.REGULAR
    assert report.permissions == (FilePermission.READ, FilePermission.WRITE, None)
    assert report.size == "0 bytes"


def test_executable_readonly_file(tmp_path: Path) -> None:
    target = tmp_path / "tool.sh"
    target.write_text("#!/bin/sh\n", encoding="utf-8")
    os.chmod(target, 0o555)

    report = FileReport.from_path(str(target))

    assert report.permissions == (
        FilePermission.READ,
        None,
        FilePermission.EXECUTABLE,
    )
    assert report.size == "10 bytes"


def test_size_is_scaled(tmp_path: Path) -> None:
    target = tmp_path / "data.bin"
    target.write_bytes(b"\0" * 1536)

    assert FileReport.from_path(target).size == "1.5 KB"


def test_directory_is_folder(tmp_path: Path) -> None:
    folder = tmp_path / "folder"
    folder.mkdir()

    report = FileReport.from_path(folder)

    assert report.kind is FileKind.FOLDER
    assert report.name == "folder"


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlink_is_reported_as_link(tmp_path: Path) -> None:
    target = tmp_path / "target.txt"
    target.write_text("content", encoding="utf-8")
    link = tmp_path / "link"
    link.symlink_to(target)

    assert FileReport.from_path(link).kind is FileKind.SYMLINK
    followed = FileReport.from_path(link, follow_symlinks=True)
    assert followed.kind is FileKind.REGULAR
    assert followed.name == "link"
    assert followed.size == "7 bytes"


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_dangling_symlink(tmp_path: Path) -> None:
    link = tmp_path / "dangling"
    link.symlink_to(tmp_path / "missing")

    assert FileReport.from_path(link).kind is FileKind.SYMLINK
    with pytest.raises(AccessError):
        FileReport.from_path(link, follow_symlinks=True)


def test_missing_path_raises_access_error(tmp_path: Path) -> None:
    missing = tmp_path / "does-not-exist"

    with pytest.raises(AccessError) as excinfo:
        FileReport.from_path(missing)

    assert excinfo.value.path == missing
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs unsupported")
def test_fifo_is_unclassifiable(tmp_path: Path) -> None:
    fifo = tmp_path / "pipe"
    os.mkfifo(fifo)

    with pytest.raises(UnclassifiableKindError):
        FileReport.from_path(fifo)


def test_report_is_immutable(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.touch()
    report = FileReport.from_path(target)

    with pytest.raises(dataclasses.FrozenInstanceError):
        report.name = "other"  # type: ignore[misc]


def test_accessed_uses_access_time(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.touch()
    os.utime(target, (1_000_000_000, 1_500_000_000))

    report = FileReport.from_path(target)

    assert report.dates.accessed == format_timestamp(1_000_000_000)
    assert report.dates.modified == format_timestamp(1_500_000_000)
    assert report.dates.accessed != report.dates.modified


def test_collect_dates_without_birthtime() -> None:
    stat_info = SimpleNamespace(st_mtime=0.0, st_atime=60.0)

    dates = collect_dates(stat_info)  # type: ignore[arg-type]

    assert dates.created == UNKNOWN
    assert dates.modified == format_timestamp(0.0)
    assert dates.accessed == format_timestamp(60.0)


def test_collect_dates_with_birthtime() -> None:
    stat_info = SimpleNamespace(st_birthtime=30.0, st_mtime=0.0, st_atime=60.0)

    dates = collect_dates(stat_info)  # type: ignore[arg-type]

    assert dates.created == format_timestamp(30.0)


def test_name_for() -> None:
    assert name_for(Path("/tmp/report.txt")) == "report.txt"
    assert name_for(Path("relative/dir/")) == "dir"
    assert name_for(Path("/")) == UNKNOWN
    assert name_for(Path(".")) == UNKNOWN
    assert name_for(Path("some/..")) == UNKNOWN


def test_name_for_replaces_unprintable_characters() -> None:
    assert name_for(Path("bad\nname")) == "bad?name"


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX byte paths only")
def test_name_for_undecodable_bytes() -> None:
    path = Path(os.fsdecode(b"caf\xe9"))
    assert name_for(path) == "caf�"


def test_root_has_unknown_name() -> None:
    report = FileReport.from_path(Path(os.sep))

    assert report.name == UNKNOWN
    assert report.kind is FileKind.FOLDER


def test_birth_time_prefers_stat_field() -> None:
    stat_info = SimpleNamespace(st_birthtime=30.0)
    assert birth_time(Path("ignored"), stat_info) == 30.0  # type: ignore[arg-type]


def test_birth_time_from_statx(monkeypatch) -> None:
    calls = []

    def fake_statx(path, mask, *, follow_symlinks=True):
        calls.append((path, mask, follow_symlinks))
        return SimpleNamespace(stx_mask=0x800, st_birthtime=120.0)

    monkeypatch.setattr(os, "statx", fake_statx, raising=False)
    monkeypatch.setattr(os, "STATX_BTIME", 0x800, raising=False)

    result = birth_time(Path("file.txt"), SimpleNamespace(), True)  # type: ignore[arg-type]

    assert result == 120.0
    assert calls == [(Path("file.txt"), 0x800, True)]


def test_birth_time_unsupported_by_filesystem(monkeypatch) -> None:
    monkeypatch.setattr(
        os,
        "statx",
        lambda path, mask, *, follow_symlinks=True: SimpleNamespace(stx_mask=0),
        raising=False,
    )
    monkeypatch.setattr(os, "STATX_BTIME", 0x800, raising=False)

    assert birth_time(Path("file.txt"), SimpleNamespace()) is None  # type: ignore[arg-type]


def test_birth_time_statx_error(monkeypatch) -> None:
    def failing_statx(path, mask, *, follow_symlinks=True):
        raise PermissionError("denied")

    monkeypatch.setattr(os, "statx", failing_statx, raising=False)
    monkeypatch.setattr(os, "STATX_BTIME", 0x800, raising=False)

    assert birth_time(Path("file.txt"), SimpleNamespace()) is None  # type: ignore[arg-type]


def test_birth_time_without_statx(monkeypatch) -> None:
    monkeypatch.delattr(os, "statx", raising=False)

    assert birth_time(Path("file.txt"), SimpleNamespace()) is None  # type: ignore[arg-type]


def test_created_date_uses_statx_birth_time(tmp_path: Path, monkeypatch) -> None:
    target = tmp_path / "file.txt"
    target.touch()
    if hasattr(os.stat(target), "st_birthtime"):
        pytest.skip("platform reports st_birthtime directly")
    monkeypatch.setattr(
        os,
        "statx",
        lambda path, mask, *, follow_symlinks=True: SimpleNamespace(
            stx_mask=mask, st_birthtime=86400.0
        ),
        raising=False,
    )
    monkeypatch.setattr(os, "STATX_BTIME", 0x800, raising=False)

    report = FileReport.from_path(target)

    assert report.dates.created == format_timestamp(86400.0)
