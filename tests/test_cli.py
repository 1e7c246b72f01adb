from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from view_bootstrap.buffer import SelectionRange
from view_bootstrap.cli import main, parse_selection

SOURCE = (
    "class Header: BaseView {\n"
    "    let titleLabel = UILabel()\n"
    "    let iconView = UIImageView()\n"
    "}\n"
)


def write_source(tmp_path: Path) -> Path:
    path = tmp_path / "Header.swift"
    path.write_text(SOURCE, encoding="utf-8")
    return path


def test_parse_selection_is_one_based_and_inclusive() -> None:
    assert parse_selection("2") == SelectionRange.lines(1)
    assert parse_selection("2:3") == SelectionRange.lines(1, 2)


@pytest.mark.parametrize("raw", ["0", "a:b", "3:-1"])
def test_parse_selection_rejects_bad_ranges(raw: str) -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        parse_selection(raw)


def test_main_prints_rewritten_buffer(tmp_path: Path, capsys) -> None:
    path = write_source(tmp_path)

    status = main([str(path), "--select", "2:3"])

    out = capsys.readouterr().out
    assert status == 0
    assert "    // MARK: Title Label\n" in out
    assert "    // MARK: Icon View\n" in out
    assert path.read_text(encoding="utf-8") == SOURCE


def test_main_in_place_is_idempotent(tmp_path: Path, capsys) -> None:
    path = write_source(tmp_path)

    assert main([str(path), "-s", "2", "-s", "3", "--in-place"]) == 0
    first = path.read_text(encoding="utf-8")
    assert main([str(path), "-s", "2", "-s", "3", "--in-place"]) == 0

    assert "MARK" not in capsys.readouterr().out
    assert path.read_text(encoding="utf-8") == first
    assert first.count("addSubview(titleLabel)") == 1


def test_main_reports_backwards_selection(tmp_path: Path, capsys) -> None:
    path = write_source(tmp_path)

    status = main([str(path), "--select", "3:2"])

    assert status == 2
    assert "starts after it ends" in capsys.readouterr().err


def test_main_reports_missing_file(tmp_path: Path, capsys) -> None:
    status = main([str(tmp_path / "Missing.swift"), "--select", "1"])

    assert status == 2
    assert "view-bootstrap:" in capsys.readouterr().err
