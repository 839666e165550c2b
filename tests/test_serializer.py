"""Tests for code table serialization."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from graycode import serializer
from graycode.errors import OutputWriteError
from graycode.generator import generate
from graycode.serializer import format_row, iter_lines, write_table


class TestFormat:
    def test_format_row(self) -> None:
        assert format_row([1, 0, 2]) == "102"

    def test_format_numpy_row(self) -> None:
        assert format_row(np.array([0, 1], dtype=np.uint8)) == "01"

    def test_multi_digit_values_concatenate(self) -> None:
        assert format_row([1, 10, 3]) == "1103"

    def test_iter_lines(self) -> None:
        assert list(iter_lines(generate(2, 2))) == ["00\n", "01\n", "11\n", "10\n"]


class TestWriteTable:
    def test_two_by_two(self, tmp_path: Path) -> None:
        out = write_table(np.array([[0, 0], [0, 1]]), tmp_path / "gray.txt")
        assert out == tmp_path / "gray.txt"
        assert out.read_text() == "00\n01\n"

    def test_generated_table(self, tmp_path: Path) -> None:
        out = write_table(generate(2, 3), tmp_path / "gray.txt")
        assert out.read_text().splitlines() == [
            "00", "01", "02", "12", "11", "10", "20", "21", "22",
        ]

    def test_default_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        write_table(generate(1, 2))
        assert (tmp_path / "gray.txt").read_text() == "0\n1\n"

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        out = write_table(generate(1, 2), tmp_path / "a" / "b" / "codes.txt")
        assert out.exists()

    def test_overwrites_existing(self, tmp_path: Path) -> None:
        path = tmp_path / "gray.txt"
        path.write_text("stale\n")
        write_table(generate(1, 2), path)
        assert path.read_text() == "0\n1\n"

    def test_unwritable_destination(self, tmp_path: Path) -> None:
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("")
        with pytest.raises(OutputWriteError) as exc_info:
            write_table(generate(1, 2), blocker / "gray.txt")
        assert exc_info.value.exit_code == 4

    def test_failure_mid_write_releases_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "gray.txt"
        path.write_text("previous\n")

        def failing_lines(table):
            yield "00\n"
            raise OSError("disk full")

        monkeypatch.setattr(serializer, "iter_lines", failing_lines)
        with pytest.raises(OutputWriteError, match="disk full"):
            write_table(generate(2, 2), path)

        assert path.read_text() == "previous\n"
        assert list(tmp_path.iterdir()) == [path]
