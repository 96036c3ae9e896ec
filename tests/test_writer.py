"""Tests for ifacegen.writer."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from ifacegen.writer import atomic_write, write_output


class TestWriteOutput:
    def test_writes_text_with_trailing_newline(self, tmp_path: Path) -> None:
        target = tmp_path / "api.d.ts"
        result = write_output("interface Foo { a: string, }", target)
        assert result == target
        assert target.read_text(encoding="utf-8") == "interface Foo { a: string, }\n"

    def test_keeps_existing_trailing_newline(self, tmp_path: Path) -> None:
        target = tmp_path / "api.d.ts"
        write_output("x\n", target)
        assert target.read_text(encoding="utf-8") == "x\n"

    def test_creates_parent_dirs(self, tmp_path: Path) -> None:
        target = tmp_path / "web" / "src" / "api.d.ts"
        write_output("x", str(target))
        assert target.is_file()

    def test_overwrites_existing(self, tmp_path: Path) -> None:
        target = tmp_path / "api.d.ts"
        target.write_text("old\n", encoding="utf-8")
        write_output("new", target)
        assert target.read_text(encoding="utf-8") == "new\n"


class TestAtomicWrite:
    def test_failure_leaves_target_and_no_temp_files(self, tmp_path: Path) -> None:
        target = tmp_path / "api.d.ts"
        target.write_text("old\n", encoding="utf-8")
        with patch("ifacegen.writer.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError, match="disk full"):
                atomic_write(target, "new\n")
        assert target.read_text(encoding="utf-8") == "old\n"
        assert list(tmp_path.iterdir()) == [target]
