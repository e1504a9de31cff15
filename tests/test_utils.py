"""Unit tests for utility functions (create_fullstack_app.utils).

Tests cover:
- run_command (success, failure, cwd, missing executable)
- load_json / write_json (use tmp_path)
- Rich output helpers (print_success, print_error, print_summary_table, etc.)
"""

from __future__ import annotations

import inspect
import json
import sys
from pathlib import Path

import pytest

from create_fullstack_app.utils import (
    load_json,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
    run_command,
    write_json,
)


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    async def test_successful_command(self):
        returncode, stdout, stderr = await run_command(
            [sys.executable, "-c", "print('hello')"]
        )
        assert returncode == 0
        assert stdout == "hello"

    @pytest.mark.unit
    async def test_failed_command(self):
        returncode, stdout, stderr = await run_command(
            [sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"]
        )
        assert returncode == 3
        assert stderr == "boom"

    @pytest.mark.unit
    async def test_command_with_cwd(self, tmp_path: Path):
        returncode, stdout, _ = await run_command(
            [sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path
        )
        assert returncode == 0
        assert Path(stdout).resolve() == tmp_path.resolve()

    @pytest.mark.unit
    async def test_missing_executable_raises(self):
        with pytest.raises(FileNotFoundError):
            await run_command(["cfa-no-such-executable-for-tests"])

    @pytest.mark.unit
    def test_takes_only_command_and_cwd(self):
        assert list(inspect.signature(run_command).parameters) == ["cmd", "cwd"]


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


class TestJsonIO:
    @pytest.mark.unit
    def test_load_json(self, tmp_path: Path):
        path = tmp_path / "data.json"
        path.write_text('{"a": [1, 2]}', encoding="utf-8")
        assert load_json(path) == {"a": [1, 2]}

    @pytest.mark.unit
    def test_load_json_non_object(self, tmp_path: Path):
        path = tmp_path / "data.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_json(path) == [1, 2]

    @pytest.mark.unit
    def test_load_json_missing(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / "missing.json")

    @pytest.mark.unit
    def test_load_json_invalid(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_json(path)

    @pytest.mark.unit
    def test_write_json_two_space_indent(self, tmp_path: Path):
        path = write_json({"name": "app", "deps": {"x": "1"}}, tmp_path / "out.json")
        assert path.read_text(encoding="utf-8") == (
            '{\n  "name": "app",\n  "deps": {\n    "x": "1"\n  }\n}'
        )

    @pytest.mark.unit
    def test_write_json_preserves_key_order(self, tmp_path: Path):
        path = write_json({"b": 1, "a": 2}, tmp_path / "out.json")
        assert list(json.loads(path.read_text(encoding="utf-8"))) == ["b", "a"]

    @pytest.mark.unit
    def test_write_json_keeps_unicode(self, tmp_path: Path):
        path = write_json({"author": "Zoë"}, tmp_path / "out.json")
        assert "Zoë" in path.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    @pytest.mark.unit
    def test_messages_are_printed(self, quiet_console):
        print_success("done")
        print_info("info")
        print_error("failed")
        print_warning("careful")
        output = quiet_console.file.getvalue()
        for text in ("done", "info", "failed", "careful"):
            assert text in output

    @pytest.mark.unit
    def test_markup_in_message_is_escaped(self, quiet_console):
        print_error("bad value [red]x[/red]")
        assert "[red]x[/red]" in quiet_console.file.getvalue()

    @pytest.mark.unit
    def test_summary_table(self, quiet_console):
        print_summary_table({"Project": "my-app", "Frontend": "react-ts"}, title="Created")
        output = quiet_console.file.getvalue()
        assert "Created" in output
        assert "my-app" in output
        assert "react-ts" in output
