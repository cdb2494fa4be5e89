"""CLI tests for search, resolve and version commands."""

from __future__ import annotations

import os
from pathlib import Path
from types import SimpleNamespace
from typing import Callable

import pytest
from typer.testing import CliRunner

from pathsearch import versioning
from pathsearch.cli import app


@pytest.fixture
def tool_on_path(
    monkeypatch: pytest.MonkeyPatch,
    working_dir: Path,
    tmp_path: Path,
    make_file: Callable[..., Path],
) -> Path:
    """Place `tool.exe` in a PATH directory with `.EXE` as the only extension.

    Lookup logs are limited to errors so command output stays comparable.
    """

    tool = make_file(tmp_path / "bin" / "tool.exe")
    monkeypatch.setenv("PATH", os.pathsep.join([str(tmp_path / "missing"), str(tool.parent)]))
    monkeypatch.setenv("PATHEXT", ".EXE")
    monkeypatch.delenv("PATHSEARCH_THROW_IF_NOT_FOUND", raising=False)
    monkeypatch.setenv("PATHSEARCH_LOG_LEVEL", "ERROR")
    return tool


@pytest.fixture
def fixed_pe_version(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every PE image report file version 2.5.1103.7."""

    class _FakeImage:
        def __init__(
            self, name: str | None = None, data: bytes | None = None, fast_load: bool = False
        ) -> None:
            self.VS_FIXEDFILEINFO = [
                SimpleNamespace(FileVersionMS=(2 << 16) | 5, FileVersionLS=(1103 << 16) | 7)
            ]

        def __enter__(self) -> "_FakeImage":
            return self

        def __exit__(self, *_: object) -> None:
            return None

        def parse_data_directories(self, directories: list[int]) -> None:
            _ = directories

    monkeypatch.setattr(versioning.pefile, "PE", _FakeImage)


def test_search_command_lists_matches(tool_on_path: Path) -> None:
    """Search should print every match and exit cleanly."""

    result = CliRunner().invoke(app, ["search", "tool"])

    assert result.exit_code == 0
    assert result.output.strip().splitlines() == [str(tool_on_path)]


def test_search_command_fails_when_nothing_matches(tool_on_path: Path) -> None:
    """Search should exit with code 1 when no file matched."""

    result = CliRunner().invoke(app, ["search", "other-tool"])

    assert result.exit_code == 1
    assert "No matches for `other-tool`." in result.output


def test_resolve_command_prints_first_match(tool_on_path: Path) -> None:
    """Resolve should print the file a version lookup would read."""

    result = CliRunner().invoke(app, ["resolve", "tool"])

    assert result.exit_code == 0
    assert result.output.strip() == str(tool_on_path)


def test_version_command_prints_version_triple(
    tool_on_path: Path, fixed_pe_version: None
) -> None:
    """Version should resolve via PATH and print `major.minor.build`."""

    result = CliRunner().invoke(app, ["version", "tool"])

    assert result.exit_code == 0
    assert result.output.strip() == "2.5.1103"


def test_version_command_without_throw_prints_empty_line(tool_on_path: Path) -> None:
    """A missing executable without `--throw` should print an empty version."""

    result = CliRunner().invoke(app, ["version", "absent-tool", "--no-throw"])

    assert result.exit_code == 0
    assert result.output.strip() == ""


def test_version_command_uses_config_throw_default(
    tool_on_path: Path, tmp_path: Path
) -> None:
    """`throw_if_not_found` from YAML should apply unless overridden by a flag."""

    config_path = tmp_path / "lookup.yaml"
    config_path.write_text("throw_if_not_found: true\nlog_level: error\n", encoding="utf-8")
    runner = CliRunner()

    strict = runner.invoke(app, ["version", "absent-tool", "--config", str(config_path)])
    relaxed = runner.invoke(
        app, ["version", "absent-tool", "--config", str(config_path), "--no-throw"]
    )

    assert strict.exit_code == 1
    assert "version failed at stage `resolve`" in strict.output
    assert relaxed.exit_code == 0


def test_verbose_flag_prints_lookup_events(tool_on_path: Path) -> None:
    """`--verbose` should emit structured DEBUG lookup lines."""

    result = CliRunner().invoke(app, ["--verbose", "search", "tool"])

    assert result.exit_code == 0
    assert "[lookup] level=DEBUG stage=search event=start" in result.output
    assert "event=skip" in result.output
