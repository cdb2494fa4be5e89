"""Shared pytest fixtures for the full pathsearch test suite."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_lookup_logging() -> Iterator[None]:
    """Drop sinks installed by a test and silence pathsearch logs again."""

    yield
    logger.remove()
    logger.disable("pathsearch")


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Create a file (and its parent directories) with placeholder content."""

    def _make_file(path: Path, content: str = "stub") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _make_file


@pytest.fixture
def working_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Switch into an empty working directory and return its canonical path."""

    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return Path(os.getcwd())


@pytest.fixture
def path_env() -> Callable[..., dict[str, str]]:
    """Build injected environment mappings with PATH and optional PATHEXT."""

    def _path_env(*directories: Path | str, pathext: str | None = None) -> dict[str, str]:
        env = {"PATH": os.pathsep.join(str(directory) for directory in directories)}
        if pathext is not None:
            env["PATHEXT"] = pathext
        return env

    return _path_env
