"""Structured lookup logging utilities.

Responsibilities:
- Emit concise, deterministic event lines for search and version lookups.
- Keep library output silent until a host application opts in.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

_PACKAGE_NAME = "pathsearch"


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character
        if character.isalnum() or character in {"-", "_", ".", ":", "/", "\\"}
        else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


def configure_logging(sink: TextIO | None = None, level: str = "INFO") -> int:
    """Enable pathsearch logs and route them to one plain-message sink.

    Returns:
        The loguru handler id, so callers can remove the sink again.
    """

    logger.remove()
    logger.enable(_PACKAGE_NAME)
    return logger.add(
        sink or sys.stderr,
        format="{message}",
        level=level.upper(),
        colorize=False,
    )


class LookupLogger:
    """Emit deterministic event logs for executable lookup activity."""

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured lookup log line."""

        line = f"[lookup] level={level} stage={stage} event={event}{_format_context(context)}"
        logger.log(level, line)

    def log_search_start(self, name: str, directory_count: int) -> None:
        """Emit a search-start event with the number of candidate directories."""

        self._emit("DEBUG", "start", "search", name=name, directories=directory_count)

    def log_directory_skipped(self, directory: str, reason: str) -> None:
        """Emit an event for a candidate directory that contributed no listing."""

        self._emit("DEBUG", "skip", "scan", directory=directory, reason=reason)

    def log_match(self, path: str) -> None:
        self._emit("DEBUG", "match", "scan", path=path)

    def log_search_complete(self, name: str, match_count: int) -> None:
        """Emit a search-complete event with the number of matches."""

        self._emit("DEBUG", "complete", "search", name=name, matches=match_count)

    def log_resolved(self, path: str, source: str) -> None:
        """Emit a resolution event; `source` is `direct` or `search`."""

        self._emit("INFO", "resolved", "resolve", path=path, source=source)

    def log_not_found(self, executable: str) -> None:
        self._emit("WARNING", "not_found", "resolve", executable=executable)

    def log_version_read(self, path: str, version: object) -> None:
        self._emit("DEBUG", "read", "version", path=path, version=version)

    def log_version_unavailable(self, path: str, reason: str) -> None:
        """Emit an event for a binary without readable version metadata."""

        self._emit("DEBUG", "unavailable", "version", path=path, reason=reason)
