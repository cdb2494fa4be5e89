"""Unit tests for structured lookup logging."""

from __future__ import annotations

import io

from loguru import logger

from pathsearch.telemetry.logger import LookupLogger, configure_logging


def test_lookup_logger_is_silent_until_configured() -> None:
    """Library logs should not reach sinks while the package is disabled."""

    sink = io.StringIO()
    logger.remove()
    logger.add(sink, format="{message}", level="TRACE")

    LookupLogger().log_not_found("tool")

    assert sink.getvalue() == ""


def test_lookup_logger_emits_sorted_sanitized_context() -> None:
    """Event lines should carry sorted keys and shell-safe values."""

    sink = io.StringIO()
    configure_logging(sink, level="DEBUG")

    LookupLogger().log_directory_skipped("/opt/my tools", "missing")

    assert sink.getvalue() == (
        "[lookup] level=DEBUG stage=scan event=skip directory=/opt/my_tools reason=missing\n"
    )


def test_configure_logging_filters_by_level() -> None:
    """Events below the configured level should be dropped."""

    sink = io.StringIO()
    configure_logging(sink, level="warning")
    lookup_logger = LookupLogger()

    lookup_logger.log_search_start("tool", 3)
    lookup_logger.log_not_found("tool")

    assert sink.getvalue() == (
        "[lookup] level=WARNING stage=resolve event=not_found executable=tool\n"
    )
