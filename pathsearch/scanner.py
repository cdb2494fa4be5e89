"""Directory scanning for files satisfying an executable match rule."""

from __future__ import annotations

import os
from typing import Sequence

from .matching import ExecutableMatcher
from .telemetry.logger import LookupLogger


def _list_matching_files(directory: str, matcher: ExecutableMatcher) -> list[str]:
    """Return absolute paths of immediate files in `directory` accepted by `matcher`.

    Raises:
        OSError: If the directory cannot be enumerated.
    """

    matches: list[str] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if not matcher.matches(entry.name):
                continue
            if entry.is_file():
                matches.append(os.path.abspath(entry.path))
    return matches


def scan_directories(
    directories: Sequence[str],
    matcher: ExecutableMatcher,
    lookup_logger: LookupLogger | None = None,
) -> list[str]:
    """Collect matching files across directories in search order.

    Blank and missing directories are skipped. A directory that fails to
    enumerate contributes no matches and does not stop the scan.
    """

    run_logger = lookup_logger or LookupLogger()
    results: list[str] = []
    for raw_directory in directories:
        directory = raw_directory.strip()
        if not directory:
            continue
        if not os.path.isdir(directory):
            run_logger.log_directory_skipped(directory, "missing")
            continue
        try:
            directory_matches = _list_matching_files(directory, matcher)
        except OSError as exc:
            run_logger.log_directory_skipped(directory, type(exc).__name__)
            continue
        for path in directory_matches:
            run_logger.log_match(path)
        results.extend(directory_matches)
    return results
