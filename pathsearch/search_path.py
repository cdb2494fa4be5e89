"""Candidate directory list construction from a raw PATH value."""

from __future__ import annotations

import os

from .parsing import split_list_value

WORKING_DIRECTORY = "."


def _comparable(path: str) -> str:
    return os.path.normpath(path).lower()


def normalize_search_directories(
    path_value: str,
    separator: str = os.pathsep,
    working_directory: str | None = None,
) -> list[str]:
    """Return ordered candidate directories with the working directory first.

    Entries are trimmed; blank entries, `.` and any entry equal to the working
    directory (ignoring case) are dropped, then `.` is prepended once.

    Args:
        path_value: Raw PATH string.
        separator: Path-list separator, the platform one by default.
        working_directory: Directory compared against entries, `os.getcwd()` by default.
    """

    current = _comparable(working_directory if working_directory is not None else os.getcwd())

    directories = [WORKING_DIRECTORY]
    for entry in split_list_value(path_value, separator):
        if _comparable(entry) in (WORKING_DIRECTORY, current):
            continue
        directories.append(entry)
    return directories
