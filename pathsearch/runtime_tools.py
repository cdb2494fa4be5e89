"""Executable search and version resolution helpers.

Responsibilities:
- Search the working directory and PATH for an executable, honouring PATHEXT.
- Resolve a caller-supplied path directly, falling back to PATH search.
- Read the major/minor/build version of the resolved binary.

Key public functions:
- `search`: all matching files in search order.
- `resolve_executable`: first usable location for a path or name.
- `get_version_triple` / `get_version_for_executable`: version lookup.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from .environment import read_search_environment
from .errors import ExecutableNotFoundError
from .matching import build_matcher
from .models.datatypes import VersionTriple
from .scanner import scan_directories
from .search_path import normalize_search_directories
from .telemetry.logger import LookupLogger
from .versioning import VersionReader, read_file_version


def search(
    executable_name: str,
    environ: Mapping[str, str] | None = None,
    lookup_logger: LookupLogger | None = None,
) -> list[str]:
    """Return every file matching `executable_name` across the search path.

    The working directory is searched first, then PATH entries in order. Any
    directory component of `executable_name` is ignored. Nothing found, or a
    blank name, yields an empty list.
    """

    run_logger = lookup_logger or LookupLogger()
    name = Path(executable_name.strip()).name
    if not name:
        return []

    environment = read_search_environment(environ)
    directories = normalize_search_directories(environment.path_value)
    matcher = build_matcher(name, environment.extensions)

    run_logger.log_search_start(name, len(directories))
    matches = scan_directories(directories, matcher, lookup_logger=run_logger)
    run_logger.log_search_complete(name, len(matches))
    return matches


def resolve_executable(
    executable_path: str,
    environ: Mapping[str, str] | None = None,
    lookup_logger: LookupLogger | None = None,
) -> str | None:
    """Return `executable_path` when it is a file, else the first search match.

    Resolution order:
    1. The literal path, when it names an existing file.
    2. The first `search` match for its file-name component.
    3. `None` when neither exists or the path is blank.
    """

    run_logger = lookup_logger or LookupLogger()
    if not executable_path:
        return None

    if os.path.isfile(executable_path):
        run_logger.log_resolved(executable_path, "direct")
        return executable_path

    locations = search(executable_path, environ=environ, lookup_logger=run_logger)
    if not locations:
        return None
    run_logger.log_resolved(locations[0], "search")
    return locations[0]


def get_version_triple(
    executable_path: str,
    throw_if_not_found: bool = False,
    version_reader: VersionReader = read_file_version,
    environ: Mapping[str, str] | None = None,
    lookup_logger: LookupLogger | None = None,
) -> VersionTriple | None:
    """Resolve `executable_path` and read its version.

    Raises:
        ExecutableNotFoundError: If nothing was found and `throw_if_not_found` is set.
    """

    run_logger = lookup_logger or LookupLogger()
    resolved_path = resolve_executable(
        executable_path, environ=environ, lookup_logger=run_logger
    )
    if resolved_path is None:
        run_logger.log_not_found(executable_path)
        if throw_if_not_found:
            raise ExecutableNotFoundError(executable=executable_path)
        return None

    if version_reader is read_file_version:
        return read_file_version(resolved_path, lookup_logger=run_logger)
    return version_reader(resolved_path)


def get_version_for_executable(
    executable_path: str,
    throw_if_not_found: bool = False,
    version_reader: VersionReader = read_file_version,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the `major.minor.build` version string, or `""` when not found."""

    version = get_version_triple(
        executable_path,
        throw_if_not_found=throw_if_not_found,
        version_reader=version_reader,
        environ=environ,
    )
    if version is None:
        return ""
    return str(version)
