"""Binary version metadata reader.

Responsibilities:
- Read the fixed file-version record embedded in a PE image with `pefile`.
- Reduce it to the major/minor/build components used by callers.

Files that are not PE images, or PE images without a version resource, report
`0.0.0`, the same as the host version-info facility does for such files. Files
that cannot be read report `0.0.0` as well.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pefile

from .models.datatypes import VersionTriple
from .telemetry.logger import LookupLogger

VersionReader = Callable[[str], VersionTriple]

EMPTY_VERSION = VersionTriple(0, 0, 0)
_RESOURCE_DIRECTORY = pefile.DIRECTORY_ENTRY["IMAGE_DIRECTORY_ENTRY_RESOURCE"]


def version_from_fixed_info(file_version_ms: int, file_version_ls: int) -> VersionTriple:
    """Split the packed `FileVersionMS`/`FileVersionLS` words into a triple.

    The private (fourth) component in the low word of `FileVersionLS` is dropped.
    """

    return VersionTriple(
        major=(file_version_ms >> 16) & 0xFFFF,
        minor=file_version_ms & 0xFFFF,
        build=(file_version_ls >> 16) & 0xFFFF,
    )


def read_file_version(
    path: str | Path,
    lookup_logger: LookupLogger | None = None,
) -> VersionTriple:
    """Read the file version of the binary at `path`.

    Unreadable files degrade to `0.0.0` like non-PE files; nothing is raised.
    """

    run_logger = lookup_logger or LookupLogger()
    file_path = str(path)
    try:
        with open(file_path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        run_logger.log_version_unavailable(file_path, f"unreadable_{type(exc).__name__}")
        return EMPTY_VERSION

    try:
        with pefile.PE(data=data, fast_load=True) as image:
            image.parse_data_directories(directories=[_RESOURCE_DIRECTORY])
            fixed_infos = getattr(image, "VS_FIXEDFILEINFO", None) or []
            if not fixed_infos:
                run_logger.log_version_unavailable(file_path, "no_version_resource")
                return EMPTY_VERSION
            fixed_info = fixed_infos[0]
            version = version_from_fixed_info(fixed_info.FileVersionMS, fixed_info.FileVersionLS)
    except pefile.PEFormatError:
        run_logger.log_version_unavailable(file_path, "not_a_pe_image")
        return EMPTY_VERSION

    run_logger.log_version_read(file_path, version)
    return version
