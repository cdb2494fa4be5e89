"""Top-level package for pathsearch.

This package locates executables by emulating operating-system PATH lookup
and reads the file version of the resolved binary. The main entry points are
`search` and `get_version_for_executable`.
"""

from loguru import logger

from .errors import ExecutableNotFoundError
from .models.datatypes import VersionTriple
from .runtime_tools import (
    get_version_for_executable,
    get_version_triple,
    resolve_executable,
    search,
)

logger.disable("pathsearch")

__all__ = [
    "ExecutableNotFoundError",
    "VersionTriple",
    "__version__",
    "get_version_for_executable",
    "get_version_triple",
    "resolve_executable",
    "search",
]

__version__ = "0.1.0"
