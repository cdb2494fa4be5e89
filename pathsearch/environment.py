"""Process environment reader for executable lookup.

Responsibilities:
- Look up PATH and PATHEXT by well-known name, case-insensitively.
- Return a fresh `SearchEnvironment` value for every call.
"""

from __future__ import annotations

import os
from typing import Mapping

from .models.datatypes import SearchEnvironment
from .parsing import split_list_value

PATH_VARIABLE = "PATH"
PATH_EXTENSIONS_VARIABLE = "PATHEXT"
_EXTENSION_SEPARATOR = ";"


def lookup_variable(environ: Mapping[str, str], name: str) -> str | None:
    """Return a variable value by name, ignoring key case.

    An exact-case key wins; otherwise the first key whose upper-cased form
    equals `name.upper()` is used.
    """

    if name in environ:
        return environ[name]
    wanted = name.upper()
    for key, value in environ.items():
        if key.upper() == wanted:
            return value
    return None


def read_search_environment(environ: Mapping[str, str] | None = None) -> SearchEnvironment:
    """Read the PATH string and executable extensions from the environment.

    Absent variables degrade to an empty PATH and an empty extension tuple.
    """

    env_map: Mapping[str, str] = os.environ if environ is None else environ

    path_value = (lookup_variable(env_map, PATH_VARIABLE) or "").strip()
    raw_extensions = lookup_variable(env_map, PATH_EXTENSIONS_VARIABLE) or ""
    extensions = tuple(split_list_value(raw_extensions, _EXTENSION_SEPARATOR))
    return SearchEnvironment(path_value=path_value, extensions=extensions)
