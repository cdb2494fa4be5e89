"""Executable file-name matching with platform extension awareness.

Responsibilities:
- Decide which extension suffixes a requested executable name may carry.
- Compare candidate file names literally and case-insensitively.

Key types:
- `ExecutableMatcher`: immutable match rule for one search call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class ExecutableMatcher:
    """Case-insensitive rule matching one executable name.

    Attributes:
        name: Lower-cased executable name as requested.
        suffixes: Lower-cased extensions the file name must end with, one of.
            Empty when the name must match exactly.
    """

    name: str
    suffixes: tuple[str, ...] = ()

    def matches(self, file_name: str) -> bool:
        """Return whether `file_name` denotes the requested executable."""

        candidate = file_name.lower()
        if not self.suffixes:
            return candidate == self.name
        if len(candidate) <= len(self.name) or not candidate.startswith(self.name):
            return False
        return candidate[len(self.name):] in self.suffixes


def build_matcher(executable_name: str, extensions: Sequence[str]) -> ExecutableMatcher:
    """Build the match rule for `executable_name` against known extensions.

    A name that already ends with one of `extensions` matches exactly; any other
    name must be followed by exactly one of them. With no extensions the bare
    name matches exactly.
    """

    name = executable_name.lower()
    suffixes = tuple(extension.lower() for extension in extensions if extension)
    if any(name.endswith(suffix) for suffix in suffixes):
        return ExecutableMatcher(name=name)
    return ExecutableMatcher(name=name, suffixes=suffixes)
