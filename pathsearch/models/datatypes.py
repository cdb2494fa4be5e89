"""Core datatypes shared across pathsearch modules.

Responsibilities:
- Represent immutable records exchanged between lookup stages.
- Provide explicit typing for environment snapshots and version metadata.

Key types:
- `SearchEnvironment` and `VersionTriple`.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SearchEnvironment:
    """Environment values read for one search call.

    Attributes:
        path_value: Raw, trimmed PATH string (empty when unset).
        extensions: Executable suffixes from PATHEXT, in declaration order.
    """

    path_value: str = ""
    extensions: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class VersionTriple:
    """Major/minor/build version numbers read from a binary.

    Attributes:
        major: Major version component.
        minor: Minor version component.
        build: Build version component.
    """

    major: int
    minor: int
    build: int

    def __post_init__(self) -> None:
        """Reject negative components."""

        for name in ("major", "minor", "build"):
            if getattr(self, name) < 0:
                raise ValueError(f"`{name}` must be a non-negative integer.")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}"
