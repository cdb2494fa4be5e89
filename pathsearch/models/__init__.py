"""Shared typed data models for pathsearch.

This package contains dataclasses used across lookup modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import SearchEnvironment, VersionTriple

__all__ = [
    "SearchEnvironment",
    "VersionTriple",
]
