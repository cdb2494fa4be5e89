"""Telemetry and observability helpers.

This package emits structured lookup events through loguru.
"""

from .logger import LookupLogger, configure_logging

__all__ = ["LookupLogger", "configure_logging"]
