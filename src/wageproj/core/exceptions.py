"""Wage projection exception hierarchy.

Only configuration and loading problems raise. Incomplete user input is
reported through the "N/A" sentinel instead.
"""

from __future__ import annotations


class WageProjError(Exception):
    """Base exception for all wage projection errors."""


class ReferenceDataError(WageProjError):
    """A reference-data document could not be read or did not match its shape."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"Invalid reference data in {source}: {message}")


class ScheduleConfigError(WageProjError):
    """The adjustment schedule is malformed (e.g. duplicate event names)."""
