"""
Domain errors — raised by the index and lookup services.

Only ``StoreUnavailable`` and ``PackageNotFound`` ever reach the CLI.
``RecordParseFailure`` is raised by the ``desc`` parser and absorbed by
the index builder, which drops the offending record.
"""

from __future__ import annotations

from pathlib import Path


class WhyInstalledError(Exception):
    """Base class for all whyinstalled domain errors."""


class StoreUnavailable(WhyInstalledError):
    """The package metadata store cannot be opened or listed."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"Package database unavailable: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class PackageNotFound(WhyInstalledError):
    """The queried package is not in the index."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"package '{name}' is not installed")


class RecordParseFailure(WhyInstalledError):
    """A single package record is malformed or unreadable."""

    def __init__(self, source: Path, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")
