"""
Package model — one installed package as read from the local database.

The declared fields come straight from the package's ``desc`` record.
``required_by`` is never stored on disk; it is computed from the
reverse-dependency lookup after the index is built.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

# An ordered path of package names, explicit root first, target last.
InstallChain = tuple[str, ...]


class InstallReason(str, Enum):
    """Why the package manager installed a package."""

    EXPLICIT = "Explicit"
    DEPENDENCY = "Dependency"

    @property
    def statement(self) -> str:
        if self is InstallReason.EXPLICIT:
            return "Explicitly installed"
        return "Installed as a dependency"


class PackageRecord(BaseModel):
    """A single installed package. Immutable once indexed."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str = ""
    description: str = ""
    install_reason: InstallReason = InstallReason.EXPLICIT
    dependencies: tuple[str, ...] = ()  # raw specifiers, in declared order

    # ── Computed ─────────────────────────────────────────────────
    required_by: frozenset[str] = frozenset()

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("package name must not be empty")
        return v

    @property
    def is_explicit(self) -> bool:
        return self.install_reason is InstallReason.EXPLICIT
