"""
Explain use case — answer "why is this package installed?".

Builds the index, derives reverse dependencies, looks up the target and
collects every install chain.  Nothing is cached between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from whyinstalled.core.config.loader import Settings
from whyinstalled.core.models.package import InstallChain, PackageRecord
from whyinstalled.core.services.chain_finder import find_chains
from whyinstalled.core.services.package_index import (
    SkipHook,
    build_index,
    build_reverse_map,
    find_required_by,
    get_package,
)


@dataclass
class ExplainResult:
    """Everything the reporter needs for one package."""

    package: PackageRecord
    chains: list[InstallChain] = field(default_factory=list)
    indexed_count: int = 0

    @property
    def is_orphan(self) -> bool:
        """Dependency install that nothing requires any more."""
        return not self.package.is_explicit and not self.package.required_by

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        pkg = self.package
        return {
            "name": pkg.name,
            "version": pkg.version,
            "description": pkg.description,
            "install_reason": pkg.install_reason.value,
            "dependencies": list(pkg.dependencies),
            "required_by": sorted(pkg.required_by),
            "chains": [list(c) for c in self.chains],
            "chain_count": len(self.chains),
            "orphan": self.is_orphan,
        }


def explain_package(
    name: str,
    settings: Settings,
    on_skip: SkipHook | None = None,
) -> ExplainResult:
    """Explain why ``name`` is installed.

    Raises:
        StoreUnavailable: If the package database cannot be listed.
        PackageNotFound: If ``name`` is not installed.
    """
    index = build_index(settings.db_path, on_skip=on_skip)
    record = get_package(index, name)

    reverse_map = build_reverse_map(index)
    required_by = frozenset(find_required_by(name, index))
    package = record.model_copy(update={"required_by": required_by})

    return ExplainResult(
        package=package,
        chains=find_chains(name, index, reverse_map),
        indexed_count=len(index),
    )
