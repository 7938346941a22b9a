"""
Package index — name → PackageRecord for every installed package.

Built once per invocation from the local database directory.  The
index is best-effort: a record that fails to parse is left out and
the build carries on.  Only a store that cannot be listed at all is
fatal.

The reverse-dependency helpers live here too because they share the
dependency-name normalisation rule with nothing else.
"""

from __future__ import annotations

import logging
import re
from collections import defaultdict
from collections.abc import Callable, Mapping
from pathlib import Path

from whyinstalled.core.errors import PackageNotFound, RecordParseFailure, StoreUnavailable
from whyinstalled.core.models.package import PackageRecord
from whyinstalled.core.services.desc_parser import DESC_FILE, parse_desc_file

logger = logging.getLogger(__name__)

PackageIndex = dict[str, PackageRecord]
ReverseDependencyMap = dict[str, frozenset[str]]

# Called once per dropped record; opt-in visibility for parse failures
SkipHook = Callable[[RecordParseFailure], None]

# Version constraints start at the first comparison operator or space
_CONSTRAINT_RE = re.compile(r"[<>=\s]")


def normalize_dep_name(spec: str) -> str:
    """Strip the version constraint from a dependency specifier.

    ``"libfoo>=1.0"``, ``"libfoo<2.0"``, ``"libfoo=1.5"`` and ``"libfoo"``
    all become ``"libfoo"``.
    """
    return _CONSTRAINT_RE.split(spec.strip(), maxsplit=1)[0]


def build_index(db_path: Path, on_skip: SkipHook | None = None) -> PackageIndex:
    """Read every package record under ``db_path``.

    Args:
        db_path: Local database directory (one subdirectory per package).
        on_skip: Optional callback invoked with each ``RecordParseFailure``.

    Returns:
        Mapping of package name to record.

    Raises:
        StoreUnavailable: If ``db_path`` is missing or cannot be listed.
    """
    if not db_path.is_dir():
        raise StoreUnavailable(db_path, "not a directory")

    try:
        entries = sorted(db_path.iterdir())
    except OSError as e:
        raise StoreUnavailable(db_path, str(e)) from e

    index: PackageIndex = {}
    skipped = 0

    for entry in entries:
        if not entry.is_dir():
            continue  # ALPM_DB_VERSION and friends

        try:
            record = parse_desc_file(entry / DESC_FILE)
        except RecordParseFailure as e:
            skipped += 1
            logger.debug("Skipping unreadable record: %s", e)
            if on_skip is not None:
                on_skip(e)
            continue

        if record.name in index:
            logger.warning(
                "Duplicate package name %r in %s, keeping first", record.name, entry
            )
            continue
        index[record.name] = record

    logger.info("Indexed %d packages from %s (%d skipped)", len(index), db_path, skipped)
    return index


def get_package(index: Mapping[str, PackageRecord], name: str) -> PackageRecord:
    """Look up a package by name.

    Raises:
        PackageNotFound: If ``name`` is not in the index.
    """
    try:
        return index[name]
    except KeyError:
        raise PackageNotFound(name) from None


def dependency_names(record: PackageRecord) -> set[str]:
    """Normalised dependency names declared by a record."""
    names = {normalize_dep_name(spec) for spec in record.dependencies}
    names.discard("")
    return names


def build_reverse_map(index: Mapping[str, PackageRecord]) -> ReverseDependencyMap:
    """Derive dependency name → names of packages that declare it."""
    dependents: defaultdict[str, set[str]] = defaultdict(set)
    for record in index.values():
        for dep in dependency_names(record):
            dependents[dep].add(record.name)
    return {dep: frozenset(names) for dep, names in dependents.items()}


def find_required_by(name: str, index: Mapping[str, PackageRecord]) -> set[str]:
    """Names of the packages whose dependency list includes ``name``."""
    return {
        record.name
        for record in index.values()
        if name in dependency_names(record)
    }
