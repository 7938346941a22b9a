"""
Core services — package index, reverse dependencies, chain discovery.
"""

from whyinstalled.core.services.chain_finder import find_chains
from whyinstalled.core.services.package_index import (
    build_index,
    build_reverse_map,
    find_required_by,
    get_package,
    normalize_dep_name,
)

__all__ = [
    "build_index",
    "build_reverse_map",
    "find_chains",
    "find_required_by",
    "get_package",
    "normalize_dep_name",
]
