"""
Chain finder — every path from an explicitly installed package down to
a target.

The walk runs backwards over reverse-dependency edges: from the target
to the packages that require it, then to the packages that require
those, until an explicitly installed package closes the chain.

The visited set is scoped to the current path, not to the whole walk.
A package can legitimately sit in several independent chains; it just
cannot appear twice in the same one.  That is also what keeps cyclic
metadata from looping forever.

The walk uses an explicit stack rather than recursion, so chain length
is not bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from whyinstalled.core.models.package import InstallChain, PackageRecord

logger = logging.getLogger(__name__)

# (current package, path from target to it, names on that path)
_Frame = tuple[str, tuple[str, ...], frozenset[str]]


def find_chains(
    target: str,
    index: Mapping[str, PackageRecord],
    reverse_map: Mapping[str, frozenset[str]],
) -> list[InstallChain]:
    """Find all install chains that end at ``target``.

    Args:
        target: Package to explain. Must already exist in ``index``.
        index: Package index.
        reverse_map: Dependency name → dependent package names.

    Returns:
        Chains ordered root-first, sorted for a stable result. Empty when
        the target is itself explicit or no explicit ancestor exists.
    """
    record = index.get(target)
    if record is not None and record.is_explicit:
        return []

    chains: list[InstallChain] = []
    stack: list[_Frame] = [(target, (target,), frozenset({target}))]

    while stack:
        name, path, on_path = stack.pop()

        # Reversed so dependents pop off the stack in sorted order
        for dependent in sorted(reverse_map.get(name, ()), reverse=True):
            if dependent in on_path:
                logger.debug("Cycle: %s already on path %s", dependent, path)
                continue

            dep_record = index.get(dependent)
            if dep_record is None:
                continue  # dropped from the index as unparseable

            dep_path = path + (dependent,)
            if dep_record.is_explicit:
                chains.append(tuple(reversed(dep_path)))
            else:
                stack.append((dependent, dep_path, on_path | {dependent}))

    chains.sort()
    logger.debug("Found %d chain(s) for %s", len(chains), target)
    return chains
