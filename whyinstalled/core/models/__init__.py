"""
Domain models — Pydantic types for installed packages.

    from whyinstalled.core.models import PackageRecord, InstallReason
"""

from whyinstalled.core.models.package import InstallChain, InstallReason, PackageRecord

__all__ = [
    "InstallChain",
    "InstallReason",
    "PackageRecord",
]
