"""
Shared test fixtures — fake pacman local databases.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest


def render_desc(
    name: str | None,
    version: str = "1.0-1",
    reason: int | None = None,
    depends: list[str] | None = None,
    desc: str = "",
) -> str:
    """Render a ``desc`` record the way pacman writes it."""
    parts: list[str] = []
    if name is not None:
        parts.append(f"%NAME%\n{name}\n")
    parts.append(f"%VERSION%\n{version}\n")
    if desc:
        parts.append(f"%DESC%\n{desc}\n")
    if reason is not None:
        parts.append(f"%REASON%\n{reason}\n")
    if depends:
        parts.append("%DEPENDS%\n" + "\n".join(depends) + "\n")
    return "\n".join(parts) + "\n"


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Return an empty local database directory."""
    path = tmp_path / "local"
    path.mkdir()
    (path / "ALPM_DB_VERSION").write_text("9\n")
    return path


@pytest.fixture
def add_package(db_path: Path) -> Callable[..., Path]:
    """Return a helper that writes one package entry into ``db_path``.

    ``explicit=False`` writes ``%REASON% 1``.
    """

    def _add(
        name: str,
        *depends: str,
        explicit: bool = False,
        version: str = "1.0-1",
        desc: str = "",
    ) -> Path:
        entry = db_path / f"{name}-{version}"
        entry.mkdir()
        (entry / "desc").write_text(
            render_desc(
                name,
                version=version,
                reason=None if explicit else 1,
                depends=list(depends),
                desc=desc,
            )
        )
        return entry

    return _add


@pytest.fixture
def sample_db(db_path: Path, add_package: Callable[..., Path]) -> Path:
    """A small but realistic database.

    gimp (explicit) → gtk3>=3.24 → glib2
    nautilus (explicit) → gtk3 → glib2
    glib2 → pcre2
    orphanlib (dependency, nothing requires it)
    """
    add_package("gimp", "gtk3>=3.24", "babl", explicit=True, desc="GNU Image Manipulation Program")
    add_package("nautilus", "gtk3", explicit=True)
    add_package("gtk3", "glib2", "cairo")
    add_package("cairo", "glib2")
    add_package("babl")
    add_package("glib2", "pcre2>=10.0", version="2.80.0-1")
    add_package("pcre2", version="10.43-1")
    add_package("orphanlib")
    return db_path


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers the CLI installs so they don't outlive the test."""
    yield
    logger = logging.getLogger("whyinstalled")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
