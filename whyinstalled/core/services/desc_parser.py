"""
``desc`` record parser — turns one pacman local-database entry into a
``PackageRecord``.

Record layout (one value per line, blank lines between sections)::

    %NAME%
    bash

    %VERSION%
    5.2.026-2

    %REASON%
    1

    %DEPENDS%
    readline>=7.0
    glibc

Unknown sections are ignored.  ``%REASON%`` absent or ``0`` means the
user asked for the package; ``1`` means it was pulled in as a
dependency.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from whyinstalled.core.errors import RecordParseFailure
from whyinstalled.core.models.package import InstallReason, PackageRecord

logger = logging.getLogger(__name__)

DESC_FILE = "desc"

# %REASON% value pacman writes for dependency installs
_REASON_DEPENDENCY = "1"


def parse_desc_text(text: str, source: Path | None = None) -> PackageRecord:
    """Parse the contents of a ``desc`` file.

    Raises:
        RecordParseFailure: If the record has no name or fails validation.
    """
    src = source or Path(DESC_FILE)
    fields: dict = {"dependencies": []}
    desc_lines: list[str] = []
    section = ""

    for raw in text.splitlines():
        line = raw.strip()
        if len(line) > 1 and line.startswith("%") and line.endswith("%"):
            section = line.strip("%")
            continue
        if not line:
            continue

        if section == "NAME":
            fields["name"] = line
        elif section == "VERSION":
            fields["version"] = line
        elif section == "DESC":
            desc_lines.append(line)
        elif section == "REASON":
            if line == _REASON_DEPENDENCY:
                fields["install_reason"] = InstallReason.DEPENDENCY
        elif section == "DEPENDS":
            fields["dependencies"].append(line)

    if "name" not in fields:
        raise RecordParseFailure(src, "missing %NAME% section")
    if desc_lines:
        fields["description"] = " ".join(desc_lines)

    try:
        return PackageRecord.model_validate(fields)
    except ValidationError as e:
        raise RecordParseFailure(src, str(e)) from e


def parse_desc_file(path: Path) -> PackageRecord:
    """Read and parse a ``desc`` file from disk.

    Raises:
        RecordParseFailure: If the file cannot be read or decoded, or
            its content is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RecordParseFailure(path, f"cannot read: {e}") from e
    return parse_desc_text(text, source=path)
