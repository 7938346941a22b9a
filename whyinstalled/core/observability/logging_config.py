"""
Logging configuration for the ``whyinstalled`` command.

The CLI calls ``configure_cli_logging`` once, before the index is built.
Library modules only do ``logger = logging.getLogger(__name__)``.

Console level, highest precedence first::

    --debug          DEBUG  (also lists records dropped from the index)
    --verbose        INFO   (index size, settings summary)
    --quiet          ERROR
    WHYINSTALLED_LOG_LEVEL
    WARNING

``WHYINSTALLED_LOG_FILE`` adds a file handler, at
``WHYINSTALLED_LOG_FILE_LEVEL`` or the console level.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

ENV_LOG_LEVEL = "WHYINSTALLED_LOG_LEVEL"
ENV_LOG_FILE = "WHYINSTALLED_LOG_FILE"
ENV_LOG_FILE_LEVEL = "WHYINSTALLED_LOG_FILE_LEVEL"

_ROOT_LOGGER = "whyinstalled"

# Console: bare messages unless diagnostics were asked for
_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(levelname)-5s %(name)s:%(lineno)d — %(message)s", None),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"


def parse_level(level: str | None) -> int:
    """Convert a level name to its numeric constant (WARNING if unknown)."""
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.strip().upper())
    return numeric if isinstance(numeric, int) else logging.WARNING


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Pick the console level from CLI flags, falling back to the environment."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if quiet:
        return logging.ERROR
    env = os.environ if environ is None else environ
    return parse_level(env.get(ENV_LOG_LEVEL))


def configure_cli_logging(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Install console (and optional file) handlers on the ``whyinstalled`` logger.

    Returns:
        The resolved console level.
    """
    env = os.environ if environ is None else environ
    level = resolve_level(debug, verbose, quiet, env)

    fmt, datefmt = _CONSOLE_FORMATS.get(level, ("%(message)s", None))
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    logger = logging.getLogger(_ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(console)
    logger.propagate = False

    effective = level
    log_file = env.get(ENV_LOG_FILE)
    if log_file:
        file_level_name = env.get(ENV_LOG_FILE_LEVEL)
        file_level = parse_level(file_level_name) if file_level_name else level
        effective = min(effective, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(fh)

    logger.setLevel(effective)
    return level
