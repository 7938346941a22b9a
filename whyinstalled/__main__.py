"""Allow ``python -m whyinstalled``."""

from whyinstalled.main import cli

cli()
