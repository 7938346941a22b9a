"""
whyinstalled — CLI entrypoint.

Usage:
    whyinstalled --help
    whyinstalled PACKAGE
    whyinstalled --json PACKAGE
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from whyinstalled import __version__
from whyinstalled.core.config.loader import ConfigError, resolve_settings
from whyinstalled.core.errors import RecordParseFailure, WhyInstalledError
from whyinstalled.core.observability.logging_config import configure_cli_logging


@click.command()
@click.version_option(version=__version__, prog_name="whyinstalled")
@click.argument("package")
@click.option(
    "--db-path",
    type=click.Path(path_type=Path),
    default=None,
    help="Package database directory (default: /var/lib/pacman/local).",
)
@click.option(
    "--max-chains",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum installation chains to display (0 = all).",
)
@click.option("--all", "show_all", is_flag=True, help="Show every installation chain.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a YAML settings file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (lists skipped records).")
def cli(
    package: str,
    db_path: Path | None,
    max_chains: int | None,
    show_all: bool,
    as_json: bool,
    config_path: Path | None,
    verbose: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """Explain why PACKAGE is installed."""
    from whyinstalled.core.use_cases.explain import explain_package
    from whyinstalled.ui.cli.report import render_report

    configure_cli_logging(debug=debug, verbose=verbose, quiet=quiet)

    try:
        settings = resolve_settings(config_path, db_path=db_path, max_chains=max_chains)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    def _report_skip(failure: RecordParseFailure) -> None:
        click.secho(f"   skipped {failure}", fg="bright_black", err=True)

    try:
        result = explain_package(package, settings, on_skip=_report_skip if debug else None)
    except WhyInstalledError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ Error: {e}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    render_report(result, max_chains=0 if show_all else settings.max_chains)


if __name__ == "__main__":
    cli()
