"""
Terminal report for an ``ExplainResult``.

Only this layer applies the chain display cap; the core always returns
the full set.
"""

from __future__ import annotations

import click

from whyinstalled.core.use_cases.explain import ExplainResult


def render_report(result: ExplainResult, max_chains: int) -> None:
    """Print the human-readable report.

    Args:
        result: Explanation to render.
        max_chains: Maximum number of chains to print; 0 prints all.
    """
    pkg = result.package

    click.secho(f"\n📦 {pkg.name} {pkg.version}", fg="cyan", bold=True)
    if pkg.description:
        click.echo(f"   {pkg.description}")
    click.echo()

    colour = "green" if pkg.is_explicit else "yellow"
    click.secho(f"   Reason: {pkg.install_reason.statement}", fg=colour)

    if not pkg.is_explicit:
        _render_chains(result, max_chains)

    click.echo()
    click.secho(f"   Dependencies ({len(pkg.dependencies)}):", fg="white", bold=True)
    click.echo(f"     {_join(list(pkg.dependencies))}")

    click.secho(f"   Required by ({len(pkg.required_by)}):", fg="white", bold=True)
    click.echo(f"     {_join(sorted(pkg.required_by))}")
    click.echo()


def _render_chains(result: ExplainResult, max_chains: int) -> None:
    chains = result.chains
    click.echo()

    if not chains:
        click.secho("   No installation chain found", fg="yellow")
        if result.is_orphan:
            click.echo("   (nothing requires this package; it may be an orphan)")
        return

    shown = chains if max_chains <= 0 else chains[:max_chains]
    click.secho(f"   Installation chains ({len(chains)}):", fg="white", bold=True)
    for chain in shown:
        click.echo(f"     • {' → '.join(chain)}")

    omitted = len(chains) - len(shown)
    if omitted:
        click.echo(f"     … and {omitted} more (use --all to show every chain)")


def _join(names: list[str]) -> str:
    return "  ".join(names) if names else "None"
