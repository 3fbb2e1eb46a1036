"""CLI commands: windwright classes / windwright variants -- list known names."""

from __future__ import annotations

import click

from windwright.design_system import build_design_system


@click.command()
@click.option("--prefix", default="", help="Only list classes starting with PREFIX.")
def classes(prefix: str) -> None:
    """List every class the stock theme can form."""
    design = build_design_system()
    for entry in design.get_class_list():
        if not entry.name.startswith(prefix):
            continue
        if entry.modifiers:
            click.echo(f"{entry.name}\t/{entry.modifiers[0]}..{entry.modifiers[-1]}")
        else:
            click.echo(entry.name)


@click.command()
def variants() -> None:
    """List every registered variant in cascade order."""
    design = build_design_system()
    for entry in design.get_variants():
        line = entry.name
        if entry.is_arbitrary:
            line += "-[...]" if entry.has_dash else "[...]"
        if entry.values:
            line += f"\t{', '.join(entry.values)}"
        click.echo(line)
