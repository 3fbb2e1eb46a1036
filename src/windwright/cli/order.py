"""CLI command: windwright order -- print candidates in cascade order."""

from __future__ import annotations

import click

from windwright.design_system import build_design_system


@click.command()
@click.argument("candidates", nargs=-1, required=True)
@click.option("--keys", is_flag=True, default=False, help="Prefix each class with its sort key.")
def order(candidates: tuple[str, ...], keys: bool) -> None:
    """Sort CANDIDATES the way their rules must be emitted.

    Unrecognized candidates are printed last, in input order, with key '-'.
    """
    design = build_design_system()
    pairs = design.get_class_order(candidates)
    ranked = sorted(pairs, key=lambda pair: (pair[1] is None, pair[1] or 0))
    for raw, key in ranked:
        if keys:
            click.echo(f"{'-' if key is None else key}\t{raw}")
        else:
            click.echo(raw)
