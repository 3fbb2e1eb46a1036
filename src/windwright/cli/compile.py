"""CLI command: windwright compile -- print the CSS for each candidate."""

from __future__ import annotations

import sys

import click

from windwright.design_system import build_design_system
from windwright.validation import CandidateError, diagnose


@click.command(name="compile")
@click.argument("candidates", nargs=-1, required=True)
@click.option("--strict", is_flag=True, default=False, help="Fail on the first unusable candidate.")
def compile_command(candidates: tuple[str, ...], strict: bool) -> None:
    """Compile CANDIDATES and print one CSS rule per line.

    Candidates that produce no CSS are reported on stderr.  Exits with code
    0 when every candidate compiles, or code 1 otherwise.
    """
    design = build_design_system()

    try:
        results = design.compile_batch(candidates, strict=strict)
    except CandidateError as exc:
        for diag in exc.diagnostics:
            click.echo(str(diag), err=True)
        sys.exit(1)

    for _, css in results:
        if css is not None:
            click.echo(css)

    failed = [raw for raw, css in results if css is None]
    if not failed:
        sys.exit(0)

    for diag in diagnose(design, failed):
        click.echo(str(diag), err=True)
    click.echo(f"Summary: {len(results) - len(failed)} compiled, {len(failed)} skipped", err=True)
    sys.exit(1)
