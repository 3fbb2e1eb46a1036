"""Diagnostic rules for candidate strings.

Each rule is a function taking a DesignSystem and one raw candidate and
returning a list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from windwright.model.diagnostic import Diagnostic, Severity

if TYPE_CHECKING:
    from windwright.design_system import DesignSystem


# ---------------------------------------------------------------------------
# Resolution rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_parse(design: DesignSystem, raw: str) -> list[Diagnostic]:
    """The candidate must match the candidate grammar with known variants."""
    if design.parse_candidate(raw) is not None:
        return []
    return [
        Diagnostic(
            rule="check_parse",
            severity=Severity.ERROR,
            message="Not a recognized utility class.",
            candidate=raw,
            fix="Check the utility name, variant names and bracket balance.",
        )
    ]


def check_resolves(design: DesignSystem, raw: str) -> list[Diagnostic]:
    """A parsed candidate must produce CSS."""
    if design.parse_candidate(raw) is None:
        return []
    compilation = design.compile(raw)
    if compilation.nodes:
        return []
    reason = compilation.failure or "no output"
    return [
        Diagnostic(
            rule="check_resolves",
            severity=Severity.ERROR,
            message=f"Produces no CSS: {reason}.",
            candidate=raw,
        )
    ]


# ---------------------------------------------------------------------------
# Style rules (INFO severity)
# ---------------------------------------------------------------------------


def check_important_style(design: DesignSystem, raw: str) -> list[Diagnostic]:
    """A leading ``!`` still works but the trailing form is preferred."""
    if not raw.startswith("!") or design.parse_candidate(raw) is None:
        return []
    return [
        Diagnostic(
            rule="check_important_style",
            severity=Severity.INFO,
            message="Leading '!' is the legacy important marker.",
            candidate=raw,
            fix=f"Use '{raw[1:]}!' instead.",
        )
    ]


ALL_RULES = [
    check_parse,
    check_resolves,
    check_important_style,
]
