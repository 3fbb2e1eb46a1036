"""Candidate validator: runs all diagnostic rules over a batch of classes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable

from windwright.model.diagnostic import Diagnostic
from windwright.validation.rules import ALL_RULES

if TYPE_CHECKING:
    from windwright.design_system import DesignSystem


class CandidateError(Exception):
    """Raised in strict mode when a candidate produces no CSS."""

    def __init__(self, candidate: str, diagnostics: list[Diagnostic]) -> None:
        self.candidate = candidate
        self.diagnostics = diagnostics
        messages = [d.message for d in diagnostics if d.is_error]
        super().__init__(f"Invalid candidate {candidate!r}: " + "; ".join(messages))


RuleFunc = Callable[["DesignSystem", str], list[Diagnostic]]


def explain(
    design: DesignSystem, raw: str, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run every rule against one candidate."""
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(design, raw))
    return diagnostics


def diagnose(
    design: DesignSystem,
    classes: Iterable[str],
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all rules against *classes*.

    Candidates with ERROR diagnostics are recorded in the design system's
    invalid-candidate set.  Returns the full list of diagnostics.
    """
    diagnostics: list[Diagnostic] = []
    seen: set[str] = set()
    for raw in classes:
        if raw in seen:
            continue
        seen.add(raw)
        found = explain(design, raw, extra_rules=extra_rules)
        if any(d.is_error for d in found):
            design.mark_invalid_candidate(raw)
        diagnostics.extend(found)
    return diagnostics


def diagnose_or_raise(
    design: DesignSystem,
    classes: Iterable[str],
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run diagnostics; raises :class:`CandidateError` for the first invalid candidate.

    Returns the non-error diagnostics when no errors are found.
    """
    diagnostics = diagnose(design, classes, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        first = errors[0].candidate
        raise CandidateError(first, [d for d in errors if d.candidate == first])
    return diagnostics
