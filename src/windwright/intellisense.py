"""Enumerate the classes and variants a design system understands.

Used by editor tooling for completion; the lists are derived from the
registries and the theme, never from compiled output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from windwright.registry.utilities import DynamicUtility, StaticUtility, ValueRule
from windwright.registry.variants import (
    CompoundVariantDef,
    FunctionalVariantDef,
    StaticVariantDef,
)

if TYPE_CHECKING:
    from windwright.design_system import DesignSystem

__all__ = ["ClassEntry", "VariantEntry", "get_class_list", "get_variants"]

_OPACITY_STEPS = tuple(str(n) for n in range(0, 101, 5))
_FRACTIONS = ("1/2", "1/3", "2/3", "1/4", "2/4", "3/4")


@dataclass(frozen=True)
class ClassEntry:
    """A completable class name and the modifiers it accepts."""

    name: str
    modifiers: tuple[str, ...] = ()


@dataclass(frozen=True)
class VariantEntry:
    """A completable variant.

    Attributes:
        name: Root name, e.g. ``hover``, ``aria``, ``group``.
        is_arbitrary: Whether a bracketed argument is accepted.
        values: Known named arguments.
        has_dash: Whether arguments are joined with ``-`` (``@md`` is not).
    """

    name: str
    is_arbitrary: bool
    values: tuple[str, ...] = field(default_factory=tuple)
    has_dash: bool = True


def _rule_values(rule: ValueRule, design: DesignSystem) -> list[str]:
    values = list(rule.keywords)
    for namespace in rule.namespaces:
        for key in design.theme.keys_in(namespace):
            name = f"{namespace}-{key}"
            if any(name.startswith(f"{ignored}-") for ignored in rule.ignored):
                continue
            values.append(key)
    if "fraction" in rule.bare:
        values.extend(_FRACTIONS)
    if "percentage" in rule.bare:
        values.extend(_OPACITY_STEPS)
    return values


def get_class_list(design: DesignSystem) -> list[ClassEntry]:
    """Every class name the stock values can form, in registration order."""
    entries: dict[str, ClassEntry] = {}

    def add(name: str, modifiers: tuple[str, ...] = ()) -> None:
        if name not in entries:
            entries[name] = ClassEntry(name, modifiers)

    for utility in design.utilities:
        if isinstance(utility, StaticUtility):
            add(utility.name)
            continue
        if not isinstance(utility, DynamicUtility):
            continue
        if utility.default is not None:
            add(utility.name)
        for rule in utility.rules:
            modifiers = _OPACITY_STEPS if rule.color else ()
            for value in _rule_values(rule, design):
                add(f"{utility.name}-{value}", modifiers)
                if utility.supports_negative and value not in rule.keywords:
                    add(f"-{utility.name}-{value}", modifiers)
    return list(entries.values())


def get_variants(design: DesignSystem) -> list[VariantEntry]:
    """Every registered variant, in cascade order."""
    result: list[VariantEntry] = []
    for definition in design.variants:
        has_dash = definition.name != "@"
        if isinstance(definition, StaticVariantDef):
            result.append(VariantEntry(definition.name, is_arbitrary=False, has_dash=has_dash))
        elif isinstance(definition, FunctionalVariantDef):
            result.append(
                VariantEntry(definition.name, True, definition.values, has_dash=has_dash)
            )
        elif isinstance(definition, CompoundVariantDef):
            inner = tuple(
                d.name
                for d in design.variants
                if isinstance(d, StaticVariantDef) and d.compounds
            )
            result.append(
                VariantEntry(
                    definition.name,
                    definition.arbitrary is not None,
                    inner,
                    has_dash=has_dash,
                )
            )
    return result
