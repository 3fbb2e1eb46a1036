"""Cascade order for batches of candidates.

A recognized candidate sorts by, in turn:
    1. variant-stack depth, then each variant's registration order and
       argument, outermost first;
    2. the registration order of the utility that produced it (arbitrary
       properties after every registered utility);
    3. its value in natural order (digit runs compare as numbers), then
       negative after positive, then the modifier;
    4. the important flag and finally the raw string, so the order is total.

Keys depend only on the registries and the strings themselves, never on the
position of a string in the batch.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Iterable

from windwright.model.candidate import Candidate, NamedValue
from windwright.model.variant import (
    ArbitraryArg,
    ArbitraryVariant,
    CompoundVariant,
    FunctionalVariant,
    IdentifierArg,
    Variant,
    variant_to_string,
)

if TYPE_CHECKING:
    from windwright.design_system import DesignSystem

__all__ = ["get_class_order", "sort_key"]

_DIGITS_RE = re.compile(r"(\d+)")

NaturalKey = tuple[tuple[int, int, str, str], ...]


def natural_key(text: str) -> NaturalKey:
    """Split *text* so that ``p-2`` sorts before ``p-10``."""
    parts: list[tuple[int, int, str, str]] = []
    for chunk in _DIGITS_RE.split(text):
        if not chunk:
            continue
        if chunk.isdigit():
            # Longer runs are larger; equal lengths compare digit by digit.
            digits = chunk.lstrip("0") or "0"
            parts.append((0, len(digits), digits, chunk))
        else:
            parts.append((1, 0, chunk, ""))
    return tuple(parts)


def _variant_key(variant: Variant, design: DesignSystem) -> tuple[int, NaturalKey]:
    registry = design.variants
    if isinstance(variant, ArbitraryVariant):
        return len(registry), natural_key(variant.selector)
    if isinstance(variant, CompoundVariant):
        inner = variant.inner
        leaf = inner
        while isinstance(leaf, CompoundVariant):
            leaf = leaf.inner
        leaf_order = len(registry) if isinstance(leaf, ArbitraryVariant) else registry.order(leaf.name)
        detail = f"{leaf_order:06d}:{variant_to_string(variant)}"
        return registry.order(variant.outer.name), natural_key(detail)
    if isinstance(variant, FunctionalVariant):
        argument = variant.argument
        if isinstance(argument, IdentifierArg):
            text = argument.name
        elif isinstance(argument, ArbitraryArg):
            text = f"[{argument.value}]"
        else:
            text = argument.value
        if variant.modifier is not None:
            text += f"/{variant.modifier}"
        return registry.order(variant.name), natural_key(text)
    return registry.order(variant.name), ()


def _value_text(candidate: Candidate) -> str:
    value = candidate.value
    if value is None:
        return ""
    if isinstance(value, NamedValue):
        return value.fraction or value.value
    return f"[{value.value}]"


def sort_key(design: DesignSystem, raw: str) -> tuple | None:
    """Return the comparison tuple for *raw*, or None if it yields no CSS."""
    candidate = design.parse_candidate(raw)
    if candidate is None:
        return None
    compilation = design.compile(raw)
    if not compilation.nodes or compilation.utility is None:
        return None
    variants = tuple(_variant_key(v, design) for v in candidate.variants)
    modifier = "" if candidate.modifier is None else candidate.modifier.value
    return (
        len(variants),
        variants,
        design.utilities.order(compilation.utility),
        natural_key(_value_text(candidate)),
        candidate.negative,
        natural_key(modifier),
        candidate.important,
        raw,
    )


def get_class_order(design: DesignSystem, classes: Iterable[str]) -> list[tuple[str, int | None]]:
    """Pair each class with its cascade position, or None if unrecognized.

    Positions are ranks within the batch: equal strings share a rank and a
    stable sort on the keys (None last) yields cascade-safe emission order.
    """
    classes = list(classes)
    keys: dict[str, tuple] = {}
    for raw in classes:
        if raw in keys:
            continue
        key = sort_key(design, raw)
        if key is not None:
            keys[raw] = key
    ranked = sorted(keys, key=keys.__getitem__)
    positions = {raw: index for index, raw in enumerate(ranked)}
    return [(raw, positions.get(raw)) for raw in classes]
