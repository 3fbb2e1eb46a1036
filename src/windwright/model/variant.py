"""Variant model: the closed set of parsed variant shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ThemeKeyArg:
    """A named argument resolved by the variant, e.g. ``md`` in ``max-md``."""

    value: str


@dataclass(frozen=True)
class ArbitraryArg:
    """A decoded bracketed argument, e.g. ``state=open`` in ``data-[state=open]``."""

    value: str


@dataclass(frozen=True)
class IdentifierArg:
    """A group/peer name reference, e.g. ``sidebar`` in ``group-hover/sidebar``."""

    name: str


VariantArgument = Union[ThemeKeyArg, ArbitraryArg, IdentifierArg]


@dataclass(frozen=True)
class StaticVariant:
    name: str


@dataclass(frozen=True)
class FunctionalVariant:
    name: str
    argument: VariantArgument
    modifier: str | None = None


@dataclass(frozen=True)
class CompoundVariant:
    """``outer`` names the compound root; ``inner`` is the wrapped variant.

    Both must match for the rule to apply.
    """

    outer: StaticVariant | FunctionalVariant
    inner: Variant


@dataclass(frozen=True)
class ArbitraryVariant:
    """A bracketed selector or at-rule such as ``[&:nth-child(3)]``."""

    selector: str


Variant = Union[StaticVariant, FunctionalVariant, CompoundVariant, ArbitraryVariant]


def _argument_to_string(argument: VariantArgument) -> str:
    if isinstance(argument, ArbitraryArg):
        return f"[{argument.value}]"
    if isinstance(argument, IdentifierArg):
        return argument.name
    return argument.value


def variant_to_string(variant: Variant) -> str:
    """Render *variant* back into canonical segment form.

    Whitespace inside arbitrary parts is written as ``_``.
    """
    prefixes: list[str] = []
    suffix = ""
    while isinstance(variant, CompoundVariant):
        outer = variant.outer
        prefixes.append(outer.name)
        if isinstance(outer, FunctionalVariant) and isinstance(outer.argument, IdentifierArg):
            suffix = f"/{outer.argument.name}"
        variant = variant.inner

    if isinstance(variant, StaticVariant):
        leaf = variant.name
    elif isinstance(variant, FunctionalVariant):
        arg = _argument_to_string(variant.argument).replace(" ", "_")
        leaf = f"{variant.name}{arg}" if variant.name == "@" else f"{variant.name}-{arg}"
        if variant.modifier is not None:
            leaf += f"/{variant.modifier}"
    else:
        leaf = "[" + variant.selector.replace(" ", "_") + "]"

    return "".join(f"{p}-" for p in prefixes) + leaf + suffix
