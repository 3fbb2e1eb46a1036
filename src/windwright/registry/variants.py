"""Variant registry: variant definitions and the wraps they produce.

A variant resolves to a single *wrap*:
    SelectorWrap(template)  -- rewrites rule selectors; ``&`` is the old one.
    AtRuleWrap(name, params) -- encloses the rule tree in a group rule.

Definition kinds:
    StaticVariantDef      -- ``hover``, ``md``, ``dark``.
    FunctionalVariantDef  -- takes an argument: ``aria-checked``, ``max-md``,
                             ``data-[state=open]``, ``@md/main``.
    CompoundVariantDef    -- wraps another variant: ``group-hover``,
                             ``not-focus``, ``has-checked``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Union

from windwright.model.variant import VariantArgument

__all__ = [
    "SelectorWrap",
    "AtRuleWrap",
    "Wrap",
    "StaticVariantDef",
    "FunctionalVariantDef",
    "CompoundVariantDef",
    "VariantDef",
    "VariantRegistry",
]


@dataclass(frozen=True)
class SelectorWrap:
    template: str


@dataclass(frozen=True)
class AtRuleWrap:
    name: str
    params: str


Wrap = Union[SelectorWrap, AtRuleWrap]

FunctionalResolver = Callable[[VariantArgument, Union[str, None]], Union[Wrap, None]]
CompoundResolver = Callable[[Wrap, Union[str, None]], Union[Wrap, None]]
ArbitraryResolver = Callable[[str, Union[str, None]], Union[Wrap, None]]


@dataclass(frozen=True)
class StaticVariantDef:
    name: str
    wrap: Wrap
    compounds: bool = True  # may appear inside group-*, not-*, ...


@dataclass(frozen=True)
class FunctionalVariantDef:
    name: str
    resolve: FunctionalResolver
    values: tuple[str, ...] = ()  # known named arguments, for enumeration


@dataclass(frozen=True)
class CompoundVariantDef:
    name: str
    compound: CompoundResolver
    arbitrary: ArbitraryResolver | None = None


VariantDef = Union[StaticVariantDef, FunctionalVariantDef, CompoundVariantDef]


class VariantRegistry:
    """Ordered table of variant definitions; one definition per name.

    Registration order is the cascade order: variants registered later
    produce rules that sort later.
    """

    def __init__(self) -> None:
        self._defs: dict[str, VariantDef] = {}
        self._order: dict[str, int] = {}
        self._frozen = False

    # --- registration ---------------------------------------------------------

    def register(self, definition: VariantDef) -> None:
        if self._frozen:
            raise RuntimeError("VariantRegistry is frozen")
        if not definition.name:
            raise ValueError("Variant name must not be empty")
        if definition.name in self._defs:
            raise ValueError(f"Duplicate variant: {definition.name!r}")
        self._order[definition.name] = len(self._defs)
        self._defs[definition.name] = definition

    def static(self, name: str, wrap: Wrap, compounds: bool = True) -> None:
        self.register(StaticVariantDef(name, wrap, compounds=compounds))

    def selector(self, name: str, template: str, compounds: bool = True) -> None:
        self.static(name, SelectorWrap(template), compounds=compounds)

    def at_rule(self, name: str, at_rule: str, params: str) -> None:
        self.static(name, AtRuleWrap(at_rule, params))

    def functional(
        self, name: str, resolve: FunctionalResolver, values: tuple[str, ...] = ()
    ) -> None:
        self.register(FunctionalVariantDef(name, resolve, values=values))

    def compound(
        self,
        name: str,
        compound: CompoundResolver,
        arbitrary: ArbitraryResolver | None = None,
    ) -> None:
        self.register(CompoundVariantDef(name, compound, arbitrary=arbitrary))

    def freeze(self) -> VariantRegistry:
        self._frozen = True
        return self

    # --- lookup ---------------------------------------------------------------

    def get(self, name: str) -> VariantDef | None:
        return self._defs.get(name)

    def has(self, name: str) -> bool:
        return name in self._defs

    def kind(self, name: str) -> str | None:
        definition = self._defs.get(name)
        if isinstance(definition, StaticVariantDef):
            return "static"
        if isinstance(definition, FunctionalVariantDef):
            return "functional"
        if isinstance(definition, CompoundVariantDef):
            return "compound"
        return None

    def order(self, name: str) -> int:
        """Registration index of *name*; unknown names sort after all others."""
        return self._order.get(name, len(self._defs))

    def entries(self) -> list[VariantDef]:
        return list(self._defs.values())

    def __iter__(self) -> Iterator[VariantDef]:
        return iter(list(self._defs.values()))

    def __len__(self) -> int:
        return len(self._defs)

    def __repr__(self) -> str:
        return f"VariantRegistry(entries={len(self._defs)}, frozen={self._frozen})"
