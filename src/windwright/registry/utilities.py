"""Utility registry: the closed set of utility kinds and their lookup table.

Kinds:
    StaticUtility      -- fixed declarations (``underline``, ``sr-only``).
    DynamicUtility     -- declarations computed from a value via ValueRules
                          (``bg-red-500``, ``p-4``, ``w-[calc(100%-1rem)]``).
    ArbitraryProperty  -- one declaration synthesized from ``[property:value]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Union

__all__ = [
    "StaticUtility",
    "ValueRule",
    "DynamicUtility",
    "ArbitraryProperty",
    "Utility",
    "UtilityRegistry",
]


@dataclass(frozen=True)
class StaticUtility:
    name: str
    declarations: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class ValueRule:
    """One way a dynamic utility can turn a value into declarations.

    Named values are tried against ``keywords``, then the theme
    ``namespaces``, then each ``bare`` handler (``integer``, ``number``,
    ``percentage``, ``spacing``, ``fraction``).  Arbitrary values are
    accepted when their data type is in ``data_types``, or by a rule with
    ``fallback`` set when no type could be inferred.
    """

    properties: tuple[str, ...]
    namespaces: tuple[str, ...] = ()
    keywords: Mapping[str, str] = field(default_factory=dict)
    bare: tuple[str, ...] = ()
    bare_template: str = "{}"
    data_types: tuple[str, ...] = ()
    fallback: bool = False
    color: bool = False
    companions: tuple[tuple[str, str], ...] = ()  # (property, theme suffix)
    ignored: tuple[str, ...] = ()  # nested namespaces this rule must skip


@dataclass(frozen=True)
class DynamicUtility:
    name: str
    rules: tuple[ValueRule, ...]
    default: str | None = None  # value used by the bare root, e.g. ``border``
    supports_negative: bool = False

    def data_types(self) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for rule in self.rules:
            for name in rule.data_types:
                seen.setdefault(name, None)
        return tuple(seen)


@dataclass(frozen=True)
class ArbitraryProperty:
    name: str = "[arbitrary]"


Utility = Union[StaticUtility, DynamicUtility, ArbitraryProperty]


class UtilityRegistry:
    """Ordered table of utilities keyed by root name.

    A name may be registered more than once (e.g. ``flex`` as a static
    display utility and as a dynamic ``flex-1`` utility); entries keep their
    registration order, which doubles as their sort order.  The registry is
    frozen before use and is read-only from then on.
    """

    def __init__(self) -> None:
        self._entries: list[StaticUtility | DynamicUtility] = []
        self._by_name: dict[str, list[StaticUtility | DynamicUtility]] = {}
        self._order: dict[int, int] = {}
        self._frozen = False
        self.arbitrary_property = ArbitraryProperty()

    # --- registration ---------------------------------------------------------

    def register(self, utility: StaticUtility | DynamicUtility) -> None:
        if self._frozen:
            raise RuntimeError("UtilityRegistry is frozen")
        if not utility.name:
            raise ValueError("Utility name must not be empty")
        self._order[id(utility)] = len(self._entries)
        self._entries.append(utility)
        self._by_name.setdefault(utility.name, []).append(utility)

    def static(self, name: str, *declarations: tuple[str, str]) -> None:
        self.register(StaticUtility(name, tuple(declarations)))

    def dynamic(
        self,
        name: str,
        *rules: ValueRule,
        default: str | None = None,
        supports_negative: bool = False,
    ) -> None:
        self.register(
            DynamicUtility(name, tuple(rules), default=default, supports_negative=supports_negative)
        )

    def freeze(self) -> UtilityRegistry:
        self._frozen = True
        return self

    # --- lookup ---------------------------------------------------------------

    def has(self, name: str) -> bool:
        return name in self._by_name

    def get(self, name: str) -> tuple[StaticUtility | DynamicUtility, ...]:
        return tuple(self._by_name.get(name, ()))

    def accepts_value(self, name: str) -> bool:
        """True if some entry for *name* can take a value."""
        return any(isinstance(u, DynamicUtility) for u in self._by_name.get(name, ()))

    def accepts_bare(self, name: str) -> bool:
        """True if some entry for *name* can be used with no value."""
        return any(
            isinstance(u, StaticUtility) or u.default is not None
            for u in self._by_name.get(name, ())
        )

    def order(self, utility: Utility) -> int:
        """Registration index of *utility*; arbitrary properties sort last."""
        if isinstance(utility, ArbitraryProperty):
            return len(self._entries)
        return self._order[id(utility)]

    def entries(self) -> list[StaticUtility | DynamicUtility]:
        return list(self._entries)

    def __iter__(self) -> Iterator[StaticUtility | DynamicUtility]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"UtilityRegistry(entries={len(self._entries)}, frozen={self._frozen})"
