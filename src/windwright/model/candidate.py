"""Candidate model: a parsed utility-class string."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from windwright.model.variant import Variant


@dataclass(frozen=True)
class NamedValue:
    """A theme key, keyword or bare value such as ``red-500`` or ``4``.

    ``fraction`` is set when the value and a numeric modifier form ``a/b``
    (``w-1/2``).
    """

    value: str
    fraction: str | None = None


@dataclass(frozen=True)
class ArbitraryValue:
    """A decoded bracket literal; ``data_type`` holds an explicit type hint."""

    value: str
    data_type: str | None = None


@dataclass(frozen=True)
class NamedModifier:
    value: str


@dataclass(frozen=True)
class ArbitraryModifier:
    value: str


CandidateValue = Union[NamedValue, ArbitraryValue]
Modifier = Union[NamedModifier, ArbitraryModifier]


@dataclass(frozen=True)
class Candidate:
    """A successfully parsed candidate.

    Attributes:
        raw: The exact string this candidate was parsed from.
        kind: ``"static"`` (no value), ``"functional"`` (root plus value) or
            ``"arbitrary"`` (an arbitrary ``[property:value]`` declaration).
        root: Utility name; empty for arbitrary properties.
        value: Parsed value, if any.
        modifier: Trailing ``/`` modifier (an alpha value), uninterpreted.
        variants: Variant stack, leftmost (outermost) first.
        important: Whether a ``!`` marker was present.
        negative: Whether the utility was prefixed with ``-``.
        property: CSS property for arbitrary candidates.
    """

    raw: str
    kind: str
    root: str
    value: CandidateValue | None = None
    modifier: Modifier | None = None
    variants: tuple[Variant, ...] = ()
    important: bool = False
    negative: bool = False
    property: str | None = None
