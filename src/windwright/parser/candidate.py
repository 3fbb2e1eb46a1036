"""Candidate parser: raw class string -> Candidate.

Grammar (whitespace-free, left to right):
    Candidate = '!'? (Variant ':')* '!'? '-'? Root Value? ('/' Modifier)? '!'?
    Value     = '-' Key | '-[' Arbitrary ']' | '-(' CustomProperty ')'
    Modifier  = Key | '[' Arbitrary ']' | '(' CustomProperty ')'

An arbitrary property ``[property:value]`` may stand in place of
``'-'? Root Value?``.  Every malformed input returns None; nothing raises.
"""

from __future__ import annotations

import re
from typing import Callable

from windwright.config import CompilerConfig
from windwright.model.candidate import (
    ArbitraryModifier,
    ArbitraryValue,
    Candidate,
    Modifier,
    NamedModifier,
    NamedValue,
)
from windwright.model.variant import Variant
from windwright.parser.arbitrary import decode_arbitrary
from windwright.parser.errors import ParseError
from windwright.parser.segment import find_roots, is_balanced, segment
from windwright.registry.data_types import DATA_TYPES
from windwright.registry.utilities import UtilityRegistry

__all__ = ["parse_candidate"]

_NAMED_VALUE_RE = re.compile(r"^[a-zA-Z0-9](?:[a-zA-Z0-9_.%-]*[a-zA-Z0-9%])?$")
_NUMBER_RE = re.compile(r"^\d+(?:\.\d+)?$")
_PROPERTY_RE = re.compile(r"^(?:--[a-zA-Z0-9_-]+|-?[a-zA-Z][a-zA-Z0-9-]*)$")
_CUSTOM_PROPERTY_RE = re.compile(r"^--[a-zA-Z0-9_-]+$")
_TYPE_HINT_RE = re.compile(r"^([a-z][a-z-]*):(.+)$", re.DOTALL)

VariantParser = Callable[[str], "Variant | None"]


def _decode(text: str) -> str | None:
    try:
        value = decode_arbitrary(text)
    except ParseError:
        return None
    return value.strip() or None


def _split_type_hint(text: str) -> tuple[str | None, str]:
    match = _TYPE_HINT_RE.match(text)
    if match and match.group(1) in DATA_TYPES:
        return match.group(1), match.group(2)
    return None, text


def _parse_var_shorthand(inner: str) -> ArbitraryValue | None:
    """``(--brand)`` or ``(color:--brand)`` -> ``var(--brand)``."""
    data_type, name = _split_type_hint(inner)
    if not _CUSTOM_PROPERTY_RE.match(name):
        return None
    return ArbitraryValue(f"var({name})", data_type)


def _parse_value(text: str) -> NamedValue | ArbitraryValue | None:
    if text.startswith("["):
        if not text.endswith("]"):
            return None
        data_type, body = _split_type_hint(text[1:-1])
        decoded = _decode(body)
        return None if decoded is None else ArbitraryValue(decoded, data_type)
    if text.startswith("("):
        if not text.endswith(")"):
            return None
        return _parse_var_shorthand(text[1:-1])
    if _NAMED_VALUE_RE.match(text):
        return NamedValue(text)
    return None


def _parse_modifier(text: str) -> Modifier | None:
    if text.startswith("[") and text.endswith("]"):
        decoded = _decode(text[1:-1])
        return None if decoded is None else ArbitraryModifier(decoded)
    if text.startswith("(") and text.endswith(")"):
        shorthand = _parse_var_shorthand(text[1:-1])
        return None if shorthand is None else ArbitraryModifier(shorthand.value)
    if _NAMED_VALUE_RE.match(text):
        return NamedModifier(text)
    return None


def _split_modifier(base: str) -> tuple[str, Modifier | None] | None:
    parts = segment(base, "/")
    if len(parts) == 1:
        return base, None
    if len(parts) > 2 or not parts[0] or not parts[1]:
        return None
    modifier = _parse_modifier(parts[1])
    if modifier is None:
        return None
    return parts[0], modifier


def _parse_arbitrary_property(
    raw: str,
    base: str,
    variants: tuple[Variant, ...],
    important: bool,
) -> Candidate | None:
    split = _split_modifier(base)
    if split is None:
        return None
    body, modifier = split
    if not (body.startswith("[") and body.endswith("]")):
        return None
    parts = segment(body[1:-1], ":")
    if len(parts) < 2:
        return None
    prop = parts[0]
    if not _PROPERTY_RE.match(prop):
        return None
    value = _decode(":".join(parts[1:]))
    if value is None:
        return None
    return Candidate(
        raw=raw,
        kind="arbitrary",
        root="",
        value=ArbitraryValue(value),
        modifier=modifier,
        variants=variants,
        important=important,
        property=prop,
    )


def parse_candidate(
    raw: str,
    utilities: UtilityRegistry,
    parse_variant: VariantParser,
    config: CompilerConfig | None = None,
) -> Candidate | None:
    """Parse *raw* into a Candidate, or return None.

    *parse_variant* turns one variant segment into a Variant; the design
    system passes its memoized parser here.
    """
    config = config or CompilerConfig()
    if not raw or any(c.isspace() for c in raw):
        return None
    if not is_balanced(raw, config.max_nesting_depth):
        return None

    markers = 0
    text = raw
    if text.startswith("!"):
        markers += 1
        text = text[1:]

    segments = segment(text, ":")
    base = segments.pop()
    if base.startswith("!"):
        markers += 1
        base = base[1:]
    if base.endswith("!"):
        markers += 1
        base = base[:-1]
    if markers > 1 or not base:
        return None
    important = markers == 1

    parsed_variants: list[Variant] = []
    for seg in segments:
        variant = parse_variant(seg) if seg else None
        if variant is None:
            return None
        parsed_variants.append(variant)
    variants = tuple(parsed_variants)

    if base.startswith("["):
        return _parse_arbitrary_property(raw, base, variants, important)

    negative = base.startswith("-")
    if negative:
        base = base[1:]
        if not base:
            return None

    split = _split_modifier(base)
    if split is None:
        return None
    base, modifier = split

    # A fully registered name is the longest possible root.
    if utilities.accepts_bare(base):
        return Candidate(
            raw=raw,
            kind="static",
            root=base,
            modifier=modifier,
            variants=variants,
            important=important,
            negative=negative,
        )

    for root, text_value in find_roots(base, utilities.accepts_value):
        value = _parse_value(text_value)
        if value is None:
            return None
        if (
            isinstance(value, NamedValue)
            and isinstance(modifier, NamedModifier)
            and _NUMBER_RE.match(value.value)
            and _NUMBER_RE.match(modifier.value)
        ):
            value = NamedValue(value.value, fraction=f"{value.value}/{modifier.value}")
        return Candidate(
            raw=raw,
            kind="functional",
            root=root,
            value=value,
            modifier=modifier,
            variants=variants,
            important=important,
            negative=negative,
        )
    return None
