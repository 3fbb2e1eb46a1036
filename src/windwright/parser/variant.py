"""Variant segment parser.

Grammar (one colon-delimited segment):
    Variant   = '[' Selector ']'
              | Name ('/' Modifier)?
              | Root '-' Argument ('/' Modifier)?
              | Compound '-' Variant ('/' Name)?
    Argument  = Key | '[' Arbitrary ']'

Compound roots (``group``, ``not`` ...) nest; the nesting is peeled off in a
loop and bounded by ``CompilerConfig.max_variant_depth``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from windwright.config import CompilerConfig
from windwright.model.variant import (
    ArbitraryArg,
    ArbitraryVariant,
    CompoundVariant,
    FunctionalVariant,
    IdentifierArg,
    StaticVariant,
    ThemeKeyArg,
    Variant,
)
from windwright.parser.arbitrary import decode_arbitrary
from windwright.parser.errors import ParseError
from windwright.parser.segment import find_roots, is_balanced, segment
from windwright.registry.variants import VariantRegistry

__all__ = ["parse_variant"]

_KEY_RE = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9_.-]*$")
_IDENT_RE = re.compile(r"^[a-zA-Z0-9_-]+$")
_AT_RULES = ("@media", "@supports", "@container")


@dataclass(frozen=True)
class _CompoundStep:
    outer: StaticVariant | FunctionalVariant
    remainder: str


def _decode(text: str) -> str | None:
    try:
        value = decode_arbitrary(text)
    except ParseError:
        return None
    return value or None


def _arbitrary_selector(segment_text: str) -> ArbitraryVariant | None:
    selector = _decode(segment_text[1:-1])
    if selector is None or any(c in selector for c in "{};"):
        return None
    if selector.startswith("@"):
        name = re.split(r"[\s(]", selector, maxsplit=1)[0]
        params = selector[len(name):].strip()
        if name not in _AT_RULES or not params:
            return None
    return ArbitraryVariant(selector)


def _argument(value: str) -> ThemeKeyArg | ArbitraryArg | None:
    if value.startswith("["):
        if not value.endswith("]"):
            return None
        decoded = _decode(value[1:-1])
        return None if decoded is None else ArbitraryArg(decoded)
    if _KEY_RE.match(value):
        return ThemeKeyArg(value)
    return None


def _parse_step(
    text: str, variants: VariantRegistry, outermost: bool
) -> Variant | _CompoundStep | None:
    if text.startswith("[") and text.endswith("]"):
        return _arbitrary_selector(text)

    parts = segment(text, "/")
    if len(parts) > 2:
        return None
    base = parts[0]
    modifier = parts[1] if len(parts) == 2 else None
    if not base or (modifier is not None and not _IDENT_RE.match(modifier)):
        return None
    # Only the outermost segment of a compound chain may carry a modifier.
    if modifier is not None and not outermost:
        return None

    if modifier is None and variants.kind(base) == "static":
        return StaticVariant(base)

    for root, value in find_roots(base, variants.has):
        kind = variants.kind(root)
        if kind == "static" or not value:
            continue
        if kind == "functional":
            argument = _argument(value)
            if argument is None:
                continue
            return FunctionalVariant(root, argument, modifier)
        # compound
        if value.startswith("["):
            argument = _argument(value)
            if argument is None:
                continue
            return FunctionalVariant(root, argument, modifier)
        if modifier is None:
            outer: StaticVariant | FunctionalVariant = StaticVariant(root)
        else:
            outer = FunctionalVariant(root, IdentifierArg(modifier))
        return _CompoundStep(outer, value)
    return None


def parse_variant(
    text: str, variants: VariantRegistry, config: CompilerConfig | None = None
) -> Variant | None:
    """Parse one variant segment, or return None if it is not a known variant."""
    config = config or CompilerConfig()
    if not text or not is_balanced(text, config.max_nesting_depth):
        return None

    outers: list[StaticVariant | FunctionalVariant] = []
    current = text
    while True:
        if len(outers) > config.max_variant_depth:
            return None
        step = _parse_step(current, variants, outermost=not outers)
        if step is None:
            return None
        if isinstance(step, _CompoundStep):
            outers.append(step.outer)
            current = step.remainder
            continue
        node: Variant = step
        break

    for outer in reversed(outers):
        node = CompoundVariant(outer, node)
    return node
