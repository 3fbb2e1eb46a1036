"""Alpha (opacity) modifiers for color-valued declarations."""

from __future__ import annotations

import math
import re

from windwright.model.candidate import ArbitraryModifier, Modifier
from windwright.theme import Theme

__all__ = ["resolve_alpha", "with_alpha"]

_NUMBER_RE = re.compile(r"^\d+(?:\.\d+)?$")


def _percent(number: float) -> str:
    text = f"{number:.4f}".rstrip("0").rstrip(".")
    return f"{text}%"


def resolve_alpha(modifier: Modifier, theme: Theme) -> str | None:
    """Turn a candidate modifier into an alpha value, or None if invalid.

    Named modifiers resolve against ``--opacity-*`` first, then as a
    percentage between 0 and 100 in steps of 0.25.  Arbitrary modifiers
    are used verbatim; bare numbers are read as fractions of 1.
    """
    if isinstance(modifier, ArbitraryModifier):
        if _NUMBER_RE.match(modifier.value):
            number = float(modifier.value) * 100
            return _percent(number) if math.isfinite(number) else None
        return modifier.value
    named = theme.get(f"--opacity-{modifier.value}")
    if named is not None:
        return named
    if not _NUMBER_RE.match(modifier.value):
        return None
    number = float(modifier.value)
    if number > 100 or (number * 4) != int(number * 4):
        return None
    return f"{modifier.value}%"


def _is_opaque(alpha: str) -> bool:
    number, scale = (alpha[:-1], 100.0) if alpha.endswith("%") else (alpha, 1.0)
    return bool(_NUMBER_RE.match(number)) and float(number) == scale


def with_alpha(value: str, alpha: str, color_space: str = "oklab") -> str:
    """Mix *value* with transparent so it keeps *alpha* of its opacity."""
    if _is_opaque(alpha.strip()):
        return value
    return f"color-mix(in {color_space}, {value} {alpha}, transparent)"
