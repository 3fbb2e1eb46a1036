"""Infer the CSS data type of an arbitrary value."""

from __future__ import annotations

import re
from typing import Callable, Sequence

__all__ = ["DATA_TYPES", "infer_data_type", "is_color"]

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?"
_NUMBER_RE = re.compile(rf"^{_NUMBER}$", re.IGNORECASE)
_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_PERCENTAGE_RE = re.compile(rf"^{_NUMBER}%$", re.IGNORECASE)
_LENGTH_UNITS = (
    "px", "rem", "em", "ex", "ch", "cap", "ic", "lh", "rlh", "vw", "vh", "vi",
    "vb", "vmin", "vmax", "svw", "svh", "lvw", "lvh", "dvw", "dvh", "cqw",
    "cqh", "cqi", "cqb", "cqmin", "cqmax", "cm", "mm", "q", "in", "pt", "pc",
)
_LENGTH_RE = re.compile(rf"^{_NUMBER}(?:{'|'.join(_LENGTH_UNITS)})$", re.IGNORECASE)
_MATH_FUNCTIONS = ("calc(", "min(", "max(", "clamp(")
_HEX_RE = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_COLOR_FUNCTIONS = (
    "rgb(", "rgba(", "hsl(", "hsla(", "hwb(", "lab(", "lch(", "oklab(",
    "oklch(", "color(", "color-mix(", "light-dark(",
)
_GRADIENTS = (
    "linear-gradient(", "radial-gradient(", "conic-gradient(",
    "repeating-linear-gradient(", "repeating-radial-gradient(",
    "repeating-conic-gradient(", "image-set(", "cross-fade(",
)
_NAMED_COLORS = frozenset({
    "transparent", "currentcolor", "black", "white", "red", "green", "blue",
    "yellow", "orange", "purple", "pink", "gray", "grey", "silver", "maroon",
    "olive", "lime", "teal", "navy", "fuchsia", "aqua", "cyan", "magenta",
    "brown", "gold", "indigo", "violet", "coral", "salmon", "tomato",
    "crimson", "rebeccapurple",
})


def is_color(value: str) -> bool:
    lowered = value.lower()
    return (
        bool(_HEX_RE.match(value))
        or lowered in _NAMED_COLORS
        or lowered.startswith(_COLOR_FUNCTIONS)
    )


def _is_length(value: str) -> bool:
    return value == "0" or bool(_LENGTH_RE.match(value)) or value.lower().startswith(_MATH_FUNCTIONS)


def _is_url(value: str) -> bool:
    return value.lower().startswith("url(")


def _is_image(value: str) -> bool:
    lowered = value.lower()
    return _is_url(value) or lowered.startswith(_GRADIENTS)


def _is_family_name(value: str) -> bool:
    return value[:1] in ("'", '"') or "," in value


DATA_TYPES: dict[str, Callable[[str], bool]] = {
    "color": is_color,
    "length": _is_length,
    "percentage": lambda v: bool(_PERCENTAGE_RE.match(v)),
    "number": lambda v: bool(_NUMBER_RE.match(v)),
    "integer": lambda v: bool(_INTEGER_RE.match(v)),
    "url": _is_url,
    "image": _is_image,
    "family-name": _is_family_name,
}


def infer_data_type(value: str, types: Sequence[str]) -> str | None:
    """Return the first of *types* that *value* satisfies.

    ``var(...)`` references could be anything and never infer a type.
    """
    if value.startswith("var("):
        return None
    for name in types:
        check = DATA_TYPES.get(name)
        if check is not None and check(value):
            return name
    return None
