"""Bracket-aware splitting and balance checks for candidate strings."""

from __future__ import annotations

from typing import Callable, Iterator

__all__ = ["segment", "is_balanced", "find_roots"]

_CLOSERS = {"(": ")", "[": "]", "{": "}"}
_QUOTES = "\"'"


def segment(value: str, separator: str) -> list[str]:
    """Split *value* on *separator* where it is not nested or escaped.

    Separators inside ``()``, ``[]``, ``{}`` or quoted strings within those
    groups are ignored, as is any character following a backslash.
    """
    parts: list[str] = []
    stack: list[str] = []
    quote: str | None = None
    start = 0
    index = 0
    length = len(value)
    while index < length:
        char = value[index]
        if char == "\\":
            index += 2
            continue
        if quote is not None:
            if char == quote:
                quote = None
        elif stack and char in _QUOTES:
            quote = char
        elif char in _CLOSERS:
            stack.append(_CLOSERS[char])
        elif stack and char == stack[-1]:
            stack.pop()
        elif not stack and char == separator:
            parts.append(value[start:index])
            start = index + 1
        index += 1
    parts.append(value[start:])
    return parts


def is_balanced(value: str, max_depth: int) -> bool:
    """Return True if every group in *value* closes and nesting stays bounded."""
    stack: list[str] = []
    quote: str | None = None
    index = 0
    length = len(value)
    while index < length:
        char = value[index]
        if char == "\\":
            index += 2
            continue
        if quote is not None:
            if char == quote:
                quote = None
        elif stack and char in _QUOTES:
            quote = char
        elif char in _CLOSERS:
            stack.append(_CLOSERS[char])
            if len(stack) > max_depth:
                return False
        elif char in ")]}":
            if not stack or stack.pop() != char:
                return False
        index += 1
    return not stack and quote is None


def find_roots(base: str, exists: Callable[[str], bool]) -> Iterator[tuple[str, str]]:
    """Yield ``(root, value)`` splits of *base*, longest root first.

    Roots end before a ``-`` that precedes any bracket.  A leading ``@``
    is also tried as a root of its own (``@md``, ``@[400px]``).
    """
    limit = len(base)
    for opener in "[(":
        found = base.find(opener)
        if found != -1:
            limit = min(limit, found)
    index = base.rfind("-", 0, limit)
    while index > 0:
        root = base[:index]
        if exists(root):
            yield root, base[index + 1:]
        index = base.rfind("-", 0, index)
    if base.startswith("@") and len(base) > 1 and exists("@"):
        yield "@", base[1:]
