"""CSS identifier escaping for class selectors."""

from __future__ import annotations

import string

_SAFE = frozenset(string.ascii_letters + string.digits + "-_")


def escape(value: str) -> str:
    """Escape *value* for use as a CSS identifier (``CSS.escape`` semantics)."""
    out: list[str] = []
    first = value[:1]
    for index, char in enumerate(value):
        code = ord(char)
        if code == 0:
            out.append("\ufffd")
        elif (
            0x01 <= code <= 0x1F
            or code == 0x7F
            or (index == 0 and char.isdigit() and char.isascii())
            or (index == 1 and char.isdigit() and char.isascii() and first == "-")
        ):
            out.append(f"\\{code:x} ")
        elif index == 0 and len(value) == 1 and char == "-":
            out.append("\\-")
        elif code >= 0x80 or char in _SAFE:
            out.append(char)
        else:
            out.append("\\" + char)
    return "".join(out)
