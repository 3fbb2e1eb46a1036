"""Lark-based decoder for bracketed arbitrary values.

Decoding rules:
    - ``_`` becomes a space, ``\\_`` a literal underscore.
    - Quoted strings and ``url(...)`` arguments are kept verbatim.
    - Groups must balance; anything else raises :class:`ParseError`.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from windwright.parser.errors import ParseError

__all__ = ["decode_arbitrary"]

GRAMMAR_PATH = Path(__file__).parent / "arbitrary.lark"


@dataclass(frozen=True)
class _Piece:
    decoded: str
    raw: str
    kind: str  # "text", "string", or the group's opening character


def _decode_text(raw: str) -> str:
    out: list[str] = []
    index = 0
    while index < len(raw):
        char = raw[index]
        if char == "\\" and index + 1 < len(raw):
            nxt = raw[index + 1]
            out.append("_" if nxt == "_" else char + nxt)
            index += 2
            continue
        out.append(" " if char == "_" else char)
        index += 1
    return "".join(out)


def _join(pieces: list[_Piece]) -> _Piece:
    decoded: list[str] = []
    raw: list[str] = []
    previous: _Piece | None = None
    for piece in pieces:
        raw.append(piece.raw)
        # url(...) arguments keep their underscores.
        if (
            piece.kind == "("
            and previous is not None
            and previous.kind == "text"
            and previous.raw.lower().endswith("url")
        ):
            decoded.append(piece.raw)
        else:
            decoded.append(piece.decoded)
        previous = piece
    return _Piece("".join(decoded), "".join(raw), "group")


def _group(opener: str, closer: str, items: list[_Piece]) -> _Piece:
    inner = _join(items)
    return _Piece(opener + inner.decoded + closer, opener + inner.raw + closer, opener)


class ArbitraryValueTransformer(Transformer):  # type: ignore[type-arg]
    """Fold the parse tree of an arbitrary value into its decoded text."""

    def text(self, items: list[Token]) -> _Piece:
        raw = str(items[0])
        return _Piece(_decode_text(raw), raw, "text")

    def string(self, items: list[Token]) -> _Piece:
        raw = str(items[0])
        return _Piece(raw, raw, "string")

    def paren(self, items: list[_Piece]) -> _Piece:
        return _group("(", ")", items)

    def square(self, items: list[_Piece]) -> _Piece:
        return _group("[", "]", items)

    def brace(self, items: list[_Piece]) -> _Piece:
        return _group("{", "}", items)

    def start(self, items: list[_Piece]) -> str:
        return _join(items).decoded


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def decode_arbitrary(source: str) -> str:
    """Decode the text between an arbitrary value's brackets.

    Callers are expected to bound nesting depth before calling.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        raise ParseError(str(e), column=getattr(e, "column", None)) from e
    return ArbitraryValueTransformer().transform(tree)
