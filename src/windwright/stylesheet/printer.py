"""Serialize stylesheet nodes to compact CSS text."""

from __future__ import annotations

from windwright.stylesheet.model import AtRule, Declaration, Node, StyleRule

__all__ = ["to_css"]


def _declaration(decl: Declaration) -> str:
    text = f"{decl.property}:{decl.value}"
    if decl.important:
        text += "!important"
    return text


def _block(nodes: tuple[Node, ...]) -> str:
    decls = [_declaration(n) for n in nodes if isinstance(n, Declaration)]
    nested = [_node(n) for n in nodes if not isinstance(n, Declaration)]
    return ";".join(decls) + "".join(nested)


def _node(node: Node) -> str:
    if isinstance(node, Declaration):
        return _declaration(node)
    if isinstance(node, StyleRule):
        return f"{node.selector}{{{_block(node.nodes)}}}"
    if isinstance(node, AtRule):
        head = f"{node.name} {node.params}" if node.params else node.name
        return f"{head}{{{_block(node.nodes)}}}"
    raise TypeError(f"Unknown stylesheet node: {node!r}")


def to_css(nodes: tuple[Node, ...] | list[Node]) -> str:
    """Render *nodes* as CSS without insignificant whitespace.

    Example: ``(StyleRule(".underline", (Declaration(...),)),)`` renders as
    ``.underline{text-decoration-line:underline}``.
    """
    return "".join(_node(n) for n in nodes)
