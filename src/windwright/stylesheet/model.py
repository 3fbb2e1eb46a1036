"""Stylesheet model: Declaration, StyleRule and AtRule nodes."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair."""

    property: str
    value: str
    important: bool = False


@dataclass(frozen=True)
class StyleRule:
    """A selector with its child nodes."""

    selector: str
    nodes: tuple[Node, ...]


@dataclass(frozen=True)
class AtRule:
    """A conditional group rule such as ``@media (width >= 48rem)``."""

    name: str  # "@media", "@supports", "@container"
    params: str
    nodes: tuple[Node, ...]


Node = Union[Declaration, StyleRule, AtRule]


def map_selectors(node: Node, template: str) -> Node:
    """Return *node* with every rule selector substituted into *template*.

    The ``&`` in *template* stands for the existing selector.
    """
    if isinstance(node, Declaration):
        return node
    if isinstance(node, StyleRule):
        return StyleRule(
            selector=template.replace("&", node.selector),
            nodes=node.nodes,
        )
    return replace(node, nodes=tuple(map_selectors(child, template) for child in node.nodes))


def walk_declarations(nodes: tuple[Node, ...]) -> list[Declaration]:
    """Collect every declaration below *nodes* in document order."""
    found: list[Declaration] = []
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        if isinstance(node, Declaration):
            found.append(node)
        else:
            stack.extend(reversed(node.nodes))
    return found
