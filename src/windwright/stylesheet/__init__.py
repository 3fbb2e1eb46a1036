from windwright.stylesheet.escape import escape
from windwright.stylesheet.model import (
    AtRule,
    Declaration,
    Node,
    StyleRule,
    map_selectors,
    walk_declarations,
)
from windwright.stylesheet.printer import to_css

__all__ = [
    "escape",
    "to_css",
    "map_selectors",
    "walk_declarations",
    "AtRule",
    "Declaration",
    "Node",
    "StyleRule",
]
