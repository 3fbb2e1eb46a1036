"""DesignSystem: the single entry point tying registries, caches and compiler together."""

from __future__ import annotations

import logging
import threading
from typing import Iterable

from windwright.cache import MemoCache
from windwright.compiler import Compilation, compile_candidate
from windwright.config import CompilerConfig
from windwright.intellisense import ClassEntry, VariantEntry, get_class_list, get_variants
from windwright.model.candidate import Candidate
from windwright.model.variant import Variant
from windwright.parser.candidate import parse_candidate as _parse_candidate
from windwright.parser.variant import parse_variant as _parse_variant
from windwright.registry.defaults import create_utilities, create_variants
from windwright.registry.utilities import UtilityRegistry
from windwright.registry.variants import VariantRegistry
from windwright.sort import get_class_order
from windwright.stylesheet.model import Node
from windwright.stylesheet.printer import to_css
from windwright.theme import Theme, default_theme
from windwright.validation.validator import CandidateError, explain

logger = logging.getLogger(__name__)

__all__ = ["DesignSystem", "build_design_system"]

_UNPARSABLE = Compilation((), failure="unparsable candidate")


class DesignSystem:
    """Compiles candidate strings against one theme and one pair of registries.

    Every stage is memoized per instance: a raw string is parsed and compiled
    at most once, and the result (including ``None`` or an empty node tuple)
    is returned unchanged on every later call.  Caches are never evicted and
    never shared between instances.
    """

    def __init__(
        self,
        theme: Theme,
        utilities: UtilityRegistry,
        variants: VariantRegistry,
        config: CompilerConfig | None = None,
    ) -> None:
        self.theme = theme
        self.utilities = utilities
        self.variants = variants
        self.config = config or CompilerConfig()

        stripes = self.config.cache_stripes
        self._parsed_variants: MemoCache[str, Variant | None] = MemoCache(
            lambda text: _parse_variant(text, self.variants, self.config), stripes
        )
        self._parsed_candidates: MemoCache[str, Candidate | None] = MemoCache(
            lambda raw: _parse_candidate(raw, self.utilities, self.parse_variant, self.config),
            stripes,
        )
        self._compiled: MemoCache[str, Compilation] = MemoCache(self._compile_uncached, stripes)
        self._invalid: set[str] = set()
        self._invalid_lock = threading.Lock()

    # --- compilation ------------------------------------------------------------

    def _compile_uncached(self, raw: str) -> Compilation:
        candidate = self.parse_candidate(raw)
        if candidate is None:
            return _UNPARSABLE
        compilation = compile_candidate(
            candidate, self.theme, self.utilities, self.variants, self.config
        )
        size = len(self._compiled) + 1
        if size % 1000 == 0:
            logger.debug("Compiled %d distinct candidates", size)
        return compilation

    def compile(self, raw: str) -> Compilation:
        """Return the cached Compilation for *raw*, including its failure reason."""
        return self._compiled.get(raw)

    def compile_ast_nodes(self, raw: str) -> tuple[Node, ...]:
        """Return the stylesheet nodes for *raw*; empty when it produces no CSS."""
        return self._compiled.get(raw).nodes

    def compile_batch(
        self, classes: Iterable[str], strict: bool = False
    ) -> list[tuple[str, str | None]]:
        """Compile each class independently, pairing it with its CSS text.

        In strict mode the first class producing no CSS raises
        :class:`CandidateError`; otherwise it is paired with ``None``.
        """
        results: list[tuple[str, str | None]] = []
        for raw in classes:
            nodes = self.compile_ast_nodes(raw)
            if not nodes:
                if strict:
                    diagnostics = explain(self, raw)
                    logger.warning("Rejected candidate %r: %s", raw, diagnostics[0].message)
                    raise CandidateError(raw, diagnostics)
                results.append((raw, None))
                continue
            results.append((raw, to_css(nodes)))
        return results

    def candidates_to_css(self, classes: Iterable[str], strict: bool = False) -> list[str | None]:
        return [css for _, css in self.compile_batch(classes, strict=strict)]

    # --- parsing ----------------------------------------------------------------

    def parse_candidate(self, raw: str) -> Candidate | None:
        return self._parsed_candidates.get(raw)

    def parse_variant(self, text: str) -> Variant | None:
        return self._parsed_variants.get(text)

    # --- ordering and enumeration -----------------------------------------------

    def get_class_order(self, classes: Iterable[str]) -> list[tuple[str, int | None]]:
        return get_class_order(self, classes)

    def get_class_list(self) -> list[ClassEntry]:
        return get_class_list(self)

    def get_variants(self) -> list[VariantEntry]:
        return get_variants(self)

    # --- introspection ----------------------------------------------------------

    def get_used_variants(self) -> list[Variant | None]:
        """Every variant parsed so far, including failed (``None``) parses."""
        return self._parsed_variants.values()

    def get_ast_node_size(self) -> int:
        """Number of distinct candidates compiled so far."""
        return len(self._compiled)

    # --- invalid-candidate bookkeeping ---------------------------------------------

    def mark_invalid_candidate(self, raw: str) -> None:
        with self._invalid_lock:
            self._invalid.add(raw)

    def is_invalid_candidate(self, raw: str) -> bool:
        with self._invalid_lock:
            return raw in self._invalid

    def __repr__(self) -> str:
        return (
            f"DesignSystem(utilities={len(self.utilities)}, variants={len(self.variants)}, "
            f"compiled={len(self._compiled)})"
        )


def build_design_system(
    theme: Theme | None = None,
    utilities: UtilityRegistry | None = None,
    variants: VariantRegistry | None = None,
    config: CompilerConfig | None = None,
) -> DesignSystem:
    """Build a DesignSystem, filling in the stock theme and registries.

    Supplied registries are frozen; nothing may be registered once compiling
    starts.
    """
    theme = theme if theme is not None else default_theme()
    utilities = (utilities if utilities is not None else create_utilities(theme)).freeze()
    variants = (variants if variants is not None else create_variants(theme)).freeze()
    logger.debug(
        "Built design system: %d utilities, %d variants, %d theme values",
        len(utilities),
        len(variants),
        len(theme),
    )
    return DesignSystem(theme, utilities, variants, config)
