from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompilerConfig:
    max_nesting_depth: int = 32  # brackets/parens inside one candidate
    max_variant_depth: int = 16  # compound variants like not-group-has-...
    cache_stripes: int = 16
    alpha_color_space: str = "oklab"
