from windwright.compiler.alpha import resolve_alpha, with_alpha
from windwright.compiler.compile import Compilation, compile_candidate, resolve_variant

__all__ = ["Compilation", "compile_candidate", "resolve_variant", "resolve_alpha", "with_alpha"]
