"""windwright -- compile utility-class candidates into CSS."""

__version__ = "0.1.0"

from windwright.config import CompilerConfig  # noqa: E402
from windwright.design_system import DesignSystem, build_design_system  # noqa: E402
from windwright.theme import Theme, default_theme  # noqa: E402

__all__ = [
    "__version__",
    "CompilerConfig",
    "DesignSystem",
    "build_design_system",
    "Theme",
    "default_theme",
]
