"""Read-only design theme: ``--namespace-key`` custom properties to values."""

from __future__ import annotations

from typing import Iterator, Mapping, Sequence

__all__ = ["Theme", "default_theme"]


class Theme:
    """An ordered, immutable mapping of theme variables.

    Keys are full custom-property names such as ``--color-red-500``.  A
    *namespace* is the leading part (``--color``) and a *key* the remainder
    (``red-500``).  Nested values use a double dash suffix, e.g.
    ``--text-sm--line-height``.
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values) if values else {}

    # --- lookup ---------------------------------------------------------------

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of a full variable name."""
        return self._values.get(name, default)

    def resolve(self, key: str, namespaces: Sequence[str]) -> str | None:
        """Look *key* up in each namespace in turn; first hit wins."""
        found = self.resolve_name(key, namespaces)
        return None if found is None else self._values[found]

    def resolve_name(self, key: str, namespaces: Sequence[str]) -> str | None:
        """Like :meth:`resolve` but return the matching variable name."""
        for namespace in namespaces:
            name = f"{namespace}-{key}"
            if name in self._values:
                return name
        return None

    def keys_in(self, namespace: str) -> list[str]:
        """Return the keys directly under *namespace*, in insertion order."""
        prefix = f"{namespace}-"
        keys: list[str] = []
        for name in self._values:
            if not name.startswith(prefix):
                continue
            key = name[len(prefix):]
            if key and "--" not in key:
                keys.append(key)
        return keys

    # --- dunder helpers -------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Theme):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Theme(values={len(self._values)})"


# ---------------------------------------------------------------------------
# Default theme
# ---------------------------------------------------------------------------

_SHADES = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")

_PALETTE: dict[str, tuple[str, ...]] = {
    "red": (
        "#fef2f2", "#fee2e2", "#fecaca", "#fca5a5", "#f87171", "#ef4444",
        "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d", "#450a0a",
    ),
    "green": (
        "#f0fdf4", "#dcfce7", "#bbf7d0", "#86efac", "#4ade80", "#22c55e",
        "#16a34a", "#15803d", "#166534", "#14532d", "#052e16",
    ),
    "blue": (
        "#eff6ff", "#dbeafe", "#bfdbfe", "#93c5fd", "#60a5fa", "#3b82f6",
        "#2563eb", "#1d4ed8", "#1e40af", "#1e3a8a", "#172554",
    ),
    "gray": (
        "#f9fafb", "#f3f4f6", "#e5e7eb", "#d1d5db", "#9ca3af", "#6b7280",
        "#4b5563", "#374151", "#1f2937", "#111827", "#030712",
    ),
}

_SPACING_KEYS = (
    "0", "0.5", "1", "1.5", "2", "2.5", "3", "3.5", "4", "5", "6", "7", "8",
    "9", "10", "11", "12", "14", "16", "20", "24", "28", "32", "36", "40",
    "44", "48", "52", "56", "60", "64", "72", "80", "96",
)

_TEXT_SIZES = (
    ("xs", "0.75rem", "1rem"),
    ("sm", "0.875rem", "1.25rem"),
    ("base", "1rem", "1.5rem"),
    ("lg", "1.125rem", "1.75rem"),
    ("xl", "1.25rem", "1.75rem"),
    ("2xl", "1.5rem", "2rem"),
    ("3xl", "1.875rem", "2.25rem"),
    ("4xl", "2.25rem", "2.5rem"),
    ("5xl", "3rem", "1"),
    ("6xl", "3.75rem", "1"),
)


def _rem(units: float) -> str:
    if units == 0:
        return "0px"
    text = f"{units:.4f}".rstrip("0").rstrip(".")
    return f"{text}rem"


def default_theme() -> Theme:
    """Build the stock theme used when no theme is supplied."""
    values: dict[str, str] = {
        "--color-black": "#000",
        "--color-white": "#fff",
    }
    for name, shades in _PALETTE.items():
        for shade, value in zip(_SHADES, shades):
            values[f"--color-{name}-{shade}"] = value

    values["--spacing"] = "0.25rem"
    values["--spacing-px"] = "1px"
    for key in _SPACING_KEYS:
        values[f"--spacing-{key}"] = _rem(float(key) * 0.25)

    values.update({
        "--breakpoint-sm": "40rem",
        "--breakpoint-md": "48rem",
        "--breakpoint-lg": "64rem",
        "--breakpoint-xl": "80rem",
        "--breakpoint-2xl": "96rem",
        "--container-3xs": "16rem",
        "--container-2xs": "18rem",
        "--container-xs": "20rem",
        "--container-sm": "24rem",
        "--container-md": "28rem",
        "--container-lg": "32rem",
        "--container-xl": "36rem",
        "--container-2xl": "42rem",
    })

    for key, size, line_height in _TEXT_SIZES:
        values[f"--text-{key}"] = size
        values[f"--text-{key}--line-height"] = line_height

    values.update({
        "--font-sans": "ui-sans-serif, system-ui, sans-serif",
        "--font-serif": "ui-serif, Georgia, serif",
        "--font-mono": "ui-monospace, SFMono-Regular, monospace",
        "--font-weight-thin": "100",
        "--font-weight-light": "300",
        "--font-weight-normal": "400",
        "--font-weight-medium": "500",
        "--font-weight-semibold": "600",
        "--font-weight-bold": "700",
        "--font-weight-black": "900",
        "--leading-tight": "1.25",
        "--leading-snug": "1.375",
        "--leading-normal": "1.5",
        "--leading-relaxed": "1.625",
        "--leading-loose": "2",
        "--tracking-tight": "-0.025em",
        "--tracking-normal": "0em",
        "--tracking-wide": "0.025em",
        "--radius": "0.25rem",
        "--radius-sm": "0.125rem",
        "--radius-md": "0.375rem",
        "--radius-lg": "0.5rem",
        "--radius-xl": "0.75rem",
        "--radius-2xl": "1rem",
    })
    return Theme(values)
