"""Tests for the theme, registries, alpha helpers and completion lists."""

import pytest

from windwright import build_design_system
from windwright.compiler import resolve_alpha, with_alpha
from windwright.model.candidate import ArbitraryModifier, NamedModifier
from windwright.registry import (
    DynamicUtility,
    StaticUtility,
    UtilityRegistry,
    ValueRule,
    VariantRegistry,
    infer_data_type,
)
from windwright.theme import Theme, default_theme


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------


class TestTheme:
    def test_resolve_first_namespace_wins(self):
        theme = Theme({"--a-x": "1", "--b-x": "2"})
        assert theme.resolve("x", ("--b", "--a")) == "2"
        assert theme.resolve_name("x", ("--a", "--b")) == "--a-x"
        assert theme.resolve("y", ("--a",)) is None

    def test_keys_in_skips_nested(self):
        theme = default_theme()
        keys = theme.keys_in("--text")
        assert "lg" in keys
        assert not any("--" in k for k in keys)

    def test_equality_and_len(self):
        assert default_theme() == default_theme()
        assert len(Theme()) == 0
        assert "--spacing" in default_theme()

    def test_default_values(self):
        theme = default_theme()
        assert theme.get("--color-red-500") == "#ef4444"
        assert theme.get("--spacing-4") == "1rem"
        assert theme.get("--spacing-0") == "0px"
        assert theme.get("--breakpoint-md") == "48rem"


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------


class TestUtilityRegistry:
    def test_registration_order(self):
        u = UtilityRegistry()
        u.static("a", ("color", "red"))
        u.dynamic("b", ValueRule(properties=("color",)))
        u.static("a", ("color", "blue"))
        first, second = u.get("a")
        assert isinstance(first, StaticUtility)
        assert u.order(first) == 0
        assert u.order(second) == 2
        assert u.order(u.arbitrary_property) == 3

    def test_accepts(self):
        u = UtilityRegistry()
        u.static("a", ("color", "red"))
        u.dynamic("b", ValueRule(properties=("color",)))
        u.dynamic("c", ValueRule(properties=("color",)), default="red")
        assert u.accepts_bare("a") and not u.accepts_value("a")
        assert u.accepts_value("b") and not u.accepts_bare("b")
        assert u.accepts_bare("c") and u.accepts_value("c")

    def test_empty_name(self):
        with pytest.raises(ValueError):
            UtilityRegistry().static("", ("color", "red"))

    def test_data_types_are_deduplicated(self):
        utility = DynamicUtility(
            "x",
            (ValueRule(("a",), data_types=("color", "length")), ValueRule(("b",), data_types=("length",))),
        )
        assert utility.data_types() == ("color", "length")


class TestVariantRegistry:
    def test_duplicate(self):
        v = VariantRegistry()
        v.selector("hover", "&:hover")
        with pytest.raises(ValueError):
            v.selector("hover", "&:hover")

    def test_kind_and_order(self):
        v = VariantRegistry()
        v.selector("hover", "&:hover")
        v.at_rule("print", "@media", "print")
        assert v.kind("hover") == "static"
        assert v.kind("nope") is None
        assert v.order("print") == 1
        assert v.order("nope") == 2


class TestDataTypes:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("#fff", "color"),
            ("rgb(0 0 0)", "color"),
            ("12px", "length"),
            ("calc(1px + 2px)", "length"),
            ("50%", "percentage"),
            ("url(a.png)", "url"),
            ("var(--x)", None),
            ("banana", None),
        ],
    )
    def test_infer(self, value, expected):
        assert infer_data_type(value, ("color", "length", "percentage", "url")) == expected


# ---------------------------------------------------------------------------
# Alpha
# ---------------------------------------------------------------------------


class TestAlpha:
    def test_named(self):
        assert resolve_alpha(NamedModifier("25"), Theme()) == "25%"

    def test_theme_opacity(self):
        assert resolve_alpha(NamedModifier("soft"), Theme({"--opacity-soft": "40%"})) == "40%"

    def test_arbitrary_passthrough(self):
        assert resolve_alpha(ArbitraryModifier("var(--a)"), Theme()) == "var(--a)"

    def test_invalid(self):
        assert resolve_alpha(NamedModifier("soft"), Theme()) is None

    def test_with_alpha(self):
        assert with_alpha("red", "50%") == "color-mix(in oklab, red 50%, transparent)"
        assert with_alpha("red", "100%") == "red"
        assert with_alpha("red", "50%", "srgb") == "color-mix(in srgb, red 50%, transparent)"

    def test_with_alpha_full_opacity_forms(self):
        assert with_alpha("red", "100.0%") == "red"
        assert with_alpha("red", "1.0") == "red"
        assert with_alpha("red", "100.5%") != "red"

    def test_arbitrary_overflow(self):
        assert resolve_alpha(ArbitraryModifier("9" * 400), Theme()) is None


# ---------------------------------------------------------------------------
# Completion lists
# ---------------------------------------------------------------------------


class TestClassList:
    @pytest.fixture(scope="class")
    def entries(self):
        return {e.name: e for e in build_design_system().get_class_list()}

    def test_static_and_themed(self, entries):
        assert "underline" in entries
        assert "p-4" in entries
        assert "text-lg" in entries

    def test_color_modifiers(self, entries):
        assert entries["bg-red-500"].modifiers[0] == "0"
        assert entries["bg-red-500"].modifiers[-1] == "100"
        assert entries["p-4"].modifiers == ()

    def test_negative_forms(self, entries):
        assert "-m-4" in entries
        assert "-p-4" not in entries
        assert "-m-auto" not in entries

    def test_ignored_namespace_skipped(self, entries):
        assert "font-bold" in entries
        assert "font-weight-bold" not in entries

    def test_every_entry_compiles(self):
        design = build_design_system()
        names = [e.name for e in design.get_class_list()]
        assert all(css is not None for css in design.candidates_to_css(names))


class TestVariantList:
    def test_entries(self):
        variants = {v.name: v for v in build_design_system().get_variants()}
        assert variants["hover"].is_arbitrary is False
        assert variants["aria"].values[0] == "busy"
        assert variants["@"].has_dash is False
        assert "hover" in variants["group"].values
        assert "before" not in variants["group"].values
        assert variants["md"].values == ()
