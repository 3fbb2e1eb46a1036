"""Tests for the candidate parser."""

import pytest

from windwright import build_design_system
from windwright.model.candidate import (
    ArbitraryModifier,
    ArbitraryValue,
    NamedModifier,
    NamedValue,
)
from windwright.model.variant import StaticVariant


@pytest.fixture(scope="module")
def design():
    return build_design_system()


# ---------------------------------------------------------------------------
# Static and functional utilities
# ---------------------------------------------------------------------------


class TestStaticCandidates:
    def test_static_utility(self, design):
        c = design.parse_candidate("underline")
        assert c is not None
        assert c.kind == "static"
        assert c.root == "underline"
        assert c.value is None
        assert c.variants == ()
        assert c.important is False

    def test_hyphenated_static_name(self, design):
        c = design.parse_candidate("sr-only")
        assert c.kind == "static"
        assert c.root == "sr-only"

    def test_dynamic_default_is_bare(self, design):
        c = design.parse_candidate("border")
        assert c.kind == "static"
        assert c.root == "border"


class TestFunctionalCandidates:
    def test_theme_key(self, design):
        c = design.parse_candidate("bg-red-500")
        assert c.kind == "functional"
        assert c.root == "bg"
        assert c.value == NamedValue("red-500")

    def test_longest_root_wins(self, design):
        c = design.parse_candidate("gap-x-4")
        assert c.root == "gap-x"
        assert c.value == NamedValue("4")

    def test_decimal_value(self, design):
        c = design.parse_candidate("p-0.5")
        assert c.root == "p"
        assert c.value == NamedValue("0.5")

    def test_negative(self, design):
        c = design.parse_candidate("-m-4")
        assert c.negative is True
        assert c.root == "m"

    def test_fraction(self, design):
        c = design.parse_candidate("w-1/2")
        assert c.value == NamedValue("1", fraction="1/2")
        assert c.modifier == NamedModifier("2")

    def test_alpha_modifier(self, design):
        c = design.parse_candidate("bg-red-500/50")
        assert c.value == NamedValue("red-500")
        assert c.modifier == NamedModifier("50")
        assert c.value.fraction is None

    def test_arbitrary_modifier(self, design):
        c = design.parse_candidate("bg-red-500/[0.3]")
        assert c.modifier == ArbitraryModifier("0.3")

    def test_unknown_root(self, design):
        assert design.parse_candidate("not-a-real-class") is None


# ---------------------------------------------------------------------------
# Arbitrary values and properties
# ---------------------------------------------------------------------------


class TestArbitraryValues:
    def test_hex_color(self, design):
        c = design.parse_candidate("bg-[#ff0000]")
        assert c.root == "bg"
        assert c.value == ArbitraryValue("#ff0000")

    def test_underscores_become_spaces(self, design):
        c = design.parse_candidate("w-[calc(100%_-_2rem)]")
        assert c.value == ArbitraryValue("calc(100% - 2rem)")

    def test_type_hint(self, design):
        c = design.parse_candidate("bg-[color:var(--brand)]")
        assert c.value == ArbitraryValue("var(--brand)", "color")

    def test_var_shorthand(self, design):
        c = design.parse_candidate("bg-(--brand)")
        assert c.value == ArbitraryValue("var(--brand)")

    def test_unclosed_bracket(self, design):
        assert design.parse_candidate("bg-[red") is None

    def test_empty_arbitrary_value(self, design):
        assert design.parse_candidate("bg-[]") is None


class TestArbitraryProperties:
    def test_property(self, design):
        c = design.parse_candidate("[mask-type:luminance]")
        assert c.kind == "arbitrary"
        assert c.property == "mask-type"
        assert c.value == ArbitraryValue("luminance")

    def test_custom_property(self, design):
        c = design.parse_candidate("[--gutter:1rem]")
        assert c.property == "--gutter"

    def test_value_may_contain_colons(self, design):
        c = design.parse_candidate("[background:url(a:b)]")
        assert c.value == ArbitraryValue("url(a:b)")

    def test_invalid_property_name(self, design):
        assert design.parse_candidate("[12px:red]") is None

    def test_missing_value(self, design):
        assert design.parse_candidate("[color:]") is None


# ---------------------------------------------------------------------------
# Important markers and variants
# ---------------------------------------------------------------------------


class TestImportant:
    @pytest.mark.parametrize("raw", ["underline!", "!underline", "hover:!underline", "!hover:underline"])
    def test_marker_positions(self, design, raw):
        c = design.parse_candidate(raw)
        assert c is not None
        assert c.important is True

    def test_two_markers_fail(self, design):
        assert design.parse_candidate("!underline!") is None


class TestVariantStack:
    def test_leftmost_is_outermost(self, design):
        c = design.parse_candidate("md:hover:underline")
        assert c.variants == (StaticVariant("md"), StaticVariant("hover"))

    def test_unknown_variant_fails_candidate(self, design):
        assert design.parse_candidate("nope:underline") is None

    def test_empty_variant_segment(self, design):
        assert design.parse_candidate(":underline") is None

    def test_colon_inside_brackets_is_not_a_separator(self, design):
        c = design.parse_candidate("[&:hover]:underline")
        assert len(c.variants) == 1


class TestMalformed:
    @pytest.mark.parametrize("raw", ["", " ", "under line", "bg-red-500/", "-", "bg-(red)"])
    def test_returns_none(self, design, raw):
        assert design.parse_candidate(raw) is None

    def test_deep_nesting_fails_closed(self, design):
        raw = "w-[" + "(" * 100 + ")" * 100 + "]"
        assert design.parse_candidate(raw) is None
