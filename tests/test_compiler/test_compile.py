"""Tests for compiling candidates into CSS."""

import pytest

from windwright import build_design_system
from windwright.stylesheet import walk_declarations


@pytest.fixture(scope="module")
def design():
    return build_design_system()


def css(design, raw):
    return design.candidates_to_css([raw])[0]


# ---------------------------------------------------------------------------
# Basic scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_static_utility(self, design):
        assert design.candidates_to_css(["underline"]) == [".underline{text-decoration-line:underline}"]

    def test_hover(self, design):
        assert css(design, "hover:underline") == r".hover\:underline:hover{text-decoration-line:underline}"

    def test_media_is_outermost(self, design):
        assert css(design, "md:hover:underline") == (
            r"@media (width >= 48rem){.md\:hover\:underline:hover{text-decoration-line:underline}}"
        )

    def test_unknown_class(self, design):
        assert design.candidates_to_css(["not-a-real-class"]) == [None]

    def test_arbitrary_color(self, design):
        assert css(design, "bg-[#ff0000]") == r".bg-\[\#ff0000\]{background-color:#ff0000}"

    def test_batch_keeps_input_order(self, design):
        assert design.candidates_to_css(["nope", "italic", "nope"]) == [
            None,
            ".italic{font-style:italic}",
            None,
        ]


# ---------------------------------------------------------------------------
# Value resolution
# ---------------------------------------------------------------------------


class TestValues:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("p-4", ".p-4{padding:1rem}"),
            ("p-13", ".p-13{padding:calc(0.25rem * 13)}"),
            (r"p-0.5", r".p-0\.5{padding:0.125rem}"),
            ("w-full", ".w-full{width:100%}"),
            ("-m-4", ".-m-4{margin:calc(1rem * -1)}"),
            ("-z-10", ".-z-10{z-index:calc(10 * -1)}"),
            ("text-lg", ".text-lg{font-size:1.125rem;line-height:1.75rem}"),
            ("font-bold", ".font-bold{font-weight:700}"),
            ("font-sans", ".font-sans{font-family:ui-sans-serif, system-ui, sans-serif}"),
            ("border", ".border{border-width:1px}"),
            ("border-2", ".border-2{border-width:2px}"),
            ("border-red-500", ".border-red-500{border-color:#ef4444}"),
            ("border-x", ".border-x{border-left-width:1px;border-right-width:1px}"),
            ("rounded", ".rounded{border-radius:0.25rem}"),
            ("rounded-lg", ".rounded-lg{border-radius:0.5rem}"),
            ("grid-cols-3", ".grid-cols-3{grid-template-columns:repeat(3, minmax(0, 1fr))}"),
            ("flex", ".flex{display:flex}"),
            ("flex-1", ".flex-1{flex:1 1 0%}"),
            ("opacity-50", ".opacity-50{opacity:50%}"),
        ],
    )
    def test_named(self, design, raw, expected):
        assert css(design, raw) == expected

    def test_fraction(self, design):
        assert css(design, "w-1/2") == r".w-1\/2{width:calc(1/2 * 100%)}"

    def test_negative_unsupported(self, design):
        assert css(design, "-p-4") is None

    def test_static_rejects_value(self, design):
        assert css(design, "italic-4") is None

    def test_nested_namespace_is_not_a_value(self, design):
        assert css(design, "font-weight-bold") is None

    def test_off_scale_spacing(self, design):
        assert css(design, "p-3.3") is None


class TestLongValues:
    def test_long_spacing_value(self, design):
        digits = "9" * 400
        assert css(design, f"p-{digits}") == f".p-{digits}{{padding:calc(0.25rem * {digits})}}"

    def test_long_percentage_value(self, design):
        assert css(design, "opacity-" + "1" * 5000) is None

    def test_batch_continues(self, design):
        batch = ["opacity-" + "1" * 5000, "p-" + "9" * 5000, "underline"]
        result = design.candidates_to_css(batch)
        assert result[0] is None
        assert result[2] == ".underline{text-decoration-line:underline}"


class TestArbitraryValues:
    def test_calc(self, design):
        assert css(design, "w-[calc(100%_-_2rem)]") == (
            r".w-\[calc\(100\%_-_2rem\)\]{width:calc(100% - 2rem)}"
        )

    def test_inferred_image(self, design):
        assert css(design, "bg-[url(/a.png)]") == r".bg-\[url\(\/a\.png\)\]{background-image:url(/a.png)}"

    def test_untyped_var_falls_back(self, design):
        assert css(design, "bg-(--brand)") == r".bg-\(--brand\){background-color:var(--brand)}"

    def test_hint_without_matching_rule(self, design):
        assert css(design, "bg-[length:1rem]") is None
        assert "does not accept length" in design.compile("bg-[length:1rem]").failure

    def test_unbalanced_fails_closed(self, design):
        assert css(design, "bg-[red") is None
        assert design.compile_ast_nodes("bg-[red") == ()

    def test_arbitrary_property(self, design):
        assert css(design, "[mask-type:luminance]") == r".\[mask-type\:luminance\]{mask-type:luminance}"


# ---------------------------------------------------------------------------
# Alpha modifiers and important
# ---------------------------------------------------------------------------


class TestAlpha:
    def test_background(self, design):
        assert css(design, "bg-red-500/50") == (
            r".bg-red-500\/50{background-color:color-mix(in oklab, #ef4444 50%, transparent)}"
        )

    def test_text_uses_same_path(self, design):
        bg = walk_declarations(design.compile_ast_nodes("bg-red-500/50"))
        text = walk_declarations(design.compile_ast_nodes("text-red-500/50"))
        assert [d.value for d in bg] == [d.value for d in text]
        assert text[0].property == "color"

    def test_full_opacity_is_unchanged(self, design):
        assert css(design, "bg-red-500/100") == r".bg-red-500\/100{background-color:#ef4444}"

    def test_full_opacity_with_decimals(self, design):
        assert css(design, "bg-red-500/100.0") == r".bg-red-500\/100\.0{background-color:#ef4444}"
        assert css(design, "bg-red-500/[1.0]") == r".bg-red-500\/\[1\.0\]{background-color:#ef4444}"

    def test_huge_arbitrary_fraction(self, design):
        assert css(design, "bg-red-500/[" + "9" * 400 + "]") is None

    def test_arbitrary_fraction(self, design):
        decls = walk_declarations(design.compile_ast_nodes("bg-red-500/[0.3]"))
        assert decls[0].value == "color-mix(in oklab, #ef4444 30%, transparent)"

    def test_quarter_steps(self, design):
        assert css(design, "bg-red-500/12.5") is not None
        assert css(design, "bg-red-500/12.3") is None
        assert css(design, "bg-red-500/101") is None

    def test_arbitrary_property_color(self, design):
        decls = walk_declarations(design.compile_ast_nodes("[color:red]/50"))
        assert decls[0].value == "color-mix(in oklab, red 50%, transparent)"

    def test_modifier_on_non_color(self, design):
        assert css(design, "underline/50") is None
        assert css(design, "p-4/50") is None


class TestImportant:
    def test_every_declaration(self, design):
        assert css(design, "truncate!") == (
            r".truncate\!{overflow:hidden!important;text-overflow:ellipsis!important;"
            r"white-space:nowrap!important}"
        )

    def test_with_variants_and_companions(self, design):
        decls = walk_declarations(design.compile_ast_nodes("md:!text-lg"))
        assert len(decls) == 2
        assert all(d.important for d in decls)


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


class TestVariants:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("group-hover:underline", r".group-hover\:underline:is(:where(.group):hover *)"),
            (
                "group-hover/sidebar:underline",
                r".group-hover\/sidebar\:underline:is(:where(.group\/sidebar):hover *)",
            ),
            ("peer-checked:underline", r".peer-checked\:underline:is(:where(.peer):checked ~ *)"),
            ("not-hover:underline", r".not-hover\:underline:not(*:hover)"),
            ("has-checked:underline", r".has-checked\:underline:has(*:checked)"),
            ("in-focus:underline", r":where(*:focus) .in-focus\:underline"),
            ("data-[state=open]:underline", r".data-\[state\=open\]\:underline[data-state=open]"),
            ("aria-checked:underline", r'.aria-checked\:underline[aria-checked="true"]'),
            ("[&:nth-child(3)]:underline", r".\[\&\:nth-child\(3\)\]\:underline:nth-child(3)"),
            ("before:underline", r".before\:underline::before"),
        ],
    )
    def test_selector_variants(self, design, raw, expected):
        assert css(design, raw) == expected + "{text-decoration-line:underline}"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("max-md:underline", r"@media (width < 48rem){.max-md\:underline"),
            ("not-md:underline", r"@media not (width >= 48rem){.not-md\:underline"),
            ("@md:underline", r"@container (width >= 28rem){.\@md\:underline"),
            ("print:underline", r"@media print{.print\:underline"),
        ],
    )
    def test_at_rule_variants(self, design, raw, expected):
        assert css(design, raw) == expected + "{text-decoration-line:underline}}"

    def test_nested_at_rules(self, design):
        assert css(design, "dark:md:underline") == (
            r"@media (prefers-color-scheme: dark){@media (width >= 48rem)"
            r"{.dark\:md\:underline{text-decoration-line:underline}}}"
        )

    def test_at_rules_wrap_selector_variants(self, design):
        expected = r"@media (width >= 48rem){.hover\:md\:underline:hover{text-decoration-line:underline}}"
        assert css(design, "hover:md:underline") == expected
        assert css(design, "md:hover:underline") == expected.replace(r"hover\:md", r"md\:hover")

    def test_pseudo_element_does_not_compound(self, design):
        assert css(design, "group-before:underline") is None
        assert design.compile("group-before:underline").failure is not None

    def test_has_rejects_at_rule(self, design):
        assert css(design, "has-md:underline") is None
