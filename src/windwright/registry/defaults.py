"""Stock utility and variant tables built from a theme."""

from __future__ import annotations

from windwright.model.variant import ArbitraryArg, ThemeKeyArg, VariantArgument
from windwright.registry.data_types import infer_data_type
from windwright.registry.utilities import UtilityRegistry, ValueRule
from windwright.registry.variants import AtRuleWrap, SelectorWrap, VariantRegistry, Wrap
from windwright.stylesheet.escape import escape
from windwright.theme import Theme

__all__ = ["create_utilities", "create_variants"]


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------

_COLOR_KEYWORDS = {
    "transparent": "transparent",
    "current": "currentColor",
    "inherit": "inherit",
}

_SIZE_KEYWORDS = {
    "auto": "auto",
    "full": "100%",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
}


def _spacing(*properties: str, keywords: dict[str, str] | None = None, fractions: bool = False) -> ValueRule:
    return ValueRule(
        properties=properties,
        namespaces=("--spacing",),
        keywords=keywords or {},
        bare=("spacing", "fraction") if fractions else ("spacing",),
        data_types=("length", "percentage"),
        fallback=True,
    )


def _color(*properties: str) -> ValueRule:
    return ValueRule(
        properties=properties,
        namespaces=("--color",),
        keywords=_COLOR_KEYWORDS,
        data_types=("color",),
        fallback=True,
        color=True,
    )


def create_utilities(theme: Theme) -> UtilityRegistry:
    """Register the stock utilities.  Registration order is sort order."""
    u = UtilityRegistry()

    # --- accessibility, visibility, position ----------------------------------
    u.static(
        "sr-only",
        ("position", "absolute"),
        ("width", "1px"),
        ("height", "1px"),
        ("padding", "0"),
        ("margin", "-1px"),
        ("overflow", "hidden"),
        ("clip", "rect(0, 0, 0, 0)"),
        ("white-space", "nowrap"),
        ("border-width", "0"),
    )
    u.static(
        "not-sr-only",
        ("position", "static"),
        ("width", "auto"),
        ("height", "auto"),
        ("padding", "0"),
        ("margin", "0"),
        ("overflow", "visible"),
        ("clip", "auto"),
        ("white-space", "normal"),
    )
    u.static("visible", ("visibility", "visible"))
    u.static("invisible", ("visibility", "hidden"))
    for position in ("static", "fixed", "absolute", "relative", "sticky"):
        u.static(position, ("position", position))

    inset_keywords = {"auto": "auto", "full": "100%"}
    u.dynamic("inset", _spacing("inset", keywords=inset_keywords, fractions=True), supports_negative=True)
    for side in ("top", "right", "bottom", "left"):
        u.dynamic(side, _spacing(side, keywords=inset_keywords, fractions=True), supports_negative=True)
    u.dynamic(
        "z",
        ValueRule(
            properties=("z-index",),
            keywords={"auto": "auto"},
            bare=("integer",),
            data_types=("integer",),
            fallback=True,
        ),
        supports_negative=True,
    )

    # --- spacing ----------------------------------------------------------------
    margin = {"m": ("margin",), "mx": ("margin-left", "margin-right"), "my": ("margin-top", "margin-bottom"),
              "mt": ("margin-top",), "mr": ("margin-right",), "mb": ("margin-bottom",), "ml": ("margin-left",)}
    for name, properties in margin.items():
        u.dynamic(name, _spacing(*properties, keywords={"auto": "auto"}), supports_negative=True)
    padding = {"p": ("padding",), "px": ("padding-left", "padding-right"), "py": ("padding-top", "padding-bottom"),
               "pt": ("padding-top",), "pr": ("padding-right",), "pb": ("padding-bottom",), "pl": ("padding-left",)}
    for name, properties in padding.items():
        u.dynamic(name, _spacing(*properties))

    # --- display and layout -----------------------------------------------------
    for display in ("block", "inline-block", "inline", "flex", "inline-flex", "grid", "inline-grid", "contents", "table"):
        u.static(display, ("display", display))
    u.static("hidden", ("display", "none"))
    u.static("flex-row", ("flex-direction", "row"))
    u.static("flex-col", ("flex-direction", "column"))
    u.static("flex-wrap", ("flex-wrap", "wrap"))
    u.static("flex-nowrap", ("flex-wrap", "nowrap"))
    u.dynamic(
        "flex",
        ValueRule(
            properties=("flex",),
            keywords={"1": "1 1 0%", "auto": "1 1 auto", "initial": "0 1 auto", "none": "none"},
            bare=("fraction",),
            fallback=True,
        ),
    )
    u.dynamic("grow", ValueRule(properties=("flex-grow",), bare=("integer",), fallback=True), default="1")
    u.dynamic("shrink", ValueRule(properties=("flex-shrink",), bare=("integer",), fallback=True), default="1")
    u.dynamic("basis", _spacing("flex-basis", keywords=_SIZE_KEYWORDS, fractions=True))
    u.dynamic(
        "grid-cols",
        ValueRule(
            properties=("grid-template-columns",),
            keywords={"none": "none", "subgrid": "subgrid"},
            bare=("integer",),
            bare_template="repeat({}, minmax(0, 1fr))",
            fallback=True,
        ),
    )
    for name, value in (("start", "flex-start"), ("center", "center"), ("end", "flex-end"),
                        ("stretch", "stretch"), ("baseline", "baseline")):
        u.static(f"items-{name}", ("align-items", value))
    for name, value in (("start", "flex-start"), ("center", "center"), ("end", "flex-end"),
                        ("between", "space-between"), ("around", "space-around"), ("evenly", "space-evenly")):
        u.static(f"justify-{name}", ("justify-content", value))
    u.dynamic("gap", _spacing("gap"))
    u.dynamic("gap-x", _spacing("column-gap"))
    u.dynamic("gap-y", _spacing("row-gap"))

    # --- sizing -----------------------------------------------------------------
    u.dynamic("w", _spacing("width", keywords={**_SIZE_KEYWORDS, "screen": "100vw"}, fractions=True))
    u.dynamic("min-w", _spacing("min-width", keywords=_SIZE_KEYWORDS, fractions=True))
    u.dynamic(
        "max-w",
        ValueRule(
            properties=("max-width",),
            namespaces=("--container", "--spacing"),
            keywords={**_SIZE_KEYWORDS, "none": "none"},
            bare=("fraction",),
            data_types=("length", "percentage"),
            fallback=True,
        ),
    )
    u.dynamic("h", _spacing("height", keywords={**_SIZE_KEYWORDS, "screen": "100vh"}, fractions=True))
    u.dynamic("min-h", _spacing("min-height", keywords={**_SIZE_KEYWORDS, "screen": "100vh"}, fractions=True))
    u.dynamic("size", _spacing("width", "height", keywords=_SIZE_KEYWORDS, fractions=True))

    # --- typography -------------------------------------------------------------
    u.dynamic(
        "font",
        ValueRule(
            properties=("font-weight",),
            namespaces=("--font-weight",),
            bare=("integer",),
            data_types=("number",),
        ),
        ValueRule(
            properties=("font-family",),
            namespaces=("--font",),
            data_types=("family-name",),
            fallback=True,
            ignored=("--font-weight",),
        ),
    )
    u.dynamic(
        "text",
        ValueRule(
            properties=("font-size",),
            namespaces=("--text",),
            data_types=("length", "percentage"),
            companions=(("line-height", "--line-height"),),
        ),
        _color("color"),
    )
    u.dynamic(
        "leading",
        ValueRule(
            properties=("line-height",),
            namespaces=("--leading", "--spacing"),
            keywords={"none": "1"},
            bare=("spacing",),
            data_types=("number", "length", "percentage"),
            fallback=True,
        ),
    )
    u.dynamic(
        "tracking",
        ValueRule(properties=("letter-spacing",), namespaces=("--tracking",), data_types=("length",), fallback=True),
        supports_negative=True,
    )
    u.static("italic", ("font-style", "italic"))
    u.static("not-italic", ("font-style", "normal"))
    u.static("underline", ("text-decoration-line", "underline"))
    u.static("overline", ("text-decoration-line", "overline"))
    u.static("line-through", ("text-decoration-line", "line-through"))
    u.static("no-underline", ("text-decoration-line", "none"))
    u.dynamic(
        "decoration",
        _color("text-decoration-color"),
        ValueRule(
            properties=("text-decoration-thickness",),
            keywords={"auto": "auto", "from-font": "from-font"},
            bare=("integer",),
            bare_template="{}px",
            data_types=("length", "percentage"),
        ),
    )
    u.static("uppercase", ("text-transform", "uppercase"))
    u.static("lowercase", ("text-transform", "lowercase"))
    u.static("capitalize", ("text-transform", "capitalize"))
    u.static("normal-case", ("text-transform", "none"))
    u.static("truncate", ("overflow", "hidden"), ("text-overflow", "ellipsis"), ("white-space", "nowrap"))
    u.static(
        "antialiased",
        ("-webkit-font-smoothing", "antialiased"),
        ("-moz-osx-font-smoothing", "grayscale"),
    )
    u.dynamic("content", ValueRule(properties=("content",), keywords={"none": "none"}, fallback=True))

    # --- backgrounds, borders, effects -------------------------------------------
    u.dynamic(
        "bg",
        _color("background-color"),
        ValueRule(
            properties=("background-image",),
            keywords={"none": "none"},
            data_types=("url", "image"),
        ),
    )
    u.dynamic(
        "border",
        ValueRule(
            properties=("border-width",),
            bare=("integer",),
            bare_template="{}px",
            data_types=("length",),
        ),
        _color("border-color"),
        default="1px",
    )
    for name, sides in (("border-x", ("left", "right")), ("border-y", ("top", "bottom")),
                        ("border-t", ("top",)), ("border-r", ("right",)),
                        ("border-b", ("bottom",)), ("border-l", ("left",))):
        u.dynamic(
            name,
            ValueRule(
                properties=tuple(f"border-{side}-width" for side in sides),
                bare=("integer",),
                bare_template="{}px",
                data_types=("length",),
            ),
            _color(*(f"border-{side}-color" for side in sides)),
            default="1px",
        )
    u.dynamic(
        "rounded",
        ValueRule(
            properties=("border-radius",),
            namespaces=("--radius",),
            keywords={"none": "0", "full": "calc(infinity * 1px)"},
            data_types=("length", "percentage"),
            fallback=True,
        ),
        default=theme.get("--radius", "0.25rem"),
    )
    u.dynamic(
        "opacity",
        ValueRule(
            properties=("opacity",),
            namespaces=("--opacity",),
            bare=("percentage",),
            data_types=("number", "percentage"),
            fallback=True,
        ),
    )
    u.dynamic("accent", _color("accent-color"))
    u.dynamic("caret", _color("caret-color"))
    u.dynamic("fill", _color("fill"))
    u.dynamic("stroke", _color("stroke"))
    u.dynamic(
        "cursor",
        ValueRule(
            properties=("cursor",),
            keywords={name: name for name in ("auto", "default", "pointer", "wait", "text", "move",
                                              "help", "not-allowed", "none", "grab", "grabbing")},
            fallback=True,
        ),
    )
    return u.freeze()


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

_ARIA_STATES = (
    "busy", "checked", "disabled", "expanded", "hidden", "pressed",
    "readonly", "required", "selected",
)


def _compound_root(kind: str, modifier: str | None) -> str:
    name = kind if modifier is None else f"{kind}/{modifier}"
    return f":where(.{escape(name)})"


def _sibling_compound(kind: str, combinator: str):
    def compound(wrap: Wrap, modifier: str | None) -> Wrap | None:
        if not isinstance(wrap, SelectorWrap):
            return None
        inner = wrap.template.replace("&", _compound_root(kind, modifier))
        return SelectorWrap(f"&:is({inner}{combinator})")

    def arbitrary(selector: str, modifier: str | None) -> Wrap | None:
        root = _compound_root(kind, modifier)
        inner = selector.replace("&", root) if "&" in selector else f"{root}:is({selector})"
        return SelectorWrap(f"&:is({inner}{combinator})")

    return compound, arbitrary


def _negate(params: str) -> str:
    if params.startswith("not "):
        return params[len("not "):]
    head, sep, condition = params.partition("(")
    if head.strip() and sep:
        # named container query: "main (width >= 28rem)"
        return f"{head.strip()} not ({condition}"
    return f"not {params}"


def _not_compound(wrap: Wrap, modifier: str | None) -> Wrap | None:
    if modifier is not None:
        return None
    if isinstance(wrap, SelectorWrap):
        return SelectorWrap(f"&:not({wrap.template.replace('&', '*')})")
    if wrap.name in ("@media", "@supports", "@container"):
        return AtRuleWrap(wrap.name, _negate(wrap.params))
    return None


def _not_arbitrary(selector: str, modifier: str | None) -> Wrap | None:
    if modifier is not None:
        return None
    return SelectorWrap(f"&:not({selector.replace('&', '*')})")


def _has_compound(wrap: Wrap, modifier: str | None) -> Wrap | None:
    if modifier is not None or not isinstance(wrap, SelectorWrap):
        return None
    return SelectorWrap(f"&:has({wrap.template.replace('&', '*')})")


def _has_arbitrary(selector: str, modifier: str | None) -> Wrap | None:
    if modifier is not None:
        return None
    return SelectorWrap(f"&:has({selector.replace('&', '*')})")


def _in_compound(wrap: Wrap, modifier: str | None) -> Wrap | None:
    if modifier is not None or not isinstance(wrap, SelectorWrap):
        return None
    return SelectorWrap(f":where({wrap.template.replace('&', '*')}) &")


def _in_arbitrary(selector: str, modifier: str | None) -> Wrap | None:
    if modifier is not None:
        return None
    return SelectorWrap(f":where({selector.replace('&', '*')}) &")


def _aria(argument: VariantArgument, modifier: str | None) -> Wrap | None:
    if modifier is not None:
        return None
    if isinstance(argument, ThemeKeyArg) and argument.value in _ARIA_STATES:
        return SelectorWrap(f'&[aria-{argument.value}="true"]')
    if isinstance(argument, ArbitraryArg):
        return SelectorWrap(f"&[aria-{argument.value}]")
    return None


def _data(argument: VariantArgument, modifier: str | None) -> Wrap | None:
    if modifier is not None or not isinstance(argument, (ThemeKeyArg, ArbitraryArg)):
        return None
    return SelectorWrap(f"&[data-{argument.value}]")


def _supports(argument: VariantArgument, modifier: str | None) -> Wrap | None:
    if modifier is not None or not isinstance(argument, (ThemeKeyArg, ArbitraryArg)):
        return None
    value = argument.value
    if value.startswith(("(", "selector(", "font-tech(", "font-format(")):
        return AtRuleWrap("@supports", value)
    if ":" not in value:
        return AtRuleWrap("@supports", f"({value}: var(--tw))")
    return AtRuleWrap("@supports", f"({value})")


def _nth(pseudo: str):
    def resolve(argument: VariantArgument, modifier: str | None) -> Wrap | None:
        if modifier is not None:
            return None
        if isinstance(argument, ThemeKeyArg) and argument.value.isdigit():
            return SelectorWrap(f"&:{pseudo}({argument.value})")
        if isinstance(argument, ArbitraryArg):
            return SelectorWrap(f"&:{pseudo}({argument.value})")
        return None

    return resolve


def _size_query(theme: Theme, namespace: str, at_rule: str, operator: str, named: bool):
    def resolve(argument: VariantArgument, modifier: str | None) -> Wrap | None:
        if modifier is not None and not named:
            return None
        if isinstance(argument, ThemeKeyArg):
            size = theme.resolve(argument.value, (namespace,))
        elif isinstance(argument, ArbitraryArg) and infer_data_type(argument.value, ("length", "percentage")):
            size = argument.value
        else:
            size = None
        if size is None:
            return None
        condition = f"(width {operator} {size})"
        if modifier is not None:
            condition = f"{modifier} {condition}"
        return AtRuleWrap(at_rule, condition)

    return resolve


def create_variants(theme: Theme) -> VariantRegistry:
    """Register the stock variants.  Registration order is cascade order."""
    v = VariantRegistry()

    v.selector("*", ":is(& > *)", compounds=False)

    v.compound("not", _not_compound, arbitrary=_not_arbitrary)
    group, group_arbitrary = _sibling_compound("group", " *")
    v.compound("group", group, arbitrary=group_arbitrary)
    peer, peer_arbitrary = _sibling_compound("peer", " ~ *")
    v.compound("peer", peer, arbitrary=peer_arbitrary)

    # pseudo-elements
    for name, pseudo in (("first-letter", "::first-letter"), ("first-line", "::first-line"),
                         ("marker", "::marker"), ("selection", "::selection"),
                         ("file", "::file-selector-button"), ("placeholder", "::placeholder"),
                         ("backdrop", "::backdrop"), ("before", "::before"), ("after", "::after")):
        v.selector(name, f"&{pseudo}", compounds=False)

    # pseudo-classes
    for name, pseudo in (("first", ":first-child"), ("last", ":last-child"), ("only", ":only-child"),
                         ("odd", ":nth-child(odd)"), ("even", ":nth-child(even)"),
                         ("first-of-type", ":first-of-type"), ("last-of-type", ":last-of-type"),
                         ("empty", ":empty"), ("visited", ":visited"), ("target", ":target"),
                         ("open", ":is([open], :popover-open)"), ("default", ":default"),
                         ("checked", ":checked"), ("indeterminate", ":indeterminate"),
                         ("placeholder-shown", ":placeholder-shown"), ("autofill", ":autofill"),
                         ("optional", ":optional"), ("required", ":required"), ("valid", ":valid"),
                         ("invalid", ":invalid"), ("in-range", ":in-range"),
                         ("out-of-range", ":out-of-range"), ("read-only", ":read-only"),
                         ("focus-within", ":focus-within"), ("hover", ":hover"), ("focus", ":focus"),
                         ("focus-visible", ":focus-visible"), ("active", ":active"),
                         ("enabled", ":enabled"), ("disabled", ":disabled")):
        v.selector(name, f"&{pseudo}")

    v.compound("in", _in_compound, arbitrary=_in_arbitrary)
    v.compound("has", _has_compound, arbitrary=_has_arbitrary)
    v.functional("aria", _aria, values=_ARIA_STATES)
    v.functional("data", _data)
    v.functional("nth", _nth("nth-child"))
    v.functional("nth-last", _nth("nth-last-child"))
    v.functional("supports", _supports)

    v.at_rule("motion-safe", "@media", "(prefers-reduced-motion: no-preference)")
    v.at_rule("motion-reduce", "@media", "(prefers-reduced-motion: reduce)")
    v.at_rule("contrast-more", "@media", "(prefers-contrast: more)")
    v.at_rule("contrast-less", "@media", "(prefers-contrast: less)")

    breakpoints = tuple(theme.keys_in("--breakpoint"))
    v.functional("max", _size_query(theme, "--breakpoint", "@media", "<", named=False), values=breakpoints)
    for key in breakpoints:
        v.at_rule(key, "@media", f"(width >= {theme.get(f'--breakpoint-{key}')})")
    v.functional("min", _size_query(theme, "--breakpoint", "@media", ">=", named=False), values=breakpoints)

    containers = tuple(theme.keys_in("--container"))
    v.functional("@max", _size_query(theme, "--container", "@container", "<", named=True), values=containers)
    v.functional("@", _size_query(theme, "--container", "@container", ">=", named=True), values=containers)
    v.functional("@min", _size_query(theme, "--container", "@container", ">=", named=True), values=containers)

    v.at_rule("portrait", "@media", "(orientation: portrait)")
    v.at_rule("landscape", "@media", "(orientation: landscape)")
    v.selector("ltr", "&:where(:dir(ltr), [dir=ltr], [dir=ltr] *)")
    v.selector("rtl", "&:where(:dir(rtl), [dir=rtl], [dir=rtl] *)")
    v.at_rule("dark", "@media", "(prefers-color-scheme: dark)")
    v.at_rule("print", "@media", "print")
    v.at_rule("forced-colors", "@media", "(forced-colors: active)")
    return v.freeze()
