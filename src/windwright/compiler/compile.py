"""AST compiler: parsed Candidate -> stylesheet nodes.

Steps:
    1. Resolve the utility (static, dynamic or arbitrary property) into
       declarations, trying entries registered under the root in order.
    2. Apply the alpha modifier to every color-valued declaration.
    3. Mark every declaration important when requested.
    4. Fold the variant stack from innermost to outermost.

Any failure yields a Compilation with no nodes; ``failure`` records why for
diagnostics and never influences the nodes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from windwright.compiler.alpha import resolve_alpha, with_alpha
from windwright.config import CompilerConfig
from windwright.model.candidate import ArbitraryValue, Candidate, NamedValue
from windwright.model.variant import (
    ArbitraryArg,
    ArbitraryVariant,
    CompoundVariant,
    FunctionalVariant,
    IdentifierArg,
    StaticVariant,
    Variant,
)
from windwright.registry.data_types import infer_data_type, is_color
from windwright.registry.utilities import (
    DynamicUtility,
    StaticUtility,
    Utility,
    UtilityRegistry,
    ValueRule,
)
from windwright.registry.variants import (
    AtRuleWrap,
    CompoundVariantDef,
    FunctionalVariantDef,
    SelectorWrap,
    StaticVariantDef,
    VariantRegistry,
    Wrap,
)
from windwright.stylesheet.escape import escape
from windwright.stylesheet.model import AtRule, Declaration, Node, StyleRule, map_selectors
from windwright.theme import Theme

__all__ = ["Compilation", "compile_candidate", "resolve_variant"]

_NUMBER_RE = re.compile(r"^\d+(?:\.\d+)?$")
_INTEGER_RE = re.compile(r"^\d+$")
# Multiples of 0.25, matched on the digits alone.
_QUARTER_RE = re.compile(r"^\d+(?:\.(?:0|25|5|75)0*)?$")


@dataclass(frozen=True)
class Compilation:
    """The result of compiling one candidate.

    Attributes:
        nodes: Stylesheet nodes; empty when the candidate produces no CSS.
        utility: The registry entry that produced the declarations.
        failure: Why no nodes were produced, for diagnostics only.
    """

    nodes: tuple[Node, ...]
    utility: Utility | None = None
    failure: str | None = None


@dataclass(frozen=True)
class _Resolved:
    property: str
    value: str
    color: bool = False


class _Failure(Exception):
    """Internal signal: the candidate cannot be resolved."""


# ---------------------------------------------------------------------------
# Utility resolution
# ---------------------------------------------------------------------------


def _bare_value(handler: str, value: NamedValue, theme: Theme) -> str | None:
    key = value.value
    if handler == "integer":
        return key if _INTEGER_RE.match(key) else None
    if handler == "number":
        return key if _NUMBER_RE.match(key) else None
    if handler == "percentage":
        digits = key.lstrip("0") or "0"
        if _INTEGER_RE.match(key) and len(digits) <= 3 and int(digits) <= 100:
            return f"{key}%"
        return None
    if handler == "spacing":
        base = theme.get("--spacing")
        if base is None or not _QUARTER_RE.match(key):
            return None
        return f"calc({base} * {key})"
    if handler == "fraction":
        if value.fraction is None:
            return None
        _, _, denominator = value.fraction.partition("/")
        if not denominator.strip("0."):
            return None
        return f"calc({value.fraction} * 100%)"
    return None


def _lookup(rule: ValueRule, key: str, theme: Theme) -> tuple[str, list[_Resolved]] | None:
    if key in rule.keywords:
        return rule.keywords[key], []
    name = theme.resolve_name(key, rule.namespaces)
    if name is None or any(name.startswith(f"{ns}-") for ns in rule.ignored):
        return None
    companions = [
        _Resolved(prop, theme.get(name + suffix))  # type: ignore[arg-type]
        for prop, suffix in rule.companions
        if name + suffix in theme
    ]
    return theme.get(name), companions  # type: ignore[return-value]


def _resolve_named(
    rule: ValueRule, value: NamedValue, theme: Theme
) -> tuple[str, list[_Resolved], bool] | None:
    """Return (value, companion declarations, fraction consumed the modifier)."""
    if value.fraction is not None:
        found = _lookup(rule, value.fraction, theme)
        if found is not None:
            return found[0], found[1], True
        if "fraction" in rule.bare:
            resolved = _bare_value("fraction", value, theme)
            if resolved is not None:
                return resolved, [], True

    found = _lookup(rule, value.value, theme)
    if found is not None:
        return found[0], found[1], False
    for handler in rule.bare:
        if handler == "fraction":
            continue
        resolved = _bare_value(handler, value, theme)
        if resolved is not None:
            return rule.bare_template.format(resolved), [], False
    return None


def _pick_arbitrary_rule(utility: DynamicUtility, value: ArbitraryValue) -> ValueRule:
    data_type = value.data_type or infer_data_type(value.value, utility.data_types())
    if data_type is not None:
        for rule in utility.rules:
            if data_type in rule.data_types:
                return rule
        if value.data_type is not None:
            raise _Failure(f"'{utility.name}' does not accept {data_type} values")
    for rule in utility.rules:
        if rule.fallback:
            return rule
    raise _Failure(f"'{utility.name}' cannot use arbitrary value {value.value!r}")


def _resolve_dynamic(
    utility: DynamicUtility, candidate: Candidate, theme: Theme
) -> tuple[list[_Resolved], bool]:
    value = candidate.value
    consumed = False
    companions: list[_Resolved] = []
    if value is None:
        if utility.default is None:
            raise _Failure(f"'{utility.name}' requires a value")
        rule = utility.rules[0]
        resolved_value = utility.default
    elif isinstance(value, ArbitraryValue):
        rule = _pick_arbitrary_rule(utility, value)
        resolved_value = value.value
    else:
        for rule in utility.rules:
            found = _resolve_named(rule, value, theme)
            if found is not None:
                resolved_value, companions, consumed = found
                break
        else:
            raise _Failure(f"'{utility.name}' has no value {value.value!r}")

    if candidate.negative:
        if not utility.supports_negative:
            raise _Failure(f"'{utility.name}' does not support negative values")
        resolved_value = f"calc({resolved_value} * -1)"

    declarations = [_Resolved(p, resolved_value, rule.color) for p in rule.properties]
    return declarations + companions, consumed


def _resolve_entry(
    utility: StaticUtility | DynamicUtility,
    candidate: Candidate,
    theme: Theme,
    config: CompilerConfig,
) -> list[_Resolved]:
    if isinstance(utility, StaticUtility):
        if candidate.value is not None or candidate.negative:
            raise _Failure(f"'{utility.name}' takes no value")
        declarations = [_Resolved(p, v) for p, v in utility.declarations]
        consumed = False
    else:
        declarations, consumed = _resolve_dynamic(utility, candidate, theme)
    return _apply_modifier(declarations, candidate, consumed, theme, config)


def _apply_modifier(
    declarations: list[_Resolved],
    candidate: Candidate,
    consumed: bool,
    theme: Theme,
    config: CompilerConfig,
) -> list[_Resolved]:
    if candidate.modifier is None or consumed:
        return declarations
    if not any(d.color for d in declarations):
        raise _Failure("modifier used on a utility without a color value")
    alpha = resolve_alpha(candidate.modifier, theme)
    if alpha is None:
        raise _Failure(f"invalid alpha modifier {candidate.modifier.value!r}")
    return [
        _Resolved(d.property, with_alpha(d.value, alpha, config.alpha_color_space), True)
        if d.color
        else d
        for d in declarations
    ]


def _resolve_utility(
    candidate: Candidate,
    theme: Theme,
    utilities: UtilityRegistry,
    config: CompilerConfig,
) -> tuple[Utility, list[_Resolved]]:
    if candidate.kind == "arbitrary":
        value = candidate.value.value  # type: ignore[union-attr]
        declarations = [_Resolved(candidate.property or "", value, is_color(value))]
        declarations = _apply_modifier(declarations, candidate, False, theme, config)
        return utilities.arbitrary_property, declarations

    entries = utilities.get(candidate.root)
    if not entries:
        raise _Failure(f"unknown utility '{candidate.root}'")
    first_failure: _Failure | None = None
    for entry in entries:
        try:
            return entry, _resolve_entry(entry, candidate, theme, config)
        except _Failure as exc:
            if first_failure is None:
                first_failure = exc
    raise first_failure  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Variant folding
# ---------------------------------------------------------------------------


def _resolve_leaf(variant: Variant, registry: VariantRegistry) -> tuple[Wrap | None, bool]:
    if isinstance(variant, ArbitraryVariant):
        selector = variant.selector
        if selector.startswith("@"):
            name = re.split(r"[\s(]", selector, maxsplit=1)[0]
            return AtRuleWrap(name, selector[len(name):].strip()), False
        template = selector if "&" in selector else f"&:is({selector})"
        return SelectorWrap(template), True

    definition = registry.get(variant.name)  # type: ignore[union-attr]
    if isinstance(variant, StaticVariant):
        if isinstance(definition, StaticVariantDef):
            return definition.wrap, definition.compounds
        return None, False

    if not isinstance(variant, FunctionalVariant):
        return None, False
    if isinstance(definition, FunctionalVariantDef):
        wrap = definition.resolve(variant.argument, variant.modifier)
    elif (
        isinstance(definition, CompoundVariantDef)
        and definition.arbitrary is not None
        and isinstance(variant.argument, ArbitraryArg)
    ):
        wrap = definition.arbitrary(variant.argument.value, variant.modifier)
    else:
        wrap = None
    return wrap, isinstance(wrap, SelectorWrap)


def resolve_variant(variant: Variant, registry: VariantRegistry) -> Wrap | None:
    """Resolve *variant* into the wrap it applies, or None if it cannot apply."""
    chain: list[StaticVariant | FunctionalVariant] = []
    while isinstance(variant, CompoundVariant):
        chain.append(variant.outer)
        variant = variant.inner

    wrap, compounds = _resolve_leaf(variant, registry)
    for outer in reversed(chain):
        if wrap is None or not compounds:
            return None
        definition = registry.get(outer.name)
        if not isinstance(definition, CompoundVariantDef):
            return None
        modifier = None
        if isinstance(outer, FunctionalVariant) and isinstance(outer.argument, IdentifierArg):
            modifier = outer.argument.name
        wrap = definition.compound(wrap, modifier)
        compounds = True
    return wrap


def _apply_wrap(node: Node, wrap: Wrap) -> Node:
    if isinstance(wrap, SelectorWrap):
        return map_selectors(node, wrap.template)
    return AtRule(wrap.name, wrap.params, (node,))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def compile_candidate(
    candidate: Candidate,
    theme: Theme,
    utilities: UtilityRegistry,
    variants: VariantRegistry,
    config: CompilerConfig | None = None,
) -> Compilation:
    """Compile a parsed candidate into stylesheet nodes."""
    config = config or CompilerConfig()
    try:
        utility, resolved = _resolve_utility(candidate, theme, utilities, config)
    except _Failure as exc:
        return Compilation((), failure=str(exc))

    declarations = tuple(
        Declaration(d.property, d.value, important=candidate.important) for d in resolved
    )
    node: Node = StyleRule(f".{escape(candidate.raw)}", declarations)

    for variant in reversed(candidate.variants):
        wrap = resolve_variant(variant, variants)
        if wrap is None:
            return Compilation((), failure="variant cannot be applied to this utility")
        node = _apply_wrap(node, wrap)
    return Compilation((node,), utility=utility)
