"""windwright model layer -- public type re-exports."""

from windwright.model.candidate import (
    ArbitraryModifier,
    ArbitraryValue,
    Candidate,
    CandidateValue,
    Modifier,
    NamedModifier,
    NamedValue,
)
from windwright.model.diagnostic import Diagnostic, Severity
from windwright.model.variant import (
    ArbitraryArg,
    ArbitraryVariant,
    CompoundVariant,
    FunctionalVariant,
    IdentifierArg,
    StaticVariant,
    ThemeKeyArg,
    Variant,
    VariantArgument,
    variant_to_string,
)

__all__ = [
    # candidate
    "Candidate",
    "CandidateValue",
    "NamedValue",
    "ArbitraryValue",
    "Modifier",
    "NamedModifier",
    "ArbitraryModifier",
    # variant
    "Variant",
    "VariantArgument",
    "StaticVariant",
    "FunctionalVariant",
    "CompoundVariant",
    "ArbitraryVariant",
    "ThemeKeyArg",
    "ArbitraryArg",
    "IdentifierArg",
    "variant_to_string",
    # diagnostic
    "Severity",
    "Diagnostic",
]
