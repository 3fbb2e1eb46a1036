from windwright.registry.data_types import infer_data_type
from windwright.registry.defaults import create_utilities, create_variants
from windwright.registry.utilities import (
    ArbitraryProperty,
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
    VariantDef,
    VariantRegistry,
    Wrap,
)

__all__ = [
    "infer_data_type",
    "create_utilities",
    "create_variants",
    # utilities
    "ArbitraryProperty",
    "DynamicUtility",
    "StaticUtility",
    "Utility",
    "UtilityRegistry",
    "ValueRule",
    # variants
    "AtRuleWrap",
    "SelectorWrap",
    "Wrap",
    "CompoundVariantDef",
    "FunctionalVariantDef",
    "StaticVariantDef",
    "VariantDef",
    "VariantRegistry",
]
