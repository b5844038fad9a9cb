from .attributes import (
    SE_WEIGHTED_META,
    VARIANCE_WEIGHTED_META,
    add_anova_attributes,
    annotate,
    is_meta_analysis,
)
from .coefficients import (
    COEFFICIENT_LABELS,
    resolve_coefficient_label,
    resolve_zi_coefficient_label,
)
from .options import apply_format_options, resolve_format_options, resolve_option
from .pretty_names import add_cleaned_names, format_parameters

__all__ = [
    "COEFFICIENT_LABELS",
    "SE_WEIGHTED_META",
    "VARIANCE_WEIGHTED_META",
    "add_anova_attributes",
    "add_cleaned_names",
    "annotate",
    "apply_format_options",
    "format_parameters",
    "is_meta_analysis",
    "resolve_coefficient_label",
    "resolve_format_options",
    "resolve_option",
    "resolve_zi_coefficient_label",
]
