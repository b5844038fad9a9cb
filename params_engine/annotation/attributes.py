"""
Attribute annotation for parameter tables.

Reads what the introspection layer knows about a model (family, link,
formula, class tags, parameter labels) and records it on the table's
metadata so formatting code downstream treats every model the same way.
"""
import logging
from typing import Any, List, Optional

import pandas as pd

from params_engine import introspection
from params_engine.config import settings
from params_engine.introspection import ModelIntrospector
from params_engine.models import ParameterTable
from .coefficients import resolve_coefficient_label, resolve_zi_coefficient_label
from .options import FormatOverrides, apply_format_options
from .pretty_names import format_parameters
from .safe import safe_data, safe_formula, safe_model_class, safe_model_info, safe_study_variances

logger = logging.getLogger(__name__)

# weights from the model's own per-study variances
VARIANCE_WEIGHTED_META = frozenset({"rma", "rma.uni", "CombineResults"})
# weights from the table's SE column
SE_WEIGHTED_META = frozenset({"meta_random", "meta_fixed", "meta_bma"})


def is_meta_analysis(model_class: List[str]) -> bool:
    tags = set(model_class or [])
    return bool(tags & (VARIANCE_WEIGHTED_META | SE_WEIGHTED_META))


def _add_meta_analysis_attributes(
    table: ParameterTable,
    model: Any,
    model_class: List[str],
    introspector: ModelIntrospector,
) -> None:
    tags = set(model_class)
    attrs = table.attributes

    if tags & VARIANCE_WEIGHTED_META:
        attrs.data = safe_data(model, introspector)
        variances = safe_study_variances(model)
        if variances is None:
            logger.warning("Meta-analysis model %s has no usable study variances; study_weights not set",
                           type(model).__name__)
        else:
            attrs.study_weights = (1.0 / variances).tolist()

    if tags & SE_WEIGHTED_META:
        attrs.data = safe_data(model, introspector)
        if "SE" not in table.frame.columns:
            logger.warning("Parameter table has no 'SE' column; study_weights not set")
        else:
            se = pd.to_numeric(table.frame["SE"], errors="coerce")
            if se.isna().any():
                logger.warning("Parameter table has non-numeric or missing SE values; study_weights not set")
            else:
                attrs.study_weights = (1.0 / se.astype(float) ** 2).tolist()


def annotate(
    table: ParameterTable,
    model: Any,
    ci: Optional[float] = None,
    exponentiate: bool = False,
    bootstrap: bool = False,
    iterations: Optional[int] = None,
    df_method: Optional[str] = None,
    ci_method: Optional[str] = None,
    overrides: FormatOverrides = None,
    introspector: Optional[ModelIntrospector] = None,
) -> ParameterTable:
    """
    Attach model metadata to ``table`` in place and return it.

    Args:
        table: Parameter table produced by an extraction routine
        model: The fitted model the table was extracted from
        ci: Confidence level of the interval columns (default: settings.ci)
        exponentiate: Whether coefficient columns are on the exponentiated scale
        bootstrap: Whether estimates came from bootstrapping
        iterations: Bootstrap/posterior iterations (default: settings.iterations)
        df_method: Degrees-of-freedom method, if any
        ci_method: Bayesian interval method, if any
        overrides: Display options (digits, ci_digits, p_digits, s_value)
        introspector: Introspection backend (default: the package registry)

    Introspection failures never propagate; the affected keys stay unset or
    take their sentinel values. Columns and rows are not touched.
    """
    introspector = introspector or introspection.registry
    attrs = table.attributes

    info = safe_model_info(model, introspector)

    if attrs.pretty_names is None:
        attrs.pretty_names = format_parameters(model, introspector)

    attrs.ci = ci if ci is not None else settings.ci
    attrs.bayes_ci_method = ci_method
    attrs.exponentiate = exponentiate
    attrs.bootstrap = bootstrap
    attrs.iterations = iterations if iterations is not None else settings.iterations
    attrs.df_method = df_method

    attrs.ordinal_model = bool(info.is_ordinal or info.is_multinomial)
    attrs.model_class = safe_model_class(model, introspector)
    attrs.model_formula = safe_formula(model, introspector)

    attrs.coefficient_name = resolve_coefficient_label(info, exponentiate)
    attrs.zi_coefficient_name = resolve_zi_coefficient_label(exponentiate)

    if is_meta_analysis(attrs.model_class):
        _add_meta_analysis_attributes(table, model, attrs.model_class, introspector)

    apply_format_options(table, overrides)
    return table


def add_anova_attributes(
    table: ParameterTable,
    model: Any,
    ci: Optional[float] = None,
    overrides: FormatOverrides = None,
    introspector: Optional[ModelIntrospector] = None,
) -> ParameterTable:
    """Lighter annotation for ANOVA tables: ci, class tags and display options"""
    introspector = introspector or introspection.registry
    table.attributes.ci = ci if ci is not None else settings.ci
    table.attributes.model_class = safe_model_class(model, introspector)
    apply_format_options(table, overrides)
    return table
