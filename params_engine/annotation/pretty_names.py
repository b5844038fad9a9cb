"""Display names for parameters, read from the model's parameter catalog."""

from typing import Any, Dict, Optional

from params_engine import introspection
from params_engine.introspection import ModelIntrospector
from params_engine.models import ParameterTable
from .safe import safe_catalog, safe_model_class


def format_parameters(model: Any, introspector: Optional[ModelIntrospector] = None) -> Optional[Dict[str, str]]:
    """Model-wide ``Parameter -> label`` mapping, or None when the model has no catalog"""
    return safe_catalog(model, introspector or introspection.registry)


def add_cleaned_names(
    table: ParameterTable,
    model: Any,
    introspector: Optional[ModelIntrospector] = None,
) -> ParameterTable:
    """
    Set ``pretty_names`` and ``cleaned_parameters`` for the table's rows.

    Only parameters found in the model's catalog get a label; both keys hold
    the same mapping. ``model_class`` is refreshed as well.
    """
    introspector = introspector or introspection.registry
    table.attributes.model_class = safe_model_class(model, introspector)

    catalog = safe_catalog(model, introspector) or {}
    names = {str(p): catalog[str(p)] for p in table.parameters if str(p) in catalog}

    table.attributes.cleaned_parameters = dict(names)
    table.attributes.pretty_names = dict(names)
    return table
