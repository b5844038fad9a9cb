"""Annotation and coefficient typing for statistical parameter tables."""

from .annotation import (
    add_anova_attributes,
    add_cleaned_names,
    annotate,
    resolve_coefficient_label,
    resolve_option,
)
from .models import AnnotationMetadata, FormatOptions, ModelInfo, ParameterTable
from .transformers import exponentiate_columns

__all__ = [
    "AnnotationMetadata",
    "FormatOptions",
    "ModelInfo",
    "ParameterTable",
    "add_anova_attributes",
    "add_cleaned_names",
    "annotate",
    "exponentiate_columns",
    "resolve_coefficient_label",
    "resolve_option",
]
