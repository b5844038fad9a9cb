from .info import Formula, ModelInfo
from .table import AnnotationMetadata, FormatOptions, ParameterTable, ParameterTableError

__all__ = [
    "AnnotationMetadata",
    "FormatOptions",
    "Formula",
    "ModelInfo",
    "ParameterTable",
    "ParameterTableError",
]
