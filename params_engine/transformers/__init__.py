import logging
from typing import Union

import pandas as pd

from params_engine.models import ParameterTable
from .base import BaseTableTransformer, TransformError
from .numeric_transforms import EXPONENTIATE_PATTERN, ExponentiateTransformer

logger = logging.getLogger(__name__)


def exponentiate_columns(table: Union[ParameterTable, pd.DataFrame]) -> Union[ParameterTable, pd.DataFrame]:
    """Exponentiate coefficient-like columns; returns the same kind of object it was given"""
    transformer = ExponentiateTransformer()
    frame = table.frame if isinstance(table, ParameterTable) else table
    result = transformer.transform(frame)

    if result is not frame:
        logger.debug("Applied %s", transformer.get_metadata(frame, result))

    if isinstance(table, ParameterTable):
        return table if result is frame else table.with_frame(result)
    return result


__all__ = [
    "BaseTableTransformer",
    "EXPONENTIATE_PATTERN",
    "ExponentiateTransformer",
    "TransformError",
    "exponentiate_columns",
]
