"""
Numeric transformations for parameter tables
"""
import re
from typing import List

import numpy as np
import pandas as pd

from .base import BaseTableTransformer

EXPONENTIATE_PATTERN = re.compile(r"^(Coefficient|Mean|Median|MAP|Std_Coefficient|CI_|Std_CI)")


class ExponentiateTransformer(BaseTableTransformer):
    """
    Move log-scale estimates to the multiplicative scale.

    Every column whose name starts with Coefficient, Mean, Median, MAP,
    Std_Coefficient, CI_ or Std_CI is exponentiated. When both Coefficient
    and SE are present, SE becomes exp(Coefficient) * SE (delta method).
    """
    TRANSFORM_TYPE = "exponentiate"

    def validate_params(self):
        pass

    def select_columns(self, frame: pd.DataFrame) -> List[str]:
        return [c for c in frame.columns if isinstance(c, str) and EXPONENTIATE_PATTERN.match(c)]

    def transform(self, frame: pd.DataFrame) -> pd.DataFrame:
        columns = self.select_columns(frame)
        if not columns:
            return frame

        self.check_numeric(frame, columns)

        result = frame.copy()
        result[columns] = np.exp(result[columns])

        # exponentiated coefficient times the original SE
        if "Coefficient" in result.columns and "SE" in result.columns:
            result["SE"] = result["Coefficient"] * frame["SE"]

        return result
