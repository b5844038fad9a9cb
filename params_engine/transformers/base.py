"""
Base transformer class for parameter tables
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import pandas as pd


class TransformError(Exception):
    """Custom exception for transform errors"""
    def __init__(self, message: str, column: str = None, suggestion: str = None):
        self.message = message
        self.column = column
        self.suggestion = suggestion
        super().__init__(self.message)


class BaseTableTransformer(ABC):
    """Base class for transformers operating on whole parameter frames"""

    # Subclasses must define these
    TRANSFORM_TYPE: str = None

    def __init__(self, params: Optional[Dict[str, Any]] = None):
        self.params = params or {}
        self.validate_params()

    @abstractmethod
    def validate_params(self):
        """Validate transformation parameters"""
        pass

    @abstractmethod
    def select_columns(self, frame: pd.DataFrame) -> List[str]:
        """Columns this transform applies to"""
        pass

    @abstractmethod
    def transform(self, frame: pd.DataFrame) -> pd.DataFrame:
        """Return a transformed copy of ``frame``"""
        pass

    def check_numeric(self, frame: pd.DataFrame, columns: List[str]):
        for column in columns:
            if not pd.api.types.is_numeric_dtype(frame[column]):
                raise TransformError(
                    f"{self.TRANSFORM_TYPE} transformation requires numeric values",
                    column=column,
                    suggestion="Convert the column with pd.to_numeric before transforming",
                )

    def get_metadata(self, input_frame: pd.DataFrame, output_frame: pd.DataFrame) -> Dict[str, Any]:
        """Generate metadata about the transformation"""
        return {
            "transform_type": self.TRANSFORM_TYPE,
            "columns": self.select_columns(input_frame),
            "n_rows": len(output_frame),
            "null_count": int(output_frame[self.select_columns(input_frame)].isna().sum().sum()),
        }
