"""
Model introspection: classify a fitted model and read its formula, data and parameter names.

Introspectors are looked up in a registry; the first one whose ``can_handle``
accepts the model answers every query for it.
"""
from typing import Any, List, Optional, Protocol, runtime_checkable

import pandas as pd

from params_engine.models import Formula, ModelInfo


class IntrospectionError(Exception):
    """Raised when a model cannot be classified or queried"""
    def __init__(self, message: str, model: Any = None):
        self.message = message
        self.model_type = type(model).__name__ if model is not None else None
        super().__init__(self.message)


@runtime_checkable
class ModelIntrospector(Protocol):
    def can_handle(self, model: Any) -> bool:
        ...

    def model_info(self, model: Any) -> ModelInfo:
        ...

    def find_formula(self, model: Any) -> Formula:
        ...

    def get_data(self, model: Any) -> pd.DataFrame:
        ...

    def clean_parameters(self, model: Any) -> pd.DataFrame:
        """Frame with columns ``Parameter`` and ``Cleaned_Parameter``, one row per model parameter"""
        ...

    def model_class(self, model: Any) -> List[str]:
        ...


def class_tags(obj: Any) -> List[str]:
    """Class hierarchy names of ``obj``, most specific first"""
    return [cls.__name__ for cls in type(obj).__mro__ if cls is not object]


class IntrospectorRegistry:
    """Ordered registry of model introspectors"""

    def __init__(self):
        self._introspectors: List[ModelIntrospector] = []

    def register(self, introspector: ModelIntrospector):
        if not isinstance(introspector, ModelIntrospector):
            raise ValueError(f"{introspector!r} does not implement ModelIntrospector")
        self._introspectors.append(introspector)

    def clear(self):
        self._introspectors.clear()

    def find(self, model: Any) -> Optional[ModelIntrospector]:
        for introspector in self._introspectors:
            if introspector.can_handle(model):
                return introspector
        return None

    def get(self, model: Any) -> ModelIntrospector:
        introspector = self.find(model)
        if introspector is None:
            raise IntrospectionError(
                f"No introspector available for model type: {type(model).__name__}", model
            )
        return introspector

    def list(self) -> List[str]:
        return [type(i).__name__ for i in self._introspectors]

    # Protocol surface, so a registry can stand in for a single introspector

    def can_handle(self, model: Any) -> bool:
        return self.find(model) is not None

    def model_info(self, model: Any) -> ModelInfo:
        return self.get(model).model_info(model)

    def find_formula(self, model: Any) -> Formula:
        return self.get(model).find_formula(model)

    def get_data(self, model: Any) -> pd.DataFrame:
        return self.get(model).get_data(model)

    def clean_parameters(self, model: Any) -> pd.DataFrame:
        return self.get(model).clean_parameters(model)

    def model_class(self, model: Any) -> List[str]:
        introspector = self.find(model)
        if introspector is None:
            return class_tags(model)
        return introspector.model_class(model)
