"""
Parameter table and the metadata record that travels with it
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field


class ParameterTableError(ValueError):
    """Raised when a frame cannot serve as a parameter table"""
    pass


class FormatOptions(BaseModel):
    """Display options a caller may override at annotation time"""
    model_config = ConfigDict(extra="ignore")

    digits: Optional[int] = Field(None, ge=0)
    ci_digits: Optional[int] = Field(None, ge=0)
    p_digits: Optional[int] = Field(None, ge=0)
    s_value: Optional[Union[bool, float]] = None


class AnnotationMetadata(BaseModel):
    """
    Key/value metadata riding alongside a parameter table.

    Every key is optional; ``None`` means the key is absent. Keys not declared
    here are accepted and kept as extras.
    """
    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    # names
    pretty_names: Optional[Dict[str, str]] = None
    cleaned_parameters: Optional[Dict[str, str]] = None

    # extraction settings
    ci: Optional[float] = None
    bayes_ci_method: Optional[str] = None
    exponentiate: Optional[bool] = None
    bootstrap: Optional[bool] = None
    iterations: Optional[int] = None
    df_method: Optional[str] = None

    # model description
    ordinal_model: Optional[bool] = None
    model_class: Optional[List[str]] = None
    model_formula: Optional[str] = None
    coefficient_name: Optional[str] = None
    zi_coefficient_name: Optional[str] = None

    # meta-analysis only
    data: Optional[Any] = None
    study_weights: Optional[List[float]] = None

    # display
    digits: Optional[int] = None
    ci_digits: Optional[int] = None
    p_digits: Optional[int] = None
    s_value: Optional[Union[bool, float]] = None

    additional_arguments: Optional[Dict[str, Any]] = None

    def get(self, key: str, default: Any = None) -> Any:
        if key in type(self).model_fields:
            value = getattr(self, key)
        else:
            value = (self.__pydantic_extra__ or {}).get(key)
        return default if value is None else value

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def set(self, key: str, value: Any) -> None:
        setattr(self, key, value)


@dataclass(eq=False)
class ParameterTable:
    """A parameter frame (one row per estimate) paired with its metadata"""
    frame: pd.DataFrame
    attributes: AnnotationMetadata = field(default_factory=AnnotationMetadata)

    def __post_init__(self):
        if "Parameter" not in self.frame.columns:
            raise ParameterTableError("Parameter table requires a 'Parameter' column")
        if self.frame["Parameter"].duplicated().any():
            dupes = self.frame.loc[self.frame["Parameter"].duplicated(), "Parameter"].tolist()
            raise ParameterTableError(f"Duplicate parameter names: {dupes}")

    @classmethod
    def from_records(cls, records: List[Dict[str, Any]], **metadata) -> "ParameterTable":
        return cls(pd.DataFrame.from_records(records), AnnotationMetadata(**metadata))

    @property
    def parameters(self) -> List[str]:
        return self.frame["Parameter"].tolist()

    @property
    def columns(self) -> List[str]:
        return list(self.frame.columns)

    def copy(self) -> "ParameterTable":
        return ParameterTable(self.frame.copy(), self.attributes.model_copy(deep=True))

    def with_frame(self, frame: pd.DataFrame) -> "ParameterTable":
        """Copy of the metadata paired with a new frame"""
        return ParameterTable(frame, self.attributes.model_copy(deep=True))

    def __len__(self) -> int:
        return len(self.frame)
