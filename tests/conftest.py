"""
Pytest fixtures for parameter annotation tests.
"""
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
import pytest
import statsmodels.api as sm
import statsmodels.formula.api as smf

from params_engine.introspection import IntrospectionError, class_tags
from params_engine.models import Formula, ModelInfo, ParameterTable


class FakeIntrospector:
    """Introspector answering from fixed values; ``None`` means the query fails"""

    def __init__(
        self,
        info: Optional[ModelInfo] = None,
        formula: Optional[str] = None,
        data: Optional[pd.DataFrame] = None,
        catalog: Optional[Dict[str, str]] = None,
        tags: Optional[List[str]] = None,
    ):
        self.info = info
        self.formula = formula
        self.data = data
        self.catalog = catalog
        self.tags = tags

    def can_handle(self, model: Any) -> bool:
        return True

    def model_info(self, model: Any) -> ModelInfo:
        if self.info is None:
            raise IntrospectionError("unsupported model", model)
        return self.info

    def find_formula(self, model: Any) -> Formula:
        if self.formula is None:
            raise IntrospectionError("no formula", model)
        return Formula(conditional=self.formula)

    def get_data(self, model: Any) -> pd.DataFrame:
        if self.data is None:
            raise IntrospectionError("no data", model)
        return self.data

    def clean_parameters(self, model: Any) -> pd.DataFrame:
        if self.catalog is None:
            raise IntrospectionError("no catalog", model)
        return pd.DataFrame({
            "Parameter": list(self.catalog.keys()),
            "Cleaned_Parameter": list(self.catalog.values()),
        })

    def model_class(self, model: Any) -> List[str]:
        return list(self.tags) if self.tags is not None else class_tags(model)


class BrokenIntrospector(FakeIntrospector):
    """Every query raises something other than IntrospectionError"""

    def model_info(self, model):
        raise RuntimeError("boom")

    def find_formula(self, model):
        raise RuntimeError("boom")

    def get_data(self, model):
        raise RuntimeError("boom")

    def clean_parameters(self, model):
        raise RuntimeError("boom")

    def model_class(self, model):
        raise RuntimeError("boom")


@pytest.fixture
def params_table():
    """Three-row table as produced by a regression extractor"""
    return ParameterTable(pd.DataFrame({
        "Parameter": ["Intercept", "C(group)[T.b]", "x"],
        "Coefficient": [0.5, -0.25, 1.0],
        "SE": [0.1, 0.2, 0.3],
        "CI_low": [0.3, -0.64, 0.41],
        "CI_high": [0.7, 0.14, 1.59],
        "p": [0.001, 0.2, 0.01],
    }))


@pytest.fixture
def regression_data():
    """Seeded data for small statsmodels fits"""
    rng = np.random.RandomState(42)
    n = 200
    x = rng.normal(size=n)
    group = rng.choice(["a", "b", "c"], size=n)
    shift = pd.Series(group).map({"a": 0.0, "b": 0.5, "c": -0.5}).to_numpy()
    eta = 0.3 + 0.8 * x + shift
    return pd.DataFrame({
        "x": x,
        "group": group,
        "y": eta + rng.normal(size=n),
        "binary": (rng.uniform(size=n) < 1 / (1 + np.exp(-eta))).astype(int),
        "count": rng.poisson(np.exp(0.2 + 0.3 * x)),
    })


@pytest.fixture
def ols_fit(regression_data):
    return smf.ols("y ~ x + C(group)", data=regression_data).fit()


@pytest.fixture
def logit_glm_fit(regression_data):
    return smf.glm("binary ~ x + C(group)", data=regression_data, family=sm.families.Binomial()).fit()


@pytest.fixture
def poisson_glm_fit(regression_data):
    return smf.glm("count ~ x", data=regression_data, family=sm.families.Poisson()).fit()


@pytest.fixture
def fake_introspector():
    """Factory for introspectors with fixed answers"""
    return FakeIntrospector


@pytest.fixture
def broken_introspector():
    return BrokenIntrospector()
