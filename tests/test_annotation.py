"""Tests for the attribute annotation engine"""
import logging

import numpy as np
import pandas as pd
import pytest

from params_engine.annotation import add_anova_attributes, annotate
from params_engine.models import ModelInfo, ParameterTable


class DummyModel:
    pass


class MetaModel:
    """Stand-in for a meta-analysis fit exposing per-study variances"""
    def __init__(self, vi):
        self.vi = np.asarray(vi)


LOGIT_INFO = ModelInfo(family="binomial", link_function="logit", is_binomial=True, is_logit=True)


def test_sets_extraction_settings(params_table, fake_introspector):
    introspector = fake_introspector(info=LOGIT_INFO, formula="y ~ x", catalog={})

    result = annotate(
        params_table, DummyModel(), ci=0.89, exponentiate=True, bootstrap=True,
        iterations=500, df_method="wald", ci_method="hdi", introspector=introspector,
    )

    attrs = result.attributes
    assert result is params_table
    assert attrs.ci == 0.89
    assert attrs.exponentiate is True
    assert attrs.bootstrap is True
    assert attrs.iterations == 500
    assert attrs.df_method == "wald"
    assert attrs.bayes_ci_method == "hdi"
    assert attrs.model_formula == "y ~ x"
    assert attrs.coefficient_name == "Odds Ratio"
    assert attrs.zi_coefficient_name == "Odds Ratio"
    assert attrs.ordinal_model is False


def test_defaults(params_table, fake_introspector):
    result = annotate(params_table, DummyModel(), ci=0.95, introspector=fake_introspector(info=LOGIT_INFO))

    attrs = result.attributes
    assert (attrs.digits, attrs.ci_digits, attrs.p_digits) == (2, 2, 3)
    assert attrs.s_value is None
    assert attrs.iterations == 1000
    assert attrs.exponentiate is False
    assert attrs.bootstrap is False
    assert attrs.df_method is None
    assert attrs.bayes_ci_method is None
    assert attrs.coefficient_name == "Log-Odds"
    assert attrs.zi_coefficient_name == "Log-Odds"


def test_overrides_take_precedence(params_table, fake_introspector):
    result = annotate(
        params_table, DummyModel(), ci=0.95,
        overrides={"digits": 4, "p_digits": 5, "s_value": True, "unrelated": "ignored"},
        introspector=fake_introspector(info=LOGIT_INFO),
    )

    attrs = result.attributes
    assert attrs.digits == 4
    assert attrs.ci_digits == 2
    assert attrs.p_digits == 5
    assert attrs.s_value is True
    assert not attrs.has("unrelated")


def test_introspection_failure_does_not_escape(params_table, broken_introspector):
    result = annotate(params_table, DummyModel(), ci=0.95, exponentiate=True, introspector=broken_introspector)

    attrs = result.attributes
    assert attrs.coefficient_name == "Coefficient"
    assert attrs.model_formula is None
    assert attrs.pretty_names is None
    assert attrs.ordinal_model is False
    assert attrs.model_class == ["DummyModel"]
    assert attrs.digits == 2


def test_default_registry_handles_unknown_objects(params_table):
    result = annotate(params_table, DummyModel(), ci=0.95, exponentiate=True)

    assert result.attributes.coefficient_name == "Coefficient"
    assert result.attributes.model_formula is None
    assert result.attributes.model_class == ["DummyModel"]


def test_non_record_info_treated_as_unknown(params_table, fake_introspector):
    introspector = fake_introspector(info="binomial")
    introspector.model_info = lambda model: "binomial"

    result = annotate(params_table, DummyModel(), ci=0.95, exponentiate=True, introspector=introspector)

    assert result.attributes.coefficient_name == "Coefficient"


def test_mapping_info_is_accepted(params_table, fake_introspector):
    introspector = fake_introspector()
    introspector.model_info = lambda model: {"family": "poisson", "link_function": "log", "is_count": True}

    result = annotate(params_table, DummyModel(), ci=0.95, exponentiate=True, introspector=introspector)

    assert result.attributes.coefficient_name == "IRR"


@pytest.mark.parametrize("flag", ["is_ordinal", "is_multinomial"])
def test_ordinal_model_flag(params_table, fake_introspector, flag):
    info = ModelInfo(family="ordinal", link_function="logit", **{flag: True})
    result = annotate(params_table, DummyModel(), ci=0.95, introspector=fake_introspector(info=info))
    assert result.attributes.ordinal_model is True


def test_pretty_names_use_full_model_catalog(params_table, fake_introspector):
    catalog = {"Intercept": "(Intercept)", "C(group)[T.b]": "group [b]", "x": "x", "z": "z"}

    result = annotate(params_table, DummyModel(), ci=0.95, introspector=fake_introspector(catalog=catalog))

    assert result.attributes.pretty_names == catalog


def test_existing_pretty_names_kept(params_table, fake_introspector):
    params_table.attributes.pretty_names = {"x": "Dose"}

    annotate(params_table, DummyModel(), ci=0.95, introspector=fake_introspector(catalog={"x": "x"}))

    assert params_table.attributes.pretty_names == {"x": "Dose"}


def test_columns_and_rows_untouched(params_table, fake_introspector):
    before = params_table.frame.copy()

    annotate(params_table, DummyModel(), ci=0.95, exponentiate=True, introspector=fake_introspector(info=LOGIT_INFO))

    pd.testing.assert_frame_equal(params_table.frame, before)


def test_non_meta_model_has_no_weights(params_table, fake_introspector):
    data = pd.DataFrame({"y": [1, 2]})
    introspector = fake_introspector(info=LOGIT_INFO, data=data, tags=["glm", "lm"])

    result = annotate(params_table, DummyModel(), ci=0.95, introspector=introspector)

    assert result.attributes.study_weights is None
    assert result.attributes.data is None
    assert result.attributes.model_class == ["glm", "lm"]


def test_meta_weights_from_standard_errors(params_table, fake_introspector):
    data = pd.DataFrame({"study": ["a", "b", "c"]})
    introspector = fake_introspector(data=data, tags=["meta_random"])

    result = annotate(params_table, DummyModel(), ci=0.95, introspector=introspector)

    assert result.attributes.data is data
    np.testing.assert_allclose(result.attributes.study_weights, [100.0, 25.0, 1 / 0.09])


def test_meta_weights_from_model_variances(params_table, fake_introspector):
    introspector = fake_introspector(tags=["rma.uni", "rma"])

    result = annotate(params_table, MetaModel([0.01, 0.04, 0.09]), ci=0.95, introspector=introspector)

    # data lookup failed: left unset, weights still computed
    assert result.attributes.data is None
    np.testing.assert_allclose(result.attributes.study_weights, [100.0, 25.0, 1 / 0.09])


def test_meta_weight_sources_agree(params_table, fake_introspector):
    from_se = annotate(params_table.copy(), DummyModel(), ci=0.95, introspector=fake_introspector(tags=["meta_fixed"]))
    from_vi = annotate(
        params_table.copy(), MetaModel(params_table.frame["SE"] ** 2), ci=0.95,
        introspector=fake_introspector(tags=["rma"]),
    )
    np.testing.assert_allclose(from_se.attributes.study_weights, from_vi.attributes.study_weights)


def test_meta_without_se_column_warns(fake_introspector, caplog):
    table = ParameterTable(pd.DataFrame({"Parameter": ["a"], "Coefficient": [0.3]}))

    with caplog.at_level(logging.WARNING, logger="params_engine"):
        result = annotate(table, DummyModel(), ci=0.95, introspector=fake_introspector(tags=["meta_bma"]))

    assert result.attributes.study_weights is None
    assert "SE" in caplog.text


def test_anova_attributes(fake_introspector):
    table = ParameterTable(pd.DataFrame({"Parameter": ["group", "Residuals"], "F": [4.2, None]}))

    result = add_anova_attributes(
        table, DummyModel(), ci=0.9, overrides={"ci_digits": 1},
        introspector=fake_introspector(tags=["aov", "lm"]),
    )

    attrs = result.attributes
    assert attrs.ci == 0.9
    assert attrs.model_class == ["aov", "lm"]
    assert (attrs.digits, attrs.ci_digits, attrs.p_digits) == (2, 1, 3)
    assert attrs.coefficient_name is None


def test_non_numeric_study_variances_skipped(params_table, fake_introspector, caplog):
    with caplog.at_level(logging.WARNING, logger="params_engine"):
        result = annotate(params_table, MetaModel(["n/a", "n/a", "n/a"]), ci=0.95,
                          introspector=fake_introspector(tags=["rma"]))

    assert result.attributes.study_weights is None
    assert result.attributes.coefficient_name == "Coefficient"
    assert "not numeric" in caplog.text


def test_non_numeric_se_skipped(fake_introspector, caplog):
    table = ParameterTable(pd.DataFrame({"Parameter": ["a", "b"], "SE": ["x", "0.2"]}))

    with caplog.at_level(logging.WARNING, logger="params_engine"):
        result = annotate(table, DummyModel(), ci=0.95, introspector=fake_introspector(tags=["meta_fixed"]))

    assert result.attributes.study_weights is None
    assert result.attributes.digits == 2
    assert "SE" in caplog.text


def test_ci_defaults_to_settings(params_table, fake_introspector):
    result = annotate(params_table, DummyModel(), introspector=fake_introspector())
    assert result.attributes.ci == 0.95
