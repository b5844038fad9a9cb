"""Coefficient labels - what the primary estimate column means for a given model."""

from typing import Optional

from params_engine.models import ModelInfo

COEFFICIENT = "Coefficient"
ODDS_RATIO = "Odds Ratio"
RISK_RATIO = "Risk Ratio"
IRR = "IRR"
LOG_ODDS = "Log-Odds"
LOG_MEAN = "Log-Mean"

COEFFICIENT_LABELS = (COEFFICIENT, ODDS_RATIO, RISK_RATIO, IRR, LOG_ODDS, LOG_MEAN)


def resolve_coefficient_label(info: Optional[ModelInfo], exponentiate: bool) -> str:
    """
    Label for the coefficient column.

    Exponentiated:  logit-binomial/ordinal/multinomial/categorical -> Odds Ratio,
                    other binomial links -> Risk Ratio, count -> IRR.
    Log scale:      binomial/ordinal/multinomial/categorical -> Log-Odds,
                    count -> Log-Mean.
    Anything else, or an unknown family, stays "Coefficient".
    """
    if info is None or info.family == "unknown":
        return COEFFICIENT

    if exponentiate:
        if (info.is_binomial and info.is_logit) or info.is_ordinal or info.is_multinomial or info.is_categorical:
            return ODDS_RATIO
        if info.is_binomial and not info.is_logit:
            return RISK_RATIO
        if info.is_count:
            return IRR
        return COEFFICIENT

    if info.is_binomial or info.is_ordinal or info.is_multinomial or info.is_categorical:
        return LOG_ODDS
    if info.is_count:
        return LOG_MEAN
    return COEFFICIENT


def resolve_zi_coefficient_label(exponentiate: bool) -> str:
    """Zero-inflation component is always a logit model"""
    return ODDS_RATIO if exponentiate else LOG_ODDS
