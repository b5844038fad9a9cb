"""Option lookup across override bags, table metadata and defaults."""

from typing import Any, Dict, Mapping, Optional, Union

from params_engine.config import settings
from params_engine.models import FormatOptions, ParameterTable

FormatOverrides = Union[FormatOptions, Mapping[str, Any], None]


def resolve_option(table: ParameterTable, key: str, default: Any) -> Any:
    """
    Value for ``key``: the table's ``additional_arguments`` bag first, then its
    top-level metadata, then ``default``. Never raises.
    """
    args = table.attributes.additional_arguments or {}
    if key in args:
        out = args[key]
    else:
        out = table.attributes.get(key)

    if out is None:
        out = default
    return out


def _as_format_options(overrides: FormatOverrides) -> FormatOptions:
    if overrides is None:
        return FormatOptions()
    if isinstance(overrides, FormatOptions):
        return overrides
    return FormatOptions.model_validate(dict(overrides))


def resolve_format_options(overrides: FormatOverrides = None) -> Dict[str, Optional[Any]]:
    """digits/ci_digits/p_digits/s_value from the overrides, falling back to settings"""
    options = _as_format_options(overrides)
    return {
        "digits": options.digits if options.digits is not None else settings.digits,
        "ci_digits": options.ci_digits if options.ci_digits is not None else settings.ci_digits,
        "p_digits": options.p_digits if options.p_digits is not None else settings.p_digits,
        "s_value": options.s_value,
    }


def apply_format_options(table: ParameterTable, overrides: FormatOverrides = None) -> ParameterTable:
    for key, value in resolve_format_options(overrides).items():
        if key == "s_value" and value is None:
            continue
        table.attributes.set(key, value)
    return table
