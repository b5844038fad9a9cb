"""
Human-readable labels for patsy-style parameter names
"""
import re
from typing import List

INTERCEPT_NAMES = {"Intercept", "const", "(Intercept)"}

_LEVEL = re.compile(r"^(?P<term>.+)\[(?:[TS]\.)?(?P<level>[^\]]+)\]$")
_CATEGORICAL = re.compile(r"^C\((?P<var>[^,()]+)(?:,.*)?\)$")
_FUNCTION = re.compile(r"^(?:[A-Za-z_][\w.]*\.)?(?P<fn>[A-Za-z_]\w*)\((?P<arg>.*)\)$")


def _split_interaction(name: str) -> List[str]:
    """Split on ':' outside of brackets"""
    parts, current, depth = [], [], 0
    for ch in name:
        if ch in "([":
            depth += 1
        elif ch in ")]":
            depth -= 1
        if ch == ":" and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


def _clean_variable(variable: str) -> str:
    variable = variable.strip()

    categorical = _CATEGORICAL.match(variable)
    if categorical:
        return categorical.group("var").strip()

    function = _FUNCTION.match(variable)
    if function:
        arg = function.group("arg")
        if function.group("fn") == "I":
            return re.sub(r"\s*\*\*\s*", "^", arg).strip()
        return _clean_variable(arg.split(",")[0])

    return variable


def _clean_term(term: str) -> str:
    level = _LEVEL.match(term.strip())
    if level:
        return f"{_clean_variable(level.group('term'))} [{level.group('level')}]"
    return _clean_variable(term)


def clean_name(raw: str) -> str:
    """
    Turn a raw parameter name into a display label.

    Examples:
        'Intercept'              -> '(Intercept)'
        'C(group)[T.b]'          -> 'group [b]'
        'np.log(dose)'           -> 'dose'
        'I(x ** 2)'              -> 'x^2'
        'C(group)[T.b]:x'        -> 'group [b] * x'
    """
    if raw in INTERCEPT_NAMES:
        return "(Intercept)"
    return " * ".join(_clean_term(part) for part in _split_interaction(raw))
