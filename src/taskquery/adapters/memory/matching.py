"""In-memory adapter – LIKE patterns and variable comparisons."""
from __future__ import annotations

import functools
import re
from typing import Any, Mapping

from taskquery.application.query import VariableCriterion, VariableOperation
from taskquery.application.variables import value_family
from taskquery.kernel.time import to_utc


@functools.lru_cache(maxsize=256)
def like_pattern(pattern: str, ignore_case: bool = False) -> re.Pattern[str]:
    """Compile an SQL ``LIKE`` pattern (``%`` and ``_`` wildcards) to a regex."""
    parts = []
    for char in pattern:
        if char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    flags = re.DOTALL | (re.IGNORECASE if ignore_case else 0)
    return re.compile("".join(parts), flags)


def like(value: str | None, pattern: str, ignore_case: bool = False) -> bool:
    if value is None:
        return False
    return like_pattern(pattern, ignore_case).fullmatch(value) is not None


def compare(actual: Any, operation: VariableOperation, expected: Any) -> bool:
    """Whether a stored variable value satisfies ``operation expected``."""
    if actual is None:
        return False
    if operation.requires_string:
        if not isinstance(actual, str):
            return False
        match operation:
            case VariableOperation.EQUALS_IGNORE_CASE:
                return actual.lower() == expected.lower()
            case VariableOperation.NOT_EQUALS_IGNORE_CASE:
                return actual.lower() != expected.lower()
            case VariableOperation.LIKE:
                return like(actual, expected)
            case _:
                return like(actual, expected, ignore_case=True)

    family = value_family(actual)
    if family is None or family != value_family(expected):
        return False
    actual, expected = to_utc(actual), to_utc(expected)
    match operation:
        case VariableOperation.EQUALS:
            return actual == expected
        case VariableOperation.NOT_EQUALS:
            return actual != expected
        case VariableOperation.GREATER_THAN:
            return actual > expected
        case VariableOperation.GREATER_THAN_OR_EQUALS:
            return actual >= expected
        case VariableOperation.LESS_THAN:
            return actual < expected
        case VariableOperation.LESS_THAN_OR_EQUALS:
            return actual <= expected
    return False


def variables_match(variables: Mapping[str, Any], criterion: VariableCriterion) -> bool:
    if criterion.name is None:
        return any(
            compare(value, VariableOperation.EQUALS, criterion.value)
            for value in variables.values()
        )
    if criterion.name not in variables:
        return False
    return compare(variables[criterion.name], criterion.operation, criterion.value)


__all__ = ["compare", "like", "like_pattern", "variables_match"]
