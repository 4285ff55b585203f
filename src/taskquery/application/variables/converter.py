"""Application variables – explicit value types for variable predicates."""
from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any, Callable

from taskquery.application.variables.predicate import VariablePredicate
from taskquery.kernel.errors import InvalidArgumentError
from taskquery.kernel.time import to_utc

_SHORT_RANGE = range(-(2**15), 2**15)
_INT_RANGE = range(-(2**31), 2**31)
_LONG_RANGE = range(-(2**63), 2**63)


def _fail(predicate: VariablePredicate, expected: str) -> InvalidArgumentError:
    return InvalidArgumentError(
        f"Converter can only convert {expected}, but was: {type(predicate.value).__name__}",
        argument=predicate.name,
        value=predicate.value,
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _integral(limits: range, label: str) -> Callable[[VariablePredicate], int]:
    def convert(predicate: VariablePredicate) -> int:
        value = predicate.value
        if not _is_number(value):
            raise _fail(predicate, label)
        result = int(value)
        if result not in limits:
            raise InvalidArgumentError(
                f"Value {value} is out of range for type '{predicate.type}'",
                argument=predicate.name,
                value=value,
            )
        return result

    return convert


def _to_string(predicate: VariablePredicate) -> str:
    if not isinstance(predicate.value, str):
        raise _fail(predicate, "strings")
    return predicate.value


def _to_double(predicate: VariablePredicate) -> float:
    if not _is_number(predicate.value):
        raise _fail(predicate, "doubles")
    return float(predicate.value)


def _to_boolean(predicate: VariablePredicate) -> bool:
    if not isinstance(predicate.value, bool):
        raise _fail(predicate, "booleans")
    return predicate.value


def _to_date(predicate: VariablePredicate) -> datetime:
    """Parse an ISO-8601 date; values without an offset are UTC."""
    value = predicate.value
    if isinstance(value, datetime):
        return to_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if not isinstance(value, str):
        raise _fail(predicate, "dates")
    try:
        return to_utc(datetime.fromisoformat(value))
    except ValueError as exc:
        raise InvalidArgumentError(
            f"Value '{value}' is not a valid ISO-8601 date",
            argument=predicate.name,
            value=value,
            cause=exc,
        ) from exc


_CONVERTERS: dict[str, Callable[[VariablePredicate], Any]] = {
    "string": _to_string,
    "short": _integral(_SHORT_RANGE, "shorts"),
    "integer": _integral(_INT_RANGE, "integers"),
    "long": _integral(_LONG_RANGE, "longs"),
    "double": _to_double,
    "boolean": _to_boolean,
    "date": _to_date,
}

SUPPORTED_VARIABLE_TYPES: frozenset[str] = frozenset(_CONVERTERS)


def value_family(value: Any) -> str | None:
    """Group values the way a variable table stores them.

    ``int`` and ``float`` share the ``number`` family; ``bool`` does not.
    """
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, datetime):
        return "date"
    return None


def convert_variable_value(predicate: VariablePredicate) -> Any:
    """Return the value *predicate* should be matched with.

    Without a ``type`` the decoded value is used as-is.
    """
    if predicate.type is None:
        return predicate.value
    converter = _CONVERTERS.get(predicate.type)
    if converter is None:
        raise InvalidArgumentError(
            f"Variable type not supported: {predicate.type}",
            argument="type",
            value=predicate.type,
        )
    return converter(predicate)


__all__ = ["SUPPORTED_VARIABLE_TYPES", "convert_variable_value", "value_family"]
