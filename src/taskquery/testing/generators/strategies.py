"""Testing generators – Hypothesis strategies for requests and predicates.

Requires the ``hypothesis`` package (``pip install "taskquery[test]"``).
"""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

from taskquery.application.query import VariableOperation
from taskquery.application.search import TaskQueryRequest
from taskquery.application.variables import VariablePredicate

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


_STRING_FIELDS: tuple[str, ...] = tuple(
    f.name
    for f in dataclasses.fields(TaskQueryRequest)
    if f.type == "str | None" and f.name not in ("sort", "order", "delegation_state")
)
_FLAG_FIELDS: tuple[str, ...] = tuple(
    f.name for f in dataclasses.fields(TaskQueryRequest) if f.type == "bool | None"
)


def identifier_strategy() -> "SearchStrategy[str]":
    """Short non-empty ids such as ``"a1"`` or ``"kermit"``."""
    st = _require_hypothesis()
    return st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789-", min_size=1, max_size=12)


def operation_strategy(*, wire: bool = False) -> "SearchStrategy[VariableOperation | str]":
    """Every variable operation, optionally in its camelCase wire form."""
    st = _require_hypothesis()
    operations = st.sampled_from(list(VariableOperation))
    return operations.map(lambda op: op.value) if wire else operations


def variable_predicate_strategy(*, named: bool = True) -> "SearchStrategy[VariablePredicate]":
    """Predicates that compile without error.

    String-only operations get string values; the rest get a string, an
    integer, a float or a boolean.
    """
    st = _require_hypothesis()
    scalar = st.one_of(
        st.text(max_size=10),
        st.integers(min_value=-(2**31), max_value=2**31 - 1),
        st.floats(allow_nan=False, allow_infinity=False),
        st.booleans(),
    )

    def for_operation(op: VariableOperation) -> Any:
        values = st.text(max_size=10) if op.requires_string else scalar
        names = identifier_strategy() if named else st.none()
        return st.builds(VariablePredicate, name=names, operation=st.just(op), value=values)

    if not named:
        return for_operation(VariableOperation.EQUALS)
    return st.sampled_from(list(VariableOperation)).flatmap(for_operation)


def task_query_request_strategy() -> "SearchStrategy[TaskQueryRequest]":
    """Requests with a random subset of text and boolean filters set."""
    st = _require_hypothesis()
    text_values = st.dictionaries(st.sampled_from(_STRING_FIELDS), identifier_strategy(), max_size=6)
    flag_values = st.dictionaries(st.sampled_from(_FLAG_FIELDS), st.booleans(), max_size=4)
    return st.builds(
        lambda texts, flags: TaskQueryRequest(**texts, **flags),
        text_values,
        flag_values,
    )


__all__ = [
    "identifier_strategy",
    "operation_strategy",
    "task_query_request_strategy",
    "variable_predicate_strategy",
]
