"""Application variables – VariablePredicateCompiler.

One compiler serves both variable namespaces: callers hand it a
:class:`~taskquery.application.query.VariableConstraintTarget` bound to the
task scope or the process scope.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable

from taskquery.application.query import VariableConstraintTarget, VariableOperation
from taskquery.application.variables.converter import convert_variable_value
from taskquery.application.variables.predicate import VariablePredicate
from taskquery.kernel.errors import InvalidArgumentError


class VariablePredicateCompiler:
    """Validate variable predicates and apply them to a constraint target."""

    def __init__(
        self,
        converter: Callable[[VariablePredicate], Any] = convert_variable_value,
    ) -> None:
        self._convert = converter

    def compile(
        self,
        target: VariableConstraintTarget,
        predicates: Iterable[VariablePredicate],
    ) -> None:
        """Apply every predicate to *target*, in order.

        Raises:
            InvalidArgumentError: on the first predicate that is malformed.
        """
        for predicate in predicates:
            self._apply(target, predicate)

    def _apply(self, target: VariableConstraintTarget, predicate: VariablePredicate) -> None:
        if predicate.operation is None:
            raise InvalidArgumentError(
                f"Variable operation is missing for variable: {predicate.name}",
                argument="operation",
            )
        if predicate.value is None:
            raise InvalidArgumentError(
                f"Variable value is missing for variable: {predicate.name}",
                argument="value",
            )

        operation = VariableOperation.from_wire(predicate.operation)
        value = self._convert(predicate)

        # A value-only query is only possible using equals
        if predicate.nameless and operation is not VariableOperation.EQUALS:
            raise InvalidArgumentError(
                "Value-only query (without a variable-name) is only supported "
                "when using 'equals' operation.",
                argument="name",
                value=operation.name,
            )

        match operation:
            case VariableOperation.EQUALS:
                if predicate.nameless:
                    target.value_equals(value)
                else:
                    target.apply(operation, predicate.name, value)
            case (
                VariableOperation.NOT_EQUALS
                | VariableOperation.GREATER_THAN
                | VariableOperation.GREATER_THAN_OR_EQUALS
                | VariableOperation.LESS_THAN
                | VariableOperation.LESS_THAN_OR_EQUALS
            ):
                target.apply(operation, predicate.name, value)
            case VariableOperation.EQUALS_IGNORE_CASE | VariableOperation.NOT_EQUALS_IGNORE_CASE:
                if not isinstance(value, str):
                    raise InvalidArgumentError(
                        "Only string variable values are supported when ignoring casing, "
                        f"but was: {type(value).__name__}",
                        argument=predicate.name,
                        value=value,
                    )
                target.apply(operation, predicate.name, value)
            case VariableOperation.LIKE | VariableOperation.LIKE_IGNORE_CASE:
                if not isinstance(value, str):
                    raise InvalidArgumentError(
                        "Only string variable values are supported using like, "
                        f"but was: {type(value).__name__}",
                        argument=predicate.name,
                        value=value,
                    )
                target.apply(operation, predicate.name, value)
            case _:
                raise InvalidArgumentError(
                    f"Unsupported variable query operation: {operation}",
                    argument="operation",
                    value=operation,
                )


__all__ = ["VariablePredicateCompiler"]
