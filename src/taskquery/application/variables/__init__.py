"""Application variables – predicates, value conversion and the compiler."""
from taskquery.application.variables.compiler import VariablePredicateCompiler
from taskquery.application.variables.converter import (
    SUPPORTED_VARIABLE_TYPES,
    convert_variable_value,
    value_family,
)
from taskquery.application.variables.predicate import VariablePredicate

__all__ = [
    "SUPPORTED_VARIABLE_TYPES",
    "VariablePredicate",
    "VariablePredicateCompiler",
    "convert_variable_value",
    "value_family",
]
