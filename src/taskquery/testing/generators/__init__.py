"""Testing generators – builders and Hypothesis strategies."""
from taskquery.testing.generators.builder import (
    Builder,
    DataclassBuilder,
    HistoricTaskBuilder,
    ProcessInstanceBuilder,
    TaskBuilder,
)
from taskquery.testing.generators.strategies import (
    identifier_strategy,
    operation_strategy,
    task_query_request_strategy,
    variable_predicate_strategy,
)

__all__ = [
    "Builder",
    "DataclassBuilder",
    "HistoricTaskBuilder",
    "ProcessInstanceBuilder",
    "TaskBuilder",
    "identifier_strategy",
    "operation_strategy",
    "task_query_request_strategy",
    "variable_predicate_strategy",
]
