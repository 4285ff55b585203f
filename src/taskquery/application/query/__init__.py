"""Application query – the TaskQuery model shared by compilers and stores."""
from taskquery.application.query.criteria import (
    Criterion,
    CriterionKind,
    VariableCriterion,
    VariableOperation,
    VariableScope,
)
from taskquery.application.query.ordering import Ordering, SortDirection, TaskQueryProperty
from taskquery.application.query.task_query import (
    TaskQuery,
    VariableConstraintTarget,
    VariableScopeQuery,
)

__all__ = [
    "Criterion",
    "CriterionKind",
    "Ordering",
    "SortDirection",
    "TaskQuery",
    "TaskQueryProperty",
    "VariableConstraintTarget",
    "VariableCriterion",
    "VariableOperation",
    "VariableScope",
    "VariableScopeQuery",
]

from taskquery.application.query.store import TaskStore  # noqa: E402

__all__ += ["TaskStore"]
