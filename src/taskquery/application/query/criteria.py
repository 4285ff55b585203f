"""Application query – Criterion, VariableCriterion and their vocabularies."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from taskquery.kernel.errors import InvalidArgumentError


class CriterionKind(str, Enum):
    """Every non-variable constraint a :class:`TaskQuery` can carry."""

    TASK_ID = "task_id"
    TASK_NAME = "task_name"
    TASK_NAME_LIKE = "task_name_like"
    TASK_DESCRIPTION = "task_description"
    TASK_DESCRIPTION_LIKE = "task_description_like"
    TASK_PRIORITY = "task_priority"
    TASK_MIN_PRIORITY = "task_min_priority"
    TASK_MAX_PRIORITY = "task_max_priority"
    TASK_ASSIGNEE = "task_assignee"
    TASK_ASSIGNEE_LIKE = "task_assignee_like"
    TASK_OWNER = "task_owner"
    TASK_OWNER_LIKE = "task_owner_like"
    TASK_UNASSIGNED = "task_unassigned"
    TASK_DELEGATION_STATE = "task_delegation_state"
    TASK_CANDIDATE_USER = "task_candidate_user"
    TASK_INVOLVED_USER = "task_involved_user"
    TASK_CANDIDATE_GROUP = "task_candidate_group"
    TASK_CANDIDATE_GROUP_IN = "task_candidate_group_in"
    TASK_CANDIDATE_OR_ASSIGNED = "task_candidate_or_assigned"
    PROCESS_INSTANCE_ID = "process_instance_id"
    PROCESS_INSTANCE_ID_WITH_CHILDREN = "process_instance_id_with_children"
    PROCESS_INSTANCE_BUSINESS_KEY = "process_instance_business_key"
    PROCESS_INSTANCE_BUSINESS_KEY_LIKE = "process_instance_business_key_like"
    EXECUTION_ID = "execution_id"
    TASK_CREATED_ON = "task_created_on"
    TASK_CREATED_BEFORE = "task_created_before"
    TASK_CREATED_AFTER = "task_created_after"
    EXCLUDE_SUBTASKS = "exclude_subtasks"
    TASK_DEFINITION_KEY = "task_definition_key"
    TASK_DEFINITION_KEY_LIKE = "task_definition_key_like"
    TASK_DUE_DATE = "task_due_date"
    TASK_DUE_BEFORE = "task_due_before"
    TASK_DUE_AFTER = "task_due_after"
    WITHOUT_TASK_DUE_DATE = "without_task_due_date"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    PROCESS_DEFINITION_ID = "process_definition_id"
    PROCESS_DEFINITION_KEY = "process_definition_key"
    PROCESS_DEFINITION_KEY_LIKE = "process_definition_key_like"
    PROCESS_DEFINITION_NAME = "process_definition_name"
    PROCESS_DEFINITION_NAME_LIKE = "process_definition_name_like"
    SCOPE_DEFINITION_ID = "scope_definition_id"
    SCOPE_ID = "scope_id"
    SCOPE_TYPE = "scope_type"
    TASK_TENANT_ID = "task_tenant_id"
    TASK_TENANT_ID_LIKE = "task_tenant_id_like"
    TASK_WITHOUT_TENANT_ID = "task_without_tenant_id"
    TASK_CATEGORY = "task_category"


class VariableScope(str, Enum):
    """Namespace a variable constraint targets."""

    TASK = "task"
    PROCESS = "process"


class VariableOperation(str, Enum):
    """Comparison applied by a variable constraint; values are the wire names."""

    EQUALS = "equals"
    EQUALS_IGNORE_CASE = "equalsIgnoreCase"
    NOT_EQUALS = "notEquals"
    NOT_EQUALS_IGNORE_CASE = "notEqualsIgnoreCase"
    GREATER_THAN = "greaterThan"
    GREATER_THAN_OR_EQUALS = "greaterThanOrEquals"
    LESS_THAN = "lessThan"
    LESS_THAN_OR_EQUALS = "lessThanOrEquals"
    LIKE = "like"
    LIKE_IGNORE_CASE = "likeIgnoreCase"

    @property
    def requires_string(self) -> bool:
        return self in _STRING_ONLY

    @property
    def ignores_case(self) -> bool:
        return self in (
            VariableOperation.EQUALS_IGNORE_CASE,
            VariableOperation.NOT_EQUALS_IGNORE_CASE,
            VariableOperation.LIKE_IGNORE_CASE,
        )

    @classmethod
    def from_wire(cls, operation: "VariableOperation | str") -> "VariableOperation":
        """Accept a member, its name (``GREATER_THAN``) or its wire name (``greaterThan``)."""
        if isinstance(operation, cls):
            return operation
        text = str(operation)
        if text in cls.__members__:
            return cls[text]
        try:
            return cls(text)
        except ValueError:
            raise InvalidArgumentError(
                f"Unsupported variable query operation: {operation}",
                argument="operation",
                value=operation,
            ) from None


_STRING_ONLY = frozenset({
    VariableOperation.EQUALS_IGNORE_CASE,
    VariableOperation.NOT_EQUALS_IGNORE_CASE,
    VariableOperation.LIKE,
    VariableOperation.LIKE_IGNORE_CASE,
})


@dataclasses.dataclass(frozen=True)
class Criterion:
    """A single constraint on a task attribute."""
    kind: CriterionKind
    value: Any = None


@dataclasses.dataclass(frozen=True)
class VariableCriterion:
    """A constraint on a task-local or process variable.

    ``name`` is ``None`` for a value-only equality match.
    """
    scope: VariableScope
    operation: VariableOperation
    name: str | None
    value: Any


__all__ = [
    "Criterion",
    "CriterionKind",
    "VariableCriterion",
    "VariableOperation",
    "VariableScope",
]
