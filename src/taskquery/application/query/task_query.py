"""Application query – TaskQuery builder and the per-scope variable capability."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, Iterable, Protocol

from taskquery.application.query.criteria import (
    Criterion,
    CriterionKind,
    VariableCriterion,
    VariableOperation,
    VariableScope,
)
from taskquery.application.query.ordering import Ordering, SortDirection, TaskQueryProperty
from taskquery.kernel.tasks import DelegationState


@dataclasses.dataclass
class TaskQuery:
    """Single-use, fluent description of a task search.

    Every builder method appends one :class:`Criterion` and returns ``self``.
    Two queries built from the same input compare equal.
    """

    criteria: list[Criterion] = dataclasses.field(default_factory=list)
    variable_criteria: list[VariableCriterion] = dataclasses.field(default_factory=list)
    include_task_local_variables_flag: bool = False
    include_process_variables_flag: bool = False
    orderings: list[Ordering] = dataclasses.field(default_factory=list)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def is_unconstrained(self) -> bool:
        return not self.criteria and not self.variable_criteria

    def criteria_of(self, kind: CriterionKind) -> list[Criterion]:
        return [c for c in self.criteria if c.kind is kind]

    def _add(self, kind: CriterionKind, value: Any = None) -> "TaskQuery":
        self.criteria.append(Criterion(kind, value))
        return self

    # ------------------------------------------------------------------
    # Task attributes
    # ------------------------------------------------------------------

    def task_id(self, task_id: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_ID, task_id)

    def task_name(self, name: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_NAME, name)

    def task_name_like(self, pattern: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_NAME_LIKE, pattern)

    def task_description(self, description: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_DESCRIPTION, description)

    def task_description_like(self, pattern: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_DESCRIPTION_LIKE, pattern)

    def task_priority(self, priority: int) -> "TaskQuery":
        return self._add(CriterionKind.TASK_PRIORITY, priority)

    def task_min_priority(self, priority: int) -> "TaskQuery":
        return self._add(CriterionKind.TASK_MIN_PRIORITY, priority)

    def task_max_priority(self, priority: int) -> "TaskQuery":
        return self._add(CriterionKind.TASK_MAX_PRIORITY, priority)

    def task_assignee(self, assignee: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_ASSIGNEE, assignee)

    def task_assignee_like(self, pattern: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_ASSIGNEE_LIKE, pattern)

    def task_owner(self, owner: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_OWNER, owner)

    def task_owner_like(self, pattern: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_OWNER_LIKE, pattern)

    def task_unassigned(self) -> "TaskQuery":
        return self._add(CriterionKind.TASK_UNASSIGNED)

    def task_delegation_state(self, state: DelegationState) -> "TaskQuery":
        return self._add(CriterionKind.TASK_DELEGATION_STATE, state)

    def task_candidate_user(self, user_id: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_CANDIDATE_USER, user_id)

    def task_involved_user(self, user_id: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_INVOLVED_USER, user_id)

    def task_candidate_group(self, group_id: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_CANDIDATE_GROUP, group_id)

    def task_candidate_group_in(self, group_ids: Iterable[str]) -> "TaskQuery":
        return self._add(CriterionKind.TASK_CANDIDATE_GROUP_IN, frozenset(group_ids))

    def task_candidate_or_assigned(self, user_id: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_CANDIDATE_OR_ASSIGNED, user_id)

    def task_created_on(self, moment: datetime) -> "TaskQuery":
        return self._add(CriterionKind.TASK_CREATED_ON, moment)

    def task_created_before(self, moment: datetime) -> "TaskQuery":
        return self._add(CriterionKind.TASK_CREATED_BEFORE, moment)

    def task_created_after(self, moment: datetime) -> "TaskQuery":
        return self._add(CriterionKind.TASK_CREATED_AFTER, moment)

    def exclude_subtasks(self) -> "TaskQuery":
        return self._add(CriterionKind.EXCLUDE_SUBTASKS)

    def task_definition_key(self, key: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_DEFINITION_KEY, key)

    def task_definition_key_like(self, pattern: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_DEFINITION_KEY_LIKE, pattern)

    def task_due_date(self, moment: datetime) -> "TaskQuery":
        return self._add(CriterionKind.TASK_DUE_DATE, moment)

    def task_due_before(self, moment: datetime) -> "TaskQuery":
        return self._add(CriterionKind.TASK_DUE_BEFORE, moment)

    def task_due_after(self, moment: datetime) -> "TaskQuery":
        return self._add(CriterionKind.TASK_DUE_AFTER, moment)

    def without_task_due_date(self) -> "TaskQuery":
        return self._add(CriterionKind.WITHOUT_TASK_DUE_DATE)

    def active(self) -> "TaskQuery":
        return self._add(CriterionKind.ACTIVE)

    def suspended(self) -> "TaskQuery":
        return self._add(CriterionKind.SUSPENDED)

    def task_category(self, category: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_CATEGORY, category)

    def task_tenant_id(self, tenant_id: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_TENANT_ID, tenant_id)

    def task_tenant_id_like(self, pattern: str) -> "TaskQuery":
        return self._add(CriterionKind.TASK_TENANT_ID_LIKE, pattern)

    def task_without_tenant_id(self) -> "TaskQuery":
        return self._add(CriterionKind.TASK_WITHOUT_TENANT_ID)

    # ------------------------------------------------------------------
    # Process instance / definition / scope
    # ------------------------------------------------------------------

    def process_instance_id(self, process_instance_id: str) -> "TaskQuery":
        return self._add(CriterionKind.PROCESS_INSTANCE_ID, process_instance_id)

    def process_instance_id_with_children(self, process_instance_id: str) -> "TaskQuery":
        return self._add(CriterionKind.PROCESS_INSTANCE_ID_WITH_CHILDREN, process_instance_id)

    def process_instance_business_key(self, business_key: str) -> "TaskQuery":
        return self._add(CriterionKind.PROCESS_INSTANCE_BUSINESS_KEY, business_key)

    def process_instance_business_key_like(self, pattern: str) -> "TaskQuery":
        return self._add(CriterionKind.PROCESS_INSTANCE_BUSINESS_KEY_LIKE, pattern)

    def execution_id(self, execution_id: str) -> "TaskQuery":
        return self._add(CriterionKind.EXECUTION_ID, execution_id)

    def process_definition_id(self, definition_id: str) -> "TaskQuery":
        return self._add(CriterionKind.PROCESS_DEFINITION_ID, definition_id)

    def process_definition_key(self, key: str) -> "TaskQuery":
        return self._add(CriterionKind.PROCESS_DEFINITION_KEY, key)

    def process_definition_key_like(self, pattern: str) -> "TaskQuery":
        return self._add(CriterionKind.PROCESS_DEFINITION_KEY_LIKE, pattern)

    def process_definition_name(self, name: str) -> "TaskQuery":
        return self._add(CriterionKind.PROCESS_DEFINITION_NAME, name)

    def process_definition_name_like(self, pattern: str) -> "TaskQuery":
        return self._add(CriterionKind.PROCESS_DEFINITION_NAME_LIKE, pattern)

    def scope_definition_id(self, scope_definition_id: str) -> "TaskQuery":
        return self._add(CriterionKind.SCOPE_DEFINITION_ID, scope_definition_id)

    def scope_id(self, scope_id: str) -> "TaskQuery":
        return self._add(CriterionKind.SCOPE_ID, scope_id)

    def scope_type(self, scope_type: str) -> "TaskQuery":
        return self._add(CriterionKind.SCOPE_TYPE, scope_type)

    # ------------------------------------------------------------------
    # Variables, fetch options, ordering
    # ------------------------------------------------------------------

    def task_variables(self) -> "VariableScopeQuery":
        """Variable constraints against the task's local variables."""
        return VariableScopeQuery(self, VariableScope.TASK)

    def process_variables(self) -> "VariableScopeQuery":
        """Variable constraints against the owning process instance's variables."""
        return VariableScopeQuery(self, VariableScope.PROCESS)

    def include_task_local_variables(self) -> "TaskQuery":
        self.include_task_local_variables_flag = True
        return self

    def include_process_variables(self) -> "TaskQuery":
        self.include_process_variables_flag = True
        return self

    def order_by(
        self,
        prop: TaskQueryProperty,
        direction: SortDirection = SortDirection.ASC,
    ) -> "TaskQuery":
        """Order by *prop*; ordering by the same property again replaces its direction."""
        self.orderings = [o for o in self.orderings if o.property is not prop]
        self.orderings.append(Ordering(prop, direction))
        return self


class VariableConstraintTarget(Protocol):
    """Port: somewhere variable constraints of one scope can be applied."""

    def value_equals(self, value: Any) -> None: ...
    def apply(self, operation: VariableOperation, name: str, value: Any) -> None: ...


class VariableScopeQuery:
    """:class:`VariableConstraintTarget` bound to one scope of a :class:`TaskQuery`."""

    def __init__(self, query: TaskQuery, scope: VariableScope) -> None:
        self._query = query
        self.scope = scope

    def value_equals(self, value: Any) -> None:
        self._query.variable_criteria.append(
            VariableCriterion(self.scope, VariableOperation.EQUALS, None, value)
        )

    def apply(self, operation: VariableOperation, name: str, value: Any) -> None:
        self._query.variable_criteria.append(
            VariableCriterion(self.scope, operation, name, value)
        )


__all__ = ["TaskQuery", "VariableConstraintTarget", "VariableScopeQuery"]
