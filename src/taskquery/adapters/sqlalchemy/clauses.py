"""SQLAlchemy adapter – translate TaskQuery criteria into SQL expressions."""
from __future__ import annotations

import operator
from typing import Any, Callable

from sqlalchemy import ColumnElement, Select, and_, false, func, or_, select, true
from sqlalchemy.orm import aliased

from taskquery.adapters.sqlalchemy.models import (
    CANDIDATE,
    INTEGRAL_TYPES,
    IdentityLinkRow,
    ProcessInstanceRow,
    TaskColumnsMixin,
    VariableRow,
    to_epoch_millis,
)
from taskquery.application.query import (
    Criterion,
    CriterionKind,
    SortDirection,
    TaskQuery,
    VariableCriterion,
    VariableOperation,
    VariableScope,
)
from taskquery.application.variables import value_family
from taskquery.kernel.time import to_utc

Row = type[TaskColumnsMixin]
_Clause = Callable[[Any, Any], ColumnElement[bool]]


def _eq(column: str) -> _Clause:
    return lambda row, value: getattr(row, column) == value


def _at(column: str, compare: Callable[[Any, Any], ColumnElement[bool]]) -> _Clause:
    return lambda row, value: compare(getattr(row, column), to_utc(value))


def _like(column: str) -> _Clause:
    return lambda row, value: getattr(row, column).like(value)


def _link_exists(row: Any, *conditions: ColumnElement[bool]) -> ColumnElement[bool]:
    return select(IdentityLinkRow.id).where(IdentityLinkRow.task_id == row.id, *conditions).exists()


def _candidate_user(row: Any, user_id: str) -> ColumnElement[bool]:
    return and_(
        row.assignee.is_(None),
        _link_exists(row, IdentityLinkRow.type == CANDIDATE, IdentityLinkRow.user_id == user_id),
    )


def _candidate_groups(row: Any, group_ids: Any) -> ColumnElement[bool]:
    return and_(
        row.assignee.is_(None),
        _link_exists(row, IdentityLinkRow.type == CANDIDATE, IdentityLinkRow.group_id.in_(list(group_ids))),
    )


def _involved_user(row: Any, user_id: str) -> ColumnElement[bool]:
    return or_(
        row.assignee == user_id,
        row.owner == user_id,
        _link_exists(row, IdentityLinkRow.user_id == user_id),
    )


def _process_tree(row: Any, root_id: str) -> ColumnElement[bool]:
    tree = (
        select(ProcessInstanceRow.id)
        .where(ProcessInstanceRow.id == root_id)
        .cte("process_tree", recursive=True)
    )
    parent = tree.alias()
    child = aliased(ProcessInstanceRow)
    tree = tree.union_all(select(child.id).where(child.parent_id == parent.c.id))
    return or_(row.process_instance_id == root_id, row.process_instance_id.in_(select(tree.c.id)))


def _business_key(condition: Callable[[Any], ColumnElement[bool]]) -> _Clause:
    return lambda row, value: row.process_instance_id.in_(
        select(ProcessInstanceRow.id).where(condition(value))
    )


def _suspension(suspended: bool) -> _Clause:
    def clause(row: Any, value: Any) -> ColumnElement[bool]:  # noqa: ARG001
        column = getattr(row, "suspended", None)
        if column is None:
            return true() if not suspended else false()
        return column.is_(suspended)

    return clause


_CLAUSES: dict[CriterionKind, _Clause] = {
    CriterionKind.TASK_ID: _eq("id"),
    CriterionKind.TASK_NAME: _eq("name"),
    CriterionKind.TASK_NAME_LIKE: _like("name"),
    CriterionKind.TASK_DESCRIPTION: _eq("description"),
    CriterionKind.TASK_DESCRIPTION_LIKE: _like("description"),
    CriterionKind.TASK_PRIORITY: _eq("priority"),
    CriterionKind.TASK_MIN_PRIORITY: lambda row, v: row.priority >= v,
    CriterionKind.TASK_MAX_PRIORITY: lambda row, v: row.priority <= v,
    CriterionKind.TASK_ASSIGNEE: _eq("assignee"),
    CriterionKind.TASK_ASSIGNEE_LIKE: _like("assignee"),
    CriterionKind.TASK_OWNER: _eq("owner"),
    CriterionKind.TASK_OWNER_LIKE: _like("owner"),
    CriterionKind.TASK_UNASSIGNED: lambda row, v: row.assignee.is_(None),
    CriterionKind.TASK_DELEGATION_STATE: lambda row, v: row.delegation_state == v.value,
    CriterionKind.TASK_CANDIDATE_USER: _candidate_user,
    CriterionKind.TASK_INVOLVED_USER: _involved_user,
    CriterionKind.TASK_CANDIDATE_GROUP: lambda row, v: _candidate_groups(row, (v,)),
    CriterionKind.TASK_CANDIDATE_GROUP_IN: _candidate_groups,
    CriterionKind.TASK_CANDIDATE_OR_ASSIGNED: lambda row, v: or_(row.assignee == v, _candidate_user(row, v)),
    CriterionKind.PROCESS_INSTANCE_ID: _eq("process_instance_id"),
    CriterionKind.PROCESS_INSTANCE_ID_WITH_CHILDREN: _process_tree,
    CriterionKind.PROCESS_INSTANCE_BUSINESS_KEY: _business_key(lambda v: ProcessInstanceRow.business_key == v),
    CriterionKind.PROCESS_INSTANCE_BUSINESS_KEY_LIKE: _business_key(lambda v: ProcessInstanceRow.business_key.like(v)),
    CriterionKind.EXECUTION_ID: _eq("execution_id"),
    CriterionKind.TASK_CREATED_ON: _at("create_time", operator.eq),
    CriterionKind.TASK_CREATED_BEFORE: _at("create_time", operator.lt),
    CriterionKind.TASK_CREATED_AFTER: _at("create_time", operator.gt),
    CriterionKind.EXCLUDE_SUBTASKS: lambda row, v: row.parent_task_id.is_(None),
    CriterionKind.TASK_DEFINITION_KEY: _eq("task_definition_key"),
    CriterionKind.TASK_DEFINITION_KEY_LIKE: _like("task_definition_key"),
    CriterionKind.TASK_DUE_DATE: _at("due_date", operator.eq),
    CriterionKind.TASK_DUE_BEFORE: _at("due_date", operator.lt),
    CriterionKind.TASK_DUE_AFTER: _at("due_date", operator.gt),
    CriterionKind.WITHOUT_TASK_DUE_DATE: lambda row, v: row.due_date.is_(None),
    CriterionKind.ACTIVE: _suspension(False),
    CriterionKind.SUSPENDED: _suspension(True),
    CriterionKind.PROCESS_DEFINITION_ID: _eq("process_definition_id"),
    CriterionKind.PROCESS_DEFINITION_KEY: _eq("process_definition_key"),
    CriterionKind.PROCESS_DEFINITION_KEY_LIKE: _like("process_definition_key"),
    CriterionKind.PROCESS_DEFINITION_NAME: _eq("process_definition_name"),
    CriterionKind.PROCESS_DEFINITION_NAME_LIKE: _like("process_definition_name"),
    CriterionKind.SCOPE_DEFINITION_ID: _eq("scope_definition_id"),
    CriterionKind.SCOPE_ID: _eq("scope_id"),
    CriterionKind.SCOPE_TYPE: _eq("scope_type"),
    CriterionKind.TASK_TENANT_ID: _eq("tenant_id"),
    CriterionKind.TASK_TENANT_ID_LIKE: _like("tenant_id"),
    CriterionKind.TASK_WITHOUT_TENANT_ID: lambda row, v: or_(row.tenant_id.is_(None), row.tenant_id == ""),
    CriterionKind.TASK_CATEGORY: _eq("category"),
}

_COMPARATORS: dict[VariableOperation, Callable[[Any, Any], ColumnElement[bool]]] = {
    VariableOperation.EQUALS: operator.eq,
    VariableOperation.NOT_EQUALS: operator.ne,
    VariableOperation.GREATER_THAN: operator.gt,
    VariableOperation.GREATER_THAN_OR_EQUALS: operator.ge,
    VariableOperation.LESS_THAN: operator.lt,
    VariableOperation.LESS_THAN_OR_EQUALS: operator.le,
}


def _string_condition(operation: VariableOperation, value: str) -> ColumnElement[bool]:
    text = VariableRow.text_value
    match operation:
        case VariableOperation.EQUALS_IGNORE_CASE:
            condition = func.lower(text) == value.lower()
        case VariableOperation.NOT_EQUALS_IGNORE_CASE:
            condition = func.lower(text) != value.lower()
        case VariableOperation.LIKE:
            condition = text.like(value)
        case VariableOperation.LIKE_IGNORE_CASE:
            condition = func.lower(text).like(value.lower())
        case _:
            condition = _COMPARATORS[operation](text, value)
    return and_(VariableRow.type == "string", condition)


def value_condition(operation: VariableOperation, value: Any) -> ColumnElement[bool]:
    """Condition on :class:`VariableRow` value columns for ``operation value``."""
    if operation.requires_string:
        return _string_condition(operation, value)
    compare = _COMPARATORS[operation]
    match value_family(value):
        case "string":
            return _string_condition(operation, value)
        case "boolean":
            return and_(VariableRow.type == "boolean", compare(VariableRow.long_value, int(value)))
        case "number":
            return or_(
                and_(VariableRow.type.in_(INTEGRAL_TYPES), compare(VariableRow.long_value, value)),
                and_(VariableRow.type == "double", compare(VariableRow.double_value, value)),
            )
        case "date":
            return and_(VariableRow.type == "date", compare(VariableRow.long_value, to_epoch_millis(value)))
        case _:
            return false()


def variable_clause(row: Any, criterion: VariableCriterion) -> ColumnElement[bool]:
    if criterion.scope is VariableScope.TASK:
        conditions = [VariableRow.task_id == row.id]
    else:
        conditions = [
            VariableRow.task_id.is_(None),
            VariableRow.process_instance_id == row.process_instance_id,
        ]
    if criterion.name is not None:
        conditions.append(VariableRow.name == criterion.name)
    conditions.append(value_condition(criterion.operation, criterion.value))
    return select(VariableRow.id).where(*conditions).exists()


def criterion_clause(row: Any, criterion: Criterion) -> ColumnElement[bool]:
    return _CLAUSES[criterion.kind](row, criterion.value)


def where_clauses(row: Row, query: TaskQuery) -> list[ColumnElement[bool]]:
    clauses = [criterion_clause(row, c) for c in query.criteria]
    clauses.extend(variable_clause(row, vc) for vc in query.variable_criteria)
    return clauses


def ordered(row: Row, query: TaskQuery, statement: Select[Any]) -> Select[Any]:
    for ordering in query.orderings:
        column = getattr(row, ordering.property.value)
        statement = statement.order_by(
            column.desc() if ordering.direction is SortDirection.DESC else column.asc()
        )
    return statement


__all__ = ["criterion_clause", "ordered", "value_condition", "variable_clause", "where_clauses"]
