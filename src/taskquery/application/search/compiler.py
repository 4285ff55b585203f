"""Application search – TaskFilterCompiler."""
from __future__ import annotations

from typing import Any, Callable

from taskquery.application.access import NoopTaskAccessInterceptor, TaskAccessInterceptor
from taskquery.application.query import TaskQuery
from taskquery.application.search.request import TaskQueryRequest
from taskquery.application.variables import VariablePredicateCompiler
from taskquery.kernel.tasks import resolve_delegation_state

# Request fields that map one-to-one onto a TaskQuery method taking the value.
_VALUE_FILTERS: tuple[tuple[str, Callable[[TaskQuery, Any], TaskQuery]], ...] = (
    ("name", TaskQuery.task_name),
    ("name_like", TaskQuery.task_name_like),
    ("description", TaskQuery.task_description),
    ("description_like", TaskQuery.task_description_like),
    ("priority", TaskQuery.task_priority),
    ("minimum_priority", TaskQuery.task_min_priority),
    ("maximum_priority", TaskQuery.task_max_priority),
    ("assignee", TaskQuery.task_assignee),
    ("assignee_like", TaskQuery.task_assignee_like),
    ("owner", TaskQuery.task_owner),
    ("owner_like", TaskQuery.task_owner_like),
    ("candidate_user", TaskQuery.task_candidate_user),
    ("involved_user", TaskQuery.task_involved_user),
    ("candidate_group", TaskQuery.task_candidate_group),
    ("candidate_group_in", TaskQuery.task_candidate_group_in),
    ("process_instance_id", TaskQuery.process_instance_id),
    ("process_instance_id_with_children", TaskQuery.process_instance_id_with_children),
    ("process_instance_business_key", TaskQuery.process_instance_business_key),
    ("execution_id", TaskQuery.execution_id),
    ("created_on", TaskQuery.task_created_on),
    ("created_before", TaskQuery.task_created_before),
    ("created_after", TaskQuery.task_created_after),
    ("task_definition_key", TaskQuery.task_definition_key),
    ("task_definition_key_like", TaskQuery.task_definition_key_like),
    ("due_date", TaskQuery.task_due_date),
    ("due_before", TaskQuery.task_due_before),
    ("due_after", TaskQuery.task_due_after),
    ("process_instance_business_key_like", TaskQuery.process_instance_business_key_like),
    ("process_definition_id", TaskQuery.process_definition_id),
    ("process_definition_key", TaskQuery.process_definition_key),
    ("process_definition_key_like", TaskQuery.process_definition_key_like),
    ("process_definition_name", TaskQuery.process_definition_name),
    ("process_definition_name_like", TaskQuery.process_definition_name_like),
    ("scope_definition_id", TaskQuery.scope_definition_id),
    ("scope_id", TaskQuery.scope_id),
    ("scope_type", TaskQuery.scope_type),
    ("tenant_id", TaskQuery.task_tenant_id),
    ("tenant_id_like", TaskQuery.task_tenant_id_like),
    ("candidate_or_assigned", TaskQuery.task_candidate_or_assigned),
    ("category", TaskQuery.task_category),
)

# Boolean request fields that only act when explicitly True.
_FLAG_FILTERS: tuple[tuple[str, Callable[[TaskQuery], TaskQuery]], ...] = (
    ("exclude_sub_tasks", TaskQuery.exclude_subtasks),
    ("without_due_date", TaskQuery.without_task_due_date),
    ("include_task_local_variables", TaskQuery.include_task_local_variables),
    ("include_process_variables", TaskQuery.include_process_variables),
    ("without_tenant_id", TaskQuery.task_without_tenant_id),
)


class TaskFilterCompiler:
    """Turn a :class:`TaskQueryRequest` into a constrained :class:`TaskQuery`.

    Absent fields never add a constraint. The access interceptor sees the
    finished query last and may narrow it further or refuse the request.
    """

    def __init__(
        self,
        interceptor: TaskAccessInterceptor | None = None,
        variable_compiler: VariablePredicateCompiler | None = None,
    ) -> None:
        self._interceptor = interceptor or NoopTaskAccessInterceptor()
        self._variables = variable_compiler or VariablePredicateCompiler()

    def compile(self, request: TaskQueryRequest) -> TaskQuery:
        query = TaskQuery()

        for field_name, apply in _VALUE_FILTERS:
            value = getattr(request, field_name)
            if value is not None:
                apply(query, value)

        # presence alone selects unassigned tasks
        if request.unassigned is not None:
            query.task_unassigned()

        if request.delegation_state is not None:
            state = resolve_delegation_state(request.delegation_state)
            if state is not None:
                query.task_delegation_state(state)

        if request.active is not None:
            if request.active:
                query.active()
            else:
                query.suspended()

        for field_name, apply_flag in _FLAG_FILTERS:
            if getattr(request, field_name) is True:
                apply_flag(query)

        if request.task_variables is not None:
            self._variables.compile(query.task_variables(), request.task_variables)
        if request.process_instance_variables is not None:
            self._variables.compile(query.process_variables(), request.process_instance_variables)

        self._interceptor.access_task_info_with_query(query, request)
        return query


__all__ = ["TaskFilterCompiler"]
