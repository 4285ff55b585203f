"""In-memory adapter – InMemoryTaskStore."""
from __future__ import annotations

import dataclasses
import operator
from typing import Any, Callable, Generic, Iterable, TypeVar

from taskquery.adapters.memory.matching import like, variables_match
from taskquery.application.query import (
    Criterion,
    CriterionKind,
    SortDirection,
    TaskQuery,
    VariableCriterion,
    VariableScope,
)
from taskquery.kernel.errors import DomainError
from taskquery.kernel.tasks import ProcessInstance, TaskInfo
from taskquery.kernel.time import to_utc

TTask = TypeVar("TTask", bound=TaskInfo)

_Matcher = Callable[["InMemoryTaskStore[Any]", TaskInfo, Any], bool]


def _attr(name: str) -> _Matcher:
    return lambda store, task, value: getattr(task, name) == value


def _attr_like(name: str) -> _Matcher:
    return lambda store, task, value: like(getattr(task, name), value)


def _at(name: str, compare: Callable[[Any, Any], bool]) -> _Matcher:
    """Compare a timestamp attribute in UTC; an unset timestamp never matches."""

    def matcher(store: "InMemoryTaskStore[Any]", task: TaskInfo, value: Any) -> bool:
        actual = getattr(task, name)
        return actual is not None and compare(to_utc(actual), to_utc(value))

    return matcher


def _is_candidate_user(task: TaskInfo, user_id: str) -> bool:
    return task.assignee is None and user_id in task.candidate_users


def _is_candidate_group(task: TaskInfo, groups: Iterable[str]) -> bool:
    return task.assignee is None and not task.candidate_groups.isdisjoint(groups)


def _is_involved(task: TaskInfo, user_id: str) -> bool:
    return (
        user_id in (task.assignee, task.owner)
        or user_id in task.participants
        or user_id in task.candidate_users
    )


def _business_key(store: "InMemoryTaskStore[Any]", task: TaskInfo) -> str | None:
    instance = store.process_instance(task.process_instance_id)
    return instance.business_key if instance else None


_MATCHERS: dict[CriterionKind, _Matcher] = {
    CriterionKind.TASK_ID: _attr("id"),
    CriterionKind.TASK_NAME: _attr("name"),
    CriterionKind.TASK_NAME_LIKE: _attr_like("name"),
    CriterionKind.TASK_DESCRIPTION: _attr("description"),
    CriterionKind.TASK_DESCRIPTION_LIKE: _attr_like("description"),
    CriterionKind.TASK_PRIORITY: _attr("priority"),
    CriterionKind.TASK_MIN_PRIORITY: lambda s, t, v: t.priority >= v,
    CriterionKind.TASK_MAX_PRIORITY: lambda s, t, v: t.priority <= v,
    CriterionKind.TASK_ASSIGNEE: _attr("assignee"),
    CriterionKind.TASK_ASSIGNEE_LIKE: _attr_like("assignee"),
    CriterionKind.TASK_OWNER: _attr("owner"),
    CriterionKind.TASK_OWNER_LIKE: _attr_like("owner"),
    CriterionKind.TASK_UNASSIGNED: lambda s, t, v: t.assignee is None,
    CriterionKind.TASK_DELEGATION_STATE: _attr("delegation_state"),
    CriterionKind.TASK_CANDIDATE_USER: lambda s, t, v: _is_candidate_user(t, v),
    CriterionKind.TASK_INVOLVED_USER: lambda s, t, v: _is_involved(t, v),
    CriterionKind.TASK_CANDIDATE_GROUP: lambda s, t, v: _is_candidate_group(t, (v,)),
    CriterionKind.TASK_CANDIDATE_GROUP_IN: lambda s, t, v: _is_candidate_group(t, v),
    CriterionKind.TASK_CANDIDATE_OR_ASSIGNED: lambda s, t, v: t.assignee == v or _is_candidate_user(t, v),
    CriterionKind.PROCESS_INSTANCE_ID: _attr("process_instance_id"),
    CriterionKind.PROCESS_INSTANCE_ID_WITH_CHILDREN: lambda s, t, v: t.process_instance_id in s.process_tree(v),
    CriterionKind.PROCESS_INSTANCE_BUSINESS_KEY: lambda s, t, v: _business_key(s, t) == v,
    CriterionKind.PROCESS_INSTANCE_BUSINESS_KEY_LIKE: lambda s, t, v: like(_business_key(s, t), v),
    CriterionKind.EXECUTION_ID: _attr("execution_id"),
    CriterionKind.TASK_CREATED_ON: _at("create_time", operator.eq),
    CriterionKind.TASK_CREATED_BEFORE: _at("create_time", operator.lt),
    CriterionKind.TASK_CREATED_AFTER: _at("create_time", operator.gt),
    CriterionKind.EXCLUDE_SUBTASKS: lambda s, t, v: t.parent_task_id is None,
    CriterionKind.TASK_DEFINITION_KEY: _attr("task_definition_key"),
    CriterionKind.TASK_DEFINITION_KEY_LIKE: _attr_like("task_definition_key"),
    CriterionKind.TASK_DUE_DATE: _at("due_date", operator.eq),
    CriterionKind.TASK_DUE_BEFORE: _at("due_date", operator.lt),
    CriterionKind.TASK_DUE_AFTER: _at("due_date", operator.gt),
    CriterionKind.WITHOUT_TASK_DUE_DATE: lambda s, t, v: t.due_date is None,
    CriterionKind.ACTIVE: lambda s, t, v: not getattr(t, "suspended", False),
    CriterionKind.SUSPENDED: lambda s, t, v: bool(getattr(t, "suspended", False)),
    CriterionKind.PROCESS_DEFINITION_ID: _attr("process_definition_id"),
    CriterionKind.PROCESS_DEFINITION_KEY: _attr("process_definition_key"),
    CriterionKind.PROCESS_DEFINITION_KEY_LIKE: _attr_like("process_definition_key"),
    CriterionKind.PROCESS_DEFINITION_NAME: _attr("process_definition_name"),
    CriterionKind.PROCESS_DEFINITION_NAME_LIKE: _attr_like("process_definition_name"),
    CriterionKind.SCOPE_DEFINITION_ID: _attr("scope_definition_id"),
    CriterionKind.SCOPE_ID: _attr("scope_id"),
    CriterionKind.SCOPE_TYPE: _attr("scope_type"),
    CriterionKind.TASK_TENANT_ID: _attr("tenant_id"),
    CriterionKind.TASK_TENANT_ID_LIKE: _attr_like("tenant_id"),
    CriterionKind.TASK_WITHOUT_TENANT_ID: lambda s, t, v: not t.tenant_id,
    CriterionKind.TASK_CATEGORY: _attr("category"),
}


def _sort_key(value: Any) -> tuple[int, Any]:
    # NULLs sort first ascending, last descending
    return (0, "") if value is None else (1, to_utc(value))


class InMemoryTaskStore(Generic[TTask]):
    """Task store over plain Python objects, for tests and small embeddings.

    Serves live tasks (``InMemoryTaskStore[Task]``) and historic tasks
    (``InMemoryTaskStore[HistoricTask]``) alike. Process instances are kept
    alongside to answer business-key, hierarchy and process-variable
    constraints.

    Task-local variables always travel with the task; process variables are
    copied onto returned tasks only when the query asks for them.
    """

    def __init__(
        self,
        tasks: Iterable[TTask] = (),
        process_instances: Iterable[ProcessInstance] = (),
    ) -> None:
        self._tasks: dict[str, TTask] = {task.id: task for task in tasks}
        self._process_instances: dict[str, ProcessInstance] = {pi.id: pi for pi in process_instances}

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    async def add(self, task: TTask) -> None:
        self._tasks[task.id] = task

    async def add_process_instance(self, instance: ProcessInstance) -> None:
        self._process_instances[instance.id] = instance

    def process_instance(self, instance_id: str | None) -> ProcessInstance | None:
        if instance_id is None:
            return None
        return self._process_instances.get(instance_id)

    def process_tree(self, root_id: str) -> set[str]:
        """Ids of *root_id* and every process instance below it."""
        tree = {root_id}
        frontier = [root_id]
        while frontier:
            parent = frontier.pop()
            for instance in self._process_instances.values():
                if instance.parent_id == parent and instance.id not in tree:
                    tree.add(instance.id)
                    frontier.append(instance.id)
        return tree

    # ------------------------------------------------------------------
    # TaskStore port
    # ------------------------------------------------------------------

    async def count(self, query: TaskQuery) -> int:
        return len(self._matching(query))

    async def list_page(self, query: TaskQuery, start: int, size: int) -> list[TTask]:
        matches = self._ordered(query, self._matching(query))
        return [self._with_includes(query, task) for task in matches[start: start + size]]

    async def single_result(self, query: TaskQuery) -> TTask | None:
        matches = self._matching(query)
        if len(matches) > 1:
            raise DomainError(f"Query return {len(matches)} results instead of max 1")
        return self._with_includes(query, matches[0]) if matches else None

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def _matching(self, query: TaskQuery) -> list[TTask]:
        return [
            task
            for task in self._tasks.values()
            if all(self._matches(task, c) for c in query.criteria)
            and all(self._matches_variable(task, vc) for vc in query.variable_criteria)
        ]

    def _matches(self, task: TTask, criterion: Criterion) -> bool:
        return _MATCHERS[criterion.kind](self, task, criterion.value)

    def _matches_variable(self, task: TTask, criterion: VariableCriterion) -> bool:
        if criterion.scope is VariableScope.TASK:
            return variables_match(task.task_local_variables, criterion)
        instance = self.process_instance(task.process_instance_id)
        return instance is not None and variables_match(instance.variables, criterion)

    def _ordered(self, query: TaskQuery, tasks: list[TTask]) -> list[TTask]:
        for ordering in reversed(query.orderings):
            tasks.sort(
                key=lambda t, attr=ordering.property.value: _sort_key(getattr(t, attr)),
                reverse=ordering.direction is SortDirection.DESC,
            )
        return tasks

    def _with_includes(self, query: TaskQuery, task: TTask) -> TTask:
        if not query.include_process_variables_flag:
            return task
        instance = self.process_instance(task.process_instance_id)
        variables = dict(instance.variables) if instance else {}
        return dataclasses.replace(task, process_variables=variables)


__all__ = ["InMemoryTaskStore"]
