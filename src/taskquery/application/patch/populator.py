"""Application patch – copy the set fields of a TaskRequest onto a task."""
from __future__ import annotations

from taskquery.application.patch.request import TaskRequest
from taskquery.kernel.tasks import Task, resolve_delegation_state

_PLAIN_FIELDS: tuple[str, ...] = (
    "name",
    "assignee",
    "description",
    "due_date",
    "owner",
    "parent_task_id",
    "priority",
    "category",
    "tenant_id",
    "form_key",
)


def populate_task_from_request(task: Task, request: TaskRequest) -> Task:
    """Overwrite the fields of *task* that *request* explicitly sets.

    Explicit ``None`` values are copied too. The delegation state is
    validated before anything is written, so a bad state leaves *task*
    unchanged. Returns *task* for chaining.
    """
    delegation = request.delegation_state
    state = resolve_delegation_state(delegation.unwrap()) if delegation.is_some() else None

    for field_name in _PLAIN_FIELDS:
        option = getattr(request, field_name)
        if option.is_some():
            setattr(task, field_name, option.unwrap())

    if delegation.is_some():
        task.delegation_state = state
    return task


__all__ = ["populate_task_from_request"]
