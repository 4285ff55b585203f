"""Task entities as handed out by the task stores."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any

from taskquery.kernel.tasks.delegation import DelegationState
from taskquery.kernel.time import utc_now


@dataclasses.dataclass(eq=False)
class TaskInfo:
    """Fields shared by live and historic tasks.

    Equality is identity-based (by ``id``), like any other entity.
    """

    id: str
    name: str | None = None
    description: str | None = None
    priority: int = 50
    assignee: str | None = None
    owner: str | None = None
    delegation_state: DelegationState | None = None
    due_date: datetime | None = None
    create_time: datetime = dataclasses.field(default_factory=utc_now)
    category: str | None = None
    tenant_id: str | None = None
    form_key: str | None = None
    parent_task_id: str | None = None
    task_definition_key: str | None = None
    execution_id: str | None = None
    process_instance_id: str | None = None
    process_definition_id: str | None = None
    process_definition_key: str | None = None
    process_definition_name: str | None = None
    scope_id: str | None = None
    scope_type: str | None = None
    scope_definition_id: str | None = None
    candidate_users: frozenset[str] = frozenset()
    candidate_groups: frozenset[str] = frozenset()
    participants: frozenset[str] = frozenset()
    task_local_variables: dict[str, Any] = dataclasses.field(default_factory=dict)
    process_variables: dict[str, Any] = dataclasses.field(default_factory=dict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclasses.dataclass(eq=False)
class Task(TaskInfo):
    """A runtime task. ``suspended`` mirrors the owning process instance."""

    suspended: bool = False


@dataclasses.dataclass(eq=False)
class HistoricTask(TaskInfo):
    """Record of a task kept by the history store after it completed."""

    end_time: datetime | None = None
    duration_ms: int | None = None
    delete_reason: str | None = None


@dataclasses.dataclass(eq=False)
class ProcessInstance:
    """The process instance a task belongs to.

    ``parent_id`` points at the super process instance of a call activity.
    """

    id: str
    business_key: str | None = None
    parent_id: str | None = None
    process_definition_id: str | None = None
    variables: dict[str, Any] = dataclasses.field(default_factory=dict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProcessInstance):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


__all__ = ["HistoricTask", "ProcessInstance", "Task", "TaskInfo"]
