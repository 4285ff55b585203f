"""Application query – sortable task properties and sort direction."""
from __future__ import annotations

import dataclasses
from enum import Enum


class TaskQueryProperty(str, Enum):
    """Task attribute a query can be ordered by."""

    TASK_ID = "id"
    NAME = "name"
    DESCRIPTION = "description"
    DUE_DATE = "due_date"
    CREATE_TIME = "create_time"
    PRIORITY = "priority"
    EXECUTION_ID = "execution_id"
    PROCESS_INSTANCE_ID = "process_instance_id"
    TENANT_ID = "tenant_id"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class Ordering:
    """Single sort criterion."""
    property: TaskQueryProperty
    direction: SortDirection = SortDirection.ASC


__all__ = ["Ordering", "SortDirection", "TaskQueryProperty"]
