"""Application search – TaskQueryRequest."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Iterable

from taskquery.application.pagination import PaginateRequest
from taskquery.application.variables import VariablePredicate


@dataclasses.dataclass
class TaskQueryRequest(PaginateRequest):
    """Task search filters. Every field is optional; ``None`` means "no constraint".

    Booleans are tri-state: ``None`` (not sent), ``False`` and ``True`` are
    three different requests.
    """

    name: str | None = None
    name_like: str | None = None
    description: str | None = None
    description_like: str | None = None
    priority: int | None = None
    minimum_priority: int | None = None
    maximum_priority: int | None = None
    assignee: str | None = None
    assignee_like: str | None = None
    owner: str | None = None
    owner_like: str | None = None
    unassigned: bool | None = None
    delegation_state: str | None = None
    candidate_user: str | None = None
    involved_user: str | None = None
    candidate_group: str | None = None
    candidate_group_in: Iterable[str] | None = None
    process_instance_id: str | None = None
    process_instance_id_with_children: str | None = None
    process_instance_business_key: str | None = None
    process_instance_business_key_like: str | None = None
    execution_id: str | None = None
    created_on: datetime | None = None
    created_before: datetime | None = None
    created_after: datetime | None = None
    exclude_sub_tasks: bool | None = None
    task_definition_key: str | None = None
    task_definition_key_like: str | None = None
    due_date: datetime | None = None
    due_before: datetime | None = None
    due_after: datetime | None = None
    without_due_date: bool | None = None
    active: bool | None = None
    include_task_local_variables: bool | None = None
    include_process_variables: bool | None = None
    process_definition_id: str | None = None
    process_definition_key: str | None = None
    process_definition_key_like: str | None = None
    process_definition_name: str | None = None
    process_definition_name_like: str | None = None
    task_variables: list[VariablePredicate] | None = None
    process_instance_variables: list[VariablePredicate] | None = None
    scope_definition_id: str | None = None
    scope_id: str | None = None
    scope_type: str | None = None
    tenant_id: str | None = None
    tenant_id_like: str | None = None
    without_tenant_id: bool | None = None
    candidate_or_assigned: str | None = None
    category: str | None = None


__all__ = ["TaskQueryRequest"]
