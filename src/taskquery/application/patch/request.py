"""Application patch – TaskRequest with per-field "was it sent" tracking."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, Mapping

from taskquery.kernel.errors import InvalidArgumentError
from taskquery.kernel.types import Nothing, Option, Some

# camelCase wire names accepted by ``TaskRequest.from_mapping``.
_WIRE_ALIASES: dict[str, str] = {
    "dueDate": "due_date",
    "parentTaskId": "parent_task_id",
    "tenantId": "tenant_id",
    "formKey": "form_key",
    "delegationState": "delegation_state",
}


@dataclasses.dataclass(frozen=True)
class TaskRequest:
    """Partial update of a task.

    ``Nothing()`` leaves a field untouched, ``Some(None)`` clears it and
    ``Some(value)`` sets it.
    """

    name: Option[str | None] = dataclasses.field(default_factory=Nothing)
    assignee: Option[str | None] = dataclasses.field(default_factory=Nothing)
    description: Option[str | None] = dataclasses.field(default_factory=Nothing)
    due_date: Option[datetime | None] = dataclasses.field(default_factory=Nothing)
    owner: Option[str | None] = dataclasses.field(default_factory=Nothing)
    parent_task_id: Option[str | None] = dataclasses.field(default_factory=Nothing)
    priority: Option[int] = dataclasses.field(default_factory=Nothing)
    category: Option[str | None] = dataclasses.field(default_factory=Nothing)
    tenant_id: Option[str | None] = dataclasses.field(default_factory=Nothing)
    form_key: Option[str | None] = dataclasses.field(default_factory=Nothing)
    delegation_state: Option[str | None] = dataclasses.field(default_factory=Nothing)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "TaskRequest":
        """Build a request from a decoded JSON object.

        Only keys present in *payload* are marked as set; an explicit
        ``null`` becomes ``Some(None)``.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        values: dict[str, Option[Any]] = {}
        for key, value in payload.items():
            field_name = _WIRE_ALIASES.get(key, key)
            if field_name not in known:
                raise InvalidArgumentError(f"Unknown task field: {key}", argument=key)
            values[field_name] = Some(value)
        return cls(**values)

    def is_set(self, field_name: str) -> bool:
        return getattr(self, field_name).is_some()

    def set_fields(self) -> list[str]:
        return [f.name for f in dataclasses.fields(self) if self.is_set(f.name)]


__all__ = ["TaskRequest"]
