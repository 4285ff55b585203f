"""Application pagination – SortPropertyRegistry."""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from taskquery.application.query import TaskQueryProperty


class SortPropertyRegistry(Mapping[str, TaskQueryProperty]):
    """Read-only mapping from external sort keys to :class:`TaskQueryProperty`.

    Built once; safe to share between concurrent requests.
    """

    __slots__ = ("_properties",)

    def __init__(self, properties: Mapping[str, TaskQueryProperty]) -> None:
        self._properties = MappingProxyType(dict(properties))

    def __getitem__(self, key: str) -> TaskQueryProperty:
        return self._properties[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def resolve(self, key: str) -> TaskQueryProperty | None:
        return self._properties.get(key)

    def __repr__(self) -> str:
        return f"SortPropertyRegistry({sorted(self._properties)!r})"


TASK_SORT_PROPERTIES = SortPropertyRegistry({
    "id": TaskQueryProperty.TASK_ID,
    "name": TaskQueryProperty.NAME,
    "description": TaskQueryProperty.DESCRIPTION,
    "dueDate": TaskQueryProperty.DUE_DATE,
    "createTime": TaskQueryProperty.CREATE_TIME,
    "priority": TaskQueryProperty.PRIORITY,
    "executionId": TaskQueryProperty.EXECUTION_ID,
    "processInstanceId": TaskQueryProperty.PROCESS_INSTANCE_ID,
    "tenantId": TaskQueryProperty.TENANT_ID,
})

__all__ = ["TASK_SORT_PROPERTIES", "SortPropertyRegistry"]
