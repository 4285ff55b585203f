"""Application access – TaskAccessInterceptor port and its no-op default."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from taskquery.application.query import TaskQuery
from taskquery.kernel.tasks import HistoricTask, Task

if TYPE_CHECKING:
    from taskquery.application.search.request import TaskQueryRequest


@runtime_checkable
class TaskAccessInterceptor(Protocol):
    """Port: last word on which tasks a caller may see.

    Implementations raise :class:`~taskquery.kernel.errors.UnauthorizedError`
    to veto. The query hook may also add constraints; the by-id hooks must
    leave the entity untouched.
    """

    def access_task_info_with_query(self, query: TaskQuery, request: "TaskQueryRequest") -> None: ...
    def access_task_info_by_id(self, task: Task) -> None: ...
    def access_historic_task_info_by_id(self, task: HistoricTask) -> None: ...


class NoopTaskAccessInterceptor:
    """Allows everything."""

    def access_task_info_with_query(self, query: TaskQuery, request: "TaskQueryRequest") -> None:
        return None

    def access_task_info_by_id(self, task: Task) -> None:
        return None

    def access_historic_task_info_by_id(self, task: HistoricTask) -> None:
        return None


__all__ = ["NoopTaskAccessInterceptor", "TaskAccessInterceptor"]
