"""Testing fakes – access interceptors that record or refuse."""
from __future__ import annotations

from typing import Any

from taskquery.application.query import TaskQuery
from taskquery.kernel.errors import UnauthorizedError
from taskquery.kernel.tasks import HistoricTask, Task


class RecordingAccessInterceptor:
    """Allows everything and remembers what it was shown::

        interceptor = RecordingAccessInterceptor()
        service = TaskResourceService(store, interceptor=interceptor)
        ...
        assert interceptor.queries[0][0].criteria_of(CriterionKind.TASK_NAME)
    """

    def __init__(self) -> None:
        self.queries: list[tuple[TaskQuery, Any]] = []
        self.tasks: list[Task] = []
        self.historic_tasks: list[HistoricTask] = []

    def access_task_info_with_query(self, query: TaskQuery, request: Any) -> None:
        self.queries.append((query, request))

    def access_task_info_by_id(self, task: Task) -> None:
        self.tasks.append(task)

    def access_historic_task_info_by_id(self, task: HistoricTask) -> None:
        self.historic_tasks.append(task)

    @property
    def calls(self) -> int:
        return len(self.queries) + len(self.tasks) + len(self.historic_tasks)


class DenyingAccessInterceptor:
    """Refuses every hook with :class:`UnauthorizedError`."""

    def __init__(self, message: str = "Access denied") -> None:
        self._message = message

    def access_task_info_with_query(self, query: TaskQuery, request: Any) -> None:
        raise UnauthorizedError(self._message)

    def access_task_info_by_id(self, task: Task) -> None:
        raise UnauthorizedError(self._message, subject=task.id)

    def access_historic_task_info_by_id(self, task: HistoricTask) -> None:
        raise UnauthorizedError(self._message, subject=task.id)


__all__ = ["DenyingAccessInterceptor", "RecordingAccessInterceptor"]
