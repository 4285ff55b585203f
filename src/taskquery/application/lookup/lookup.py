"""Application lookup – resolve a single live or historic task by id."""
from __future__ import annotations

from taskquery.application.access import NoopTaskAccessInterceptor, TaskAccessInterceptor
from taskquery.application.query import TaskQuery, TaskStore
from taskquery.kernel.errors import InvalidArgumentError, NotFoundError
from taskquery.kernel.tasks import HistoricTask, Task
from taskquery.observability.logging import get_logger

logger = get_logger(__name__)


class TaskLookup:
    """Fetch one task by id, then let the access interceptor veto it."""

    def __init__(
        self,
        task_store: TaskStore[Task],
        historic_store: TaskStore[HistoricTask] | None = None,
        interceptor: TaskAccessInterceptor | None = None,
    ) -> None:
        self._tasks = task_store
        self._history = historic_store
        self._interceptor = interceptor or NoopTaskAccessInterceptor()

    async def get_task(self, task_id: str) -> Task:
        """Return the live task *task_id*.

        Raises:
            InvalidArgumentError: *task_id* is empty.
            NotFoundError: no such task.
            UnauthorizedError: the interceptor refused access.
        """
        _require_id(task_id)
        task = await self._tasks.single_result(TaskQuery().task_id(task_id))
        if task is None:
            logger.info("task_lookup.not_found", task_id=task_id, resource="task")
            raise NotFoundError("task", task_id)
        self._interceptor.access_task_info_by_id(task)
        return task

    async def get_historic_task(self, task_id: str) -> HistoricTask:
        """Return the historic record of task *task_id*."""
        _require_id(task_id)
        if self._history is None:
            raise NotFoundError("historic task", task_id)
        task = await self._history.single_result(TaskQuery().task_id(task_id))
        if task is None:
            logger.info("task_lookup.not_found", task_id=task_id, resource="historic task")
            raise NotFoundError("historic task", task_id)
        self._interceptor.access_historic_task_info_by_id(task)
        return task


def _require_id(task_id: str) -> None:
    if not task_id:
        raise InvalidArgumentError("Task id is required", argument="taskId", value=task_id)


__all__ = ["TaskLookup"]
