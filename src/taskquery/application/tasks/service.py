"""Application tasks – TaskResourceService facade."""
from __future__ import annotations

from typing import Any, Callable, Mapping

from taskquery.application.access import NoopTaskAccessInterceptor, TaskAccessInterceptor
from taskquery.application.lookup import TaskLookup
from taskquery.application.pagination import (
    TASK_SORT_PROPERTIES,
    DataResponse,
    PaginatedExecutor,
    SortPropertyRegistry,
)
from taskquery.application.patch import TaskRequest, populate_task_from_request
from taskquery.application.query import TaskStore
from taskquery.application.search import TaskFilterCompiler, TaskQueryRequest
from taskquery.config import TaskQuerySettings
from taskquery.kernel.tasks import HistoricTask, Task
from taskquery.observability.logging import get_logger

logger = get_logger(__name__)


def _identity(task: Task) -> Any:
    return task


class TaskResourceService:
    """Search, fetch and patch tasks on behalf of a transport layer.

    Parameters
    ----------
    task_store:
        Store holding the live tasks.
    historic_store:
        Store holding completed tasks; optional.
    response_mapper:
        Turns a task into the item placed in :class:`DataResponse.data`.
        Defaults to returning the task itself.
    interceptor:
        Access control shared by search and lookup.
    """

    def __init__(
        self,
        task_store: TaskStore[Task],
        historic_store: TaskStore[HistoricTask] | None = None,
        *,
        settings: TaskQuerySettings | None = None,
        interceptor: TaskAccessInterceptor | None = None,
        response_mapper: Callable[[Task], Any] = _identity,
        registry: SortPropertyRegistry = TASK_SORT_PROPERTIES,
    ) -> None:
        interceptor = interceptor or NoopTaskAccessInterceptor()
        self._task_store = task_store
        self._compiler = TaskFilterCompiler(interceptor)
        self._executor: PaginatedExecutor[Task] = PaginatedExecutor(settings, registry)
        self._lookup = TaskLookup(task_store, historic_store, interceptor)
        self._mapper = response_mapper

    async def query_tasks(
        self,
        request: TaskQueryRequest,
        params: Mapping[str, str] | None = None,
    ) -> DataResponse[Any]:
        """Compile *request* and return the requested page of mapped tasks."""
        query = self._compiler.compile(request)
        response = await self._executor.execute(query, self._task_store, request, self._mapper, params)
        logger.info("task_query.completed", total=response.total, returned=response.size)
        return response

    async def get_task(self, task_id: str) -> Task:
        return await self._lookup.get_task(task_id)

    async def get_historic_task(self, task_id: str) -> HistoricTask:
        return await self._lookup.get_historic_task(task_id)

    async def update_task(self, task_id: str, patch: TaskRequest) -> Task:
        """Resolve *task_id* and apply *patch* to it.

        Persisting the modified task is up to the store owner.
        """
        task = await self._lookup.get_task(task_id)
        populate_task_from_request(task, patch)
        logger.info("task.patched", task_id=task_id, fields=patch.set_fields())
        return task


__all__ = ["TaskResourceService"]
