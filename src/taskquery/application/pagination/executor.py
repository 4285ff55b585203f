"""Application pagination – PaginatedExecutor."""
from __future__ import annotations

from typing import Any, Callable, Generic, Mapping, TypeVar

from taskquery.application.pagination.page_request import PaginateRequest
from taskquery.application.pagination.response import DataResponse
from taskquery.application.pagination.sort import TASK_SORT_PROPERTIES, SortPropertyRegistry
from taskquery.application.query import SortDirection, TaskQuery, TaskStore
from taskquery.config import TaskQuerySettings, UnknownSortPolicy
from taskquery.kernel.errors import InvalidArgumentError
from taskquery.observability.logging import get_logger

T = TypeVar("T")
R = TypeVar("R")

logger = get_logger(__name__)


class PaginatedExecutor(Generic[T]):
    """Order, page and run a compiled :class:`TaskQuery` against a store.

    Every parameter is validated before the store is touched, so a bad
    ``sort`` or ``order`` never leaves a half-executed query behind.
    """

    def __init__(
        self,
        settings: TaskQuerySettings | None = None,
        registry: SortPropertyRegistry = TASK_SORT_PROPERTIES,
    ) -> None:
        self._settings = settings or TaskQuerySettings()
        self._registry = registry

    def prepare(
        self,
        query: TaskQuery,
        request: PaginateRequest | None = None,
        params: Mapping[str, str] | None = None,
    ) -> PaginateRequest:
        """Resolve paging defaults, apply the ordering to *query* and return the
        effective parameters.

        Preparing the same query again replaces its ordering on that property.
        """
        settings = self._settings
        effective = (request or PaginateRequest()).with_params(params)

        start = max(effective.start if effective.start is not None else 0, 0)
        size = effective.size if effective.size is not None else settings.default_page_size
        size = max(size, 0)
        if settings.max_page_size and size > settings.max_page_size:
            size = settings.max_page_size
        sort = effective.sort or settings.default_sort
        order = effective.order or settings.default_order

        prop = self._registry.resolve(sort)
        if prop is None:
            if settings.sort_policy is UnknownSortPolicy.REJECT:
                raise InvalidArgumentError(
                    f"Value for param 'sort' is not valid, '{sort}' is not a valid property",
                    argument="sort",
                    value=sort,
                )
            fallback = settings.default_sort if settings.default_sort in self._registry else "id"
            logger.warning("task_query.sort_fallback", requested=sort, fallback=fallback)
            sort, order = fallback, SortDirection.ASC.value
            prop = self._registry[sort]

        try:
            direction = SortDirection(order)
        except ValueError:
            raise InvalidArgumentError(
                f"Value for param 'order' is not valid : '{order}', must be 'asc' or 'desc'",
                argument="order",
                value=order,
            ) from None

        query.order_by(prop, direction)
        return PaginateRequest(start=start, size=size, sort=sort, order=direction.value)

    async def execute(
        self,
        query: TaskQuery,
        store: TaskStore[T],
        request: PaginateRequest | None = None,
        mapper: Callable[[T], R] | None = None,
        params: Mapping[str, str] | None = None,
    ) -> DataResponse[Any]:
        effective = self.prepare(query, request, params)
        start, size = effective.start or 0, effective.size or 0

        entities = await store.list_page(query, start, size)
        total = await store.count(query)
        items = [mapper(entity) for entity in entities] if mapper else list(entities)

        logger.debug(
            "task_query.executed",
            start=start,
            size=len(items),
            total=total,
            sort=effective.sort,
            order=effective.order,
        )
        return DataResponse(
            data=items,
            total=total,
            start=start,
            size=len(items),
            sort=effective.sort or "",
            order=effective.order or SortDirection.ASC.value,
        )


__all__ = ["PaginatedExecutor"]
