"""Application pagination – sort registry, paging parameters and execution."""
from taskquery.application.pagination.executor import PaginatedExecutor
from taskquery.application.pagination.page_request import PaginateRequest
from taskquery.application.pagination.response import DataResponse
from taskquery.application.pagination.sort import TASK_SORT_PROPERTIES, SortPropertyRegistry

__all__ = [
    "DataResponse",
    "PaginateRequest",
    "PaginatedExecutor",
    "SortPropertyRegistry",
    "TASK_SORT_PROPERTIES",
]
