"""Application – task search use cases (framework-agnostic)."""

from taskquery.application.access import NoopTaskAccessInterceptor, TaskAccessInterceptor
from taskquery.application.lookup import TaskLookup
from taskquery.application.pagination import DataResponse, PaginatedExecutor, PaginateRequest
from taskquery.application.patch import TaskRequest, populate_task_from_request
from taskquery.application.query import TaskQuery, TaskStore
from taskquery.application.search import TaskFilterCompiler, TaskQueryRequest
from taskquery.application.tasks import TaskResourceService
from taskquery.application.variables import VariablePredicate, VariablePredicateCompiler

__all__ = [
    "DataResponse",
    "NoopTaskAccessInterceptor",
    "PaginateRequest",
    "PaginatedExecutor",
    "TaskAccessInterceptor",
    "TaskFilterCompiler",
    "TaskLookup",
    "TaskQuery",
    "TaskQueryRequest",
    "TaskRequest",
    "TaskResourceService",
    "TaskStore",
    "VariablePredicate",
    "VariablePredicateCompiler",
    "populate_task_from_request",
]
