"""Application search – task search request and its compiler."""
from taskquery.application.search.compiler import TaskFilterCompiler
from taskquery.application.search.request import TaskQueryRequest

__all__ = ["TaskFilterCompiler", "TaskQueryRequest"]
