"""
taskquery – task-search filter compilation and paginated task queries.

Import path convention::

    from taskquery.kernel.errors import InvalidArgumentError
    from taskquery.application.search import TaskFilterCompiler, TaskQueryRequest
    from taskquery.application.tasks import TaskResourceService
    from taskquery.adapters.memory import InMemoryTaskStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
