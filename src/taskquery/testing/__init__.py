"""Testing support – fakes, fixtures and generators.

Import in your ``conftest.py``::

    pytest_plugins = ["taskquery.testing.fixtures"]
"""

from taskquery.testing.fakes import DenyingAccessInterceptor, RecordingAccessInterceptor
from taskquery.testing.generators import (
    Builder,
    DataclassBuilder,
    HistoricTaskBuilder,
    ProcessInstanceBuilder,
    TaskBuilder,
)

__all__ = [
    "Builder",
    "DataclassBuilder",
    "DenyingAccessInterceptor",
    "HistoricTaskBuilder",
    "ProcessInstanceBuilder",
    "RecordingAccessInterceptor",
    "TaskBuilder",
]
