"""Application patch – partial task updates."""
from taskquery.application.patch.populator import populate_task_from_request
from taskquery.application.patch.request import TaskRequest

__all__ = ["TaskRequest", "populate_task_from_request"]
