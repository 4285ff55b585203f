"""Application tasks – the service facade wiring search, lookup and patching."""
from taskquery.application.tasks.service import TaskResourceService

__all__ = ["TaskResourceService"]
