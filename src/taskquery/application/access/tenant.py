"""Application access – TenantAccessInterceptor."""
from __future__ import annotations

from typing import TYPE_CHECKING

from taskquery.application.query import TaskQuery
from taskquery.kernel.errors import UnauthorizedError
from taskquery.kernel.security import Principal, SecurityContext
from taskquery.kernel.tasks import HistoricTask, Task, TaskInfo
from taskquery.observability.logging import get_logger

if TYPE_CHECKING:
    from taskquery.application.search.request import TaskQueryRequest

logger = get_logger(__name__)


class TenantAccessInterceptor:
    """Confine non-admin principals to the tasks of their own tenant.

    The principal is read from :class:`SecurityContext`; a missing principal
    is refused outright.
    """

    def __init__(self, admin_role: str = "admin") -> None:
        self._admin_role = admin_role

    def _principal(self) -> Principal:
        return SecurityContext.require()

    def _is_admin(self, principal: Principal) -> bool:
        return principal.has_role(self._admin_role)

    def access_task_info_with_query(self, query: TaskQuery, request: "TaskQueryRequest") -> None:  # noqa: ARG002
        principal = self._principal()
        if self._is_admin(principal):
            return
        if principal.tenant_id is None:
            query.task_without_tenant_id()
        else:
            query.task_tenant_id(principal.tenant_id)

    def access_task_info_by_id(self, task: Task) -> None:
        self._check(task)

    def access_historic_task_info_by_id(self, task: HistoricTask) -> None:
        self._check(task)

    def _check(self, task: TaskInfo) -> None:
        principal = self._principal()
        if self._is_admin(principal):
            return
        if (task.tenant_id or None) != principal.tenant_id:
            logger.info("task_access.denied", task_id=task.id, task_tenant=task.tenant_id)
            raise UnauthorizedError(
                f"Principal '{principal.subject}' may not access task '{task.id}'",
                subject=principal.subject,
                detail={"task_id": task.id},
            )


__all__ = ["TenantAccessInterceptor"]
