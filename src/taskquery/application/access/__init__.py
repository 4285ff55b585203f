"""Application access – pluggable access control for task queries and lookups."""
from taskquery.application.access.interceptor import NoopTaskAccessInterceptor, TaskAccessInterceptor
from taskquery.application.access.tenant import TenantAccessInterceptor

__all__ = ["NoopTaskAccessInterceptor", "TaskAccessInterceptor", "TenantAccessInterceptor"]
