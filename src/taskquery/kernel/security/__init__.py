"""Kernel security – Principal and the ambient SecurityContext."""
from taskquery.kernel.security.principal import Principal
from taskquery.kernel.security.security_context import SecurityContext

__all__ = ["Principal", "SecurityContext"]
