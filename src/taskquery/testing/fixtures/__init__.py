"""Testing fixtures – principal and security context.

Register in your ``conftest.py``::

    pytest_plugins = ["taskquery.testing.fixtures"]
"""
from __future__ import annotations

import pytest

from taskquery.kernel.security import Principal, SecurityContext


@pytest.fixture
def fake_principal() -> Principal:
    """Subject ``"test-user"`` in tenant ``"test-tenant"`` with no roles."""
    return Principal(subject="test-user", tenant_id="test-tenant")


@pytest.fixture
def security_context(fake_principal: Principal):
    """Make *fake_principal* current for the duration of the test."""
    token = SecurityContext.set_current(fake_principal)
    yield fake_principal
    SecurityContext.reset(token)


__all__ = ["fake_principal", "security_context"]
