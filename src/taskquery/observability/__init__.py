"""Observability – structlog configuration and logger access."""
from taskquery.observability.logging import JsonLoggerFactory, PrincipalProcessor, get_logger

__all__ = ["JsonLoggerFactory", "PrincipalProcessor", "get_logger"]
