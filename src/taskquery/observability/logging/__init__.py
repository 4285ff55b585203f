"""Observability – structured logging helpers."""
from taskquery.observability.logging.factory import JsonLoggerFactory
from taskquery.observability.logging.processors import PrincipalProcessor, get_logger

__all__ = ["JsonLoggerFactory", "PrincipalProcessor", "get_logger"]
