"""Kernel types."""
from taskquery.kernel.types.option import Nothing, Option, Some

__all__ = ["Nothing", "Option", "Some"]
