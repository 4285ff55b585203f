"""Application lookup – single-entity resolution."""
from taskquery.application.lookup.lookup import TaskLookup

__all__ = ["TaskLookup"]
