"""In-memory adapter – task store evaluating queries in Python."""
from taskquery.adapters.memory.matching import compare, like
from taskquery.adapters.memory.store import InMemoryTaskStore

__all__ = ["InMemoryTaskStore", "compare", "like"]
