"""Testing fakes – in-memory doubles for the access port."""
from taskquery.testing.fakes.access import DenyingAccessInterceptor, RecordingAccessInterceptor

__all__ = ["DenyingAccessInterceptor", "RecordingAccessInterceptor"]
