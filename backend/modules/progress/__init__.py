"""
Progress module.

Pull and push of per-document reading positions.

Public API:
- IProgressStore: Interface of the external (user, document) record registry
- IProgressService / ProgressService: Pull and push operations
- ProgressRecord: The stored record
- DocumentFieldMissingError
"""

from .interfaces import IProgressStore, IProgressService
from .models import ProgressRecord, PushResponse, EmptyProgressResponse
from .service import ProgressService, now_timestamp
from .exceptions import DocumentFieldMissingError

__all__ = [
    "IProgressStore",
    "IProgressService",
    "ProgressRecord",
    "PushResponse",
    "EmptyProgressResponse",
    "ProgressService",
    "now_timestamp",
    "DocumentFieldMissingError",
]
