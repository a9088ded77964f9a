"""
Storage module.

Concrete implementations of the credential and progress store contracts.

Public API:
- ISyncStore: Combined store interface
- MemoryStore: Process-local store for development and tests
- SupabaseStore: Persistent store on Supabase tables
- create_store: Build the store selected in settings
"""

from .interfaces import ISyncStore
from .memory import MemoryStore
from .supabase_store import SupabaseStore
from .factory import create_store

__all__ = [
    "ISyncStore",
    "MemoryStore",
    "SupabaseStore",
    "create_store",
]
