"""path_store — a permission-gated, path-addressable in-memory key/value store.

Values live in a tree of nested dicts and lists reached through colon paths
(``"user:profile:name"``).  Each top-level key carries a read/write policy,
either registered explicitly or inherited from the store's default.
"""

from path_store.config import StoreConfig
from path_store.exceptions import (
    AccessDeniedError,
    NotFoundError,
    PathConflictError,
    PathStoreError,
    PolicyConfigError,
)
from path_store.permission import Permission
from path_store.store import PathStore
from path_store.values import ABSENT, Lazy

__all__ = [
    "ABSENT",
    "AccessDeniedError",
    "Lazy",
    "NotFoundError",
    "PathConflictError",
    "PathStore",
    "PathStoreError",
    "Permission",
    "PolicyConfigError",
    "StoreConfig",
]
