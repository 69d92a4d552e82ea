# ABOUTME: Public API for the ReadMe library database layer.
# ABOUTME: Exports connection management, the SQLite store, and record types.

from readme.db.catalog import SqliteBookStore
from readme.db.connection import DEFAULT_DB_PATH, open_library
from readme.db.mapping import BookRecord

__all__ = [
    "DEFAULT_DB_PATH",
    "BookRecord",
    "SqliteBookStore",
    "open_library",
]
