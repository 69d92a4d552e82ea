# ABOUTME: SQL DDL statements for the ReadMe library database schema.
# ABOUTME: Defines the books table, schema versioning, and sequential migrations.

SCHEMA_V1 = """
-- Core book table; position holds the manual (read-me) order
CREATE TABLE books (
    id            INTEGER PRIMARY KEY AUTOINCREMENT,
    title         TEXT NOT NULL,
    author        TEXT NOT NULL,
    review        TEXT,
    image         BLOB,
    read_me       INTEGER NOT NULL DEFAULT 0 CHECK (read_me IN (0, 1)),
    position      INTEGER NOT NULL,
    date_added    TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now')),
    date_modified TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

-- Schema versioning for future migrations
CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""

SCHEMA_V2 = """
CREATE INDEX idx_books_position ON books(position);
CREATE INDEX idx_books_read_me ON books(read_me);

INSERT INTO schema_version (version) VALUES (2);
"""

# (version, sql) pairs applied in order to databases below that version.
MIGRATIONS: list[tuple[int, str]] = [
    (2, SCHEMA_V2),
]
