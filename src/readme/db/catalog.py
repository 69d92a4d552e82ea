# ABOUTME: SQLite-backed BookStore for the ReadMe library.
# ABOUTME: Add, query, update, delete, and reorder books in the books table.

import logging
import sqlite3

from readme.db.mapping import BookRecord, book_to_row, row_to_book, row_to_record
from readme.library.store import BookNotFoundError, reordered, validate_names
from readme.library.types import Book

logger = logging.getLogger(__name__)


class SqliteBookStore:
    """Wraps a sqlite3 connection and implements the BookStore protocol.

    Manual order lives in the ``position`` column; positions are dense
    (0..n-1) after any reorder and strictly increasing in insertion order
    otherwise.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def list(self) -> list[Book]:
        """Return all books in manual order."""
        cursor = self._conn.execute("SELECT * FROM books ORDER BY position, id")
        return [row_to_book(row) for row in cursor.fetchall()]

    def get(self, book_id: int) -> Book | None:
        """Retrieve a book by its row ID."""
        cursor = self._conn.execute("SELECT * FROM books WHERE id = ?", (book_id,))
        row = cursor.fetchone()
        return row_to_book(row) if row else None

    def get_record(self, book_id: int) -> BookRecord | None:
        """Retrieve a book together with its position and timestamps."""
        cursor = self._conn.execute("SELECT * FROM books WHERE id = ?", (book_id,))
        row = cursor.fetchone()
        return row_to_record(row) if row else None

    def add(
        self,
        title: str,
        author: str,
        *,
        review: str | None = None,
        image: bytes | None = None,
        read_me: bool = False,
    ) -> Book:
        """Add a book at the end of the manual order.

        Returns:
            The stored Book, carrying its new id.

        Raises:
            ValueError: If title or author is blank.
        """
        title, author = validate_names(title, author)
        cursor = self._conn.execute(
            "INSERT INTO books (title, author, review, image, read_me, position) "
            "VALUES (?, ?, ?, ?, ?, (SELECT COALESCE(MAX(position), -1) + 1 FROM books))",
            (title, author, review, image, int(read_me)),
        )
        self._conn.commit()

        book_id = cursor.lastrowid
        logger.debug("Added book %s: %s", book_id, title)
        return Book(
            id=book_id,  # type: ignore[arg-type]
            title=title,
            author=author,
            review=review,
            image=image,
            read_me=read_me,
        )

    def update(self, book: Book) -> None:
        """Write every mutable field of ``book`` back to its row.

        Raises:
            BookNotFoundError: If the book's id does not exist.
        """
        row = book_to_row(book)
        set_clause = ", ".join(f"{k} = ?" for k in row)
        set_clause += ", date_modified = strftime('%Y-%m-%dT%H:%M:%S', 'now')"
        values = [*row.values(), book.id]

        cursor = self._conn.execute(
            f"UPDATE books SET {set_clause} WHERE id = ?",
            values,
        )
        self._conn.commit()

        if cursor.rowcount == 0:
            raise BookNotFoundError(book.id)
        logger.debug("Updated book %d", book.id)

    def delete(self, book: Book) -> None:
        """Delete a book by id. Deleting a missing id does nothing."""
        cursor = self._conn.execute("DELETE FROM books WHERE id = ?", (book.id,))
        self._conn.commit()

        if cursor.rowcount == 0:
            logger.debug("Delete of book %d ignored: not in library", book.id)
        else:
            logger.debug("Deleted book %d", book.id)

    def reorder(self, moved: Book, target: Book) -> None:
        """Move ``moved`` into the position held by ``target``.

        Raises:
            BookNotFoundError: If either book is not in the library.
        """
        order = reordered(self.list(), moved, target)
        with self._conn:
            self._conn.executemany(
                "UPDATE books SET position = ? WHERE id = ?",
                [(position, book.id) for position, book in enumerate(order)],
            )
        logger.debug("Moved book %d to the position of book %d", moved.id, target.id)

    def count(self) -> int:
        cursor = self._conn.execute("SELECT COUNT(*) FROM books")
        return cursor.fetchone()[0]
