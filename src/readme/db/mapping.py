# ABOUTME: Converts between Book records and SQLite row dictionaries.
# ABOUTME: Stores the read-me flag as 0/1 and the cover image as a BLOB.

from dataclasses import dataclass
from typing import Any

from readme.library.types import Book


def book_to_row(book: Book) -> dict[str, Any]:
    """Convert a Book's mutable fields to a dict suitable for UPDATE.

    The id is left out; it is the row key, never a column to write.
    """
    return {
        "title": book.title,
        "author": book.author,
        "review": book.review,
        "image": book.image,
        "read_me": int(book.read_me),
    }


def row_to_book(row: Any) -> Book:
    """Convert a database row (dict-like) back to a Book."""
    image = row["image"]
    return Book(
        id=row["id"],
        title=row["title"],
        author=row["author"],
        review=row["review"],
        image=bytes(image) if image is not None else None,
        read_me=bool(row["read_me"]),
    )


@dataclass
class BookRecord:
    """A stored book plus database-only bookkeeping fields."""

    book: Book
    position: int
    date_added: str
    date_modified: str


def row_to_record(row: Any) -> BookRecord:
    """Convert a full database row to a BookRecord."""
    return BookRecord(
        book=row_to_book(row),
        position=row["position"],
        date_added=row["date_added"],
        date_modified=row["date_modified"],
    )
