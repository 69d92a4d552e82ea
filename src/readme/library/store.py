# ABOUTME: BookStore protocol and an in-memory implementation.
# ABOUTME: The store owns the canonical manual order of books; views only read and request changes.

import copy
import logging
from typing import Protocol, runtime_checkable

from readme.library.types import Book

logger = logging.getLogger(__name__)


class BookNotFoundError(ValueError):
    """Raised when an operation targets a book id the store does not hold."""

    def __init__(self, book_id: int) -> None:
        super().__init__(f"Book with id {book_id} not found")
        self.book_id = book_id


@runtime_checkable
class BookStore(Protocol):
    """Operations the library and detail views need from a book collection."""

    def list(self) -> list[Book]: ...

    def get(self, book_id: int) -> Book | None: ...

    def add(
        self,
        title: str,
        author: str,
        *,
        review: str | None = None,
        image: bytes | None = None,
        read_me: bool = False,
    ) -> Book: ...

    def update(self, book: Book) -> None: ...

    def delete(self, book: Book) -> None: ...

    def reorder(self, moved: Book, target: Book) -> None: ...


def validate_names(title: str, author: str) -> tuple[str, str]:
    """Strip title and author, rejecting blanks.

    Raises:
        ValueError: If either value is empty after stripping.
    """
    title = title.strip()
    author = author.strip()
    if not title:
        raise ValueError("Title must not be empty")
    if not author:
        raise ValueError("Author must not be empty")
    return title, author


def reordered(books: list[Book], moved: Book, target: Book) -> list[Book]:
    """Return a new ordering where ``moved`` sits where ``target`` was.

    Books between the two positions shift by one toward the vacated slot.

    Raises:
        BookNotFoundError: If either book is missing from ``books``.
    """
    ids = [book.id for book in books]
    for book in (moved, target):
        if book.id not in ids:
            raise BookNotFoundError(book.id)

    order = list(books)
    destination = ids.index(target.id)
    item = order.pop(ids.index(moved.id))
    order.insert(destination, item)
    return order


class MemoryBookStore:
    """BookStore kept in a Python list.

    Books handed out are copies, so callers never mutate the store's records
    without going through ``update``.
    """

    def __init__(self, books: list[Book] | None = None) -> None:
        self._books: list[Book] = [copy.copy(book) for book in books or []]
        self._next_id = max((book.id for book in self._books), default=0) + 1

    def list(self) -> list[Book]:
        """Return every book in manual order."""
        return [copy.copy(book) for book in self._books]

    def get(self, book_id: int) -> Book | None:
        index = self._index_of(book_id)
        return copy.copy(self._books[index]) if index is not None else None

    def add(
        self,
        title: str,
        author: str,
        *,
        review: str | None = None,
        image: bytes | None = None,
        read_me: bool = False,
    ) -> Book:
        """Append a new book to the end of the manual order.

        Raises:
            ValueError: If title or author is blank.
        """
        title, author = validate_names(title, author)
        book = Book(
            id=self._next_id,
            title=title,
            author=author,
            review=review,
            image=image,
            read_me=read_me,
        )
        self._next_id += 1
        self._books.append(book)
        logger.debug("Added book %d: %s", book.id, book.title)
        return copy.copy(book)

    def update(self, book: Book) -> None:
        """Replace the stored fields of ``book`` in place.

        Raises:
            BookNotFoundError: If the book is not in the store.
        """
        index = self._index_of(book.id)
        if index is None:
            raise BookNotFoundError(book.id)
        self._books[index] = copy.copy(book)
        logger.debug("Updated book %d", book.id)

    def delete(self, book: Book) -> None:
        """Remove ``book`` by identity. Unknown ids are ignored."""
        index = self._index_of(book.id)
        if index is None:
            logger.debug("Delete of book %d ignored: not in store", book.id)
            return
        del self._books[index]
        logger.debug("Deleted book %d", book.id)

    def reorder(self, moved: Book, target: Book) -> None:
        """Move ``moved`` into the position held by ``target``."""
        self._books = reordered(self._books, moved, target)
        logger.debug("Moved book %d to the position of book %d", moved.id, target.id)

    def _index_of(self, book_id: int) -> int | None:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None
