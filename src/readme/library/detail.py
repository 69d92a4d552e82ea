# ABOUTME: DetailView edits a single book: read-me flag, review text, and cover image.
# ABOUTME: Edits stay on a working copy until save() commits them to the store.

import copy
from collections.abc import Callable

from readme.library.store import BookStore
from readme.library.types import Book


class DetailView:
    """Editing session for one book.

    The store is only touched by ``save``; toggling the flag changes which
    section the book lands in on the next list refresh, not before.
    """

    def __init__(
        self,
        store: BookStore,
        book: Book,
        *,
        on_close: Callable[[Book], None] | None = None,
    ) -> None:
        self._store = store
        self._book = copy.copy(book)
        self._on_close = on_close

    @property
    def book(self) -> Book:
        """The working copy, including unsaved edits."""
        return self._book

    def toggle_read_me(self) -> bool:
        """Flip the read-me flag and return its new value."""
        self._book.read_me = not self._book.read_me
        return self._book.read_me

    def set_review(self, text: str | None) -> None:
        """Replace the review. Blank text clears it."""
        self._book.review = text if text and text.strip() else None

    def set_image(self, image: bytes | None) -> None:
        self._book.image = image

    def save(self) -> Book:
        """Commit every pending edit and close the view.

        Raises:
            BookNotFoundError: If the book was deleted while being edited.
        """
        self._store.update(self._book)
        saved = copy.copy(self._book)
        if self._on_close is not None:
            self._on_close(saved)
        return saved
