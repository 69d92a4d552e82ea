# ABOUTME: Library package: book records, grouping, stores, and the list and detail views.
# ABOUTME: Everything here is independent of how the library is displayed.

from readme.library.detail import DetailView
from readme.library.grouping import GroupedBooks, group_books, sort_books
from readme.library.store import BookNotFoundError, BookStore, MemoryBookStore
from readme.library.types import PLACEHOLDER_BOOK, Book, Section, SortStyle
from readme.library.view import IndexPath, LibraryView, RenderFn

__all__ = [
    "PLACEHOLDER_BOOK",
    "Book",
    "BookNotFoundError",
    "BookStore",
    "DetailView",
    "GroupedBooks",
    "IndexPath",
    "LibraryView",
    "MemoryBookStore",
    "RenderFn",
    "Section",
    "SortStyle",
    "group_books",
    "sort_books",
]
