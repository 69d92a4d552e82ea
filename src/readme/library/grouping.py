# ABOUTME: Groups books into display sections and orders each section by a sort style.
# ABOUTME: Pure transform: the same input always yields the same Book objects in the same rows.

from collections.abc import Iterable

from readme.library.types import PLACEHOLDER_BOOK, Book, Section, SortStyle

GroupedBooks = list[tuple[Section, list[Book]]]


def sort_books(books: Iterable[Book], sort_style: SortStyle) -> list[Book]:
    """Order books by the given style.

    Title and author compare case-insensitively and keep collection order on
    ties. READ_ME leaves the collection (manual) order untouched.
    """
    if sort_style is SortStyle.TITLE:
        return sorted(books, key=lambda book: book.title.casefold())
    if sort_style is SortStyle.AUTHOR:
        return sorted(books, key=lambda book: book.author.casefold())
    return list(books)


def group_books(books: Iterable[Book], sort_style: SortStyle) -> GroupedBooks:
    """Partition books by their read-me flag and sort each bucket.

    Returns sections in display order: ADD_NEW (the placeholder row only),
    READ_ME, FINISHED. Empty buckets are kept so row addressing stays stable.
    """
    read_me: list[Book] = []
    finished: list[Book] = []
    for book in books:
        (read_me if book.read_me else finished).append(book)

    return [
        (Section.ADD_NEW, [PLACEHOLDER_BOOK]),
        (Section.READ_ME, sort_books(read_me, sort_style)),
        (Section.FINISHED, sort_books(finished, sort_style)),
    ]
