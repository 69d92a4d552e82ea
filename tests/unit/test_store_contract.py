# ABOUTME: Unit tests run against every BookStore implementation.
# ABOUTME: Validates add, get, update, delete, and reorder semantics for memory and SQLite stores.

from pathlib import Path

import pytest

from readme.db.catalog import SqliteBookStore
from readme.db.connection import open_library
from readme.library.store import BookNotFoundError, BookStore, MemoryBookStore, reordered
from readme.library.types import Book


@pytest.fixture(params=["memory", "sqlite"])
def store(request: pytest.FixtureRequest, tmp_path: Path):
    """An empty store of each kind."""
    if request.param == "memory":
        yield MemoryBookStore()
        return
    conn = open_library(tmp_path / "contract.db")
    yield SqliteBookStore(conn)
    conn.close()


def _titles(store: BookStore) -> list[str]:
    return [book.title for book in store.list()]


def _seed(store: BookStore, *titles: str) -> list[Book]:
    return [store.add(title, "Author", read_me=True) for title in titles]


class TestProtocol:
    """Both stores satisfy the BookStore protocol."""

    def test_is_book_store(self, store: BookStore) -> None:
        """The store passes a runtime protocol check."""
        assert isinstance(store, BookStore)


class TestAdd:
    """Tests for add."""

    def test_assigns_positive_distinct_ids(self, store: BookStore) -> None:
        """Each new book gets its own id starting above zero."""
        first, second = _seed(store, "A", "B")
        assert first.id > 0
        assert second.id != first.id

    def test_appends_to_manual_order(self, store: BookStore) -> None:
        """New books go to the end of the list."""
        _seed(store, "A", "B", "C")
        assert _titles(store) == ["A", "B", "C"]

    def test_strips_names(self, store: BookStore) -> None:
        """Surrounding whitespace is removed from title and author."""
        book = store.add("  Dune ", " Frank Herbert ")
        assert book.title == "Dune"
        assert book.author == "Frank Herbert"

    @pytest.mark.parametrize(("title", "author"), [("", "X"), ("X", "  "), ("   ", "")])
    def test_blank_names_rejected(self, store: BookStore, title: str, author: str) -> None:
        """Blank title or author raises ValueError and stores nothing."""
        with pytest.raises(ValueError):
            store.add(title, author)
        assert store.list() == []

    def test_stores_optional_fields(self, store: BookStore, png_bytes: bytes) -> None:
        """Review, image, and flag survive a round trip."""
        book = store.add("Dune", "Herbert", review="Spice", image=png_bytes, read_me=True)
        fetched = store.get(book.id)
        assert fetched is not None
        assert fetched.review == "Spice"
        assert fetched.image == png_bytes
        assert fetched.read_me is True


class TestGet:
    """Tests for get."""

    def test_missing_returns_none(self, store: BookStore) -> None:
        """Unknown ids return None."""
        assert store.get(999) is None

    def test_returned_book_is_detached(self, store: BookStore) -> None:
        """Mutating a fetched book does not change the store."""
        (book,) = _seed(store, "A")
        fetched = store.get(book.id)
        assert fetched is not None
        fetched.title = "Changed"
        assert _titles(store) == ["A"]


class TestUpdate:
    """Tests for update."""

    def test_writes_all_fields(self, store: BookStore, png_bytes: bytes) -> None:
        """Every mutable field is replaced."""
        (book,) = _seed(store, "A")
        book.review = "Loved it"
        book.image = png_bytes
        book.read_me = False
        store.update(book)

        fetched = store.get(book.id)
        assert fetched is not None
        assert fetched.review == "Loved it"
        assert fetched.image == png_bytes
        assert fetched.read_me is False

    def test_keeps_position(self, store: BookStore) -> None:
        """Updating a book does not move it."""
        books = _seed(store, "A", "B", "C")
        books[0].review = "x"
        store.update(books[0])
        assert _titles(store) == ["A", "B", "C"]

    def test_unknown_book_raises(self, store: BookStore) -> None:
        """Updating an id the store lacks raises BookNotFoundError."""
        with pytest.raises(BookNotFoundError, match="999"):
            store.update(Book(id=999, title="Ghost", author="Nobody"))


class TestDelete:
    """Tests for delete."""

    def test_removes_exactly_one(self, store: BookStore) -> None:
        """Only the named book goes away."""
        books = _seed(store, "A", "B", "C")
        store.delete(books[1])
        assert _titles(store) == ["A", "C"]

    def test_repeat_delete_is_noop(self, store: BookStore) -> None:
        """Deleting an already deleted book changes nothing and does not raise."""
        books = _seed(store, "A", "B")
        store.delete(books[0])
        store.delete(books[0])
        assert _titles(store) == ["B"]

    def test_matches_by_identity(self, store: BookStore) -> None:
        """A stale copy with different fields still deletes by id."""
        (book,) = _seed(store, "A")
        stale = Book(id=book.id, title="Something else", author="Other")
        store.delete(stale)
        assert store.list() == []


class TestReorder:
    """Tests for reorder."""

    def test_move_down(self, store: BookStore) -> None:
        """Moving the first book onto the last puts it at the end."""
        a, _, c = _seed(store, "A", "B", "C")
        store.reorder(a, c)
        assert _titles(store) == ["B", "C", "A"]

    def test_move_up(self, store: BookStore) -> None:
        """Moving the last book onto the first puts it at the front."""
        a, _, c = _seed(store, "A", "B", "C")
        store.reorder(c, a)
        assert _titles(store) == ["C", "A", "B"]

    def test_adjacent_swap(self, store: BookStore) -> None:
        """Moving onto a neighbour swaps the pair."""
        a, b, _, _ = _seed(store, "A", "B", "C", "D")
        store.reorder(b, a)
        assert _titles(store) == ["B", "A", "C", "D"]

    def test_add_after_reorder_goes_last(self, store: BookStore) -> None:
        """A book added after a reorder still lands at the end."""
        a, _, c = _seed(store, "A", "B", "C")
        store.reorder(a, c)
        store.add("D", "Author")
        assert _titles(store) == ["B", "C", "A", "D"]

    def test_unknown_book_raises(self, store: BookStore) -> None:
        """Reordering with an id the store lacks raises and keeps the order."""
        (a,) = _seed(store, "A")
        with pytest.raises(BookNotFoundError):
            store.reorder(a, Book(id=999, title="Ghost", author="Nobody"))
        assert _titles(store) == ["A"]


class TestReordered:
    """Tests for the reordered helper."""

    def test_returns_new_list(self) -> None:
        """The input list is left alone."""
        books = [Book(id=i, title=str(i), author="x") for i in (1, 2, 3)]
        result = reordered(books, books[0], books[2])
        assert [b.id for b in result] == [2, 3, 1]
        assert [b.id for b in books] == [1, 2, 3]

    def test_same_book_is_identity(self) -> None:
        """Moving a book onto itself keeps the order."""
        books = [Book(id=i, title=str(i), author="x") for i in (1, 2, 3)]
        assert [b.id for b in reordered(books, books[1], books[1])] == [1, 2, 3]


class TestMemoryStoreSeeding:
    """Tests specific to MemoryBookStore construction."""

    def test_seeded_ids_continue(self, memory_store: MemoryBookStore) -> None:
        """New ids continue after the highest seeded id."""
        book = memory_store.add("New", "Author")
        assert book.id == 4

    def test_seed_list_is_copied(self, sample_books: list[Book]) -> None:
        """Changing the seed list afterwards does not reach the store."""
        store = MemoryBookStore(sample_books)
        sample_books[0].title = "Changed"
        fetched = store.get(1)
        assert fetched is not None
        assert fetched.title == "Zed"
