# ABOUTME: Shared pytest fixtures for ReadMe tests.
# ABOUTME: Provides image bytes, EPUB files with and without covers, and book stores.

from pathlib import Path

import pytest
from ebooklib import epub

from readme.db.catalog import SqliteBookStore
from readme.db.connection import open_library
from readme.library.store import MemoryBookStore
from readme.library.types import Book

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + b"\x00" * 16
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 16


@pytest.fixture
def png_bytes() -> bytes:
    """Bytes that carry a PNG signature."""
    return PNG_BYTES


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """A PNG image file on disk."""
    path = tmp_path / "cover.png"
    path.write_bytes(PNG_BYTES)
    return path


def _write_epub(path: Path, title: str | None, author: str | None, cover: bytes | None) -> Path:
    book = epub.EpubBook()
    book.set_identifier(f"id-{path.stem}")
    if title:
        book.set_title(title)
    book.set_language("en")
    if author:
        book.add_author(author)
    if cover is not None:
        book.set_cover("cover.png", cover, create_page=False)

    # Add a minimal chapter so the EPUB is structurally valid
    chapter = epub.EpubHtml(title="Chapter 1", file_name="chap01.xhtml", lang="en")
    chapter.content = b"<html><body><h1>Chapter 1</h1><p>Content.</p></body></html>"
    book.add_item(chapter)

    book.toc = [epub.Link("chap01.xhtml", "Chapter 1", "chap01")]
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", chapter]

    epub.write_epub(str(path), book)
    return path


@pytest.fixture
def sample_epub(tmp_path: Path) -> Path:
    """An EPUB with title, author, and an embedded PNG cover."""
    return _write_epub(tmp_path / "rose.epub", "The Name of the Rose", "Umberto Eco", PNG_BYTES)


@pytest.fixture
def coverless_epub(tmp_path: Path) -> Path:
    """An EPUB with title and author but no cover."""
    return _write_epub(tmp_path / "dune.epub", "Dune", "Frank Herbert", None)


@pytest.fixture
def untitled_epub(tmp_path: Path) -> Path:
    """An EPUB with no title or author metadata."""
    return _write_epub(tmp_path / "mystery_book.epub", None, None, None)


@pytest.fixture
def corrupt_epub(tmp_path: Path) -> Path:
    """A file with an .epub suffix that is not a valid EPUB."""
    filepath = tmp_path / "corrupt.epub"
    filepath.write_text("this is not a valid epub file")
    return filepath


@pytest.fixture
def sample_books() -> list[Book]:
    """Three books from the grouping example: two bookmarked, one finished."""
    return [
        Book(id=1, title="Zed", author="alpha", read_me=True),
        Book(id=2, title="Ann", author="Charlie", read_me=True),
        Book(id=3, title="Mid", author="bravo", read_me=False),
    ]


@pytest.fixture
def memory_store(sample_books: list[Book]) -> MemoryBookStore:
    """An in-memory store seeded with sample_books."""
    return MemoryBookStore(sample_books)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path for a temporary library database."""
    return tmp_path / "library.db"


@pytest.fixture
def sqlite_store(db_path: Path):
    """A SQLite-backed store on a temporary database."""
    conn = open_library(db_path)
    yield SqliteBookStore(conn)
    conn.close()
