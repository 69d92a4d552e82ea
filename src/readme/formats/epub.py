# ABOUTME: Reads the title, authors, and embedded cover from EPUB files using ebooklib.
# ABOUTME: Used to seed new library entries and to pull covers out of ebooks.

import logging
from dataclasses import dataclass, field
from pathlib import Path

import ebooklib
from ebooklib import epub

logger = logging.getLogger(__name__)


class EpubReadError(Exception):
    """Raised when an EPUB file cannot be read or parsed."""


@dataclass
class EpubDetails:
    """The parts of an EPUB a library entry is built from."""

    title: str
    authors: list[str] = field(default_factory=list)
    cover_image: bytes | None = field(default=None, repr=False)

    @property
    def author(self) -> str:
        """Joined author string for display."""
        return ", ".join(self.authors)


def _get_metadata_value(book: epub.EpubBook, namespace: str, name: str) -> str | None:
    """Extract a single metadata value from an EpubBook, or None if missing."""
    values = book.get_metadata(namespace, name)
    if not values:
        return None
    # Metadata entries are tuples of (value, attributes)
    value = values[0][0]
    return str(value).strip() if value else None


def _get_authors(book: epub.EpubBook) -> list[str]:
    """Extract all author names from an EpubBook."""
    creators = book.get_metadata("DC", "creator")
    if not creators:
        return []
    return [str(entry[0]).strip() for entry in creators if entry[0]]


def _extract_cover_image(book: epub.EpubBook) -> bytes | None:
    """Extract cover image data from an EPUB, if present."""
    cover_id = None
    meta_entries = book.get_metadata("OPF", "cover")
    if meta_entries:
        cover_id = meta_entries[0][1].get("content")

    if cover_id:
        cover_item = book.get_item_with_id(cover_id)
        if cover_item:
            return cover_item.get_content()

    # EPUB 3 cover items, then anything image-typed with "cover" in its id or name
    for item in book.get_items_of_type(ebooklib.ITEM_COVER):
        return item.get_content()
    for item in book.get_items_of_type(ebooklib.ITEM_IMAGE):
        item_id = item.get_id() or ""
        item_name = item.get_name() or ""
        if "cover" in item_id.lower() or "cover" in item_name.lower():
            return item.get_content()

    return None


def read_epub_details(path: Path) -> EpubDetails:
    """Extract title, authors, and cover from an EPUB file.

    Falls back to the file stem when the EPUB has no title.

    Raises:
        EpubReadError: If the file cannot be read or parsed.
    """
    if not path.exists():
        raise EpubReadError(f"File not found: {path}")

    try:
        book = epub.read_epub(str(path), options={"ignore_ncx": True})
    except Exception as exc:
        raise EpubReadError(f"Failed to read EPUB: {path}: {exc}") from exc

    title = _get_metadata_value(book, "DC", "title")
    if not title:
        logger.debug("No title in %s, using file name", path)
        title = path.stem

    return EpubDetails(
        title=title,
        authors=_get_authors(book),
        cover_image=_extract_cover_image(book),
    )
