# ABOUTME: Core data structures for the reading library.
# ABOUTME: Book is the record every view and store passes around; Section and SortStyle drive the list.

from dataclasses import dataclass, field
from enum import Enum


@dataclass(eq=False)
class Book:
    """A single library entry.

    Identity is the store-assigned ``id``; every other field is mutable.
    Equality and hashing look at ``id`` only, so an edited book still matches
    the row it was rendered in.
    """

    id: int
    title: str
    author: str
    review: str | None = None
    image: bytes | None = field(default=None, repr=False)
    read_me: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def has_image(self) -> bool:
        """Whether cover image data is present."""
        return self.image is not None and len(self.image) > 0

    @property
    def initial(self) -> str:
        """First letter of the title, used as a stand-in when there is no cover."""
        stripped = self.title.strip()
        return stripped[0].upper() if stripped else "?"


class Section(Enum):
    """Display buckets, declared in the order they are shown."""

    ADD_NEW = ""
    READ_ME = "Read Me!"
    FINISHED = "Finished!"

    @property
    def label(self) -> str:
        return self.value


class SortStyle(Enum):
    """Comparison key used inside the Read Me! and Finished! buckets."""

    TITLE = "title"
    AUTHOR = "author"
    READ_ME = "read-me"


# The single row shown in the ADD_NEW section. Store ids start at 1.
PLACEHOLDER_BOOK = Book(id=0, title="Add New Book", author="")
