# ABOUTME: LibraryView drives the grouped book list: sorting, selection, delete, and reorder.
# ABOUTME: It never draws anything itself; each refresh hands the sections to a render callback.

import logging
from collections.abc import Callable

from readme.library.grouping import GroupedBooks, group_books
from readme.library.store import BookStore
from readme.library.types import Book, Section, SortStyle

logger = logging.getLogger(__name__)

# Receives the grouped sections and whether the change should be animated.
RenderFn = Callable[[GroupedBooks, bool], None]

# A rendered row address: (section index, row index).
IndexPath = tuple[int, int]


class LibraryView:
    """The list screen of the library.

    Holds the current sort style and the last sections it rendered, so row
    addresses coming back from the user can be resolved to books.
    """

    def __init__(
        self,
        store: BookStore,
        render: RenderFn,
        *,
        sort_style: SortStyle = SortStyle.READ_ME,
    ) -> None:
        self._store = store
        self._render = render
        self._sort_style = sort_style
        self._sections: GroupedBooks = []

    @property
    def sort_style(self) -> SortStyle:
        return self._sort_style

    @property
    def sections(self) -> GroupedBooks:
        """The sections handed to the last render call."""
        return self._sections

    def update(self, sort_style: SortStyle | None = None, *, animate: bool = True) -> None:
        """Regroup the store's books and render them.

        Passing a sort style makes it the current one; omitting it refreshes
        with whatever style is already active.
        """
        if sort_style is not None:
            self._sort_style = sort_style
        self._sections = group_books(self._store.list(), self._sort_style)
        self._render(self._sections, animate)

    def section_at(self, index: int) -> Section | None:
        if 0 <= index < len(self._sections):
            return self._sections[index][0]
        return None

    def select(self, path: IndexPath) -> Book | None:
        """Resolve a rendered row to its book.

        Returns None for the add-new row or a path that no longer exists.
        """
        if self.section_at(path[0]) is Section.ADD_NEW:
            return None
        return self._book_at(path)

    def index_path(self, book: Book) -> IndexPath | None:
        """Find where a book was rendered, if it was."""
        for section_index, (_, rows) in enumerate(self._sections):
            for row_index, row in enumerate(rows):
                if row == book:
                    return section_index, row_index
        return None

    def can_edit(self, path: IndexPath) -> bool:
        """Every row can be deleted except those in the add-new section."""
        section = self.section_at(path[0])
        return section is not None and section is not Section.ADD_NEW

    def can_move(self, path: IndexPath) -> bool:
        """Rows are movable only in Read Me! while the manual order is shown."""
        return (
            self._sort_style is SortStyle.READ_ME
            and self.section_at(path[0]) is Section.READ_ME
        )

    def delete(self, path: IndexPath) -> bool:
        """Delete the book at ``path`` and refresh.

        Returns:
            True if a book was removed from the store.
        """
        if not self.can_edit(path):
            logger.debug("Delete refused at %s", path)
            return False
        book = self._book_at(path)
        if book is None:
            logger.debug("Delete ignored: nothing rendered at %s", path)
            return False

        self._store.delete(book)
        self.update()
        return True

    def move(self, source: IndexPath, destination: IndexPath) -> bool:
        """Move a Read Me! book to another Read Me! row.

        Any move that is not allowed re-renders the previous sections without
        animation and leaves the store alone.

        Returns:
            True if the store's order changed.
        """
        moved = self._book_at(source)
        target = self._book_at(destination)
        if (
            source == destination
            or source[0] != destination[0]
            or not self.can_move(source)
            or moved is None
            or target is None
        ):
            logger.debug("Move from %s to %s reverted", source, destination)
            self._render(self._sections, False)
            return False

        self._store.reorder(moved, target)
        self.update(animate=False)
        return True

    def _book_at(self, path: IndexPath) -> Book | None:
        section_index, row_index = path
        if not 0 <= section_index < len(self._sections):
            return None
        rows = self._sections[section_index][1]
        if not 0 <= row_index < len(rows):
            return None
        return rows[row_index]
