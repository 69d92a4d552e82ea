# ABOUTME: Renders grouped library sections to the terminal with Rich.
# ABOUTME: Implements the render callback that LibraryView pushes sections into.

from rich.console import Console
from rich.table import Table

from readme.library.grouping import GroupedBooks
from readme.library.types import Book, Section

_REVIEW_PREVIEW = 40


def review_preview(review: str | None) -> str:
    """First line of a review, shortened for a table cell."""
    if not review:
        return ""
    line = review.strip().splitlines()[0] if review.strip() else ""
    if len(line) > _REVIEW_PREVIEW:
        return line[: _REVIEW_PREVIEW - 1] + "…"
    return line


def cover_cell(book: Book) -> str:
    """Cover indicator: a check mark, or the title initial as a stand-in."""
    return "[green]✓[/green]" if book.has_image else f"[dim]{book.initial}[/dim]"


class SectionRenderer:
    """Prints each section as its own table.

    The ``animate`` hint from the view has no meaning on a terminal and is
    ignored.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def __call__(self, sections: GroupedBooks, animate: bool = True) -> None:
        total = 0
        for section, books in sections:
            if section is Section.ADD_NEW:
                self._console.print(
                    "[bold cyan]+ Add New Book[/bold cyan]  [dim](readme add TITLE AUTHOR)[/dim]"
                )
                continue
            total += len(books)
            self._print_section(section, books)

        self._console.print(f"\n[dim]{total} book(s)[/dim]")

    def _print_section(self, section: Section, books: list[Book]) -> None:
        self._console.print(f"\n[bold]{section.label}[/bold]")
        if not books:
            self._console.print("  [dim]No books.[/dim]")
            return

        table = Table()
        table.add_column("ID", style="dim", width=4)
        table.add_column("Title", style="bold")
        table.add_column("Author")
        table.add_column("Review", style="italic")
        table.add_column("Cover", justify="center", width=5)

        for book in books:
            table.add_row(
                str(book.id),
                book.title,
                book.author,
                review_preview(book.review),
                cover_cell(book),
            )

        self._console.print(table)


def discard(sections: GroupedBooks, animate: bool = True) -> None:
    """Render callback for commands that report in prose instead of a table."""
