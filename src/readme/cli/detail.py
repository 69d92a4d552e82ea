# ABOUTME: Interactive editing session for a single book's detail view.
# ABOUTME: Shows the book, then prompts for flag, review, and cover changes until save or quit.

from collections.abc import Callable
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from readme.covers.images import CoverError
from readme.covers.loader import fetch_cover, load_cover_file
from readme.library.detail import DetailView
from readme.library.types import Book


class DetailSession:
    """Prompt loop around a DetailView.

    Nothing is written until the user picks save; quitting drops every
    pending edit.
    """

    def __init__(
        self,
        view: DetailView,
        *,
        console: Console | None = None,
        load_fn: Callable[[Path], bytes] = load_cover_file,
        fetch_fn: Callable[[str], bytes] = fetch_cover,
    ) -> None:
        self._view = view
        self._console = console or Console()
        self._load_fn = load_fn
        self._fetch_fn = fetch_fn

    def show(self) -> None:
        """Render the working copy of the book."""
        book = self._view.book
        table = Table(title=book.title, show_header=False, pad_edge=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        table.add_row("Author", book.author)
        table.add_row("Read Me", "[cyan]bookmarked[/cyan]" if book.read_me else "finished")
        table.add_row("Review", book.review or "[dim]none[/dim]")
        table.add_row("Cover", "yes" if book.has_image else f"[dim]none ('{book.initial}')[/dim]")
        self._console.print(table)

    def run(self) -> Book | None:
        """Run the prompt loop.

        Returns:
            The saved Book, or None if the user quit without saving.
        """
        self.show()
        prompt_parts = (
            "[t] Toggle read me  [r] Review  [c] Cover file  [u] Cover URL  "
            "[x] Remove cover  [s] Save  [q] Quit"
        )

        while True:
            choice = click.prompt(prompt_parts, type=str, default="s").lower()

            if choice == "s":
                return self._view.save()
            if choice == "q":
                return None

            if choice == "t":
                self._view.toggle_read_me()
            elif choice == "r":
                text = click.prompt(
                    "Review (empty to clear)",
                    default=self._view.book.review or "",
                    show_default=False,
                )
                self._view.set_review(text)
            elif choice == "c":
                path = click.prompt("Image or EPUB path", type=click.Path(path_type=Path))
                self._set_cover(lambda: self._load_fn(path))
            elif choice == "u":
                url = click.prompt("Image URL", type=str)
                self._set_cover(lambda: self._fetch_fn(url))
            elif choice == "x":
                self._view.set_image(None)
            else:
                continue

            self.show()

    def _set_cover(self, loader: Callable[[], bytes]) -> None:
        try:
            self._view.set_image(loader())
        except CoverError as exc:
            self._console.print(f"[red]{exc}[/red]")
