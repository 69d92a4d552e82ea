# ABOUTME: The `readme rm` command for deleting books.
# ABOUTME: Deletes through the list view so the refreshed list reflects the removal.

from pathlib import Path

import click
from rich.console import Console

from readme.cli.options import db_option, open_store
from readme.cli.render import discard
from readme.library.view import LibraryView

console = Console()


@click.command("rm")
@click.argument("book_id", type=int)
@db_option
def rm(book_id: int, db_path: Path | None) -> None:
    """Delete a book from the library."""
    with open_store(db_path) as store:
        book = store.get(book_id)
        if book is None:
            console.print(f"[red]Book {book_id} not found.[/red]")
            raise SystemExit(1)

        view = LibraryView(store, discard)
        view.update()
        path = view.index_path(book)
        if path is None or not view.delete(path):
            console.print(f"[red]Book {book_id} could not be deleted.[/red]")
            raise SystemExit(1)

    console.print(f"Deleted [bold]{book.title}[/bold].")
