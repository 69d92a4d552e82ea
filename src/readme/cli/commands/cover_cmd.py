# ABOUTME: The `readme cover` command for exporting a stored cover image.
# ABOUTME: Writes the image bytes to a file, naming it after the book in a directory.

from pathlib import Path

import click
from rich.console import Console

from readme.cli.options import db_option, open_store
from readme.covers.images import extension_for

console = Console()


@click.command("cover")
@click.argument("book_id", type=int)
@click.argument("output", type=click.Path(path_type=Path))
@db_option
def cover(book_id: int, output: Path, db_path: Path | None) -> None:
    """Save a book's cover image to OUTPUT (a file or an existing directory)."""
    with open_store(db_path) as store:
        book = store.get(book_id)

    if book is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)
    if book.image is None:
        console.print(f"[yellow]{book.title} has no cover image.[/yellow]")
        raise SystemExit(1)

    if output.is_dir():
        output = output / f"{book.id}{extension_for(book.image)}"
    output.write_bytes(book.image)
    console.print(f"Wrote cover to [bold]{output}[/bold]")
