# ABOUTME: The `readme info` command for displaying a single book.
# ABOUTME: Shows every field of a book, its section, and its timestamps.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from readme.cli.options import db_option, open_store
from readme.covers.images import detect_image_type

console = Console()


@click.command("info")
@click.argument("book_id", type=int)
@db_option
def info(book_id: int, db_path: Path | None) -> None:
    """Show details for a book by ID."""
    with open_store(db_path) as store:
        record = store.get_record(book_id)

    if record is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)

    book = record.book
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=10)
    table.add_column("Value")

    table.add_row("ID", str(book.id))
    table.add_row("Title", book.title)
    table.add_row("Author", book.author)
    table.add_row("Read Me", "[cyan]bookmarked[/cyan]" if book.read_me else "finished")
    table.add_row("Review", book.review or "[dim]none[/dim]")
    if book.has_image:
        assert book.image is not None
        kind = detect_image_type(book.image) or "unknown type"
        table.add_row("Cover", f"{kind}, {len(book.image)} bytes")
    else:
        table.add_row("Cover", f"[dim]none (shows '{book.initial}')[/dim]")
    table.add_row("Added", record.date_added)
    table.add_row("Modified", record.date_modified)

    console.print(table)
