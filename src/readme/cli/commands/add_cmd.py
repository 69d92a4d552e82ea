# ABOUTME: The `readme add` command for creating library entries.
# ABOUTME: Takes title and author directly or reads them from an EPUB file.

from pathlib import Path

import click
from rich.console import Console

from readme.cli.options import db_option, open_store
from readme.covers.images import CoverError
from readme.covers.loader import load_cover_file
from readme.formats.epub import EpubReadError, read_epub_details

console = Console()


@click.command("add")
@click.argument("title", required=False)
@click.argument("author", required=False)
@db_option
@click.option(
    "--from-epub",
    "epub_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read title, author, and cover from an EPUB file.",
)
@click.option("--review", default=None, help="Initial review text.")
@click.option(
    "--read-me/--finished",
    "read_me",
    default=False,
    help="Put the book on the Read Me! list (default: Finished!).",
)
@click.option(
    "--cover",
    "cover_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Cover image file (JPEG, PNG, GIF, WebP) or EPUB.",
)
def add(
    title: str | None,
    author: str | None,
    db_path: Path | None,
    epub_path: Path | None,
    review: str | None,
    read_me: bool,
    cover_path: Path | None,
) -> None:
    """Add a book to the library."""
    image: bytes | None = None

    if epub_path is not None:
        try:
            details = read_epub_details(epub_path)
        except EpubReadError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise SystemExit(1) from exc
        title = title or details.title
        author = author or details.author
        image = details.cover_image

    if not title or not author:
        raise click.UsageError("TITLE and AUTHOR are required unless --from-epub provides them.")

    if cover_path is not None:
        try:
            image = load_cover_file(cover_path)
        except CoverError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise SystemExit(1) from exc

    with open_store(db_path) as store:
        try:
            book = store.add(title, author, review=review, image=image, read_me=read_me)
        except ValueError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise SystemExit(1) from exc

    section = "Read Me!" if book.read_me else "Finished!"
    console.print(
        f"Added [bold]{book.title}[/bold] by {book.author} "
        f"[dim](id {book.id}, {section})[/dim]"
    )
