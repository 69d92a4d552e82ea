# ABOUTME: The `readme edit` command for changing a book's flag, review, and cover.
# ABOUTME: Applies options directly, or opens an interactive session when none are given.

from pathlib import Path

import click
from rich.console import Console

from readme.cli.detail import DetailSession
from readme.cli.options import db_option, open_store
from readme.covers.images import CoverError
from readme.covers.loader import fetch_cover, load_cover_file
from readme.library.detail import DetailView
from readme.library.store import BookNotFoundError

console = Console()


@click.command("edit")
@click.argument("book_id", type=int)
@db_option
@click.option("--toggle-read-me", is_flag=True, default=False, help="Flip the Read Me! bookmark.")
@click.option("--review", default=None, help="Replace the review text.")
@click.option("--clear-review", is_flag=True, default=False, help="Remove the review.")
@click.option(
    "--cover",
    "cover_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="New cover from an image file or EPUB.",
)
@click.option("--cover-url", default=None, help="New cover downloaded from a URL.")
@click.option("--clear-cover", is_flag=True, default=False, help="Remove the cover image.")
def edit(
    book_id: int,
    db_path: Path | None,
    toggle_read_me: bool,
    review: str | None,
    clear_review: bool,
    cover_path: Path | None,
    cover_url: str | None,
    clear_cover: bool,
) -> None:
    """Edit a book. With no options, prompts interactively."""
    cover_sources = [cover_path is not None, cover_url is not None, clear_cover]
    if sum(cover_sources) > 1:
        raise click.UsageError("Use only one of --cover, --cover-url, --clear-cover.")
    if review is not None and clear_review:
        raise click.UsageError("Use either --review or --clear-review, not both.")

    interactive = not (toggle_read_me or review is not None or clear_review or any(cover_sources))

    with open_store(db_path) as store:
        book = store.get(book_id)
        if book is None:
            console.print(f"[red]Book {book_id} not found.[/red]")
            raise SystemExit(1)

        view = DetailView(store, book)

        if interactive:
            saved = DetailSession(view, console=console).run()
            if saved is None:
                console.print("[yellow]Discarded changes.[/yellow]")
                return
        else:
            if toggle_read_me:
                view.toggle_read_me()
            if review is not None:
                view.set_review(review)
            if clear_review:
                view.set_review(None)
            try:
                if cover_path is not None:
                    view.set_image(load_cover_file(cover_path))
                elif cover_url is not None:
                    view.set_image(fetch_cover(cover_url))
                elif clear_cover:
                    view.set_image(None)
            except CoverError as exc:
                console.print(f"[red]Error:[/red] {exc}")
                raise SystemExit(1) from exc

            try:
                saved = view.save()
            except BookNotFoundError as exc:
                console.print(f"[red]{exc}[/red]")
                raise SystemExit(1) from exc

    section = "Read Me!" if saved.read_me else "Finished!"
    console.print(f"Saved [bold]{saved.title}[/bold] [dim]({section})[/dim]")
