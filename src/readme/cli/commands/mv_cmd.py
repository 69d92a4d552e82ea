# ABOUTME: The `readme mv` command for reordering the Read Me! list.
# ABOUTME: Moves a book into the slot held by another, only in manual order.

from pathlib import Path

import click
from rich.console import Console

from readme.cli.options import db_option, open_store, sort_option
from readme.cli.render import SectionRenderer, discard
from readme.library.types import SortStyle
from readme.library.view import LibraryView

console = Console()


@click.command("mv")
@click.argument("book_id", type=int)
@click.argument("target_id", type=int)
@db_option
@sort_option
@click.option("--show", is_flag=True, default=False, help="Print the list after moving.")
def mv(book_id: int, target_id: int, db_path: Path | None, sort_name: str, show: bool) -> None:
    """Move BOOK_ID to the position of TARGET_ID on the Read Me! list.

    Only books on the Read Me! list can be moved, and only while the list is
    in read-me (manual) order.
    """
    with open_store(db_path) as store:
        moved = store.get(book_id)
        target = store.get(target_id)
        if moved is None or target is None:
            missing_id = book_id if moved is None else target_id
            console.print(f"[red]Book {missing_id} not found.[/red]")
            raise SystemExit(1)

        view = LibraryView(store, discard)
        view.update(SortStyle(sort_name))
        source = view.index_path(moved)
        destination = view.index_path(target)

        if source is None or destination is None or not view.move(source, destination):
            console.print(
                "[yellow]Not moved: only Read Me! books can be reordered, "
                "and only with --sort read-me.[/yellow]"
            )
            return

    console.print(
        f"Moved [bold]{moved.title}[/bold] to the position of [bold]{target.title}[/bold]."
    )
    if show:
        SectionRenderer(console)(view.sections, False)
