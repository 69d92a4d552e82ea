# ABOUTME: The `readme ls` command for listing the library.
# ABOUTME: Shows the Read Me! and Finished! sections in the chosen sort order.

from pathlib import Path

import click
from rich.console import Console

from readme.cli.options import db_option, open_store, sort_option
from readme.cli.render import SectionRenderer
from readme.library.types import SortStyle
from readme.library.view import LibraryView

console = Console()


@click.command("ls")
@db_option
@sort_option
def ls(db_path: Path | None, sort_name: str) -> None:
    """List all books, grouped into Read Me! and Finished!."""
    with open_store(db_path) as store:
        view = LibraryView(store, SectionRenderer(console))
        view.update(SortStyle(sort_name))
