# ABOUTME: Shared Click options and helpers for ReadMe CLI commands.
# ABOUTME: Provides the --db option, sort-style parsing, and store opening.

from collections.abc import Iterator
from contextlib import closing, contextmanager
from pathlib import Path

import click

from readme.db.catalog import SqliteBookStore
from readme.db.connection import DEFAULT_DB_PATH, open_library
from readme.library.types import SortStyle

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    envvar="READMELIB_DB",
    help=f"Path to library database (default: {DEFAULT_DB_PATH}, env: READMELIB_DB)",
)

sort_option = click.option(
    "-s",
    "--sort",
    "sort_name",
    type=click.Choice([style.value for style in SortStyle]),
    default=SortStyle.READ_ME.value,
    show_default=True,
    help="Order within each section.",
)


@contextmanager
def open_store(db_path: Path | None) -> Iterator[SqliteBookStore]:
    """Open the library database and close it when the block ends."""
    with closing(open_library(db_path or DEFAULT_DB_PATH)) as conn:
        yield SqliteBookStore(conn)
