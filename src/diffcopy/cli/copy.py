"""Copy command for diffcopy CLI.

Commands:
- copy: Copy SOURCE into DEST, writing only from the first difference
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

import click

from diffcopy.core.config import BUFFER_SIZE, CopyConfig
from diffcopy.core.engine import diff_copy


@click.command()
@click.argument("source", type=click.File("rb"))
@click.argument("dest", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--buffer-size",
    type=click.IntRange(min=1),
    default=BUFFER_SIZE,
    show_default=True,
    help="Bytes compared per step.",
)
@click.option("--stats", is_flag=True, help="Show bytes written and truncated.")
def copy(source: BinaryIO, dest: Path, buffer_size: int, stats: bool) -> None:
    """Make DEST identical to SOURCE ('-' reads standard input).

    DEST is only written from the first chunk that differs, then
    truncated to the length of SOURCE.
    """
    try:
        result = diff_copy(source, dest, CopyConfig(buffer_size=buffer_size))
    except OSError as e:
        raise click.ClickException(f"Cannot copy to {dest}: {e}") from e

    click.echo(f"{result.bytes_copied} bytes")
    if stats:
        click.echo(f"Written: {result.bytes_written} bytes")
        click.echo(f"Truncated: {result.bytes_truncated} bytes")
        click.echo(f"Changed: {'yes' if result.changed else 'no'}")
