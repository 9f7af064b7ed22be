"""Command-line interface for diffcopy.

This module provides the main CLI entry point and assembles all commands.

Commands:
- copy: Bring a destination file in line with a source stream
"""

from __future__ import annotations

import logging
import sys

import click

from diffcopy.cli.copy import copy

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbosity: int) -> None:
    """Configure the diffcopy logger to write to stderr.

    Args:
        verbosity: 0 for warnings only, 1 for info, 2 or more for debug.
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    diffcopy_logger = logging.getLogger("diffcopy")
    for handler in diffcopy_logger.handlers[:]:
        diffcopy_logger.removeHandler(handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    diffcopy_logger.addHandler(stderr_handler)
    diffcopy_logger.setLevel(level)
    diffcopy_logger.propagate = False


@click.group()
@click.version_option(package_name="diffcopy")
@click.option("--verbose", "-v", count=True, help="Increase log output (-v info, -vv debug).")
def cli(verbose: int) -> None:
    """diffcopy - Write a file only where it differs from its source."""
    setup_logging(verbose)


cli.add_command(copy)


def main() -> None:
    """Entry point for the CLI."""
    cli()


__all__ = [
    "cli",
    "main",
    "setup_logging",
]
