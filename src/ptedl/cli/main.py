"""Root CLI group for ptedl."""

from __future__ import annotations

import click

from ptedl import __version__


@click.group()
@click.version_option(version=__version__, prog_name="ptedl")
def cli() -> None:
    """ptedl: read Pro Tools session-text EDL exports."""


# Import and register subcommands
from ptedl.cli.parse_cmd import parse_cmd  # noqa: E402
from ptedl.cli.timecode_cmd import timecode_cmd  # noqa: E402

cli.add_command(parse_cmd, "parse")
cli.add_command(timecode_cmd, "timecode")
