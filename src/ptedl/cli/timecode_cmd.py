"""ptedl timecode: inspect a timecode string."""

from __future__ import annotations

import click
from rich.console import Console

from ptedl.chrono import FrameRate, Timecode
from ptedl.errors import EDLParseError
from ptedl.utils.progress import log_parse_error

console = Console()


@click.command()
@click.argument("text")
@click.option(
    "--rate", "-r",
    default=FrameRate.default().value,
    type=click.Choice([r.value for r in FrameRate]),
    help="Timecode format the value is expressed in",
)
def timecode_cmd(text: str, rate: str) -> None:
    """Show the display form and tick count of a timecode."""
    try:
        timecode = Timecode.parse(text, FrameRate.parse(rate))
    except EDLParseError as e:
        log_parse_error(e)
        raise SystemExit(1)

    console.print(f"[bold]{timecode}[/bold]  ({timecode.frame_rate.value})")
    console.print(f"groups: {':'.join(f'{g:02d}' for g in timecode.groups)}")
    console.print(f"ticks:  {timecode.to_ticks()}")
