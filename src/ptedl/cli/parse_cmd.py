"""ptedl parse: parse an export and summarize or dump it."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ptedl.errors import EDLParseError
from ptedl.models.config import ParserConfig
from ptedl.models.session import EDLSession, EDLTrackEvent
from ptedl.parser import parse_file
from ptedl.utils.io import read_yaml, write_json
from ptedl.utils.progress import log_error, log_parse_error, log_success, show_summary

console = Console()

MUTE_ICONS = {
    True: "[red]muted[/red]",
    False: "[green]on[/green]",
}


@click.command()
@click.argument("edl_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config", "-c", "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with parser options",
)
@click.option("--encoding", default=None, help="Text encoding of the export")
@click.option("--strict", is_flag=True, default=False, help="Fail on unexpected lines")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Cross-check header counters")
@click.option(
    "--json", "json_out",
    default=None,
    type=click.Path(dir_okay=False),
    help="Write the parsed session as JSON instead of printing tables",
)
@click.option("--events/--no-events", default=False, help="Print every track event")
def parse_cmd(
    edl_file: str,
    config_path: str | None,
    encoding: str | None,
    strict: bool,
    verbose: bool,
    json_out: str | None,
    events: bool,
) -> None:
    """Parse a session-text export."""
    config = _load_config(config_path, encoding=encoding, strict=strict, verbose=verbose)

    try:
        session = parse_file(Path(edl_file), config)
    except EDLParseError as e:
        log_parse_error(e, source=Path(edl_file).name)
        raise SystemExit(1)
    except UnicodeDecodeError as e:
        log_error(f"Could not decode {edl_file} as {config.encoding}: {e.reason}")
        raise SystemExit(1)

    if json_out:
        write_json(json_out, session.model_dump(mode="json"))
        log_success(f"Wrote {json_out}")
        return

    _print_session(session, show_events=events)


def _load_config(
    config_path: str | None,
    *,
    encoding: str | None,
    strict: bool,
    verbose: bool,
) -> ParserConfig:
    data = read_yaml(config_path) if config_path else {}
    config = ParserConfig(**data)
    overrides = {}
    if encoding:
        overrides["encoding"] = encoding
    if strict:
        overrides["strict"] = True
    if verbose:
        overrides["verbose"] = True
    return config.model_copy(update=overrides)


def _print_session(session: EDLSession, *, show_events: bool) -> None:
    show_summary(session.name or "Session", {
        "Sample rate": f"{session.sample_rate.hz} Hz" if session.sample_rate else "—",
        "Bit depth": session.bit_depth.value if session.bit_depth else "—",
        "Timecode format": session.frame_rate.value,
        "Start timecode": session.start_timecode,
        "Tracks": len(session.tracks),
        "Events": session.total_events,
        "Markers": len(session.markers),
        "Plug-ins": len(session.plugins),
        "Online files": len(session.files.online_files),
        "Offline files": len(session.files.offline_files),
    })

    table = Table(title="Tracks", show_lines=False)
    table.add_column("Track", style="bold")
    table.add_column("Events", justify="right")
    table.add_column("Muted", justify="right")
    table.add_column("Delay", justify="right")
    table.add_column("Plug-ins")
    table.add_column("Comment")
    for track in session.tracks:
        table.add_row(
            track.name,
            str(len(track.events)),
            str(len(track.muted_events)),
            str(track.delay),
            ", ".join(track.plugins) or "—",
            track.comment[:40],
        )
    console.print(table)

    if show_events:
        for track in session.tracks:
            _print_events(track.name, track.events)

    if session.markers:
        markers = Table(title="Markers")
        markers.add_column("#", justify="right")
        markers.add_column("Location")
        markers.add_column("Name", style="bold")
        markers.add_column("Comment")
        for marker in session.markers:
            markers.add_row(str(marker.id), str(marker.location), marker.name, marker.comment)
        console.print(markers)


def _print_events(title: str, events: list[EDLTrackEvent]) -> None:
    table = Table(title=title)
    table.add_column("Ch", justify="right")
    table.add_column("#", justify="right")
    table.add_column("Clip", style="bold")
    table.add_column("In")
    table.add_column("Out")
    table.add_column("State")
    for event in events:
        table.add_row(
            str(event.channel),
            str(event.event),
            event.clip_name,
            str(event.time_in),
            str(event.time_out),
            MUTE_ICONS[event.muted],
        )
    console.print(table)
