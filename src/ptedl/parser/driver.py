"""Parse entry points: drive classifier, extractor and assembler line by line."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ptedl.errors import EDLParseError, UnclassifiedLine
from ptedl.models.config import ParserConfig
from ptedl.models.session import EDLSession
from ptedl.parser.assemble import SessionAssembler
from ptedl.parser.extract import TableHeader, extract_field, extract_row
from ptedl.parser.sections import ParserState, Section, classify_line
from ptedl.utils.io import read_lines
from ptedl.utils.progress import log_step, log_warning

FIELD_SECTIONS = frozenset({Section.HEADER, Section.TRACK_LISTING})


def parse_lines(
    lines: Iterable[str],
    config: ParserConfig | None = None,
    *,
    source: str = "<lines>",
) -> EDLSession:
    """Parse decoded export lines into a session.

    Raises the first ``EDLParseError`` encountered; no partial session is
    returned.
    """
    config = config or ParserConfig()
    state = ParserState(header_line_budget=config.header_line_budget)
    assembler = SessionAssembler()
    skipped = 0

    for line in lines:
        raw = line.rstrip("\r\n")
        trimmed = raw.strip()
        line_number = state.file_position + 1

        try:
            decision = classify_line(state, trimmed)
            state.advance(decision)

            if decision is None:
                if config.strict:
                    raise UnclassifiedLine("line matches no section rule")
                skipped += 1
                log_warning(
                    f"{source}:{line_number} skipped unexpected line in "
                    f"{state.section.name}"
                )
                continue

            if decision.reset:
                assembler.close_track()
            if decision.skip:
                continue

            _process_line(state, assembler, raw, trimmed)
        except EDLParseError as e:
            e.attach(line=raw, line_number=line_number, section=state.section.name)
            raise

    session = assembler.finish()

    log_step(
        "Parse",
        f"{source}: {len(session.tracks)} track(s), {session.total_events} event(s), "
        f"{len(session.markers)} marker(s)"
        + (f", {skipped} line(s) skipped" if skipped else ""),
    )
    if config.verbose:
        _check_counts(session, source)

    return session


def parse_file(path: Path | str, config: ParserConfig | None = None) -> EDLSession:
    """Read and parse one export file."""
    config = config or ParserConfig()
    path = Path(path)
    return parse_lines(
        read_lines(path, encoding=config.encoding),
        config,
        source=path.name,
    )


def _process_line(
    state: ParserState,
    assembler: SessionAssembler,
    raw: str,
    trimmed: str,
) -> None:
    section = state.section
    if section in FIELD_SECTIONS:
        assembler.add_field(extract_field(trimmed, section))
        return

    item = extract_row(raw, section, state.row_position)
    if isinstance(item, TableHeader):
        assembler.add_table_header(item)
    else:
        assembler.add_table_row(item)


def _check_counts(session: EDLSession, source: str) -> None:
    """Warn when the header counters disagree with what was listed."""
    if session.num_audio_tracks and session.num_audio_tracks != len(session.tracks):
        log_warning(
            f"{source}: header declares {session.num_audio_tracks} audio track(s), "
            f"found {len(session.tracks)}"
        )
    listed_files = len(session.files.online_files) + len(session.files.offline_files)
    if session.num_audio_files and listed_files and session.num_audio_files != listed_files:
        log_warning(
            f"{source}: header declares {session.num_audio_files} audio file(s), "
            f"found {listed_files}"
        )
