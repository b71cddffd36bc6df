"""Line classifier: decides which section each line of the export belongs to.

The export has no explicit delimiters between a track's header fields and its
event table, or between one track's events and the next track's header. Both
boundaries are recovered from the running position inside the section and the
number of tab-separated cells on the line, so the classifier is order
dependent. All of that context lives in an explicit ``ParserState`` owned by a
single parse call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Section(str, Enum):
    """Regions of the export, valued by their banner line."""

    HEADER = "__header__"
    PLUGINS_LISTING = "P L U G - I N S  L I S T I N G"
    ONLINE_FILES = "O N L I N E  F I L E S  I N  S E S S I O N"
    OFFLINE_FILES = "O F F L I N E  F I L E S  I N  S E S S I O N"
    ONLINE_CLIPS = "O N L I N E  C L I P S  I N  S E S S I O N"
    TRACK_LISTING = "T R A C K  L I S T I N G"
    TRACK_EVENT = "__track_event__"
    MARKERS_LISTING = "M A R K E R S  L I S T I N G"
    IGNORE = "__ignore__"

    @property
    def has_banner(self) -> bool:
        return not self.value.startswith("__")

    @classmethod
    def from_banner(cls, line: str) -> Section | None:
        """Exact match against the banner table; no letter-spacing heuristics."""
        return _BANNERS.get(line)


_BANNERS = {s.value: s for s in Section if s.has_banner}

HEADER_LINE_BUDGET = 8
TRACK_HEADER_SIZE = 4
TRACK_HEADER_SIZE_WITH_PLUGINS = 5
SECTION_TERMINATOR_LENGTH = 2
FIELD_CELL_COUNT = 2
CELL_SEPARATOR = "\t"

TABLE_WIDTHS: dict[Section, tuple[int, ...]] = {
    Section.PLUGINS_LISTING: (6,),
    Section.ONLINE_FILES: (2,),
    Section.OFFLINE_FILES: (2,),
    Section.ONLINE_CLIPS: (2,),
    Section.MARKERS_LISTING: (6,),
    Section.TRACK_EVENT: (7, 8),
}

# Sections without nested tables: every non-banner line stays in them
FLAT_SECTIONS = frozenset({
    Section.PLUGINS_LISTING,
    Section.ONLINE_FILES,
    Section.OFFLINE_FILES,
    Section.ONLINE_CLIPS,
    Section.MARKERS_LISTING,
})

# Sections whose trailing lines are drained once a blank run has closed them
DRAINED_SECTIONS = FLAT_SECTIONS | {Section.HEADER}


@dataclass(frozen=True)
class LineDecision:
    """Outcome of classifying one line."""

    section: Section
    skip: bool = False
    reset: bool = False  # section-local position restarts (and an open track closes)
    opens_section: bool = False  # the line is a banner
    blank: bool = False


@dataclass
class ParserState:
    """Per-parse context threaded through ``classify_line``/``advance``."""

    header_line_budget: int = HEADER_LINE_BUDGET
    file_position: int = 0  # lines consumed so far
    section: Section = Section.HEADER
    section_entered: bool = False  # a banner has been seen
    section_position: int = 0
    blank_run: int = 0
    section_ended: bool = False
    plugins_listed: bool = False

    @property
    def track_header_size(self) -> int:
        if self.plugins_listed:
            return TRACK_HEADER_SIZE_WITH_PLUGINS
        return TRACK_HEADER_SIZE

    @property
    def row_position(self) -> int:
        """1-based position of the current line inside its table."""
        if self.section == Section.TRACK_EVENT:
            return self.section_position - self.track_header_size
        return self.section_position

    def advance(self, decision: LineDecision | None) -> None:
        """Fold a decision for the current line into the state."""
        self.file_position += 1

        if decision is None:
            self.blank_run = 0
            return

        if decision.blank:
            self.blank_run += 1
            if decision.reset:
                self.section_position = 0
                self.section_ended = True
                if self.section == Section.TRACK_EVENT:
                    self.section = Section.TRACK_LISTING
            return

        self.blank_run = 0

        if decision.opens_section:
            self.section = decision.section
            self.section_entered = True
            self.section_position = 0
            self.section_ended = False
            if decision.section == Section.PLUGINS_LISTING:
                self.plugins_listed = True
            return

        if decision.reset:
            self.section_position = 0

        if not decision.skip:
            self.section = decision.section
            self.section_position += 1
            self.section_ended = False


def count_cells(line: str) -> int:
    return len(line.split(CELL_SEPARATOR))


def classify_line(state: ParserState, line: str) -> LineDecision | None:
    """Classify one trimmed line. Returns None when no rule applies.

    Rules, in priority order:
    1. blank line: no section change; the second blank in a row ends the section
    2. inside the header line budget before any banner: header
    3. banner: opens its section, the banner itself is skipped
    4. section already ended by a blank run: drain without state change
    5. flat table sections keep every line
    6. track listing: header fields until the track header size, then events
    7. track events: a 2-cell line is the next track's name, event-width lines stay
    """
    if not line:
        ends = state.blank_run + 1 == SECTION_TERMINATOR_LENGTH
        return LineDecision(Section.IGNORE, skip=True, reset=ends, blank=True)

    if state.file_position < state.header_line_budget and not state.section_entered:
        return LineDecision(Section.HEADER)

    banner = Section.from_banner(line)
    if banner is not None:
        return LineDecision(banner, skip=True, reset=True, opens_section=True)

    if state.section_ended and state.section in DRAINED_SECTIONS:
        return LineDecision(state.section, skip=True)

    if state.section in FLAT_SECTIONS:
        return LineDecision(state.section)

    if state.section == Section.TRACK_LISTING:
        if state.section_position < state.track_header_size:
            return LineDecision(Section.TRACK_LISTING)
        return LineDecision(Section.TRACK_EVENT)

    if state.section == Section.TRACK_EVENT:
        cells = count_cells(line)
        if cells == FIELD_CELL_COUNT:
            return LineDecision(Section.TRACK_LISTING, reset=True)
        if cells in TABLE_WIDTHS[Section.TRACK_EVENT]:
            return LineDecision(Section.TRACK_EVENT)

    return None
