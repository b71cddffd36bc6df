"""Row and field extraction with typed cell conversion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ptedl.errors import (
    ColumnCountMismatch,
    InvalidCellValue,
    UnrecognizedField,
)
from ptedl.parser.sections import CELL_SEPARATOR, TABLE_WIDTHS, Section

FIELD_SEPARATOR = ":\t"
DELAY_SUFFIX = " Samples"
TABLE_HEADER_POSITION = 1


class EDLField(str, Enum):
    """Catalog of ``NAME:\\tvalue`` fields, valued by their name in the export."""

    SESSION_NAME = "SESSION NAME"
    SESSION_SAMPLE_RATE = "SAMPLE RATE"
    SESSION_BIT_DEPTH = "BIT DEPTH"
    SESSION_START_TIMECODE = "SESSION START TIMECODE"
    SESSION_TIMECODE_FORMAT = "TIMECODE FORMAT"
    SESSION_NUM_AUDIO_TRACKS = "# OF AUDIO TRACKS"
    SESSION_NUM_AUDIO_CLIPS = "# OF AUDIO CLIPS"
    SESSION_NUM_AUDIO_FILES = "# OF AUDIO FILES"
    TRACK_NAME = "TRACK NAME"
    TRACK_COMMENT = "COMMENTS"
    TRACK_DELAY = "USER DELAY"
    TRACK_STATE = "STATE"
    TRACK_PLUGINS = "PLUG-INS"
    UNKNOWN = "__unknown__"

    @classmethod
    def lookup(cls, name: str) -> EDLField | None:
        return _FIELDS_BY_NAME.get(name.strip())

    @property
    def is_voidable(self) -> bool:
        """May appear as a bare ``NAME:`` line with no value."""
        return self in _VOIDABLE_FIELDS


_FIELDS_BY_NAME = {f.value: f for f in EDLField if f is not EDLField.UNKNOWN}
_VOIDABLE_FIELDS = frozenset({
    EDLField.TRACK_COMMENT,
    EDLField.TRACK_STATE,
    EDLField.TRACK_PLUGINS,
    EDLField.UNKNOWN,
})


class EventColumn(int, Enum):
    """Column positions of a track event row."""

    CHANNEL = 0
    EVENT = 1
    CLIP_NAME = 2
    START_TIME = 3
    END_TIME = 4
    DURATION = 5
    TIMESTAMP = 6


TIMESTAMP_HEADER = "TIMESTAMP"
EVENT_WIDTH_WITH_TIMESTAMP = 8


@dataclass(frozen=True)
class FieldValue:
    section: Section
    field: EDLField
    value: str


@dataclass(frozen=True)
class TableHeader:
    section: Section
    cells: tuple[str, ...]

    @property
    def has_timestamp(self) -> bool:
        return (
            len(self.cells) == EVENT_WIDTH_WITH_TIMESTAMP
            and self.cells[EventColumn.TIMESTAMP].upper() == TIMESTAMP_HEADER
        )


@dataclass(frozen=True)
class TableRow:
    section: Section
    cells: tuple[str, ...]


def extract_field(line: str, section: Section) -> FieldValue:
    """Split a ``NAME:\\tvalue`` line and match the name against the catalog."""
    if FIELD_SEPARATOR in line:
        name, value = line.split(FIELD_SEPARATOR, 1)
        field = EDLField.lookup(name)
        if field is None:
            raise UnrecognizedField(f"{name.strip()!r} is not a known field")
        return FieldValue(section, field, value.strip())

    if ":" in line:
        name = line[: line.rfind(":")]
        field = EDLField.lookup(name) or EDLField.UNKNOWN
        if field.is_voidable:
            return FieldValue(section, field, "")
        raise UnrecognizedField(f"field {name.strip()!r} has no value")

    raise UnrecognizedField("line is not a NAME:<tab>value field")


def split_cells(line: str) -> tuple[str, ...]:
    return tuple(cell.strip() for cell in line.split(CELL_SEPARATOR))


def extract_row(
    line: str,
    section: Section,
    position: int,
) -> TableHeader | TableRow:
    """Split a table line into trimmed cells; row 1 of a table is its header."""
    cells = split_cells(line)
    widths = TABLE_WIDTHS[section]
    if len(cells) not in widths:
        expected = " or ".join(str(w) for w in widths)
        raise ColumnCountMismatch(
            f"expected {expected} columns, got {len(cells)}"
        )
    if position == TABLE_HEADER_POSITION:
        return TableHeader(section, cells)
    return TableRow(section, cells)


# -- typed cell conversion --


def parse_int(text: str, what: str, *, signed: bool = False) -> int:
    value = text.strip()
    digits = value[1:] if signed and value.startswith("-") else value
    if not (digits.isascii() and digits.isdigit()):
        kind = "an integer" if signed else "a non-negative integer"
        raise InvalidCellValue(f"{what} must be {kind}, got {value!r}")
    return int(value)


def parse_delay(text: str) -> int:
    """``USER DELAY`` value, e.g. ``12 Samples``. May be negative."""
    value = text.strip()
    if value.endswith(DELAY_SUFFIX):
        value = value[: -len(DELAY_SUFFIX)]
    return parse_int(value, "user delay", signed=True)


def parse_mute_state(text: str) -> bool:
    """``Muted`` → True, ``Unmuted`` → False."""
    value = text.strip()
    if value == "Muted":
        return True
    if value == "Unmuted":
        return False
    raise InvalidCellValue(f"event state must be Muted or Unmuted, got {value!r}")


def parse_plugin_names(text: str) -> list[str]:
    return [name.strip() for name in text.split(CELL_SEPARATOR) if name.strip()]
