"""Typed errors raised while parsing an EDL export.

Every error carries the offending input line, its 1-based line number and the
section that was active when it was raised. Errors raised below the driver
don't know the line yet; the driver fills it in with ``attach`` before the
error propagates to the caller.
"""

from __future__ import annotations

from typing import Any


class EDLParseError(ValueError):
    """Base class for all EDL parse failures."""

    kind = "parse error"

    def __init__(
        self,
        message: str,
        *,
        line: str | None = None,
        line_number: int | None = None,
        section: str | None = None,
        context: str | None = None,
    ):
        self.message = message
        self.line = line
        self.line_number = line_number
        self.section = section
        self.context = context
        super().__init__(self._render())

    def attach(
        self,
        *,
        line: str | None = None,
        line_number: int | None = None,
        section: str | None = None,
    ) -> EDLParseError:
        """Fill in location details that were unknown where the error was raised."""
        if self.line is None:
            self.line = line
        if self.line_number is None:
            self.line_number = line_number
        if self.section is None:
            self.section = section
        self.args = (self._render(),)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "line": self.line,
            "line_number": self.line_number,
            "section": self.section,
            "context": self.context,
        }

    def _render(self) -> str:
        parts = [f"{self.kind}: {self.message}"]
        where = []
        if self.line_number is not None:
            where.append(f"line {self.line_number}")
        if self.section:
            where.append(f"section {self.section}")
        if self.context:
            where.append(self.context)
        if where:
            parts.append(f" ({', '.join(where)})")
        if self.line is not None:
            parts.append(f": {self.line!r}")
        return "".join(parts)


class TimecodeError(EDLParseError):
    """Raised for invalid timecode input."""

    kind = "timecode error"


class MalformedTimecode(TimecodeError):
    """Wrong number of groups, misplaced drop-frame separator or non-numeric group."""

    kind = "malformed timecode"


class UnrecognizedField(EDLParseError):
    kind = "unrecognized field"


class ColumnCountMismatch(EDLParseError):
    kind = "column count mismatch"


class UnrecognizedFrameRate(EDLParseError):
    kind = "unrecognized frame rate"


class UnrecognizedSampleRate(EDLParseError):
    kind = "unrecognized sample rate"


class UnrecognizedBitDepth(EDLParseError):
    kind = "unrecognized bit depth"


class UnrecognizedUnit(EDLParseError):
    kind = "unrecognized unit"


class UnrecognizedPluginFormat(EDLParseError):
    kind = "unrecognized plug-in format"


class InvalidCellValue(EDLParseError):
    """A numeric or enumerated cell could not be converted."""

    kind = "invalid cell value"


class OrphanTrackEvent(EDLParseError):
    """A track event row appeared while no track was open."""

    kind = "orphan track event"


class MissingTrackName(EDLParseError):
    """A track header field appeared before the TRACK NAME field."""

    kind = "missing track name"


class UnclassifiedLine(EDLParseError):
    """Strict mode only: a line matched no section rule."""

    kind = "unclassified line"
