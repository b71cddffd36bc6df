"""SMPTE timecode with drop-frame flag and hundredths-of-a-frame ticks."""

from __future__ import annotations

import re
from collections.abc import Sequence

from pydantic import BaseModel, Field, computed_field

from ptedl.chrono.formats import FrameRate
from ptedl.errors import MalformedTimecode

TICK_RESOLUTION = 100
TOTAL_GROUPS = 5

# Group counts accepted by ``Timecode.parse``: hh:mm:ss:ff:tt, hh:mm:ss:ff, mm:ss
FULL_GROUPS = 5
REGULAR_GROUPS = 4
MINUTES_SECONDS_GROUPS = 2

# Separator index of the one between seconds and frames
FRAMES_SEPARATOR_INDEX = 2

_SEPARATOR_RE = re.compile(r"([:;])")


class Timecode(BaseModel):
    """Timecode value: five scalar groups bound to a frame rate.

    Equality and ordering compare ``to_ticks`` and only hold between timecodes
    at the same frame rate. Ordering across rates raises ``TypeError``. The
    drop-frame flag is not stored; it always follows ``frame_rate``.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    frames: int = 0
    ticks: int = 0
    frame_rate: FrameRate = Field(default_factory=FrameRate.default)

    @classmethod
    def with_frame_rate(cls, frame_rate: FrameRate) -> Timecode:
        """All-zero timecode at ``frame_rate``."""
        return cls(frame_rate=frame_rate)

    @classmethod
    def from_parts(cls, groups: Sequence[int], frame_rate: FrameRate) -> Timecode:
        """Build from (hours, minutes, seconds, frames, ticks).

        Groups are not range checked.
        """
        if len(groups) != TOTAL_GROUPS:
            raise MalformedTimecode(
                f"expected {TOTAL_GROUPS} groups, got {len(groups)}"
            )
        hours, minutes, seconds, frames, ticks = groups
        return cls(
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            frames=frames,
            ticks=ticks,
            frame_rate=frame_rate,
        )

    @classmethod
    def parse(cls, text: str, frame_rate: FrameRate) -> Timecode:
        """Parse ``hh:mm:ss:ff:tt``, ``hh:mm:ss(:|;)ff`` or ``mm:ss``.

        A ``;`` is only accepted right before the frames group.
        """
        raw = text.strip()
        tokens = _SEPARATOR_RE.split(raw)
        groups = tokens[0::2]
        separators = tokens[1::2]

        if len(groups) not in (FULL_GROUPS, REGULAR_GROUPS, MINUTES_SECONDS_GROUPS):
            raise MalformedTimecode(
                f"{raw!r} has {len(groups)} group(s); expected 5, 4 or 2"
            )

        for index, separator in enumerate(separators):
            if separator == ";" and (
                len(groups) == MINUTES_SECONDS_GROUPS
                or index != FRAMES_SEPARATOR_INDEX
            ):
                raise MalformedTimecode(
                    f"{raw!r} has a drop-frame separator outside the frames position"
                )

        for group in groups:
            if not (group.isascii() and group.isdigit()):
                raise MalformedTimecode(f"{raw!r} has a non-numeric group {group!r}")

        values = [int(group) for group in groups]
        if len(values) == MINUTES_SECONDS_GROUPS:
            values = [0, *values, 0, 0]
        else:
            values += [0] * (TOTAL_GROUPS - len(values))

        return cls.from_parts(values, frame_rate)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def drop_frame(self) -> bool:
        return self.frame_rate.is_drop_frame

    @property
    def groups(self) -> tuple[int, int, int, int, int]:
        return (self.hours, self.minutes, self.seconds, self.frames, self.ticks)

    def set_frame_rate(self, frame_rate: FrameRate) -> None:
        """Rebind the frame rate; the scalar groups are left untouched."""
        self.frame_rate = frame_rate

    def to_ticks(self) -> int:
        """Absolute position in hundredths of a frame."""
        rate = self.frame_rate.fps
        return (
            self.hours * 3600 * rate * TICK_RESOLUTION
            + self.minutes * 60 * rate * TICK_RESOLUTION
            + self.seconds * rate * TICK_RESOLUTION
            + self.frames * TICK_RESOLUTION
            + self.ticks
        )

    def to_display_string(self) -> str:
        """``hh:mm:ss:ff``, or ``hh:mm:ss;ff`` when drop-frame. Ticks are omitted."""
        separator = ";" if self.drop_frame else ":"
        return (
            f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"
            f"{separator}{self.frames:02d}"
        )

    def __str__(self) -> str:
        return self.to_display_string()

    def _comparable(self, other: object) -> bool:
        return isinstance(other, Timecode) and other.frame_rate is self.frame_rate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timecode):
            return NotImplemented
        return self._comparable(other) and self.to_ticks() == other.to_ticks()

    def __lt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.to_ticks() < other.to_ticks()

    def __le__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.to_ticks() <= other.to_ticks()

    def __gt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.to_ticks() > other.to_ticks()

    def __ge__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.to_ticks() >= other.to_ticks()
