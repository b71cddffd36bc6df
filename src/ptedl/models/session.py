"""EDL session model: the typed result of parsing a session-text export."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ptedl.chrono import BitDepth, FrameRate, SampleRate, Timecode
from ptedl.errors import UnrecognizedPluginFormat, UnrecognizedUnit


class EDLUnit(str, Enum):
    """Time reference unit of a marker."""

    BARS_BEATS = "Bars|Beats"
    FEET_FRAMES = "Feet+Frames"
    MINUTES_SECONDS = "Min:Sec"
    SAMPLES = "Samples"
    TIMECODE = "Timecode"

    @classmethod
    def parse(cls, token: str) -> EDLUnit:
        try:
            return cls(token.strip())
        except ValueError:
            raise UnrecognizedUnit(f"{token.strip()!r} is not a marker unit") from None


class EDLPluginFormat(str, Enum):
    """Plug-in format column of the plug-ins listing."""

    AAX_NATIVE = "AAX Native"
    AAX_DSP = "AAX DSP"

    @classmethod
    def parse(cls, token: str) -> EDLPluginFormat:
        try:
            return cls(token.strip())
        except ValueError:
            raise UnrecognizedPluginFormat(
                f"{token.strip()!r} is not a plug-in format"
            ) from None


class EDLMediaFile(BaseModel):
    """An audio file listed as online or offline."""

    file_name: str
    location: str


class EDLClip(BaseModel):
    """An online clip and the file it plays from."""

    clip_name: str
    source_file: str


class EDLFileList(BaseModel):
    online_files: list[EDLMediaFile] = Field(default_factory=list)
    offline_files: list[EDLMediaFile] = Field(default_factory=list)
    online_clips: list[EDLClip] = Field(default_factory=list)


class EDLPlugin(BaseModel):
    """A row of the plug-ins listing."""

    manufacturer: str
    name: str
    version: str
    format: EDLPluginFormat = EDLPluginFormat.AAX_NATIVE
    stems: str = ""
    instances: int = 0


class EDLMarker(BaseModel):
    """A memory location."""

    id: int
    location: Timecode
    time_reference: int  # samples
    unit: EDLUnit = EDLUnit.SAMPLES
    name: str = ""
    comment: str = ""


class EDLTrackEvent(BaseModel):
    """A clip placement on a track."""

    channel: int
    event: int
    clip_name: str
    time_in: Timecode
    time_out: Timecode
    duration: Timecode | None = None
    timestamp: Timecode | None = None  # only when the table has a TIMESTAMP column
    muted: bool = False

    @property
    def length_ticks(self) -> int:
        return self.time_out.to_ticks() - self.time_in.to_ticks()


class EDLTrack(BaseModel):
    """A track header plus its event table."""

    name: str
    comment: str = ""
    delay: int = 0  # samples
    state: str = ""  # raw STATE text, not interpreted
    plugins: list[str] = Field(default_factory=list)
    events: list[EDLTrackEvent] = Field(default_factory=list)

    @property
    def muted_events(self) -> list[EDLTrackEvent]:
        return [e for e in self.events if e.muted]


class EDLSession(BaseModel):
    """Everything recovered from one session-text export."""

    name: str = ""
    sample_rate: SampleRate | None = None
    bit_depth: BitDepth | None = None
    start_timecode: Timecode = Field(default_factory=Timecode)
    frame_rate: FrameRate = Field(default_factory=FrameRate.default)
    num_audio_tracks: int = 0
    num_audio_clips: int = 0
    num_audio_files: int = 0
    files: EDLFileList = Field(default_factory=EDLFileList)
    markers: list[EDLMarker] = Field(default_factory=list)
    plugins: list[EDLPlugin] = Field(default_factory=list)
    tracks: list[EDLTrack] = Field(default_factory=list)

    @property
    def total_events(self) -> int:
        return sum(len(t.events) for t in self.tracks)
