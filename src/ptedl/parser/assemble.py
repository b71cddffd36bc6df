"""Fold extracted fields and table rows into an ``EDLSession``."""

from __future__ import annotations

from dataclasses import dataclass, field

from ptedl.chrono import BitDepth, FrameRate, SampleRate, Timecode
from ptedl.errors import (
    ColumnCountMismatch,
    MissingTrackName,
    OrphanTrackEvent,
    UnrecognizedField,
)
from ptedl.models.session import (
    EDLClip,
    EDLMarker,
    EDLMediaFile,
    EDLPlugin,
    EDLPluginFormat,
    EDLSession,
    EDLTrack,
    EDLTrackEvent,
    EDLUnit,
)
from ptedl.parser.extract import (
    EDLField,
    EventColumn,
    FieldValue,
    TableHeader,
    TableRow,
    parse_delay,
    parse_int,
    parse_mute_state,
    parse_plugin_names,
)
from ptedl.parser.sections import Section


@dataclass
class NoTrackOpen:
    """No track is under construction."""


@dataclass
class TrackOpen:
    """A track whose header has started and whose events are still arriving."""

    track: EDLTrack
    event_width: int | None = None
    has_timestamp: bool = False


TrackSlot = NoTrackOpen | TrackOpen


@dataclass
class SessionAssembler:
    """Builds one session from the classified lines of one export."""

    session: EDLSession = field(default_factory=EDLSession)
    slot: TrackSlot = field(default_factory=NoTrackOpen)

    # -- fields --

    def add_field(self, item: FieldValue) -> None:
        if item.field is EDLField.UNKNOWN:
            return
        if item.section == Section.HEADER:
            self._set_session_field(item)
        elif item.section == Section.TRACK_LISTING:
            self._set_track_field(item)
        else:
            raise UnrecognizedField(
                f"fields are not expected in {item.section.name}",
                context=f"field {item.field.value}",
            )

    def _set_session_field(self, item: FieldValue) -> None:
        session = self.session
        field_name, value = item.field, item.value
        if field_name is EDLField.SESSION_NAME:
            session.name = value
        elif field_name is EDLField.SESSION_SAMPLE_RATE:
            session.sample_rate = SampleRate.parse(value)
        elif field_name is EDLField.SESSION_BIT_DEPTH:
            session.bit_depth = BitDepth.parse(value)
        elif field_name is EDLField.SESSION_START_TIMECODE:
            # Provisional rate until TIMECODE FORMAT arrives
            session.start_timecode = Timecode.parse(value, session.frame_rate)
        elif field_name is EDLField.SESSION_TIMECODE_FORMAT:
            session.frame_rate = FrameRate.parse(value)
            session.start_timecode.set_frame_rate(session.frame_rate)
        elif field_name is EDLField.SESSION_NUM_AUDIO_TRACKS:
            session.num_audio_tracks = parse_int(value, "# of audio tracks")
        elif field_name is EDLField.SESSION_NUM_AUDIO_CLIPS:
            session.num_audio_clips = parse_int(value, "# of audio clips")
        elif field_name is EDLField.SESSION_NUM_AUDIO_FILES:
            session.num_audio_files = parse_int(value, "# of audio files")
        else:
            raise UnrecognizedField(
                f"{field_name.value} is not a session header field",
                context=f"field {field_name.value}",
            )

    def _set_track_field(self, item: FieldValue) -> None:
        if item.field is EDLField.TRACK_NAME:
            self.close_track()
            self.slot = TrackOpen(EDLTrack(name=item.value))
            return

        if isinstance(self.slot, NoTrackOpen):
            raise MissingTrackName(
                f"{item.field.value} appeared before TRACK NAME",
                context=f"field {item.field.value}",
            )

        track = self.slot.track
        if item.field is EDLField.TRACK_COMMENT:
            track.comment = item.value
        elif item.field is EDLField.TRACK_DELAY:
            track.delay = parse_delay(item.value)
        elif item.field is EDLField.TRACK_STATE:
            track.state = item.value
        elif item.field is EDLField.TRACK_PLUGINS:
            track.plugins = parse_plugin_names(item.value)
        else:
            raise UnrecognizedField(
                f"{item.field.value} is not a track header field",
                context=f"field {item.field.value}",
            )

    # -- tables --

    def add_table_header(self, header: TableHeader) -> None:
        if header.section != Section.TRACK_EVENT:
            return
        if isinstance(self.slot, NoTrackOpen):
            raise OrphanTrackEvent("event table header without a track")
        self.slot.event_width = len(header.cells)
        self.slot.has_timestamp = header.has_timestamp

    def add_table_row(self, row: TableRow) -> None:
        cells = row.cells
        files = self.session.files
        if row.section == Section.ONLINE_FILES:
            files.online_files.append(_media_file(cells))
        elif row.section == Section.OFFLINE_FILES:
            files.offline_files.append(_media_file(cells))
        elif row.section == Section.ONLINE_CLIPS:
            files.online_clips.append(EDLClip(clip_name=cells[0], source_file=cells[1]))
        elif row.section == Section.PLUGINS_LISTING:
            self.session.plugins.append(_plugin(cells))
        elif row.section == Section.MARKERS_LISTING:
            self.session.markers.append(self._marker(cells))
        elif row.section == Section.TRACK_EVENT:
            self._add_event(cells)
        else:
            raise UnrecognizedField(f"no table is expected in {row.section.name}")

    def _add_event(self, cells: tuple[str, ...]) -> None:
        if isinstance(self.slot, NoTrackOpen):
            raise OrphanTrackEvent("track event without a preceding track header")
        slot = self.slot
        if slot.event_width is not None and len(cells) != slot.event_width:
            raise ColumnCountMismatch(
                f"event row has {len(cells)} columns but its table header has "
                f"{slot.event_width}",
                context=f"track {slot.track.name!r}",
            )

        fps = self.session.frame_rate
        timestamp = None
        if slot.has_timestamp:
            timestamp = Timecode.parse(cells[EventColumn.TIMESTAMP], fps)

        slot.track.events.append(EDLTrackEvent(
            channel=parse_int(cells[EventColumn.CHANNEL], "channel"),
            event=parse_int(cells[EventColumn.EVENT], "event"),
            clip_name=cells[EventColumn.CLIP_NAME],
            time_in=Timecode.parse(cells[EventColumn.START_TIME], fps),
            time_out=Timecode.parse(cells[EventColumn.END_TIME], fps),
            duration=Timecode.parse(cells[EventColumn.DURATION], fps),
            timestamp=timestamp,
            muted=parse_mute_state(cells[-1]),
        ))

    def _marker(self, cells: tuple[str, ...]) -> EDLMarker:
        marker_id, location, time_reference, unit, name, comment = cells
        return EDLMarker(
            id=parse_int(marker_id, "marker id"),
            location=Timecode.parse(location, self.session.frame_rate),
            time_reference=parse_int(time_reference, "time reference"),
            unit=EDLUnit.parse(unit),
            name=name,
            comment=comment,
        )

    # -- track lifecycle --

    def close_track(self) -> None:
        """Move the open track, if any, into the session."""
        if isinstance(self.slot, TrackOpen):
            self.session.tracks.append(self.slot.track)
            self.slot = NoTrackOpen()

    def finish(self) -> EDLSession:
        self.close_track()
        return self.session


def _media_file(cells: tuple[str, ...]) -> EDLMediaFile:
    return EDLMediaFile(file_name=cells[0], location=cells[1])


def _plugin(cells: tuple[str, ...]) -> EDLPlugin:
    manufacturer, name, version, plugin_format, stems, instances = cells
    return EDLPlugin(
        manufacturer=manufacturer,
        name=name,
        version=version,
        format=EDLPluginFormat.parse(plugin_format),
        stems=stems,
        instances=parse_int(instances, "number of instances"),
    )
