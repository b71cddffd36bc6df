"""Time and format primitives."""

from ptedl.chrono.formats import BitDepth, FrameRate, SampleRate
from ptedl.chrono.timecode import TICK_RESOLUTION, Timecode

__all__ = [
    "BitDepth",
    "FrameRate",
    "SampleRate",
    "TICK_RESOLUTION",
    "Timecode",
]
