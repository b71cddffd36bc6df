"""Session-level physical formats: frame rate, sample rate, bit depth."""

from __future__ import annotations

from enum import Enum

from ptedl.errors import (
    UnrecognizedBitDepth,
    UnrecognizedFrameRate,
    UnrecognizedSampleRate,
)


class FrameRate(str, Enum):
    """Timecode frame rate, valued by its TIMECODE FORMAT token."""

    FPS_24_DF = "23.976 Drop Frame"
    FPS_24 = "24 Frame"
    FPS_25 = "25 Frame"
    FPS_30_DF = "29.97 Drop Frame"
    FPS_30 = "30 Frame"
    FPS_48 = "48 Frame"
    FPS_50 = "50 Frame"
    FPS_60_DF = "59.94 Drop Frame"
    FPS_60 = "60 Frame"
    FPS_120 = "120 Frame"

    @classmethod
    def default(cls) -> FrameRate:
        return cls.FPS_25

    @classmethod
    def parse(cls, token: str) -> FrameRate:
        """Parse an exact TIMECODE FORMAT token such as ``29.97 Drop Frame``."""
        try:
            return cls(token.strip())
        except ValueError:
            raise UnrecognizedFrameRate(
                f"{token.strip()!r} is not a known timecode format"
            ) from None

    @property
    def fps(self) -> int:
        """Nominal integer rate. Drop-frame rates count on their rounded rate."""
        return _NOMINAL_FPS[self]

    @property
    def as_float(self) -> float:
        """Real rate, for display only."""
        return _REAL_FPS.get(self, float(self.fps))

    @property
    def is_drop_frame(self) -> bool:
        return self in _DROP_FRAME_RATES

    def __str__(self) -> str:
        return f"{self.as_float:g}"


_NOMINAL_FPS = {
    FrameRate.FPS_24_DF: 24,
    FrameRate.FPS_24: 24,
    FrameRate.FPS_25: 25,
    FrameRate.FPS_30_DF: 30,
    FrameRate.FPS_30: 30,
    FrameRate.FPS_48: 48,
    FrameRate.FPS_50: 50,
    FrameRate.FPS_60_DF: 60,
    FrameRate.FPS_60: 60,
    FrameRate.FPS_120: 120,
}

_REAL_FPS = {
    FrameRate.FPS_24_DF: 23.976,
    FrameRate.FPS_30_DF: 29.97,
    FrameRate.FPS_60_DF: 59.94,
}

_DROP_FRAME_RATES = frozenset(_REAL_FPS)


class SampleRate(float, Enum):
    """Session sample rate in Hz."""

    KHZ_22 = 22000.0
    KHZ_44P1 = 44100.0
    KHZ_48 = 48000.0
    KHZ_88P2 = 88200.0
    KHZ_96 = 96000.0
    KHZ_192 = 192000.0

    @classmethod
    def parse(cls, token: str) -> SampleRate:
        """Parse an exact SAMPLE RATE token such as ``48000.000000``."""
        rate = _SAMPLE_RATE_TOKENS.get(token.strip())
        if rate is None:
            raise UnrecognizedSampleRate(
                f"{token.strip()!r} is not a supported sample rate"
            )
        return rate

    @property
    def hz(self) -> int:
        return int(self.value)


# The export always writes six decimals
_SAMPLE_RATE_TOKENS = {f"{rate.value:.6f}": rate for rate in SampleRate}


class BitDepth(str, Enum):
    """Session bit depth, valued by its BIT DEPTH token."""

    BIT_8 = "8-bit"
    BIT_16 = "16-bit"
    BIT_24 = "24-bit"
    BIT_32 = "32-bit"
    BIT_32_FLOAT = "32-bit float"
    BIT_64 = "64-bit"
    BIT_64_FLOAT = "64-bit float"

    @classmethod
    def parse(cls, token: str) -> BitDepth:
        try:
            return cls(token.strip())
        except ValueError:
            raise UnrecognizedBitDepth(
                f"{token.strip()!r} is not a supported bit depth"
            ) from None

    @property
    def bits(self) -> int:
        return int(self.value.split("-bit", 1)[0])

    @property
    def is_float(self) -> bool:
        return self.value.endswith(" float")
