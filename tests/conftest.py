"""Shared fixtures for ptedl tests."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"

T = "\t"

HEADER_LINES = [
    f"SESSION NAME:{T}Minimal",
    f"SAMPLE RATE:{T}48000.000000",
    f"BIT DEPTH:{T}24-bit",
    f"SESSION START TIMECODE:{T}01:00:00:00",
    f"TIMECODE FORMAT:{T}25 Frame",
    f"# OF AUDIO TRACKS:{T}1",
    f"# OF AUDIO CLIPS:{T}2",
    f"# OF AUDIO FILES:{T}1",
]

TRACK_LINES = [
    f"TRACK NAME:{T}Audio 1",
    f"COMMENTS:{T}",
    f"USER DELAY:{T}0 Samples",
    "STATE: ",
    f"CHANNEL {T}EVENT   {T}CLIP NAME   {T}START TIME    {T}END TIME      {T}DURATION      {T}STATE",
    f"1{T}1{T}Audio 1_01{T}01:00:00:00{T}01:00:04:12{T}00:00:04:12{T}Unmuted",
    f"1{T}2{T}Audio 1_02{T}01:00:10:00{T}01:00:12:05{T}00:00:02:05{T}Muted",
]

MARKER_LINES = [
    f"#   {T}LOCATION     {T}TIME REFERENCE    {T}UNITS    {T}NAME      {T}COMMENTS",
    f"1   {T}01:00:02:00  {T}96000             {T}Samples  {T}Hit       {T}door slam",
]


@pytest.fixture
def minimal_lines() -> list[str]:
    """One track with two events and one marker, no plug-ins listing."""
    return [
        *HEADER_LINES,
        "",
        "",
        "T R A C K  L I S T I N G",
        *TRACK_LINES,
        "",
        "",
        "M A R K E R S  L I S T I N G",
        *MARKER_LINES,
    ]


@pytest.fixture
def film_mix_path() -> Path:
    return FIXTURES / "film_mix.txt"


@pytest.fixture
def film_mix_lines(film_mix_path: Path) -> list[str]:
    return film_mix_path.read_text(encoding="utf-8").splitlines()
