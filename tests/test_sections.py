"""Tests for the line classifier state machine."""

import pytest

from ptedl.parser.sections import (
    Section,
    ParserState,
    classify_line,
)

T = "\t"

TRACK_BLOCK = [
    f"TRACK NAME:{T}Audio 1",
    f"COMMENTS:{T}",
    f"USER DELAY:{T}0 Samples",
    "STATE:",
    f"PLUG-INS:{T}EQ3 7-Band",
    f"CHANNEL{T}EVENT{T}CLIP NAME{T}START TIME{T}END TIME{T}DURATION{T}STATE",
]


def feed(state: ParserState, lines: list[str]) -> list:
    """Classify and apply each line, returning the decisions."""
    decisions = []
    for line in lines:
        decision = classify_line(state, line.strip())
        state.advance(decision)
        decisions.append(decision)
    return decisions


def track_region_state(*, plugins_listed: bool) -> ParserState:
    state = ParserState(file_position=20, section_entered=True)
    state.plugins_listed = plugins_listed
    feed(state, ["T R A C K  L I S T I N G"])
    return state


def test_header_budget():
    state = ParserState()
    decisions = feed(state, [f"SESSION NAME:{T}x"] * 8)
    assert all(d.section == Section.HEADER and not d.skip for d in decisions)
    assert state.section_position == 8


def test_line_after_header_budget_is_unclassified():
    state = ParserState()
    feed(state, [f"SESSION NAME:{T}x"] * 8)
    assert classify_line(state, f"EXTRA:{T}y") is None


def test_blank_lines_end_section():
    state = ParserState()
    feed(state, [f"SESSION NAME:{T}x"] * 8)
    first, second, third = feed(state, ["", "", ""])
    assert first.skip and not first.reset
    assert second.skip and second.reset
    assert third.skip and not third.reset
    assert state.section_ended
    assert state.section_position == 0


def test_banner_opens_section_and_is_skipped():
    state = ParserState(file_position=10)
    (decision,) = feed(state, ["O N L I N E  F I L E S  I N  S E S S I O N"])
    assert decision.section == Section.ONLINE_FILES
    assert decision.skip and decision.reset and decision.opens_section
    assert state.section == Section.ONLINE_FILES
    assert state.section_position == 0


def test_banner_match_is_exact():
    assert Section.from_banner("T R A C K  L I S T I N G") is Section.TRACK_LISTING
    assert Section.from_banner("T R A C K L I S T I N G") is None
    assert Section.from_banner("A B C") is None


def test_plugins_banner_sets_sticky_flag():
    state = ParserState(file_position=10)
    feed(state, ["P L U G - I N S  L I S T I N G", "", "", "T R A C K  L I S T I N G"])
    assert state.plugins_listed
    assert state.track_header_size == 5


def test_flat_section_keeps_lines():
    state = ParserState(file_position=10)
    decisions = feed(state, [
        "M A R K E R S  L I S T I N G",
        f"#{T}LOCATION{T}TIME REFERENCE{T}UNITS{T}NAME{T}COMMENTS",
        f"1{T}01:00:00:00{T}0{T}Samples{T}A{T}",
    ])
    assert [d.section for d in decisions[1:]] == [Section.MARKERS_LISTING] * 2
    assert state.row_position == 2


def test_ended_flat_section_drains_lines():
    state = ParserState(file_position=10)
    feed(state, ["O N L I N E  F I L E S  I N  S E S S I O N", f"Filename{T}Location", "", ""])
    (decision,) = feed(state, ["stray text"])
    assert decision.section == Section.ONLINE_FILES
    assert decision.skip


@pytest.mark.parametrize(
    "plugins_listed, sections",
    [
        (
            False,
            [Section.TRACK_LISTING] * 4 + [Section.TRACK_EVENT] * 2,
        ),
        (
            True,
            [Section.TRACK_LISTING] * 5 + [Section.TRACK_EVENT],
        ),
    ],
)
def test_track_header_size_depends_on_plugins_listing(plugins_listed, sections):
    state = track_region_state(plugins_listed=plugins_listed)
    decisions = feed(state, TRACK_BLOCK)
    assert [d.section for d in decisions] == sections


def test_event_header_is_table_row_one():
    state = track_region_state(plugins_listed=True)
    feed(state, TRACK_BLOCK)
    assert state.section == Section.TRACK_EVENT
    assert state.row_position == 1


def test_two_cell_line_starts_next_track():
    state = track_region_state(plugins_listed=False)
    feed(state, TRACK_BLOCK[:4] + TRACK_BLOCK[5:])
    feed(state, [f"1{T}1{T}Clip{T}01:00:00:00{T}01:00:01:00{T}00:00:01:00{T}Unmuted"])
    (decision,) = feed(state, [f"TRACK NAME:{T}Audio 2"])
    assert decision.section == Section.TRACK_LISTING
    assert decision.reset and not decision.skip
    assert state.section_position == 1


def test_blank_run_after_events_returns_to_track_listing():
    state = track_region_state(plugins_listed=False)
    feed(state, TRACK_BLOCK[:4] + TRACK_BLOCK[5:])
    decisions = feed(state, ["", ""])
    assert decisions[-1].reset
    assert state.section == Section.TRACK_LISTING
    (decision,) = feed(state, [f"TRACK NAME:{T}Audio 2"])
    assert decision.section == Section.TRACK_LISTING


def test_event_line_with_bad_width_is_unclassified():
    state = track_region_state(plugins_listed=False)
    feed(state, TRACK_BLOCK[:4] + TRACK_BLOCK[5:])
    assert classify_line(state, f"1{T}2{T}3") is None


def test_classify_does_not_mutate_state():
    state = ParserState(file_position=10)
    before = (state.file_position, state.section, state.section_position)
    classify_line(state, "P L U G - I N S  L I S T I N G")
    assert (state.file_position, state.section, state.section_position) == before
    assert not state.plugins_listed
