import io

import pytest

from lemin.farm import FarmError
from lemin.parser import ParseResult, is_number, parse, read_lines

SAMPLE = [
    "3",
    "##start",
    "start 1 1",
    "middle 2 2",
    "##end",
    "end 3 3",
    "start-middle",
    "middle-end",
]


def test_sample_parses():
    result = parse(SAMPLE)
    assert isinstance(result, ParseResult)
    assert result.ants == 3
    assert result.farm.start == "start"
    assert result.farm.end == "end"
    assert result.echo == SAMPLE
    assert result.farm.room("middle").links == ["start", "end"]


def test_room_coordinates_kept():
    room = parse(SAMPLE).farm.room("middle")
    assert (room.x, room.y) == (2, 2)


def test_comments_before_ant_count_not_echoed():
    result = parse(["#hello", "##start", *SAMPLE])
    assert result.echo == SAMPLE


def test_comment_lines_echoed_and_ignored():
    lines = SAMPLE[:4] + ["#note"] + SAMPLE[4:]
    result = parse(lines)
    assert result.echo == lines
    assert not result.farm.has_room("#note")


def test_unknown_command_ignored():
    lines = SAMPLE[:2] + SAMPLE[2:3] + ["##other"] + SAMPLE[3:]
    result = parse(lines)
    assert result.echo == lines
    assert result.farm.start == "start"


def test_comment_after_start_command_skipped():
    lines = ["3", "##start", "#c", "s 0 0", "##end", "e 1 1", "s-e"]
    result = parse(lines)
    assert result.farm.start == "s"
    assert result.echo == lines


def test_empty_line_stops_reading():
    result = parse(SAMPLE + ["", "junk"])
    assert result.echo == SAMPLE


def test_room_after_tunnels_stops_reading():
    lines = SAMPLE + ["extra 5 5", "start-end"]
    result = parse(lines)
    assert result.echo == SAMPLE + ["extra 5 5"]
    assert not result.farm.has_room("extra")
    assert "end" not in result.farm.room("start").links


def test_bad_coordinates_stop_reading():
    lines = ["3", "##start", "s 1 1", "##end", "e 2 2", "x a 1", "s-e"]
    result = parse(lines)
    assert not result.farm.has_room("x")
    assert not result.farm.has_tunnels()
    assert result.echo == lines[:-1]


def test_duplicate_tunnel_after_complete_is_tolerated():
    result = parse(SAMPLE + ["start-middle"])
    assert result.farm.room("start").links == ["middle"]


def test_self_tunnel_on_first_room_is_tolerated():
    result = parse(["3", "##start", "s 0 0", "##end", "e 1 1", "s-s"])
    assert result.farm.room("s").links == ["s"]


def test_self_tunnel_before_complete_fails():
    with pytest.raises(FarmError):
        parse(["3", "##start", "s 0 0", "##end", "e 1 1", "e-e"])


@pytest.mark.parametrize("count", ["0", "32768", "", "abc", "-3", "3 "])
def test_bad_ant_count(count):
    with pytest.raises(FarmError):
        parse([count, *SAMPLE[1:]])


def test_ant_count_error_keeps_echo():
    with pytest.raises(FarmError) as info:
        parse(["0", *SAMPLE[1:]])
    assert info.value.echo == ["0"]


def test_non_numeric_ant_count_not_echoed():
    with pytest.raises(FarmError) as info:
        parse(["abc", *SAMPLE[1:]])
    assert info.value.echo == []


def test_empty_input_fails():
    with pytest.raises(FarmError):
        parse([])


def test_room_name_starting_with_l_fails():
    with pytest.raises(FarmError):
        parse(["3", "##start", "Lroom 1 1"])


def test_duplicate_room_fails():
    with pytest.raises(FarmError) as info:
        parse(["3", "a 1 1", "a 2 2"])
    assert info.value.echo == ["3", "a 1 1", "a 2 2"]


def test_tunnel_to_unknown_room_fails():
    with pytest.raises(FarmError):
        parse(["3", "##start", "s 1 1", "##end", "e 2 2", "s-x"])


def test_missing_end_fails():
    with pytest.raises(FarmError):
        parse(["3", "##start", "s 1 1", "e 2 2", "s-e"])


def test_second_start_before_complete_fails():
    with pytest.raises(FarmError):
        parse(["3", "##start", "s 1 1", "##start", "t 2 2"])


def test_start_command_at_end_of_input_fails():
    with pytest.raises(FarmError):
        parse(["3", "##start"])


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("", True), ("-1", False), ("1a", False), ("+4", False)],
)
def test_is_number(text, expected):
    assert is_number(text) is expected


def test_read_lines_keeps_empty_lines():
    assert list(read_lines(io.StringIO("a\n\nb"))) == ["a", "", "b"]


def test_read_lines_drops_final_newline():
    assert list(read_lines(io.StringIO("a\nb\n"))) == ["a", "b"]


def test_read_lines_round_trip_into_parse():
    text = "\n".join(SAMPLE) + "\n"
    assert parse(read_lines(io.StringIO(text))).echo == SAMPLE