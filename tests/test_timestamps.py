import pytest

from capshift.core.time_value import TimeValue
from capshift.core.timestamps import (
    find_timestamps,
    format_timestamp_range,
    offset_timestamps,
    parse_any_timestamp,
    parse_timestamp,
    parse_timestamp_range,
)
from capshift.exceptions import InvalidTimestamp, NegativeTime


def test_parse_timestamp() -> None:
    value = parse_timestamp("23:54:17.837", ".")
    assert (value.hours, value.minutes, value.seconds, value.milliseconds) == (23, 54, 17, 837)
    assert parse_timestamp("00:01:02,500", ",").to_milliseconds() == 62_500


@pytest.mark.parametrize(
    "token",
    [
        "cat",
        "            ",
        "00:00:00,000",  # wrong separator for the dot format
        "00-00:00.000",
        "00:00:00.00",
        "00:00:00.0000",
        "0a:00:00.000",
        " 1:00:00.000",
        "00:61:00.000",
        "00:00:00.-01",
    ],
)
def test_parse_timestamp_rejects(token) -> None:
    with pytest.raises(InvalidTimestamp) as excinfo:
        parse_timestamp(token, ".")
    assert excinfo.value.token == token


def test_parse_range() -> None:
    start, end = parse_timestamp_range("00:00:00,000 --> 00:00:01,000", ",")
    assert start.to_milliseconds() == 0
    assert end.to_milliseconds() == 1000


@pytest.mark.parametrize(
    "text",
    [
        "00:00:00.000 -> 00:00:01.000",
        "00:00:00.000  --> 00:00:01.000",
        "00:00:00.000 --> 00:00:01.000 align:start",
        "00:00:00.000-->00:00:01.000",
        "",
    ],
)
def test_parse_range_rejects_structure(text) -> None:
    with pytest.raises(InvalidTimestamp) as excinfo:
        parse_timestamp_range(text, ".")
    assert excinfo.value.token == text


def test_parse_range_reports_bad_token() -> None:
    with pytest.raises(InvalidTimestamp) as excinfo:
        parse_timestamp_range("00:00:00.000 --> 00:00:01,000", ".")
    assert excinfo.value.token == "00:00:01,000"


def test_format_range() -> None:
    start = TimeValue.from_milliseconds(1_500)
    end = TimeValue.from_milliseconds(3_723_004)
    assert format_timestamp_range(start, end, ",") == "00:00:01,500 --> 01:02:03,004"


def test_parse_any_timestamp() -> None:
    assert parse_any_timestamp("00:00:01,250").to_milliseconds() == 1_250
    assert parse_any_timestamp(" 00:00:01.250 ").to_milliseconds() == 1_250


def test_find_timestamps_positions() -> None:
    text = "from 00:00:01.000 to 00:00:02,500 and 1234:00:00.000"
    found = list(find_timestamps(text))
    assert [match.token for match in found] == ["00:00:01.000", "00:00:02,500"]
    assert text[found[0].start : found[0].end] == "00:00:01.000"
    assert found[1].separator == ","
    assert found[1].time.to_milliseconds() == 2_500


def test_find_timestamps_is_lazy() -> None:
    matches = find_timestamps("00:00:01.000 00:99:00.000")
    assert next(matches).token == "00:00:01.000"
    with pytest.raises(InvalidTimestamp):
        next(matches)


def test_offset_timestamps_preserves_text() -> None:
    text = "(00:00:00,000) --> (00:00:01,543)"
    assert offset_timestamps(text, 100) == "(00:00:00,100) --> (00:00:01,643)"


def test_offset_timestamps_keeps_separator() -> None:
    text = "a 00:00:00.900 b 00:00:00,900 c"
    assert offset_timestamps(text, 100) == "a 00:00:01.000 b 00:00:01,000 c"


def test_offset_timestamps_without_matches() -> None:
    assert offset_timestamps("no times here\n", 5000) == "no times here\n"


def test_offset_timestamps_negative() -> None:
    with pytest.raises(NegativeTime):
        offset_timestamps("00:00:00,050", -100)


def test_only_ascii_digits_form_timestamps() -> None:
    text = "٠٠:٠٠:٠١,٠٠٠ then ٣00:00:01,000"
    assert list(find_timestamps("٠٠:٠٠:٠١,٠٠٠")) == []
    assert offset_timestamps(text, 500) == "٠٠:٠٠:٠١,٠٠٠ then ٣00:00:01,500"
