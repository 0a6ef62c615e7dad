"""
Timestamp grammar shared by both caption formats
Parses and renders HH:MM:SS<sep>mmm tokens and "<start> --> <end>" ranges,
and locates raw timestamps inside arbitrary text
"""

import re
from typing import Iterator, NamedTuple, Tuple

from capshift.core.time_value import TimeValue
from capshift.exceptions import InvalidTimestamp, OutOfRange

DOT_SEPARATOR = "."
COMMA_SEPARATOR = ","
ARROW = "-->"
TIMESTAMP_LENGTH = 12
MAX_HOURS = 99

# Digits on either side are excluded so longer numeric runs are not split
TIMESTAMP_PATTERN = re.compile(
    r"(?<![0-9])([0-9]{2}):([0-9]{2}):([0-9]{2})([,.])([0-9]{3})(?![0-9])"
)


class TimestampMatch(NamedTuple):
    """Raw timestamp found in text"""

    start: int
    end: int
    token: str
    separator: str
    time: TimeValue


def _parse_digits(token: str, group: str) -> int:
    if not (group.isascii() and group.isdigit()):
        raise InvalidTimestamp(token)
    return int(group)


def parse_timestamp(token: str, separator: str) -> TimeValue:
    """
    Parse a 12 character timestamp token

    Parameters:
        token: Text such as "00:01:02.500"
        separator: Character expected before the milliseconds ("." or ",")

    Returns:
        Parsed TimeValue

    Raises:
        InvalidTimestamp: on a wrong length, separator or digit group, or
            when minutes/seconds are out of range
    """
    if len(token) != TIMESTAMP_LENGTH:
        raise InvalidTimestamp(token)
    if token[2] != ":" or token[5] != ":" or token[8] != separator:
        raise InvalidTimestamp(token)

    hours = _parse_digits(token, token[0:2])
    minutes = _parse_digits(token, token[3:5])
    seconds = _parse_digits(token, token[6:8])
    milliseconds = _parse_digits(token, token[9:12])

    try:
        return TimeValue.from_components(hours, minutes, seconds, milliseconds)
    except OutOfRange as error:
        raise InvalidTimestamp(token) from error


def parse_timestamp_range(text: str, separator: str) -> Tuple[TimeValue, TimeValue]:
    """
    Parse "<start> --> <end>" with exactly one space around the arrow

    Raises:
        InvalidTimestamp: carrying the whole range when the word structure is
            wrong, or the offending token when a timestamp is malformed
    """
    words = text.split(" ")
    if len(words) != 3 or words[1] != ARROW:
        raise InvalidTimestamp(text)

    start = parse_timestamp(words[0], separator)
    end = parse_timestamp(words[2], separator)
    return start, end


def format_timestamp_range(start: TimeValue, end: TimeValue, separator: str) -> str:
    """Render a timestamp range line"""
    return "%s %s %s" % (start.format(separator), ARROW, end.format(separator))


def parse_any_timestamp(token: str) -> TimeValue:
    """Parse a timestamp written with either separator"""
    token = token.strip()
    if len(token) == TIMESTAMP_LENGTH and token[8] == COMMA_SEPARATOR:
        return parse_timestamp(token, COMMA_SEPARATOR)
    return parse_timestamp(token, DOT_SEPARATOR)


def find_timestamps(text: str) -> Iterator[TimestampMatch]:
    """
    Lazily yield every raw timestamp in text, in order of position

    Matches never overlap. Tokens with out-of-range minutes or seconds raise
    InvalidTimestamp when reached.
    """
    for match in TIMESTAMP_PATTERN.finditer(text):
        hours, minutes, seconds, separator, milliseconds = match.groups()
        try:
            time = TimeValue.from_components(
                int(hours), int(minutes), int(seconds), int(milliseconds)
            )
        except OutOfRange as error:
            raise InvalidTimestamp(match.group(0)) from error
        yield TimestampMatch(match.start(), match.end(), match.group(0), separator, time)


def offset_timestamps(text: str, delta: int) -> str:
    """
    Shift every raw timestamp in text by delta milliseconds

    Each timestamp keeps its own separator; everything else is copied
    verbatim. Nothing is returned if any shift would go negative.

    Raises:
        NegativeTime: if a shifted timestamp would be before zero
    """
    pieces = []
    position = 0
    for found in find_timestamps(text):
        pieces.append(text[position : found.start])
        pieces.append(found.time.offset(delta).format(found.separator))
        position = found.end
    pieces.append(text[position:])
    return "".join(pieces)
