"""Line handling shared by the caption parsers and writers."""

import re
from typing import Iterator, List, Tuple

from capshift.core.timestamps import MAX_HOURS
from capshift.exceptions import (
    ExpectedBlankLine,
    ExpectedBlockNumber,
    InvalidStartIndex,
    UnexpectedEndOfFile,
    UnrepresentableBlock,
)

BLOCK_SIZE = 4
BLOCK_NUMBER_PATTERN = re.compile(r"[0-9]+")
LINE_BREAKS = ("\n", "\r")


def split_lines(content: str) -> List[str]:
    """Split content into lines, ignoring line-ending style and trailing blank lines"""
    normalized_content = content.replace("\r\n", "\n").replace("\r", "\n")
    lines = normalized_content.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def iter_block_groups(lines: List[str]) -> Iterator[Tuple[str, str]]:
    """
    Yield (header line, text line) for each four line block

    Every block is a blank line, a block number, a header line and a text
    line. Block numbers are checked and discarded.
    """
    if len(lines) % BLOCK_SIZE != 0:
        raise UnexpectedEndOfFile(
            "%d block lines do not form complete blocks" % len(lines)
        )

    for position in range(0, len(lines), BLOCK_SIZE):
        blank, number, header, text = lines[position : position + BLOCK_SIZE]
        if blank != "":
            raise ExpectedBlankLine(blank)
        if not BLOCK_NUMBER_PATTERN.fullmatch(number):
            raise ExpectedBlockNumber(number)
        yield header, text


def has_line_break(value: str) -> bool:
    return any(char in value for char in LINE_BREAKS)


def check_start_index(start_index: int) -> None:
    """Block numbers are written unsigned and counted from 1"""
    if start_index < 1:
        raise InvalidStartIndex(start_index)


def check_block_layout(block, text_line: str, is_last: bool) -> None:
    """
    Reject a block that would not read back as the same four lines

    Parameters:
        block: Block about to be written
        text_line: The text line exactly as it will be written
        is_last: Whether this is the final block of the document
    """
    if has_line_break(block.text) or has_line_break(block.speaker or ""):
        raise UnrepresentableBlock(block, "line break in text or speaker")
    if block.end.hours > MAX_HOURS:
        raise UnrepresentableBlock(block, "time past %d hours" % MAX_HOURS)
    # Trailing blank lines are dropped when reading
    if is_last and text_line == "":
        raise UnrepresentableBlock(block, "empty text in the last block")
