"""
WebVTT-style caption parser and writer
Handles the dot-separated format with a WEBVTT marker line and the speaker
written in front of the timestamp range
"""

import logging
import string
from typing import List, Optional, Tuple

from capshift.core.caption import Caption, CaptionBlock
from capshift.core.lines import (
    check_block_layout,
    check_start_index,
    iter_block_groups,
    split_lines,
)
from capshift.core.time_value import TimeValue
from capshift.core.timestamps import (
    DOT_SEPARATOR,
    format_timestamp_range,
    parse_timestamp_range,
)
from capshift.exceptions import (
    BlockHeaderInvalid,
    ExpectedBlankLine,
    UnexpectedEndOfFile,
    UnrepresentableBlock,
    UnrepresentableHeader,
)

logger = logging.getLogger(__name__)

MARKER = "WEBVTT"
HEADER_GAP = 2


def _first_digit(line: str) -> Optional[int]:
    return next(
        (index for index, char in enumerate(line) if char in string.digits), None
    )


class WebVTTParser:
    """Parser and writer for the WEBVTT caption format"""

    @staticmethod
    def parse_block_header(line: str) -> Tuple[Optional[str], TimeValue, TimeValue]:
        """
        Split a block header line into speaker and time range

        Parameters:
            line: Either "<range>" or "<speaker> <range>"

        Returns:
            Tuple of (speaker or None, start, end)
        """
        digit_index = _first_digit(line)
        if digit_index == 0:
            start, end = parse_timestamp_range(line, DOT_SEPARATOR)
            return None, start, end

        if digit_index is None or line[digit_index - 1] != " ":
            raise BlockHeaderInvalid(line)

        speaker = line[: digit_index - 1]
        start, end = parse_timestamp_range(line[digit_index:], DOT_SEPARATOR)
        return speaker, start, end

    @staticmethod
    def split_header(lines: List[str]) -> Tuple[Optional[str], int]:
        """
        Locate the marker line and extract the header text before it

        Returns:
            Tuple of (header or None, index of the marker line)
        """
        try:
            marker_index = lines.index(MARKER)
        except ValueError:
            raise UnexpectedEndOfFile("no %s marker line found" % MARKER) from None

        gap_start = max(0, marker_index - HEADER_GAP)
        for line in lines[gap_start:marker_index]:
            if line != "":
                raise ExpectedBlankLine(line)

        if marker_index <= HEADER_GAP:
            return None, marker_index
        return "\n".join(lines[:gap_start]), marker_index

    @staticmethod
    def parse_vtt_content(content: str) -> Caption:
        """
        Parse WEBVTT content into a Caption

        Parameters:
            content: Full text of the caption file

        Returns:
            Caption with the header (if any) and every block in file order
        """
        lines = split_lines(content)
        header, marker_index = WebVTTParser.split_header(lines)

        blocks = []
        for header_line, text in iter_block_groups(lines[marker_index + 1 :]):
            speaker, start, end = WebVTTParser.parse_block_header(header_line)
            blocks.append(CaptionBlock(start=start, end=end, text=text, speaker=speaker))

        logger.debug("Parsed %d WEBVTT blocks", len(blocks))
        return Caption(blocks=blocks, header=header)

    @staticmethod
    def check_header(header: str) -> None:
        """The header may span lines but must not hold the marker line itself"""
        if "\r" in header or MARKER in header.split("\n"):
            raise UnrepresentableHeader(header)

    @staticmethod
    def check_block(block: CaptionBlock, is_last: bool = False) -> str:
        """
        Build the header line for a block, rejecting blocks it cannot encode

        The speaker ends where the first digit begins, so it may not hold
        any digit itself.

        Returns:
            The block header line to write
        """
        time_range = format_timestamp_range(block.start, block.end, DOT_SEPARATOR)
        if block.speaker is None:
            header_line = time_range
        elif _first_digit(block.speaker) is not None:
            raise UnrepresentableBlock(block, "digit in speaker")
        else:
            header_line = "%s %s" % (block.speaker, time_range)

        check_block_layout(block, block.text, is_last)
        return header_line

    @staticmethod
    def generate_vtt_content(caption: Caption, start_index: int = 1) -> str:
        """
        Render a Caption as WEBVTT text

        Parameters:
            caption: Caption to render
            start_index: Number given to the first block, at least 1

        Returns:
            Complete WEBVTT content, blocks renumbered sequentially

        Raises:
            WriteError: if the header, a block or the numbering would not
                read back unchanged
        """
        check_start_index(start_index)
        if caption.header is not None:
            WebVTTParser.check_header(caption.header)
        last_position = len(caption.blocks) - 1
        header_lines = [
            WebVTTParser.check_block(block, position == last_position)
            for position, block in enumerate(caption.blocks)
        ]

        vtt_lines = []
        if caption.header is not None:
            vtt_lines.append(caption.header)
            vtt_lines.extend([""] * HEADER_GAP)
        vtt_lines.append(MARKER)

        for block_index, (block, header_line) in enumerate(
            zip(caption.blocks, header_lines), start_index
        ):
            vtt_lines.append("")
            vtt_lines.append(str(block_index))
            vtt_lines.append(header_line)
            vtt_lines.append(block.text)

        return "\n".join(vtt_lines) + "\n"
