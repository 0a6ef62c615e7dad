"""
SRT caption parser and writer
Handles the comma-separated format without a marker line, where the speaker
is written as a bracketed prefix on the text line
"""

import logging
from typing import Optional, Tuple

from capshift.core.caption import Caption, CaptionBlock
from capshift.core.lines import (
    check_block_layout,
    check_start_index,
    iter_block_groups,
    split_lines,
)
from capshift.core.timestamps import (
    COMMA_SEPARATOR,
    format_timestamp_range,
    parse_timestamp_range,
)
from capshift.exceptions import InvalidSpeakerPlacement, UnrepresentableBlock

logger = logging.getLogger(__name__)


class SRTParser:
    """Parser and writer for the SRT caption format"""

    @staticmethod
    def parse_text_line(line: str) -> Tuple[Optional[str], str]:
        """
        Split "[speaker] text" into its parts

        Returns:
            Tuple of (speaker or None, text)
        """
        if not line.startswith("["):
            if "[" in line:
                raise InvalidSpeakerPlacement(line)
            return None, line

        closing = line.find("]")
        if closing == -1:
            raise InvalidSpeakerPlacement(line)

        remainder = line[closing + 1 :]
        if not remainder.startswith(" "):
            raise InvalidSpeakerPlacement(line)

        return line[1:closing], remainder[1:]

    @staticmethod
    def parse_srt_content(content: str) -> Caption:
        """
        Parse SRT content into a Caption

        Parameters:
            content: Full text of the caption file

        Returns:
            Caption with every block in file order and no header
        """
        lines = split_lines(content)
        if not lines:
            return Caption()

        # Every block after the first is preceded by a blank line; give the
        # first one the same shape
        lines.insert(0, "")

        blocks = []
        for range_line, text_line in iter_block_groups(lines):
            start, end = parse_timestamp_range(range_line, COMMA_SEPARATOR)
            speaker, text = SRTParser.parse_text_line(text_line)
            blocks.append(CaptionBlock(start=start, end=end, text=text, speaker=speaker))

        logger.debug("Parsed %d SRT blocks", len(blocks))
        return Caption(blocks=blocks)

    @staticmethod
    def check_block(block: CaptionBlock, is_last: bool = False) -> str:
        """
        Build the text line for a block, rejecting blocks it cannot encode

        Without a speaker any "[" would be read back as a misplaced or
        spurious speaker prefix; a speaker must not contain "]".

        Returns:
            The text line to write
        """
        if block.speaker is not None:
            if "]" in block.speaker:
                raise UnrepresentableBlock(block, "closing bracket in speaker")
            text_line = "[%s] %s" % (block.speaker, block.text)
        else:
            if "[" in block.text:
                raise UnrepresentableBlock(block, "bracket in text without a speaker")
            text_line = block.text

        check_block_layout(block, text_line, is_last)
        return text_line

    @staticmethod
    def generate_srt_content(caption: Caption, start_index: int = 1) -> str:
        """
        Render a Caption as SRT text

        Parameters:
            caption: Caption to render; its header is not written
            start_index: Number given to the first block, at least 1

        Returns:
            Complete SRT content, blocks renumbered sequentially

        Raises:
            WriteError: if a block or the numbering would not read back unchanged
        """
        check_start_index(start_index)
        last_position = len(caption.blocks) - 1
        text_lines = [
            SRTParser.check_block(block, position == last_position)
            for position, block in enumerate(caption.blocks)
        ]

        srt_lines = []
        for block_index, (block, text_line) in enumerate(
            zip(caption.blocks, text_lines), start_index
        ):
            if srt_lines:
                srt_lines.append("")
            srt_lines.append(str(block_index))
            srt_lines.append(format_timestamp_range(block.start, block.end, COMMA_SEPARATOR))
            srt_lines.append(text_line)

        if not srt_lines:
            return ""
        return "\n".join(srt_lines) + "\n"
