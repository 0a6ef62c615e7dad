"""
Caption timing adjustment utility
Shifts caption files by a millisecond offset, optionally backing up the original
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from capshift.core.files import (
    backup_file,
    load_caption,
    read_text_with_encoding,
    render_caption,
    save_caption,
    write_text,
)
from capshift.core.timestamps import find_timestamps, offset_timestamps

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class AdjustmentResult:
    """Outcome of a timing adjustment"""

    output_path: Path
    entries_processed: int
    offset_ms: int
    backup_path: Optional[Path] = None

    @property
    def message(self) -> str:
        offset_seconds = self.offset_ms / 1000
        direction = "forward" if self.offset_ms >= 0 else "backward"
        return "Adjusted %d entries by %.3fs %s" % (
            self.entries_processed,
            abs(offset_seconds),
            direction,
        )


class CaptionTimingAdjuster:
    """Utility for adjusting caption timing"""

    @staticmethod
    def validate_offset(offset_input: str, max_offset_ms: int = 0) -> Optional[int]:
        """
        Validate and convert offset input to milliseconds

        Args:
            offset_input: User input string
            max_offset_ms: Largest allowed magnitude, 0 for no limit

        Returns:
            Offset in milliseconds or None if invalid
        """
        try:
            offset_ms = int(float(offset_input.strip()))
        except (ValueError, TypeError, AttributeError, OverflowError):
            return None
        if max_offset_ms and abs(offset_ms) > max_offset_ms:
            return None
        return offset_ms

    @staticmethod
    def offset_from_tail(path: PathLike) -> int:
        """
        Offset that places a caption right after another file ends

        Args:
            path: Caption file whose last end time is used

        Returns:
            Last end time of that file in milliseconds
        """
        tail_ms = load_caption(path).last_time().to_milliseconds()
        logger.debug("Tail of %s is at %d ms", path, tail_ms)
        return tail_ms

    @staticmethod
    def adjust_file(
        input_path: PathLike,
        output_path: PathLike,
        offset_ms: int,
        start_index: int = 1,
    ) -> AdjustmentResult:
        """
        Shift every block of a caption file and write the result

        Args:
            input_path: Caption file to read
            output_path: Caption file to write, in the format of its extension
            offset_ms: Offset in milliseconds (positive or negative)
            start_index: Number given to the first written block

        Returns:
            AdjustmentResult describing the written file
        """
        caption = load_caption(input_path)
        adjusted = caption.offset_all(offset_ms)
        save_caption(adjusted, output_path, start_index)
        return AdjustmentResult(Path(output_path), len(adjusted), offset_ms)

    @staticmethod
    def adjust_file_with_backup(
        input_path: PathLike,
        offset_ms: int,
        backup_suffix: str = ".og",
        start_index: int = 1,
    ) -> AdjustmentResult:
        """
        Adjust a caption file in place, backing up the original first

        Nothing is copied or written unless the file parses and every block
        can be shifted and written back.
        """
        caption = load_caption(input_path)
        adjusted = caption.offset_all(offset_ms)
        content = render_caption(adjusted, input_path, start_index)

        backup_path = backup_file(input_path, backup_suffix)
        write_text(input_path, content)
        return AdjustmentResult(Path(input_path), len(adjusted), offset_ms, backup_path)

    @staticmethod
    def offset_text_file(input_path: PathLike, output_path: PathLike, offset_ms: int) -> int:
        """
        Shift raw timestamps found anywhere in a text file

        The output keeps the input encoding, byte order mark and line endings.

        Returns:
            Number of timestamps shifted
        """
        content, encoding = read_text_with_encoding(input_path)
        shifted = offset_timestamps(content, offset_ms)
        write_text(output_path, shifted, encoding)
        return sum(1 for _ in find_timestamps(content))
