"""
Caption command operations
Each method runs one CLI command end to end and reports the outcome
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from capshift.config.config import ConfigManager
from capshift.core.caption import concatenate
from capshift.core.files import backup_path_for, load_caption, save_caption
from capshift.core.time_value import TimeValue
from capshift.core.timing import CaptionTimingAdjuster
from capshift.exceptions import ConfigurationError
from capshift.ui.components import UIComponents
from capshift.ui.input import UserInput

logger = logging.getLogger(__name__)


class Operations:
    """Caption operations behind the command line"""

    def __init__(self, console: Console, settings: ConfigManager, force: bool = False):
        self.console = console
        self.settings = settings
        self.force = force
        self.timing_adjuster = CaptionTimingAdjuster()
        self.ui = UIComponents(console)
        self.input_handler = UserInput(console)

    def _can_write(self, output_path: str) -> bool:
        """Check the output path, asking before an existing file is replaced"""
        if self.force or not os.path.exists(output_path):
            return True
        if self.input_handler.confirm_overwrite(output_path):
            return True
        self.ui.show_warning("Cancelled, %s left unchanged" % output_path)
        return False

    def _parse_offset(self, offset_input: str) -> int:
        max_offset = self.settings.get_max_offset_ms()
        offset_ms = self.timing_adjuster.validate_offset(offset_input, max_offset)
        if offset_ms is None:
            message = "Invalid offset %r" % offset_input
            if max_offset:
                message += " (must be a number of milliseconds within ±%d)" % max_offset
            raise ConfigurationError(message, "offset")
        return offset_ms

    def show_info(self, input_path: str):
        """Display a summary of a caption file"""
        caption = load_caption(input_path)
        summary_table = self.ui.show_caption_summary(os.path.basename(input_path), caption)
        self.console.print(summary_table)

    def adjust_timing(
        self,
        input_path: str,
        output_path: Optional[str],
        offset_input: Optional[str] = None,
        tail_from: Optional[str] = None,
        block_offset: int = 0,
    ) -> bool:
        """
        Shift a caption file by an explicit offset, the tail of another file, or both

        Args:
            input_path: Caption file to shift
            output_path: Destination, or None to rewrite the input after a backup
            offset_input: Offset in milliseconds as typed by the user
            tail_from: Caption file whose last end time is added to the offset
            block_offset: Amount added to every written block number

        Returns:
            True if a file was written
        """
        if offset_input is None and tail_from is None:
            raise ConfigurationError("Give --offset, --tail-from or both", "offset")

        offset_ms = 0
        if offset_input is not None:
            offset_ms += self._parse_offset(offset_input)
        if tail_from is not None:
            offset_ms += self.timing_adjuster.offset_from_tail(tail_from)
        logger.info("Shifting %s by %+d ms", input_path, offset_ms)

        if output_path is None:
            backup_suffix = self.settings.get_backup_suffix()
            backup_path = backup_path_for(input_path, backup_suffix)
            if not self._can_write(str(backup_path)):
                return False
            result = self.timing_adjuster.adjust_file_with_backup(
                input_path, offset_ms, backup_suffix, start_index=1 + block_offset
            )
        else:
            if not self._can_write(output_path):
                return False
            result = self.timing_adjuster.adjust_file(
                input_path, output_path, offset_ms, start_index=1 + block_offset
            )

        result_table = self.ui.show_timing_adjustment_results(input_path, result)
        self.console.print(result_table)
        self.ui.show_success("Timing adjustment completed: %s" % result.message)
        return True

    def crop(
        self,
        input_path: str,
        output_path: str,
        start: Optional[TimeValue],
        end: Optional[TimeValue],
    ) -> bool:
        """Keep only the blocks inside a time window"""
        caption = load_caption(input_path)
        cropped = caption.crop(start, end)

        if not self._can_write(output_path):
            return False
        save_caption(cropped, output_path)

        if not cropped.blocks:
            self.ui.show_warning("No blocks fall inside the crop window")

        result_table = self.ui.show_crop_results(
            output_path, len(caption), len(cropped), start, end
        )
        self.console.print(result_table)
        return True

    def concatenate(self, input_paths: List[str], output_path: str) -> bool:
        """Join caption files one after another"""
        captions = [load_caption(input_path) for input_path in input_paths]
        joined = concatenate(captions)

        if not self._can_write(output_path):
            return False
        save_caption(joined, output_path)

        inputs = []
        for input_path, caption in zip(input_paths, captions):
            inputs.append((os.path.basename(input_path), len(caption)))
        result_table = self.ui.show_concatenation_results(inputs, output_path, joined)
        self.console.print(result_table)
        return True

    def convert(self, input_path: str, output_path: str) -> bool:
        """Rewrite a caption file in the format of the output extension"""
        caption = load_caption(input_path)

        if Path(input_path).resolve() == Path(output_path).resolve():
            raise ConfigurationError("Input and output are the same file", "output")
        if not self._can_write(output_path):
            return False
        save_caption(caption, output_path)

        if caption.header is not None and Path(output_path).suffix.lower() == ".srt":
            self.ui.show_warning("SRT has no header; the header was dropped")

        result_table = self.ui.show_conversion_results(input_path, output_path, len(caption))
        self.console.print(result_table)
        return True

    def offset_raw_timestamps(self, input_path: str, output_path: str, offset_input: str) -> bool:
        """Shift every timestamp found in an arbitrary text file"""
        offset_ms = self._parse_offset(offset_input)

        if not self._can_write(output_path):
            return False
        shifted_count = self.timing_adjuster.offset_text_file(input_path, output_path, offset_ms)

        self.ui.show_success(
            "Shifted %d timestamps by %+d ms into %s" % (shifted_count, offset_ms, output_path)
        )
        return True
