#!/usr/bin/env python3
"""
Main entry point for the caption offset tool
Shift, crop, join and convert WEBVTT and SRT caption files
"""

import argparse
import sys
from typing import List, Optional

from rich.console import Console

from capshift import __version__
from capshift.config.config import config
from capshift.core.timestamps import parse_any_timestamp
from capshift.exceptions import CaptionError, ConfigurationError
from capshift.logger import setup_logging
from capshift.operations import Operations
from capshift.ui.components import UIComponents


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser"""
    parser = argparse.ArgumentParser(
        prog="capshift",
        description="Caption offset tool for WEBVTT and SRT files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
        Examples:
        capshift offset talk.srt talk.out.srt --offset 1500
        capshift offset part2.vtt part2.out.vtt --tail-from part1.vtt
        capshift crop talk.vtt excerpt.vtt --from 00:01:00.000 --to 00:02:00.000
        capshift concat full.srt part1.srt part2.srt
        capshift convert talk.vtt talk.srt

        Formats:
        • .vtt / .txt  WEBVTT marker, "Speaker 00:00:00.000 --> 00:00:01.000"
        • .srt         "00:00:00,000 --> 00:00:01,000", "[Speaker] text"
        """,
    )
    parser.add_argument("--version", action="version", version="capshift v%s" % __version__)
    parser.add_argument(
        "--force", action="store_true", help="Overwrite existing files without asking"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level (default: CAPSHIFT_LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    offset_parser = subparsers.add_parser("offset", help="Shift every caption time")
    offset_parser.add_argument("input", help="The file to calculate new offsets for")
    offset_parser.add_argument(
        "output", nargs="?", help="The file to write with new offsets"
    )
    offset_parser.add_argument(
        "--offset", metavar="MS", help="The offset time in milliseconds to be applied"
    )
    offset_parser.add_argument(
        "--tail-from",
        metavar="FILE",
        help="A file from whose tail you would like to calculate the offset",
    )
    offset_parser.add_argument(
        "--block-offset",
        type=int,
        default=0,
        metavar="N",
        help="The number to add to all block numbers (0 or more)",
    )
    offset_parser.add_argument(
        "--in-place",
        action="store_true",
        help="Back up the input and rewrite it instead of writing OUTPUT",
    )

    crop_parser = subparsers.add_parser("crop", help="Keep captions inside a time window")
    crop_parser.add_argument("input")
    crop_parser.add_argument("output")
    crop_parser.add_argument("--from", dest="start", metavar="HH:MM:SS.mmm")
    crop_parser.add_argument("--to", dest="end", metavar="HH:MM:SS.mmm")

    concat_parser = subparsers.add_parser("concat", help="Join caption files in order")
    concat_parser.add_argument("output")
    concat_parser.add_argument("inputs", nargs="+")

    convert_parser = subparsers.add_parser("convert", help="Convert between WEBVTT and SRT")
    convert_parser.add_argument("input")
    convert_parser.add_argument("output")

    info_parser = subparsers.add_parser("info", help="Summarize a caption file")
    info_parser.add_argument("input")

    stamps_parser = subparsers.add_parser(
        "stamps", help="Shift every timestamp found in any text file"
    )
    stamps_parser.add_argument("input")
    stamps_parser.add_argument("output")
    stamps_parser.add_argument("--offset", metavar="MS", required=True)

    return parser


def run_command(args: argparse.Namespace, operations: Operations) -> bool:
    """Dispatch parsed arguments to an operation"""
    if args.command == "offset":
        if args.in_place == (args.output is not None):
            raise ConfigurationError("Give either OUTPUT or --in-place", "output")
        return operations.adjust_timing(
            args.input,
            args.output,
            offset_input=args.offset,
            tail_from=args.tail_from,
            block_offset=args.block_offset,
        )
    if args.command == "crop":
        start = parse_any_timestamp(args.start) if args.start else None
        end = parse_any_timestamp(args.end) if args.end else None
        return operations.crop(args.input, args.output, start, end)
    if args.command == "concat":
        return operations.concatenate(args.inputs, args.output)
    if args.command == "convert":
        return operations.convert(args.input, args.output)
    if args.command == "info":
        operations.show_info(args.input)
        return True
    return operations.offset_raw_timestamps(args.input, args.output, args.offset)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)
    console = Console()

    try:
        log_level = args.log_level or config.get_log_level()
        setup_logging(log_level, config.get_log_file())

        operations = Operations(console, config, force=args.force)
        completed = run_command(args, operations)
        return 0 if completed else 1

    except KeyboardInterrupt:
        console.print("\n\nCancelled by user.")
        return 130
    except (CaptionError, ConfigurationError) as error:
        UIComponents(console).show_error(str(error))
        return 1
    except OSError as error:
        UIComponents(console).show_error("File error: %s" % error)
        return 1


if __name__ == "__main__":
    sys.exit(main())
