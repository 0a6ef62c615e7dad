"""Caption parsing, writing and timing operations."""

from capshift.core.caption import Caption, CaptionBlock, concatenate
from capshift.core.formats import (
    CaptionFormat,
    format_for_path,
    parse_document,
    select_format,
    write_document,
)
from capshift.core.time_value import TimeValue

__all__ = [
    "Caption",
    "CaptionBlock",
    "CaptionFormat",
    "TimeValue",
    "concatenate",
    "format_for_path",
    "parse_document",
    "select_format",
    "write_document",
]
