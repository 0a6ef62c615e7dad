"""
Caption format dispatch
Maps file extensions to one of the two supported formats and routes parsing
and writing to the matching implementation
"""

from enum import Enum
from pathlib import Path
from typing import Union

from capshift.core.caption import Caption
from capshift.core.srt import SRTParser
from capshift.core.vtt import WebVTTParser
from capshift.exceptions import UnknownExtension, UnsupportedFileType


class CaptionFormat(Enum):
    """Supported caption formats"""

    DOT = "vtt"
    COMMA = "srt"

    @property
    def extension(self) -> str:
        return "." + self.value


EXTENSIONS = {
    "vtt": CaptionFormat.DOT,
    "txt": CaptionFormat.DOT,
    "srt": CaptionFormat.COMMA,
}


def select_format(extension: str) -> CaptionFormat:
    """
    Choose a caption format from a file extension

    Parameters:
        extension: Extension with or without the leading dot, any case

    Raises:
        UnsupportedFileType: if the extension is not a caption extension
    """
    key = extension.lower().lstrip(".")
    caption_format = EXTENSIONS.get(key)
    if caption_format is None:
        raise UnsupportedFileType(extension)
    return caption_format


def format_for_path(path: Union[str, Path]) -> CaptionFormat:
    """Choose a caption format from a file path"""
    suffix = Path(path).suffix
    if not suffix:
        raise UnknownExtension(Path(path).name)
    return select_format(suffix)


def parse_document(caption_format: CaptionFormat, text: str) -> Caption:
    """Parse already-read caption text in the given format"""
    if caption_format is CaptionFormat.DOT:
        return WebVTTParser.parse_vtt_content(text)
    return SRTParser.parse_srt_content(text)


def write_document(
    caption_format: CaptionFormat, caption: Caption, start_index: int = 1
) -> str:
    """Render a caption in the given format"""
    if caption_format is CaptionFormat.DOT:
        return WebVTTParser.generate_vtt_content(caption, start_index)
    return SRTParser.generate_srt_content(caption, start_index)
