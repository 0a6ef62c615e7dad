"""
Caption file input and output
Reads and writes caption files, choosing the format from the extension
"""

import codecs
import logging
import shutil
from pathlib import Path
from typing import Tuple, Union

from capshift.core.caption import Caption
from capshift.core.formats import format_for_path, parse_document, write_document

logger = logging.getLogger(__name__)

# latin-1 maps every byte, so it always ends the search
ENCODINGS = ["utf-8-sig", "cp1252", "latin-1"]

PathLike = Union[str, Path]


def read_text_with_encoding(path: PathLike) -> Tuple[str, str]:
    """
    Read a text file, trying several encodings in turn

    Parameters:
        path: File to read

    Returns:
        Tuple of (contents without any UTF-8 byte order mark, encoding that
        writes the same bytes back)
    """
    raw = Path(path).read_bytes()
    for encoding in ENCODINGS[:-1]:
        try:
            content = raw.decode(encoding)
        except UnicodeDecodeError:
            continue
        break
    else:
        encoding = ENCODINGS[-1]
        content = raw.decode(encoding)

    if encoding == "utf-8-sig" and not raw.startswith(codecs.BOM_UTF8):
        encoding = "utf-8"
    logger.debug("Read %s as %s", path, encoding)
    return content, encoding


def read_caption_text(path: PathLike) -> str:
    """Read a text file in the first encoding that decodes it"""
    return read_text_with_encoding(path)[0]


def write_text(path: PathLike, content: str, encoding: str = "utf-8") -> None:
    """Write text, creating parent directories as needed"""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding=encoding, newline="\n") as file:
        file.write(content)


def load_caption(path: PathLike) -> Caption:
    """Read and parse a caption file; the format comes from its extension"""
    caption_format = format_for_path(path)
    caption = parse_document(caption_format, read_caption_text(path))
    logger.info("Loaded %d blocks from %s", len(caption), path)
    return caption


def render_caption(caption: Caption, path: PathLike, start_index: int = 1) -> str:
    """Render a caption in the format of the path's extension without writing it"""
    return write_document(format_for_path(path), caption, start_index)


def save_caption(caption: Caption, path: PathLike, start_index: int = 1) -> None:
    """Render and write a caption file; the format comes from its extension"""
    write_text(path, render_caption(caption, path, start_index))
    logger.info("Wrote %d blocks to %s", len(caption), path)


def backup_path_for(path: PathLike, suffix: str = ".og") -> Path:
    """Backup location for a file: name.srt becomes name.og.srt"""
    input_file = Path(path)
    return input_file.with_suffix(suffix + input_file.suffix)


def backup_file(path: PathLike, suffix: str = ".og") -> Path:
    """Copy a file next to itself under its backup name"""
    backup_path = backup_path_for(path, suffix)
    shutil.copy2(path, backup_path)
    logger.info("Backed up %s to %s", path, backup_path)
    return backup_path
