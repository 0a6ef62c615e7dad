"""Exception hierarchy for caption parsing, transformation and configuration."""

from typing import Optional


class CaptionError(Exception):
    """Base class for every error raised by the caption core."""


class ParseError(CaptionError):
    """Raised when caption text does not follow the expected line grammar."""


class UnexpectedEndOfFile(ParseError):
    """Marker line missing or the block lines do not divide into groups of four."""

    def __init__(self, detail: str = "unexpected end of file"):
        super().__init__(detail)
        self.detail = detail


class ExpectedBlankLine(ParseError):
    def __init__(self, line: str):
        super().__init__("Expected a blank line, found %r" % line)
        self.line = line


class ExpectedBlockNumber(ParseError):
    def __init__(self, token: str):
        super().__init__("Expected a block number, found %r" % token)
        self.token = token


class InvalidTimestamp(ParseError):
    def __init__(self, token: str):
        super().__init__("Invalid timestamp: %r" % token)
        self.token = token


class BlockHeaderInvalid(ParseError):
    def __init__(self, line: str):
        super().__init__("Invalid block header line: %r" % line)
        self.line = line


class InvalidSpeakerPlacement(ParseError):
    def __init__(self, line: str):
        super().__init__("Speaker bracket misplaced in line: %r" % line)
        self.line = line


class OutOfRange(CaptionError):
    """A time component lies outside its allowed range."""

    def __init__(self, field: str, value: int):
        super().__init__("%s out of range: %s" % (field, value))
        self.field = field
        self.value = value


class EndsBeforeStart(CaptionError):
    def __init__(self, start, end):
        super().__init__("Block ends (%s) before it starts (%s)" % (end, start))
        self.start = start
        self.end = end


class NegativeTime(CaptionError):
    """An offset would move a time before zero."""

    def __init__(self, milliseconds: int, delta: int):
        super().__init__(
            "Offset of %d ms applied to %d ms gives a negative time" % (delta, milliseconds)
        )
        self.milliseconds = milliseconds
        self.delta = delta


class EmptyDocument(CaptionError):
    def __init__(self):
        super().__init__("Caption has no blocks")


class InvalidCropWindow(CaptionError):
    def __init__(self, start, end):
        if start is None and end is None:
            message = "Crop needs at least one of start or end"
        else:
            message = "Crop window starts (%s) after it ends (%s)" % (start, end)
        super().__init__(message)
        self.start = start
        self.end = end


class WriteError(CaptionError):
    """Raised when a caption cannot be written so that it reads back unchanged."""


class UnrepresentableBlock(WriteError):
    def __init__(self, block, reason: str):
        super().__init__("Block cannot be written (%s): %r" % (reason, block.text))
        self.block = block
        self.reason = reason


class UnrepresentableHeader(WriteError):
    def __init__(self, header: str):
        super().__init__("Header cannot be written: %r" % header)
        self.header = header


class InvalidStartIndex(WriteError):
    def __init__(self, start_index: int):
        super().__init__("Block numbers must start at 1 or above, got %d" % start_index)
        self.start_index = start_index


class DispatchError(CaptionError):
    """Raised when a file cannot be mapped to a caption format."""


class UnsupportedFileType(DispatchError):
    def __init__(self, extension: str):
        super().__init__("Unsupported caption file type: %r" % extension)
        self.extension = extension


class UnknownExtension(DispatchError):
    def __init__(self, name: str):
        super().__init__("Cannot determine caption format, no extension: %r" % name)
        self.name = name


class ConfigurationError(Exception):
    """Raised when a configuration value is missing or malformed."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key
