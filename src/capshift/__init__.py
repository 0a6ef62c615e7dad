"""Caption offset tool: parse, shift, crop and join WEBVTT and SRT captions."""

__version__ = "1.0.0"
