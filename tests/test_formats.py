import pytest

from capshift.core.caption import Caption, CaptionBlock
from capshift.core.formats import (
    CaptionFormat,
    format_for_path,
    parse_document,
    select_format,
    write_document,
)
from capshift.core.time_value import TimeValue
from capshift.exceptions import UnknownExtension, UnrepresentableBlock, UnsupportedFileType


def test_select_format() -> None:
    assert select_format("vtt") is CaptionFormat.DOT
    assert select_format("txt") is CaptionFormat.DOT
    assert select_format("srt") is CaptionFormat.COMMA
    assert select_format(".SRT") is CaptionFormat.COMMA


def test_select_format_unsupported() -> None:
    with pytest.raises(UnsupportedFileType) as excinfo:
        select_format("ass")
    assert excinfo.value.extension == "ass"


def test_format_for_path() -> None:
    assert format_for_path("talks/intro.en.vtt") is CaptionFormat.DOT
    assert format_for_path("intro.srt") is CaptionFormat.COMMA
    assert CaptionFormat.COMMA.extension == ".srt"


def test_format_for_path_without_extension() -> None:
    with pytest.raises(UnknownExtension) as excinfo:
        format_for_path("captions/README")
    assert excinfo.value.name == "README"


def test_convert_between_formats() -> None:
    caption = Caption(
        blocks=[
            CaptionBlock(
                start=TimeValue.from_milliseconds(0),
                end=TimeValue.from_milliseconds(1000),
                text="Hello",
                speaker="Pete Molfese",
            )
        ]
    )
    srt_text = write_document(CaptionFormat.COMMA, caption)
    vtt_text = write_document(CaptionFormat.DOT, parse_document(CaptionFormat.COMMA, srt_text))
    assert vtt_text == "WEBVTT\n\n1\nPete Molfese 00:00:00.000 --> 00:00:01.000\nHello\n"
    assert parse_document(CaptionFormat.DOT, vtt_text) == caption


def test_convert_refuses_text_the_other_format_cannot_hold() -> None:
    vtt_text = "WEBVTT\n\n1\n00:00:00.000 --> 00:00:01.000\nHello [laughs]\n"
    caption = parse_document(CaptionFormat.DOT, vtt_text)
    with pytest.raises(UnrepresentableBlock) as excinfo:
        write_document(CaptionFormat.COMMA, caption)
    assert excinfo.value.block.text == "Hello [laughs]"
