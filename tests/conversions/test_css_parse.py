from sitecolor.conversions.css_parse import (
    detect_format,
    expand_short_hex,
    parse_hex,
    parse_rgb,
    parse_rgba,
)
from sitecolor.types.format_type import FormatType
from ..samples import samples_hex_rgb, samples_invalid

def test_detect_format():
    assert detect_format("#fff") is FormatType.HEX
    assert detect_format("#A0b1C2") is FormatType.HEX
    assert detect_format("rgb(1, 2, 3)") is FormatType.RGB
    assert detect_format("rgba(1, 2, 3, 0.5)") is FormatType.RGBA
    assert detect_format(None) is None
    for text in samples_invalid:
        assert detect_format(text) is None, text

def test_expand_short_hex():
    assert expand_short_hex("03F") == "0033FF"
    assert expand_short_hex("#fa1") == "ffaa11"
    assert expand_short_hex("abcdef") == "abcdef"
    assert expand_short_hex("xyz") == "xyz"

def test_parse_hex():
    for text, expected in samples_hex_rgb.items():
        assert parse_hex(text) == expected, text
    assert parse_hex("#abcd") is None
    assert parse_hex("rgb(1, 2, 3)") is None

def test_parse_rgb_returns_raw_strings():
    assert parse_rgb("rgb(1,22, 255)") == ("1", "22", "255")
    assert parse_rgb("rgb(999, 0, 0)") == ("999", "0", "0")
    assert parse_rgb("rgb(1, 2, 3") is None

def test_parse_rgba_loose_alpha():
    assert parse_rgba("rgba(1, 2, 3, 0.5)") == ("1", "2", "3", "0.5")
    assert parse_rgba("rgba(1, 2, 3, ...)") == ("1", "2", "3", "...")
    assert parse_rgba("rgba(1, 2, 3, 0.55)") is None
    assert parse_rgba("rgba(1, 2, 3, -1)") is None

def test_parsing_is_case_insensitive():
    assert parse_rgb("RGB(1, 2, 3)") == ("1", "2", "3")
    assert parse_rgba("RgBa(1, 2, 3, 1)") == ("1", "2", "3", "1")
