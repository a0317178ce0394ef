from sitecolor.conversions.css_format import (
    format_number,
    to_hex_string,
    to_rgb_string,
    to_rgba_string,
)

def test_format_number():
    assert format_number(None) == ""
    assert format_number(0) == "0"
    assert format_number(255) == "255"
    assert format_number(1.0) == "1"
    assert format_number(0.0) == "0"
    assert format_number(0.6) == "0.6"
    assert format_number(0.25) == "0.25"
    assert format_number(-0.0) == "0"

def test_format_number_exponents():
    assert format_number(1e-7) == "1e-7"
    assert format_number(1.5e-7) == "1.5e-7"
    assert format_number(1e-6) == "0.000001"
    assert format_number(1e-5) == "0.00001"
    assert format_number(5.5e-6) == "0.0000055"
    assert format_number(1e16) == "10000000000000000"
    assert format_number(1e21) == "1e+21"

def test_to_hex_string_pads():
    assert to_hex_string(0, 0, 0) == "#000000"
    assert to_hex_string(1, 2, 3) == "#010203"
    assert to_hex_string(255, 255, 255) == "#ffffff"
    assert to_hex_string(255, None, 16) == "#ff0010"

def test_to_rgb_strings():
    assert to_rgb_string(1, 2, 3) == "rgb(1, 2, 3)"
    assert to_rgba_string(1, 2, 3, 0.5) == "rgba(1, 2, 3, 0.5)"
    assert to_rgba_string(1, 2, 3, 1.0) == "rgba(1, 2, 3, 1)"
    assert to_rgba_string(None, 2, None, None) == "rgba(, 2, , )"
