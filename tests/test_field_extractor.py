"""Tests for fixed-column field readers"""

import pytest

from planedb.field_extractor import extract_optional, extract_trimmed, parse_hex, parse_int


def test_parse_hex_stops_at_first_non_hex_character():
    """'1F' followed by garbage reads as 0x1F"""
    assert parse_hex("1FZZ", 0) == 31
    assert parse_hex("1f-9", 0) == 31


def test_parse_hex_is_case_insensitive():
    assert parse_hex("a061d9") == parse_hex("A061D9") == 0xA061D9


def test_parse_hex_reads_at_most_eight_digits():
    assert parse_hex("123456789ABC") == 0x12345678


def test_parse_hex_at_offset():
    line = "N12345    " + "A9C0D2 "
    assert parse_hex(line, 10) == 0xA9C0D2


def test_parse_hex_without_digits_is_zero():
    assert parse_hex("XYZ") == 0
    assert parse_hex("") == 0
    assert parse_hex(" A1") == 0


def test_parse_hex_offset_past_end_is_zero():
    assert parse_hex("A1", 5) == 0


def test_parse_int_stops_at_first_non_digit():
    assert parse_int("0042abc") == 42
    assert parse_int("7 seats") == 7


def test_parse_int_reads_at_most_ten_digits():
    assert parse_int("12345678901") == 1234567890


def test_parse_int_ignores_non_ascii_digits():
    """Only 0-9 count as digits, not other Unicode decimals"""
    assert parse_int("٣٤") == 0


def test_parse_int_at_offset_and_past_end():
    assert parse_int("abc123", 3) == 123
    assert parse_int("123", 10) == 0


@pytest.mark.parametrize("line", ["", "   ", "zz", "\n", "1Fé", "9" * 40, "\x00\x01"])
@pytest.mark.parametrize("offset", [0, 1, 5, 100])
def test_parsers_are_total(line, offset):
    """Parsers never raise and always return an int"""
    assert isinstance(parse_hex(line, offset), int)
    assert isinstance(parse_int(line, offset), int)
    assert parse_hex(line, offset) == parse_hex(line, offset)


def test_extract_trimmed_removes_trailing_whitespace_only():
    line = "  CESSNA     |"
    assert extract_trimmed(line, 0, 13) == "  CESSNA"


def test_extract_trimmed_blank_span_is_empty_string():
    assert extract_trimmed("abc      def", 3, 9) == ""


def test_extract_trimmed_clamps_end_to_line_length():
    assert extract_trimmed("SHORT", 0, 50) == "SHORT"
    assert extract_trimmed("SHORT", 2, 50) == "ORT"


def test_extract_trimmed_start_past_end_is_empty():
    assert extract_trimmed("SHORT", 10, 20) == ""


def test_extract_trimmed_stops_before_end_position():
    assert extract_trimmed("ABCDEF", 1, 4) == "BCD"


def test_extract_trimmed_strips_line_terminator():
    assert extract_trimmed("NAME\n", 0, 10) == "NAME"


def test_extract_optional_maps_blank_to_none():
    assert extract_optional("        ", 0, 8) is None
    assert extract_optional("X", 3, 8) is None
    assert extract_optional("ACME    ", 0, 8) == "ACME"
