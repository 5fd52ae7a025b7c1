"""Tests for colour_lab.core.palette: hex codec and presets."""

import pytest
from colour_lab.core.palette import (
    PRESETS,
    InvalidFormat,
    as_rgb,
    format_hex,
    is_hex,
    normalize_hex,
    parse_hex,
)
from colour_lab.core.types import RGB


class TestParseHex:
    def test_teal(self):
        assert parse_hex('#6fb7b2') == RGB(111, 183, 178)

    def test_white(self):
        assert parse_hex('#ffffff') == (255, 255, 255)

    def test_uppercase(self):
        assert parse_hex('#6FB7B2') == (111, 183, 178)

    def test_short_hex_duplicates_digits(self):
        assert parse_hex('#f0a') == (255, 0, 170)

    def test_non_hex_digits(self):
        with pytest.raises(InvalidFormat):
            parse_hex('#ZZZZZZ')

    def test_wrong_length(self):
        for bad in ('#ff', '#ffff', '#fffffff', '#ffffffff', '#'):
            with pytest.raises(InvalidFormat):
                parse_hex(bad)

    def test_missing_hash(self):
        with pytest.raises(InvalidFormat):
            parse_hex('ff0000')

    def test_invalid_format_is_value_error(self):
        with pytest.raises(ValueError):
            parse_hex('nope')

    def test_not_a_string(self):
        with pytest.raises(InvalidFormat):
            parse_hex(None)  # type: ignore[arg-type]


class TestFormatHex:
    def test_lowercase_by_default(self):
        assert format_hex((111, 183, 178)) == '#6fb7b2'

    def test_uppercase(self):
        assert format_hex((111, 183, 178), upper=True) == '#6FB7B2'

    def test_zero_padding(self):
        assert format_hex((1, 2, 3)) == '#010203'

    def test_clamps_out_of_range(self):
        assert format_hex((-20, 300, 128)) == '#00ff80'

    def test_rounds_not_truncates(self):
        assert format_hex((127.5, 0.4, 254.6)) == '#8000ff'

    def test_six_digit_round_trip(self):
        for hx in PRESETS:
            assert format_hex(parse_hex(hx)) == hx


class TestHelpers:
    def test_is_hex(self):
        assert is_hex('#abc')
        assert is_hex('#AABBCC')
        assert not is_hex('abc')
        assert not is_hex('#abcd')
        assert not is_hex(123)  # type: ignore[arg-type]

    def test_normalize_hex_expands_shorthand(self):
        assert normalize_hex('#FA0') == '#ffaa00'

    def test_as_rgb_from_hex(self):
        assert as_rgb('#000000') == RGB(0, 0, 0)

    def test_as_rgb_clamps_tuple(self):
        assert as_rgb((300, -5, 10.6)) == RGB(255, 0, 11)


class TestPresets:
    def test_count(self):
        assert len(PRESETS) == 23

    def test_all_valid_lowercase_hex(self):
        for hx in PRESETS:
            assert is_hex(hx), hx
            assert hx == hx.lower()
            assert len(hx) == 7

    def test_unique(self):
        assert len(set(PRESETS)) == len(PRESETS)
