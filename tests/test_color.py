"""Tests for tokenkit.color."""

from __future__ import annotations

import pytest

from tokenkit.color import (
    InvalidColorFormat,
    UnparseableColor,
    check_color_contrast,
    classify_contrast,
    contrast_ratio,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_rgb,
    parse_color,
    parse_rgb_string,
    rgb_to_hex,
    rgb_to_hsl,
)
from tokenkit.models import HSL, RGB, ContrastLevel


def test_hex_to_rgb_accepts_short_and_long_forms() -> None:
    assert hex_to_rgb("#fff") == RGB(255, 255, 255)
    assert hex_to_rgb("#0066CC") == RGB(0, 102, 204)
    assert hex_to_rgb("0066cc") == RGB(0, 102, 204)


@pytest.mark.parametrize("value", ["#12345", "#ggg", "", "#1234567", "blue"])
def test_hex_to_rgb_rejects_malformed_input(value: str) -> None:
    with pytest.raises(InvalidColorFormat):
        hex_to_rgb(value)


def test_parse_rgb_string_reads_first_three_channels() -> None:
    assert parse_rgb_string("rgba(10, 20, 30, 0.5)") == RGB(10, 20, 30)
    assert parse_rgb_string("rgb(0,0,0)") == RGB(0, 0, 0)


def test_parse_rgb_string_rejects_out_of_range_channel() -> None:
    with pytest.raises(InvalidColorFormat):
        parse_rgb_string("rgb(256, 0, 0)")


def test_parse_color_returns_none_for_unsupported_formats() -> None:
    assert parse_color("hsl(0deg 100% 100%)") is None
    assert parse_color("16px") is None
    assert parse_color("#abcd") is None
    assert parse_color(" #000 ") == RGB(0, 0, 0)


def test_rgb_to_hex_is_lowercase() -> None:
    assert rgb_to_hex(RGB(0, 102, 204)) == "#0066cc"


def test_hex_to_hsl_known_value() -> None:
    assert hex_to_hsl("#2D6FDB") == HSL(217, 71, 52)


def test_hex_to_hsl_round_trip_stays_close() -> None:
    original = hex_to_rgb("#2D6FDB")
    restored = hsl_to_rgb(hex_to_hsl("#2D6FDB"))

    for before, after in zip((original.r, original.g, original.b), (restored.r, restored.g, restored.b)):
        assert abs(before - after) <= 3


def test_rgb_to_hsl_wraps_hue_to_zero() -> None:
    assert rgb_to_hsl(RGB(255, 0, 1)).hue == 0


def test_grays_have_no_saturation() -> None:
    assert rgb_to_hsl(RGB(128, 128, 128)) == HSL(0, 0, 50)
    assert hsl_to_rgb(HSL(0, 0, 50)) == RGB(128, 128, 128)


def test_contrast_ratio_black_on_white() -> None:
    assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0)
    assert contrast_ratio("#FFFFFF", "#000000") == pytest.approx(21.0)
    assert contrast_ratio("#777", "#777") == pytest.approx(1.0)


def test_contrast_ratio_rejects_non_colors() -> None:
    with pytest.raises(UnparseableColor):
        contrast_ratio("16px", "#fff")


def test_dark_text_on_white_passes_aaa() -> None:
    result = check_color_contrast("#212529", "#FFFFFF")

    assert result is not None
    assert result.ratio == pytest.approx(15.43)
    assert result.passes_aa is True
    assert result.passes_aaa is True
    assert result.classification is ContrastLevel.AAA


def test_classification_compares_unrounded_ratio() -> None:
    below = classify_contrast(4.499)
    assert below.ratio == 4.5
    assert below.passes_aa is False
    assert below.classification is ContrastLevel.FAIL

    at = classify_contrast(4.5)
    assert at.passes_aa is True
    assert at.passes_aaa is False
    assert at.classification is ContrastLevel.AA


def test_check_color_contrast_returns_none_for_non_colors() -> None:
    assert check_color_contrast("216", "#FFFFFF") is None
