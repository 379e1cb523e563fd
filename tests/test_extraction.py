"""Tests for rule-driven value extraction."""

from __future__ import annotations

from tokenkit.catalog import Catalog
from tokenkit.extraction import ExtractionRule, ValueExtractor, extract_values, group_values_by_kind
from tokenkit.matching import find_exact_token
from tokenkit.models import ValueKind
from tokenkit.values import ValueType


def test_button_rule_extracts_color_spacing_and_font_size(catalog: Catalog) -> None:
    text = ".button { background: #0066CC; padding: 16px; font-size: 14px; }"

    values = extract_values(text)

    assert [(v.kind, v.literal, v.property) for v in values] == [
        (ValueKind.COLOR, "#0066CC", None),
        (ValueKind.SPACING, "16px", "padding"),
        (ValueKind.FONT_SIZE, "14px", "font-size"),
    ]
    assert find_exact_token("#0066CC", catalog) == "color-primary"
    assert find_exact_token("16px", catalog) == "spacing-md"
    assert find_exact_token("14px", catalog) is None


def test_hyphenated_properties_are_not_spacing() -> None:
    values = extract_values("p { line-height: 24px; border-left: 2px solid; }")

    assert values == []


def test_shadow_and_embedded_color_are_both_reported() -> None:
    values = extract_values(".card { box-shadow: 0 1px 2px rgba(0, 0, 0, 0.1); }")

    grouped = group_values_by_kind(values)
    assert [v.literal for v in grouped[ValueKind.COLOR]] == ["rgba(0, 0, 0, 0.1)"]
    assert [v.literal for v in grouped[ValueKind.SHADOW]] == ["0 1px 2px rgba(0, 0, 0, 0.1)"]


def test_line_numbers_are_one_based() -> None:
    text = "a {\n  color: #fff;\n  margin: 4px;\n}\n"

    values = extract_values(text)

    assert [(v.literal, v.line) for v in values] == [("#fff", 2), ("4px", 3)]


def test_typography_and_radius_rules() -> None:
    text = (
        "h1 { font-weight: 600; font-family: Inter, sans-serif; }\n"
        "strong { FONT-WEIGHT: bold; }\n"
        ".avatar { border-radius: 50%; }"
    )

    grouped = group_values_by_kind(extract_values(text))

    assert [v.literal for v in grouped[ValueKind.FONT_WEIGHT]] == ["600", "bold"]
    assert [v.property for v in grouped[ValueKind.FONT_WEIGHT]] == ["font-weight", "font-weight"]
    assert [v.literal for v in grouped[ValueKind.FONT_FAMILY]] == ["Inter, sans-serif"]
    assert [v.literal for v in grouped[ValueKind.BORDER_RADIUS]] == ["50%"]


def test_malformed_hex_is_ignored() -> None:
    assert extract_values("color: #12345; background: #abcd;") == []


def test_custom_rule_table() -> None:
    extractor = ValueExtractor(
        [ExtractionRule(kind=ValueKind.SPACING, value_patterns=(r"\d+px",), property_names=("inset",))]
    )

    values = extractor.extract(".x { inset: 3px; padding: 4px; }")

    assert [(v.literal, v.property) for v in values] == [("3px", "inset")]


def test_longhand_box_properties_are_spacing() -> None:
    values = extract_values(".a { margin-top: 8px; padding-left: 15px; }")

    assert [(v.kind, v.literal, v.property) for v in values] == [
        (ValueKind.SPACING, "8px", "margin-top"),
        (ValueKind.SPACING, "15px", "padding-left"),
    ]


def test_numbers_without_integer_part_are_extracted() -> None:
    values = extract_values(".a { padding: .5rem; border-radius: .25em; }")

    assert [(v.kind, v.literal) for v in values] == [
        (ValueKind.SPACING, ".5rem"),
        (ValueKind.BORDER_RADIUS, ".25em"),
    ]


def test_extracted_values_carry_their_value_type() -> None:
    values = extract_values(".a { color: #0066CC; margin: 16px; font-weight: 700; }")

    assert [(v.literal, v.value_type) for v in values] == [
        ("#0066CC", ValueType.COLOR),
        ("16px", ValueType.PIXELS),
        ("700", ValueType.FONT_WEIGHT),
    ]
