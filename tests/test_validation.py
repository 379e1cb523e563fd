"""Tests for hard-coded value validation and replacement."""

from __future__ import annotations

from tokenkit.catalog import Catalog
from tokenkit.models import DesignToken, TokenCategory
from tokenkit.validation import NO_SUGGESTION, replace_hard_coded_values, validate_token_usage


def test_validation_flags_values_without_tokens(catalog: Catalog) -> None:
    code = ".card { color: #123456; padding: 16px; margin: 13px; }"

    report = validate_token_usage(code, catalog)

    assert report.valid is False
    assert report.total_checked == 3
    assert report.issue_count == 2
    assert report.hard_coded_values == 2
    color_issue, margin_issue = report.issues
    assert color_issue.value == "#123456"
    assert color_issue.severity == "warning"
    assert color_issue.suggestion == "Consider using token: color-primary (#0066CC)"
    assert margin_issue.property == "margin"
    assert margin_issue.line == 1
    assert margin_issue.suggestion == "Consider using token: spacing-sm (8px)"


def test_validation_passes_when_every_value_is_a_token(catalog: Catalog) -> None:
    report = validate_token_usage(".btn { color: #0066cc; padding: 8px; }", catalog)

    assert report.valid is True
    assert report.issues == []
    assert report.total_checked == 2


def test_validation_reports_missing_suggestion(catalog: Catalog) -> None:
    report = validate_token_usage("body { font-family: Georgia, serif; }", catalog)

    assert [issue.suggestion for issue in report.issues] == [NO_SUGGESTION]


def test_replacement_suggestions_leave_code_untouched(catalog: Catalog) -> None:
    code = "a { color: #0066CC; padding: 16px; }"

    result = replace_hard_coded_values(code, catalog)

    assert result.fixed_code == code
    assert [(r.original, r.replacement) for r in result.replacements] == [
        ("#0066CC", "var(--color-primary)"),
        ("16px", "var(--spacing-md)"),
    ]
    assert result.replacement_count == 2


def test_autofix_rewrites_whole_literals_only(catalog: Catalog) -> None:
    code = "a { color: #0066CC; padding: 16px; }\nb { margin: 116px; }"

    result = replace_hard_coded_values(code, catalog, autofix=True)

    assert result.fixed_code == (
        "a { color: var(--color-primary); padding: var(--spacing-md); }\nb { margin: 116px; }"
    )
    assert result.original_code == code


def test_longhand_margin_is_checked(catalog: Catalog) -> None:
    report = validate_token_usage(".card { margin-top: 13px; padding-left: 8px; }", catalog)

    assert report.total_checked == 2
    assert [(issue.property, issue.value) for issue in report.issues] == [("margin-top", "13px")]


def test_autofix_rewrites_shadow_before_its_color() -> None:
    catalog = Catalog(
        [
            DesignToken("black", "#000000", TokenCategory.COLOR),
            DesignToken("shadow-card", "0 1px 2px #000000", TokenCategory.SHADOW),
        ]
    )

    result = replace_hard_coded_values(".c{box-shadow: 0 1px 2px #000000;}", catalog, autofix=True)

    assert result.replacement_count == 2
    assert result.fixed_code == ".c{box-shadow: var(--shadow-card);}"
