"""Markdown renderers for tool results."""

from __future__ import annotations

from typing import List, Sequence

from .accessibility import ContrastCheck
from .models import MigrationSuggestion
from .validation import ReplacementResult, ValidationReport


def format_validation_report(report: ValidationReport) -> str:
    lines: List[str] = [
        "# Token Validation Report",
        "",
        f"**Status**: {'✓ Valid' if report.valid else '✗ Issues Found'}",
        f"**Issues**: {report.issue_count}",
        f"**Values Checked**: {report.total_checked}",
        "",
    ]
    if not report.issues:
        lines.append("✓ No issues found! All values use design tokens.")
        return "\n".join(lines)

    lines.extend(["## Issues", ""])
    for issue in report.issues:
        lines.append(f"### {issue.type}")
        lines.append(f"- **Value**: `{issue.value}`")
        if issue.property:
            lines.append(f"- **Property**: `{issue.property}`")
        if issue.line is not None:
            lines.append(f"- **Line**: {issue.line}")
        if issue.suggestion:
            lines.append(f"- **Suggestion**: {issue.suggestion}")
        lines.append("")
    return "\n".join(lines)


def format_replacement_suggestions(result: ReplacementResult) -> str:
    lines: List[str] = [
        "# Token Replacement Suggestions",
        "",
        f"**Replacements Found**: {result.replacement_count}",
        "",
    ]
    if not result.replacements:
        lines.append("✓ No replacements needed!")
        return "\n".join(lines)

    lines.extend(["## Suggested Replacements", ""])
    for item in result.replacements:
        lines.append(f"- Replace `{item.original}` with `{item.replacement}`")
        lines.append(f"  Token: {item.token_name}")
        if item.property:
            lines.append(f"  Property: {item.property}")
        lines.append("")
    if result.fixed_code != result.original_code:
        lines.extend(["## Fixed Code", "```css", result.fixed_code, "```"])
    return "\n".join(lines)


def format_migration_suggestions(suggestion: MigrationSuggestion) -> str:
    lines: List[str] = [
        "# Token Migration Suggestions",
        "",
        f"**Input Value**: `{suggestion.input_value}`",
        "",
    ]
    if not suggestion.suggestions:
        lines.append("No suitable tokens found for this value.")
        lines.append("Consider adding a new token to your design system.")
        return "\n".join(lines)

    lines.extend(["## Suggested Tokens", ""])
    for match in suggestion.suggestions:
        lines.append(f"### {match.token_name}")
        lines.append(f"- **Value**: `{match.token_value}`")
        if match.category is not None:
            lines.append(f"- **Category**: {match.category.value}")
        lines.append(f"- **Similarity**: {round(match.similarity * 100)}%")
        lines.append(f"- **Reason**: {match.reason}")
        lines.append("")
    return "\n".join(lines)


def format_contrast_result(check: ContrastCheck) -> str:
    lines: List[str] = [
        "# Contrast Check Result",
        "",
        f"**Foreground**: {check.foreground} (`{check.foreground_value}`)",
        f"**Background**: {check.background} (`{check.background_value}`)",
        "",
    ]
    contrast = check.contrast
    if contrast is None:
        lines.append("✗ Unable to calculate contrast")
        if check.recommendation:
            lines.append(f"**Reason**: {check.recommendation}")
        return "\n".join(lines)

    lines.append(f"**Contrast Ratio**: {contrast.ratio}:1")
    lines.append(f"**WCAG AA**: {'✓ Pass' if contrast.passes_aa else '✗ Fail'}")
    lines.append(f"**WCAG AAA**: {'✓ Pass' if contrast.passes_aaa else '✗ Fail'}")
    lines.append(f"**Score**: {contrast.classification.value}")
    if not check.passes and check.recommendation:
        lines.extend(["", "## Recommendation", check.recommendation])
    return "\n".join(lines)


def format_contrast_table(background: str, checks: Sequence[ContrastCheck]) -> str:
    lines: List[str] = [f"# Contrast Against {background}", ""]
    if not checks:
        lines.append(f"No color tokens to compare (is `{background}` in the catalog?)")
        return "\n".join(lines)
    lines.append("| Foreground | Value | Ratio | Score |")
    lines.append("|------------|-------|-------|-------|")
    for check in checks:
        if check.contrast is None:
            ratio, score = "n/a", "n/a"
        else:
            ratio, score = f"{check.contrast.ratio}:1", check.contrast.classification.value
        lines.append(f"| `{check.foreground}` | `{check.foreground_value}` | {ratio} | {score} |")
    return "\n".join(lines)


__all__ = [
    "format_contrast_result",
    "format_contrast_table",
    "format_migration_suggestions",
    "format_replacement_suggestions",
    "format_validation_report",
]
