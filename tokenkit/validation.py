"""Hard-coded value detection and token replacement for style code."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from .catalog import Catalog
from .extraction import extract_values
from .matching import find_exact_token, suggest_token_for_value

NO_SUGGESTION = "No matching tokens found"


@dataclass
class ValidationIssue:
    """A literal in style code that does not correspond to any token."""

    type: str
    value: str
    severity: str
    property: Optional[str] = None
    line: Optional[int] = None
    suggestion: Optional[str] = None


@dataclass
class ValidationReport:
    valid: bool
    issues: List[ValidationIssue]
    total_checked: int

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    @property
    def hard_coded_values(self) -> int:
        return sum(1 for issue in self.issues if issue.type == "hard-coded-value")


@dataclass
class Replacement:
    original: str
    replacement: str
    token_name: str
    property: Optional[str] = None


@dataclass
class ReplacementResult:
    original_code: str
    fixed_code: str
    replacements: List[Replacement] = field(default_factory=list)

    @property
    def replacement_count(self) -> int:
        return len(self.replacements)


def validate_token_usage(code: str, catalog: Catalog) -> ValidationReport:
    """Flag every extracted literal that has no exactly matching token."""
    values = extract_values(code)
    issues: List[ValidationIssue] = []
    for value in values:
        if find_exact_token(value.literal, catalog) is not None:
            continue
        suggested = suggest_token_for_value(value, catalog)
        if suggested is None:
            suggestion = NO_SUGGESTION
        else:
            suggestion = f"Consider using token: {suggested.name} ({suggested.value})"
        issues.append(
            ValidationIssue(
                type="hard-coded-value",
                value=value.literal,
                severity="warning",
                property=value.property,
                line=value.line,
                suggestion=suggestion,
            )
        )
    return ValidationReport(valid=not issues, issues=issues, total_checked=len(values))


def replace_hard_coded_values(code: str, catalog: Catalog, autofix: bool = False) -> ReplacementResult:
    """Map exactly matching literals to ``var(--token)`` references.

    With ``autofix`` every occurrence of a matched literal is rewritten in the
    returned ``fixed_code``; otherwise ``fixed_code`` equals the input.
    """
    fixed = code
    replacements: List[Replacement] = []
    for value in extract_values(code):
        token_name = find_exact_token(value.literal, catalog)
        if token_name is None:
            continue
        reference = f"var(--{token_name})"
        replacements.append(
            Replacement(
                original=value.literal,
                replacement=reference,
                token_name=token_name,
                property=value.property,
            )
        )
    if autofix:
        # longest first, so a shadow is rewritten before the color inside it
        for item in sorted(replacements, key=lambda r: len(r.original), reverse=True):
            fixed = re.sub(_literal_pattern(item.original), lambda _, ref=item.replacement: ref, fixed)
    return ReplacementResult(
        original_code=code,
        fixed_code=fixed if autofix else code,
        replacements=replacements,
    )


def _literal_pattern(literal: str) -> str:
    # keep "16px" from matching inside "116px" and "#fff" inside "#ffffff"
    return rf"(?<![\w#.-]){re.escape(literal)}(?![\w])"


__all__ = [
    "Replacement",
    "ReplacementResult",
    "ValidationIssue",
    "ValidationReport",
    "replace_hard_coded_values",
    "validate_token_usage",
]
