from __future__ import annotations

import pytest

from tokenkit.catalog import Catalog
from tokenkit.models import Component, DesignToken, DocumentationEntry, TokenCategory


def _token(name: str, value: str, category: TokenCategory) -> DesignToken:
    return DesignToken(name=name, value=value, category=category)


@pytest.fixture
def sample_tokens() -> list[DesignToken]:
    """Small hand-written token set with known contrast and matching behaviour."""
    return [
        _token("color-primary", "#0066CC", TokenCategory.COLOR),
        _token("color-text-primary", "#212529", TokenCategory.COLOR),
        _token("color-text-muted", "#ADB5BD", TokenCategory.COLOR),
        _token("color-background", "#FFFFFF", TokenCategory.COLOR),
        _token("color-overlay-opacity", "0.5", TokenCategory.COLOR),
        _token("spacing-sm", "8px", TokenCategory.SPACING),
        _token("spacing-md", "16px", TokenCategory.SPACING),
        _token("spacing-lg", "24px", TokenCategory.SPACING),
        _token("font-size-body", "16px", TokenCategory.TYPOGRAPHY),
        _token("font-size-large", "20px", TokenCategory.TYPOGRAPHY),
        _token("font-weight-bold", "700", TokenCategory.TYPOGRAPHY),
        _token("radius-md", "4px", TokenCategory.BORDER),
        _token("shadow-sm", "0 1px 2px rgba(0, 0, 0, 0.1)", TokenCategory.SHADOW),
    ]


@pytest.fixture
def catalog(sample_tokens: list[DesignToken]) -> Catalog:
    components = [
        Component(
            name="Button",
            description="Clickable action",
            tokens=("--color-primary", "spacing-md", "--missing-token"),
            usage="<button class='btn'>",
        ),
        Component(name="Card", description="Content container", tokens=("--radius-md",)),
    ]
    documentation = [
        DocumentationEntry(
            section="colors",
            title="Color Usage",
            content="Use color tokens for text and backgrounds. Check contrast.",
        ),
        DocumentationEntry(
            section="spacing",
            title="Spacing",
            content="Spacing tokens follow an 8px grid.",
        ),
    ]
    return Catalog(sample_tokens, components, documentation)
