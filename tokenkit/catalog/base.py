"""Immutable in-memory catalog of design tokens, components and docs."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..models import Component, DesignToken, DocumentationEntry, TokenCategory


class CatalogError(RuntimeError):
    """Raised when catalog data is inconsistent or cannot be loaded."""


class TokenNotFoundError(KeyError):
    """Raised by direct lookups when a token name has no catalog entry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Token not found: {self.name}"


class Catalog:
    """Read-only view over the design-system dataset.

    Built once at startup and passed into every operation; nothing mutates it
    afterwards, so it can be shared freely between callers.
    """

    def __init__(
        self,
        tokens: Iterable[DesignToken],
        components: Iterable[Component] = (),
        documentation: Iterable[DocumentationEntry] = (),
    ) -> None:
        self._tokens: Tuple[DesignToken, ...] = tuple(tokens)
        self._components: Tuple[Component, ...] = tuple(components)
        self._documentation: Tuple[DocumentationEntry, ...] = tuple(documentation)

        duplicates = [
            name for name, count in Counter(t.name for t in self._tokens).items() if count > 1
        ]
        if duplicates:
            raise CatalogError(f"Duplicate token names: {', '.join(sorted(duplicates))}")
        self._by_name: Dict[str, DesignToken] = {token.name: token for token in self._tokens}

    @property
    def tokens(self) -> Tuple[DesignToken, ...]:
        return self._tokens

    @property
    def components(self) -> Tuple[Component, ...]:
        return self._components

    @property
    def documentation(self) -> Tuple[DocumentationEntry, ...]:
        return self._documentation

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def find_token(self, name: str) -> Optional[DesignToken]:
        return self._by_name.get(_strip_custom_property(name))

    def get_token(self, name: str) -> DesignToken:
        token = self.find_token(name)
        if token is None:
            raise TokenNotFoundError(name)
        return token

    def tokens_in(self, category: TokenCategory | str) -> List[DesignToken]:
        wanted = TokenCategory(category)
        return [token for token in self._tokens if token.category is wanted]

    def search_tokens(
        self, category: TokenCategory | str | None = None, name_pattern: str | None = None
    ) -> List[DesignToken]:
        """Filter tokens by category and/or case-insensitive name substring."""
        results: Sequence[DesignToken] = self._tokens
        if category:
            results = self.tokens_in(category)
        if name_pattern:
            needle = name_pattern.lower()
            results = [token for token in results if needle in token.name.lower()]
        return list(results)

    def usage_stats(self) -> Dict[str, object]:
        categories: Dict[str, int] = {}
        for token in self._tokens:
            key = token.category.value
            categories[key] = categories.get(key, 0) + 1
        return {"total_tokens": len(self._tokens), "categories": categories}

    def get_component(self, name: str) -> Optional[Component]:
        lowered = name.lower()
        for component in self._components:
            if component.name.lower() == lowered:
                return component
        return None

    def component_tokens(self, name: str) -> Optional[List[DesignToken]]:
        """Resolve a component's token references, skipping unknown names."""
        component = self.get_component(name)
        if component is None:
            return None
        resolved: List[DesignToken] = []
        for reference in component.tokens:
            token = self.find_token(reference)
            if token is not None:
                resolved.append(token)
        return resolved

    def search_documentation(self, query: str) -> List[DocumentationEntry]:
        needle = query.lower()
        return [
            entry
            for entry in self._documentation
            if needle in entry.title.lower()
            or needle in entry.content.lower()
            or needle in entry.section.lower()
        ]


def _strip_custom_property(name: str) -> str:
    # component sources reference tokens as CSS custom properties (--name)
    return name[2:] if name.startswith("--") else name


__all__ = ["Catalog", "CatalogError", "TokenNotFoundError"]
