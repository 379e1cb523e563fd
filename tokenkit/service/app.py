"""FastAPI application entrypoint for tokenkit service mode."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..accessibility import ContrastCheck, check_all_combinations, check_token_contrast
from ..catalog import Catalog, TokenNotFoundError, default_catalog
from ..color import ColorError, hex_to_hsl
from ..config import MatchingConfig
from ..extraction import extract_values
from ..matching import suggest_migration
from ..models import DesignToken
from ..theme import ThemeError, ThemeMode, assemble_theme
from ..validation import replace_hard_coded_values, validate_token_usage


class TokenModel(BaseModel):
    name: str
    value: str
    category: str
    description: Optional[str] = None

    @classmethod
    def from_token(cls, token: DesignToken) -> "TokenModel":
        return cls(
            name=token.name,
            value=token.value,
            category=token.category.value,
            description=token.description,
        )


class ComponentModel(BaseModel):
    name: str
    description: str
    tokens: List[str]
    usage: str = ""


class ComponentTokensResponse(BaseModel):
    component: str
    token_count: int
    tokens: List[TokenModel]


class DocumentationModel(BaseModel):
    section: str
    title: str
    content: str


class CodeRequest(BaseModel):
    code: str


class ExtractedValueModel(BaseModel):
    kind: str
    literal: str
    property: Optional[str] = None
    line: Optional[int] = None
    value_type: Optional[str] = None


class IssueModel(BaseModel):
    type: str
    value: str
    severity: str
    property: Optional[str] = None
    line: Optional[int] = None
    suggestion: Optional[str] = None


class ValidationResponse(BaseModel):
    valid: bool
    issue_count: int
    total_checked: int
    issues: List[IssueModel]


class ReplaceRequest(BaseModel):
    code: str
    autofix: bool = False


class ReplacementModel(BaseModel):
    original: str
    replacement: str
    token_name: str
    property: Optional[str] = None


class ReplaceResponse(BaseModel):
    fixed_code: str
    replacement_count: int
    replacements: List[ReplacementModel]


class MigrateRequest(BaseModel):
    value: str
    category: Optional[str] = None


class SuggestionModel(BaseModel):
    token_name: str
    token_value: str
    category: str
    similarity: float
    reason: str


class MigrateResponse(BaseModel):
    input_value: str
    suggestions: List[SuggestionModel]


class ContrastRequest(BaseModel):
    foreground: str
    background: str


class ContrastResponse(BaseModel):
    foreground: str
    background: str
    foreground_value: str
    background_value: str
    ratio: Optional[float] = None
    passes_aa: bool = False
    passes_aaa: bool = False
    classification: Optional[str] = None
    recommendation: Optional[str] = None
    missing: List[str] = Field(default_factory=list)

    @classmethod
    def from_check(cls, check: ContrastCheck) -> "ContrastResponse":
        contrast = check.contrast
        return cls(
            foreground=check.foreground,
            background=check.background,
            foreground_value=check.foreground_value,
            background_value=check.background_value,
            ratio=contrast.ratio if contrast else None,
            passes_aa=contrast.passes_aa if contrast else False,
            passes_aaa=contrast.passes_aaa if contrast else False,
            classification=contrast.classification.value if contrast else None,
            recommendation=check.recommendation,
            missing=list(check.missing),
        )


class ThemeRequest(BaseModel):
    brand_name: str
    colors: Dict[str, str] = Field(default_factory=dict)
    mode: str = ThemeMode.OVERRIDE.value


class ThemeResponse(BaseModel):
    brand_name: str
    mode: str
    css: str
    documentation: str
    figma_variables: str
    tokens: List[TokenModel]


class HSLResponse(BaseModel):
    hex: str
    hue: int
    saturation: int
    lightness: int


class HealthResponse(BaseModel):
    status: str
    tokens: int


def create_app(
    catalog_factory: Callable[[], Catalog] = default_catalog,
    matching: MatchingConfig | None = None,
) -> FastAPI:
    """Create the FastAPI application exposing tokenkit operations."""

    app = FastAPI(title="tokenkit Service", version="0.1.0")
    # Built once; handlers share the read-only catalog.
    catalog = catalog_factory()
    limits = matching or MatchingConfig()

    async def get_catalog() -> Catalog:
        return catalog

    @app.get("/health", response_model=HealthResponse)
    async def health(catalog: Catalog = Depends(get_catalog)) -> HealthResponse:
        return HealthResponse(status="ok", tokens=len(catalog))

    @app.get("/tokens", response_model=List[TokenModel])
    async def search_tokens(
        category: Optional[str] = None,
        pattern: Optional[str] = None,
        catalog: Catalog = Depends(get_catalog),
    ) -> List[TokenModel]:
        tokens = catalog.search_tokens(category=category, name_pattern=pattern)
        return [TokenModel.from_token(token) for token in tokens]

    @app.get("/tokens/stats")
    async def token_stats(catalog: Catalog = Depends(get_catalog)) -> Dict[str, Any]:
        return catalog.usage_stats()

    @app.get("/tokens/{name}", response_model=TokenModel)
    async def get_token(name: str, catalog: Catalog = Depends(get_catalog)) -> TokenModel:
        return TokenModel.from_token(catalog.get_token(name))

    @app.get("/components", response_model=List[ComponentModel])
    async def list_components(catalog: Catalog = Depends(get_catalog)) -> List[ComponentModel]:
        return [
            ComponentModel(
                name=c.name, description=c.description, tokens=list(c.tokens), usage=c.usage
            )
            for c in catalog.components
        ]

    @app.get("/components/{name}", response_model=ComponentModel)
    async def get_component(name: str, catalog: Catalog = Depends(get_catalog)):
        component = catalog.get_component(name)
        if component is None:
            return JSONResponse(status_code=404, content={"detail": f"Component not found: {name}"})
        return ComponentModel(
            name=component.name,
            description=component.description,
            tokens=list(component.tokens),
            usage=component.usage,
        )

    @app.get("/components/{name}/tokens", response_model=ComponentTokensResponse)
    async def component_tokens(name: str, catalog: Catalog = Depends(get_catalog)):
        component = catalog.get_component(name)
        tokens = catalog.component_tokens(name)
        if component is None or tokens is None:
            return JSONResponse(status_code=404, content={"detail": f"Component not found: {name}"})
        return ComponentTokensResponse(
            component=component.name,
            token_count=len(component.tokens),
            tokens=[TokenModel.from_token(token) for token in tokens],
        )

    @app.get("/documentation", response_model=List[DocumentationModel])
    async def search_documentation(
        query: str, catalog: Catalog = Depends(get_catalog)
    ) -> List[DocumentationModel]:
        return [
            DocumentationModel(section=entry.section, title=entry.title, content=entry.content)
            for entry in catalog.search_documentation(query)
        ]

    @app.post("/extract", response_model=List[ExtractedValueModel])
    async def extract(payload: CodeRequest) -> List[ExtractedValueModel]:
        return [
            ExtractedValueModel(
                kind=value.kind.value,
                literal=value.literal,
                property=value.property,
                line=value.line,
                value_type=value.value_type.value if value.value_type else None,
            )
            for value in extract_values(payload.code)
        ]

    @app.post("/validate", response_model=ValidationResponse)
    async def validate(
        payload: CodeRequest, catalog: Catalog = Depends(get_catalog)
    ) -> ValidationResponse:
        report = validate_token_usage(payload.code, catalog)
        return ValidationResponse(
            valid=report.valid,
            issue_count=report.issue_count,
            total_checked=report.total_checked,
            issues=[
                IssueModel(
                    type=issue.type,
                    value=issue.value,
                    severity=issue.severity,
                    property=issue.property,
                    line=issue.line,
                    suggestion=issue.suggestion,
                )
                for issue in report.issues
            ],
        )

    @app.post("/replace", response_model=ReplaceResponse)
    async def replace(payload: ReplaceRequest, catalog: Catalog = Depends(get_catalog)) -> ReplaceResponse:
        result = replace_hard_coded_values(payload.code, catalog, autofix=payload.autofix)
        return ReplaceResponse(
            fixed_code=result.fixed_code,
            replacement_count=result.replacement_count,
            replacements=[
                ReplacementModel(
                    original=item.original,
                    replacement=item.replacement,
                    token_name=item.token_name,
                    property=item.property,
                )
                for item in result.replacements
            ],
        )

    @app.post("/migrate", response_model=MigrateResponse)
    async def migrate(payload: MigrateRequest, catalog: Catalog = Depends(get_catalog)) -> MigrateResponse:
        suggestion = suggest_migration(
            payload.value,
            catalog,
            payload.category,
            limit=limits.max_suggestions,
            threshold=limits.min_similarity,
        )
        return MigrateResponse(
            input_value=suggestion.input_value,
            suggestions=[
                SuggestionModel(
                    token_name=match.token_name or "",
                    token_value=match.token_value or "",
                    category=match.category.value if match.category else "",
                    similarity=match.similarity,
                    reason=match.reason or "",
                )
                for match in suggestion.suggestions
            ],
        )

    @app.post("/contrast", response_model=ContrastResponse)
    async def contrast(payload: ContrastRequest, catalog: Catalog = Depends(get_catalog)) -> ContrastResponse:
        check = check_token_contrast(payload.foreground, payload.background, catalog)
        return ContrastResponse.from_check(check)

    @app.get("/contrast/{background}", response_model=List[ContrastResponse])
    async def contrast_all(
        background: str, catalog: Catalog = Depends(get_catalog)
    ) -> List[ContrastResponse]:
        return [ContrastResponse.from_check(c) for c in check_all_combinations(background, catalog)]

    @app.post("/theme", response_model=ThemeResponse)
    async def theme(payload: ThemeRequest, catalog: Catalog = Depends(get_catalog)) -> ThemeResponse:
        result = assemble_theme(payload.brand_name, payload.colors, payload.mode, catalog)
        return ThemeResponse(
            brand_name=result.brand_name,
            mode=result.mode.value,
            css=result.css_text,
            documentation=result.documentation,
            figma_variables=result.figma_json,
            tokens=[TokenModel.from_token(token) for token in result.tokens],
        )

    @app.get("/colors/hsl", response_model=HSLResponse)
    async def color_to_hsl(color: str) -> HSLResponse:
        hsl = hex_to_hsl(color)
        return HSLResponse(hex=color, hue=hsl.hue, saturation=hsl.saturation, lightness=hsl.lightness)

    @app.exception_handler(TokenNotFoundError)
    async def token_not_found_handler(_: Any, exc: TokenNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ColorError)
    async def color_error_handler(_: Any, exc: ColorError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ThemeError)
    async def theme_error_handler(_: Any, exc: ThemeError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(_: Any, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    catalog_factory: Callable[[], Catalog] = default_catalog,
    host: str = "127.0.0.1",
    port: int = 8000,
    matching: MatchingConfig | None = None,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(catalog_factory, matching)
    uvicorn.run(app, host=host, port=port)
