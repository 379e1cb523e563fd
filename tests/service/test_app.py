"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest

try:
    from fastapi.testclient import TestClient
except ModuleNotFoundError:  # pragma: no cover - optional dependency
    pytest.skip("fastapi not installed", allow_module_level=True)

from tokenkit.catalog import Catalog
from tokenkit.service import create_app


@pytest.fixture
def client(catalog: Catalog) -> TestClient:
    return TestClient(create_app(lambda: catalog))


def test_health_endpoint(client: TestClient, catalog: Catalog) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "tokens": len(catalog)}


def test_token_endpoints(client: TestClient) -> None:
    response = client.get("/tokens", params={"category": "spacing"})
    assert [item["name"] for item in response.json()] == ["spacing-sm", "spacing-md", "spacing-lg"]

    response = client.get("/tokens/color-primary")
    assert response.status_code == 200
    assert response.json()["value"] == "#0066CC"

    stats = client.get("/tokens/stats").json()
    assert stats["categories"]["spacing"] == 3


def test_unknown_token_is_404(client: TestClient) -> None:
    response = client.get("/tokens/missing")
    assert response.status_code == 404
    assert response.json() == {"detail": "Token not found: missing"}


def test_unknown_category_is_400(client: TestClient) -> None:
    assert client.get("/tokens", params={"category": "motion"}).status_code == 400


def test_component_endpoints(client: TestClient) -> None:
    assert len(client.get("/components").json()) == 2
    assert client.get("/components/card").json()["tokens"] == ["--radius-md"]
    data = client.get("/components/button/tokens").json()
    assert data["token_count"] == 3
    assert [t["name"] for t in data["tokens"]] == ["color-primary", "spacing-md"]
    assert client.get("/components/nope").status_code == 404
    assert client.get("/components/nope/tokens").status_code == 404


def test_documentation_search(client: TestClient) -> None:
    response = client.get("/documentation", params={"query": "grid"})
    assert [entry["section"] for entry in response.json()] == ["spacing"]


def test_extract_and_validate(client: TestClient) -> None:
    code = ".button { background: #0066CC; padding: 16px; font-size: 14px; }"

    extracted = client.post("/extract", json={"code": code}).json()
    assert [(v["kind"], v["literal"], v["value_type"]) for v in extracted] == [
        ("color", "#0066CC", "color"),
        ("spacing", "16px", "pixels"),
        ("font-size", "14px", "pixels"),
    ]

    report = client.post("/validate", json={"code": code}).json()
    assert report["valid"] is False
    assert [issue["value"] for issue in report["issues"]] == ["14px"]


def test_replace_endpoint(client: TestClient) -> None:
    response = client.post("/replace", json={"code": "a { padding: 16px; }", "autofix": True})
    data = response.json()
    assert data["replacement_count"] == 1
    assert data["fixed_code"] == "a { padding: var(--spacing-md); }"


def test_migrate_endpoint(client: TestClient) -> None:
    data = client.post("/migrate", json={"value": "16px"}).json()

    top = data["suggestions"][:2]
    assert [s["token_name"] for s in top] == ["spacing-md", "font-size-body"]
    assert all(s["similarity"] == 1.0 and s["reason"] == "Exact match" for s in top)


def test_contrast_endpoints(client: TestClient) -> None:
    data = client.post(
        "/contrast", json={"foreground": "color-text-primary", "background": "color-background"}
    ).json()
    assert data["ratio"] == pytest.approx(15.43)
    assert data["passes_aa"] is True
    assert data["passes_aaa"] is True
    assert data["classification"] == "AAA"

    missing = client.post("/contrast", json={"foreground": "x", "background": "color-background"}).json()
    assert missing["ratio"] is None
    assert missing["missing"] == ["x"]

    batch = client.get("/contrast/color-background").json()
    assert batch[0]["foreground"] == "color-text-primary"


def test_theme_endpoint(client: TestClient) -> None:
    response = client.post(
        "/theme",
        json={"brand_name": "Acme", "colors": {"primary": "#2D6FDB"}, "mode": "full-generation"},
    )
    assert response.status_code == 200
    assert "--color-primary-h: 217;" in response.json()["css"]

    bad = client.post("/theme", json={"brand_name": "Acme", "colors": {"nope": "#fff"}})
    assert bad.status_code == 400


def test_hsl_endpoint(client: TestClient) -> None:
    response = client.get("/colors/hsl", params={"color": "#2D6FDB"})
    assert response.json() == {"hex": "#2D6FDB", "hue": 217, "saturation": 71, "lightness": 52}

    assert client.get("/colors/hsl", params={"color": "blue"}).status_code == 400
