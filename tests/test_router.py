"""Tests router FastAPI — catalogue, settings, preview, rendu live."""
import pytest
from fastapi.testclient import TestClient

from proto_blocks.app import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def test_list_blocks(client):
    r = client.get("/proto-blocks/v1/blocks")
    assert r.status_code == 200
    names = [b["name"] for b in r.json()["blocks"]]
    assert "card" in names
    assert "header-nav" in names


def test_block_settings(client):
    r = client.get("/proto-blocks/v1/blocks/testimonial")
    assert r.status_code == 200
    data = r.json()
    assert data["title"] == "Testimonial"
    assert "authorName" in data["schema"]["properties"]


def test_block_settings_not_found(client):
    r = client.get("/proto-blocks/v1/blocks/carousel")
    assert r.status_code == 404
    assert r.json()["error"] == "Block not found."


def test_view_script(client):
    r = client.get("/proto-blocks/v1/blocks/header-nav/view.js")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/javascript")
    assert "navbar-header" in r.text
    assert client.get("/proto-blocks/v1/blocks/card/view.js").status_code == 404


def test_preview_renders_placeholders(client):
    r = client.post("/proto-blocks/v1/preview", json={"template": "stats", "attributes": {}})
    assert r.status_code == 200
    html = r.json()["html"]
    assert "Happy Clients" in html
    assert html.count("data-proto-repeater-item") == 4


def test_preview_inner_content_and_lang(client):
    r = client.post("/proto-blocks/v1/preview", json={
        "template": "card",
        "attributes": {"title": "Carte"},
        "innerContent": "",
        "lang": "fr",
    })
    assert r.status_code == 200
    assert "En savoir plus" in r.json()["html"]


def test_preview_unknown_template(client):
    r = client.post("/proto-blocks/v1/preview", json={"template": "carousel", "attributes": {}})
    assert r.status_code == 404
    assert r.json()["error"] == "Block template not found."


def test_render_live(client):
    r = client.post("/proto-blocks/v1/blocks/hero/render", json={
        "attributes": {"title": "Bienvenue"},
        "innerContent": "<p>enfant</p>",
        "supports": {"className": "home-hero"},
    })
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "Bienvenue" in r.text
    assert "<p>enfant</p>" in r.text
    assert "home-hero" in r.text
    assert "proto-hero__subtitle" not in r.text


def test_render_live_unknown(client):
    r = client.post("/proto-blocks/v1/blocks/carousel/render", json={})
    assert r.status_code == 404
