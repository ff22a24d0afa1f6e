"""Tests i18n — traduction, passthrough, placeholders, pipeline complet."""
import json

from proto_blocks.core.i18n import reload_cache, resolve, resolve_placeholders, translate
from proto_blocks.registry import render


def setup_function():
    reload_cache()


def teardown_function():
    reload_cache()


# ── translate ─────────────────────────────────────────────────────────────────

def test_english_passthrough():
    assert translate("Learn More", "en") == "Learn More"


def test_french_catalog():
    assert translate("Learn More", "fr") == "En savoir plus"
    assert translate("Get started", "fr") == "Commencer"


def test_missing_key_returns_source():
    assert translate("Texte inconnu", "fr") == "Texte inconnu"


def test_unknown_lang_returns_source():
    assert translate("Learn More", "zz") == "Learn More"


def test_empty_text():
    assert translate("", "fr") == ""


def test_default_lang_from_env(monkeypatch):
    monkeypatch.setenv("PROTO_BLOCKS_LANG", "fr")
    assert translate("Learn More") == "En savoir plus"
    assert ">En savoir plus</a>" in render("card", {})


def test_custom_catalog_dir(monkeypatch, tmp_path):
    (tmp_path / "de.json").write_text(json.dumps({"Learn More": "Mehr erfahren"}), encoding="utf-8")
    monkeypatch.setenv("PROTO_BLOCKS_I18N_DIR", str(tmp_path))
    assert translate("Learn More", "de") == "Mehr erfahren"


# ── resolve_placeholders ──────────────────────────────────────────────────────

def test_placeholder_simple():
    assert resolve_placeholders("Rating: {rating}", {"rating": 4}) == "Rating: 4"


def test_placeholder_missing_left_intact():
    assert resolve_placeholders("Bonjour {unknown}", {"name": "Alice"}) == "Bonjour {unknown}"


def test_placeholder_no_context():
    assert resolve_placeholders("Bonjour {name}", None) == "Bonjour {name}"


# ── resolve (pipeline complet) ────────────────────────────────────────────────

def test_resolve_pipeline():
    assert resolve("Rating: {rating} out of 5 stars", "fr", {"rating": 3}) == "Note : 3 sur 5 étoiles"
    assert resolve("Rating: {rating} out of 5 stars", "en", {"rating": 3}) == "Rating: 3 out of 5 stars"
