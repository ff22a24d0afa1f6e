"""Tests registry — dispatch par nom, supports de l'hôte, catalogue."""
import pytest

from proto_blocks.registry import BLOCK_REGISTRY, UnknownBlock, catalog, get_block_type, render
from proto_blocks.renderer.base import BlockRenderer


def test_registry_names():
    assert set(BLOCK_REGISTRY) == {"card", "hero", "stats", "testimonial", "header-nav", "cta", "accordion", "tl-hero", "tl-footer"}


def test_renderers_satisfy_protocol():
    for block_type in BLOCK_REGISTRY.values():
        assert isinstance(block_type.renderer, BlockRenderer)


def test_render_by_name():
    html = render("card", {"title": "Bonjour", "layout": "horizontal", "imagePosition": "right"})
    assert "Bonjour" in html
    assert "proto-card--image-right" in html


def test_render_full_name():
    assert render("proto-blocks/stats", {}, is_preview=True).count("data-proto-repeater-item") == 4


def test_render_preview_flag_is_explicit():
    assert render("stats", {}).count("data-proto-repeater-item") == 0
    assert render("stats", {}, is_preview=True).count("data-proto-repeater-item") == 4


def test_render_with_supports():
    html = render("hero", {}, supports={"align": "full", "anchor": "intro", "className": "dark"})
    assert 'class="alignfull dark wp-block-proto-blocks-hero' in html
    assert 'id="intro"' in html


def test_render_inner_content():
    html = render("hero", {}, inner_content="<p>child</p>")
    assert "<p>child</p>" in html


def test_render_ignores_non_dict_attributes():
    assert "proto-card" in render("card", ["not", "a", "dict"])
    assert "proto-card" in render("card", None)


def test_unknown_block():
    with pytest.raises(UnknownBlock):
        render("carousel", {})
    with pytest.raises(KeyError):
        get_block_type("carousel")


def test_view_script_only_for_header_nav():
    assert "navbar-header" in get_block_type("header-nav").view_script
    assert get_block_type("card").view_script is None


def test_catalog():
    entries = {e["name"]: e for e in catalog()}
    assert set(entries) == set(BLOCK_REGISTRY)
    card_schema = entries["card"]["schema"]
    assert "imagePosition" in card_schema["properties"]
    assert entries["header-nav"]["title"] == "Header Navigation"
