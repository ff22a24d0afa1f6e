"""Tests attributs — défauts, alias camelCase, validation tolérante, immuabilité."""
import pytest
from pydantic import ValidationError

from proto_blocks.blocks import (
    AccordionAttributes,
    CardAttributes,
    CTAAttributes,
    HeaderNavAttributes,
    HeroAttributes,
    ImageRef,
    StatsAttributes,
)
from proto_blocks.blocks import testimonial


# ── Défauts ───────────────────────────────────────────────────────────────────

def test_card_defaults():
    a = CardAttributes()
    assert a.layout == "vertical"
    assert a.image_position == "top"
    assert a.show_link is True
    assert a.image.url == ""
    assert a.link.url == "#"
    assert a.link.text is None


def test_hero_defaults():
    a = HeroAttributes()
    assert a.background_color == "#1e1e1e"
    assert a.overlay_opacity == 70
    assert a.text_color == "#ffffff"
    assert a.min_height == 60
    assert a.content_alignment == "center"
    assert a.vertical_alignment == "center"


def test_stats_defaults():
    a = StatsAttributes()
    assert a.stats == []
    assert a.columns == 4
    assert a.number_size == 48
    assert a.show_dividers is False


def test_testimonial_defaults():
    a = testimonial.TestimonialAttributes()
    assert a.rating == 5
    assert a.show_avatar is True
    assert a.show_rating is True


def test_header_nav_defaults():
    a = HeaderNavAttributes()
    assert a.show_cta is True
    assert a.fixed_position is False
    assert a.cta_button.url == "#"
    assert a.cta_button.text == "Get started"
    assert a.nav_items == []


def test_cta_and_accordion_defaults():
    assert CTAAttributes().button_style == "primary"
    assert CTAAttributes().show_icon is True
    assert AccordionAttributes().first_open is True
    assert AccordionAttributes().icon_position == "right"


# ── Alias ─────────────────────────────────────────────────────────────────────

def test_camel_case_keys():
    a = CardAttributes.model_validate({"imagePosition": "left", "showLink": False})
    assert a.image_position == "left"
    assert a.show_link is False


def test_snake_case_keys_accepted():
    a = HeroAttributes.model_validate({"overlay_opacity": 40, "min_height": 80})
    assert a.overlay_opacity == 40
    assert a.min_height == 80


def test_unknown_keys_ignored():
    a = CardAttributes.model_validate({"title": "T", "futureAttribute": {"x": 1}})
    assert a.title == "T"
    assert not hasattr(a, "futureAttribute")


def test_nested_mappings():
    a = CardAttributes.model_validate({
        "image": {"url": "/img.jpg", "alt": "Alt", "id": 12},
        "link": {"url": "/go", "text": "Go", "target": "_blank"},
    })
    assert a.image == ImageRef(url="/img.jpg", alt="Alt")
    assert a.link.text == "Go"
    assert a.link.target == "_blank"


# ── Validation tolérante ──────────────────────────────────────────────────────

def test_invalid_enum_falls_back_to_default():
    a = CardAttributes.model_validate({"layout": "diagonal"})
    assert a.layout == "vertical"


def test_none_falls_back_to_default():
    a = StatsAttributes.model_validate({"columns": None, "stats": None})
    assert a.columns == 4
    assert a.stats == []


def test_malformed_values_fall_back():
    a = testimonial.TestimonialAttributes.model_validate({"rating": "abc", "authorImage": "not-a-dict"})
    assert a.rating == 5
    assert a.author_image.url == ""


def test_numeric_strings_coerced():
    a = testimonial.TestimonialAttributes.model_validate({"rating": "4"})
    assert a.rating == 4


def test_numbers_coerced_to_text():
    a = StatsAttributes.model_validate({"stats": [{"number": 150, "label": "Clients"}]})
    assert a.stats[0].number == "150"


def test_repeater_item_defaults():
    a = HeaderNavAttributes.model_validate({"navItems": [{}]})
    assert a.nav_items[0].label == "Link"
    assert a.nav_items[0].url == "#"


def test_repeater_order_preserved():
    a = StatsAttributes.model_validate({"stats": [{"label": l} for l in "abcd"]})
    assert [s.label for s in a.stats] == ["a", "b", "c", "d"]


# ── Immuabilité ───────────────────────────────────────────────────────────────

def test_attributes_are_frozen():
    a = CardAttributes(title="T")
    with pytest.raises(ValidationError):
        a.title = "Autre"
