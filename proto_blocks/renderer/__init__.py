"""Renderers HTML des blocs."""
from .base import BlockRenderer
from .html import (
    render_accordion_block,
    render_block,
    render_card_block,
    render_cta_block,
    render_header_nav_block,
    render_hero_block,
    render_stats_block,
    render_testimonial_block,
    render_tl_footer_block,
    render_tl_hero_block,
)
from .wrapper import supports_to_wrapper, wrapper_attributes

__all__ = [
    "BlockRenderer",
    "render_block",
    "render_card_block",
    "render_hero_block",
    "render_stats_block",
    "render_testimonial_block",
    "render_header_nav_block",
    "render_cta_block",
    "render_accordion_block",
    "render_tl_hero_block",
    "render_tl_footer_block",
    "supports_to_wrapper",
    "wrapper_attributes",
]
