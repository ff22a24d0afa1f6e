"""
Proto Blocks — rendu HTML serveur des blocs de l'éditeur.

Usage (registry) :
    >>> from proto_blocks import render
    >>> html = render("hero", {"title": "Bienvenue", "overlayOpacity": 50})
    >>> html = render("stats", {}, is_preview=True)

Usage (renderers directs) :
    >>> from proto_blocks import RenderContext, CardAttributes, render_card_block
    >>> ctx = RenderContext(attributes=CardAttributes(title="Hello"))
    >>> html = render_card_block(ctx)

Utilitaire :
    >>> from proto_blocks import hex_to_rgba
    >>> hex_to_rgba("#abc", 0.5)
    'rgba(170, 187, 204, 0.5)'
"""

__version__ = "0.3.0"

# ── Core ─────────────────────────────────────────────────────────────────────
from .core.colors import InvalidColor, css_color, hex_to_rgba
from .core.escaping import clean_url, esc_attr, esc_html, esc_url, kses_post
from .core.schemas import RenderContext, WrapperAttributes

# ── Blocs ────────────────────────────────────────────────────────────────────
from .blocks import (
    BlockAttributes, ImageRef, LinkRef,
    CardAttributes,
    HeroAttributes,
    StatsAttributes, StatItem,
    TestimonialAttributes,
    HeaderNavAttributes, NavItem,
    CTAAttributes,
    AccordionAttributes, AccordionItem,
    TailwindHeroAttributes,
    TailwindFooterAttributes, FooterLink,
)

# ── Renderers ────────────────────────────────────────────────────────────────
from .renderer import (
    render_block,
    render_card_block,
    render_hero_block,
    render_stats_block,
    render_testimonial_block,
    render_header_nav_block,
    render_cta_block,
    render_accordion_block,
    render_tl_hero_block,
    render_tl_footer_block,
    supports_to_wrapper,
)

# ── Registry ─────────────────────────────────────────────────────────────────
from .registry import BLOCK_REGISTRY, BlockType, UnknownBlock, catalog, render

__all__ = [
    # core
    "InvalidColor", "css_color", "hex_to_rgba",
    "clean_url", "esc_attr", "esc_html", "esc_url", "kses_post",
    "RenderContext", "WrapperAttributes",
    # blocs
    "BlockAttributes", "ImageRef", "LinkRef",
    "CardAttributes", "HeroAttributes", "StatsAttributes", "StatItem",
    "TestimonialAttributes", "HeaderNavAttributes", "NavItem",
    "CTAAttributes", "AccordionAttributes", "AccordionItem",
    "TailwindHeroAttributes", "TailwindFooterAttributes", "FooterLink",
    # renderers
    "render_block", "render_card_block", "render_hero_block", "render_stats_block",
    "render_testimonial_block", "render_header_nav_block", "render_cta_block",
    "render_accordion_block", "render_tl_hero_block", "render_tl_footer_block",
    "supports_to_wrapper",
    # registry
    "BLOCK_REGISTRY", "BlockType", "UnknownBlock", "catalog", "render",
]
