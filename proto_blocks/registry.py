"""
Registry des blocs — nom → (modèle d'attributs, renderer).

    >>> from proto_blocks.registry import render
    >>> html = render("card", {"title": "Hello", "layout": "horizontal"})
    >>> html = render("stats", {}, is_preview=True)   # 4 stats d'exemple
"""
import logging
from typing import Any, Dict, NamedTuple, Optional, Type

from .blocks import (
    AccordionAttributes,
    BlockAttributes,
    CardAttributes,
    CTAAttributes,
    HeaderNavAttributes,
    HeroAttributes,
    StatsAttributes,
    TailwindFooterAttributes,
    TailwindHeroAttributes,
    TestimonialAttributes,
)
from .core.schemas import RenderContext
from .renderer.base import BlockRenderer
from .renderer.html import (
    HEADER_NAV_VIEW_SCRIPT,
    render_accordion_block,
    render_card_block,
    render_cta_block,
    render_header_nav_block,
    render_hero_block,
    render_stats_block,
    render_testimonial_block,
    render_tl_footer_block,
    render_tl_hero_block,
)
from .renderer.wrapper import supports_to_wrapper

log = logging.getLogger(__name__)


class UnknownBlock(KeyError):
    """Nom de bloc absent du registry."""


class BlockType(NamedTuple):
    title: str
    model: Type[BlockAttributes]
    renderer: BlockRenderer
    view_script: Optional[str] = None


BLOCK_REGISTRY: Dict[str, BlockType] = {
    "card":        BlockType("Card", CardAttributes, render_card_block),
    "hero":        BlockType("Hero Section", HeroAttributes, render_hero_block),
    "stats":       BlockType("Stats Counter", StatsAttributes, render_stats_block),
    "testimonial": BlockType("Testimonial", TestimonialAttributes, render_testimonial_block),
    "header-nav":  BlockType("Header Navigation", HeaderNavAttributes, render_header_nav_block,
                             view_script=HEADER_NAV_VIEW_SCRIPT),
    "cta":         BlockType("Call to Action", CTAAttributes, render_cta_block),
    "accordion":   BlockType("Accordion", AccordionAttributes, render_accordion_block),
    "tl-hero":     BlockType("Tailwind Hero", TailwindHeroAttributes, render_tl_hero_block),
    "tl-footer":   BlockType("Tailwind Footer", TailwindFooterAttributes, render_tl_footer_block),
}


def get_block_type(name: str) -> BlockType:
    """Accepte "card" ou le nom complet "proto-blocks/card"."""
    key = name.removeprefix("proto-blocks/")
    try:
        return BLOCK_REGISTRY[key]
    except KeyError:
        raise UnknownBlock(f"Bloc inconnu : {name!r}. Registry : {list(BLOCK_REGISTRY)}") from None


def render(
    name: str,
    attributes: Optional[Dict[str, Any]] = None,
    inner_content: str = "",
    is_preview: bool = False,
    supports: Optional[Dict[str, Any]] = None,
    lang: Optional[str] = None,
) -> str:
    """
    Rend un bloc depuis son sac d'attributs brut.

    Args:
        name: nom du bloc ("card", "hero", ...)
        attributes: attributs de l'hôte (camelCase) — validés, jamais d'exception
        inner_content: HTML des blocs enfants
        is_preview: rendu placeholder de l'éditeur
        supports: block supports de l'hôte (align, className, anchor, style...)
        lang: langue des libellés par défaut (config.default_lang() sinon)

    Raises:
        UnknownBlock: si le nom n'est pas enregistré
    """
    block_type = get_block_type(name)
    context = RenderContext(
        attributes=block_type.model.model_validate(attributes if isinstance(attributes, dict) else {}),
        inner_content=inner_content or "",
        is_preview=is_preview,
        wrapper=supports_to_wrapper(supports),
        lang=lang,
    )
    log.debug("Rendu %s (preview=%s)", name, is_preview)
    return block_type.renderer(context)


def catalog() -> list:
    """Blocs disponibles + JSON schema de leurs attributs."""
    return [
        {"name": name, "title": bt.title, "schema": bt.model.model_json_schema()}
        for name, bt in BLOCK_REGISTRY.items()
    ]
