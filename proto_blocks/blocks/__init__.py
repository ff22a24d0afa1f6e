"""
Blocs — modèles d'attributs typés, un par type de bloc.
"""
from .base import BlockAttributes, ImageRef, LinkRef
from .card import CardAttributes
from .hero import HeroAttributes
from .stats import StatsAttributes, StatItem, PREVIEW_STATS
from .testimonial import TestimonialAttributes
from .header_nav import HeaderNavAttributes, NavItem, PREVIEW_NAV_ITEMS
from .cta import CTAAttributes
from .accordion import AccordionAttributes, AccordionItem, PREVIEW_ACCORDION_ITEMS
from .tl_hero import TailwindHeroAttributes
from .tl_footer import TailwindFooterAttributes, FooterLink, PREVIEW_FOOTER_LINKS

__all__ = [
    # Base
    "BlockAttributes", "ImageRef", "LinkRef",
    # Blocs
    "CardAttributes",
    "HeroAttributes",
    "StatsAttributes", "StatItem", "PREVIEW_STATS",
    "TestimonialAttributes",
    "HeaderNavAttributes", "NavItem", "PREVIEW_NAV_ITEMS",
    "CTAAttributes",
    "AccordionAttributes", "AccordionItem", "PREVIEW_ACCORDION_ITEMS",
    "TailwindHeroAttributes",
    "TailwindFooterAttributes", "FooterLink", "PREVIEW_FOOTER_LINKS",
]
