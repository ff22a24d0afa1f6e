"""Bloc CTA — section d'appel à l'action avec bouton et icône flèche."""
from pydantic import Field

from .base import BlockAttributes, LinkRef


class CTAAttributes(BlockAttributes):
    title: str = ""
    description: str = ""
    link: LinkRef = Field(default_factory=LinkRef)
    background_color: str = ""
    text_color: str = ""
    button_style: str = "primary"
    layout: str = "centered"
    show_icon: bool = True
    full_width: bool = False
