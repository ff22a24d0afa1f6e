"""Bloc Card — image, titre, contenu rich text et lien d'appel à l'action."""
from typing import Literal

from pydantic import Field

from .base import BlockAttributes, ImageRef, LinkRef


class CardAttributes(BlockAttributes):
    layout: Literal["vertical", "horizontal", "overlay"] = "vertical"
    image_position: Literal["top", "left", "right"] = "top"
    show_link: bool = True
    image: ImageRef = Field(default_factory=ImageRef)
    title: str = ""
    content: str = ""
    link: LinkRef = Field(default_factory=LinkRef)
