"""Bloc Tailwind Hero — section sombre, dégradés décoratifs, badge d'annonce, deux CTA."""
from pydantic import Field

from .base import BlockAttributes, LinkRef


class TailwindHeroAttributes(BlockAttributes):
    show_badge: bool = True
    badge_text: str = "Announcing our next round of funding."
    badge_link: LinkRef = Field(default_factory=lambda: LinkRef(url="#", text="Read more"))
    heading: str = "Data to enrich your online business"
    description: str = (
        "Anim aute id magna aliqua ad ad non deserunt sunt. Qui irure qui lorem cupidatat "
        "commodo. Elit sunt amet fugiat veniam occaecat."
    )
    primary_button: LinkRef = Field(default_factory=lambda: LinkRef(url="#", text="Get started"))
    secondary_link: LinkRef = Field(default_factory=lambda: LinkRef(url="#", text="Learn more"))
    show_secondary_link: bool = True
