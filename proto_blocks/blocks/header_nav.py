"""Bloc HeaderNav — barre de navigation (logo, liens, bouton CTA, menu mobile)."""
from typing import List

from pydantic import Field

from .base import BlockAttributes, ImageRef, LinkRef


class NavItem(BlockAttributes):
    label: str = "Link"
    url: str = "#"


class HeaderNavAttributes(BlockAttributes):
    fixed_position: bool = False
    show_cta: bool = True
    nav_items: List[NavItem] = Field(default_factory=list)
    cta_button: LinkRef = Field(default_factory=lambda: LinkRef(url="#", text="Get started"))
    logo: ImageRef = Field(default_factory=ImageRef)
    site_title: str = "Site Name"


PREVIEW_NAV_ITEMS = (
    NavItem(label="Home", url="#"),
    NavItem(label="About", url="#"),
    NavItem(label="Services", url="#"),
    NavItem(label="Contact", url="#"),
)
