"""Bloc Tailwind Footer — logo, description, colonne de liens, contact, copyright."""
from typing import List

from pydantic import Field

from .base import BlockAttributes, ImageRef, LinkRef


class FooterLink(BlockAttributes):
    label: str = "Link"
    url: str = "#"


class TailwindFooterAttributes(BlockAttributes):
    show_logo: bool = True
    show_column1: bool = True
    show_column2: bool = True
    logo: ImageRef = Field(default_factory=ImageRef)
    description: str = (
        "Lorem Ipsum is simply dummy text of the printing and typesetting industry. Lorem Ipsum "
        "has been the industry's standard dummy text ever since the 1500s."
    )
    column1_title: str = "Company"
    column1_links: List[FooterLink] = Field(default_factory=list)
    column2_title: str = "Get in touch"
    phone: str = "+1-212-456-7890"
    email: str = "contact@example.com"
    copyright_text: str = "Copyright 2024"
    copyright_link: LinkRef = Field(default_factory=lambda: LinkRef(url="#", text="Your Company"))


PREVIEW_FOOTER_LINKS = (
    FooterLink(label="Home", url="#"),
    FooterLink(label="About us", url="#"),
    FooterLink(label="Contact us", url="#"),
    FooterLink(label="Privacy policy", url="#"),
)
