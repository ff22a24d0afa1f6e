"""Bloc Testimonial — citation, auteur, avatar et note sur 5 étoiles."""
from pydantic import Field

from .base import BlockAttributes, ImageRef


class TestimonialAttributes(BlockAttributes):
    style: str = "default"
    show_avatar: bool = True
    show_rating: bool = True
    rating: int = 5
    quote: str = ""
    author_name: str = ""
    author_title: str = ""
    author_image: ImageRef = Field(default_factory=ImageRef)
