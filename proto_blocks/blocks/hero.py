"""Bloc Hero — section pleine largeur, image de fond, overlay coloré, blocs imbriqués."""
from typing import Literal, Union

from pydantic import Field

from .base import BlockAttributes, ImageRef


class HeroAttributes(BlockAttributes):
    title: str = ""
    subtitle: str = ""
    background_image: ImageRef = Field(default_factory=ImageRef)
    background_color: str = "#1e1e1e"
    overlay_opacity: Union[int, float] = 70      # 0–100
    text_color: str = "#ffffff"
    content_alignment: Literal["left", "center", "right"] = "center"
    min_height: Union[int, float] = 60           # vh
    vertical_alignment: Literal["top", "center", "bottom"] = "center"
