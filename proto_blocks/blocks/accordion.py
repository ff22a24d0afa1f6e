"""Bloc Accordion — sections repliables (état piloté côté client)."""
from typing import List, Literal

from pydantic import Field

from .base import BlockAttributes


class AccordionItem(BlockAttributes):
    id: str = ""
    title: str = ""
    content: str = ""


class AccordionAttributes(BlockAttributes):
    items: List[AccordionItem] = Field(default_factory=list)
    allow_multiple: bool = False
    first_open: bool = True
    icon_position: Literal["left", "right"] = "right"


PREVIEW_ACCORDION_ITEMS = (
    AccordionItem(id="preview-1", title="Accordion Item 1", content="Click to edit this content..."),
    AccordionItem(id="preview-2", title="Accordion Item 2", content="Add more items using the repeater..."),
)
