"""
Protocol BlockRenderer — contrat commun à tous les renderers de blocs.
"""
from typing import Protocol, runtime_checkable

from ..core.schemas import RenderContext


@runtime_checkable
class BlockRenderer(Protocol):
    def __call__(self, context: RenderContext) -> str: ...
