"""
Schémas de rendu — contexte d'un appel de rendu + attributs d'enveloppe de l'hôte.

RenderContext est construit à chaque appel puis jeté : pas de cache, pas de mutation.
"""
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class WrapperAttributes(BaseModel):
    """Attributs injectés par l'hôte sur l'élément racine du bloc."""
    model_config = ConfigDict(frozen=True)

    classes: Tuple[str, ...] = ()
    styles: Tuple[str, ...] = ()
    id: Optional[str] = None
    extra: Dict[str, str] = Field(default_factory=dict)


class RenderContext(BaseModel):
    """
    Entrée d'un renderer de bloc.

    attributes   : modèle BlockAttributes du bloc (ou dict brut, validé au rendu)
    inner_content: HTML des blocs enfants, déjà rendu par l'hôte
    is_preview   : True quand l'éditeur rend un placeholder (aucune instance live)
    """
    model_config = ConfigDict(frozen=True)

    attributes: Any = Field(default_factory=dict)
    inner_content: str = ""
    is_preview: bool = False
    wrapper: WrapperAttributes = Field(default_factory=WrapperAttributes)
    lang: Optional[str] = None
