"""
Attributs de base des blocs proto_blocks.

Chaque bloc déclare un modèle Pydantic typé à partir du sac d'attributs de
l'hôte (clés camelCase, snake_case accepté). Validation tolérante : une valeur
absente, None ou invalide retombe sur le défaut du champ, jamais d'exception.
"""
import logging
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel

log = logging.getLogger(__name__)


class BlockAttributes(BaseModel):
    """Sac d'attributs d'un bloc (immuable pendant le rendu)."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def _fallback_to_default(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        if value is None:
            return cls._field_default(info.field_name)
        try:
            return handler(value)
        except ValidationError:
            log.warning("%s.%s invalide (%r) — valeur par défaut", cls.__name__, info.field_name, value)
            return cls._field_default(info.field_name)

    @classmethod
    def _field_default(cls, name: str) -> Any:
        return cls.model_fields[name].get_default(call_default_factory=True)


class ImageRef(BlockAttributes):
    """Image sélectionnée dans la médiathèque."""
    url: str = ""
    alt: str = ""


class LinkRef(BlockAttributes):
    """Lien éditable. text=None → libellé par défaut du bloc."""
    url: str = "#"
    text: Optional[str] = None
    target: str = ""
    rel: str = ""
