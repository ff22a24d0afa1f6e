"""Bloc Stats — compteurs (préfixe + nombre + suffixe + label) en grille."""
from typing import List, Union

from pydantic import Field

from .base import BlockAttributes


class StatItem(BlockAttributes):
    id: str = ""
    number: str = "0"
    prefix: str = ""
    suffix: str = ""
    label: str = ""


class StatsAttributes(BlockAttributes):
    stats: List[StatItem] = Field(default_factory=list)
    columns: int = 4
    style: str = "default"
    number_size: Union[int, float] = 48          # px
    show_dividers: bool = False


# Affichés dans l'éditeur tant que le repeater est vide
PREVIEW_STATS = (
    StatItem(id="1", number="150", suffix="+", label="Happy Clients"),
    StatItem(id="2", number="500", suffix="K", label="Downloads"),
    StatItem(id="3", number="99", suffix="%", label="Satisfaction"),
    StatItem(id="4", prefix="$", number="2.5", suffix="M", label="Revenue"),
)
