"""
i18n — traduction des libellés par défaut des blocs.

Les chaînes source sont en anglais ("Learn More") et servent de clé dans
i18n/{lang}.json. Clé absente ou langue inconnue → chaîne source inchangée.
Placeholders {rating}, {count}, etc. → résolus via context dict.
"""
import json
import logging
import re
from pathlib import Path
from typing import Optional

from .. import config

log = logging.getLogger(__name__)

_I18N_CACHE: dict = {}


def _load_lang(lang: str) -> dict:
    """Charge le fichier {i18n_dir}/{lang}.json (lazy, mis en cache par dossier)."""
    directory: Path = config.i18n_dir()
    key = (str(directory), lang)
    if key not in _I18N_CACHE:
        path = directory / f"{lang}.json"
        if path.exists():
            with open(path, encoding="utf-8") as f:
                _I18N_CACHE[key] = json.load(f)
        else:
            log.debug("Catalogue i18n absent : %s", path)
            _I18N_CACHE[key] = {}
    return _I18N_CACHE[key]


def translate(text: str, lang: Optional[str] = None) -> str:
    """
    Traduit une chaîne source.
    translate("Learn More", "fr") → "En savoir plus"
    """
    if not text:
        return text
    catalog = _load_lang(lang or config.default_lang())
    value = catalog.get(text)
    return value if isinstance(value, str) else text


def resolve_placeholders(text: str, context: Optional[dict] = None) -> str:
    """
    Remplace les placeholders {rating}, {count}, etc. par les valeurs du contexte.
    Les placeholders sans correspondance sont laissés intacts.
    """
    if not context or not text:
        return text

    def replacer(match):
        placeholder = match.group(1)
        return str(context.get(placeholder, match.group(0)))

    return re.sub(r"\{(\w+)\}", replacer, text)


def resolve(text: str, lang: Optional[str] = None, context: Optional[dict] = None) -> str:
    """
    Pipeline complet : traduction → placeholders.
    Usage : resolve("Rating: {rating} out of 5 stars", lang="fr", context={"rating": 4})
    """
    return resolve_placeholders(translate(text, lang), context)


def reload_cache():
    """Force le rechargement des catalogues (utile en dev et en test)."""
    _I18N_CACHE.clear()
