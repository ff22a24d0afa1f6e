"""
Configuration proto_blocks — variables d'environnement, lues à chaque appel.

PROTO_BLOCKS_LANG           langue par défaut des libellés ("en")
PROTO_BLOCKS_I18N_DIR       dossier alternatif pour les catalogues {lang}.json
PROTO_BLOCKS_URL_PROTOCOLS  schémas d'URL autorisés, séparés par des virgules
"""
import os
from pathlib import Path

DEFAULT_LANG = "en"

DEFAULT_URL_PROTOCOLS = (
    "http", "https", "ftp", "ftps", "mailto", "news",
    "irc", "tel", "sms", "feed",
)


def default_lang() -> str:
    return os.getenv("PROTO_BLOCKS_LANG", DEFAULT_LANG) or DEFAULT_LANG


def i18n_dir() -> Path:
    override = os.getenv("PROTO_BLOCKS_I18N_DIR", "")
    return Path(override) if override else Path(__file__).parent / "i18n"


def allowed_url_protocols() -> tuple[str, ...]:
    """Schémas autorisés par esc_url / kses_post (minuscules, sans ':')."""
    raw = os.getenv("PROTO_BLOCKS_URL_PROTOCOLS", "")
    if not raw.strip():
        return DEFAULT_URL_PROTOCOLS
    return tuple(p.strip().lower().rstrip(":") for p in raw.split(",") if p.strip())
