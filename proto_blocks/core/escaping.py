"""
Échappement — texte, attributs, URLs et rich text.

Toutes les fonctions sont totales : None ou vide → "" ; jamais d'exception.
  esc_html / esc_attr  → html.escape (guillemets compris)
  clean_url            → filtre le protocole, sans échappement HTML (pour le CSS)
  esc_url              → clean_url + esc_attr (pour href / src)
  kses_post            → nh3, liste blanche de balises "contenu d'article"
"""
import html
import re
from typing import Any

import nh3

from .. import config

_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")

KSES_POST_TAGS = {
    "a", "abbr", "b", "blockquote", "br", "cite", "code", "del", "div", "em",
    "figcaption", "figure", "h1", "h2", "h3", "h4", "h5", "h6", "hr", "i",
    "img", "ins", "li", "mark", "ol", "p", "pre", "q", "s", "small", "span",
    "strong", "sub", "sup", "u", "ul",
}

KSES_POST_ATTRIBUTES = {
    "*": {"class", "id", "title", "lang", "dir"},
    "a": {"href", "target", "rel", "hreflang"},
    "img": {"src", "alt", "width", "height", "loading"},
    "blockquote": {"cite"},
    "q": {"cite"},
    "ol": {"start", "reversed"},
}


def esc_html(value: Any) -> str:
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def esc_attr(value: Any) -> str:
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def clean_url(url: Any) -> str:
    """
    Nettoie une URL : retire les caractères de contrôle, encode les espaces et
    rejette ("") tout schéma hors config.allowed_url_protocols().
    Les URLs relatives (/chemin, #ancre, ?q=) passent telles quelles.
    """
    if not url:
        return ""
    url = _CONTROL_RE.sub("", str(url)).strip()
    if not url:
        return ""
    url = url.replace(" ", "%20")

    match = _SCHEME_RE.match(url)
    if match and match.group(1).lower() not in config.allowed_url_protocols():
        return ""
    return url


def esc_url(url: Any) -> str:
    return esc_attr(clean_url(url))


def kses_post(value: Any) -> str:
    """Sanitize du rich text : garde le balisage sûr, supprime script/style/on*."""
    if not value:
        return ""
    return nh3.clean(
        str(value),
        tags=KSES_POST_TAGS,
        attributes=KSES_POST_ATTRIBUTES,
        url_schemes=set(config.allowed_url_protocols()),
        link_rel=None,
    )
