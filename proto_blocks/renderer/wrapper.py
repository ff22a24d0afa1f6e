"""
Attributs d'enveloppe — block supports de l'hôte + fusion avec les classes du bloc.

supports_to_wrapper({"align": "wide", "className": "promo"})
    → WrapperAttributes(classes=("alignwide", "promo"))

wrapper_attributes(wrapper, classes, styles)
    → 'class="promo proto-card ..." style="..."'  (classes de l'hôte d'abord)
"""
import logging
import re
from typing import Any, Dict, Iterable, Optional

from ..core.colors import css_color
from ..core.escaping import esc_attr
from ..core.schemas import WrapperAttributes

_PRESET_RE = re.compile(r"^var:preset\|([a-z-]+)\|(.+)$")
_SIDES = ("top", "right", "bottom", "left")
_UNSAFE_CSS_RE = re.compile(r"[;{}<>\\]|url\(|expression\(", re.IGNORECASE)

log = logging.getLogger(__name__)


def _preset(value: Any, kind: str) -> Optional[str]:
    """'var:preset|color|primary' → 'primary' si kind == 'color', sinon None."""
    if not isinstance(value, str):
        return None
    match = _PRESET_RE.match(value)
    if match and match.group(1) == kind:
        return match.group(2)
    return None


def _css_value(value: Any) -> Optional[str]:
    """Valeur libre (taille, espacement) ; None si elle pourrait injecter une déclaration."""
    text = str(value).strip()
    if not text or _UNSAFE_CSS_RE.search(text):
        log.warning("Style de l'hôte refusé : %r", value)
        return None
    return text


def _spacing_value(value: Any) -> Optional[str]:
    slug = _preset(value, "spacing")
    return f"var(--wp--preset--spacing--{slug})" if slug else _css_value(value)


def _style_color(value: Any) -> Optional[str]:
    color = css_color(value)
    if color is None:
        log.warning("Couleur de l'hôte refusée : %r", value)
    return color


def _append(styles: list, prop: str, value: Optional[str]) -> None:
    if value:
        styles.append(f"{prop}: {value}")


def _style_support(style: Dict[str, Any], classes: list, styles: list) -> None:
    color = style.get("color") or {}
    if isinstance(color, dict):
        if color.get("text"):
            slug = _preset(color["text"], "color")
            if slug:
                classes.append(f"has-{slug}-color")
            else:
                _append(styles, "color", _style_color(color["text"]))
        if color.get("background"):
            slug = _preset(color["background"], "color")
            if slug:
                classes.append(f"has-{slug}-background-color")
            else:
                _append(styles, "background-color", _style_color(color["background"]))

    typography = style.get("typography") or {}
    if isinstance(typography, dict):
        if typography.get("fontSize"):
            slug = _preset(typography["fontSize"], "font-size")
            if slug:
                classes.append(f"has-{slug}-font-size")
            else:
                _append(styles, "font-size", _css_value(typography["fontSize"]))
        if typography.get("lineHeight"):
            _append(styles, "line-height", _css_value(typography["lineHeight"]))

    spacing = style.get("spacing") or {}
    if isinstance(spacing, dict):
        for prop in ("padding", "margin"):
            value = spacing.get(prop)
            if not value:
                continue
            if isinstance(value, dict):
                for side in _SIDES:
                    if side in value:
                        _append(styles, f"{prop}-{side}", _spacing_value(value[side]))
            else:
                _append(styles, prop, _spacing_value(value))


def supports_to_wrapper(supports: Optional[Dict[str, Any]] = None) -> WrapperAttributes:
    """Traduit les block supports de l'hôte (align, className, anchor, presets, style)."""
    if not supports or not isinstance(supports, dict):
        return WrapperAttributes()

    classes: list = []
    styles: list = []

    if supports.get("align"):
        classes.append(f"align{supports['align']}")
    if supports.get("className"):
        classes.extend(str(supports["className"]).split())
    if supports.get("backgroundColor"):
        classes += [f"has-{supports['backgroundColor']}-background-color", "has-background"]
    if supports.get("textColor"):
        classes += [f"has-{supports['textColor']}-color", "has-text-color"]
    if supports.get("fontSize"):
        classes.append(f"has-{supports['fontSize']}-font-size")
    if isinstance(supports.get("style"), dict):
        _style_support(supports["style"], classes, styles)

    return WrapperAttributes(
        classes=tuple(classes),
        styles=tuple(styles),
        id=str(supports["anchor"]) if supports.get("anchor") else None,
    )


def _dedupe(tokens: Iterable[str]) -> list:
    seen = set()
    out = []
    for token in tokens:
        if token and token not in seen:
            seen.add(token)
            out.append(token)
    return out


def wrapper_attributes(
    wrapper: WrapperAttributes,
    classes: Iterable[str],
    styles: Iterable[str] = (),
    extra: Optional[Dict[str, str]] = None,
) -> str:
    """
    Fusionne l'enveloppe de l'hôte avec les classes/styles du bloc.

    Les classes du bloc sont ajoutées après celles de l'hôte, jamais à leur
    place (doublons retirés, première occurrence gardée). Styles : ceux de
    l'hôte puis ceux du bloc, joints par "; ". Valeurs échappées ici.
    """
    merged_classes = _dedupe([*wrapper.classes, *classes])
    merged_styles = [s.rstrip("; ") for s in (*wrapper.styles, *styles) if s]

    parts = [f'class="{esc_attr(" ".join(merged_classes))}"']
    if merged_styles:
        parts.append(f'style="{esc_attr("; ".join(merged_styles))}"')
    if wrapper.id:
        parts.append(f'id="{esc_attr(wrapper.id)}"')
    for name, value in {**wrapper.extra, **(extra or {})}.items():
        parts.append(f'{name}="{esc_attr(value)}"')
    return " ".join(parts)
