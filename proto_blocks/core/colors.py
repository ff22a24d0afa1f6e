"""
Couleurs — conversion hex → rgba pour les overlays, filtre des couleurs CSS inline.
"""
import re
from typing import Any, Optional

_HEX_RE = re.compile(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}")


class InvalidColor(ValueError):
    """Couleur hex mal formée (ni 3 ni 6 chiffres hexadécimaux)."""


def hex_to_rgba(hex_color: str, alpha=1) -> str:
    """
    Convertit #RGB / #RRGGBB (le # est optionnel) en "rgba(R, G, B, A)".

    L'alpha est recopié tel quel, sans clamp ni formatage : au caller de le
    borner à [0, 1].

    Raises:
        InvalidColor: si la chaîne n'a pas exactement 3 ou 6 chiffres hex.
    """
    if not isinstance(hex_color, str):
        raise InvalidColor(f"Couleur invalide : {hex_color!r}")

    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    if not _HEX_RE.fullmatch(digits):
        raise InvalidColor(f"Couleur invalide : {hex_color!r}")

    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)

    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r}, {g}, {b}, {alpha})"


_CSS_COLOR_RE = re.compile(
    r"#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})"
    r"|[a-zA-Z]+"
    r"|(?:rgb|rgba|hsl|hsla)\([0-9.,%\s/]+\)"
    r"|var\(--[a-zA-Z0-9_-]+\)"
)


def css_color(value: Any) -> Optional[str]:
    """
    Valeur de couleur CSS sûre pour un style inline, sinon None.

    Acceptés : hex (#rgb, #rgba, #rrggbb, #rrggbbaa), mot-clé (red,
    transparent...), rgb()/rgba()/hsl()/hsla() numériques, var(--x).
    Tout le reste ("red; background-image:url(...)", expressions) est refusé.
    """
    if not isinstance(value, str):
        return None
    value = value.strip()
    if _CSS_COLOR_RE.fullmatch(value):
        return value
    return None
