"""Core module pour proto_blocks."""
from .colors import InvalidColor, css_color, hex_to_rgba
from .escaping import clean_url, esc_attr, esc_html, esc_url, kses_post
from .i18n import resolve, resolve_placeholders, translate
from .schemas import RenderContext, WrapperAttributes

__all__ = [
    "InvalidColor",
    "hex_to_rgba",
    "css_color",
    "clean_url",
    "esc_attr",
    "esc_html",
    "esc_url",
    "kses_post",
    "resolve",
    "resolve_placeholders",
    "translate",
    "RenderContext",
    "WrapperAttributes",
]
