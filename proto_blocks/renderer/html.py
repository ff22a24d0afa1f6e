"""
Renderer HTML — un renderer par type de bloc + dispatch.

Chaque renderer suit le même schéma :
  1. attributs typés (défauts explicites)
  2. classes BEM : base fixe + modificateurs conditionnels (cumulatifs)
  3. styles inline ordonnés
  4. fusion avec l'enveloppe de l'hôte (wrapper_attributes)
  5. markup : texte/URLs échappés, rich text passé à kses_post

Règle preview : un champ optionnel vide garde son élément (placeholder vide)
uniquement si context.is_preview.
"""
import json
import logging
from typing import Any, Type, TypeVar

from ..blocks import (
    PREVIEW_ACCORDION_ITEMS,
    PREVIEW_FOOTER_LINKS,
    PREVIEW_NAV_ITEMS,
    PREVIEW_STATS,
    AccordionAttributes,
    BlockAttributes,
    CardAttributes,
    CTAAttributes,
    HeaderNavAttributes,
    HeroAttributes,
    StatsAttributes,
    TestimonialAttributes,
    TailwindFooterAttributes,
    TailwindHeroAttributes,
)
from ..core.colors import InvalidColor, css_color, hex_to_rgba
from ..core.escaping import clean_url, esc_attr, esc_html, esc_url, kses_post
from ..core.i18n import resolve, translate
from ..core.schemas import RenderContext
from .wrapper import wrapper_attributes

log = logging.getLogger(__name__)

A = TypeVar("A", bound=BlockAttributes)

HERO_DEFAULT_BACKGROUND = "#1e1e1e"
HERO_DEFAULT_TEXT = "#ffffff"

ARROW_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" width="20" height="20" fill="currentColor">'
    '<path d="M13.293 5.293a1 1 0 011.414 0l6 6a1 1 0 010 1.414l-6 6a1 1 0 01-1.414-1.414L17.586 13H4a1 1 0 110-2h13.586l-4.293-4.293a1 1 0 010-1.414z"/>'
    '</svg>'
)

CHEVRON_ICON = (
    '<svg viewBox="0 0 24 24" width="24" height="24" fill="none" stroke="currentColor" stroke-width="2">'
    '<polyline points="6 9 12 15 18 9"></polyline></svg>'
)

NAV_LINK_ACTIVE = "block py-2 px-3 text-white bg-primary-600 rounded md:bg-transparent md:text-primary-600 md:p-0"
NAV_LINK = "block py-2 px-3 text-gray-900 rounded hover:bg-gray-100 md:hover:bg-transparent md:hover:text-primary-600 md:p-0"

# Script de vue (menu mobile) — servi à part, jamais inline dans le markup du bloc
HEADER_NAV_VIEW_SCRIPT = """\
document.addEventListener('DOMContentLoaded', function() {
  const toggleButton = document.querySelector('[data-collapse-toggle="navbar-header"]');
  const navbar = document.getElementById('navbar-header');

  if (toggleButton && navbar) {
    toggleButton.addEventListener('click', function() {
      navbar.classList.toggle('hidden');
      const expanded = toggleButton.getAttribute('aria-expanded') === 'true';
      toggleButton.setAttribute('aria-expanded', !expanded);
    });
  }
});
"""


# ── Helpers ─────────────────────────────────────────────────────────────────

def _attributes(context: RenderContext, model: Type[A]) -> A:
    """Attributs typés du contexte ; un dict brut est validé ici (jamais d'exception)."""
    attrs = context.attributes
    if isinstance(attrs, model):
        return attrs
    if isinstance(attrs, BlockAttributes):
        attrs = attrs.model_dump(by_alias=True)
    if not isinstance(attrs, dict):
        if attrs is not None:
            log.warning("Attributs %s ignorés : %r", model.__name__, type(attrs).__name__)
        attrs = {}
    return model.model_validate(attrs)


def _num(value: Any) -> Any:
    """60.0 → 60 (pas de ".0" parasite dans le CSS)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _link_attrs(target: str, rel: str) -> str:
    out = ""
    if target:
        out += f' target="{esc_attr(target)}"'
    if rel:
        out += f' rel="{esc_attr(rel)}"'
    return out


def _color(value: str, block: str, field: str) -> str:
    """Couleur CSS validée ; "" si absente ou refusée (warning)."""
    color = css_color(value)
    if color is None:
        if value:
            log.warning("%s : %s %r refusée", block, field, value)
        return ""
    return color


# ── Card ────────────────────────────────────────────────────────────────────

def render_card_block(context: RenderContext) -> str:
    a = _attributes(context, CardAttributes)

    classes = ["wp-block-proto-blocks-card", "proto-card", f"proto-card--layout-{a.layout}"]
    if a.layout == "horizontal":
        classes.append(f"proto-card--image-{a.image_position}")

    wrapper = wrapper_attributes(context.wrapper, classes)

    image_html = ""
    if a.image.url or context.is_preview:
        img = ""
        if a.image.url:
            img = f'<img src="{esc_url(a.image.url)}" alt="{esc_attr(a.image.alt)}" loading="lazy" />'
        image_html = f'\n  <figure class="proto-card__image" data-proto-field="image">{img}</figure>'

    link_html = ""
    if a.show_link:
        text = a.link.text if a.link.text is not None else translate("Learn More", context.lang)
        link_html = (
            f'\n    <a class="proto-card__link" href="{esc_url(a.link.url)}" data-proto-field="link"'
            f'{_link_attrs(a.link.target, a.link.rel)}>{esc_html(text)}</a>'
        )

    return f"""<article {wrapper}>{image_html}
  <div class="proto-card__content">
    <h3 class="proto-card__title" data-proto-field="title">{esc_html(a.title)}</h3>
    <div class="proto-card__body" data-proto-field="content">{kses_post(a.content)}</div>{link_html}
  </div>
</article>"""


# ── Hero ────────────────────────────────────────────────────────────────────

def _overlay_color(background_color: str, opacity: Any) -> str:
    alpha = _num(opacity / 100)
    try:
        return hex_to_rgba(background_color, alpha)
    except InvalidColor:
        log.warning("Hero : backgroundColor %r invalide — %s", background_color, HERO_DEFAULT_BACKGROUND)
        return hex_to_rgba(HERO_DEFAULT_BACKGROUND, alpha)


def render_hero_block(context: RenderContext) -> str:
    a = _attributes(context, HeroAttributes)

    classes = [
        "wp-block-proto-blocks-hero",
        "proto-hero",
        f"proto-hero--align-{a.content_alignment}",
        f"proto-hero--valign-{a.vertical_alignment}",
    ]

    styles = [
        f"min-height: {_num(a.min_height)}vh",
        f"color: {_color(a.text_color, 'Hero', 'textColor') or HERO_DEFAULT_TEXT}",
    ]
    background_url = clean_url(a.background_image.url)
    if background_url:
        styles.append(f"background-image: url({background_url})")

    wrapper = wrapper_attributes(context.wrapper, classes, styles)
    overlay = _overlay_color(a.background_color, a.overlay_opacity)

    subtitle_html = ""
    if a.subtitle or context.is_preview:
        subtitle_html = (
            f'\n    <p class="proto-hero__subtitle" data-proto-field="subtitle">{kses_post(a.subtitle)}</p>'
        )

    return f"""<section {wrapper}>
  <div class="proto-hero__overlay" style="background-color: {esc_attr(overlay)};"></div>
  <div class="proto-hero__content">
    <h1 class="proto-hero__title" data-proto-field="title">{kses_post(a.title)}</h1>{subtitle_html}
    <div class="proto-hero__inner-blocks" data-proto-inner-blocks>{context.inner_content}</div>
  </div>
</section>"""


# ── Stats ───────────────────────────────────────────────────────────────────

def render_stats_block(context: RenderContext) -> str:
    a = _attributes(context, StatsAttributes)

    classes = [
        "wp-block-proto-blocks-stats",
        "proto-stats",
        f"proto-stats--style-{a.style}",
        f"proto-stats--cols-{a.columns}",
    ]
    if a.show_dividers:
        classes.append("proto-stats--dividers")

    styles = [
        f"--proto-stats-number-size: {_num(a.number_size)}px",
        f"--proto-stats-columns: {a.columns}",
    ]
    wrapper = wrapper_attributes(context.wrapper, classes, styles)

    stats = a.stats
    if not stats and context.is_preview:
        stats = list(PREVIEW_STATS)

    items_html = ""
    for stat in stats:
        prefix = ""
        if stat.prefix or context.is_preview:
            prefix = f'<span class="proto-stats__prefix" data-proto-field="prefix">{esc_html(stat.prefix)}</span>'
        suffix = ""
        if stat.suffix or context.is_preview:
            suffix = f'<span class="proto-stats__suffix" data-proto-field="suffix">{esc_html(stat.suffix)}</span>'

        items_html += f"""
    <div class="proto-stats__item" data-proto-repeater-item>
      <div class="proto-stats__number-wrapper">{prefix}<span class="proto-stats__number" data-proto-field="number">{esc_html(stat.number)}</span>{suffix}</div>
      <span class="proto-stats__label" data-proto-field="label">{esc_html(stat.label)}</span>
    </div>"""

    return f"""<div {wrapper}>
  <div class="proto-stats__grid" data-proto-repeater="stats">{items_html}
  </div>
</div>"""


# ── Testimonial ─────────────────────────────────────────────────────────────

def _stars(rating: int) -> str:
    """Toujours 5 étoiles ; la i-ème (1-based) est pleine si i <= rating (0 ou négatif : aucune pleine)."""
    stars = []
    for i in range(1, 6):
        filled = i <= rating
        css = "proto-testimonial__star is-filled" if filled else "proto-testimonial__star"
        stars.append(f'<span class="{css}" aria-hidden="true">{"★" if filled else "☆"}</span>')
    return "".join(stars)


def render_testimonial_block(context: RenderContext) -> str:
    a = _attributes(context, TestimonialAttributes)

    classes = [
        "wp-block-proto-blocks-testimonial",
        "proto-testimonial",
        f"proto-testimonial--style-{a.style}",
    ]
    wrapper = wrapper_attributes(context.wrapper, classes)

    rating_html = ""
    if a.show_rating:
        label = resolve("Rating: {rating} out of 5 stars", context.lang, {"rating": a.rating})
        rating_html = f'\n  <div class="proto-testimonial__rating" aria-label="{esc_attr(label)}">{_stars(a.rating)}</div>'

    avatar_html = ""
    if a.show_avatar and (a.author_image.url or context.is_preview):
        img = ""
        if a.author_image.url:
            img = f'<img src="{esc_url(a.author_image.url)}" alt="{esc_attr(a.author_name)}" loading="lazy" />'
        avatar_html = f'\n    <figure class="proto-testimonial__avatar" data-proto-field="authorImage">{img}</figure>'

    return f"""<blockquote {wrapper}>{rating_html}
  <div class="proto-testimonial__quote" data-proto-field="quote">{kses_post(a.quote)}</div>
  <footer class="proto-testimonial__footer">{avatar_html}
    <div class="proto-testimonial__author">
      <cite class="proto-testimonial__name" data-proto-field="authorName">{esc_html(a.author_name)}</cite>
      <span class="proto-testimonial__title" data-proto-field="authorTitle">{esc_html(a.author_title)}</span>
    </div>
  </footer>
</blockquote>"""


# ── Header nav ──────────────────────────────────────────────────────────────

def render_header_nav_block(context: RenderContext) -> str:
    a = _attributes(context, HeaderNavAttributes)

    classes = [
        "wp-block-proto-blocks-header-nav",
        "proto-header-nav",
        "bg-white",
        "fixed" if a.fixed_position else "relative",
        "w-full", "z-20", "top-0", "start-0", "border-b", "border-gray-200",
    ]
    wrapper = wrapper_attributes(context.wrapper, classes)

    logo_html = ""
    if a.logo.url:
        logo_html = (
            f'\n      <img data-proto-field="logo" src="{esc_url(a.logo.url)}" class="h-8" '
            f'alt="{esc_attr(a.logo.alt)}" />'
        )
    elif context.is_preview:
        logo_html = '\n      <img data-proto-field="logo" src="" class="h-8" alt="Logo" />'

    cta_html = ""
    if a.show_cta:
        text = a.cta_button.text if a.cta_button.text is not None else translate("Get started", context.lang)
        cta_html = (
            f'\n      <a href="{esc_url(a.cta_button.url)}"{_link_attrs(a.cta_button.target, a.cta_button.rel)}'
            ' class="proto-header-nav__cta text-white bg-primary-600 hover:bg-primary-700 focus:ring-4'
            ' focus:ring-primary-300 font-medium rounded-lg text-sm px-4 py-2 focus:outline-none"'
            f' data-proto-field="ctaButton">{esc_html(text)}</a>'
        )

    nav_items = a.nav_items
    if not nav_items and context.is_preview:
        nav_items = list(PREVIEW_NAV_ITEMS)

    items_html = ""
    for index, item in enumerate(nav_items):
        # Premier lien = page courante, purement positionnel
        is_first = index == 0
        link_class = NAV_LINK_ACTIVE if is_first else NAV_LINK
        current = ' aria-current="page"' if is_first else ""
        items_html += (
            f'\n        <li data-proto-repeater-item><a href="{esc_url(item.url)}" class="{link_class}"{current}>'
            f'<span data-proto-field="label">{esc_html(item.label)}</span></a></li>'
        )

    menu_label = esc_html(translate("Open main menu", context.lang))

    return f"""<nav {wrapper}>
  <div class="max-w-screen-xl flex flex-wrap items-center justify-between mx-auto p-4">
    <div class="proto-header-nav__brand flex items-center space-x-3 rtl:space-x-reverse">{logo_html}
      <span data-proto-field="siteTitle" class="self-center text-xl text-gray-900 font-semibold whitespace-nowrap">{esc_html(a.site_title)}</span>
    </div>
    <div class="proto-header-nav__actions flex md:order-2 space-x-3 md:space-x-0 rtl:space-x-reverse">{cta_html}
      <button data-collapse-toggle="navbar-header" type="button" class="proto-header-nav__toggle inline-flex items-center p-2 w-10 h-10 justify-center text-sm text-gray-500 rounded-lg md:hidden hover:bg-gray-100 focus:outline-none focus:ring-2 focus:ring-gray-200" aria-controls="navbar-header" aria-expanded="false">
        <span class="sr-only">{menu_label}</span>
        <svg class="w-5 h-5" aria-hidden="true" xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 17 14"><path stroke="currentColor" stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="M1 1h15M1 7h15M1 13h15" /></svg>
      </button>
    </div>
    <div class="proto-header-nav__menu items-center justify-between hidden w-full md:flex md:w-auto md:order-1" id="navbar-header">
      <ul class="proto-header-nav__items flex flex-col font-medium p-4 md:p-0 mt-4 border border-gray-100 rounded-lg bg-gray-50 md:space-x-8 rtl:space-x-reverse md:flex-row md:mt-0 md:border-0 md:bg-white" data-proto-repeater="navItems">{items_html}
      </ul>
    </div>
  </div>
</nav>"""


# ── CTA ─────────────────────────────────────────────────────────────────────

def render_cta_block(context: RenderContext) -> str:
    a = _attributes(context, CTAAttributes)

    classes = [
        "wp-block-proto-blocks-cta",
        "proto-cta",
        f"proto-cta--layout-{a.layout}",
        f"proto-cta--button-{a.button_style}",
    ]
    if a.full_width:
        classes.append("proto-cta--button-full")

    styles = []
    background_color = _color(a.background_color, "CTA", "backgroundColor")
    if background_color:
        styles.append(f"background-color: {background_color}")
    text_color = _color(a.text_color, "CTA", "textColor")
    if text_color:
        styles.append(f"color: {text_color}")

    wrapper = wrapper_attributes(context.wrapper, classes, styles)

    if a.title:
        title = kses_post(a.title)
    elif context.is_preview:
        title = esc_html(translate("Ready to Get Started?", context.lang))
    else:
        title = ""

    description_html = ""
    if a.description:
        description_html = f'\n    <p class="proto-cta__description">{esc_html(a.description)}</p>'

    text = a.link.text if a.link.text is not None else translate("Get Started", context.lang)
    icon_html = f'<span class="proto-cta__button-icon">{ARROW_ICON}</span>' if a.show_icon else ""

    return f"""<div {wrapper}>
  <div class="proto-cta__content">
    <h2 class="proto-cta__title" data-proto-field="title">{title}</h2>{description_html}
  </div>
  <div class="proto-cta__action">
    <a class="proto-cta__button" href="{esc_url(a.link.url)}" data-proto-field="link"{_link_attrs(a.link.target, a.link.rel)}><span class="proto-cta__button-text">{esc_html(text)}</span>{icon_html}</a>
  </div>
</div>"""


# ── Accordion ───────────────────────────────────────────────────────────────

def render_accordion_block(context: RenderContext) -> str:
    a = _attributes(context, AccordionAttributes)

    items = a.items
    if not items:
        if not context.is_preview:
            return ""
        items = list(PREVIEW_ACCORDION_ITEMS)

    # Préfixe d'ID déterministe : ancre de l'hôte, sinon selon le mode
    block_id = context.wrapper.id or ("preview" if context.is_preview else "accordion")

    classes = [
        "wp-block-proto-blocks-accordion",
        "proto-accordion",
        f"proto-accordion--icon-{a.icon_position}",
    ]
    state = {"allowMultiple": a.allow_multiple, "openItems": [0] if a.first_open else []}
    wrapper = wrapper_attributes(
        context.wrapper,
        classes,
        extra={
            "data-wp-interactive": "proto-blocks/accordion",
            "data-wp-context": json.dumps(state),
        },
    )

    items_html = ""
    for index, item in enumerate(items):
        item_id = esc_attr(f"{block_id}-{index}")
        is_open = a.first_open and index == 0
        hidden = "" if is_open else " hidden"
        item_context = esc_attr(json.dumps({"index": index}))
        items_html += f"""
  <div class="proto-accordion__item" data-proto-repeater-item data-wp-context="{item_context}" data-wp-class--is-open="state.isItemOpen">
    <h3 class="proto-accordion__header">
      <button type="button" class="proto-accordion__trigger" id="{item_id}-trigger" aria-expanded="{"true" if is_open else "false"}" aria-controls="{item_id}-panel" data-wp-on--click="actions.toggle" data-wp-bind--aria-expanded="state.isItemOpen">
        <span class="proto-accordion__title" data-proto-field="title">{esc_html(item.title)}</span>
        <span class="proto-accordion__icon" aria-hidden="true">{CHEVRON_ICON}</span>
      </button>
    </h3>
    <div id="{item_id}-panel" class="proto-accordion__panel" role="region" aria-labelledby="{item_id}-trigger" data-wp-bind--hidden="!state.isItemOpen"{hidden}>
      <div class="proto-accordion__content" data-proto-field="content">{kses_post(item.content)}</div>
    </div>
  </div>"""

    return f"""<div {wrapper} data-proto-repeater="items">{items_html}
</div>"""


# ── Tailwind Hero ───────────────────────────────────────────────────────────

TL_HERO_BLOB_CLIP = (
    "clip-path: polygon(74.1% 44.1%, 100% 61.6%, 97.5% 26.9%, 85.5% 0.1%, 80.7% 2%, 72.5% 32.5%, "
    "60.2% 62.4%, 52.4% 68.1%, 47.5% 58.3%, 45.2% 34.5%, 27.5% 76.7%, 0.1% 64.9%, 17.9% 100%, "
    "27.6% 76.8%, 76.1% 97.7%, 74.1% 44.1%)"
)

TL_FOOTER_LOGO_SVG = (
    '<svg data-proto-field="logo" class="h-10 w-auto text-primary-600" viewBox="0 0 512 512" '
    'xmlns="http://www.w3.org/2000/svg" aria-hidden="true">'
    '<path fill="currentColor" d="M256 48 455 163v186L256 464 57 349V163Z"/></svg>'
)


def _link_text(link, default: str, lang) -> str:
    return link.text if link.text is not None else translate(default, lang)


def render_tl_hero_block(context: RenderContext) -> str:
    a = _attributes(context, TailwindHeroAttributes)

    classes = [
        "wp-block-proto-blocks-tl-hero",
        "relative", "isolate", "bg-gray-900", "px-6", "py-24", "sm:py-32", "lg:px-8", "overflow-hidden",
    ]
    wrapper = wrapper_attributes(context.wrapper, classes)

    badge_html = ""
    if a.show_badge:
        badge_link_text = esc_html(_link_text(a.badge_link, "Read more", context.lang))
        badge_html = f"""
    <div class="hidden sm:mb-8 sm:flex sm:justify-center">
      <div class="relative rounded-full px-3 py-1 text-sm leading-6 text-gray-400 ring-1 ring-white/10 hover:ring-white/20">
        <span data-proto-field="badgeText">{esc_html(a.badge_text)}</span>
        <a href="{esc_url(a.badge_link.url)}" class="font-semibold text-primary-400 ml-1 no-underline hover:underline" data-proto-field="badgeLink"{_link_attrs(a.badge_link.target, a.badge_link.rel)}><span aria-hidden="true" class="absolute inset-0"></span>{badge_link_text} <span aria-hidden="true">&rarr;</span></a>
      </div>
    </div>"""

    secondary_html = ""
    if a.show_secondary_link:
        secondary_html = (
            f'\n        <a href="{esc_url(a.secondary_link.url)}" class="text-sm font-semibold leading-6 text-white'
            f' hover:text-gray-300 transition-colors no-underline" data-proto-field="secondaryLink"'
            f'{_link_attrs(a.secondary_link.target, a.secondary_link.rel)}>'
            f'{esc_html(_link_text(a.secondary_link, "Learn more", context.lang))} <span aria-hidden="true">&rarr;</span></a>'
        )

    primary_text = esc_html(_link_text(a.primary_button, "Get started", context.lang))

    return f"""<section {wrapper}>
  <div aria-hidden="true" class="absolute inset-x-0 -top-40 -z-10 transform-gpu overflow-hidden blur-3xl sm:-top-80">
    <div style="{TL_HERO_BLOB_CLIP}" class="relative left-[calc(50%-11rem)] aspect-[1155/678] w-[36.125rem] -translate-x-1/2 rotate-[30deg] bg-gradient-to-tr from-[#ff80b5] to-[#9089fc] opacity-30 sm:left-[calc(50%-30rem)] sm:w-[72.1875rem]"></div>
  </div>
  <div class="mx-auto max-w-2xl py-8 sm:py-16 lg:py-24">{badge_html}
    <div class="text-center">
      <h1 class="text-4xl font-semibold tracking-tight text-white sm:text-5xl lg:text-7xl" data-proto-field="heading">{esc_html(a.heading)}</h1>
      <p class="mt-6 text-lg leading-8 text-gray-400 sm:mt-8 sm:text-xl" data-proto-field="description">{esc_html(a.description)}</p>
      <div class="mt-10 flex items-center justify-center gap-x-6">
        <a href="{esc_url(a.primary_button.url)}" class="rounded-md bg-primary-500 px-3.5 py-2.5 text-sm font-semibold text-white shadow-sm hover:bg-primary-400 focus-visible:outline focus-visible:outline-2 focus-visible:outline-offset-2 focus-visible:outline-primary-500 transition-colors no-underline" data-proto-field="primaryButton"{_link_attrs(a.primary_button.target, a.primary_button.rel)}>{primary_text}</a>{secondary_html}
      </div>
    </div>
  </div>
  <div aria-hidden="true" class="absolute inset-x-0 top-[calc(100%-13rem)] -z-10 transform-gpu overflow-hidden blur-3xl sm:top-[calc(100%-30rem)]">
    <div style="{TL_HERO_BLOB_CLIP}" class="relative left-[calc(50%+3rem)] aspect-[1155/678] w-[36.125rem] -translate-x-1/2 bg-gradient-to-tr from-[#ff80b5] to-[#9089fc] opacity-30 sm:left-[calc(50%+36rem)] sm:w-[72.1875rem]"></div>
  </div>
</section>"""


# ── Tailwind Footer ─────────────────────────────────────────────────────────

def render_tl_footer_block(context: RenderContext) -> str:
    a = _attributes(context, TailwindFooterAttributes)

    classes = [
        "wp-block-proto-blocks-tl-footer",
        "px-6", "md:px-16", "lg:px-24", "xl:px-32", "pt-8", "w-full", "text-gray-500", "bg-white",
    ]
    wrapper = wrapper_attributes(context.wrapper, classes)

    logo_html = ""
    if a.show_logo:
        if a.logo.url:
            alt = a.logo.alt or translate("Logo", context.lang)
            logo_html = (
                f'\n      <img data-proto-field="logo" src="{esc_url(a.logo.url)}" '
                f'class="h-10 max-w-[160px] object-contain" alt="{esc_attr(alt)}" />'
            )
        else:
            # Logo par défaut du thème, pas un placeholder d'éditeur
            logo_html = f"\n      {TL_FOOTER_LOGO_SVG}"

    column1_html = ""
    if a.show_column1:
        links = a.column1_links
        if not links and context.is_preview:
            links = list(PREVIEW_FOOTER_LINKS)
        links_html = "".join(
            f'\n          <li data-proto-repeater-item><a href="{esc_url(link.url)}" class="hover:text-primary-600 transition-colors">'
            f'<span data-proto-field="label">{esc_html(link.label)}</span></a></li>'
            for link in links
        )
        column1_html = f"""
      <div>
        <h2 class="font-semibold mb-5 text-gray-800" data-proto-field="column1Title">{esc_html(a.column1_title)}</h2>
        <ul class="text-sm space-y-2" data-proto-repeater="column1Links">{links_html}
        </ul>
      </div>"""

    column2_html = ""
    if a.show_column2:
        column2_html = f"""
      <div>
        <h2 class="font-semibold mb-5 text-gray-800" data-proto-field="column2Title">{esc_html(a.column2_title)}</h2>
        <div class="text-sm space-y-2">
          <p data-proto-field="phone">{esc_html(a.phone)}</p>
          <p data-proto-field="email">{esc_html(a.email)}</p>
        </div>
      </div>"""

    copyright_link = (
        f'<a href="{esc_url(a.copyright_link.url)}" class="text-primary-600 hover:text-primary-700 transition-colors"'
        f' data-proto-field="copyrightLink"{_link_attrs(a.copyright_link.target, a.copyright_link.rel)}>'
        f'{esc_html(_link_text(a.copyright_link, "Your Company", context.lang))}</a>'
    )
    rights = esc_html(translate("All Rights Reserved.", context.lang))

    return f"""<footer {wrapper}>
  <div class="flex flex-col md:flex-row justify-between w-full gap-10 border-b border-gray-500/30 pb-6">
    <div class="md:max-w-96">{logo_html}
      <p class="mt-6 text-sm" data-proto-field="description">{esc_html(a.description)}</p>
    </div>
    <div class="flex-1 flex items-start md:justify-end gap-20">{column1_html}{column2_html}
    </div>
  </div>
  <p class="pt-4 text-center text-xs md:text-sm pb-5">
    <span data-proto-field="copyrightText">{esc_html(a.copyright_text)}</span> &copy; {copyright_link}. {rights}
  </p>
</footer>"""


# ── Dispatch ────────────────────────────────────────────────────────────────

def render_block(context: RenderContext) -> str:
    """Dispatch selon le type d'attributs du contexte."""
    attrs = context.attributes
    if isinstance(attrs, CardAttributes):        return render_card_block(context)
    if isinstance(attrs, HeroAttributes):        return render_hero_block(context)
    if isinstance(attrs, StatsAttributes):       return render_stats_block(context)
    if isinstance(attrs, TestimonialAttributes): return render_testimonial_block(context)
    if isinstance(attrs, HeaderNavAttributes):   return render_header_nav_block(context)
    if isinstance(attrs, CTAAttributes):         return render_cta_block(context)
    if isinstance(attrs, AccordionAttributes):   return render_accordion_block(context)
    if isinstance(attrs, TailwindHeroAttributes):  return render_tl_hero_block(context)
    if isinstance(attrs, TailwindFooterAttributes): return render_tl_footer_block(context)

    log.warning("Aucun renderer pour %s", type(attrs).__name__)
    return f"<!-- Bloc non implémenté : {esc_html(type(attrs).__name__)} -->"
