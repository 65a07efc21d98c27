"""Builders for field shapes that several section types share."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..safe_access import as_array, as_int, as_string, has_content
from .models import ButtonModel, ImageModel, LinkModel

BUTTON_VARIANTS = frozenset({"primary", "secondary", "outline", "ghost"})
DEFAULT_COLUMNS = 3
MIN_COLUMNS = 1
MAX_COLUMNS = 6


def text(props: cabc.Mapping[str, typ.Any], key: str, fallback: str = "") -> str:
    """Return ``props[key]`` as stripped text, or ``fallback`` when blank."""
    value = as_string(props.get(key)).strip()
    return value or fallback


def first_text(props: cabc.Mapping[str, typ.Any], keys: cabc.Iterable[str]) -> str:
    """Return the first non-blank text among ``keys``, or an empty string."""
    for key in keys:
        value = text(props, key)
        if value:
            return value
    return ""


def choice(
    props: cabc.Mapping[str, typ.Any],
    key: str,
    options: cabc.Collection[str],
    default: str,
) -> str:
    """Return ``props[key]`` when it is one of ``options``, else ``default``."""
    value = text(props, key)
    return value if value in options else default


def columns(props: cabc.Mapping[str, typ.Any], key: str = "columns") -> int:
    """Return a column count defaulting to three and clamped to a sane range."""
    return as_int(
        props.get(key), DEFAULT_COLUMNS, minimum=MIN_COLUMNS, maximum=MAX_COLUMNS
    )


def button(entry: object) -> ButtonModel | None:
    """Build one button; entries without text are dropped."""
    if not isinstance(entry, cabc.Mapping):
        return None
    label = text(entry, "text")
    if not label:
        return None
    variant = text(entry, "variant", "primary")
    return ButtonModel(
        text=label,
        href=text(entry, "href", "#"),
        variant=variant if variant in BUTTON_VARIANTS else "primary",
    )


def buttons(entries: object) -> tuple[ButtonModel, ...]:
    """Build every displayable button from ``entries``."""
    return tuple(
        model for model in (button(entry) for entry in as_array(entries)) if model
    )


def image(
    value: object,
    alt_fallback: str = "",
    *,
    src_keys: tuple[str, ...] = ("src", "url"),
    alt_keys: tuple[str, ...] = ("alt",),
) -> ImageModel | None:
    """Build an image from a bare URL string or a ``{src|url, alt}`` mapping."""
    match value:
        case str():
            src = value.strip()
            alt = alt_fallback
        case cabc.Mapping():
            src = first_text(value, src_keys)
            alt = first_text(value, alt_keys) or alt_fallback
        case _:
            return None
    if not src:
        return None
    return ImageModel(src=src, alt=alt)


def link(value: object, default_text: str) -> LinkModel | None:
    """Build a link from a bare href string or a ``{href, text}`` mapping."""
    match value:
        case str():
            href = value.strip()
            label = default_text
        case cabc.Mapping():
            href = text(value, "href")
            label = text(value, "text", default_text)
        case _:
            return None
    if not href:
        return None
    return LinkModel(href=href, text=label)


def strings(entries: object) -> tuple[str, ...]:
    """Return the non-blank strings (or numbers) in ``entries``."""
    return tuple(
        as_string(entry).strip()
        for entry in as_array(entries)
        if has_content(as_string(entry))
    )


__all__ = [
    "BUTTON_VARIANTS",
    "DEFAULT_COLUMNS",
    "button",
    "buttons",
    "choice",
    "columns",
    "first_text",
    "image",
    "link",
    "strings",
    "text",
]
