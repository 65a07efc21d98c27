"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ..safe_access import merge_props
from .models import ThemeConfig

if typ.TYPE_CHECKING:
    import collections.abc as cabc

THEME_CSS_VARIABLES: dict[str, str] = {
    "primary": "--color-primary",
    "secondary": "--color-secondary",
    "accent": "--color-accent",
}


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, str | int | float):
        return None
    text = str(value).strip()
    return text or None


def _str_or(value: object | None, fallback: str) -> str:
    """Return the stripped string form of ``value`` or ``fallback``."""
    return _optional_str(value) or fallback


def _entries(value: object) -> list[typ.Any]:
    """Return list entries from ``value``; non-lists yield an empty list."""
    match value:
        case list() as items:
            return items
        case _:
            return []


def _merge_theme(
    base: ThemeConfig, override: cabc.Mapping[str, typ.Any] | None
) -> ThemeConfig:
    """Merge an override theme mapping into the base ThemeConfig."""
    if not override:
        return base
    merged = merge_props(dc.asdict(base), override)
    return ThemeConfig(
        **{
            field.name: _str_or(merged[field.name], getattr(base, field.name))
            for field in dc.fields(ThemeConfig)
        }
    )


def _build_theme_config(payload: object) -> ThemeConfig:
    """Build a ThemeConfig from the provided payload, filling in defaults."""
    match payload:
        case dict() as data:
            return _merge_theme(ThemeConfig(), data)
        case _:
            return ThemeConfig()


def theme_css_variables(theme: ThemeConfig) -> dict[str, str]:
    """Map theme colour tokens onto the CSS custom properties templates use.

    Examples
    --------
    >>> theme_css_variables(ThemeConfig())["--color-accent"]
    '#0066cc'
    """
    return {
        variable: getattr(theme, token) for token, variable in THEME_CSS_VARIABLES.items()
    }


__all__ = [
    "THEME_CSS_VARIABLES",
    "_build_theme_config",
    "_entries",
    "_merge_theme",
    "_optional_str",
    "_str_or",
    "theme_css_variables",
]
