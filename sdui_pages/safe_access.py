"""Total accessors for pulling typed values out of untyped configuration.

Section props arrive straight from YAML or JSON, so any field may be absent,
``None``, or of the wrong type. Every helper here is total: it returns a
well-typed value or the supplied fallback for every input and never raises.
Renderers lean on these helpers instead of indexing props directly.

Examples
--------
>>> from sdui_pages.safe_access import get_nested, has_content
>>> get_nested({"a": {"b": 5}}, "a.b")
5
>>> get_nested({"a": {"b": 5}}, "a.b.c", "fallback")
'fallback'
>>> has_content("   ")
False
"""

from __future__ import annotations

import collections.abc as cabc
import math
import typing as typ

T = typ.TypeVar("T")


def get_nested(obj: object, path: str, default: T | None = None) -> typ.Any | T | None:
    """Walk ``path`` (dot separated) through nested mappings.

    Parameters
    ----------
    obj : object
        Root value; anything that is not a mapping yields ``default``.
    path : str
        Dot-separated key path such as ``"author.name"``.
    default : object, optional
        Value returned when any segment is missing, when an intermediate value
        is not a mapping, or when the located value is ``None``.

    Returns
    -------
    object
        The located value, or ``default``.
    """
    if not isinstance(path, str) or not path:
        return default
    current: object = obj
    for key in path.split("."):
        if not isinstance(current, cabc.Mapping):
            return default
        try:
            current = current[key]
        except (KeyError, TypeError):
            return default
    return default if current is None else current


def has_content(value: object) -> bool:
    """Return whether ``value`` carries something worth rendering.

    Non-empty stripped strings, any number, any boolean, non-empty lists or
    tuples, and mappings with at least one key count as content.
    """
    match value:
        case bool() | int() | float():
            return True
        case str():
            return bool(value.strip())
        case list() | tuple():
            return len(value) > 0
        case cabc.Mapping():
            return len(value) > 0
        case _:
            return False


def as_array(value: object) -> list[typ.Any]:
    """Return ``value`` as a list when it is a list or tuple, else ``[]``."""
    match value:
        case list():
            return value
        case tuple():
            return list(value)
        case _:
            return []


def as_mapping(value: object) -> cabc.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, else an empty dict."""
    if isinstance(value, cabc.Mapping):
        return value
    return {}


def as_string(value: object, fallback: str = "") -> str:
    """Return strings unchanged and stringify numbers; otherwise ``fallback``."""
    match value:
        case bool():
            return fallback
        case str():
            return value
        case int():
            return str(value)
        case float():
            if value.is_integer():
                return str(int(value))
            return str(value)
        case _:
            return fallback


def as_boolean(value: object, *, fallback: bool = False) -> bool:
    """Return booleans unchanged and coerce ``"true"``/``"false"`` strings."""
    match value:
        case bool():
            return value
        case "true":
            return True
        case "false":
            return False
        case _:
            return fallback


def as_number(value: object, default: float = 0) -> float:
    """Return a finite number parsed from ``value`` or ``default``."""
    match value:
        case bool():
            return default
        case int() | float():
            number = float(value)
        case str():
            try:
                number = float(value.strip())
            except ValueError:
                return default
        case _:
            return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def as_int(value: object, default: int, *, minimum: int, maximum: int) -> int:
    """Return ``value`` as an int clamped to ``[minimum, maximum]``."""
    number = as_number(value, default)
    return max(minimum, min(maximum, int(number)))


def filter_valid_items(
    items: object, *required_fields: str
) -> list[cabc.Mapping[str, typ.Any]]:
    """Keep mapping items where every ``required_fields`` entry has text.

    Text means a non-blank string or a number, the values
    :func:`as_string` accepts.
    """
    return [
        item
        for item in as_array(items)
        if isinstance(item, cabc.Mapping)
        and all(as_string(item.get(field)).strip() for field in required_fields)
    ]


def merge_props(
    defaults: cabc.Mapping[str, typ.Any], actual: object
) -> dict[str, typ.Any]:
    """Overlay the fields of ``actual`` that have content onto ``defaults``."""
    merged = dict(defaults)
    for key, value in as_mapping(actual).items():
        if has_content(value):
            merged[key] = value
    return merged


def class_names(*classes: object) -> str:
    """Join the non-empty string class tokens in ``classes``."""
    return " ".join(
        token.strip() for token in classes if isinstance(token, str) and token.strip()
    )


def can_render_section(section: object) -> bool:
    """Return whether ``section`` passes the coarse pre-render gate.

    A section is renderable only when it has a non-empty string ``type`` and
    a ``props`` mapping that :func:`has_content`. Both :class:`Section`
    objects and raw mappings are accepted; anything else is rejected.
    """
    match section:
        case cabc.Mapping():
            section_type = section.get("type")
            props = section.get("props")
        case _:
            section_type = getattr(section, "type", None)
            props = getattr(section, "props", None)
    if not isinstance(section_type, str) or not section_type.strip():
        return False
    return isinstance(props, cabc.Mapping) and has_content(props)


__all__ = [
    "as_array",
    "as_boolean",
    "as_int",
    "as_mapping",
    "as_number",
    "as_string",
    "can_render_section",
    "class_names",
    "filter_valid_items",
    "get_nested",
    "has_content",
    "merge_props",
]
