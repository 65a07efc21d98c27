"""Hero section: headline, supporting copy, CTAs, and an optional image."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..safe_access import as_string, get_nested
from . import fields
from .base import SectionRenderer
from .models import HeroModel

HERO_LAYOUTS = frozenset({"centered", "split", "minimal", "full-height"})
DEFAULT_GRADIENT = "from-gray-50 via-white to-blue-50"
DEFAULT_IMAGE_ALT = "Hero illustration"


class HeroRenderer(SectionRenderer[HeroModel]):
    """Render the landing hero.

    The hero shows up when it has a title, subtitle, description, image, or
    at least one button with text. Layout falls back to ``centered``.
    """

    section_type = "hero"
    requirement = "a title, subtitle, description, image, or button"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> HeroModel | None:
        title = fields.text(props, "title")
        model = HeroModel(
            layout=fields.choice(props, "layout", HERO_LAYOUTS, "centered"),
            title=title,
            subtitle=fields.text(props, "subtitle"),
            description=fields.text(props, "description"),
            buttons=fields.buttons(props.get("buttons")),
            trust_indicators=fields.strings(props.get("trustIndicators")),
            image=fields.image(props.get("image"), title or DEFAULT_IMAGE_ALT),
            background_gradient=(
                as_string(get_nested(props, "background.gradient")).strip()
                or DEFAULT_GRADIENT
            ),
        )
        if not (
            model.title
            or model.subtitle
            or model.description
            or model.image
            or model.buttons
        ):
            return None
        return model


__all__ = ["HeroRenderer"]
