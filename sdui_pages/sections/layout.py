"""Layout sections."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..safe_access import as_array
from . import fields
from .base import SectionRenderer
from .models import GridItemModel, GridModel


class GridRenderer(SectionRenderer[GridModel]):
    """Flexible card grid; cards need a title and default to three columns."""

    section_type = "grid"
    requirement = "at least one item with a title"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> GridModel | None:
        items: list[GridItemModel] = []
        for entry in as_array(props.get("items")):
            if not isinstance(entry, cabc.Mapping):
                continue
            title = fields.text(entry, "title")
            if not title:
                continue
            items.append(
                GridItemModel(
                    title=title,
                    description=fields.text(entry, "description"),
                    image=fields.image(entry.get("image"), title),
                    category=fields.text(entry, "category"),
                    link=fields.link(entry.get("link"), "View"),
                )
            )
        if not items:
            return None
        return GridModel(
            title=fields.text(props, "title"),
            subtitle=fields.text(props, "subtitle"),
            columns=fields.columns(props),
            items=tuple(items),
        )


__all__ = ["GridRenderer"]
