"""Content-category sections: features, rich content, gallery, and FAQ."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..safe_access import as_array, as_string, filter_valid_items
from . import fields
from .base import SectionRenderer
from .models import (
    ContentModel,
    FAQItemModel,
    FAQModel,
    FeatureItemModel,
    FeaturesModel,
    GalleryImageModel,
    GalleryModel,
)

CONTENT_LAYOUTS = frozenset({"left-right", "right-left", "centered"})
GALLERY_LAYOUTS = frozenset({"grid", "masonry", "carousel"})
FAQ_LAYOUTS = frozenset({"single", "two-column"})
LEARN_MORE = "Learn more"


class FeaturesRenderer(SectionRenderer[FeaturesModel]):
    """Grid of product or service features; items need a title."""

    section_type = "features"
    requirement = "at least one item with a title"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> FeaturesModel | None:
        items = tuple(
            item for item in map(_feature_item, as_array(props.get("items"))) if item
        )
        if not items:
            return None
        return FeaturesModel(
            title=fields.text(props, "title"),
            subtitle=fields.text(props, "subtitle"),
            columns=fields.columns(props),
            items=items,
        )


def _feature_item(entry: object) -> FeatureItemModel | None:
    if not isinstance(entry, cabc.Mapping):
        return None
    title = fields.text(entry, "title")
    if not title:
        return None
    icon = entry.get("icon")
    if isinstance(icon, cabc.Mapping):
        icon_value = fields.text(icon, "value")
    else:
        icon_value = as_string(icon).strip()
    return FeatureItemModel(
        title=title,
        description=fields.text(entry, "description"),
        icon=icon_value,
        image=fields.text(entry, "image"),
        link=fields.link(entry.get("link"), LEARN_MORE),
    )


class ContentRenderer(SectionRenderer[ContentModel]):
    """Rich text beside an optional image or video."""

    section_type = "content"
    requirement = "a title, content, or image"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> ContentModel | None:
        title = fields.text(props, "title")
        content = fields.text(props, "content")
        image = fields.image(props.get("image"), fields.text(props, "imageAlt", title))
        if not (title or content or image):
            return None
        return ContentModel(
            title=title,
            subtitle=fields.text(props, "subtitle"),
            content=content,
            layout=fields.choice(props, "layout", CONTENT_LAYOUTS, "left-right"),
            image=image,
            video=fields.text(props, "video"),
            buttons=fields.buttons(props.get("buttons")),
        )


class GalleryRenderer(SectionRenderer[GalleryModel]):
    """Image gallery; each image needs a source."""

    section_type = "gallery"
    requirement = "at least one image with a source"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> GalleryModel | None:
        images: list[GalleryImageModel] = []
        for index, entry in enumerate(as_array(props.get("images")), start=1):
            model = _gallery_image(entry, f"Gallery image {index}")
            if model:
                images.append(model)
        if not images:
            return None
        return GalleryModel(
            title=fields.text(props, "title"),
            description=fields.text(props, "description"),
            layout=fields.choice(props, "layout", GALLERY_LAYOUTS, "grid"),
            columns=fields.columns(props),
            images=tuple(images),
        )


def _gallery_image(entry: object, default_alt: str) -> GalleryImageModel | None:
    match entry:
        case str():
            src = entry.strip()
            return GalleryImageModel(src=src, alt=default_alt) if src else None
        case cabc.Mapping():
            src = fields.text(entry, "src")
        case _:
            return None
    if not src:
        return None
    return GalleryImageModel(
        src=src,
        alt=fields.text(entry, "alt", default_alt),
        title=fields.text(entry, "title"),
        description=fields.text(entry, "description"),
    )


class FAQRenderer(SectionRenderer[FAQModel]):
    """Accordion of questions; the first answered item starts open."""

    section_type = "faq"
    requirement = "at least one item with both a question and an answer"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> FAQModel | None:
        items = tuple(
            FAQItemModel(
                question=fields.text(entry, "question"),
                answer=fields.text(entry, "answer"),
                category=fields.text(entry, "category"),
            )
            for entry in filter_valid_items(props.get("items"), "question", "answer")
        )
        if not items:
            return None
        return FAQModel(
            title=fields.text(props, "title"),
            description=fields.text(props, "description"),
            layout=fields.choice(props, "layout", FAQ_LAYOUTS, "single"),
            items=items,
        )


__all__ = ["ContentRenderer", "FAQRenderer", "FeaturesRenderer", "GalleryRenderer"]
