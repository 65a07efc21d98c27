"""Social-proof sections: stats, team, testimonials, and logo clouds."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..safe_access import (
    as_array,
    as_boolean,
    as_int,
    as_string,
    filter_valid_items,
    get_nested,
)
from . import fields
from .base import SectionRenderer
from .models import (
    LogoCloudModel,
    LogoModel,
    SocialModel,
    StatItemModel,
    StatsModel,
    TeamMemberModel,
    TeamModel,
    TestimonialModel,
    TestimonialsModel,
)

STATS_LAYOUTS = frozenset({"inline", "grid", "centered", "split"})
TEAM_LAYOUTS = frozenset({"grid", "carousel", "list"})
TESTIMONIAL_LAYOUTS = frozenset({"grid", "carousel", "masonry", "single"})
LOGO_LAYOUTS = frozenset({"grid", "marquee"})
MAX_RATING = 5


class StatsRenderer(SectionRenderer[StatsModel]):
    """Key metrics; each stat needs a label."""

    section_type = "stats"
    requirement = "at least one item with a label"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> StatsModel | None:
        items = tuple(
            StatItemModel(
                label=fields.text(entry, "label"),
                value=as_string(entry.get("value")).strip(),
                prefix=fields.text(entry, "prefix"),
                suffix=fields.text(entry, "suffix"),
                animation=as_boolean(entry.get("animation"), fallback=True),
                description=fields.text(entry, "description"),
            )
            for entry in filter_valid_items(props.get("items"), "label")
        )
        if not items:
            return None
        return StatsModel(
            title=fields.text(props, "title"),
            subtitle=fields.text(props, "subtitle"),
            layout=fields.choice(props, "layout", STATS_LAYOUTS, "grid"),
            items=items,
        )


class TeamRenderer(SectionRenderer[TeamModel]):
    """Team member cards; members need a name."""

    section_type = "team"
    requirement = "at least one member with a name"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> TeamModel | None:
        members = tuple(
            TeamMemberModel(
                name=fields.text(entry, "name"),
                role=fields.text(entry, "role"),
                bio=fields.text(entry, "bio"),
                image=fields.text(entry, "image"),
                social=_social_links(entry.get("social")),
            )
            for entry in filter_valid_items(props.get("members"), "name")
        )
        if not members:
            return None
        return TeamModel(
            title=fields.text(props, "title"),
            subtitle=fields.text(props, "subtitle"),
            layout=fields.choice(props, "layout", TEAM_LAYOUTS, "grid"),
            columns=fields.columns(props),
            members=members,
        )


def _social_links(entries: object) -> tuple[SocialModel, ...]:
    return tuple(
        SocialModel(
            platform=fields.text(entry, "platform", "link").lower(),
            url=fields.text(entry, "url"),
        )
        for entry in filter_valid_items(entries, "url")
    )


class TestimonialsRenderer(SectionRenderer[TestimonialsModel]):
    """Customer quotes shown as a carousel starting at the first slide."""

    section_type = "testimonials"
    requirement = "at least one item with content"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> TestimonialsModel | None:
        items = tuple(
            _testimonial(entry)
            for entry in filter_valid_items(props.get("items"), "content")
        )
        if not items:
            return None
        return TestimonialsModel(
            title=fields.text(props, "title"),
            subtitle=fields.text(props, "subtitle"),
            layout=fields.choice(props, "layout", TESTIMONIAL_LAYOUTS, "carousel"),
            trust_badge=fields.text(props, "trustBadge"),
            items=items,
        )


def _testimonial(entry: cabc.Mapping[str, typ.Any]) -> TestimonialModel:
    name = as_string(get_nested(entry, "author.name")).strip() or "Anonymous"
    return TestimonialModel(
        content=fields.text(entry, "content"),
        author_name=name,
        author_initial=name[0].upper(),
        author_role=as_string(get_nested(entry, "author.role")).strip(),
        author_company=(
            as_string(get_nested(entry, "author.company")).strip()
            or fields.text(entry, "company")
        ),
        author_avatar=as_string(get_nested(entry, "author.avatar")).strip(),
        rating=as_int(entry.get("rating"), 0, minimum=0, maximum=MAX_RATING),
    )


class LogoCloudRenderer(SectionRenderer[LogoCloudModel]):
    """Partner and client logos; each logo needs an image source."""

    section_type = "logo-cloud"
    requirement = "at least one logo with an image source"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> LogoCloudModel | None:
        logos: list[LogoModel] = []
        for index, entry in enumerate(as_array(props.get("logos")), start=1):
            logo = _logo(entry, f"Partner {index}")
            if logo:
                logos.append(logo)
        if not logos:
            return None
        return LogoCloudModel(
            title=fields.text(props, "title"),
            description=fields.text(props, "description"),
            layout=fields.choice(props, "layout", LOGO_LAYOUTS, "grid"),
            logos=tuple(logos),
        )


def _logo(entry: object, default_alt: str) -> LogoModel | None:
    image = fields.image(
        entry, default_alt, src_keys=("src", "image"), alt_keys=("alt", "name")
    )
    if image is None:
        return None
    link = ""
    if isinstance(entry, cabc.Mapping):
        link = fields.first_text(entry, ("link", "href"))
    return LogoModel(src=image.src, alt=image.alt, link=link)


__all__ = ["LogoCloudRenderer", "StatsRenderer", "TeamRenderer", "TestimonialsRenderer"]
