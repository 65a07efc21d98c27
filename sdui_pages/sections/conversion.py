"""Conversion sections: call to action, pricing, and contact."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..safe_access import (
    as_array,
    as_boolean,
    as_string,
    filter_valid_items,
    has_content,
)
from . import fields
from .base import SectionRenderer
from .models import (
    ButtonModel,
    ContactModel,
    CTAModel,
    FormFieldModel,
    PlanFeatureModel,
    PricingModel,
    PricingPlanModel,
)

CTA_LAYOUTS = frozenset({"centered", "split"})
CTA_BACKGROUNDS = frozenset({"gradient", "primary", "dark", "light"})
FIELD_TYPES = frozenset({"text", "email", "tel", "textarea", "select"})
DEFAULT_FORM_FIELDS = (
    FormFieldModel(name="name", label="Name", required=True),
    FormFieldModel(name="email", label="Email", type="email", required=True),
    FormFieldModel(name="message", label="Message", type="textarea", required=True),
)


class CTARenderer(SectionRenderer[CTAModel]):
    """Call-to-action banner with buttons."""

    section_type = "cta"
    requirement = "a title, description, or button"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> CTAModel | None:
        title = fields.text(props, "title")
        description = fields.text(props, "description")
        buttons = fields.buttons(props.get("buttons"))
        if not (title or description or buttons):
            return None
        layout = fields.choice(props, "layout", CTA_LAYOUTS, "centered")
        image = fields.image(
            props.get("image"), fields.text(props, "imageAlt", "CTA illustration")
        )
        return CTAModel(
            title=title,
            description=description,
            badge=fields.text(props, "badge"),
            # split falls back to centered without an image
            layout=layout if layout != "split" or image else "centered",
            background=fields.choice(props, "background", CTA_BACKGROUNDS, "gradient"),
            buttons=buttons,
            image=image,
        )


class PricingRenderer(SectionRenderer[PricingModel]):
    """Pricing tiers; plans need a name."""

    section_type = "pricing"
    requirement = "at least one plan with a name"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> PricingModel | None:
        plans = tuple(
            _plan(entry)
            for entry in filter_valid_items(props.get("plans"), "name")
        )
        if not plans:
            return None
        return PricingModel(
            title=fields.text(props, "title"),
            description=fields.text(props, "description"),
            plans=plans,
        )


def _plan(entry: cabc.Mapping[str, typ.Any]) -> PricingPlanModel:
    return PricingPlanModel(
        name=fields.text(entry, "name"),
        price=as_string(entry.get("price")).strip(),
        period=fields.text(entry, "period", "month"),
        description=fields.text(entry, "description"),
        features=_plan_features(entry.get("features")),
        button=ButtonModel(
            text=fields.text(entry, "buttonText", "Get Started"),
            href=fields.text(entry, "buttonHref", "#"),
            variant="primary",
        ),
        featured=as_boolean(entry.get("featured"), fallback=False),
        badge=fields.text(entry, "badge"),
    )


def _plan_features(entries: object) -> tuple[PlanFeatureModel, ...]:
    features: list[PlanFeatureModel] = []
    for entry in as_array(entries):
        match entry:
            case str():
                feature = PlanFeatureModel(text=entry.strip())
            case cabc.Mapping():
                feature = PlanFeatureModel(
                    text=fields.text(entry, "text"),
                    included=as_boolean(entry.get("included"), fallback=True),
                )
            case _:
                continue
        if feature.text:
            features.append(feature)
    return tuple(features)


class ContactRenderer(SectionRenderer[ContactModel]):
    """Contact details alongside an optional enquiry form."""

    section_type = "contact"
    requirement = "a title, email, phone, or form"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> ContactModel | None:
        title = fields.text(props, "title")
        email = fields.text(props, "email")
        phone = fields.text(props, "phone")
        show_form = _wants_form(props)
        if not (title or email or phone or show_form):
            return None
        form_fields = _form_fields(props.get("fields")) or DEFAULT_FORM_FIELDS
        return ContactModel(
            title=title,
            description=fields.text(props, "description"),
            email=email,
            phone=phone,
            address=fields.text(props, "address"),
            show_form=show_form,
            form_action=fields.first_text(props, ("formAction", "action")) or "#",
            form_fields=form_fields,
            submit_text=fields.text(props, "submitText", "Send message"),
        )


def _wants_form(props: cabc.Mapping[str, typ.Any]) -> bool:
    show_form = props.get("showForm")
    if isinstance(show_form, bool) or show_form in ("true", "false"):
        return as_boolean(show_form)
    return has_content(props.get("form")) or has_content(props.get("fields"))


def _form_fields(entries: object) -> tuple[FormFieldModel, ...]:
    form_fields: list[FormFieldModel] = []
    for entry in as_array(entries):
        if not isinstance(entry, cabc.Mapping):
            continue
        name = fields.text(entry, "name")
        if not name:
            continue
        form_fields.append(
            FormFieldModel(
                name=name,
                label=fields.text(entry, "label", name.replace("_", " ").title()),
                type=fields.choice(entry, "type", FIELD_TYPES, "text"),
                placeholder=fields.text(entry, "placeholder"),
                required=as_boolean(entry.get("required"), fallback=False),
                options=fields.strings(entry.get("options")),
            )
        )
    return tuple(form_fields)


__all__ = ["CTARenderer", "ContactRenderer", "PricingRenderer"]
