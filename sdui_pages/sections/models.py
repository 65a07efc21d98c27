"""Typed payloads built from section props before templates see them.

Each renderer turns its untyped ``props`` mapping into one of these frozen
dataclasses. Templates only ever read these models, so every optional field
already carries its fallback and every list has been filtered down to
entries that can actually be displayed.
"""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True, frozen=True)
class ButtonModel:
    """Link styled as a button."""

    text: str
    href: str = "#"
    variant: str = "primary"


@dc.dataclass(slots=True, frozen=True)
class ImageModel:
    """Image source with alternative text."""

    src: str
    alt: str = ""


@dc.dataclass(slots=True, frozen=True)
class LinkModel:
    """Inline text link."""

    href: str
    text: str


@dc.dataclass(slots=True, frozen=True)
class HeroModel:
    layout: str
    title: str
    subtitle: str
    description: str
    buttons: tuple[ButtonModel, ...]
    trust_indicators: tuple[str, ...]
    image: ImageModel | None
    background_gradient: str


@dc.dataclass(slots=True, frozen=True)
class FeatureItemModel:
    title: str
    description: str = ""
    icon: str = ""
    image: str = ""
    link: LinkModel | None = None


@dc.dataclass(slots=True, frozen=True)
class FeaturesModel:
    title: str
    subtitle: str
    columns: int
    items: tuple[FeatureItemModel, ...]


@dc.dataclass(slots=True, frozen=True)
class StatItemModel:
    label: str
    value: str
    prefix: str = ""
    suffix: str = ""
    animation: bool = True
    description: str = ""


@dc.dataclass(slots=True, frozen=True)
class StatsModel:
    title: str
    subtitle: str
    layout: str
    items: tuple[StatItemModel, ...]


@dc.dataclass(slots=True, frozen=True)
class SocialModel:
    platform: str
    url: str


@dc.dataclass(slots=True, frozen=True)
class TeamMemberModel:
    name: str
    role: str = ""
    bio: str = ""
    image: str = ""
    social: tuple[SocialModel, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class TeamModel:
    title: str
    subtitle: str
    layout: str
    columns: int
    members: tuple[TeamMemberModel, ...]


@dc.dataclass(slots=True, frozen=True)
class TestimonialModel:
    content: str
    author_name: str
    author_initial: str
    author_role: str = ""
    author_company: str = ""
    author_avatar: str = ""
    rating: int = 0


@dc.dataclass(slots=True, frozen=True)
class TestimonialsModel:
    title: str
    subtitle: str
    layout: str
    trust_badge: str
    items: tuple[TestimonialModel, ...]
    active_index: int = 0


@dc.dataclass(slots=True, frozen=True)
class GridItemModel:
    title: str
    description: str = ""
    image: ImageModel | None = None
    category: str = ""
    link: LinkModel | None = None


@dc.dataclass(slots=True, frozen=True)
class GridModel:
    title: str
    subtitle: str
    columns: int
    items: tuple[GridItemModel, ...]


@dc.dataclass(slots=True, frozen=True)
class CTAModel:
    title: str
    description: str
    badge: str
    layout: str
    background: str
    buttons: tuple[ButtonModel, ...]
    image: ImageModel | None


@dc.dataclass(slots=True, frozen=True)
class PlanFeatureModel:
    text: str
    included: bool = True


@dc.dataclass(slots=True, frozen=True)
class PricingPlanModel:
    name: str
    price: str = ""
    period: str = "month"
    description: str = ""
    features: tuple[PlanFeatureModel, ...] = ()
    button: ButtonModel = ButtonModel(text="Get Started")
    featured: bool = False
    badge: str = ""


@dc.dataclass(slots=True, frozen=True)
class PricingModel:
    title: str
    description: str
    plans: tuple[PricingPlanModel, ...]


@dc.dataclass(slots=True, frozen=True)
class FAQItemModel:
    question: str
    answer: str
    category: str = ""


@dc.dataclass(slots=True, frozen=True)
class FAQModel:
    title: str
    description: str
    layout: str
    items: tuple[FAQItemModel, ...]
    open_index: int = 0


@dc.dataclass(slots=True, frozen=True)
class FormFieldModel:
    name: str
    label: str
    type: str = "text"
    placeholder: str = ""
    required: bool = False
    options: tuple[str, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class ContactModel:
    title: str
    description: str
    email: str
    phone: str
    address: str
    show_form: bool
    form_action: str
    form_fields: tuple[FormFieldModel, ...]
    submit_text: str


@dc.dataclass(slots=True, frozen=True)
class GalleryImageModel:
    src: str
    alt: str
    title: str = ""
    description: str = ""


@dc.dataclass(slots=True, frozen=True)
class GalleryModel:
    title: str
    description: str
    layout: str
    columns: int
    images: tuple[GalleryImageModel, ...]


@dc.dataclass(slots=True, frozen=True)
class LogoModel:
    src: str
    alt: str
    link: str = ""


@dc.dataclass(slots=True, frozen=True)
class LogoCloudModel:
    title: str
    description: str
    layout: str
    logos: tuple[LogoModel, ...]


@dc.dataclass(slots=True, frozen=True)
class ContentModel:
    title: str
    subtitle: str
    content: str
    layout: str
    image: ImageModel | None
    video: str
    buttons: tuple[ButtonModel, ...]

    @property
    def has_media(self) -> bool:
        """Return whether an image or video accompanies the copy."""
        return self.image is not None or bool(self.video)

    @property
    def centered(self) -> bool:
        """Return whether copy is laid out without a media column."""
        return self.layout == "centered" or not self.has_media
