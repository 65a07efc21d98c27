"""Section renderers and the default, frozen section registry.

Every section kind the site builder understands is registered here exactly
once, at import time, into :data:`SECTION_REGISTRY`, which is then frozen.
Callers that need a different set of renderers (tests, plugins) build their
own :class:`~sdui_pages.registry.SectionRegistry`, typically starting from
:func:`build_default_registry`.

Examples
--------
>>> from sdui_pages.sections import SECTION_REGISTRY
>>> SECTION_REGISTRY.list_types()[:3]
['hero', 'features', 'content']
"""

from __future__ import annotations

from ..registry import SectionCategory, SectionRegistry
from .base import RenderOutcome, Rendered, SectionRenderer, Skipped
from .content import ContentRenderer, FAQRenderer, FeaturesRenderer, GalleryRenderer
from .conversion import ContactRenderer, CTARenderer, PricingRenderer
from .hero import HeroRenderer
from .layout import GridRenderer
from .social_proof import (
    LogoCloudRenderer,
    StatsRenderer,
    TeamRenderer,
    TestimonialsRenderer,
)

DEFAULT_SECTIONS: tuple[tuple[SectionRenderer, str, SectionCategory, str], ...] = (
    (
        HeroRenderer(),
        "Hero Section",
        SectionCategory.HERO,
        "Main landing section with headline, CTA, and image",
    ),
    (
        FeaturesRenderer(),
        "Features Section",
        SectionCategory.CONTENT,
        "Display product/service features in grid or list",
    ),
    (
        ContentRenderer(),
        "Content Section",
        SectionCategory.CONTENT,
        "Rich content with text, images, and videos",
    ),
    (
        GridRenderer(),
        "Grid Section",
        SectionCategory.LAYOUT,
        "Flexible grid layout for any content",
    ),
    (
        StatsRenderer(),
        "Stats Section",
        SectionCategory.SOCIAL_PROOF,
        "Display key metrics and statistics",
    ),
    (
        TestimonialsRenderer(),
        "Testimonials Section",
        SectionCategory.SOCIAL_PROOF,
        "Customer testimonials and reviews",
    ),
    (
        TeamRenderer(),
        "Team Section",
        SectionCategory.SOCIAL_PROOF,
        "Team members showcase",
    ),
    (
        LogoCloudRenderer(),
        "Logo Cloud",
        SectionCategory.SOCIAL_PROOF,
        "Partner and client logos",
    ),
    (
        GalleryRenderer(),
        "Gallery Section",
        SectionCategory.CONTENT,
        "Image gallery with various layouts",
    ),
    (
        CTARenderer(),
        "Call to Action",
        SectionCategory.CONVERSION,
        "Call-to-action section with buttons",
    ),
    (
        PricingRenderer(),
        "Pricing Section",
        SectionCategory.CONVERSION,
        "Pricing plans and tiers",
    ),
    (
        ContactRenderer(),
        "Contact Section",
        SectionCategory.CONVERSION,
        "Contact form and information",
    ),
    (
        FAQRenderer(),
        "FAQ Section",
        SectionCategory.CONTENT,
        "Frequently asked questions",
    ),
)


def build_default_registry() -> SectionRegistry:
    """Return a new, unfrozen registry holding every built-in section type."""
    registry = SectionRegistry()
    for renderer, display_name, category, description in DEFAULT_SECTIONS:
        registry.register(
            renderer.section_type,
            renderer,
            display_name=display_name,
            category=category,
            description=description,
        )
    return registry


SECTION_REGISTRY = build_default_registry().freeze()

__all__ = [
    "CTARenderer",
    "ContactRenderer",
    "ContentRenderer",
    "DEFAULT_SECTIONS",
    "FAQRenderer",
    "FeaturesRenderer",
    "GalleryRenderer",
    "GridRenderer",
    "HeroRenderer",
    "LogoCloudRenderer",
    "PricingRenderer",
    "RenderOutcome",
    "Rendered",
    "SECTION_REGISTRY",
    "SectionRenderer",
    "Skipped",
    "StatsRenderer",
    "TeamRenderer",
    "TestimonialsRenderer",
    "build_default_registry",
]
