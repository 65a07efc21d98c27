"""Site-level configuration builders for navigation, footer, and theme.

Unlike page content these builders never reject a document: malformed link
entries are dropped and missing blocks fall back to empty defaults, so a
half-written ``site`` block still yields a usable :class:`SiteConfig`.
"""

from __future__ import annotations

from ..safe_access import as_boolean
from .helpers import _build_theme_config, _entries, _optional_str, _str_or
from .models import (
    ContactInfoConfig,
    FooterConfig,
    FooterLinkConfig,
    FooterSectionConfig,
    LogoConfig,
    NavCTAConfig,
    NavigationConfig,
    NavLinkConfig,
    SiteConfig,
    SocialLinkConfig,
)

FOOTER_LAYOUTS = frozenset({"columns", "centered", "minimal"})


def _build_site_config(payload: object) -> SiteConfig:
    """Build the site configuration from the ``site`` block."""
    match payload:
        case dict() as data:
            pass
        case _:
            return SiteConfig()
    return SiteConfig(
        name=_str_or(data.get("name"), ""),
        description=_str_or(data.get("description"), ""),
        theme=_build_theme_config(data.get("theme")),
        navigation=_build_navigation_config(data.get("navigation")),
        footer=_build_footer_config(data.get("footer")),
    )


def _build_logo(payload: object) -> LogoConfig:
    """Build a logo from a mapping or a bare text string."""
    match payload:
        case str() as text:
            return LogoConfig(text=text.strip())
        case dict() as data:
            text = _str_or(data.get("text"), "")
            return LogoConfig(
                text=text,
                image=_str_or(data.get("image"), ""),
                alt=_str_or(data.get("alt"), text),
            )
        case _:
            return LogoConfig()


def _build_nav_links(entries: object, *, depth: int = 0) -> tuple[NavLinkConfig, ...]:
    """Build navigation links, keeping one level of nested children."""
    links: list[NavLinkConfig] = []
    for entry in _entries(entries):
        match entry:
            case {"text": text, "href": href, **rest}:
                pass
            case _:
                continue
        label = _optional_str(text)
        target = _optional_str(href)
        if not (label and target):
            continue
        children: tuple[NavLinkConfig, ...] = ()
        if depth == 0:
            children = _build_nav_links(rest.get("children"), depth=depth + 1)
        links.append(NavLinkConfig(text=label, href=target, children=children))
    return tuple(links)


def _build_nav_cta(payload: object) -> NavCTAConfig | None:
    """Build the navbar CTA when it carries button text."""
    match payload:
        case {"text": text, **rest}:
            label = _optional_str(text)
        case _:
            return None
    if not label:
        return None
    return NavCTAConfig(text=label, href=_str_or(rest.get("href"), "#"))


def _build_social_links(entries: object) -> tuple[SocialLinkConfig, ...]:
    """Build social profile links; entries need a platform and a URL."""
    links: list[SocialLinkConfig] = []
    for entry in _entries(entries):
        match entry:
            case {"platform": platform, "url": url}:
                name = _optional_str(platform)
                target = _optional_str(url)
            case _:
                continue
        if name and target:
            links.append(SocialLinkConfig(platform=name.lower(), url=target))
    return tuple(links)


def _build_navigation_config(payload: object) -> NavigationConfig:
    """Build the navbar configuration."""
    match payload:
        case dict() as data:
            pass
        case _:
            return NavigationConfig()
    return NavigationConfig(
        logo=_build_logo(data.get("logo")),
        links=_build_nav_links(data.get("links")),
        cta=_build_nav_cta(data.get("cta")),
        social=_build_social_links(data.get("social")),
        sticky=as_boolean(data.get("sticky"), fallback=True),
        transparent=as_boolean(data.get("transparent"), fallback=False),
    )


def _build_footer_links(entries: object) -> tuple[FooterLinkConfig, ...]:
    """Build footer links; entries need text and an href."""
    links: list[FooterLinkConfig] = []
    for entry in _entries(entries):
        match entry:
            case {"text": text, "href": href}:
                label = _optional_str(text)
                target = _optional_str(href)
            case _:
                continue
        if label and target:
            links.append(FooterLinkConfig(text=label, href=target))
    return tuple(links)


def _build_footer_sections(entries: object) -> tuple[FooterSectionConfig, ...]:
    """Build footer link columns, dropping columns without any links."""
    sections: list[FooterSectionConfig] = []
    for entry in _entries(entries):
        match entry:
            case dict() as data:
                links = _build_footer_links(data.get("links"))
            case _:
                continue
        if links:
            sections.append(
                FooterSectionConfig(title=_str_or(data.get("title"), ""), links=links)
            )
    return tuple(sections)


def _build_contact_info(payload: object) -> ContactInfoConfig | None:
    """Build footer contact details when at least one field is present."""
    match payload:
        case dict() as data:
            contact = ContactInfoConfig(
                email=_str_or(data.get("email"), ""),
                phone=_str_or(data.get("phone"), ""),
                address=_str_or(data.get("address"), ""),
            )
        case _:
            return None
    if not (contact.email or contact.phone or contact.address):
        return None
    return contact


def _build_footer_config(payload: object) -> FooterConfig:
    """Build the footer configuration."""
    match payload:
        case dict() as data:
            pass
        case _:
            return FooterConfig()
    layout = _str_or(data.get("layout"), "columns")
    return FooterConfig(
        layout=layout if layout in FOOTER_LAYOUTS else "columns",
        logo=_build_logo(data.get("logo")),
        tagline=_str_or(data.get("tagline"), ""),
        sections=_build_footer_sections(data.get("sections")),
        social=_build_social_links(data.get("social")),
        contact=_build_contact_info(data.get("contact")),
        copyright=_str_or(data.get("copyright"), ""),
    )


__all__ = [
    "_build_contact_info",
    "_build_footer_config",
    "_build_footer_links",
    "_build_footer_sections",
    "_build_logo",
    "_build_nav_cta",
    "_build_nav_links",
    "_build_navigation_config",
    "_build_site_config",
    "_build_social_links",
]
