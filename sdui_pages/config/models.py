"""Typed dataclasses describing site configuration structures."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

from .._constants import HOME_SLUG


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class ConfigParseError(SiteConfigError):
    """Raised when a configuration document cannot be parsed."""


class UnknownPageError(KeyError):
    """Raised when a strict page lookup names a slug that is not configured."""


@dc.dataclass(slots=True, frozen=True)
class ThemeConfig:
    """Colour tokens exposed to templates as CSS variables."""

    primary: str = "#000000"
    secondary: str = "#666666"
    accent: str = "#0066cc"


@dc.dataclass(slots=True, frozen=True)
class NavLinkConfig:
    """Navigation entry, optionally carrying a nested dropdown."""

    text: str
    href: str
    children: tuple[NavLinkConfig, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class SocialLinkConfig:
    """Link to a social profile."""

    platform: str
    url: str


@dc.dataclass(slots=True, frozen=True)
class LogoConfig:
    """Brand mark shown in the navbar or footer."""

    text: str = ""
    image: str = ""
    alt: str = ""


@dc.dataclass(slots=True, frozen=True)
class NavCTAConfig:
    """Call-to-action button pinned to the navbar."""

    text: str
    href: str = "#"


@dc.dataclass(slots=True, frozen=True)
class NavigationConfig:
    """Site navbar configuration."""

    logo: LogoConfig = dc.field(default_factory=LogoConfig)
    links: tuple[NavLinkConfig, ...] = ()
    cta: NavCTAConfig | None = None
    social: tuple[SocialLinkConfig, ...] = ()
    sticky: bool = True
    transparent: bool = False


@dc.dataclass(slots=True, frozen=True)
class FooterLinkConfig:
    """Footer hyperlink metadata."""

    text: str
    href: str


@dc.dataclass(slots=True, frozen=True)
class FooterSectionConfig:
    """Titled column of footer links."""

    title: str
    links: tuple[FooterLinkConfig, ...]


@dc.dataclass(slots=True, frozen=True)
class ContactInfoConfig:
    """Contact details listed in the footer."""

    email: str = ""
    phone: str = ""
    address: str = ""


@dc.dataclass(slots=True, frozen=True)
class FooterConfig:
    """Footer copy and link groups."""

    layout: str = "columns"
    logo: LogoConfig = dc.field(default_factory=LogoConfig)
    tagline: str = ""
    sections: tuple[FooterSectionConfig, ...] = ()
    social: tuple[SocialLinkConfig, ...] = ()
    contact: ContactInfoConfig | None = None
    copyright: str = ""


@dc.dataclass(slots=True, frozen=True)
class SiteConfig:
    """Site-wide settings shared by every page."""

    name: str = ""
    description: str = ""
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    navigation: NavigationConfig = dc.field(default_factory=NavigationConfig)
    footer: FooterConfig = dc.field(default_factory=FooterConfig)


@dc.dataclass(slots=True, frozen=True)
class Section:
    """One configuration-driven content block on a page.

    Attributes
    ----------
    type : str
        Discriminator matched against the section registry. Empty when the
        source entry had no usable type.
    id : str or None
        Optional anchor identifier, unique within a page.
    props : object
        Renderer-specific payload exactly as loaded. Usually a mapping, but
        left untouched so validation can report malformed props.
    """

    type: str
    id: str | None = None
    props: typ.Any = None

    @classmethod
    def from_raw(cls, payload: object) -> Section:
        """Build a section from a raw config entry without ever raising."""
        match payload:
            case Section():
                return payload
            case cabc.Mapping():
                raw_type = payload.get("type")
                raw_id = payload.get("id")
                anchor = raw_id.strip() if isinstance(raw_id, str) else ""
                return cls(
                    type=raw_type.strip() if isinstance(raw_type, str) else "",
                    id=anchor or None,
                    props=payload.get("props"),
                )
            case _:
                return cls(type="")


@dc.dataclass(slots=True, frozen=True)
class PageConfig:
    """One routable page and its ordered sections."""

    slug: str
    title: str = ""
    description: str = ""
    sections: tuple[Section, ...] = ()

    @property
    def is_home(self) -> bool:
        """Return whether this page is served at the site root."""
        return self.slug == HOME_SLUG


@dc.dataclass(slots=True, frozen=True)
class ConfigFile:
    """Location and format of a discovered configuration document."""

    path: Path
    format: typ.Literal["yaml", "json"]
    mtime: float


@dc.dataclass(slots=True, frozen=True)
class ConfigDocument:
    """Parsed configuration: site settings plus every routable page."""

    site: SiteConfig
    pages: tuple[PageConfig, ...]
    source: ConfigFile | None = None

    def get_page(self, slug: str) -> PageConfig | None:
        """Return the page served at ``slug`` or ``None`` when absent."""
        for page in self.pages:
            if page.slug == slug:
                return page
        return None

    def require_page(self, slug: str) -> PageConfig:
        """Return the page at ``slug`` or raise :class:`UnknownPageError`."""
        page = self.get_page(slug)
        if page is None:
            available = ", ".join(page.slug for page in self.pages) or "none"
            msg = f"Unknown page '{slug}'. Known pages: {available}"
            raise UnknownPageError(msg)
        return page


__all__ = [
    "ConfigDocument",
    "ConfigFile",
    "ConfigParseError",
    "ContactInfoConfig",
    "FooterConfig",
    "FooterLinkConfig",
    "FooterSectionConfig",
    "LogoConfig",
    "NavCTAConfig",
    "NavLinkConfig",
    "NavigationConfig",
    "PageConfig",
    "Section",
    "SiteConfig",
    "SiteConfigError",
    "SocialLinkConfig",
    "ThemeConfig",
    "UnknownPageError",
]
