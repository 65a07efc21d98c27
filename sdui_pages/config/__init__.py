"""Load and normalize the site configuration document.

This subpackage finds ``config/config.yaml`` (falling back to ``config.yml``
and ``config.json``), parses it, and produces frozen dataclasses
(:class:`SiteConfig`, :class:`PageConfig`, :class:`Section`) that the
dispatcher and page builder consume. The primary entry point is
:func:`load_config`, which returns ``None`` instead of raising when the
document is missing or malformed so callers can render a fallback page.

Examples
--------
>>> from pathlib import Path
>>> from sdui_pages.config import load_config
>>> document = load_config(Path("config"))  # doctest: +SKIP
>>> document.get_page("/").sections[0].type  # doctest: +SKIP
'hero'
"""

from .helpers import theme_css_variables
from .loader import (
    ConfigStatus,
    check_config_exists,
    find_config_file,
    load_config,
    load_page_config,
    load_site_config,
    normalize_slug,
    parse_config_document,
    read_config_document,
)
from .models import (
    ConfigDocument,
    ConfigFile,
    ConfigParseError,
    ContactInfoConfig,
    FooterConfig,
    FooterLinkConfig,
    FooterSectionConfig,
    LogoConfig,
    NavCTAConfig,
    NavigationConfig,
    NavLinkConfig,
    PageConfig,
    Section,
    SiteConfig,
    SiteConfigError,
    SocialLinkConfig,
    ThemeConfig,
    UnknownPageError,
)

__all__ = [
    "ConfigDocument",
    "ConfigFile",
    "ConfigParseError",
    "ConfigStatus",
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
    "check_config_exists",
    "find_config_file",
    "load_config",
    "load_page_config",
    "load_site_config",
    "normalize_slug",
    "parse_config_document",
    "read_config_document",
    "theme_css_variables",
]
