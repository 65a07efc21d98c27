"""Locate and load the site configuration document into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import json
import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .._constants import CONFIG_FILENAMES, DEFAULT_CONFIG_DIR, HOME_SLUG, HOME_TITLE
from .helpers import _entries, _optional_str, _str_or
from .models import (
    ConfigDocument,
    ConfigFile,
    ConfigParseError,
    PageConfig,
    Section,
    SiteConfig,
    SiteConfigError,
)
from .site import _build_site_config

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True, frozen=True)
class ConfigStatus:
    """Existence check result used by tooling to detect config changes."""

    exists: bool
    mtime: float = 0.0
    format: str | None = None


def find_config_file(config_dir: Path = Path(DEFAULT_CONFIG_DIR)) -> ConfigFile | None:
    """Return the first configuration file present in ``config_dir``.

    YAML files take precedence over ``config.json``.

    Parameters
    ----------
    config_dir : Path, optional
        Directory searched for ``config.yaml``, ``config.yml``, and
        ``config.json`` in that order. Defaults to ``config``.

    Returns
    -------
    ConfigFile or None
        Location, format, and modification time of the discovered file, or
        ``None`` when no candidate exists.
    """
    for filename in CONFIG_FILENAMES:
        candidate = config_dir / filename
        if candidate.is_file():
            return ConfigFile(
                path=candidate,
                format="json" if candidate.suffix == ".json" else "yaml",
                mtime=candidate.stat().st_mtime,
            )
    return None


def check_config_exists(config_dir: Path = Path(DEFAULT_CONFIG_DIR)) -> ConfigStatus:
    """Report whether a configuration file exists, with its format and mtime."""
    config_file = find_config_file(config_dir)
    if config_file is None:
        return ConfigStatus(exists=False)
    return ConfigStatus(exists=True, mtime=config_file.mtime, format=config_file.format)


def read_config_document(config_file: ConfigFile) -> dict[str, typ.Any]:
    """Parse ``config_file`` into a raw mapping.

    Raises
    ------
    ConfigParseError
        If the file cannot be read as UTF-8, is not valid YAML/JSON, or its
        top level is not a mapping.
    """
    try:
        text = config_file.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Failed to read configuration '{config_file.path}': {exc}"
        raise ConfigParseError(msg) from exc
    try:
        if config_file.format == "json":
            loaded = json.loads(text) if text.strip() else {}
        else:
            loader = YAML(typ="safe")
            loader.version = (1, 2)
            loaded = loader.load(text) or {}
    except (json.JSONDecodeError, YAMLError) as exc:
        msg = f"Failed to parse configuration '{config_file.path}': {exc}"
        raise ConfigParseError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Top-level structure of '{config_file.path}' must be a mapping."
        raise ConfigParseError(msg)
    return loaded


def parse_config_document(
    raw: typ.Mapping[str, typ.Any], *, source: ConfigFile | None = None
) -> ConfigDocument:
    """Build a :class:`ConfigDocument` from an already parsed mapping.

    The ``pages`` list is the canonical shape. A top-level ``sections`` list
    is still accepted as shorthand for a single home page at ``/`` when no
    ``pages`` are defined, but is deprecated.
    """
    site = _build_site_config(raw.get("site"))
    pages = _build_pages(raw.get("pages"))
    shorthand = raw.get("sections")
    if shorthand is not None:
        if pages:
            logger.warning(
                "Ignoring top-level 'sections' because 'pages' is defined."
            )
        else:
            logger.warning(
                "Top-level 'sections' is deprecated; move them into a 'pages' "
                "entry with slug '%s'.",
                HOME_SLUG,
            )
            pages = (_build_home_shorthand(shorthand, site),)
    return ConfigDocument(site=site, pages=pages, source=source)


def load_config(config_dir: Path = Path(DEFAULT_CONFIG_DIR)) -> ConfigDocument | None:
    """Load the configuration document, treating absence and parse faults alike.

    Returns
    -------
    ConfigDocument or None
        The parsed document, or ``None`` when no file exists or the file could
        not be parsed. Parse faults are logged rather than raised so callers
        can fall back to the skeleton page.
    """
    config_file = find_config_file(config_dir)
    if config_file is None:
        logger.warning(
            "No config file found in '%s' (checked %s).",
            config_dir,
            ", ".join(CONFIG_FILENAMES),
        )
        return None
    try:
        raw = read_config_document(config_file)
    except SiteConfigError:
        logger.exception("Failed to load config from '%s'.", config_file.path)
        return None
    logger.info("Config loaded from %s: %s", config_file.format.upper(), config_file.path)
    return parse_config_document(raw, source=config_file)


def load_site_config(config_dir: Path = Path(DEFAULT_CONFIG_DIR)) -> SiteConfig | None:
    """Load the configuration and return its site block, or ``None``."""
    document = load_config(config_dir)
    return document.site if document else None


def load_page_config(
    slug: str, config_dir: Path = Path(DEFAULT_CONFIG_DIR)
) -> PageConfig | None:
    """Load the configuration and return the page at ``slug``, or ``None``."""
    document = load_config(config_dir)
    if document is None:
        return None
    return document.get_page(normalize_slug(slug) or HOME_SLUG)


def normalize_slug(value: object) -> str | None:
    """Return ``value`` as a rooted slug such as ``/pricing``, or None.

    Empty, ``.`` and ``..`` segments are dropped so a slug always maps to a
    path inside the output directory.
    """
    text = _optional_str(value)
    if text is None:
        return None
    segments = [part for part in text.split("/") if part not in {"", ".", ".."}]
    return "/" + "/".join(segments)


def _build_sections(entries: object) -> tuple[Section, ...]:
    """Build the ordered sections of one page."""
    return tuple(Section.from_raw(entry) for entry in _entries(entries))


def _build_pages(entries: object) -> tuple[PageConfig, ...]:
    """Build page configs, skipping entries without a slug and duplicate slugs."""
    pages: dict[str, PageConfig] = {}
    for index, entry in enumerate(_entries(entries)):
        match entry:
            case dict() as data:
                slug = normalize_slug(data.get("slug"))
            case _:
                logger.warning("Skipping page %d: entry is not a mapping.", index)
                continue
        if slug is None:
            logger.warning("Skipping page %d: missing 'slug'.", index)
            continue
        if slug in pages:
            logger.warning("Skipping page %d: duplicate slug '%s'.", index, slug)
            continue
        pages[slug] = PageConfig(
            slug=slug,
            title=_str_or(data.get("title"), ""),
            description=_str_or(data.get("description"), ""),
            sections=_build_sections(data.get("sections")),
        )
    return tuple(pages.values())


def _build_home_shorthand(entries: object, site: SiteConfig) -> PageConfig:
    """Wrap top-level ``sections`` into the implicit home page."""
    return PageConfig(
        slug=HOME_SLUG,
        title=HOME_TITLE,
        description=site.description,
        sections=_build_sections(entries),
    )


__all__ = [
    "ConfigStatus",
    "check_config_exists",
    "find_config_file",
    "load_config",
    "load_page_config",
    "load_site_config",
    "normalize_slug",
    "parse_config_document",
    "read_config_document",
]
