"""Static page rendering pipeline.

This module turns a loaded :class:`~sdui_pages.config.ConfigDocument` into
HTML files. Each configured page is wrapped in ``page.jinja``, which supplies
the theme CSS variables, navigation, and footer, while the page body comes
from the :class:`~sdui_pages.dispatcher.SectionDispatcher`. When no
configuration could be loaded the builder writes ``skeleton.jinja`` instead,
a neutral placeholder layout.

Typical usage mirrors the ``sdui generate`` command:

>>> from pathlib import Path
>>> from sdui_pages.config import load_config
>>> builder = PageBuilder(load_config(Path("config")), output_dir=Path("public"))
>>> written = builder.run()  # doctest: +SKIP

The home page (slug ``/``) is written to ``<output_dir>/index.html``; every
other slug is written to ``<output_dir>/<slug>/index.html``.
"""

from __future__ import annotations

import datetime as dt
import logging
import typing as typ
from pathlib import Path

from ._constants import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SITE_DESCRIPTION,
    EMPTY_PAGE_MESSAGE,
    HOME_SLUG,
)
from .config import normalize_slug, theme_css_variables
from .dispatcher import SectionDispatcher, create_environment
from .sections import SECTION_REGISTRY

if typ.TYPE_CHECKING:
    from .config import ConfigDocument, PageConfig
    from .registry import SectionRegistry

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.html"


class PageBuilder:
    """Render configured pages, or the skeleton page, to static HTML files."""

    def __init__(
        self,
        document: ConfigDocument | None,
        *,
        output_dir: Path = Path(DEFAULT_OUTPUT_DIR),
        templates_dir: Path | None = None,
        registry: SectionRegistry = SECTION_REGISTRY,
        production: bool = False,
    ) -> None:
        """Initialize the builder, its Jinja environment, and dispatcher.

        Parameters
        ----------
        document : ConfigDocument or None
            Loaded configuration. ``None`` means no usable configuration was
            found and only the skeleton page is produced.
        output_dir : Path, optional
            Root folder for generated HTML. Defaults to ``public``.
        templates_dir : Path, optional
            Alternative template directory; defaults to the packaged templates.
        registry : SectionRegistry, optional
            Registry used to resolve section types. Defaults to the frozen
            built-in registry.
        production : bool, optional
            Suppress render diagnostics when ``True``.
        """
        self.document = document
        self.output_dir = output_dir
        self.env = create_environment(templates_dir)
        self.dispatcher = SectionDispatcher(registry, self.env, production=production)
        self.page_template = self.env.get_template("page.jinja")
        self.skeleton_template = self.env.get_template("skeleton.jinja")

    def output_path(self, page: PageConfig) -> Path:
        """Return the file ``page`` is written to.

        Raises
        ------
        ValueError
            If the slug would place the file outside ``output_dir``.
        """
        if page.slug == HOME_SLUG:
            return self.output_dir / INDEX_FILENAME
        path = self.output_dir.joinpath(*page.slug.strip("/").split("/"), INDEX_FILENAME)
        if not path.resolve().is_relative_to(self.output_dir.resolve()):
            msg = f"Page slug '{page.slug}' resolves outside '{self.output_dir}'."
            raise ValueError(msg)
        return path

    def render_page(self, page: PageConfig) -> str:
        """Return the full HTML document for ``page``."""
        if self.document is None:
            msg = "Cannot render a page without a loaded configuration."
            raise ValueError(msg)
        site = self.document.site
        context = {
            "site": site,
            "page": page,
            "page_title": _page_title(page.title, site.name),
            "description": page.description or site.description,
            "theme_variables": theme_css_variables(site.theme),
            "sections": self.dispatcher.render(page.sections),
            "empty_message": EMPTY_PAGE_MESSAGE,
            "default_description": DEFAULT_SITE_DESCRIPTION,
            "generated_at": dt.datetime.now(dt.UTC),
        }
        return _with_newline(self.page_template.render(**context))

    def render_skeleton(self) -> str:
        """Return the placeholder document shown when no config is available."""
        html = self.skeleton_template.render(generated_at=dt.datetime.now(dt.UTC))
        return _with_newline(html)

    def run(self, slug: str | None = None) -> list[Path]:
        """Render and write pages, returning the written paths.

        Parameters
        ----------
        slug : str or None, optional
            Only render the page at ``slug``. When ``None`` every configured
            page is rendered.

        Returns
        -------
        list[Path]
            Paths of the HTML files written, in page order.

        Raises
        ------
        UnknownPageError
            If ``slug`` does not name a configured page.
        """
        if self.document is None:
            logger.warning("No configuration available; writing skeleton page.")
            path = self.output_dir / INDEX_FILENAME
            _write(path, self.render_skeleton())
            return [path]

        if slug is not None:
            pages = [self.document.require_page(normalize_slug(slug) or HOME_SLUG)]
        else:
            pages = list(self.document.pages)

        written: list[Path] = []
        for page in pages:
            path = self.output_path(page)
            _write(path, self.render_page(page))
            logger.info("Rendered page '%s' to %s", page.slug, path)
            written.append(path)
        return written


def _page_title(title: str, site_name: str) -> str:
    if title and site_name and title != site_name:
        return f"{title} | {site_name}"
    return title or site_name


def _with_newline(html: str) -> str:
    return html if html.endswith("\n") else html + "\n"


def _write(path: Path, html: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")


__all__ = ["INDEX_FILENAME", "PageBuilder"]
