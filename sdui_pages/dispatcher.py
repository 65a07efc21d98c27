"""Render an ordered list of sections into HTML without ever failing the page.

The dispatcher walks the configured sections in order. A section is rendered
only when it passes :func:`~sdui_pages.safe_access.can_render_section`, its
type resolves in the registry, and its renderer produces markup. Anything
else contributes nothing to the output: unknown types, sparse content, and
renderer exceptions are isolated so the remaining sections still render.

Outside production the dispatcher reports why a section went missing through
the module logger. Diagnostics never reach the rendered HTML.

Examples
--------
>>> from sdui_pages.dispatcher import SectionDispatcher, create_environment
>>> from sdui_pages.sections import SECTION_REGISTRY
>>> dispatcher = SectionDispatcher(SECTION_REGISTRY, create_environment())
>>> html = dispatcher.render_html(
...     [{"type": "hero", "props": {"title": "Hello"}}]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from .config import Section
from .safe_access import can_render_section, class_names
from .sections.base import Rendered, Skipped

if typ.TYPE_CHECKING:
    from .registry import SectionRegistry

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


def create_environment(templates_dir: Path | None = None) -> Environment:
    """Return the Jinja environment used for pages and section templates.

    Parameters
    ----------
    templates_dir : Path, optional
        Directory holding ``page.jinja`` and ``sections/*.jinja``. Defaults
        to the templates shipped with :mod:`sdui_pages`.
    """
    env = Environment(
        loader=FileSystemLoader(templates_dir or TEMPLATES_DIR),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.globals["class_names"] = class_names
    return env


@dc.dataclass(slots=True, frozen=True)
class RenderedSection:
    """Markup produced for one configured section."""

    type: str
    id: str | None
    html: Markup


class SectionDispatcher:
    """Route sections to their renderers and isolate per-section failures."""

    def __init__(
        self,
        registry: SectionRegistry,
        env: Environment,
        *,
        production: bool = False,
    ) -> None:
        """Bind the dispatcher to a registry and template environment.

        Parameters
        ----------
        registry : SectionRegistry
            Lookup table from section type to renderer.
        env : Environment
            Jinja environment the renderers load their templates from.
        production : bool, optional
            When ``True`` every diagnostic is suppressed.
        """
        self.registry = registry
        self.env = env
        self.production = production

    def render(
        self, sections: cabc.Iterable[Section | cabc.Mapping[str, typ.Any]]
    ) -> list[RenderedSection]:
        """Render ``sections`` in order, dropping those that produce nothing."""
        rendered: list[RenderedSection] = []
        for index, raw in enumerate(sections):
            section = Section.from_raw(raw)
            result = self._render_one(index, section)
            if result is not None:
                rendered.append(result)
        return rendered

    def render_html(
        self, sections: cabc.Iterable[Section | cabc.Mapping[str, typ.Any]]
    ) -> Markup:
        """Render ``sections`` and concatenate their markup."""
        return Markup("\n").join(item.html for item in self.render(sections))

    def _render_one(self, index: int, section: Section) -> RenderedSection | None:
        if not can_render_section(section):
            return None
        renderer = self.registry.resolve(section.type)
        if renderer is None:
            self._warn(
                "Unknown section type '%s' at position %d. Known types: %s",
                section.type,
                index,
                ", ".join(self.registry.list_types()),
            )
            return None
        try:
            outcome = renderer.render(section, self.env)
        except Exception:
            if not self.production:
                logger.exception(
                    "Error rendering section '%s' at position %d.", section.type, index
                )
            return None
        match outcome:
            case Rendered(html=html):
                return RenderedSection(type=section.type, id=section.id, html=html)
            case Skipped(reason=reason):
                self._warn("Skipping section at position %d: %s", index, reason)
            case _:
                self._warn(
                    "Renderer for '%s' at position %d returned %s; skipping.",
                    section.type,
                    index,
                    type(outcome).__name__,
                )
        return None

    def _warn(self, msg: str, *args: object) -> None:
        if not self.production:
            logger.warning(msg, *args)


__all__ = ["RenderedSection", "SectionDispatcher", "TEMPLATES_DIR", "create_environment"]
