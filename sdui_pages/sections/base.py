"""Renderer contract shared by every section type.

A renderer is a pure function from a :class:`~sdui_pages.config.Section` to
either :class:`Rendered` markup or an explicit :class:`Skipped` outcome. The
work splits in two: :meth:`SectionRenderer.build` turns untyped props into a
typed model (or ``None`` when the minimum-content predicate fails), and
:meth:`SectionRenderer.render` feeds that model to the section's Jinja
template. Missing content never raises; unexpected exceptions propagate to
the dispatcher, which isolates them.
"""

from __future__ import annotations

import abc
import dataclasses as dc
import typing as typ

from markupsafe import Markup

from ..safe_access import as_mapping

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from jinja2 import Environment

    from ..config import Section

ModelT = typ.TypeVar("ModelT")


@dc.dataclass(slots=True, frozen=True)
class Rendered:
    """Markup produced for one section."""

    html: Markup


@dc.dataclass(slots=True, frozen=True)
class Skipped:
    """Explicit "nothing to render" outcome with a diagnostic reason."""

    reason: str


RenderOutcome = Rendered | Skipped


class SectionRenderer(abc.ABC, typ.Generic[ModelT]):
    """Base class for the per-type section renderers.

    Subclasses set :attr:`section_type` and :attr:`requirement` and implement
    :meth:`build`. The template defaults to ``sections/<section_type>.jinja``.
    """

    section_type: typ.ClassVar[str]
    requirement: typ.ClassVar[str] = "content"

    @property
    def template_name(self) -> str:
        """Return the Jinja template used for this section type."""
        return f"sections/{self.section_type}.jinja"

    @abc.abstractmethod
    def build(self, props: cabc.Mapping[str, typ.Any]) -> ModelT | None:
        """Return the typed model for ``props`` or ``None`` when too sparse."""

    def build_section(self, section: Section) -> ModelT | None:
        """Return the typed model for ``section`` using its props mapping."""
        return self.build(as_mapping(section.props))

    def skip_reason(self) -> str:
        """Describe the minimum content this renderer needs."""
        return f"'{self.section_type}' section needs {self.requirement}"

    def render(self, section: Section, env: Environment) -> RenderOutcome:
        """Render ``section`` with the templates available in ``env``."""
        model = self.build_section(section)
        if model is None:
            return Skipped(self.skip_reason())
        template = env.get_template(self.template_name)
        html = template.render(section=section, model=model, anchor=section.id)
        return Rendered(Markup(html.strip()))

    def __repr__(self) -> str:
        """Return a compact representation naming the section type."""
        return f"{type(self).__name__}({self.section_type!r})"


__all__ = ["ModelT", "RenderOutcome", "Rendered", "SectionRenderer", "Skipped"]
