"""Section registry mapping ``type`` strings onto renderers and metadata.

The registry is the only shared mutable structure in the render pipeline. It
is populated by :meth:`SectionRegistry.register` calls and then frozen, after
which it is read-only. The default registry in :mod:`sdui_pages.sections` is
built and frozen at import time, so every registration completes before the
first render.

Examples
--------
>>> from sdui_pages.sections import SECTION_REGISTRY
>>> SECTION_REGISTRY.resolve("faq") is not None
True
>>> SECTION_REGISTRY.resolve("bogus-type") is None
True
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

if typ.TYPE_CHECKING:
    from .sections.base import SectionRenderer


class SectionCategory(enum.StrEnum):
    """Coarse grouping used by tooling and docs, never by rendering."""

    HERO = "hero"
    CONTENT = "content"
    SOCIAL_PROOF = "social-proof"
    CONVERSION = "conversion"
    LAYOUT = "layout"
    OTHER = "other"


class RegistryFrozenError(RuntimeError):
    """Raised when registering into a registry that has been finalized."""


@dc.dataclass(slots=True, frozen=True)
class SectionRegistryEntry:
    """Renderer plus descriptive metadata for one section type."""

    type: str
    renderer: SectionRenderer
    display_name: str
    category: SectionCategory = SectionCategory.OTHER
    description: str = ""

    def metadata(self) -> dict[str, str]:
        """Return the JSON-friendly metadata for this entry."""
        return {
            "type": self.type,
            "display_name": self.display_name,
            "category": str(self.category),
            "description": self.description,
        }


class SectionRegistry:
    """Mutable-until-frozen table of section renderers keyed by type."""

    def __init__(self) -> None:
        """Create an empty, unfrozen registry."""
        self._entries: dict[str, SectionRegistryEntry] = {}
        self._frozen = False

    def __contains__(self, section_type: object) -> bool:
        """Return whether ``section_type`` is registered."""
        return self.has(section_type)

    def __len__(self) -> int:
        """Return the number of registered section types."""
        return len(self._entries)

    @property
    def frozen(self) -> bool:
        """Whether :meth:`freeze` has been called."""
        return self._frozen

    def register(
        self,
        section_type: str,
        renderer: SectionRenderer,
        *,
        display_name: str,
        category: SectionCategory | str = SectionCategory.OTHER,
        description: str = "",
    ) -> None:
        """Register ``renderer`` for ``section_type``; the last call wins.

        Parameters
        ----------
        section_type : str
            Discriminator used in configuration, for example ``"logo-cloud"``.
        renderer : SectionRenderer
            Renderer invoked for sections of this type.
        display_name : str
            Human-readable name shown by tooling.
        category : SectionCategory or str, optional
            Grouping for introspection. Unknown strings map to ``other``.
        description : str, optional
            One-line summary shown by tooling.

        Raises
        ------
        RegistryFrozenError
            If the registry has already been frozen.
        """
        if self._frozen:
            msg = f"Cannot register '{section_type}': section registry is frozen."
            raise RegistryFrozenError(msg)
        self._entries[section_type] = SectionRegistryEntry(
            type=section_type,
            renderer=renderer,
            display_name=display_name,
            category=_coerce_category(category),
            description=description,
        )

    def freeze(self) -> SectionRegistry:
        """Finalize the registry so later registrations fail loudly."""
        self._frozen = True
        return self

    def clear(self) -> None:
        """Remove every registration from an unfrozen registry."""
        if self._frozen:
            msg = "Cannot clear a frozen section registry."
            raise RegistryFrozenError(msg)
        self._entries.clear()

    def resolve(self, section_type: object) -> SectionRenderer | None:
        """Return the renderer for ``section_type`` or ``None`` when unknown."""
        entry = self.entry(section_type)
        return entry.renderer if entry else None

    def entry(self, section_type: object) -> SectionRegistryEntry | None:
        """Return the full registry entry for ``section_type``, if any."""
        if not isinstance(section_type, str):
            return None
        return self._entries.get(section_type)

    def has(self, section_type: object) -> bool:
        """Return whether ``section_type`` is registered."""
        return self.entry(section_type) is not None

    def list_types(self) -> list[str]:
        """Return every registered type in registration order."""
        return list(self._entries)

    def list_by_category(
        self, category: SectionCategory | str
    ) -> dict[str, SectionRegistryEntry]:
        """Return the entries belonging to ``category`` keyed by type."""
        wanted = _coerce_category(category)
        return {
            section_type: entry
            for section_type, entry in self._entries.items()
            if entry.category is wanted
        }

    def list_all_metadata(self) -> list[dict[str, str]]:
        """Return metadata dictionaries for every registered type."""
        return [entry.metadata() for entry in self._entries.values()]


def _coerce_category(value: SectionCategory | str) -> SectionCategory:
    """Return ``value`` as a category, mapping unknown strings to ``other``."""
    try:
        return SectionCategory(value)
    except ValueError:
        return SectionCategory.OTHER


__all__ = [
    "RegistryFrozenError",
    "SectionCategory",
    "SectionRegistry",
    "SectionRegistryEntry",
]
