"""Authoring tools: section validation, config usage analysis, registry docs.

These helpers never render anything. They inspect raw section entries
against a :class:`~sdui_pages.registry.SectionRegistry` so authors can find
typos and sparse sections before publishing. The CLI ``validate`` and
``registry`` commands are thin wrappers around this module.

Examples
--------
>>> from sdui_pages.devtools import validate_page_config
>>> from sdui_pages.sections import SECTION_REGISTRY
>>> report = validate_page_config(
...     [{"type": "hero", "props": {"title": "Hi"}}, {"type": "bogus"}],
...     SECTION_REGISTRY,
... )
>>> (report.valid_sections, report.invalid_sections)
(1, 1)
"""

from __future__ import annotations

import collections
import collections.abc as cabc
import dataclasses as dc
import typing as typ

from .config import Section

if typ.TYPE_CHECKING:
    from .registry import SectionRegistry

UNKNOWN_TYPE = "unknown"
TOP_PROPS_LIMIT = 10


@dc.dataclass(slots=True)
class SectionValidation:
    """Validation outcome for one section entry."""

    index: int
    type: str
    errors: list[str] = dc.field(default_factory=list)
    warnings: list[str] = dc.field(default_factory=list)

    @property
    def valid(self) -> bool:
        """Return whether the section has no errors."""
        return not self.errors

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-friendly representation."""
        return {
            "index": self.index,
            "type": self.type,
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


@dc.dataclass(slots=True)
class PageValidation:
    """Aggregate validation outcome for a page's sections."""

    details: list[SectionValidation]

    @property
    def total_sections(self) -> int:
        """Return the number of validated sections."""
        return len(self.details)

    @property
    def valid_sections(self) -> int:
        """Return the number of sections without errors."""
        return sum(1 for detail in self.details if detail.valid)

    @property
    def invalid_sections(self) -> int:
        """Return the number of sections with at least one error."""
        return self.total_sections - self.valid_sections

    @property
    def valid(self) -> bool:
        """Return whether every section is valid."""
        return self.invalid_sections == 0

    @property
    def health_score(self) -> int:
        """Return the percentage of valid sections; an empty page scores 100."""
        if not self.details:
            return 100
        return round(self.valid_sections / self.total_sections * 100)

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-friendly representation."""
        return {
            "valid": self.valid,
            "total_sections": self.total_sections,
            "valid_sections": self.valid_sections,
            "invalid_sections": self.invalid_sections,
            "details": [detail.to_dict() for detail in self.details],
        }


@dc.dataclass(slots=True, frozen=True)
class ConfigUsage:
    """How often each section type and prop key appears."""

    section_types: dict[str, int]
    total_props: int
    common_props: dict[str, int]


def validate_section(
    section: object, registry: SectionRegistry, *, index: int = 0
) -> SectionValidation:
    """Validate one raw section entry against ``registry``.

    Errors mark the section invalid: a missing entry, a missing ``type``, an
    unregistered ``type``, or ``props`` that is not a mapping. Content that
    the renderer would skip is reported as a warning only.
    """
    if section is None:
        return SectionValidation(index, UNKNOWN_TYPE, errors=["Section is empty"])
    if not isinstance(section, Section | cabc.Mapping):
        return SectionValidation(
            index, UNKNOWN_TYPE, errors=["Section entry must be a mapping"]
        )
    parsed = Section.from_raw(section)
    result = SectionValidation(index, parsed.type or UNKNOWN_TYPE)
    if not parsed.type:
        result.errors.append("Section type is required")
    elif parsed.type not in registry:
        result.errors.append(f'Unknown section type: "{parsed.type}"')
        result.warnings.append(f"Available types: {', '.join(registry.list_types())}")

    props = parsed.props
    if not isinstance(props, cabc.Mapping):
        result.errors.append("Section props must be a mapping")
        return result
    if not props:
        result.warnings.append("Section props are empty")

    renderer = registry.resolve(parsed.type)
    if renderer is not None and renderer.build_section(parsed) is None:
        result.warnings.append(f"Section will not render: {renderer.skip_reason()}")
    return result


def validate_page_config(
    sections: cabc.Sequence[object], registry: SectionRegistry
) -> PageValidation:
    """Validate every section of a page in order."""
    return PageValidation(
        details=[
            validate_section(section, registry, index=index)
            for index, section in enumerate(sections)
        ]
    )


def analyze_config_usage(sections: cabc.Iterable[object]) -> ConfigUsage:
    """Count section types and prop keys across ``sections``."""
    section_types: collections.Counter[str] = collections.Counter()
    common_props: collections.Counter[str] = collections.Counter()
    for entry in sections:
        section = Section.from_raw(entry)
        section_types[section.type or UNKNOWN_TYPE] += 1
        if isinstance(section.props, cabc.Mapping):
            common_props.update(str(key) for key in section.props)
    return ConfigUsage(
        section_types=dict(section_types),
        total_props=sum(common_props.values()),
        common_props=dict(common_props),
    )


def create_config_health_report(
    sections: cabc.Sequence[object], registry: SectionRegistry
) -> str:
    """Return a markdown health report for a page's sections."""
    validation = validate_page_config(sections, registry)
    usage = analyze_config_usage(sections)

    lines = [
        "# Config Health Report",
        "",
        "## Overview",
        f"- Total Sections: {validation.total_sections}",
        f"- Valid Sections: {validation.valid_sections}",
        f"- Invalid Sections: {validation.invalid_sections}",
        f"- Health Score: {validation.health_score}%",
        "",
        "## Section Types Usage",
    ]
    lines.extend(f"- {name}: {count}" for name, count in usage.section_types.items())
    lines.extend(["", "## Common Props"])
    top_props = collections.Counter(usage.common_props).most_common(TOP_PROPS_LIMIT)
    lines.extend(f"- {prop}: used {count} times" for prop, count in top_props)

    if validation.invalid_sections:
        lines.extend(["", "## Issues Found"])
        for detail in validation.details:
            if detail.valid:
                continue
            lines.extend(["", f"### Section {detail.index} ({detail.type})"])
            lines.extend(f"- Error: {error}" for error in detail.errors)
            lines.extend(f"- Warning: {warning}" for warning in detail.warnings)
    return "\n".join(lines) + "\n"


def _group_metadata(registry: SectionRegistry) -> dict[str, list[dict[str, str]]]:
    grouped: dict[str, list[dict[str, str]]] = {}
    for metadata in registry.list_all_metadata():
        grouped.setdefault(metadata["category"], []).append(metadata)
    return grouped


def generate_registry_docs(registry: SectionRegistry) -> str:
    """Return markdown documenting every registered section, by category."""
    lines = ["# Available Sections", ""]
    for category, entries in _group_metadata(registry).items():
        lines.extend([f"## {category.capitalize()}", ""])
        for metadata in entries:
            lines.append(f"### {metadata['type']}")
            lines.append(f"**Display Name:** {metadata['display_name']}")
            if metadata["description"]:
                lines.append(f"**Description:** {metadata['description']}")
            lines.append("")
    return "\n".join(lines)


def registry_summary(registry: SectionRegistry) -> dict[str, typ.Any]:
    """Return totals, metadata, and category grouping for ``registry``."""
    metadata = registry.list_all_metadata()
    return {
        "total": len(metadata),
        "sections": metadata,
        "by_category": _group_metadata(registry),
        "types": [entry["type"] for entry in metadata],
    }


__all__ = [
    "ConfigUsage",
    "PageValidation",
    "SectionValidation",
    "analyze_config_usage",
    "create_config_health_report",
    "generate_registry_docs",
    "registry_summary",
    "validate_page_config",
    "validate_section",
]
