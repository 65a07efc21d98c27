"""Tests for section validation, usage analysis, and registry documentation."""

from __future__ import annotations

from sdui_pages.config import Section
from sdui_pages.devtools import (
    analyze_config_usage,
    create_config_health_report,
    generate_registry_docs,
    registry_summary,
    validate_page_config,
    validate_section,
)
from sdui_pages.sections import SECTION_REGISTRY

SECTIONS = [
    {"type": "hero", "props": {"title": "Hi", "subtitle": "There"}},
    {"type": "bogus-type", "props": {"title": "x"}},
    {"props": {"title": "untyped"}},
    {"type": "faq", "props": {"items": []}},
    {"type": "cta", "props": "not a mapping"},
]


def test_validate_section_accepts_renderable_section() -> None:
    result = validate_section(SECTIONS[0], SECTION_REGISTRY)
    assert result.valid
    assert result.errors == []
    assert result.warnings == []


def test_unknown_type_is_an_error_with_available_types() -> None:
    result = validate_section(SECTIONS[1], SECTION_REGISTRY, index=1)
    assert not result.valid
    assert result.errors == ['Unknown section type: "bogus-type"']
    assert result.warnings[0].startswith("Available types: hero, features")


def test_missing_type_is_an_error() -> None:
    result = validate_section(SECTIONS[2], SECTION_REGISTRY)
    assert result.type == "unknown"
    assert result.errors == ["Section type is required"]


def test_insufficient_content_is_only_a_warning() -> None:
    result = validate_section(SECTIONS[3], SECTION_REGISTRY)
    assert result.valid
    assert result.warnings == [
        "Section will not render: 'faq' section needs at least one item with both "
        "a question and an answer"
    ]


def test_non_mapping_props_is_an_error() -> None:
    result = validate_section(SECTIONS[4], SECTION_REGISTRY)
    assert not result.valid
    assert result.errors == ["Section props must be a mapping"]


def test_non_mapping_entries_are_errors() -> None:
    assert validate_section(None, SECTION_REGISTRY).errors == ["Section is empty"]
    assert validate_section("hero", SECTION_REGISTRY).errors == [
        "Section entry must be a mapping"
    ]


def test_section_objects_are_accepted() -> None:
    result = validate_section(Section(type="hero", props={"title": "Hi"}), SECTION_REGISTRY)
    assert result.valid


def test_validate_page_config_totals() -> None:
    report = validate_page_config(SECTIONS, SECTION_REGISTRY)
    assert report.total_sections == 5
    assert report.valid_sections == 2
    assert report.invalid_sections == 3
    assert not report.valid
    assert report.health_score == 40
    payload = report.to_dict()
    assert payload["details"][1] == {
        "index": 1,
        "type": "bogus-type",
        "valid": False,
        "errors": ['Unknown section type: "bogus-type"'],
        "warnings": [payload["details"][1]["warnings"][0]],
    }


def test_empty_page_is_valid() -> None:
    report = validate_page_config([], SECTION_REGISTRY)
    assert report.valid
    assert report.health_score == 100


def test_analyze_config_usage_counts_types_and_props() -> None:
    usage = analyze_config_usage(SECTIONS)
    assert usage.section_types == {
        "hero": 1,
        "bogus-type": 1,
        "unknown": 1,
        "faq": 1,
        "cta": 1,
    }
    assert usage.total_props == 5
    assert usage.common_props == {"title": 3, "subtitle": 1, "items": 1}


def test_health_report_lists_issues() -> None:
    report = create_config_health_report(SECTIONS, SECTION_REGISTRY)
    assert report.startswith("# Config Health Report\n")
    assert "- Health Score: 40%" in report
    assert "- title: used 3 times" in report
    assert "### Section 1 (bogus-type)" in report
    assert "### Section 3 (faq)" not in report
    assert '- Error: Unknown section type: "bogus-type"' in report


def test_health_report_omits_issues_when_clean() -> None:
    report = create_config_health_report(SECTIONS[:1], SECTION_REGISTRY)
    assert "- Health Score: 100%" in report
    assert "## Issues Found" not in report


def test_registry_docs_group_by_category() -> None:
    docs = generate_registry_docs(SECTION_REGISTRY)
    assert docs.startswith("# Available Sections\n")
    assert "## Social-proof" in docs
    assert "### logo-cloud\n**Display Name:** Logo Cloud\n" in docs
    assert docs.index("## Hero") < docs.index("## Content") < docs.index("## Layout")


def test_registry_summary() -> None:
    summary = registry_summary(SECTION_REGISTRY)
    assert summary["total"] == 13
    assert summary["types"] == SECTION_REGISTRY.list_types()
    assert [entry["type"] for entry in summary["by_category"]["conversion"]] == [
        "cta",
        "pricing",
        "contact",
    ]
