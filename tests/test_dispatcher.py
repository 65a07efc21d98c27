"""Tests for section dispatch: gating, isolation, ordering, and diagnostics."""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

import pytest
from bs4 import BeautifulSoup

from sdui_pages.config import Section
from sdui_pages.dispatcher import SectionDispatcher
from sdui_pages.sections import SECTION_REGISTRY, SectionRenderer, build_default_registry

if typ.TYPE_CHECKING:
    from jinja2 import Environment

    from sdui_pages.registry import SectionRegistry

DISPATCH_LOGGER = "sdui_pages.dispatcher"

HERO = {"type": "hero", "props": {"title": "First"}}
FAQ = {"type": "faq", "props": {"items": [{"question": "Q3", "answer": "A3"}]}}
STATS = {"type": "stats", "props": {"items": [{"label": "Users", "value": 10}]}}


class ExplodingRenderer(SectionRenderer[None]):
    """Renderer that always fails while building its model."""

    section_type = "exploding"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> None:
        msg = "renderer blew up"
        raise RuntimeError(msg)


class SilentRenderer(SectionRenderer[None]):
    """Renderer whose ``render`` returns neither markup nor a skip."""

    section_type = "silent"

    def build(self, props: cabc.Mapping[str, typ.Any]) -> None:
        return None

    def render(self, section: Section, env: Environment) -> typ.Any:
        return None


@pytest.fixture
def faulty_registry() -> SectionRegistry:
    """Return the default registry plus renderers that misbehave."""
    registry = build_default_registry()
    registry.register("exploding", ExplodingRenderer(), display_name="Exploding")
    registry.register("silent", SilentRenderer(), display_name="Silent")
    return registry.freeze()


def test_scenario_unknown_type_renders_nothing(
    dispatcher: SectionDispatcher, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger=DISPATCH_LOGGER):
        output = dispatcher.render([{"type": "bogus-type", "props": {"title": "x"}}])
    assert output == []
    assert "bogus-type" in caplog.text
    assert "hero" in caplog.text


def test_production_mode_is_silent(
    jinja_env: Environment, caplog: pytest.LogCaptureFixture
) -> None:
    quiet = SectionDispatcher(SECTION_REGISTRY, jinja_env, production=True)
    sections = [
        {"type": "bogus-type", "props": {"title": "x"}},
        {"type": "faq", "props": {"items": []}},
        HERO,
    ]
    with caplog.at_level(logging.DEBUG, logger=DISPATCH_LOGGER):
        output = quiet.render(sections)
    assert [item.type for item in output] == ["hero"]
    assert caplog.records == []


def test_insufficient_content_logs_reason(
    dispatcher: SectionDispatcher, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger=DISPATCH_LOGGER):
        output = dispatcher.render([{"type": "faq", "props": {"items": []}}])
    assert output == []
    (record,) = caplog.records
    assert record.levelno == logging.WARNING
    assert "'faq' section needs" in record.getMessage()


def test_pricing_without_plans_leaves_no_gap(dispatcher: SectionDispatcher) -> None:
    sections = [HERO, {"type": "pricing", "props": {}}, FAQ]
    output = dispatcher.render(sections)
    assert [item.type for item in output] == ["hero", "faq"]
    html = dispatcher.render_html(sections)
    assert html.index("First") < html.index("Q3")
    assert "pricing" not in html


@pytest.mark.parametrize(
    "section",
    [
        None,
        "hero",
        {"props": {"title": "no type"}},
        {"type": "", "props": {"title": "blank type"}},
        {"type": "hero"},
        {"type": "hero", "props": {}},
        {"type": "hero", "props": "title"},
        {"type": "hero", "props": ["title"]},
        Section(type="hero", props=None),
    ],
)
def test_gate_failures_emit_nothing(
    dispatcher: SectionDispatcher, section: object
) -> None:
    assert dispatcher.render([section]) == []


def test_renderer_fault_is_isolated(
    faulty_registry: SectionRegistry,
    jinja_env: Environment,
    caplog: pytest.LogCaptureFixture,
) -> None:
    dispatcher = SectionDispatcher(faulty_registry, jinja_env)
    exploding = {"type": "exploding", "props": {"title": "boom"}}
    with caplog.at_level(logging.ERROR, logger=DISPATCH_LOGGER):
        with_fault = dispatcher.render_html([HERO, exploding, FAQ])
    without = dispatcher.render_html([HERO, FAQ])
    assert with_fault == without
    (record,) = caplog.records
    assert record.levelno == logging.ERROR
    assert "exploding" in record.getMessage()
    assert record.exc_info is not None


def test_renderer_fault_is_silent_in_production(
    faulty_registry: SectionRegistry,
    jinja_env: Environment,
    caplog: pytest.LogCaptureFixture,
) -> None:
    dispatcher = SectionDispatcher(faulty_registry, jinja_env, production=True)
    with caplog.at_level(logging.DEBUG, logger=DISPATCH_LOGGER):
        output = dispatcher.render([{"type": "exploding", "props": {"x": 1}}, HERO])
    assert [item.type for item in output] == ["hero"]
    assert caplog.records == []


def test_order_is_preserved_across_skips(dispatcher: SectionDispatcher) -> None:
    sections = [
        {"type": "bogus", "props": {"x": 1}},
        STATS,
        {"type": "faq", "props": {"items": []}},
        {"type": "hero", "props": {}},
        HERO,
        {"type": "gallery", "props": {"images": []}},
        FAQ,
    ]
    output = dispatcher.render(sections)
    assert [item.type for item in output] == ["stats", "hero", "faq"]
    soup = BeautifulSoup(dispatcher.render_html(sections), "html.parser")
    assert [tag["data-section"] for tag in soup.find_all("section")] == [
        "stats",
        "hero",
        "faq",
    ]


def test_rendered_sections_keep_their_anchor(dispatcher: SectionDispatcher) -> None:
    (item,) = dispatcher.render([{"id": "pricing", **FAQ}])
    assert item.id == "pricing"
    soup = BeautifulSoup(item.html, "html.parser")
    assert soup.section["id"] == "pricing"


def test_accepts_section_objects(dispatcher: SectionDispatcher) -> None:
    output = dispatcher.render([Section(type="hero", props={"title": "Typed"})])
    assert "Typed" in output[0].html


def test_malformed_outcome_is_skipped(
    faulty_registry: SectionRegistry,
    jinja_env: Environment,
    caplog: pytest.LogCaptureFixture,
) -> None:
    dispatcher = SectionDispatcher(faulty_registry, jinja_env)
    silent = {"type": "silent", "props": {"x": 1}}
    with caplog.at_level(logging.WARNING, logger=DISPATCH_LOGGER):
        output = dispatcher.render(
            [silent, {"type": "hero", "props": {"title": "Still here"}}]
        )
    assert [item.type for item in output] == ["hero"]
    assert "Still here" in output[0].html
    (record,) = caplog.records
    assert "'silent'" in record.getMessage()
    assert "NoneType" in record.getMessage()
