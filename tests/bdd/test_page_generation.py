"""Behaviour tests for ``sdui generate`` using pytest-bdd.

These scenarios write a configuration document into a temporary directory,
run the ``generate`` command, and inspect the resulting HTML with
BeautifulSoup. They cover ordered rendering, silent skipping of sparse and
unknown sections, production-mode quietness, and the skeleton fallback.

Usage
-----
Run ``pytest tests/bdd/test_page_generation.py -v`` to execute only these
scenarios.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from sdui_pages import cli

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "page_generation.feature"
)
scenarios(FEATURE_FILE)

DISPATCH_LOGGER = "sdui_pages.dispatcher"

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state(tmp_path: Path) -> ScenarioState:
    """Share the config and output directories across steps."""
    return {
        "config_dir": tmp_path / "config",
        "output_dir": tmp_path / "public",
    }


def _write_config(state: ScenarioState, body: str) -> None:
    config_dir = typ.cast("Path", state["config_dir"])
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "config.yaml").write_text(dedent(body).lstrip(), encoding="utf-8")


def _home_page(state: ScenarioState) -> BeautifulSoup:
    output_dir = typ.cast("Path", state["output_dir"])
    html = (output_dir / "index.html").read_text(encoding="utf-8")
    return BeautifulSoup(html, "html.parser")


@given("a site configuration with a hero, a pricing section without plans, and an FAQ")
def given_sparse_pricing(scenario_state: ScenarioState) -> None:
    """Write a home page whose middle section has nothing to render."""
    _write_config(
        scenario_state,
        """
        site:
          name: Acme
        pages:
          - slug: /
            sections:
              - type: hero
                props:
                  title: Welcome aboard
              - type: pricing
                props: {}
              - type: faq
                props:
                  items:
                    - question: How much?
                      answer: Not much.
        """,
    )


@given(
    "a site configuration with an unknown section type between two stats sections"
)
def given_unknown_type(scenario_state: ScenarioState) -> None:
    """Write a home page with an unregistered section type in the middle."""
    _write_config(
        scenario_state,
        """
        site:
          name: Acme
        sections:
          - type: stats
            props:
              items:
                - label: Customers
                  value: 1200
          - type: bogus-type
            props:
              title: x
          - type: stats
            props:
              items:
                - label: Countries
                  value: 40
        """,
    )


@given("no site configuration")
def given_no_config(scenario_state: ScenarioState) -> None:
    """Leave the configuration directory absent."""
    assert not typ.cast("Path", scenario_state["config_dir"]).exists()


def _generate(
    state: ScenarioState, caplog: pytest.LogCaptureFixture, environment: str
) -> None:
    caplog.set_level(logging.WARNING, logger=DISPATCH_LOGGER)
    cli.generate(
        config_dir=state["config_dir"],
        output_dir=state["output_dir"],
        environment=environment,
    )


@when("I generate the site")
def when_generate(
    scenario_state: ScenarioState, caplog: pytest.LogCaptureFixture
) -> None:
    """Run ``sdui generate`` in development mode."""
    _generate(scenario_state, caplog, "development")


@when("I generate the site for production")
def when_generate_production(
    scenario_state: ScenarioState, caplog: pytest.LogCaptureFixture
) -> None:
    """Run ``sdui generate`` in production mode."""
    _generate(scenario_state, caplog, "production")


@then("the home page shows the hero before the FAQ")
def then_hero_before_faq(scenario_state: ScenarioState) -> None:
    """Rendered sections keep their configured order."""
    main = _home_page(scenario_state).main
    types = [tag["data-section"] for tag in main.find_all("section", recursive=False)]
    assert types == ["hero", "faq"]
    assert main.h1.get_text() == "Welcome aboard"


@then("the home page contains no pricing markup")
def then_no_pricing(scenario_state: ScenarioState) -> None:
    """The sparse pricing section leaves no trace in the output."""
    soup = _home_page(scenario_state)
    assert soup.select(".section--pricing") == []
    assert soup.select("[data-empty-page]") == []


@then(parsers.parse("the home page contains {count:d} rendered sections"))
def then_section_count(scenario_state: ScenarioState, count: int) -> None:
    """Only renderable sections appear in the page body."""
    main = _home_page(scenario_state).main
    assert len(main.find_all("section", recursive=False)) == count


@then("a diagnostic names the unknown section type")
def then_diagnostic_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Development builds warn about the unknown type."""
    messages = [
        record.getMessage()
        for record in caplog.records
        if record.name == DISPATCH_LOGGER
    ]
    assert any("bogus-type" in message for message in messages)


@then("no diagnostics are logged")
def then_no_diagnostics(caplog: pytest.LogCaptureFixture) -> None:
    """Production builds never report skipped sections."""
    assert [r for r in caplog.records if r.name == DISPATCH_LOGGER] == []


@then("the skeleton page is written")
def then_skeleton(scenario_state: ScenarioState) -> None:
    """The fallback placeholder layout is written to the site root."""
    soup = _home_page(scenario_state)
    assert soup.body.has_attr("data-skeleton")
