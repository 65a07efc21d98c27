"""Shared fixtures for the sdui_pages test suite."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from sdui_pages.dispatcher import SectionDispatcher, create_environment
from sdui_pages.sections import SECTION_REGISTRY

if typ.TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import Environment

SAMPLE_CONFIG = dedent(
    """
    site:
      name: Acme
      description: Tools for builders
      theme:
        primary: "#112233"
      navigation:
        logo: Acme
        links:
          - text: Pricing
            href: /pricing
          - text: Company
            href: /about
            children:
              - text: Team
                href: /about#team
        cta:
          text: Sign up
          href: /signup
      footer:
        tagline: Build faster
        sections:
          - title: Product
            links:
              - text: Pricing
                href: /pricing
        copyright: "© 2026 Acme"
    pages:
      - slug: /
        title: Home
        sections:
          - type: hero
            id: top
            props:
              title: Ship pages from YAML
              buttons:
                - text: Get started
                  href: /signup
                - href: /missing-text
          - type: bogus-type
            props:
              title: never shown
          - type: faq
            props:
              items:
                - question: Is it fast?
                  answer: Very.
      - slug: pricing
        title: Pricing
        sections:
          - type: pricing
            props:
              plans:
                - name: Starter
                  price: $9
                  features: [One site, "Email support"]
      - slug: /empty
        title: Empty
    """
).lstrip()


@pytest.fixture(scope="session")
def jinja_env() -> Environment:
    """Return the packaged template environment."""
    return create_environment()


@pytest.fixture
def dispatcher(jinja_env: Environment) -> SectionDispatcher:
    """Return a development-mode dispatcher over the default registry."""
    return SectionDispatcher(SECTION_REGISTRY, jinja_env)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Write the sample YAML configuration and return its directory."""
    directory = tmp_path / "config"
    directory.mkdir()
    (directory / "config.yaml").write_text(SAMPLE_CONFIG, encoding="utf-8")
    return directory
