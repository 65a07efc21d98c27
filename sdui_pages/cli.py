"""Cyclopts CLI entrypoint for building and inspecting config-driven sites.

The ``sdui`` console script defined here renders static HTML pages from
``config/config.yaml``, validates section entries against the section
registry, lists the registered section types, and reports whether a
configuration file is present. Typical usage involves running
``sdui validate`` while editing the config and ``sdui generate`` in CI.

Examples
--------
Generate every configured page:

>>> from sdui_pages.cli import main
>>> main()  # doctest: +SKIP

Render only the pricing page into a custom directory:

>>> from sdui_pages.cli import app
>>> app.run(
...     ["generate", "--page", "/pricing", "--output-dir", "dist"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_DIR, DEFAULT_OUTPUT_DIR, DEVELOPMENT, PRODUCTION
from .config import check_config_exists, load_config, normalize_slug
from .devtools import (
    create_config_health_report,
    generate_registry_docs,
    registry_summary,
    validate_page_config,
)
from .page_builder import PageBuilder
from .sections import SECTION_REGISTRY

if typ.TYPE_CHECKING:
    from .config import ConfigDocument, PageConfig

app = App(name="sdui", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

ConfigDirOption = typ.Annotated[
    Path, Parameter(help="Directory holding config.yaml", env_var="INPUT_CONFIG_DIR")
]
PageOption = typ.Annotated[
    str | None, Parameter(help="Page slug, e.g. / or /pricing", env_var="INPUT_PAGE")
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _select_pages(document: ConfigDocument, page: str | None) -> list[PageConfig]:
    """Return the single requested page, or every page when ``page`` is None."""
    if page is None:
        return list(document.pages)
    return [document.require_page(normalize_slug(page) or "/")]


@app.command(help="Render configured pages to static HTML.")
def generate(
    *,
    page: PageOption = None,
    config_dir: ConfigDirOption = Path(DEFAULT_CONFIG_DIR),
    output_dir: typ.Annotated[
        Path, Parameter(help="Folder for generated HTML", env_var="INPUT_OUTPUT_DIR")
    ] = Path(DEFAULT_OUTPUT_DIR),
    environment: typ.Annotated[
        str,
        Parameter(
            help="Runtime environment; 'production' silences diagnostics",
            env_var="INPUT_ENVIRONMENT",
        ),
    ] = DEVELOPMENT,
) -> None:
    """Render every page, or the page at ``page``, into ``output_dir``.

    Parameters
    ----------
    page : str or None, optional
        Slug of a single page to render. When ``None`` (default) every page
        in the configuration is rendered.
    config_dir : Path, optional
        Directory searched for ``config.yaml``, ``config.yml``, then
        ``config.json`` (overridable via ``INPUT_CONFIG_DIR``).
    output_dir : Path, optional
        Root folder for the generated ``index.html`` files.
    environment : str, optional
        ``production`` suppresses skipped-section diagnostics.

    Returns
    -------
    None
        Writes HTML files and prints each written path. When no usable
        configuration exists the skeleton page is written instead.

    Raises
    ------
    UnknownPageError
        If ``page`` names a slug that is not configured.
    """
    document = load_config(config_dir)
    builder = PageBuilder(
        document, output_dir=output_dir, production=environment == PRODUCTION
    )
    for path in builder.run(page if document else None):
        print(f"wrote {_format_path(path)}")


@app.command(help="Validate page sections against the section registry.")
def validate(
    *,
    page: PageOption = None,
    config_dir: ConfigDirOption = Path(DEFAULT_CONFIG_DIR),
    report: typ.Annotated[
        bool, Parameter(help="Print the markdown health report instead of JSON")
    ] = False,
) -> None:
    """Print validation results and exit with status 1 when any are invalid.

    Parameters
    ----------
    page : str or None, optional
        Slug of a single page to validate; all pages when ``None``.
    config_dir : Path, optional
        Directory holding the configuration document.
    report : bool, optional
        Print a markdown health report per page instead of the JSON report.
    """
    document = load_config(config_dir)
    if document is None:
        print(f"No usable configuration found in {_format_path(config_dir)}")
        sys.exit(1)

    results: dict[str, typ.Any] = {}
    all_valid = True
    for page_config in _select_pages(document, page):
        validation = validate_page_config(page_config.sections, SECTION_REGISTRY)
        all_valid = all_valid and validation.valid
        if report:
            print(f"<!-- page: {page_config.slug} -->")
            print(create_config_health_report(page_config.sections, SECTION_REGISTRY))
        else:
            results[page_config.slug] = validation.to_dict()
    if not report:
        print(json.dumps(results, indent=2))
    if not all_valid:
        sys.exit(1)


@app.command(help="List the registered section types.")
def registry(
    *,
    markdown: typ.Annotated[
        bool, Parameter(help="Print markdown documentation instead of a summary")
    ] = False,
) -> None:
    """Print the registered section types grouped by category."""
    if markdown:
        print(generate_registry_docs(SECTION_REGISTRY))
        return
    summary = registry_summary(SECTION_REGISTRY)
    print(f"{summary['total']} section types registered")
    for category, entries in summary["by_category"].items():
        print(f"{category}:")
        for entry in entries:
            print(f"  {entry['type']:<14} {entry['display_name']}")


@app.command(help="Report whether a configuration file exists.")
def check(*, config_dir: ConfigDirOption = Path(DEFAULT_CONFIG_DIR)) -> None:
    """Print existence, format, and modification time of the config file."""
    status = check_config_exists(config_dir)
    print(f"exists: {'yes' if status.exists else 'no'}")
    if status.exists:
        modified = dt.datetime.fromtimestamp(status.mtime, dt.UTC)
        print(f"format: {status.format}")
        print(f"modified: {modified.isoformat(timespec='seconds')}")


@app.meta.default
def launcher(
    *tokens: typ.Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    verbose: typ.Annotated[
        bool, Parameter(help="Log debug output", negative=())
    ] = False,
) -> None:
    """Configure logging before dispatching to the requested subcommand."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT
    )
    app(tokens)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``sdui`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app.meta()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
