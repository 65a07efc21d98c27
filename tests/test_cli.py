"""Tests for the ``sdui`` CLI commands invoked as plain functions."""

from __future__ import annotations

import json
import typing as typ

import pytest

from sdui_pages import cli

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_generate_writes_pages(
    config_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output_dir = tmp_path / "site"
    cli.generate(config_dir=config_dir, output_dir=output_dir)
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 3
    assert all(line.startswith("wrote ") for line in out)
    assert (output_dir / "pricing" / "index.html").is_file()


def test_generate_single_page(
    config_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output_dir = tmp_path / "site"
    cli.generate(page="/pricing", config_dir=config_dir, output_dir=output_dir)
    assert capsys.readouterr().out.strip().endswith("pricing/index.html")
    assert not (output_dir / "index.html").exists()


def test_generate_without_config_writes_skeleton(tmp_path: Path) -> None:
    output_dir = tmp_path / "site"
    cli.generate(
        config_dir=tmp_path / "missing", output_dir=output_dir, environment="production"
    )
    assert "data-skeleton" in (output_dir / "index.html").read_text(encoding="utf-8")


def test_generate_with_undecodable_config_writes_skeleton(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_bytes(b"site:\n  name: \xff\xfe bad\n")
    output_dir = tmp_path / "site"
    cli.generate(config_dir=config_dir, output_dir=output_dir)
    assert "data-skeleton" in (output_dir / "index.html").read_text(encoding="utf-8")


def test_validate_exits_nonzero_for_invalid_sections(
    config_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.validate(config_dir=config_dir)
    assert excinfo.value.code == 1
    results = json.loads(capsys.readouterr().out)
    assert list(results) == ["/", "/pricing", "/empty"]
    assert results["/"]["invalid_sections"] == 1
    assert results["/pricing"]["valid"] is True


def test_validate_single_valid_page(
    config_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.validate(page="pricing", config_dir=config_dir)
    results = json.loads(capsys.readouterr().out)
    assert results["/pricing"]["total_sections"] == 1


def test_validate_report_mode(
    config_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit):
        cli.validate(page="/", config_dir=config_dir, report=True)
    out = capsys.readouterr().out
    assert "# Config Health Report" in out
    assert "### Section 1 (bogus-type)" in out


def test_validate_without_config_fails(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.validate(config_dir=tmp_path)
    assert excinfo.value.code == 1
    assert "No usable configuration" in capsys.readouterr().out


def test_registry_summary_and_markdown(capsys: pytest.CaptureFixture[str]) -> None:
    cli.registry()
    out = capsys.readouterr().out
    assert out.startswith("13 section types registered")
    assert "social-proof:" in out
    cli.registry(markdown=True)
    assert "# Available Sections" in capsys.readouterr().out


def test_check_reports_status(
    config_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.check(config_dir=config_dir)
    out = capsys.readouterr().out
    assert "exists: yes" in out
    assert "format: yaml" in out
    cli.check(config_dir=tmp_path / "missing")
    assert capsys.readouterr().out.strip() == "exists: no"
