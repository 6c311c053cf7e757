"""Tests for the static-pages CLI commands."""

from __future__ import annotations

import contextlib
import typing as typ

import pytest

from static_pages import cli

if typ.TYPE_CHECKING:
    from pathlib import Path

CONFIG = """
defaults:
  site_name: CLI Site
  base_url: https://cli.example.test
pages:
  welcome:
    title: Welcome
    status: published
    sort_order: 1
    content: "<h2>Hi</h2><p>Hello there</p>"
  next-steps:
    status: published
    sort_order: 2
    content: "<p>Then this</p>"
  wip:
    content: "<p>Not yet</p>"
"""


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Write a small site configuration and return its path."""
    path = tmp_path / "pages.yaml"
    path.write_text(CONFIG.lstrip(), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Leave the root logger alone while the CLI runs."""
    monkeypatch.setattr(cli, "configure", lambda **_: None)


def test_render_writes_all_published_pages(
    config_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Without --page every published page is written."""
    output_dir = tmp_path / "out"
    cli.render(config=config_path, output_dir=output_dir)

    assert sorted(path.name for path in output_dir.iterdir()) == [
        "next-steps.html",
        "welcome.html",
    ]
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert all(line.startswith("wrote ") for line in out)


def test_render_single_page(config_path: Path, tmp_path: Path) -> None:
    """--page renders just the requested page."""
    output_dir = tmp_path / "single"
    cli.render(page="welcome", config=config_path, output_dir=output_dir)

    html = (output_dir / "welcome.html").read_text(encoding="utf-8")
    assert 'id="hi-0"' in html
    assert not (output_dir / "next-steps.html").exists()


def test_render_unpublished_page_exits(
    config_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A draft page is reported as not found with exit status 1."""
    with pytest.raises(SystemExit) as excinfo:
        cli.render(page="wip", config=config_path, output_dir=tmp_path / "x")

    assert excinfo.value.code == 1
    assert capsys.readouterr().err.strip() == "wip: Page not found"


def test_render_missing_config_raises(tmp_path: Path) -> None:
    """A missing configuration file surfaces as FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="not found"):
        cli.render(config=tmp_path / "absent.yaml")


def test_slugify_prints_slug(capsys: pytest.CaptureFixture[str]) -> None:
    """The slugify command prints the normalised slug."""
    cli.slugify("¿Cómo funciona?")
    assert capsys.readouterr().out == "como-funciona\n"


def test_app_dispatches_slugify(capsys: pytest.CaptureFixture[str]) -> None:
    """The Cyclopts app routes the slugify subcommand."""
    with contextlib.suppress(SystemExit):
        cli.app(["slugify", "Hello World"])
    assert capsys.readouterr().out.strip() == "hello-world"
