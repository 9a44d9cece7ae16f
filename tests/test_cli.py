"""Tests for the sitecompiler CLI."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from cli.main import _page_filename, app

runner = CliRunner()


@pytest.fixture
def no_jina_key(monkeypatch):
    monkeypatch.setattr("cli.main.settings.jina_api_key", "")


def test_crawl_lists_urls():
    urls = ["https://example.com/", "https://example.com/a"]
    with patch("sitecompiler.scraper.scrape_site", return_value=urls) as mock_scrape:
        result = runner.invoke(app, ["crawl", "--url", "https://example.com/"])

    assert result.exit_code == 0
    mock_scrape.assert_called_once_with("https://example.com/")
    assert "https://example.com/a" in result.stdout
    assert "2 URL(s) visited" in result.stdout


def test_preprocess_writes_pages(tmp_path):
    pages = {"https://example.com/a/b": "<p>x</p>", "https://example.com/": "<p>home</p>"}
    with patch("sitecompiler.scraper.preprocess_pages", return_value=pages):
        result = runner.invoke(
            app, ["preprocess", "--url", "https://example.com/", "--out-dir", str(tmp_path)]
        )

    assert result.exit_code == 0
    assert (tmp_path / "example.com_a_b.html").read_text(encoding="utf-8") == "<p>x</p>"
    assert (tmp_path / "example.com.html").exists()
    assert "2 page(s) processed" in result.stdout


def test_compile_jina_prints_document(no_jina_key):
    with patch("sitecompiler.compiler.compile", return_value="one\n\ntwo") as mock_compile:
        result = runner.invoke(
            app, ["compile", "--url", "https://example.com/", "--api-key", "k"]
        )

    assert result.exit_code == 0
    mock_compile.assert_called_once_with("https://example.com/", "k")
    assert "one\n\ntwo" in result.stdout


def test_compile_jina_uses_configured_key(monkeypatch):
    monkeypatch.setattr("cli.main.settings.jina_api_key", "from-env")
    with patch("sitecompiler.compiler.compile", return_value="") as mock_compile:
        result = runner.invoke(app, ["compile", "--url", "https://example.com/"])

    assert result.exit_code == 0
    mock_compile.assert_called_once_with("https://example.com/", "from-env")


def test_compile_jina_without_key_exits(no_jina_key):
    with patch("sitecompiler.compiler.compile") as mock_compile:
        result = runner.invoke(app, ["compile", "--url", "https://example.com/"])

    assert result.exit_code == 1
    assert "No Jina API key" in result.stdout
    mock_compile.assert_not_called()


def test_compile_llm_writes_output(tmp_path):
    target = tmp_path / "site.md"
    with patch(
        "sitecompiler.compiler.compile_with_generative_model", return_value="# Site"
    ):
        result = runner.invoke(
            app,
            ["compile", "--url", "https://example.com/", "--method", "llm", "-o", str(target)],
        )

    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8") == "# Site"
    assert "Wrote 6 chars" in result.stdout


def test_compile_local(no_jina_key):
    with patch("sitecompiler.compiler.compile_locally", return_value="local text"):
        result = runner.invoke(
            app, ["compile", "--url", "https://example.com/", "--method", "local"]
        )

    assert result.exit_code == 0
    assert "local text" in result.stdout


def test_compile_unknown_method():
    result = runner.invoke(
        app, ["compile", "--url", "https://example.com/", "--method", "pdf"]
    )
    assert result.exit_code == 1
    assert "Unknown method" in result.stdout


def test_page_filename():
    assert _page_filename("https://example.com/docs/intro?x=1") == "example.com_docs_intro_x_1.html"
    assert _page_filename("https://") == "index.html"


def test_page_filename_collisions_get_distinct_names():
    taken: set[str] = set()
    names = [
        _page_filename("https://example.com/a/b", taken),
        _page_filename("https://example.com/a_b", taken),
        _page_filename("http://example.com/a/b", taken),
    ]
    assert names[0] == "example.com_a_b.html"
    assert len(set(names)) == 3
    assert all(name.startswith("example.com_a_b") for name in names)


def test_preprocess_colliding_pages_both_written(tmp_path):
    pages = {"https://example.com/a/b": "<p>one</p>", "https://example.com/a_b": "<p>two</p>"}
    with patch("sitecompiler.scraper.preprocess_pages", return_value=pages):
        result = runner.invoke(
            app, ["preprocess", "--url", "https://example.com/", "--out-dir", str(tmp_path)]
        )

    assert result.exit_code == 0
    written = sorted(p.read_text(encoding="utf-8") for p in tmp_path.glob("*.html"))
    assert written == ["<p>one</p>", "<p>two</p>"]
