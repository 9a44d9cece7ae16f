"""SiteCompiler CLI — entry-point for crawling and compiling sites.

Usage:
    python cli/main.py --help

Commands:
    crawl       → list every same-origin URL reachable from a base URL
    preprocess  → crawl and clean each page's HTML
    compile     → crawl and compile all pages into one text document
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from sitecompiler.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import hashlib
import logging
import re
from typing import Optional

import typer

from sitecompiler.config import settings

app = typer.Typer(
    name="sitecompiler",
    help="Crawl a website and compile its pages into one document.",
    no_args_is_help=True,
)

_METHODS = ("jina", "llm", "local")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging for every sub-command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _page_filename(url: str, taken: Optional[set[str]] = None) -> str:
    """Turn *url* into a flat, filesystem-safe ``.html`` file name.

    Names already in *taken* get a short hash of the URL appended, so two
    URLs flattening to the same stem (``/a/b`` and ``/a_b``) do not overwrite
    each other.  The returned name is added to *taken*.
    """
    stem = re.sub(r"^https?://", "", url)
    stem = re.sub(r"[^A-Za-z0-9._-]+", "_", stem).strip("_") or "index"
    name = f"{stem}.html"
    if taken is not None:
        if name in taken:
            digest = hashlib.sha1(url.encode("utf-8")).hexdigest()[:8]
            name = f"{stem}-{digest}.html"
        taken.add(name)
    return name


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@app.command("crawl")
def crawl(
    url: str = typer.Option(..., help="Base URL to start crawling from."),
) -> None:
    """Crawl same-origin links and print every visited URL."""
    from sitecompiler.scraper import scrape_site

    typer.echo(f"[crawl] Crawling {url!r} …")
    urls = scrape_site(url)
    for visited in urls:
        typer.echo(f"  {visited}")
    typer.echo(f"[crawl] {len(urls)} URL(s) visited.")


@app.command("preprocess")
def preprocess(
    url: str = typer.Option(..., help="Base URL to start crawling from."),
    out_dir: Optional[Path] = typer.Option(
        None, "--out-dir", help="Write each cleaned page into this directory."
    ),
) -> None:
    """Crawl and clean every page (scripts removed, text normalized)."""
    from sitecompiler.scraper import preprocess_pages

    typer.echo(f"[preprocess] Crawling {url!r} …")
    pages = preprocess_pages(url)

    taken: set[str] = set()
    if out_dir is not None:
        out_dir.mkdir(parents=True, exist_ok=True)

    for page_url, html in pages.items():
        typer.echo(f"  {page_url}  ({len(html)} chars)")
        if out_dir is not None:
            (out_dir / _page_filename(page_url, taken)).write_text(html, encoding="utf-8")

    typer.echo(f"[preprocess] {len(pages)} page(s) processed.")


@app.command("compile")
def compile_site(
    url: str = typer.Option(..., help="Base URL to start crawling from."),
    method: str = typer.Option("jina", help="Extraction method: jina | llm | local."),
    api_key: Optional[str] = typer.Option(
        None, "--api-key", help="Jina Reader API key (defaults to JINA_API_KEY)."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the compiled document to this file."
    ),
) -> None:
    """Crawl a site and compile all pages into one text document."""
    from sitecompiler.compiler import (
        compile,
        compile_locally,
        compile_with_generative_model,
        write_compiled,
    )

    if method not in _METHODS:
        typer.echo(f"[compile] Unknown method {method!r}. Use: {' | '.join(_METHODS)}")
        raise typer.Exit(1)

    typer.echo(f"[compile] Compiling {url!r} (method={method!r}) …")
    if method == "jina":
        key = api_key or settings.jina_api_key
        if not key:
            typer.echo("[compile] No Jina API key. Pass --api-key or set JINA_API_KEY.")
            raise typer.Exit(1)
        text = compile(url, key)
    elif method == "llm":
        text = compile_with_generative_model(url)
    else:
        text = compile_locally(url)

    if output is not None:
        path = write_compiled(text, output)
        typer.echo(f"[compile] Wrote {len(text)} chars to {path}")
    else:
        typer.echo("")
        typer.echo(text)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
