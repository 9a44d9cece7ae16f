"""Offline extraction with trafilatura, no external service needed."""

from __future__ import annotations

from typing import Optional

import trafilatura
from bs4 import BeautifulSoup


def _bs4_fallback(html: str) -> str:
    """Extract readable text using BeautifulSoup ``<main>``/``<article>`` heuristics."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "nav", "footer", "header"]):
        tag.decompose()
    container = soup.find("main") or soup.find("article") or soup.body
    if container is None:
        return soup.get_text(separator=" ", strip=True)
    return container.get_text(separator=" ", strip=True)


def extract_locally(html: str, url: Optional[str] = None) -> str:
    """Return the main readable text of *html*.

    Tries ``trafilatura`` first and falls back to a BeautifulSoup heuristic
    when it returns nothing (minimal or unusual pages).
    """
    text: str | None = trafilatura.extract(
        html,
        url=url,
        include_links=False,
        include_images=False,
        include_tables=True,
        no_fallback=False,
    )
    if not text:
        text = _bs4_fallback(html)
    return text or ""
