"""Compile a whole site into one text document.

Each ``compile*`` function crawls from the base URL, hands every page to one
extraction adapter, and joins the results with a blank line in crawl order:

    crawl → extract (per page) → join

A page whose extraction fails is logged and left out; the rest of the site is
still compiled.  An error escaping the crawl itself is logged and re-raised.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Tuple

from sitecompiler.extract.generative import extract_via_generative_model
from sitecompiler.extract.hosted import extract_via_hosted_api
from sitecompiler.extract.local import extract_locally
from sitecompiler.scraper.crawler import preprocess_pages, scrape_site

logger = logging.getLogger(__name__)

SEPARATOR = "\n\n"


def _extract_all(items: Iterable[Tuple[str, str]], extract: Callable[[str], str]) -> str:
    """Run *extract* over ``(url, payload)`` pairs, skipping failures."""
    parsed_texts: list[str] = []
    for url, payload in items:
        try:
            parsed_texts.append(extract(payload))
        except Exception as exc:  # noqa: BLE001
            logger.error("[COMPILE] Error parsing %s: %s", url, exc)
    return SEPARATOR.join(parsed_texts)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def compile(base_url: str, api_key: str) -> str:
    """Compile every page reachable from *base_url* through Jina Reader.

    Args:
        base_url: The URL to start crawling from.
        api_key: Jina Reader API key.

    Returns:
        The extracted page texts joined by blank lines, in crawl order.
    """
    try:
        urls = scrape_site(base_url)
        logger.info("[COMPILE] %d URL(s) found, extracting via Jina Reader …", len(urls))
        return _extract_all(
            ((url, url) for url in urls),
            lambda url: extract_via_hosted_api(url, api_key),
        )
    except Exception as exc:
        logger.error("[COMPILE] Error compiling parsed text: %s", exc)
        raise


def compile_with_generative_model(base_url: str) -> str:
    """Compile every page reachable from *base_url* by rewriting it with an LLM.

    Pages are preprocessed (scripts removed, text normalized) before being
    sent to the model.  Requires the provider's API key in the environment;
    see :mod:`sitecompiler.extract.generative`.
    """
    try:
        pages = preprocess_pages(base_url)
        logger.info("[COMPILE] %d page(s) preprocessed, rewriting via LLM …", len(pages))
        return _extract_all(pages.items(), extract_via_generative_model)
    except Exception as exc:
        logger.error("[COMPILE] Error compiling parsed text: %s", exc)
        raise


def compile_locally(base_url: str) -> str:
    """Compile every page reachable from *base_url* with trafilatura, offline."""
    try:
        pages = preprocess_pages(base_url)
        logger.info("[COMPILE] %d page(s) preprocessed, extracting locally …", len(pages))
        return _extract_all(pages.items(), extract_locally)
    except Exception as exc:
        logger.error("[COMPILE] Error compiling parsed text: %s", exc)
        raise


def write_compiled(text: str, path: str | Path) -> Path:
    """Write *text* to *path* as UTF-8, creating parent directories."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    return out
