"""Sequential depth-first crawl of a site's same-origin pages.

Both entry points share one traversal, :func:`_walk`.  It is the iterative
form of::

    def visit(url):
        if url in visited: return
        visited.add(url)
        html = fetch(url)                # on failure: log, stop this branch
        on_page(url, html)
        for link in extract_links(url, html):
            if link not in visited:
                visit(link)

An explicit stack of link iterators replaces the recursion so that very deep
sites do not hit Python's recursion limit.  Each link is checked against the
visited set only when the walk reaches it, so the discovery order is the same
as the recursive version's.  URLs are compared in
:func:`~sitecompiler.scraper.links.canonical_url` form, so one page reached
under two spellings (``EXAMPLE.com``, ``:443``) is fetched once.

There is no depth or page-count limit: a site exposing an unbounded number of
distinct same-origin URLs will not terminate.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List, Optional

import httpx

from sitecompiler.scraper.fetcher import fetch_url
from sitecompiler.scraper.links import canonical_url, extract_links
from sitecompiler.scraper.models import CrawlState, RawPage
from sitecompiler.scraper.preprocessor import preprocess

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], RawPage]
PageHandler = Callable[[str, str], None]


def _walk(
    start_url: str,
    state: CrawlState,
    fetch: Fetcher,
    on_page: Optional[PageHandler] = None,
) -> None:
    try:
        start_url = canonical_url(start_url)
    except ValueError:
        # left as given; the fetch below fails and is logged
        pass
    stack: List[Iterator[str]] = [iter([start_url])]

    while stack:
        url = next(stack[-1], None)
        if url is None:
            stack.pop()
            continue
        if not state.mark_visited(url):
            continue

        try:
            raw = fetch(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("[CRAWL] Error fetching %s: %s", url, exc)
            continue

        logger.info("[CRAWL] Downloaded: %s", url)
        if on_page is not None:
            on_page(url, raw.html)
        stack.append(iter(extract_links(url, raw.html)))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def scrape_site(
    url: str,
    state: Optional[CrawlState] = None,
    fetch: Fetcher = fetch_url,
) -> List[str]:
    """Crawl every same-origin page reachable from *url*.

    Args:
        url: Absolute URL to start from.
        state: Traversal state to continue.  A fresh one is created when
            omitted.  If *url* was already visited, nothing is fetched.
        fetch: Page fetch capability; defaults to
            :func:`~sitecompiler.scraper.fetcher.fetch_url`.

    Returns:
        Every visited URL in discovery order, including URLs whose fetch
        failed.  Fetch errors are logged, never raised.
    """
    state = state if state is not None else CrawlState()
    _walk(url, state, fetch)
    return list(state.visited)


def preprocess_pages(
    url: str,
    state: Optional[CrawlState] = None,
    fetch: Fetcher = fetch_url,
) -> Dict[str, str]:
    """Crawl like :func:`scrape_site`, keeping a cleaned copy of every page.

    Returns:
        Mapping of URL to preprocessed HTML (see
        :func:`~sitecompiler.scraper.preprocessor.preprocess`) in discovery
        order.  URLs whose fetch failed are absent.  Links are followed from
        the raw, unprocessed HTML.
    """
    state = state if state is not None else CrawlState()

    def _store(page_url: str, html: str) -> None:
        state.pages[page_url] = preprocess(html)

    _walk(url, state, fetch, on_page=_store)
    return dict(state.pages)
