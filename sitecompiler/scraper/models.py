"""Data models for the crawler pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class CrawlState:
    """Traversal state shared by every step of one crawl.

    ``visited`` keeps URLs in the order they were first reached; a URL is
    marked before its page is fetched and is never removed.  ``pages`` maps
    each successfully fetched URL to its cleaned HTML and is only filled by
    :func:`~sitecompiler.scraper.crawler.preprocess_pages`.
    """

    visited: List[str] = field(default_factory=list)
    pages: Dict[str, str] = field(default_factory=dict)
    _seen: Set[str] = field(default_factory=set, repr=False)

    def __contains__(self, url: str) -> bool:
        return url in self._seen

    def mark_visited(self, url: str) -> bool:
        """Record *url* as visited.  Returns ``False`` if it already was."""
        if url in self._seen:
            return False
        self._seen.add(url)
        self.visited.append(url)
        return True
