"""HTTP page fetcher used by the crawler."""

from __future__ import annotations

import httpx

from sitecompiler.config import settings
from sitecompiler.scraper.models import RawPage


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Every request carries the configured browser ``User-Agent`` so that sites
    serving different markup to bots return their regular pages.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.RequestError: On network failures (DNS, refused connection,
            timeout).
    """
    with httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(url)
        response.raise_for_status()
        return RawPage(url=url, html=response.text, status_code=response.status_code)
