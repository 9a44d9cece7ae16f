"""Hosted extraction through the Jina Reader API."""

from __future__ import annotations

from urllib.parse import quote

import httpx

from sitecompiler.config import settings


def extract_via_hosted_api(url: str, api_key: str) -> str:
    """Return the Jina Reader rendering of *url*.

    The target URL is percent-encoded into the reader's path, e.g.
    ``https://r.jina.ai/https%3A%2F%2Fexample.com%2F``.

    Args:
        url: Absolute URL of the page to extract.
        api_key: Jina API key, sent as a bearer token.

    Raises:
        httpx.HTTPStatusError: If the reader returns a non-2xx status.
    """
    # same escaping as JavaScript's encodeURIComponent
    target = quote(url, safe="!*'()")
    api_url = f"{settings.jina_reader_url.rstrip('/')}/{target}"

    with httpx.Client(timeout=settings.request_timeout) as client:
        response = client.get(api_url, headers={"Authorization": f"Bearer {api_key}"})
        response.raise_for_status()
        return response.text
