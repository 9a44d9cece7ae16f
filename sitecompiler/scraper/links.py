"""Same-origin link discovery."""

from __future__ import annotations

from typing import List, Tuple
from urllib.parse import urljoin, urlsplit, urlunsplit

from bs4 import BeautifulSoup

_DEFAULT_PORTS = {"http": 80, "https": 443}


def _origin(url: str) -> Tuple[str, str, int | None]:
    """Return ``(scheme, host, port)`` with the scheme's default port filled in.

    Raises:
        ValueError: If *url* has an unparsable network location.
    """
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    return scheme, parts.hostname or "", parts.port or _DEFAULT_PORTS.get(scheme)


def canonical_url(url: str) -> str:
    """Return *url* with one spelling per page.

    The scheme and host are lowercased, a default port is dropped and an
    empty http(s) path becomes ``/``, so ``https://EXAMPLE.com:443`` and
    ``https://example.com/`` compare equal.  Other URLs are returned as is.

    Raises:
        ValueError: If *url* has an unparsable network location.
    """
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if scheme not in _DEFAULT_PORTS or not parts.hostname:
        return url

    host = parts.hostname
    if ":" in host:
        host = f"[{host}]"
    if parts.port is not None and parts.port != _DEFAULT_PORTS[scheme]:
        host = f"{host}:{parts.port}"
    if parts.username is not None:
        userinfo = parts.username
        if parts.password is not None:
            userinfo = f"{userinfo}:{parts.password}"
        host = f"{userinfo}@{host}"

    return urlunsplit((scheme, host, parts.path or "/", parts.query, parts.fragment))


def extract_links(base_url: str, html: str) -> List[str]:
    """Return the unique same-origin links in *html*, in first-seen order.

    Each ``<a href>`` is resolved against *base_url* and put in
    :func:`canonical_url` form.  Any href containing a ``#`` is dropped
    outright (``/path#section`` included), as is anything resolving to a
    different scheme, host or port than *base_url*.
    """
    base_origin = _origin(base_url)
    soup = BeautifulSoup(html, "html.parser")

    seen: set[str] = set()
    links: List[str] = []
    for anchor in soup.find_all("a", href=True):
        href = anchor["href"].strip()
        if not href or "#" in href:
            continue
        try:
            url = canonical_url(urljoin(base_url, href))
            if _origin(url) != base_origin:
                continue
        except ValueError:
            # malformed host, e.g. "http://[broken"
            continue
        if url not in seen:
            seen.add(url)
            links.append(url)
    return links
