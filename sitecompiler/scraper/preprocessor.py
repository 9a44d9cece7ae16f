"""HTML preprocessing: drop scripts and normalize visible text in place."""

from __future__ import annotations

from typing import Dict

from bs4 import BeautifulSoup, NavigableString
from bs4.element import PreformattedString, Tag

from sitecompiler.scraper.normalizer import normalize

# Elements whose text is normalized, including text inside their inline
# descendants (links, emphasis, labels).
_TEXT_TAGS = ["p", "h1", "h2", "h3", "h4", "h5", "h6", "span", "div", "li", "td", "th"]
_RAW_TEXT_TAGS = {"script", "style"}


def _text_nodes(body: Tag) -> Dict[int, NavigableString]:
    """Return every visible text node under a matched element, once each."""
    nodes: Dict[int, NavigableString] = {}
    for element in body.find_all(_TEXT_TAGS):
        for node in element.find_all(string=True):
            if isinstance(node, PreformattedString):
                continue
            if node.parent is not None and node.parent.name in _RAW_TEXT_TAGS:
                continue
            nodes.setdefault(id(node), node)
    return nodes


def _rewrite(node: NavigableString) -> None:
    """Replace *node* by its normalized text, leaving sibling tags alone.

    A node that is its parent's only child is replaced outright.  Otherwise a
    single space is kept on whichever side the original had whitespace, and a
    whitespace-only node becomes one space, so words in neighbouring tags are
    not glued together.
    """
    original = str(node)
    cleaned = normalize(original)
    lone = node.parent is None or len(node.parent.contents) == 1

    if not lone:
        if not cleaned:
            cleaned = " " if original.isspace() else ""
        else:
            if original[:1].isspace():
                cleaned = " " + cleaned
            if original[-1:].isspace():
                cleaned = cleaned + " "

    if cleaned == original:
        return
    if cleaned:
        node.replace_with(NavigableString(cleaned))
    else:
        node.extract()


def preprocess(html: str) -> str:
    """Return *html* with ``<script>`` removed and visible text normalized.

    Only text under ``<body>`` inside paragraphs, headings, spans, divs, list
    items and table cells is rewritten (see
    :func:`~sitecompiler.scraper.normalizer.normalize`).  Each text node is
    normalized on its own, so the element structure is unchanged.
    """
    soup = BeautifulSoup(html, "html.parser")

    for tag in soup.find_all("script"):
        tag.decompose()

    body = soup.body
    if body is not None:
        for node in _text_nodes(body).values():
            _rewrite(node)

    return str(soup)
