"""Rule-based cleanup of text pulled out of HTML.

``normalize`` runs an ordered pipeline of pure ``str -> str`` steps.  Order
matters: each step sees the output of the previous one, e.g. entities are
decoded before URLs are stripped, and whitespace is collapsed last so that
every removal upstream leaves no gaps behind.

Pipeline
--------
1.  ``decode_entities``           ``&amp;`` ``&lt;`` ``&gt;`` ``&quot;`` ``&#39;`` ``&nbsp;``
2.  ``normalize_typography``      curly quote, dashes, ellipsis glyph, ZWSP, NBSP
3.  ``strip_contacts``            emails, URLs, ``@handles``, ``#hashtags``
4.  ``strip_phone_numbers``       North-American phone numbers
5.  ``strip_placeholders``        "enter email", "your name", ...
6.  ``collapse_ellipses``         ``.....`` -> ``...``
7.  ``strip_control_chars``       ASCII control characters
8.  ``collapse_paragraph_breaks`` 2+ newlines -> exactly two
9.  ``strip_boilerplate``         "privacy policy", "read more", ...
10. ``collapse_whitespace``       single spaces, trimmed
"""

from __future__ import annotations

import re
from typing import Callable, List, Tuple

# ---------------------------------------------------------------------------
# Rule tables
# ---------------------------------------------------------------------------

# Applied sequentially: "&amp;lt;" ends up as "<".
_ENTITIES: List[Tuple[str, str]] = [
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&nbsp;", " "),
]

_TYPOGRAPHY: List[Tuple[str, str]] = [
    ("”", '"'),  # right double quote
    ("–", "-"),  # en dash
    ("—", "-"),  # em dash
    ("…", "..."),
    ("\u200b", ""),  # zero-width space
    ("\xa0", " "),
]

_CONTACT_PATTERNS = [
    re.compile(r"\S+@\S+\.\S+"),
    re.compile(r"https?://\S+"),
    re.compile(r"www\.\S+"),
    re.compile(r"@\w+", re.ASCII),
    re.compile(r"#\w+", re.ASCII),
]

_PHONE_RE = re.compile(r"\+?1?[-.\s]?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}", re.ASCII)

_PLACEHOLDER_RE = re.compile(
    r"(?:enter|your|type)\s+(?:email|name|address|phone|message|here)",
    re.IGNORECASE,
)

_ELLIPSIS_RE = re.compile(r"\.{3,}")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
_PARAGRAPH_RE = re.compile(r"\n{2,}")
_WHITESPACE_RE = re.compile(r"\s+")

BOILERPLATE_PHRASES: List[str] = [
    "all rights reserved",
    "terms and conditions",
    "privacy policy",
    "cookie policy",
    "copyright ©",
    "powered by",
    "subscribe to our newsletter",
    "subscribe now",
    "sign up for",
    "follow us on",
    "contact us",
    "sitemap",
    "back to top",
    "read more",
    "click here",
    "learn more",
    "cookies are used",
    "we use cookies",
]

# Substring match, so "We read more into it" loses "read more" too.
_BOILERPLATE_RES = [re.compile(re.escape(p), re.IGNORECASE) for p in BOILERPLATE_PHRASES]


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------

def decode_entities(text: str) -> str:
    """Decode the handful of HTML entities that survive DOM text extraction."""
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def normalize_typography(text: str) -> str:
    for old, new in _TYPOGRAPHY:
        text = text.replace(old, new)
    return text


def strip_contacts(text: str) -> str:
    """Remove email addresses, URLs, social handles and hashtags."""
    for pattern in _CONTACT_PATTERNS:
        text = pattern.sub("", text)
    return text


def strip_phone_numbers(text: str) -> str:
    return _PHONE_RE.sub("", text)


def strip_placeholders(text: str) -> str:
    """Remove form placeholder phrases such as ``"Enter email"``."""
    return _PLACEHOLDER_RE.sub("", text)


def collapse_ellipses(text: str) -> str:
    return _ELLIPSIS_RE.sub("...", text)


def strip_control_chars(text: str) -> str:
    return _CONTROL_RE.sub("", text)


def collapse_paragraph_breaks(text: str) -> str:
    return _PARAGRAPH_RE.sub("\n\n", text)


def strip_boilerplate(text: str) -> str:
    """Remove every occurrence of :data:`BOILERPLATE_PHRASES`, case-insensitively."""
    for pattern in _BOILERPLATE_RES:
        text = pattern.sub("", text)
    return text


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


RULES: List[Callable[[str], str]] = [
    decode_entities,
    normalize_typography,
    strip_contacts,
    strip_phone_numbers,
    strip_placeholders,
    collapse_ellipses,
    strip_control_chars,
    collapse_paragraph_breaks,
    strip_boilerplate,
    collapse_whitespace,
]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def normalize(text: str) -> str:
    """Return *text* cleaned by every step of :data:`RULES`, in order."""
    for rule in RULES:
        text = rule(text)
    return text
