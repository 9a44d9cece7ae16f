"""Tests for the text normalizer rule pipeline.

Every step is a pure ``str -> str`` function, so each one is exercised on its
own before ``normalize`` is checked end-to-end.
"""

from __future__ import annotations

import pytest

from sitecompiler.scraper.normalizer import (
    RULES,
    collapse_ellipses,
    collapse_paragraph_breaks,
    collapse_whitespace,
    decode_entities,
    normalize,
    normalize_typography,
    strip_boilerplate,
    strip_contacts,
    strip_control_chars,
    strip_phone_numbers,
    strip_placeholders,
)


# ---------------------------------------------------------------------------
# Individual steps
# ---------------------------------------------------------------------------

class TestDecodeEntities:
    def test_decodes_basic_entities(self) -> None:
        text = "Tom &amp; Jerry &lt;3 &gt; &quot;cheese&quot; it&#39;s&nbsp;here"
        assert decode_entities(text) == 'Tom & Jerry <3 > "cheese" it\'s here'

    def test_decodes_sequentially(self) -> None:
        # &amp; goes first, so a double-encoded entity is fully decoded
        assert decode_entities("&amp;lt;b&amp;gt;") == "<b>"

    def test_leaves_other_entities(self) -> None:
        assert decode_entities("Caf&eacute;") == "Caf&eacute;"


class TestNormalizeTypography:
    def test_dashes_become_hyphens(self) -> None:
        assert normalize_typography("a–b—c") == "a-b-c"

    def test_ellipsis_glyph_expanded(self) -> None:
        assert normalize_typography("wait…") == "wait..."

    def test_right_double_quote_straightened(self) -> None:
        assert normalize_typography("say ”hi”") == 'say "hi"'

    def test_zero_width_and_nbsp(self) -> None:
        assert normalize_typography("zero\u200bwidth\xa0space") == "zerowidth space"


class TestStripContacts:
    def test_removes_email_and_urls(self) -> None:
        text = "Mail a@b.com or visit www.x.org and http://y.io/path today"
        assert collapse_whitespace(strip_contacts(text)) == "Mail or visit and today"

    def test_removes_handles_and_hashtags(self) -> None:
        assert collapse_whitespace(strip_contacts("Ping @user about #launch")) == "Ping about"


class TestStripPhoneNumbers:
    @pytest.mark.parametrize(
        "number",
        ["(555) 123-4567", "555-123-4567", "555.123.4567", "+1 555 123 4567", "5551234567"],
    )
    def test_common_formats_removed(self, number: str) -> None:
        assert collapse_whitespace(strip_phone_numbers(f"Call {number} now")) == "Call now"

    def test_short_numbers_kept(self) -> None:
        assert strip_phone_numbers("Version 12.5") == "Version 12.5"


class TestStripPlaceholders:
    def test_case_insensitive(self) -> None:
        text = "Enter Email below, YOUR   name please, type here"
        assert collapse_whitespace(strip_placeholders(text)) == "below, please,"

    def test_unrelated_words_kept(self) -> None:
        assert strip_placeholders("your account") == "your account"


class TestCollapseEllipses:
    def test_long_runs_collapse(self) -> None:
        assert collapse_ellipses("wait......") == "wait..."

    def test_two_periods_untouched(self) -> None:
        assert collapse_ellipses("a..b") == "a..b"


class TestStripControlChars:
    def test_removes_controls_keeps_tab_newline_cr(self) -> None:
        assert strip_control_chars("a\x00b\x07c\td\ne\x0bf\x0cg\rh\x7f") == "abc\td\nefg\rh"


class TestCollapseParagraphBreaks:
    def test_many_newlines_become_two(self) -> None:
        assert collapse_paragraph_breaks("a\n\n\n\nb\nc") == "a\n\nb\nc"


class TestStripBoilerplate:
    def test_removes_phrases_case_insensitively(self) -> None:
        assert collapse_whitespace(strip_boilerplate("PRIVACY POLICY | Contact Us")) == "|"

    def test_copyright_sign_phrase(self) -> None:
        assert collapse_whitespace(strip_boilerplate("Copyright © 2024 ACME")) == "2024 ACME"

    def test_matches_inside_sentences(self) -> None:
        # Substring removal also hits ordinary prose.
        assert collapse_whitespace(strip_boilerplate("We read more into it")) == "We into it"


class TestCollapseWhitespace:
    def test_single_spaces_and_trim(self) -> None:
        assert collapse_whitespace("  a \t b\n\nc  ") == "a b c"


# ---------------------------------------------------------------------------
# Full pipeline
# ---------------------------------------------------------------------------

class TestNormalize:
    def test_rule_order(self) -> None:
        assert [rule.__name__ for rule in RULES] == [
            "decode_entities",
            "normalize_typography",
            "strip_contacts",
            "strip_phone_numbers",
            "strip_placeholders",
            "collapse_ellipses",
            "strip_control_chars",
            "collapse_paragraph_breaks",
            "strip_boilerplate",
            "collapse_whitespace",
        ]

    def test_mixed_input(self) -> None:
        text = "Caf&eacute; visit https://x.co john@x.co – subscribe now   now"
        assert normalize(text) == "Caf&eacute; visit - now"

    def test_decoded_entities_feed_later_rules(self) -> None:
        assert normalize("Fish &amp; Chips… &nbsp; Privacy&nbsp;Policy") == "Fish & Chips..."

    def test_empty_string(self) -> None:
        assert normalize("") == ""

    def test_whitespace_only(self) -> None:
        assert normalize(" \n\n\t ") == ""

    @pytest.mark.parametrize(
        "text",
        [
            "Plain content with words... and numbers 42.",
            "Line one\n\n\nLine two   with  gaps",
            "  Quotes ”straightened” and dashes — gone  ",
        ],
    )
    def test_idempotent(self, text: str) -> None:
        once = normalize(text)
        assert normalize(once) == once
