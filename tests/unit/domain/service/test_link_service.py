"""Unit tests for hyperlink extraction and re-linking."""

import re

from hnview.domain.service.layout_service import wrap
from hnview.domain.service.link_service import (
    apply_hyperlinks,
    extract_urls,
    item_url,
    split_anchors,
    strip_anchors,
    truncate_url,
)
from hnview.util import style

LINK_RE = re.compile(r"\033\]8;;([^\033]+)\033\\\\(.*?)\033\]8;;\033\\\\")


def anchor(url: str, text: str | None = None) -> str:
    return f'<a href="{url}" rel="nofollow">{text if text is not None else url}'


def links(text: str) -> list[tuple[str, str]]:
    """(target, display) pairs in order of appearance."""
    return LINK_RE.findall(text)


class TestExtractUrls:
    """Tests for extract_urls function."""

    def test_returns_urls_in_order(self):
        """Should return anchor targets in encounter order."""
        text = anchor("https://a.com") + " and " + anchor("https://b.com")

        assert extract_urls(text) == ["https://a.com", "https://b.com"]

    def test_caps_at_ten_per_comment(self):
        """Should extract at most ten URLs."""
        text = " ".join(anchor(f"https://site{i}.com") for i in range(12))

        urls = extract_urls(text)

        assert len(urls) == 10
        assert urls[-1] == "https://site9.com"

    def test_requires_nofollow_marker(self):
        """Anchors without the nofollow relation should be ignored."""
        assert extract_urls('<a href="https://a.com">x') == []


class TestStripAnchors:
    """Tests for strip_anchors function."""

    def test_keeps_anchor_text(self):
        """Opening tags should go, anchor text should stay."""
        text = "read " + anchor("https://a.com", "this") + " now"

        assert strip_anchors(text) == "read this now"

    def test_strips_beyond_extraction_cap(self):
        """Every anchor tag should be removed, even past the cap."""
        text = " ".join(anchor(f"https://site{i}.com") for i in range(12))

        assert "<a href" not in strip_anchors(text)

    def test_shortens_spelled_out_long_url(self):
        """Full long URL as anchor text should become its display form."""
        url = "https://example.com/" + "x" * 70

        assert strip_anchors(anchor(url)) == url[:60] + "..."


class TestSplitAnchors:
    """Tests for split_anchors function."""

    def test_locates_own_occurrence(self):
        """An anchor after a plain mention of its URL should point past it."""
        text = "https://a.com then " + anchor("https://a.com")

        stripped, occurrences = split_anchors(text)

        assert stripped == "https://a.com then https://a.com"
        assert occurrences == [1]

    def test_descriptive_anchor_text_not_located(self):
        """Anchor text other than the URL should have no occurrence."""
        text = (
            "See " + anchor("https://a.com/docs", "the docs")
            + " and " + anchor("https://b.com/page")
            + ", mirrors https://a.com/docs too"
        )

        stripped, occurrences = split_anchors(text)

        assert stripped == (
            "See the docs and https://b.com/page, mirrors https://a.com/docs too"
        )
        assert occurrences == [None, 0]

    def test_spelled_out_long_url_located(self):
        """A shortened long URL should be located at its display form."""
        url = "https://example.com/" + "x" * 70

        stripped, occurrences = split_anchors(anchor(url))

        assert stripped == truncate_url(url)
        assert occurrences == [0]

    def test_capped_like_extraction(self):
        """Only the first ten anchors should be located."""
        text = " ".join(anchor(f"https://site{i}.com") for i in range(12))

        _, occurrences = split_anchors(text)

        assert occurrences == [0] * 10


class TestTruncateUrl:
    """Tests for truncate_url function."""

    def test_short_url_verbatim(self):
        """URLs under 60 characters should be shown as-is."""
        url = "https://example.com/" + "a" * 39
        assert len(url) == 59

        assert truncate_url(url) == url

    def test_url_at_threshold_truncated(self):
        """A 60 character URL should get the ellipsis."""
        url = "https://example.com/" + "a" * 40
        assert len(url) == 60

        assert truncate_url(url) == url + "..."

    def test_long_url_truncated_to_sixty(self):
        """Long URLs should keep their first 60 characters."""
        url = "https://example.com/" + "b" * 70

        result = truncate_url(url)

        assert result == url[:60] + "..."
        assert len(result) == 63


class TestApplyHyperlinks:
    """Tests for apply_hyperlinks function."""

    def test_links_display_string_to_full_url(self):
        """Truncated display text should link to the original URL."""
        url = "https://example.com/" + "c" * 70
        text = "see " + truncate_url(url) + " there"

        result = apply_hyperlinks(text, [url])

        assert links(result) == [(url, truncate_url(url))]
        assert style.strip_escapes(result) == text

    def test_identical_display_strings_bind_in_order(self):
        """URLs that truncate identically should each link their own occurrence."""
        prefix = "https://example.com/" + "d" * 50
        first, second = prefix + "/first", prefix + "/second"
        display = truncate_url(first)
        assert display == truncate_url(second)
        text = f"one {display} two {display}"

        result = apply_hyperlinks(text, [first, second])

        assert links(result) == [(first, display), (second, display)]

    def test_prefix_url_does_not_capture_longer_one(self):
        """A URL that prefixes a later one should link only its own text."""
        text = "https://a.com and https://a.com/page"

        result = apply_hyperlinks(text, ["https://a.com", "https://a.com/page"])

        assert links(result) == [
            ("https://a.com", "https://a.com"),
            ("https://a.com/page", "https://a.com/page"),
        ]

    def test_missing_display_skipped(self):
        """URLs whose text is absent should not affect the others."""
        text = "only https://b.com here"

        result = apply_hyperlinks(text, ["https://a.com", "https://b.com"])

        assert links(result) == [("https://b.com", "https://b.com")]

    def test_occurrence_binding_ignores_plain_mention(self):
        """A plain mention of a URL must not take its anchor's place."""
        text = "See the docs and https://b.com/page, mirrors https://a.com/docs too"

        result = apply_hyperlinks(
            text, ["https://a.com/docs", "https://b.com/page"], [None, 0]
        )

        assert links(result) == [("https://b.com/page", "https://b.com/page")]
        assert style.strip_escapes(result) == text

    def test_occurrence_binding_links_later_copy(self):
        """The given occurrence should be linked, not the first one."""
        text = "https://a.com then https://a.com"

        result = apply_hyperlinks(text, ["https://a.com"], [1])

        assert result == "https://a.com then " + style.hyperlink(
            "https://a.com", "https://a.com"
        )

    def test_occurrence_survives_wrapping(self):
        """Wrapping and padding should not shift occurrence indices."""
        text, occurrences = split_anchors(
            "https://a.com is mirrored at " + anchor("https://a.com") + " today"
        )
        wrapped = wrap(text, 20, pad="  | ")

        result = apply_hyperlinks(wrapped, ["https://a.com"], occurrences)

        assert result.count(style.hyperlink("https://a.com", "https://a.com")) == 1
        assert result.startswith("  | https://a.com ")

    def test_occurrence_out_of_range_skipped(self):
        """A missing occurrence should leave the text unchanged."""
        assert apply_hyperlinks("https://a.com", ["https://a.com"], [3]) == "https://a.com"

    def test_no_urls_is_noop(self):
        """Without URLs the text should be returned unchanged."""
        assert apply_hyperlinks("text", []) == "text"


def test_item_url_points_at_discussion():
    """Permalinks should point at the item page."""
    assert item_url(8863) == "https://news.ycombinator.com/item?id=8863"
