"""Hyperlink extraction and re-linking.

Anchor tags are removed from the comment text before wrapping, leaving the
anchor text (the feed's own, possibly shortened, rendering of the URL) in
the flow. Once the text is wrapped and indented, each display string is
swapped for a terminal hyperlink whose target is the full URL.
"""

import re

from hnview.util import style

ANCHOR_PATTERN = re.compile(r'<a href="(.*?)" rel="nofollow">')

MAX_URLS_PER_COMMENT = 10
TRUNCATE_AT = 60
ELLIPSIS = "..."

HN_ITEM_URL = "https://news.ycombinator.com/item?id="


def extract_urls(text: str) -> list[str]:
    """Return anchor targets in order of appearance, at most ten."""
    urls = []
    for match in ANCHOR_PATTERN.finditer(text):
        if len(urls) == MAX_URLS_PER_COMMENT:
            break
        urls.append(match.group(1))
    return urls


def _starts(text: str, display: str) -> list[int]:
    """Every position where display begins, overlapping matches included."""
    starts = []
    position = text.find(display)
    while position != -1:
        starts.append(position)
        position = text.find(display, position + 1)
    return starts


def split_anchors(text: str) -> tuple[str, list[int | None]]:
    """Remove anchor-opening tags and locate each anchor's display string.

    Anchor text that spells out a long URL in full is replaced by its
    truncated display form, so it can be matched by apply_hyperlinks.

    Returns:
        The stripped text, and for each of the first ten anchors the
        occurrence index of its display string in that text, or None when
        the anchor text is something else ("the docs")
    """
    parts = []
    anchors: list[tuple[str, int | None]] = []
    cursor = 0
    length = 0
    for match in ANCHOR_PATTERN.finditer(text):
        before = text[cursor : match.start()]
        parts.append(before)
        length += len(before)
        cursor = match.end()
        url = match.group(1)
        display = truncate_url(url)
        if display != url and text.startswith(url, cursor):
            parts.append(display)
            cursor += len(url)
            anchors.append((display, length))
            length += len(display)
        elif display and text.startswith(display, cursor):
            anchors.append((display, length))
        else:
            anchors.append((display, None))
    parts.append(text[cursor:])
    stripped = "".join(parts)

    occurrences: list[int | None] = []
    for display, position in anchors[:MAX_URLS_PER_COMMENT]:
        if position is None:
            occurrences.append(None)
        else:
            occurrences.append(sum(1 for s in _starts(stripped, display) if s < position))
    return stripped, occurrences


def strip_anchors(text: str) -> str:
    """Remove anchor-opening tags, keeping the anchor text in place."""
    return split_anchors(text)[0]


def truncate_url(url: str) -> str:
    """Shorten a URL for display the same way the feed shortens anchor text."""
    if len(url) < TRUNCATE_AT:
        return url
    return url[:TRUNCATE_AT] + ELLIPSIS


def item_url(item_id: int) -> str:
    return HN_ITEM_URL + str(item_id)


def apply_hyperlinks(
    text: str, urls: list[str], occurrences: list[int | None] | None = None
) -> str:
    """Turn the display string of each URL into a clickable hyperlink.

    With occurrences (from split_anchors), each URL links that occurrence
    of its display string, so a plain mention of a URL elsewhere in the
    comment never takes the place of its anchor. A None entry means the
    anchor text was not the URL and nothing is linked for it.

    Without occurrences, URLs are bound in a single left-to-right pass:
    each URL links the first occurrence of its display string after the
    previous substitution. Two URLs sharing a display string therefore
    link their own anchors, and text already turned into a hyperlink is
    never scanned again.

    Wrapping only replaces spaces and adds padding, so occurrence indices
    taken before wrapping still hold after it. A URL whose display string
    is missing from the text is skipped.

    Args:
        text: Wrapped comment text
        urls: URLs in extraction order
        occurrences: Occurrence index of each URL's display string

    Returns:
        Text with one hyperlink per matched URL
    """
    if occurrences is None:
        return _link_in_order(text, urls)

    targets = []
    for url, occurrence in zip(urls, occurrences):
        display = truncate_url(url)
        if occurrence is None or not display:
            continue
        starts = _starts(text, display)
        if occurrence < len(starts):
            targets.append((starts[occurrence], url, display))

    parts = []
    cursor = 0
    for position, url, display in sorted(targets):
        if position < cursor:
            continue
        parts.append(text[cursor:position])
        parts.append(style.hyperlink(url, display))
        cursor = position + len(display)
    parts.append(text[cursor:])
    return "".join(parts)


def _link_in_order(text: str, urls: list[str]) -> str:
    parts = []
    cursor = 0
    for url in urls:
        display = truncate_url(url)
        if not display:
            continue
        position = text.find(display, cursor)
        if position == -1:
            continue
        parts.append(text[cursor:position])
        parts.append(style.hyperlink(url, display))
        cursor = position + len(display)
    parts.append(text[cursor:])
    return "".join(parts)
