"""Comment text transforms.

Turns the HTML fragment of a feed comment into display text: entities are
decoded, inline markup is replaced by terminal styles, footnote-style link
numbers are colorized and anchor tags are pulled out so the URLs can be
re-embedded after wrapping.
"""

from dataclasses import dataclass, field

from hnview.domain.service import link_service
from hnview.util import style

# Order matters: "&amp;" is decoded last so "&amp;gt;" becomes "&gt;", not ">"
ENTITIES: tuple[tuple[str, str], ...] = (
    ("&#x27;", "'"),
    ("&gt;", ">"),
    ("&lt;", "<"),
    ("&#x2F;", "/"),
    ("&quot;", '"'),
    ("&amp;", "&"),
)

LINK_NUMBER_COLORS = (
    style.white,
    style.red,
    style.yellow,
    style.green,
    style.blue,
    style.teal,
    style.purple,
    style.white,
    style.red,
    style.yellow,
    style.green,
)


@dataclass(frozen=True)
class ParsedComment:
    """Display text of a comment and the URLs extracted from it.

    occurrences[i] is the occurrence index of urls[i]'s display string in
    text, or None when its anchor text was not the URL.
    """

    text: str
    urls: list[str] = field(default_factory=list)
    occurrences: list[int | None] = field(default_factory=list)


def decode_entities(text: str) -> str:
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    return text


def replace_markup(text: str) -> str:
    """Replace inline HTML markup with terminal styles.

    The feed opens every comment body with <p>, which is dropped; each
    following <p> starts a new paragraph.
    """
    text = text.replace("<p>", "", 1)
    text = text.replace("<p>", style.DOUBLE_NEW_LINE)
    text = text.replace("<i>", style.ITALIC)
    text = text.replace("</i>", style.NORMAL)
    text = text.replace("</a>", "")
    text = text.replace("<pre><code>", style.DIMMED)
    text = text.replace("</code></pre>", style.NORMAL)
    return text


def _colorize(text: str) -> str:
    for number, color in enumerate(LINK_NUMBER_COLORS):
        token = str(number)
        text = text.replace(f"[{token}]", f"[{color(token)}]")
    return text


def colorize_link_numbers(text: str) -> str:
    """Color footnote references [0] to [10].

    Anchor tags, and anchor text spelling out the anchor's URL, are left
    alone so link targets and display strings stay free of escapes.
    """
    parts = []
    cursor = 0
    for match in link_service.ANCHOR_PATTERN.finditer(text):
        if match.start() < cursor:
            continue
        parts.append(_colorize(text[cursor : match.start()]))
        url = match.group(1)
        end = match.end()
        for spelled in (url, link_service.truncate_url(url)):
            if spelled and text.startswith(spelled, end):
                end += len(spelled)
                break
        parts.append(text[match.start() : end])
        cursor = end
    parts.append(_colorize(text[cursor:]))
    return "".join(parts)


def parse_comment(raw: str) -> ParsedComment:
    """Run the full transform pipeline over a raw comment body."""
    text = decode_entities(raw)
    text = replace_markup(text)
    text = colorize_link_numbers(text)
    urls = link_service.extract_urls(text)
    text, occurrences = link_service.split_anchors(text)
    return ParsedComment(text=text, urls=urls, occurrences=occurrences)
