"""Test configuration and fixtures."""

import logfire

from hnview.domain.model import CommentNode
from hnview.util import style

# Local-only, silent telemetry for the test session
logfire.configure(send_to_logfire=False, console=False)


def visible(text: str) -> str:
    """Rendered text as it appears on screen, escapes removed."""
    return style.strip_escapes(text)


def make_story(replies: list[CommentNode] | None = None, **fields) -> CommentNode:
    """Helper function to build a story node with sensible defaults.

    Args:
        replies: Top-level comments
        fields: Overrides for any CommentNode field

    Returns:
        Story node
    """
    defaults = {
        "id": 1,
        "author": "alice",
        "title": "Foo",
        "time_label": "3 hours ago",
        "points": 42,
        "reply_count": 1,
        "url": "https://example.com",
        "domain": "example.com",
    }
    defaults.update(fields)
    return CommentNode(children=replies or [], **defaults)


def make_comment(author: str, body: str, *replies: CommentNode, **fields) -> CommentNode:
    """Helper function to build a comment node."""
    return CommentNode(
        author=author,
        body_raw=body,
        time_label=fields.pop("time_label", "1 hour ago"),
        children=list(replies),
        **fields,
    )
