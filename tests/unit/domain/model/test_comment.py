"""Unit tests for the CommentNode entity."""

import pytest
from pydantic import ValidationError

from hnview.domain.model import CommentNode

FEED_STORY = {
    "id": 8863,
    "title": "My YC app: Dropbox - Throw away your USB drive",
    "points": 111,
    "user": "dhouston",
    "time_ago": "15 years ago",
    "comments_count": 3,
    "type": "link",
    "url": "http://www.getdropbox.com/u/2/screencast.html",
    "domain": "getdropbox.com",
    "content": "",
    "comments": [
        {
            "id": 8952,
            "user": "nickb",
            "time_ago": "15 years ago",
            "content": "<p>Congrats!",
            "comments": [
                {
                    "id": 9224,
                    "user": None,
                    "time_ago": "15 years ago",
                    "content": "[deleted]",
                    "comments": [],
                },
            ],
        },
        {
            "id": 9000,
            "user": "bob",
            "time_ago": "15 years ago",
            "content": "<p>Nice",
            "comments": None,
        },
    ],
}


class TestCommentNodeFromFeed:
    """Tests for decoding feed payloads."""

    def test_feed_keys_map_to_fields(self):
        """Feed key names should populate the model fields."""
        story = CommentNode.model_validate(FEED_STORY)

        assert story.author == "dhouston"
        assert story.time_label == "15 years ago"
        assert story.reply_count == 3
        assert story.domain == "getdropbox.com"
        assert story.children[0].body_raw == "<p>Congrats!"

    def test_children_keep_feed_order(self):
        """Replies should be in the order the feed lists them."""
        story = CommentNode.model_validate(FEED_STORY)

        assert [c.id for c in story.children] == [8952, 9000]

    def test_nulls_become_empty(self):
        """Null authors and reply lists should decode to empty values."""
        story = CommentNode.model_validate(FEED_STORY)

        assert story.children[0].children[0].author == ""
        assert story.children[1].children == []

    def test_missing_fields_default(self):
        """Comments lack story-only fields; they should default to empty."""
        node = CommentNode.model_validate({"user": "x"})

        assert node.title == ""
        assert node.points == 0
        assert node.url == ""
        assert node.children == []

    def test_negative_points_rejected(self):
        """Points cannot be negative."""
        with pytest.raises(ValidationError):
            CommentNode.model_validate({"points": -1})


class TestCommentNode:
    """Tests for CommentNode behavior."""

    def test_field_names_accepted(self):
        """Nodes should also be constructible with Python field names."""
        node = CommentNode(author="bob", body_raw="hi", time_label="now")

        assert node.author == "bob"
        assert node.body_raw == "hi"

    def test_immutable(self):
        """Nodes should be frozen."""
        node = CommentNode(author="bob")

        with pytest.raises(ValidationError):
            node.author = "mallory"

    def test_count_replies_is_recursive(self):
        """All descendants should be counted, not just direct replies."""
        story = CommentNode.model_validate(FEED_STORY)

        assert story.count_replies() == 3
        assert story.children[0].count_replies() == 1
        assert story.children[1].count_replies() == 0

    def test_count_replies_on_deep_chain(self):
        """Counting should not be bounded by the recursion limit."""
        node = CommentNode(author="leaf")
        for _ in range(2000):
            node = CommentNode(author="user", children=[node])

        assert node.count_replies() == 2000
