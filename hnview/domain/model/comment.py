"""Comment tree entity.

A story and its discussion form one tree: the root node is the story itself
(title, url, domain, points) and every reply below it is a comment. Field
aliases match the keys of the unofficial Hacker News API feed, so decoded
feed payloads validate directly into a tree.
"""

from typing import Any

from pydantic import Field, field_validator

from hnview.domain.model.common import DomainModel


class CommentNode(DomainModel):
    """Node in a discussion tree.

    Children are kept in feed order, which is also display order.
    The tree is acyclic by construction: each node owns its children.
    """

    id: int = 0
    author: str = Field(default="", alias="user")
    title: str = ""
    body_raw: str = Field(default="", alias="content")
    time_label: str = Field(default="", alias="time_ago")
    points: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0, alias="comments_count")
    url: str = ""
    domain: str = ""
    children: list["CommentNode"] = Field(default_factory=list, alias="comments")

    @field_validator(
        "author", "title", "body_raw", "time_label", "url", "domain", mode="before"
    )
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        """Deleted comments and self posts arrive with null fields."""
        return "" if v is None else v

    @field_validator("points", "reply_count", mode="before")
    @classmethod
    def null_to_zero(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("children", mode="before")
    @classmethod
    def null_to_no_children(cls, v: Any) -> Any:
        return [] if v is None else v

    def count_replies(self) -> int:
        """Count every descendant of this node."""
        count = 0
        stack = list(self.children)
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children)
        return count
