"""Domain model entities."""

from hnview.domain.model.comment import CommentNode

__all__ = [
    "CommentNode",
]
