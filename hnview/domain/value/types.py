"""Domain value objects for comment rendering.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field

from hnview.domain.value.common import ValueObject


class AuthorRole(str, Enum):
    """Role of a comment author within a thread.

    The value is the label suffix rendered after the author's name.
    """

    MODERATOR = " mod"
    ORIGINAL_POSTER = " OP"
    PARENT_POSTER = " PP"
    NONE = ""


class RenderContext(ValueObject):
    """Per-node layout parameters carried down the tree walk.

    A fresh context is derived for each level with descend(); contexts
    are never mutated.

    - level: nesting depth, 0 for top-level comments
    - indent_size: columns of indentation per level
    - comment_width: preferred width, 0 to derive it from screen_width
    - screen_width: terminal width in columns
    - original_poster: author of the story
    - parent_poster: author of the top-level comment of the current thread
    """

    level: int = Field(default=0, ge=0)
    indent_size: int = Field(ge=0)
    comment_width: int = Field(ge=0)
    screen_width: int
    original_poster: str = ""
    parent_poster: str = ""

    def descend(self, author: str) -> "RenderContext":
        """Context for the replies of a comment written by author.

        parent_poster is only set when leaving level 0, so every reply in
        a thread is compared against the thread's top-level author.
        """
        parent_poster = author if self.level == 0 else self.parent_poster
        return self.model_copy(
            update={"level": self.level + 1, "parent_poster": parent_poster}
        )
