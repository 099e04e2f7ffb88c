"""Render comments use case."""

import logfire
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from hnview.adapter.terminal import TerminalSize
from hnview.application.usecase.base import BaseUseCase
from hnview.config import RenderSettings
from hnview.domain.error import RenderError
from hnview.domain.model import CommentNode
from hnview.domain.service import CommentTreeService, layout_service


class RenderCommentsRequest(BaseModel):
    """Render comments request."""

    story: CommentNode
    indent_size: int | None = None  # Falls back to RenderSettings
    comment_width: int | None = None  # Falls back to RenderSettings, 0 = terminal
    screen_width: int | None = None  # Falls back to the terminal adapter


class RenderCommentsResponse(BaseModel):
    """Render comments response."""

    text: str
    comment_count: int = Field(ge=0)
    width: int


class RenderCommentsUseCase(BaseUseCase):
    """Use case for rendering a story's comment tree for a pager."""

    def __init__(
        self,
        comment_tree_service: CommentTreeService,
        terminal: TerminalSize,
        render_settings: RenderSettings,
    ) -> None:
        """Initialize render comments use case.

        Args:
            comment_tree_service: Comment tree domain service
            terminal: Terminal size adapter
            render_settings: Default layout parameters
        """
        self.comment_tree_service = comment_tree_service
        self.terminal = terminal
        self.render_settings = render_settings

    async def execute(self, request: RenderCommentsRequest) -> RenderCommentsResponse:
        """Execute render comments flow.

        Steps:
        1. Resolve layout parameters from the request, then settings
        2. Query the terminal width unless the caller supplied one
        3. Render the tree via the comment tree service

        Args:
            request: Render comments request

        Returns:
            Rendered text, number of comments and the width of the header block

        Raises:
            RenderError: If indentation or width is negative
        """
        indent_size = (
            request.indent_size
            if request.indent_size is not None
            else self.render_settings.indent_size
        )
        comment_width = (
            request.comment_width
            if request.comment_width is not None
            else self.render_settings.comment_width
        )
        screen_width = (
            request.screen_width
            if request.screen_width is not None
            else self.terminal.width()
        )

        try:
            text = self.comment_tree_service.render(
                request.story,
                indent_size=indent_size,
                comment_width=comment_width,
                screen_width=screen_width,
            )
        except PydanticValidationError as e:
            logfire.warn(
                "Render rejected - invalid layout parameters",
                indent_size=indent_size,
                comment_width=comment_width,
                error=str(e),
            )
            raise RenderError(
                f"Invalid layout parameters: indent_size={indent_size}, "
                f"comment_width={comment_width}"
            ) from e

        return RenderCommentsResponse(
            text=text,
            comment_count=request.story.count_replies(),
            width=layout_service.adjusted_width(
                0, indent_size, comment_width, screen_width
            ),
        )
