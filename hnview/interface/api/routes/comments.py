"""Comment rendering routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from hnview.application.usecase.comment import (
    RenderCommentsRequest,
    RenderCommentsUseCase,
)
from hnview.domain.error import RenderError
from hnview.domain.model import CommentNode

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


@router.post("/render", response_class=PlainTextResponse)
async def render_comments(
    story: CommentNode,
    render_comments_use_case: FromDishka[RenderCommentsUseCase],
    indent_size: int | None = Query(default=None),
    comment_width: int | None = Query(default=None),
    screen_width: int | None = Query(default=None),
) -> PlainTextResponse:
    """Render a story and its comment tree as pager text.

    The body is the story as returned by the feed API, replies nested
    under "comments". Omitted layout parameters fall back to the
    configured defaults; without screen_width the server's own terminal
    width is used.

    Args:
        story: Story tree in feed shape
        render_comments_use_case: Render comments use case from DI
        indent_size: Columns per nesting level
        comment_width: Preferred comment width, 0 to fill screen_width
        screen_width: Width of the terminal the text is meant for

    Returns:
        Rendered text with terminal escape sequences

    Raises:
        HTTPException: If layout parameters are invalid
    """
    try:
        response = await render_comments_use_case.execute(
            RenderCommentsRequest(
                story=story,
                indent_size=indent_size,
                comment_width=comment_width,
                screen_width=screen_width,
            )
        )
    except RenderError as e:
        logfire.warn("Comment render failed - invalid layout", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    return PlainTextResponse(
        response.text,
        headers={
            "X-Comment-Count": str(response.comment_count),
            "X-Render-Width": str(response.width),
        },
    )
