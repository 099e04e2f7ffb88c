"""Comment use cases."""

from .render_comments import (
    RenderCommentsRequest,
    RenderCommentsResponse,
    RenderCommentsUseCase,
)

__all__ = [
    "RenderCommentsRequest",
    "RenderCommentsResponse",
    "RenderCommentsUseCase",
]
