"""Application layer DI providers."""

from dishka import Scope, provide

from hnview.adapter.terminal import TerminalSize
from hnview.application.usecase.comment import RenderCommentsUseCase
from hnview.config import RenderSettings
from hnview.domain.service import CommentTreeService
from hnview.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_render_comments_use_case(
        self,
        comment_tree_service: CommentTreeService,
        terminal: TerminalSize,
        render_settings: RenderSettings,
    ) -> RenderCommentsUseCase:
        """Provide render comments use case."""
        return RenderCommentsUseCase(
            comment_tree_service=comment_tree_service,
            terminal=terminal,
            render_settings=render_settings,
        )
