"""Domain layer DI providers."""

from dishka import Scope, provide

from hnview.domain.service import CommentTreeService
from hnview.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    The comment tree service is stateless, so one instance serves the
    whole application.
    """

    scope = Scope.APP

    @provide
    def get_comment_tree_service(self) -> CommentTreeService:
        """Provide comment tree rendering domain service."""
        return CommentTreeService()
