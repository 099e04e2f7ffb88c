"""Terminal infrastructure providers."""

from dishka import Scope, provide

from hnview.adapter.terminal import RealTerminalSize, TerminalSize
from hnview.config import Settings
from hnview.util.di.base import ProviderBase


class TerminalProvider(ProviderBase):
    """Terminal component base."""

    __mock_component__ = "terminal"


class ProdTerminalProvider(TerminalProvider):
    """Production terminal provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_terminal_size(self, settings: Settings) -> TerminalSize:
        """Provide terminal size adapter reading the real terminal."""
        return RealTerminalSize(
            fallback_width=settings.render.fallback_screen_width
        )
