"""Mock providers for testing."""

from .terminal import MOCK_SCREEN_WIDTH, MockTerminalProvider
from .container import build_test_container

__all__ = [
    "MOCK_SCREEN_WIDTH",
    "MockTerminalProvider",
    "build_test_container",
]
