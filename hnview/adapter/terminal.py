"""Terminal size adapter.

The renderer only needs a column count; where it comes from is up to the
caller. The real adapter asks the controlling terminal, the fixed one
returns a constant for tests and for callers that render on behalf of a
remote terminal.
"""

import shutil

import logfire


class TerminalSize:
    """Base class for terminal size providers.

    Provides type distinction for dependency injection.
    """

    def width(self) -> int:
        raise NotImplementedError


class RealTerminalSize(TerminalSize):
    """Terminal size read from the process's terminal."""

    def __init__(self, fallback_width: int) -> None:
        """Initialize terminal size adapter.

        Args:
            fallback_width: Width used when stdout is not a terminal
        """
        self.fallback_width = fallback_width

    def width(self) -> int:
        columns = shutil.get_terminal_size(fallback=(self.fallback_width, 24)).columns
        logfire.debug("Terminal width queried", columns=columns)
        return columns


class FixedTerminalSize(TerminalSize):
    """Terminal size pinned to a constant width."""

    def __init__(self, width: int = 80) -> None:
        self._width = width

    def width(self) -> int:
        return self._width
