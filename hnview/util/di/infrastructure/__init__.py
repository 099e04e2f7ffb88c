"""Infrastructure providers."""

# Import bases
from .terminal import TerminalProvider

# Import implementations (needed for __subclasses__())
from .terminal import ProdTerminalProvider  # noqa: F401

__all__ = [
    "ProdTerminalProvider",
    "TerminalProvider",
]
