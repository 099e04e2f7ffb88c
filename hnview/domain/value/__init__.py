"""Domain value objects."""

from hnview.domain.value.types import AuthorRole, RenderContext

__all__ = [
    "AuthorRole",
    "RenderContext",
]
