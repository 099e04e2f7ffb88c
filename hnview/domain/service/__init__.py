"""Domain services."""

from . import header_service, layout_service, link_service, text_service
from .base import Service
from .tree_service import CommentTreeService

__all__ = [
    "CommentTreeService",
    "Service",
    "header_service",
    "layout_service",
    "link_service",
    "text_service",
]
