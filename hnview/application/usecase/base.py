"""Use case base class."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Entry point the HTTP routes and scripts call into.

    A use case resolves layout defaults and collaborators, then hands the
    tree to the domain services.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
