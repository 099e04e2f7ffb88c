"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        populate_by_name=True,  # Accept both feed keys and field names
    )
