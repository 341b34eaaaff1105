"""Base model for users, items and comments."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen entity; changes go through model_copy(update=...)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
