"""Shared schema base."""

from pydantic import BaseModel, ConfigDict


class APIModel(BaseModel):
    """Lenient response model: extra keys allowed, attribute access for known ones."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)