from __future__ import annotations

from pydantic import BaseModel, StrictStr


class Location(BaseModel):
    """One remote location record. All three fields are required strings."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: StrictStr
    description: StrictStr
    location: StrictStr


__all__ = ["Location"]
