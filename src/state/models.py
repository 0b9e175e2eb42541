from __future__ import annotations

from typing import Iterable, Tuple

from pydantic import BaseModel, Field

from common.models import Location


class PresentationState(BaseModel):
    """
    Snapshot of the locations currently shown by the display surface.

    Fields
    - items: decoded locations in source order.
    - version: bumped by one on every replacement; 0 means never refreshed.

    Notes
    - Snapshots are immutable. The presenter replaces the whole snapshot on
      each refresh, so a reader holding one never sees a partial update.
    - Lives in memory only; nothing is persisted.
    """

    model_config = {"frozen": True}

    items: Tuple[Location, ...] = Field(default_factory=tuple)
    version: int = Field(default=0, ge=0)

    @classmethod
    def empty(cls) -> "PresentationState":
        """Initial state before any refresh."""
        return cls()

    def replaced(self, items: Iterable[Location]) -> "PresentationState":
        return PresentationState(items=tuple(items), version=self.version + 1)
