from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, Protocol, Sequence, TextIO

from common.models import Location

if TYPE_CHECKING:
    from .presenter import LocationsPresenter


EMPTY_PLACEHOLDER = "(no locations)"


class DisplaySurface(Protocol):
    """Something that re-renders when the presenter's data changes.

    Implementations pull `presenter.current_state()` on each render and must
    not mutate it.
    """

    def reload(self, presenter: "LocationsPresenter") -> None: ...


def format_location_cell(location: Location) -> str:
    """Two-line cell: name as title, then description and place as subtitle."""
    return f"{location.name}\n  {location.description} · {location.location}"


def render_table(items: Sequence[Location]) -> str:
    if not items:
        return EMPTY_PLACEHOLDER
    return "\n".join(format_location_cell(loc) for loc in items)


class ConsoleTable:
    """
    Text rendition of a table view, one cell per location.

    Each `reload` writes a full render to `out`; `renders` counts them.
    """

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out or sys.stdout
        self.renders = 0

    def reload(self, presenter: "LocationsPresenter") -> None:
        text = render_table(presenter.current_state())
        self._out.write(text + "\n")
        self._out.flush()
        self.renders += 1


__all__ = [
    "ConsoleTable",
    "DisplaySurface",
    "format_location_cell",
    "render_table",
]
