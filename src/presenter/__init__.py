"""
Presenter layer for the locations list.

Modules:
- presenter: LocationsPresenter (refresh + current state)
- display: display surface protocol and a console table renderer
"""

from .display import ConsoleTable, DisplaySurface
from .presenter import LocationsPresenter

__all__ = [
    "ConsoleTable",
    "DisplaySurface",
    "LocationsPresenter",
]
