"""
In-memory presentation state for the locations list.

A single snapshot is owned by the presenter and replaced wholesale on each
refresh; display surfaces only read it.
"""

from .models import PresentationState

__all__ = ["PresentationState"]
