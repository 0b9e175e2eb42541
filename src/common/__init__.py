"""
Common building blocks for locations-feed.

Modules:
- config: FeedConfig value object and env loader
- transport: async HTTP GET transport with typed failures
- decoder: JSON parse + per-element validation into Location records
- models: Location record
- log: stdlib logging setup
"""

__all__ = [
    "config",
    "decoder",
    "log",
    "models",
    "transport",
]
