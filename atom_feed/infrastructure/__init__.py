"""Infrastructure layer.

Serializer, document loader and logger implementations, plus the container
that wires them into an :class:`~atom_feed.application.feed.AtomFeed`.
"""

from .container import DependencyContainer, create_feed

__all__ = [
    "DependencyContainer",
    "create_feed",
]
