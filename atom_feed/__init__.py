"""Atom 1.0 feed builder.

This package builds well-formed Atom syndication documents from structured
feed and entry metadata.

Features:
- Normalization of loosely-optional caller input into canonical records
- Deterministic Atom XML rendering with optional indentation
- JSON/TOML feed descriptions rendered from the command line
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("atom-feed")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from atom_feed.application.feed import AtomFeed
from atom_feed.domain.entities.inputs import EntryInput, FeedInput
from atom_feed.domain.exceptions import (
    AtomFeedError,
    FeedValidationError,
    InvalidContentError,
    MissingRequiredFieldError,
)
from atom_feed.infrastructure.container import create_feed

__all__ = [
    "__version__",
    # Aggregate
    "AtomFeed",
    "create_feed",
    # Input
    "FeedInput",
    "EntryInput",
    # Errors
    "AtomFeedError",
    "FeedValidationError",
    "MissingRequiredFieldError",
    "InvalidContentError",
]
