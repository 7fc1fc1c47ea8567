"""Abstract base class for UI tree sources.

A source produces a fresh snapshot of the UI hierarchy on every call.
Each source is responsible for:
1. Fetching the current hierarchy dump from wherever it lives
2. Raising TreeSourceError when the dump can't be obtained
Parsing into ElementNode roots is shared (see finder.sources.parsing).
"""

from __future__ import annotations

import abc

from finder.models import ElementNode
from finder.search.scope import RootScope
from finder.sources.parsing import parse_tree


class BaseTreeSource(abc.ABC):
    """Base class for all tree sources."""

    def __init__(self, source_id: str, source_type: str) -> None:
        self.source_id = source_id
        self.source_type = source_type
        self.snapshots_taken: int = 0

    @abc.abstractmethod
    def fetch(self) -> dict | list[dict]:
        """Fetch the raw hierarchy dump. Must raise TreeSourceError on failure."""
        ...

    def snapshot(self) -> list[ElementNode]:
        """Return the current top-level roots."""
        roots = parse_tree(self.fetch())
        self.snapshots_taken += 1
        return roots

    def scope(self) -> RootScope:
        """Scope over all roots, re-fetched on every search attempt."""
        return RootScope(self.snapshot)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source_id!r})"
