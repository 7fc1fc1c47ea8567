"""Search scopes: where a search starts and what counts as its root.

A scope exposes its root's children for hierarchy traversal (the root itself
is never a candidate) and a direct numeric-id lookup that may include the
root. SearchContext filters the root back out of the direct lookup.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from finder.models import Node
from finder.search.conditions import by_numeric_id
from finder.search.traversal import search_hierarchy


class ElementSearchScope(Protocol):
    def get_children(self) -> Sequence[Node]: ...

    def find_element_by_numeric_id(self, numeric_id: int) -> Node | None: ...

    def is_root(self, node: Node) -> bool: ...


def _direct_lookup(node: Node, numeric_id: int) -> Node | None:
    lookup = getattr(node, "find_by_numeric_id", None)
    if lookup is not None:
        return lookup(numeric_id)
    # Nodes without their own lookup get a pre-order walk, self included
    found = search_hierarchy([node], by_numeric_id(numeric_id), max_results=1)
    return found[0] if found else None


class NodeScope:
    """Scope anchored at a single node (searching "inside" an element)."""

    def __init__(self, root: Node) -> None:
        self.root = root

    def get_children(self) -> Sequence[Node]:
        return self.root.get_children()

    def find_element_by_numeric_id(self, numeric_id: int) -> Node | None:
        return _direct_lookup(self.root, numeric_id)

    def is_root(self, node: Node) -> bool:
        # Identity, not equality: distinct nodes may have identical fields
        return node is self.root

    def __repr__(self) -> str:
        return f"NodeScope({self.root!r})"


class RootScope:
    """Scope over every top-level root (window) of the UI.

    ``roots`` is called on every access so each search attempt sees the
    current tree. The scope has no root node of its own.
    """

    def __init__(self, roots: Callable[[], Sequence[Node]]) -> None:
        self._roots = roots

    def get_children(self) -> Sequence[Node]:
        return self._roots()

    def find_element_by_numeric_id(self, numeric_id: int) -> Node | None:
        for root in self._roots():
            found = _direct_lookup(root, numeric_id)
            if found is not None:
                return found
        return None

    def is_root(self, node: Node) -> bool:
        return False

    @classmethod
    def of(cls, roots: Sequence[Node]) -> RootScope:
        """Scope over a fixed list of roots."""
        snapshot = list(roots)
        return cls(lambda: snapshot)
