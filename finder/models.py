"""Core data models for UI nodes, identifiers, and finder errors."""

from __future__ import annotations

import enum
from typing import Protocol, Sequence

from pydantic import BaseModel, ConfigDict, Field


class Node(Protocol):
    """Anything the search engine can walk.

    Only these attributes are read. Nodes are never mutated.
    """

    numeric_id: int | None
    literal_id: str | None
    text: str | None

    def get_children(self) -> Sequence[Node]: ...


class ElementNode(BaseModel):
    """Snapshot of a single UI node and its subtree."""

    type: str = Field(default="View", description="Node class (e.g., 'Button', 'TextView')")
    numeric_id: int | None = Field(default=None, description="Platform view id")
    literal_id: str | None = Field(default=None, description="Literal id, matched verbatim")
    text: str | None = None
    enabled: bool = True
    enumerable: bool = Field(
        default=True,
        description="False for node kinds that cannot list their children "
        "(e.g. an options menu). Direct id lookup still reaches them.",
    )
    children: list[ElementNode] = Field(default_factory=list)

    def get_children(self) -> list[ElementNode]:
        """Children visible to hierarchy traversal."""
        if not self.enumerable:
            return []
        return self.children

    def find_by_numeric_id(self, numeric_id: int) -> ElementNode | None:
        """Direct lookup over this node and every descendant, root included.

        Walks hidden children too, so it can find nodes that enumeration
        through get_children() cannot.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            if node.numeric_id == numeric_id:
                return node
            stack.extend(reversed(node.children))
        return None

    def summary(self) -> dict:
        """Flat dict for output, children replaced by a count."""
        result = self.model_dump(exclude={"children"})
        result["child_count"] = len(self.children)
        return result


class IdKind(str, enum.Enum):
    """How an id string was classified."""

    LITERAL = "literal"
    NUMERIC = "numeric"
    SYMBOLIC = "symbolic"
    INVALID = "invalid"


class ClassifiedId(BaseModel):
    """Result of classifying an id string.

    INVALID means no element can possibly match (e.g. '#abc').
    """

    model_config = ConfigDict(frozen=True)

    kind: IdKind
    literal: str | None = None
    numeric: int | None = None
    name: str | None = None


class LocatorKind(str, enum.Enum):
    """Supported ways of locating an element."""

    ID = "id"
    TEXT = "text"
    PARTIAL_TEXT = "partial_text"


class FinderError(Exception):
    """Base error for element search failures."""

    def __init__(self, message: str, locator: str | None = None) -> None:
        self.message = message
        self.locator = locator
        super().__init__(message)


class NoSuchElementError(FinderError):
    """No element matched a single-result search."""


class InvalidLocatorError(FinderError):
    """The caller passed a missing or malformed locator argument."""


class TreeSourceError(FinderError):
    """A tree snapshot could not be obtained."""
