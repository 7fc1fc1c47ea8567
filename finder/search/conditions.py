"""Node predicates used by hierarchy searches.

A FilterCondition with a not-found message fails loudly when a
single-result search comes back empty (text searches). One without a
message signals absence with an empty result (id searches).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from finder.models import Node


@dataclass(frozen=True)
class FilterCondition:
    predicate: Callable[[Node], bool]
    not_found_message: str | None = None

    def __call__(self, node: Node) -> bool:
        return self.predicate(node)


def by_numeric_id(numeric_id: int) -> FilterCondition:
    return FilterCondition(lambda node: node.numeric_id == numeric_id)


def by_literal_id(literal_id: str) -> FilterCondition:
    # None never equals "", so '$' alone only matches empty literal ids
    return FilterCondition(lambda node: node.literal_id == literal_id)


def by_text(text: str) -> FilterCondition:
    return FilterCondition(
        lambda node: node.text == text,
        f"Could not find element with exact text: '{text}'",
    )


def by_partial_text(text: str) -> FilterCondition:
    """Case-sensitive substring match."""
    return FilterCondition(
        lambda node: node.text is not None and text in node.text,
        f"Could not find element containing text: '{text}'",
    )
