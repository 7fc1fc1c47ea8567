"""Depth-first hierarchy search.

Results come back in pre-order document order: a node is tested before its
children, children left to right, roots in the order given. Traversal stops
as soon as ``max_results`` matches have been collected.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable

from finder.models import NoSuchElementError, Node
from finder.search.conditions import FilterCondition

UNBOUNDED = sys.maxsize


def search_hierarchy(
    roots: Iterable[Node],
    predicate: Callable[[Node], bool],
    max_results: int = UNBOUNDED,
    max_depth: int | None = None,
) -> list[Node]:
    """Collect up to max_results nodes matching predicate.

    Args:
        roots: Top-level nodes, each tested before its own subtree
        predicate: Match test, called at most once per visited node
        max_results: Stop once this many matches are collected
        max_depth: Skip nodes deeper than this (roots are depth 0).
            Needed only for trees that may be cyclic or unbounded.

    Returns:
        Matching nodes in pre-order (empty if none match)
    """
    found: list[Node] = []
    if max_results <= 0:
        return found

    # Explicit stack so deep hierarchies don't hit the recursion limit.
    # Pushed in reverse so the leftmost node is popped first.
    stack: list[tuple[Node, int]] = [(root, 0) for root in reversed(list(roots))]
    while stack:
        node, depth = stack.pop()
        if predicate(node):
            found.append(node)
            if len(found) >= max_results:
                break
        if max_depth is None or depth < max_depth:
            children = node.get_children()
            stack.extend((child, depth + 1) for child in reversed(list(children)))
    return found


def find_first(roots: Iterable[Node], condition: FilterCondition) -> Node:
    """First match in document order, or NoSuchElementError.

    The error carries the condition's not-found message.
    """
    result = search_hierarchy(roots, condition, max_results=1)
    if not result:
        raise NoSuchElementError(condition.not_found_message or "Could not find element")
    return result[0]
