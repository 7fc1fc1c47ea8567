"""Per-scope search facade.

Single-result methods raise NoSuchElementError; multi-result methods return
a possibly-empty list. None of these retry. ``find_element`` and
``find_elements`` wrap a locator in the finder's RetryingExecutor.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from finder.models import IdKind, InvalidLocatorError, NoSuchElementError, Node
from finder.search.conditions import (
    FilterCondition,
    by_literal_id,
    by_numeric_id,
    by_partial_text,
    by_text,
)
from finder.search.identifiers import classify_id
from finder.search.scope import ElementSearchScope
from finder.search.traversal import UNBOUNDED, find_first, search_hierarchy

if TYPE_CHECKING:
    from finder.locators import Locator
    from finder.search.engine import ElementFinder

logger = logging.getLogger("element-finder.search")


def _require(using: object, what: str) -> str:
    if using is None:
        raise InvalidLocatorError(f"{what} is required")
    if not isinstance(using, str):
        raise InvalidLocatorError(f"{what} must be a string, got {type(using).__name__}")
    return using


class SearchContext:
    """Searches the descendants of one scope."""

    def __init__(self, finder: ElementFinder, scope: ElementSearchScope) -> None:
        self.finder = finder
        self.scope = scope

    # ------------------------------------------------------------------
    # Retrying entry points
    # ------------------------------------------------------------------

    def find_element(self, locator: Locator) -> Node:
        return self.finder.executor.find_one(lambda: locator.find_element(self))

    def find_elements(self, locator: Locator) -> list[Node]:
        return self.finder.executor.find_all(lambda: locator.find_elements(self))

    # ------------------------------------------------------------------
    # By id
    # ------------------------------------------------------------------

    def find_element_by_id(self, using: str) -> Node:
        using = _require(using, "Element id")
        classified = classify_id(using)

        if classified.kind == IdKind.LITERAL:
            found = self._search_by_id(using, max_results=1)
            if found:
                return found[0]
        else:
            numeric_id = self.finder.numeric_id_for(classified)
            if numeric_id is not None:
                result = self.scope.find_element_by_numeric_id(numeric_id)
                if result is not None and self.scope.is_root(result):
                    # The direct lookup includes the scope root, but a scope
                    # only searches descendants. Redo it over the children.
                    logger.debug("Id %s matched the scope root, searching children", using)
                    found = self._search_by_id(using, max_results=1)
                    result = found[0] if found else None
                if result is not None:
                    return result

        raise NoSuchElementError(f"Cannot find element with ID: {using}", locator=using)

    def find_elements_by_id(self, using: str) -> list[Node]:
        return self._search_by_id(_require(using, "Element id"), max_results=UNBOUNDED)

    def _search_by_id(self, using: str, max_results: int) -> list[Node]:
        classified = classify_id(using)

        condition: FilterCondition
        if classified.kind == IdKind.LITERAL:
            condition = by_literal_id(classified.literal)
        else:
            numeric_id = self.finder.numeric_id_for(classified)
            if numeric_id is None:
                return []
            condition = by_numeric_id(numeric_id)

        return search_hierarchy(self.scope.get_children(), condition, max_results=max_results)

    # ------------------------------------------------------------------
    # By text
    # ------------------------------------------------------------------

    def find_element_by_text(self, using: str) -> Node:
        using = _require(using, "Text")
        return self._find_first(by_text(using), using)

    def find_element_by_partial_text(self, using: str) -> Node:
        using = _require(using, "Partial text")
        return self._find_first(by_partial_text(using), using)

    def find_elements_by_text(self, using: str) -> list[Node]:
        using = _require(using, "Text")
        return search_hierarchy(self.scope.get_children(), by_text(using))

    def find_elements_by_partial_text(self, using: str) -> list[Node]:
        using = _require(using, "Partial text")
        return search_hierarchy(self.scope.get_children(), by_partial_text(using))

    def _find_first(self, condition: FilterCondition, using: str) -> Node:
        try:
            return find_first(self.scope.get_children(), condition)
        except NoSuchElementError as e:
            e.locator = using
            raise
