"""ElementFinder — ties id resolution and waiting to search scopes.

Every call walks the tree as it is now. Nothing is cached between calls,
since the UI may have changed.
"""

from __future__ import annotations

import logging
import time

from finder.locators import Locator
from finder.models import ClassifiedId, IdKind, LocatorKind, Node
from finder.search.context import SearchContext
from finder.search.identifiers import IdResolver
from finder.search.scope import ElementSearchScope
from finder.wait import RetryingExecutor, Wait

logger = logging.getLogger("element-finder.search")


class ElementFinder:
    """Finds elements by id, exact text, or partial text.

    Ids come in three forms: ``$literal``, ``#123`` and a bare resource
    name resolved through ``resolver``. A view id shared by several views
    should be searched from a parent that contains only one of them, e.g.
    ``find_one("id", "ambiguous", NodeScope(parent))``.

    Nodes that cannot enumerate their children (an options menu, say) are
    opaque to traversal; search for the container first, then search
    inside it.
    """

    def __init__(self, resolver: IdResolver, wait: Wait) -> None:
        self.resolver = resolver
        self.wait = wait
        self.executor = RetryingExecutor(wait)

    def get_search_context(self, scope: ElementSearchScope) -> SearchContext:
        return SearchContext(self, scope)

    def read_id_from_resources(self, name: str) -> int | None:
        """Map a resource name (e.g. ``TextView01``) to its numeric id.

        Returns None when the name is unknown. Override to change how
        names are resolved.
        """
        return self.resolver.resolve(name)

    def numeric_id_for(self, classified: ClassifiedId) -> int | None:
        """Numeric id for a non-literal id, or None if nothing can match."""
        if classified.kind == IdKind.NUMERIC:
            return classified.numeric
        if classified.kind == IdKind.SYMBOLIC:
            return self.read_id_from_resources(classified.name)
        return None

    def find_one(self, kind: LocatorKind | str, value: str, scope: ElementSearchScope) -> Node:
        """Wait for a single element. Raises NoSuchElementError on timeout."""
        locator = Locator.from_kind(kind, value)
        start = time.perf_counter()
        logger.info(f"[PERF] find_one START: {locator}, timeout={self.wait.timeout}s")
        node = self.get_search_context(scope).find_element(locator)
        logger.info(f"[PERF] find_one MATCHED: {locator}, total={(time.perf_counter()-start)*1000:.1f}ms")
        return node

    def find_all(self, kind: LocatorKind | str, value: str, scope: ElementSearchScope) -> list[Node]:
        """Wait for at least one element. Returns [] on timeout."""
        locator = Locator.from_kind(kind, value)
        start = time.perf_counter()
        logger.info(f"[PERF] find_all START: {locator}, timeout={self.wait.timeout}s")
        nodes = self.get_search_context(scope).find_elements(locator)
        logger.info(
            f"[PERF] find_all COMPLETE: {locator}, found={len(nodes)}, "
            f"total={(time.perf_counter()-start)*1000:.1f}ms"
        )
        return nodes
