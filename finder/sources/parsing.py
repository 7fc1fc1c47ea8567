"""Map raw hierarchy dumps (nested JSON dicts) to ElementNode trees.

Accepted keys per node:
- type        node class, defaults to "View"
- id          numeric view id (int, or a "#123" / "123" string)
- literal_id  literal id string
- text        displayed text
- enabled     bool, defaults to True
- enumerable  bool, False for nodes that cannot list their children
- children    list of nodes
"""

from __future__ import annotations

import logging
import time

from pydantic import ValidationError

from finder.models import ElementNode, TreeSourceError

logger = logging.getLogger("element-finder.sources")


def _numeric_id(raw: object) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw[1:] if raw.startswith("#") else raw
        try:
            return int(text)
        except ValueError:
            return None
    return None


def _parse_node(item: dict, depth: int) -> ElementNode:
    if not isinstance(item, dict):
        raise TreeSourceError(f"Expected an object at depth {depth}, got {type(item).__name__}")

    type_val = item.get("type")
    if type_val is None or type_val == "":
        type_val = "View"

    raw_children = item.get("children")
    if raw_children is None:
        raw_children = []
    if not isinstance(raw_children, list):
        raise TreeSourceError(f"'children' of {type_val} must be a list")

    text = item.get("text")

    enabled_val = item.get("enabled")
    if enabled_val is None:
        enabled_val = True

    enumerable_val = item.get("enumerable")
    if enumerable_val is None:
        enumerable_val = True

    try:
        return ElementNode(
            type=type_val,
            numeric_id=_numeric_id(item.get("id")),
            literal_id=item.get("literal_id"),
            text=str(text) if text is not None else None,
            enabled=enabled_val,
            enumerable=enumerable_val,
            children=[_parse_node(child, depth + 1) for child in raw_children],
        )
    except ValidationError as e:
        raise TreeSourceError(f"Invalid node {type_val} at depth {depth}: {e}") from e


def parse_tree(raw: dict | list[dict]) -> list[ElementNode]:
    """Parse a dump into its list of top-level roots.

    A single object is treated as one root; a list as several (one per window).
    """
    start = time.perf_counter()
    items = raw if isinstance(raw, list) else [raw]
    roots = [_parse_node(item, 0) for item in items]
    logger.debug(
        f"[PERF] parse_tree: {len(roots)} roots in {(time.perf_counter()-start)*1000:.1f}ms"
    )
    return roots
