"""Tests for depth-first hierarchy search."""

from __future__ import annotations

import pytest

from finder.models import ElementNode, NoSuchElementError
from finder.search.conditions import by_partial_text, by_text
from finder.search.traversal import find_first, search_hierarchy


def _node(name: str, *children: ElementNode, **kwargs) -> ElementNode:
    return ElementNode(text=name, children=list(children), **kwargs)


def _texts(nodes) -> list[str]:
    return [n.text for n in nodes]


class _CountingPredicate:
    def __init__(self, predicate):
        self.predicate = predicate
        self.visited: list[str] = []

    def __call__(self, node):
        self.visited.append(node.text)
        return self.predicate(node)


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestPreOrder:
    def test_descendant_before_later_sibling(self):
        """A1 is visited before B, so a single-result search returns A1."""
        root = _node("root", _node("A", _node("A1")), _node("B"))
        result = search_hierarchy(root.get_children(), lambda n: n.text in ("A1", "B"), max_results=1)
        assert _texts(result) == ["A1"]

    def test_all_matches_in_document_order(self):
        root = _node(
            "root",
            _node("x1", _node("x2", _node("x3")), _node("x4")),
            _node("x5", _node("x6")),
        )
        result = search_hierarchy(root.get_children(), lambda n: True)
        assert _texts(result) == ["x1", "x2", "x3", "x4", "x5", "x6"]

    def test_parent_before_children(self):
        tree = _node("match", _node("match"))
        result = search_hierarchy([tree], lambda n: n.text == "match")
        assert result[0] is tree
        assert result[1] is tree.children[0]

    def test_roots_in_given_order(self):
        first, second = _node("w1", _node("a")), _node("w2", _node("a"))
        result = search_hierarchy([first, second], lambda n: n.text == "a")
        assert result == [first.children[0], second.children[0]]


# ---------------------------------------------------------------------------
# Bounding
# ---------------------------------------------------------------------------


class TestBounded:
    def test_stops_after_max_results(self):
        root = _node("root", *[_node(f"n{i}") for i in range(100)])
        predicate = _CountingPredicate(lambda n: True)
        result = search_hierarchy(root.get_children(), predicate, max_results=3)
        assert _texts(result) == ["n0", "n1", "n2"]
        assert predicate.visited == ["n0", "n1", "n2"]

    def test_does_not_visit_children_after_cap(self):
        root = _node("root", _node("hit", _node("child")), _node("later"))
        predicate = _CountingPredicate(lambda n: n.text == "hit")
        search_hierarchy(root.get_children(), predicate, max_results=1)
        assert predicate.visited == ["hit"]

    def test_stops_across_roots(self):
        roots = [_node("w1", _node("a")), _node("w2", _node("a"))]
        predicate = _CountingPredicate(lambda n: n.text == "a")
        result = search_hierarchy(roots, predicate, max_results=1)
        assert result == [roots[0].children[0]]
        assert predicate.visited == ["w1", "a"]

    def test_max_results_zero(self):
        predicate = _CountingPredicate(lambda n: True)
        assert search_hierarchy([_node("a")], predicate, max_results=0) == []
        assert predicate.visited == []

    def test_unbounded_by_default(self):
        roots = [_node(f"n{i}") for i in range(500)]
        assert len(search_hierarchy(roots, lambda n: True)) == 500


# ---------------------------------------------------------------------------
# Edge cases
# ---------------------------------------------------------------------------


class TestEdgeCases:
    def test_empty_roots(self):
        assert search_hierarchy([], lambda n: True) == []

    def test_leaf_root(self):
        leaf = _node("leaf")
        assert search_hierarchy([leaf], lambda n: True) == [leaf]

    def test_non_enumerable_node_hides_children(self):
        menu = _node("menu", _node("item"), enumerable=False)
        result = search_hierarchy([menu], lambda n: True)
        assert result == [menu]

    def test_max_depth(self):
        tree = _node("d0", _node("d1", _node("d2", _node("d3"))))
        result = search_hierarchy([tree], lambda n: True, max_depth=1)
        assert _texts(result) == ["d0", "d1"]

    def test_max_depth_zero_only_roots(self):
        tree = _node("d0", _node("d1"))
        assert _texts(search_hierarchy([tree], lambda n: True, max_depth=0)) == ["d0"]

    def test_accepts_any_iterable(self):
        roots = (n for n in [_node("a"), _node("b")])
        assert _texts(search_hierarchy(roots, lambda n: True)) == ["a", "b"]


# ---------------------------------------------------------------------------
# find_first
# ---------------------------------------------------------------------------


class TestFindFirst:
    def test_returns_first_match(self):
        root = _node("root", _node("Sign in"), _node("Sign in"))
        assert find_first(root.get_children(), by_text("Sign in")) is root.children[0]

    def test_raises_with_condition_message(self):
        with pytest.raises(NoSuchElementError) as exc_info:
            find_first([_node("a")], by_partial_text("zzz"))
        assert exc_info.value.message == "Could not find element containing text: 'zzz'"


# ---------------------------------------------------------------------------
# Deep hierarchies
# ---------------------------------------------------------------------------


class _Link:
    """Bare node without a model behind it."""

    def __init__(self, depth: int, child: _Link | None = None) -> None:
        self.numeric_id = depth
        self.literal_id = None
        self.text = None
        self._children = [child] if child is not None else []

    def get_children(self):
        return self._children


def _chain(length: int) -> _Link:
    node = None
    for depth in reversed(range(length)):
        node = _Link(depth, node)
    return node


class TestDeepTrees:
    def test_chain_deeper_than_recursion_limit(self):
        root = _chain(5000)
        assert search_hierarchy([root], lambda n: False) == []

    def test_deepest_node_found(self):
        root = _chain(5000)
        result = search_hierarchy([root], lambda n: n.numeric_id == 4999)
        assert [n.numeric_id for n in result] == [4999]

    def test_deep_chain_in_order(self):
        root = _chain(5000)
        result = search_hierarchy([root], lambda n: n.numeric_id % 1000 == 0, max_results=3)
        assert [n.numeric_id for n in result] == [0, 1000, 2000]

    def test_deep_chain_with_max_depth(self):
        result = search_hierarchy([_chain(5000)], lambda n: True, max_depth=9)
        assert len(result) == 10

    def test_element_node_lookup_on_deep_chain(self):
        node = ElementNode(numeric_id=4999)
        for depth in reversed(range(4999)):
            node = ElementNode(numeric_id=depth, children=[node])
        assert node.find_by_numeric_id(4999).numeric_id == 4999
        assert node.find_by_numeric_id(-1) is None

    def test_element_node_lookup_is_pre_order(self):
        first = ElementNode(numeric_id=3, text="first")
        root = ElementNode(
            children=[ElementNode(children=[first]), ElementNode(numeric_id=3, text="second")],
        )
        assert root.find_by_numeric_id(3) is first
