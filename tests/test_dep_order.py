import pytest

from layoututils.dep_order import DepOrder, DepOrderer, DependencyCycleError, dep_order


GRAPH = {
    "top": ["mid1", "mid2"],
    "mid1": ["leaf"],
    "mid2": ["leaf"],
    "leaf": [],
}


class GraphOrder(DepOrder):
    def __init__(self, graph):
        self.graph = graph

    def process(self, item, orderer):
        for dep in self.graph[item]:
            orderer.push(dep)


class CustomError(Exception):
    pass


class CustomFailOrder(GraphOrder):
    def fail(self):
        raise CustomError("cycle")


def _assert_dependency_ordered(result, graph):
    pos = {item: i for i, item in enumerate(result)}
    for item, deps in graph.items():
        for dep in deps:
            assert pos[dep] < pos[item]


def test_diamond_is_ordered():
    result = DepOrder.order(GraphOrder(GRAPH), ["top"])
    assert sorted(result) == sorted(GRAPH)
    _assert_dependency_ordered(result, GRAPH)
    assert result[0] == "leaf"
    assert result[-1] == "top"


def test_each_item_once():
    result = DepOrder.order(GraphOrder(GRAPH), ["leaf", "top", "mid1", "top"])
    assert len(result) == len(set(result)) == 4
    _assert_dependency_ordered(result, GRAPH)


def test_independent_items_keep_order():
    graph = {"a": [], "b": [], "c": []}
    assert DepOrderer(GraphOrder(graph)).order(["c", "a", "b"]) == ["c", "a", "b"]


def test_empty_input():
    assert DepOrderer(GraphOrder(GRAPH)).order([]) == []


def test_cycle_raises():
    graph = {"a": ["b"], "b": ["c"], "c": ["a"]}
    with pytest.raises(DependencyCycleError):
        DepOrder.order(GraphOrder(graph), ["a"])


def test_self_cycle_raises():
    with pytest.raises(DependencyCycleError):
        DepOrderer(GraphOrder({"a": ["a"]})).order(["a"])


def test_custom_fail():
    with pytest.raises(CustomError):
        DepOrder.order(CustomFailOrder({"a": ["b"], "b": ["a"]}), ["a"])


def test_orderer_directly():
    orderer = DepOrderer(GraphOrder(GRAPH))
    orderer.push("mid1")
    result = orderer.order(["top"])
    assert result[:2] == ["leaf", "mid1"]
    _assert_dependency_ordered(result, GRAPH)


def test_dep_order_function():
    result = dep_order(["top"], lambda item: GRAPH[item])
    assert set(result) == set(GRAPH)
    _assert_dependency_ordered(result, GRAPH)


def test_dep_order_function_cycle():
    with pytest.raises(DependencyCycleError):
        dep_order([1], lambda n: [n % 3 + 1])