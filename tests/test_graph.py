import pytest

from town_graph.domain.errors import InvalidInputError, UnknownTownError
from town_graph.domain.models import Town
from town_graph.graph import ANY_WEIGHT, Graph


@pytest.fixture
def towns():
    return {name: Town(name) for name in "ABCDE"}


@pytest.fixture
def graph(towns):
    g = Graph()
    for town in towns.values():
        g.add_vertex(town)
    g.add_edge(towns["A"], towns["B"], 5, "AB")
    g.add_edge(towns["B"], towns["C"], 3, "BC")
    g.add_edge(towns["A"], towns["C"], 10, "AC")
    g.add_edge(towns["C"], towns["D"], 1, "CD")
    return g


def test_add_vertex_twice_keeps_one():
    g = Graph()
    assert g.add_vertex(Town("A")) is True
    assert g.add_vertex(Town("A")) is False
    assert len(g.vertex_set()) == 1
    assert len(g) == 1


def test_add_vertex_rejects_none():
    with pytest.raises(InvalidInputError):
        Graph().add_vertex(None)


def test_contains_vertex(graph, towns):
    assert graph.contains_vertex(Town("A"))
    assert not graph.contains_vertex(Town("Z"))
    assert not graph.contains_vertex(None)
    assert towns["E"] in graph


def test_get_vertex_returns_stored_instance(graph, towns):
    assert graph.get_vertex("B") is towns["B"]
    assert graph.get_vertex("Z") is None


def test_add_edge_duplicate_is_noop(graph, towns):
    assert graph.add_edge(towns["B"], towns["A"], 99, "Other") is None

    road = graph.get_edge(towns["A"], towns["B"])
    assert road.name == "AB"
    assert road.weight == 5
    assert len(graph.edge_set()) == 4


def test_add_edge_returns_new_road(graph, towns):
    road = graph.add_edge(towns["D"], towns["E"], 2, "DE")
    assert road is not None
    assert road.name == "DE"
    assert graph.contains_edge(towns["E"], towns["D"])


def test_add_edge_requires_known_towns(graph, towns):
    with pytest.raises(UnknownTownError) as exc_info:
        graph.add_edge(towns["A"], Town("Z"), 1, "AZ")
    assert exc_info.value.town_name == "Z"


def test_add_edge_unknown_town_is_invalid_input(graph, towns):
    with pytest.raises(InvalidInputError):
        graph.add_edge(Town("Y"), towns["A"], 1, "YA")


def test_add_edge_rejects_none(graph, towns):
    with pytest.raises(InvalidInputError):
        graph.add_edge(None, towns["A"], 1, "x")


def test_add_edge_rejects_negative_weight(graph, towns):
    with pytest.raises(InvalidInputError):
        graph.add_edge(towns["D"], towns["E"], -4, "DE")
    assert not graph.contains_edge(towns["D"], towns["E"])


def test_get_edge_is_symmetric(graph, towns):
    forward = graph.get_edge(towns["A"], towns["B"])
    backward = graph.get_edge(towns["B"], towns["A"])
    assert forward is backward
    assert forward == backward


def test_get_edge_missing(graph, towns):
    assert graph.get_edge(towns["A"], towns["D"]) is None
    assert graph.get_edge(None, towns["A"]) is None
    assert not graph.contains_edge(towns["A"], None)


def test_edges_of(graph, towns):
    names = {road.name for road in graph.edges_of(towns["C"])}
    assert names == {"BC", "AC", "CD"}
    assert graph.edges_of(towns["E"]) == set()


def test_edges_of_unknown_town(graph):
    with pytest.raises(UnknownTownError):
        graph.edges_of(Town("Z"))
    with pytest.raises(InvalidInputError):
        graph.edges_of(None)


def test_remove_vertex_cascades(graph, towns):
    assert graph.remove_vertex(Town("C")) is True

    assert not graph.contains_vertex(towns["C"])
    assert all(not road.contains(towns["C"]) for road in graph.edge_set())
    assert {road.name for road in graph.edge_set()} == {"AB"}
    assert graph.edges_of(towns["D"]) == set()
    with pytest.raises(UnknownTownError):
        graph.edges_of(towns["C"])


def test_remove_vertex_missing(graph):
    assert graph.remove_vertex(Town("Z")) is False
    assert graph.remove_vertex(None) is False


def test_remove_edge_by_towns_only(graph, towns):
    removed = graph.remove_edge(towns["B"], towns["A"])
    assert removed.name == "AB"
    assert not graph.contains_edge(towns["A"], towns["B"])
    assert graph.edges_of(towns["A"]) == {graph.get_edge(towns["A"], towns["C"])}


def test_remove_edge_exact_match(graph, towns):
    assert graph.remove_edge(towns["A"], towns["C"], 10, "AC").name == "AC"
    assert graph.get_edge(towns["A"], towns["C"]) is None


def test_remove_edge_weight_mismatch(graph, towns):
    assert graph.remove_edge(towns["A"], towns["C"], 11, "AC") is None
    assert graph.contains_edge(towns["A"], towns["C"])


def test_remove_edge_name_mismatch(graph, towns):
    assert graph.remove_edge(towns["A"], towns["C"], ANY_WEIGHT, "Wrong") is None
    assert graph.contains_edge(towns["A"], towns["C"])


def test_remove_edge_any_weight_with_name(graph, towns):
    assert graph.remove_edge(towns["C"], towns["D"], ANY_WEIGHT, "CD") is not None
    assert graph.remove_edge(towns["C"], towns["D"]) is None


def test_remove_edge_rejects_none(graph, towns):
    with pytest.raises(InvalidInputError):
        graph.remove_edge(towns["A"], None)


def test_self_loop_edge(graph, towns):
    loop = graph.add_edge(towns["E"], towns["E"], 4, "Loop")
    assert loop is not None
    assert graph.edges_of(towns["E"]) == {loop}
    assert graph.remove_vertex(towns["E"])
    assert loop not in set(graph.edge_set())


def test_vertex_set_is_live_view():
    g = Graph()
    view = g.vertex_set()
    g.add_vertex(Town("A"))
    assert Town("A") in view
