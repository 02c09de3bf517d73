from vertex import Vertex
from add_edge import add_edge
from residual_graph import build_residual


def test_residual_is_an_independent_copy(clrs_network):
    names, V = clrs_network
    res_V, copies = build_residual(V)

    assert len(res_V) == len(V)
    assert not (res_V & V)
    assert copies[names["v1"]].label == "v1"
    assert copies[names["s"]].capacity_to(copies[names["v1"]]) == 16


def test_back_arcs_are_added_with_zero_capacity(clrs_network):
    names, V = clrs_network
    _, copies = build_residual(V)

    s, v1 = copies[names["s"]], copies[names["v1"]]
    assert s in v1.neighs
    assert v1.capacity_to(s) == 0
    # the original is untouched
    assert names["s"] not in names["v1"].neighs


def test_antiparallel_arcs_keep_both_capacities():
    u, v = Vertex("u"), Vertex("v")
    add_edge(u, v, 2)
    add_edge(v, u, 5)
    _, copies = build_residual({u, v})
    assert copies[u].capacity_to(copies[v]) == 2
    assert copies[v].capacity_to(copies[u]) == 5
