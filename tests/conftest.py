from typing import Dict, Set, Tuple

import pytest

from vertex import Vertex
from add_edge import add_edge


def build_network(arcs) -> Tuple[Dict[str, Vertex], Set[Vertex]]:
    """
    arcs: [(u_name, v_name, cap), ...]  ->  (name -> Vertex, vertex set)
    """
    names: Dict[str, Vertex] = {}
    for u, v, cap in arcs:
        for name in (u, v):
            if name not in names:
                names[name] = Vertex(name)
        add_edge(names[u], names[v], cap)
    return names, set(names.values())


@pytest.fixture
def clrs_network():
    """
    CLRS figure 26.1, max flow 23.
    """
    return build_network([
        ("s", "v1", 16), ("s", "v2", 13),
        ("v2", "v1", 4), ("v1", "v3", 12),
        ("v3", "v2", 9), ("v2", "v4", 14),
        ("v4", "v3", 7), ("v3", "t", 20),
        ("v4", "t", 4),
    ])


@pytest.fixture
def unit_network():
    """
    Two disjoint unit paths plus a cross arc that needs a back arc to use.
        s -> a -> b -> t
        s -> c -> b
        a -> d -> t
    """
    return build_network([
        ("s", "a", 1), ("s", "c", 1),
        ("a", "b", 1), ("c", "b", 1),
        ("b", "t", 1), ("a", "d", 1),
        ("d", "t", 1),
    ])
