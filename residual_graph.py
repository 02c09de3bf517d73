from typing import Dict, Iterable, Set, Tuple

from vertex import Vertex


def build_residual(V: Iterable[Vertex]) -> Tuple[Set[Vertex], Dict[Vertex, Vertex]]:
    """
    Deep copy of V to use as the residual graph.
        Every arc u -> v (cap c) is copied as u' -> v' (cap c), and the back
        arc v' -> u' is added with capacity 0 unless the copy already has it.

    Returns (residual vertex set, original -> copy).
    """
    copies: Dict[Vertex, Vertex] = {v: Vertex(v.label) for v in V}

    for v, rv in copies.items():
        for n in v.neighs:
            rv.neighs.add(copies[n])
            rv.weights[copies[n]] = v.weights[n]

    # add any missing back arcs
    for v, rv in copies.items():
        for n in v.neighs:
            rn = copies[n]
            if rv not in rn.neighs:
                rn.neighs.add(rv)
                rn.weights[rv] = 0

    return set(copies.values()), copies
