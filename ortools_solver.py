from typing import Iterable

import numpy as np
from ortools.graph.python import max_flow as or_max_flow

from vertex import Vertex, check_graph


def ortools_max_flow(s: Vertex, t: Vertex, V: Iterable[Vertex]) -> int:
    """
    Same value as max_flow.max_flow, computed by OR-Tools' SimpleMaxFlow.
    Used to cross-check the Edmonds-Karp engine.
    """
    V = set(V)
    check_graph(s, t, V, "ortools_max_flow")
    if s is t:
        return 0

    index = {v: i for i, v in enumerate(V)}
    arcs = [(index[u], index[v], u.weights[v]) for u in V for v in u.neighs]
    if not arcs:
        return 0

    # Instantiate a SimpleMaxFlow solver.
    smf = or_max_flow.SimpleMaxFlow()

    # Three parallel arrays: tails, heads and capacities.
    start_nodes = np.array([a[0] for a in arcs], dtype=np.int64)
    end_nodes = np.array([a[1] for a in arcs], dtype=np.int64)
    capacities = np.array([a[2] for a in arcs], dtype=np.int64)

    # Add arcs in bulk using numpy.
    smf.add_arcs_with_capacity(start_nodes, end_nodes, capacities)

    status = smf.solve(index[s], index[t])
    if status != smf.OPTIMAL:
        raise RuntimeError(f"SimpleMaxFlow failed with status {status}")

    return int(smf.optimal_flow())
