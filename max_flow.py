from typing import Dict, Iterable, Tuple

from vertex import GraphContractError, Vertex, check_graph
from residual_graph import build_residual
from get_augmenting_path import get_augmenting_path


def edmonds_karp(
    s: Vertex,
    t: Vertex,
    V: Iterable[Vertex],
) -> Tuple[int, Dict[Tuple[Vertex, Vertex], int]]:
    """
    Max-Flow by repeated shortest augmenting paths on a private residual copy.

    Parameters
    ----------
    s, t : Vertex
        Source and sink, both members of V.
    V : set of Vertex
        The whole network.  All capacities must be non-negative.
        V is never modified.

    Returns
    -------
    maxFlow, edge_flows
        edge_flows[(u, v)] = units carried by the original arc u -> v
    """
    V = set(V)
    check_graph(s, t, V, "max_flow")
    for v in V:
        for n, cap in v.weights.items():
            if n in v.neighs and cap < 0:
                raise GraphContractError(
                    f"max_flow() was passed negative capacity on {v!r} -> {n!r}."
                )

    # ---------------- build residual network ----------------
    res_V, copies = build_residual(V)
    res_s, res_t = copies[s], copies[t]

    # ---------------- Edmonds-Karp ----------------
    # one unit per path: tiling networks only carry 0/1 capacities
    while res_s is not res_t:
        path, found = get_augmenting_path(res_s, res_t, res_V)
        if not found:
            break

        for u, v in zip(path, path[1:]):
            u.weights[v] -= 1
            v.weights[u] += 1

    # ---------------- read flows back onto the original arcs ----------------
    originals = {c: v for v, c in copies.items()}
    flow = 0
    for n in res_s.neighs:
        flow += s.capacity_to(originals[n]) - res_s.weights[n]

    edge_flows: Dict[Tuple[Vertex, Vertex], int] = {}
    for u in V:
        for v in u.neighs:
            edge_flows[(u, v)] = max(0, u.weights[v] - copies[u].weights[copies[v]])

    return flow, edge_flows


def max_flow(s: Vertex, t: Vertex, V: Iterable[Vertex]) -> int:
    """
    Returns the maximum flow from s to t in the network with vertex set V.
    """
    flow, _ = edmonds_karp(s, t, V)
    return flow
