from vertex import Vertex

def add_edge(u: Vertex, v: Vertex, cap: int) -> None:
    """
    Add (or overwrite) the directed arc u -> v with capacity `cap`.
    """
    if cap < 0:
        raise ValueError(f"negative capacity {cap} on {u!r} -> {v!r}")
    u.neighs.add(v)
    u.weights[v] = cap
