from collections import deque
from typing import Dict, Iterable, List, Tuple

from vertex import Vertex, check_graph


def get_augmenting_path(
    s: Vertex,
    t: Vertex,
    V: Iterable[Vertex],
) -> Tuple[List[Vertex], bool]:
    """
    BFS over arcs with positive capacity.
    Augmenting paths must have the fewest edges (not the least weight),
    which is what keeps Edmonds-Karp polynomial.
    Returns (path_vertices s..t, found_flag).  If t is unreachable, found_flag == False.
    """
    check_graph(s, t, V, "get_augmenting_path")

    # start node
    queue = deque([s])
    prev: Dict[Vertex, Vertex] = {s: None}

    # loop
    while queue:
        u = queue.popleft()
        if u is t:
            break

        for v in u.neighs:
            # must have remaining capacity
            if u.weights[v] <= 0:
                continue
            # check if visited
            if v in prev:
                continue

            prev[v] = u
            queue.append(v)

    # Sink t not reachable
    if t not in prev:
        return [], False

    # reconstruct the path
    path = [t]
    while path[-1] is not s:
        path.append(prev[path[-1]])
    path.reverse()

    return path, True
