from typing import Any, Dict, Hashable, Iterable, Optional, Set


class GraphContractError(RuntimeError):
    """
    Raised when the flow engine is handed a graph it cannot work on.
    These are programming errors in the caller, not bad user input.
    """


class Vertex:
    """
    One node of a flow network.
    Identity matters: two vertices with the same `label` are different nodes,
    so hashing and equality are inherited from `object`.
    """

    __slots__ = (
        "label",    # free-form tag, e.g. (row, col), "source", "sink"
        "neighs",   # set of adjacent vertices (outgoing arcs)
        "weights",  # adjacent vertex -> integer capacity
    )

    def __init__(self, label: Optional[Hashable] = None) -> None:
        self.label = label
        self.neighs: Set["Vertex"] = set()
        self.weights: Dict["Vertex", int] = {}

    # ------------------------------------------------------------------ helpers

    def capacity_to(self, v: "Vertex") -> int:
        """
        Capacity of the arc self -> v, 0 if there is no such arc.
        """
        if v not in self.neighs:
            return 0
        return self.weights[v]

    def is_valid(self) -> bool:
        """
        True iff every neighbour has a capacity entry.
        """
        return all(v in self.weights for v in self.neighs)

    # ------------------------------------------------------------------ dunder

    def __repr__(self) -> str:  # nice for debugging
        return f"Vertex({self.label!r}, out={len(self.neighs)})"


def check_graph(s: Any, t: Any, V: Iterable[Vertex], caller: str) -> None:
    """
    Validate the arguments shared by every flow-engine entry point.
    Raises GraphContractError naming `caller` on the first violation.
    """
    if s is None or t is None:
        raise GraphContractError(f"{caller}() was passed None s or t.")

    members = V if isinstance(V, (set, frozenset)) else set(V)
    if s not in members or t not in members:
        raise GraphContractError(f"{caller}() was passed s or t not in V.")

    for v in members:
        if not v.is_valid():
            raise GraphContractError(f"{caller}() was passed invalid vertex {v!r}.")
        for n in v.neighs:
            if n not in members:
                raise GraphContractError(
                    f"{caller}() was passed {v!r} with neighbour {n!r} not in V."
                )
