"""
Domino tiling of a floor plan via bipartite perfect matching.

A floor plan is a string: '#' is an obstacle, '\\n' ends a row and any other
character is an open cell.  Open cells are colored like a checkerboard
(black / red); every domino covers one cell of each color, so the plan can be
tiled iff the black->red adjacency graph has a perfect matching, which is
decided with max-flow.
"""
from typing import Dict, Iterator, List, Optional, Set, Tuple

from vertex import Vertex
from add_edge import add_edge
from max_flow import edmonds_karp, max_flow

OBSTACLE = "#"
ROW_END = "\n"
BLACK = "b"
RED = "r"

Cell = Tuple[int, int]
Domino = Tuple[Cell, Cell]

# up, down, left, right
NEIGHBOUR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def iter_cells(floor: str) -> Iterator[Tuple[int, int, str]]:
    """
    Yield (row, col, char) for every cell of the plan in row-major order.
    """
    row, col = 0, 0
    for ch in floor:
        if ch == ROW_END:
            row += 1
            col = 0
            continue
        yield row, col, ch
        col += 1


def first_open_cell(floor: str) -> Optional[Cell]:
    for row, col, ch in iter_cells(floor):
        if ch != OBSTACLE:
            return row, col
    return None


def cell_color(row: int, col: int, starts_even: bool) -> str:
    """
    Checkerboard color of (row, col); cells with the parity of the first
    open cell are black.
    """
    if ((row + col) % 2 == 0) == starts_even:
        return BLACK
    return RED


def color_floor(floor: str) -> str:
    """
    Replace every open cell by 'b' or 'r'.  Obstacles and row ends are kept.
    """
    first = first_open_cell(floor)
    if first is None:
        return floor
    starts_even = sum(first) % 2 == 0

    colored = []
    row, col = 0, 0
    for ch in floor:
        if ch == ROW_END:
            colored.append(ch)
            row += 1
            col = 0
            continue
        colored.append(ch if ch == OBSTACLE else cell_color(row, col, starts_even))
        col += 1
    return "".join(colored)


class TilingGraph:
    """
    Bipartite flow network of a colored floor plan.

    Attributes:
        black (Dict[Cell, Vertex]): black cells by coordinate
        red (Dict[Cell, Vertex]): red cells by coordinate
        source (Vertex): arcs of capacity 1 to every black cell
        sink (Vertex): arcs of capacity 1 from every red cell
    """

    def __init__(self) -> None:
        self.black: Dict[Cell, Vertex] = {}
        self.red: Dict[Cell, Vertex] = {}
        self.source = Vertex("source")
        self.sink = Vertex("sink")

    @classmethod
    def from_floor(cls, floor: str) -> "TilingGraph":
        """
        Color `floor` and build the complete network.
        """
        graph = cls()
        graph.construct_graph(color_floor(floor))
        return graph

    @property
    def vertices(self) -> Set[Vertex]:
        return set(self.black.values()) | set(self.red.values()) | {self.source, self.sink}

    def is_valid(self) -> bool:
        """
        False if the two color classes differ in size: no perfect matching then.
        """
        return len(self.black) == len(self.red)

    def construct_graph(self, colored: str) -> None:
        """
        Build vertices from a colored plan ('b' = black, anything else open = red).
        """
        for row, col, ch in iter_cells(colored):
            if ch == OBSTACLE:
                continue
            cell = Vertex((row, col))
            if ch == BLACK:
                self.black[(row, col)] = cell
            else:
                self.red[(row, col)] = cell

        self.add_neighbors()
        self.add_terminals()

    def add_neighbors(self) -> None:
        for (row, col), cell in self.black.items():
            for dr, dc in NEIGHBOUR_OFFSETS:
                neighbour = self.red.get((row + dr, col + dc))
                if neighbour is not None:
                    add_edge(cell, neighbour, 1)

    def add_terminals(self) -> None:
        for cell in self.black.values():
            add_edge(self.source, cell, 1)
        for cell in self.red.values():
            add_edge(cell, self.sink, 1)

    def max_flow(self) -> int:
        return max_flow(self.source, self.sink, self.vertices)

    def has_tiling(self) -> bool:
        if not self.is_valid():
            return False
        return self.max_flow() == len(self.black)

    def matching(self) -> Optional[List[Domino]]:
        """
        Dominoes of one perfect matching, or None when there is none.
        """
        if not self.is_valid():
            return None

        flow, edge_flows = edmonds_karp(self.source, self.sink, self.vertices)
        if flow != len(self.black):
            return None

        dominoes = [
            (u.label, v.label)
            for (u, v), units in edge_flows.items()
            if units > 0 and u is not self.source and v is not self.sink
        ]
        return sorted(dominoes)


def can_tile(floor: str) -> bool:
    """
    True iff the open cells of `floor` can be covered exactly by 1x2 dominoes.
    """
    return TilingGraph.from_floor(floor).has_tiling()


def find_tiling(floor: str) -> Optional[List[Domino]]:
    return TilingGraph.from_floor(floor).matching()


def render_tiling(floor: str, dominoes: List[Domino]) -> str:
    """
    Draw a tiling: '<>' for horizontal dominoes, '^' over 'v' for vertical
    ones, '#' for obstacles and '.' for open cells left uncovered.
    """
    rows = [
        [ch if ch == OBSTACLE else "." for ch in line]
        for line in floor.split(ROW_END)
    ]
    for a, b in dominoes:
        (r1, c1), (r2, c2) = sorted((a, b))
        if r1 == r2:
            rows[r1][c1], rows[r2][c2] = "<", ">"
        else:
            rows[r1][c1], rows[r2][c2] = "^", "v"
    return ROW_END.join("".join(line) for line in rows)
