from typing import Any, Dict, Iterable, List, Optional

import networkx as nx
import pandas as pd
import pulp as pl
from pulp import LpMaximize, LpProblem, LpStatus, LpVariable, lpSum

from vertex import Vertex


def construct_graph(s: Vertex, t: Vertex, V: Iterable[Vertex]) -> nx.DiGraph:
    """
    Copy a vertex-set network into a networkx DiGraph.
    Edges carry `capacity`; the graph attributes `source` and `sink` name the terminals.
    """
    V = set(V)
    if s not in V or t not in V:
        raise ValueError("source and sink must belong to the vertex set")

    G = nx.DiGraph(source=s, sink=t)
    for i, v in enumerate(V):
        G.add_node(v, index=i, label=v.label)
    for u in V:
        for v in u.neighs:
            G.add_edge(u, v, capacity=u.weights[v])
    return G


class FlowSolver:
    """
    Solves maximum flow problems on directed graphs as a linear program.
    The constraint matrix of a network is totally unimodular, so the optimum
    is integral whenever the capacities are.

    Attributes:
        graph (nx.DiGraph): graph built by construct_graph
        problem (LpProblem): The linear programming problem
        flow_vars (Dict[tuple, LpVariable]): Flow variables for each edge
    """

    def __init__(self, G: nx.DiGraph) -> None:
        """
        Args:
            G: Directed graph with edge capacities and `source`/`sink` graph attributes
        """
        self.graph = G
        self.source = G.graph["source"]
        self.sink = G.graph["sink"]
        self.problem = LpProblem("Max_Flow", LpMaximize)
        self.flow_vars: Dict[tuple, LpVariable] = {}
        self._built = False
        self._solution: Optional[Dict[str, Any]] = None

    def build_model(self) -> None:
        self._add_flow_vars()
        self._add_objective()
        self._add_flow_conservation_constraints()
        self._built = True

    def _add_flow_vars(self) -> None:
        """
        One variable per edge, bounded by the edge capacity.
        """
        index = self.graph.nodes
        for u, v, data in self.graph.edges(data=True):
            name = f"f_{index[u]['index']}_{index[v]['index']}"
            self.flow_vars[(u, v)] = LpVariable(name, lowBound=0, upBound=data['capacity'])

    def _add_objective(self) -> None:
        """
        Maximise the net flow leaving the source.
        """
        outflow = lpSum(var for (u, v), var in self.flow_vars.items() if u is self.source)
        inflow = lpSum(var for (u, v), var in self.flow_vars.items() if v is self.source)
        self.problem += outflow - inflow

    def _add_flow_conservation_constraints(self) -> None:
        for node in self.graph.nodes:
            if node is self.source or node is self.sink:
                continue
            inflow = lpSum(self.flow_vars[(u, node)] for u in self.graph.predecessors(node))
            outflow = lpSum(self.flow_vars[(node, v)] for v in self.graph.successors(node))
            self.problem += (inflow - outflow == 0)

    def solve(self) -> Dict[str, Any]:
        """
        Solve the optimization problem.

        Returns:
            Dict containing:
                - status: Solution status
                - objective_value: Optimal objective value
                - flows: Dictionary of edge flows
        Raises:
            RuntimeError: If model hasn't been built
        """
        if not self._built:
            raise RuntimeError("Model must be built before solving")

        # CBC refuses a model without variables
        if not self.flow_vars:
            self._solution = {'status': 'Optimal', 'objective_value': 0, 'flows': {}}
            return self._solution

        status = self.problem.solve(pl.PULP_CBC_CMD(msg=False))

        if status != 1:
            print(f"Solver status: {LpStatus[status]}")
            self._solution = {
                'status': LpStatus[status],
                'objective_value': None,
                'flows': None
            }
            return self._solution

        self._solution = {
            'status': 'Optimal',
            'objective_value': self.problem.objective.value(),
            'flows': {
                edge: var.value()
                for edge, var in self.flow_vars.items()
            }
        }
        return self._solution

    def get_result_df(self) -> pd.DataFrame:
        """
        Generate a DataFrame with the positive edge flows.

        Returns:
            DataFrame with columns from, to, flow, capacity
        """
        if not self._solution or self._solution['status'] != 'Optimal':
            raise RuntimeError("No optimal solution available")

        results: List[List] = []
        for (u, v), flow in self._solution['flows'].items():
            if flow and flow > 0:
                results.append([str(u.label), str(v.label), flow, self.graph[u][v]['capacity']])

        return pd.DataFrame(results, columns=["from", "to", "flow", "capacity"])


def lp_max_flow(s: Vertex, t: Vertex, V: Iterable[Vertex]) -> int:
    """
    Maximum flow value from the LP formulation.
    """
    solver = FlowSolver(construct_graph(s, t, V))
    solver.build_model()
    result = solver.solve()
    if result['status'] != 'Optimal':
        raise RuntimeError(f"LP solver finished with status {result['status']}")
    return int(round(result['objective_value']))
