import argparse
import glob
import os
import sys
import time
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

import pandas as pd

from load_data import floor_summary, load_floor_plans
from lp_solver import lp_max_flow
from max_flow import max_flow
from ortools_solver import ortools_max_flow
from tiling import TilingGraph, render_tiling

input_dir = "data/"
output_dir = "results/"
default_solver = "edmonds-karp"

SOLVERS: Dict[str, Callable[..., int]] = {
    "edmonds-karp": max_flow,
    "ortools": ortools_max_flow,
    "lp": lp_max_flow,
}


def solve_floor(floor: str, solver: str = default_solver) -> Dict[str, Any]:
    """
    Check one plan with the chosen max-flow backend.
    """
    start_time = time.time()
    graph = TilingGraph.from_floor(floor)

    if graph.is_valid():
        flow = SOLVERS[solver](graph.source, graph.sink, graph.vertices)
    else:
        # unequal color classes: no perfect matching, skip the flow
        flow = None

    result: Dict[str, Any] = dict(floor_summary(floor))
    result.update({
        "solver": solver,
        "flow": flow,
        "tileable": flow is not None and flow == len(graph.black),
        "running_time_seconds": time.time() - start_time,
    })
    return result


def get_result_df(results: List[Dict[str, Any]]) -> pd.DataFrame:
    columns = ["file", "plan", "rows", "open_cells", "black", "red",
               "solver", "flow", "tileable", "running_time_seconds"]
    return pd.DataFrame(results, columns=columns)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check whether floor plans can be tiled by 1x2 dominoes.")
    parser.add_argument("files", nargs="*",
                        help=f"floor plan files (default: *.txt in {input_dir})")
    parser.add_argument("--solver", choices=sorted(SOLVERS), default=default_solver,
                        help="max-flow backend")
    parser.add_argument("--show", action="store_true",
                        help="print one tiling of every tileable plan")
    parser.add_argument("--output-dir", default=output_dir,
                        help="directory for the results CSV")
    parser.add_argument("--no-save", action="store_true",
                        help="do not write the results CSV")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    files = args.files or sorted(glob.glob(os.path.join(input_dir, "*.txt")))
    if not files:
        print(f"Error: no floor plan files given and none found in {input_dir}")
        return 1

    results = []
    for file_path in files:
        try:
            floors = load_floor_plans(file_path)
        except (OSError, ValueError) as e:
            print(f"Error: {e}")
            print("Please check the input files.")
            return 1

        for plan, floor in enumerate(floors):
            result = solve_floor(floor, args.solver)
            result.update({"file": file_path, "plan": plan})
            results.append(result)

            verdict = "tileable" if result["tileable"] else "not tileable"
            print(f"{file_path}[{plan}]: {result['open_cells']} open cells, {verdict}")

            if args.show and result["tileable"]:
                dominoes = TilingGraph.from_floor(floor).matching()
                print(render_tiling(floor, dominoes))
                print("")

    if not args.no_save:
        os.makedirs(args.output_dir, exist_ok=True)
        csv_filename = f'tiling_results_{datetime.now().strftime("%Y%m%d_%H%M%S")}.csv'
        get_result_df(results).to_csv(os.path.join(args.output_dir, csv_filename), index=False)
        print(f"Results saved to {csv_filename}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
