from typing import Dict, List

from tiling import BLACK, OBSTACLE, ROW_END, RED, color_floor

def load_floor_plans(file_path: str) -> List[str]:
    """
    Read the floor plans stored in a text file.
    Plans are separated by empty lines; a line of spaces is a row of open cells.
    """
    with open(file_path, "r", encoding="utf-8") as f:
        lines = [line.rstrip("\n").rstrip("\r") for line in f]

    floors: List[str] = []
    current: List[str] = []
    for line in lines:
        if line == "":
            if current:
                floors.append(ROW_END.join(current))
                current = []
            continue
        current.append(line)
    if current:
        floors.append(ROW_END.join(current))

    if not floors:
        raise ValueError(f"no floor plan found in {file_path!r}")
    return floors


def floor_summary(floor: str) -> Dict[str, int]:
    colored = color_floor(floor)
    return {
        "rows": colored.count(ROW_END) + 1 if colored else 0,
        "open_cells": sum(1 for ch in colored if ch not in (OBSTACLE, ROW_END)),
        "black": colored.count(BLACK),
        "red": colored.count(RED),
    }
