"""Command line: load a puzzle, pick a search, show and save the solution."""

from __future__ import annotations

import re
import sys
import time
from typing import Optional, Sequence

from rushsolve.board import PLAYER_ID, BoardState
from rushsolve.output import (
    SolutionWriter,
    move_direction,
    print_colored_board,
    solution_path,
)
from rushsolve.parser import ConfigError, parse_config
from rushsolve.search import GBFS, UCS, AStar, Move, Search

_ALGORITHMS: dict[int, type[Search]] = {1: UCS, 2: GBFS, 3: AStar}

_MENU = (
    "Choose algorithm:\n",
    "1. UCS (Uniform Cost Search)\n",
    "2. GBFS (Greedy Best-First Search)\n",
    "3. A* Search\n",
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def replay(
    initial: BoardState, solution: Sequence[Move]
) -> list[tuple[Move, str, BoardState]]:
    """Apply a solution step by step, giving each move, its direction and the board after it.

    The last move drives the player vehicle out, so it is removed from the board.
    """
    steps: list[tuple[Move, str, BoardState]] = []
    current = initial
    last = len(solution) - 1
    for index, (vehicle_id, distance) in enumerate(solution):
        move = Move(vehicle_id, distance)
        direction = move_direction(current.vehicles, vehicle_id, distance)
        if index == last:
            current = current.without_vehicle(PLAYER_ID)
        else:
            vehicle = current.vehicles[vehicle_id]
            current = current.with_vehicle(vehicle.moved(distance, current))
        steps.append((move, direction, current))
    return steps


def _read_choice(writer: SolutionWriter) -> Optional[int]:
    while True:
        try:
            line = input("Choice: ")
        except EOFError:
            return None
        match = _LEADING_INT.match(line)
        choice = int(match.group(1)) if match else 0
        writer.write(f"Choice: {choice}\n", "")
        if choice in _ALGORITHMS:
            return choice
        print("Invalid choice. Please try again.")


def _run(writer: SolutionWriter, initial: BoardState) -> int:
    writer.write("\n")
    for line in _MENU:
        writer.write(line)

    choice = _read_choice(writer)
    if choice is None:
        return 1

    writer.write("\nInitial board:\n")
    print_colored_board(writer, initial)
    writer.write("\n")

    solver = _ALGORITHMS[choice]()
    start = time.perf_counter()
    solution = solver.solve(initial)
    elapsed_ms = int((time.perf_counter() - start) * 1000)

    if not solution:
        writer.write("No solution found :(\n")
        return 0

    for number, (move, direction, state) in enumerate(replay(initial, solution), 1):
        writer.write(f"Move {number}: {move.vehicle_id}-{direction}\n")
        print_colored_board(writer, state, move.vehicle_id)
        writer.write("\n")

    writer.write(f"Nodes visited: {solver.nodes_visited}\n")
    writer.write(f"Execution time: {elapsed_ms}ms\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the solver on the configuration file named in ``argv``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: rushsolve <config_file>")
        return 1

    config_path = args[0]
    print(f"\nLoading {config_path} ...")
    try:
        initial = parse_config(config_path)
        writer = SolutionWriter(solution_path(config_path))
    except (ConfigError, OSError) as exc:
        print(f"{exc}\n")
        return 1

    with writer:
        return _run(writer, initial)


if __name__ == "__main__":
    sys.exit(main())