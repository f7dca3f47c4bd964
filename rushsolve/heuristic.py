"""Move cost and the blocking-vehicles heuristic."""

from __future__ import annotations

from rushsolve.board import EMPTY, PLAYER_ID, BoardState


def next_cost(max_move: int, move: int) -> int:
    """Cost of a slide: longer slides are cheaper."""
    return 1 + max_move - abs(move)


def blocking_heuristic(state: BoardState) -> int:
    """Number of distinct vehicles between the player and the exit."""
    player = state.vehicles[PLAYER_ID]
    cfg = state.config
    grid = state.grid()

    if player.horizontal:
        line = grid[player.row]
        if cfg.exit_col == cfg.cols:
            path = line[player.col + player.length:]
        elif cfg.exit_col == -1:
            path = line[: player.col]
        else:
            path = ""
    else:
        column = "".join(row[player.col] for row in grid)
        if cfg.exit_row == cfg.rows:
            path = column[player.row + player.length:]
        elif cfg.exit_row == -1:
            path = column[: player.row]
        else:
            path = ""

    return len(set(path) - {EMPTY})