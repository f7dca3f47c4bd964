"""Rendering boards and writing results to the terminal and a solution file."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path
from typing import IO, Mapping, Optional, Union

from rushsolve.board import EXIT_ID, PLAYER_ID, BoardState, Vehicle

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RESET = "\033[0m"

SOLUTIONS_DIR = Path("test/solutions")

_BLANK = "   "


class SolutionWriter:
    """Writes text to a terminal stream and, plainly, to a solution file."""

    def __init__(
        self,
        path: Union[str, PathLike, None] = None,
        stream: Optional[IO[str]] = None,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._file: Optional[IO[str]] = None
        if path is not None:
            target = Path(path)
            target.parent.mkdir(parents=True, exist_ok=True)
            self._file = target.open("w", encoding="utf-8")

    def write(self, text: str, colored: Optional[str] = None) -> None:
        """Write ``text`` to the file and ``colored`` (default ``text``) to the stream."""
        self.stream.write(text if colored is None else colored)
        if self._file is not None and not self._file.closed:
            self._file.write(text)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()

    def __enter__(self) -> "SolutionWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def solution_path(config_path: Union[str, PathLike]) -> Path:
    """Where the solution for the given configuration file is written."""
    return SOLUTIONS_DIR / Path(config_path).name


def move_direction(vehicles: Mapping[str, Vehicle], vehicle_id: str, move: int) -> str:
    """Name the direction of a move: left, right, up or down."""
    if vehicles[vehicle_id].horizontal:
        return "left" if move < 0 else "right"
    return "up" if move < 0 else "down"


def render_board(
    state: BoardState, moved_id: Optional[str] = None, color: bool = False
) -> str:
    """Draw the board with its exit, optionally with terminal colours."""

    def paint(text: str, code: str) -> str:
        return f"{code}{text}{RESET}" if color else text

    cfg = state.config
    is_top = cfg.exit_row == -1
    is_bottom = cfg.exit_row == cfg.rows
    is_left = cfg.exit_col == -1
    is_right = cfg.exit_col == cfg.cols
    exit_mark = paint(EXIT_ID, GREEN) + "  "

    def edge(has_exit: bool) -> str:
        return "".join(
            exit_mark if has_exit and i == cfg.exit_col + 1 else _BLANK
            for i in range(cfg.cols + 2)
        ) + "\n"

    parts = ["\n"] if is_top else []
    parts.append(edge(is_top))

    for r, line in enumerate(state.grid()):
        parts.append(exit_mark if is_left and r == cfg.exit_row else _BLANK)
        for cell in line:
            if cell == PLAYER_ID:
                parts.append(paint(cell, RED) + "  ")
            elif cell == moved_id:
                parts.append(paint(cell, YELLOW) + "  ")
            else:
                parts.append(cell + "  ")
        parts.append(exit_mark + "\n" if is_right and r == cfg.exit_row else " \n")

    parts.append(edge(is_bottom))
    return "".join(parts)


def print_colored_board(
    writer: SolutionWriter, state: BoardState, moved_id: Optional[str] = None
) -> None:
    """Show the board in colour on the terminal and plainly in the file."""
    writer.write(render_board(state, moved_id, False), render_board(state, moved_id, True))