"""Reading puzzle configuration files."""

from __future__ import annotations

import re
from os import PathLike
from typing import Union

from rushsolve.board import (
    EMPTY,
    EXIT_ID,
    PLAYER_ID,
    BoardConfig,
    BoardState,
    Orientation,
    Vehicle,
)

_INT = re.compile(r"\s*([+-]?\d+)")


class ConfigError(ValueError):
    """A configuration file is missing or describes an invalid puzzle."""


def _read_int(text: str, pos: int) -> tuple[int | None, int]:
    match = _INT.match(text, pos)
    if match is None:
        return None, pos
    return int(match.group(1)), match.end()


def parse_config_text(text: str) -> BoardState:
    """Build the initial board state from the text of a configuration file."""
    rows, pos = _read_int(text, 0)
    cols, pos = _read_int(text, pos) if rows is not None else (None, pos)
    rows = rows or 0
    cols = cols or 0
    if rows <= 0 or cols <= 0 or rows * cols < 2:
        raise ConfigError(
            "Invalid board dimension.\n"
            "Board dimension must be at least 2x1 or 1x2."
        )

    num_pieces, pos = _read_int(text, pos)
    if num_pieces is None:
        raise ConfigError("Invalid number of pieces.")

    board = [line for line in text[pos:].split("\n") if line not in ("", "\r")]

    positions: dict[str, list[tuple[int, int]]] = {}
    exit_coord: tuple[int, int] | None = None
    top_left = (0, 0)
    bottom_right = (0, 0)
    has_top_left = False

    for r, line in enumerate(board):
        for c, ch in enumerate(line):
            if ch == EXIT_ID:
                exit_coord = (r, c)
                continue
            if not ("A" <= ch <= "Z") and ch != EMPTY:
                continue
            if has_top_left:
                bottom_right = (r, c)
            else:
                top_left = (r, c)
                has_top_left = True
            if ch != EMPTY:
                positions.setdefault(ch, []).append((r, c))

    if (
        bottom_right[0] - top_left[0] + 1 != rows
        or bottom_right[1] - top_left[1] + 1 != cols
    ):
        raise ConfigError("The board dimension does not match the stated number.")

    if exit_coord is None:
        raise ConfigError("There is no exit on the board.")

    exit_row, exit_col = exit_coord
    row_offset = col_offset = 0
    if exit_row == 0 and rows < len(board):
        row_offset = -1
        exit_row -= 1
    elif exit_col == 0 and rows == len(board):
        col_offset = -1
        exit_col -= 1

    vehicles: dict[str, Vehicle] = {}
    for vid, cells in positions.items():
        if len(cells) < 2:
            raise ConfigError(f"Piece {vid} occupies a single cell.")
        r0, c0 = cells[0]
        orientation = (
            Orientation.VERTICAL if cells[1][0] != r0 else Orientation.HORIZONTAL
        )
        vehicles[vid] = Vehicle(
            vid, r0 + row_offset, c0 + col_offset, len(cells), orientation
        )

    if num_pieces != len(vehicles) - 1:
        raise ConfigError(
            "The number of pieces on the board does not match the stated number. "
            f"Found {len(vehicles) - 1} pieces."
        )

    if PLAYER_ID not in vehicles:
        raise ConfigError("There is no primary piece on the board.")

    player = vehicles[PLAYER_ID]
    if exit_row != player.row and exit_col != player.col:
        raise ConfigError(
            "Impossible board. Primary piece is not aligned with exit cell."
        )

    config = BoardConfig(rows, cols, exit_row, exit_col)
    try:
        return BoardState(vehicles, config)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


def parse_config(path: Union[str, PathLike]) -> BoardState:
    """Read and parse the configuration file at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ConfigError(f"Cannot open {path}") from exc
    return parse_config_text(text)