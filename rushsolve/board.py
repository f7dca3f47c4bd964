"""Board geometry, vehicles and immutable board states."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Union

PLAYER_ID = "P"
EXIT_ID = "K"
EMPTY = "."


class Orientation(Enum):
    """Direction along which a vehicle slides."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class BoardConfig:
    """Board size and exit location; the exit lies one step outside the grid."""

    rows: int
    cols: int
    exit_row: int
    exit_col: int

    @property
    def dimension(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def exit_coord(self) -> tuple[int, int]:
        return (self.exit_row, self.exit_col)


@dataclass(frozen=True)
class Vehicle:
    """A piece identified by a letter, anchored at its top-left cell."""

    id: str
    row: int
    col: int
    length: int
    orientation: Orientation

    @property
    def horizontal(self) -> bool:
        return self.orientation is Orientation.HORIZONTAL

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield the (row, col) cells the vehicle covers."""
        dr, dc = (0, 1) if self.horizontal else (1, 0)
        for i in range(self.length):
            yield (self.row + i * dr, self.col + i * dc)

    def max_move(self, config: BoardConfig) -> int:
        """Largest distance the vehicle could slide on an empty board."""
        span = config.cols if self.horizontal else config.rows
        return span - self.length

    def moved(self, move: int, state: "BoardState") -> "Vehicle":
        """Return the vehicle slid by ``move`` cells, or itself if the move is illegal."""
        config = state.config
        grid = state.grid()
        if self.horizontal:
            new_col = self.col + move
            if new_col < 0 or new_col + self.length - 1 >= config.cols:
                return self
            if move < 0:
                path = range(self.col + move, self.col)
            else:
                path = range(self.col + self.length, self.col + self.length + move)
            if any(grid[self.row][c] != EMPTY for c in path):
                return self
            return replace(self, col=new_col)

        new_row = self.row + move
        if new_row < 0 or new_row + self.length - 1 >= config.rows:
            return self
        if move < 0:
            path = range(self.row + move, self.row)
        else:
            path = range(self.row + self.length, self.row + self.length + move)
        if any(grid[r][self.col] != EMPTY for r in path):
            return self
        return replace(self, row=new_row)


VehicleSource = Union[Mapping[str, Vehicle], Iterable[Vehicle]]


class BoardState:
    """An immutable arrangement of vehicles on a board.

    Two states are equal when they hold the same vehicles.
    """

    __slots__ = ("_vehicles", "config", "_grid", "_hash")

    def __init__(self, vehicles: VehicleSource, config: BoardConfig) -> None:
        items = vehicles.values() if isinstance(vehicles, Mapping) else vehicles
        self._vehicles: dict[str, Vehicle] = {v.id: v for v in items}
        self.config = config
        self._hash: int | None = None

        rows = [[EMPTY] * config.cols for _ in range(config.rows)]
        for vehicle in self._vehicles.values():
            for r, c in vehicle.cells():
                if not (0 <= r < config.rows and 0 <= c < config.cols):
                    raise ValueError(f"vehicle {vehicle.id} lies outside the board")
                rows[r][c] = vehicle.id
        self._grid = tuple("".join(row) for row in rows)

    @property
    def vehicles(self) -> Mapping[str, Vehicle]:
        return MappingProxyType(self._vehicles)

    def grid(self) -> tuple[str, ...]:
        """The board as one string per row, with '.' for empty cells."""
        return self._grid

    def is_goal(self) -> bool:
        """True when the player vehicle sits against the exit."""
        player = self._vehicles[PLAYER_ID]
        cfg = self.config
        if player.horizontal:
            if (
                player.col + player.length == cfg.cols
                and cfg.exit_col == cfg.cols
                and player.row == cfg.exit_row
            ):
                return True
            if player.col == 0 and cfg.exit_col == -1 and player.row == cfg.exit_row:
                return True
        else:
            if (
                player.row + player.length == cfg.rows
                and cfg.exit_row == cfg.rows
                and player.col == cfg.exit_col
            ):
                return True
            if player.row == 0 and cfg.exit_row == -1 and player.col == cfg.exit_col:
                return True
        return False

    def with_vehicle(self, vehicle: Vehicle) -> "BoardState":
        """A new state with ``vehicle`` put in place of the one with its id."""
        vehicles = dict(self._vehicles)
        vehicles[vehicle.id] = vehicle
        return BoardState(vehicles, self.config)

    def without_vehicle(self, vehicle_id: str) -> "BoardState":
        """A new state with the given vehicle removed, if present."""
        vehicles = dict(self._vehicles)
        vehicles.pop(vehicle_id, None)
        return BoardState(vehicles, self.config)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self._vehicles == other._vehicles

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._vehicles.values()))
        return self._hash

    def __repr__(self) -> str:
        return f"BoardState({list(self._vehicles.values())!r}, {self.config!r})"