"""Best-first searches over board states: UCS, greedy best-first and A*."""

from __future__ import annotations

import heapq
import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Optional

from rushsolve.board import BoardState
from rushsolve.heuristic import blocking_heuristic, next_cost


class Move(NamedTuple):
    """A slide of one vehicle by a signed number of cells."""

    vehicle_id: str
    steps: int


@dataclass(eq=False)
class _Node:
    state: BoardState
    cost: int
    parent: Optional["_Node"]
    move: Optional[Move]


class Search(ABC):
    """Best-first search; subclasses choose how the frontier is ordered."""

    def __init__(self) -> None:
        self.nodes_visited = 0

    @abstractmethod
    def _priority(self, state: BoardState, cost: int) -> int:
        """Key by which the frontier is ordered; lower comes first."""

    def solve(self, initial: BoardState) -> list[Move]:
        """Return the moves leading from ``initial`` to a goal, or [] if none is found."""
        self.nodes_visited = 0
        explored: set[BoardState] = set()
        frontier: list[tuple[int, int, _Node]] = []
        order = itertools.count()

        def push(node: _Node) -> None:
            key = self._priority(node.state, node.cost)
            heapq.heappush(frontier, (key, next(order), node))

        push(_Node(initial, 0, None, None))

        while frontier:
            self.nodes_visited += 1
            _, _, current = heapq.heappop(frontier)

            if current.state in explored:
                continue
            explored.add(current.state)

            if current.state.is_goal():
                return self._path(current)

            for child in self._expand(current):
                if child.state not in explored:
                    push(child)
        return []

    @staticmethod
    def _expand(current: _Node) -> Iterator[_Node]:
        state = current.state
        for vehicle in state.vehicles.values():
            max_move = vehicle.max_move(state.config)
            for step in range(-max_move, max_move + 1):
                if step == 0:
                    continue
                moved = vehicle.moved(step, state)
                if moved == vehicle:
                    continue
                yield _Node(
                    state.with_vehicle(moved),
                    current.cost + next_cost(max_move, step),
                    current,
                    Move(vehicle.id, step),
                )

    @staticmethod
    def _path(goal: _Node) -> list[Move]:
        moves: list[Move] = []
        node = goal
        while node.parent is not None:
            assert node.move is not None
            moves.append(node.move)
            node = node.parent
        moves.reverse()
        return moves


class UCS(Search):
    """Uniform-cost search ordered by accumulated move cost."""

    def _priority(self, state: BoardState, cost: int) -> int:
        return cost


class GBFS(Search):
    """Greedy best-first search ordered by the blocking heuristic alone."""

    def _priority(self, state: BoardState, cost: int) -> int:
        return blocking_heuristic(state)


class AStar(Search):
    """A* search ordered by cost plus the blocking heuristic."""

    def _priority(self, state: BoardState, cost: int) -> int:
        return cost + blocking_heuristic(state)