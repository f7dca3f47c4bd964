import pytest

from rushsolve.parser import parse_config_text
from rushsolve.search import GBFS, UCS, AStar, Move

TWO_MOVES = "3 3\n1\n...\n..A\nPPAK\n"
BLOCKED = "3 3\n1\n..A\n..A\nPPAK\n"
ALREADY_SOLVED = "2 2\n0\n..\nPPK\n"
LARGER = "4 4\n2\nA...\nA.B.\nPPB.K\n....\n"

ALGORITHMS = [UCS, GBFS, AStar]


def _apply(state, moves):
    for vehicle_id, steps in moves:
        vehicle = state.vehicles[vehicle_id]
        moved = vehicle.moved(steps, state)
        assert moved != vehicle
        state = state.with_vehicle(moved)
    return state


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_two_move_puzzle(algorithm):
    solver = algorithm()
    solution = solver.solve(parse_config_text(TWO_MOVES))
    assert solution == [Move("A", -1), Move("P", 1)]
    assert solver.nodes_visited >= len(solution) + 1


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_solution_reaches_goal(algorithm):
    initial = parse_config_text(LARGER)
    solution = algorithm().solve(initial)
    assert solution
    assert not initial.is_goal()
    assert _apply(initial, solution).is_goal()
    assert solution[-1].vehicle_id == "P"


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_blocked_puzzle_has_no_solution(algorithm):
    solver = algorithm()
    assert solver.solve(parse_config_text(BLOCKED)) == []
    assert solver.nodes_visited == 1


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_already_solved_gives_empty_path(algorithm):
    solver = algorithm()
    assert solver.solve(parse_config_text(ALREADY_SOLVED)) == []
    assert solver.nodes_visited == 1


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_repeated_solve_is_independent(algorithm):
    solver = algorithm()
    initial = parse_config_text(LARGER)
    first = solver.solve(initial)
    visited = solver.nodes_visited
    second = solver.solve(initial)
    assert first == second
    assert solver.nodes_visited == visited


def test_move_fields():
    move = Move("B", -2)
    assert move.vehicle_id == "B"
    assert move.steps == -2
    assert tuple(move) == ("B", -2)