import pytest

from dungeon_models import Board, Cell
from maze_generator import generate_topology
from maze_graph import (
    build_cell_graph,
    dead_end_count,
    graph_diameter,
    is_spanning_tree,
    path_length,
)


def test_first_choice_board_is_a_single_corridor(first_choice_rng):
    board = generate_topology(3, 3, 0, first_choice_rng)

    graph = build_cell_graph(board)

    assert graph.number_of_nodes() == 9
    assert graph.number_of_edges() == 8
    assert is_spanning_tree(board)
    assert path_length(board, 0, 8) == 8
    assert graph_diameter(board) == 8
    assert dead_end_count(board) == 2


@pytest.mark.parametrize("seed", range(8))
def test_generated_boards_are_spanning_trees(seed):
    board = generate_topology(9, 7, seed, seed)

    assert is_spanning_tree(board)


def test_capped_board_is_still_a_tree_over_visited_cells():
    board = generate_topology(1200, 1, 0, 2)

    assert board.capped
    assert is_spanning_tree(board)


def test_single_cell_has_no_diameter():
    board = generate_topology(1, 1, 0, 0)

    assert is_spanning_tree(board)
    assert graph_diameter(board) == 0


def test_path_length_rejects_disconnected_cells():
    cells = tuple(Cell(visited=True) for _ in range(2))
    board = Board(width=2, height=1, cells=cells)

    assert not is_spanning_tree(board)
    with pytest.raises(ValueError):
        path_length(board, 0, 1)
