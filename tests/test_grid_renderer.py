from maze_generator import generate_topology
from room_assignment import assign_rooms


def test_render_marks_doors_start_and_end(first_choice_rng, corner_rules):
    board = generate_topology(3, 3, 0, first_choice_rng)
    layout = assign_rooms(board, corner_rules, 0, 0)

    lines = layout.render_lines()

    assert len(lines) == 9
    assert all(len(line) == 9 for line in lines)
    # Start cell (0, 0) only opens downward.
    assert lines[0][:3] == "###"
    assert lines[1][:3] == "#S#"
    assert lines[2][:3] == "# #"
    # End cell (2, 2) only opens upward.
    assert lines[6][6:] == "# #"
    assert lines[7][6:] == "#E#"
    assert lines[8][6:] == "###"


def test_render_uses_variant_initial_and_leaves_unvisited_cells_empty(corner_rules):
    board = generate_topology(3, 3, 8, 0)
    layout = assign_rooms(board, corner_rules, 8, 0)

    lines = layout.render_lines()

    assert lines[1][:3] == "..."
    assert lines[7][6:] == "#E#"


def test_print_grid_writes_every_row(first_choice_rng, corner_rules, capsys):
    board = generate_topology(2, 2, 0, first_choice_rng)
    layout = assign_rooms(board, corner_rules, 0, 0)

    layout.print_grid()

    assert capsys.readouterr().out.splitlines() == layout.render_lines()
