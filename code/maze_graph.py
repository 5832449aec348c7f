"""Graph views of a generated board, used for quality checks and benchmarking."""

from __future__ import annotations

import networkx as nx

from dungeon_models import Board


def build_cell_graph(board: Board) -> nx.Graph:
    """Return a graph with one node per visited cell and one edge per door between visited cells."""
    graph = nx.Graph()
    for index in board.visited_indices():
        graph.add_node(index, pos=board.position_of(index).to_tuple())

    for index_a, index_b in board.passages():
        if board.cell(index_a).visited and board.cell(index_b).visited:
            graph.add_edge(index_a, index_b)

    return graph


def is_spanning_tree(board: Board) -> bool:
    """True when the doors connect every visited cell without forming a loop."""
    graph = build_cell_graph(board)
    if graph.number_of_nodes() == 0:
        return False
    return nx.is_tree(graph)


def path_length(board: Board, source: int, target: int) -> int:
    """Number of doors crossed walking from ``source`` to ``target``."""
    graph = build_cell_graph(board)
    try:
        return int(nx.shortest_path_length(graph, source, target))
    except (nx.NetworkXNoPath, nx.NodeNotFound) as exc:
        raise ValueError(f"No passage route from cell {source} to cell {target}") from exc


def graph_diameter(board: Board) -> int:
    """Longest shortest route between two visited cells, or 0 for fewer than two cells."""
    graph = build_cell_graph(board)
    if graph.number_of_nodes() < 2:
        return 0
    try:
        return int(nx.diameter(graph))
    except nx.NetworkXError:
        return 0


def dead_end_count(board: Board) -> int:
    """Visited cells with exactly one door."""
    graph = build_cell_graph(board)
    return sum(1 for _, degree in graph.degree() if degree == 1)
