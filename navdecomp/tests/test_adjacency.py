import pytest

from navdecomp.core.adjacency import (
    build_adjacency, build_adjacency_edge_map, count_links,
)
from navdecomp.core.conformity import check_adjacency_symmetry
from navdecomp.core.triangulation import build_triangulation_input, triangulate

T0 = [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0)]
T1 = [(0.0, 0.0), (10.0, 10.0), (10.0, 0.0)]


def test_two_halves_of_a_square():
    graph = build_adjacency([T0, T1])
    assert graph == {0: [1], 1: [0]}
    assert count_links(graph) == 1


def test_reversed_edge_direction_still_matches():
    flipped = list(reversed(T1))
    assert build_adjacency([T0, flipped]) == {0: [1], 1: [0]}


def test_shared_edge_under_tolerance():
    nudged = [(x + 4e-7, y - 4e-7) for x, y in T1]
    assert build_adjacency([T0, nudged]) == {0: [1], 1: [0]}
    far = [(x + 1e-3, y) for x, y in T1]
    assert build_adjacency([T0, far]) == {0: [], 1: []}


def test_vertex_contact_is_not_adjacency():
    a = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]
    b = [(1.0, 0.0), (2.0, 0.0), (2.0, 1.0)]
    assert build_adjacency([a, b]) == {0: [], 1: []}


def test_neighbors_are_listed_in_index_order():
    center = [(0.0, 0.0), (2.0, 0.0), (1.0, 2.0)]
    left = [(0.0, 0.0), (1.0, 2.0), (-1.0, 2.0)]
    below = [(0.0, 0.0), (1.0, -2.0), (2.0, 0.0)]
    right = [(2.0, 0.0), (3.0, 2.0), (1.0, 2.0)]
    graph = build_adjacency([right, center, below, left])
    assert graph[1] == [0, 2, 3]
    assert graph[0] == [1]


def test_empty_input():
    assert build_adjacency([]) == {}
    assert build_adjacency_edge_map([]) == {}


def _triangles(box, obstacles):
    return triangulate(build_triangulation_input(box, obstacles), 'earcut')


def test_adjacency_is_symmetric(scene):
    graph = build_adjacency(_triangles(*scene))
    assert check_adjacency_symmetry(graph) == []
    for i, ns in graph.items():
        for j in ns:
            assert i in graph[j]


def test_edge_map_matches_pairwise(scene):
    tris = _triangles(*scene)
    assert build_adjacency_edge_map(tris) == build_adjacency(tris)


def test_edge_map_snaps_within_tolerance():
    nudged = [(x - 3e-7, y + 3e-7) for x, y in T1]
    assert build_adjacency_edge_map([T0, nudged]) == {0: [1], 1: [0]}


def test_interior_triangle_has_at_most_three_neighbors(scene):
    graph = build_adjacency(_triangles(*scene))
    assert all(len(ns) <= 3 for ns in graph.values())
