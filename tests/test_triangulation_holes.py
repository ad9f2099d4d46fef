import pytest

from navdecomp import decompose
from navdecomp.core.config import DecomposeConfig
from navdecomp.core.geometry import is_convex, polygon_area, polygon_signed_area
from navdecomp.core.triangulation import triangulate_polygon_with_holes


def _area_sum(polys):
    return sum(polygon_area(p) for p in polys)


@pytest.mark.parametrize('engine', ['earcut', 'delaunay'])
def test_single_hole_area_preserved(engine):
    # Outer big square
    shell = [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)]
    # Inner hole: small centered square
    hole = [(1.5, 1.5), (2.5, 1.5), (2.5, 2.5), (1.5, 2.5)]
    tris = triangulate_polygon_with_holes(shell, [hole], engine=engine)
    assert tris, "triangulation returned no triangles"
    expected = abs(polygon_signed_area(shell)) - abs(polygon_signed_area(hole))
    assert abs(_area_sum(tris) - expected) <= 1e-9, f"area mismatch: got {_area_sum(tris)} expected {expected}"


def test_two_holes_area_preserved():
    shell = [(-3.0, -2.0), (3.0, -2.0), (3.0, 2.0), (-3.0, 2.0)]
    hole1 = [(-1.5, -0.5), (-0.5, -0.5), (-0.5, 0.5), (-1.5, 0.5)]
    hole2 = [(0.5, -0.5), (1.5, -0.5), (1.5, 0.5), (0.5, 0.5)]
    tris = triangulate_polygon_with_holes(shell, [hole1, hole2])
    expected = polygon_area(shell) - polygon_area(hole1) - polygon_area(hole2)
    assert abs(_area_sum(tris) - expected) <= 1e-9


@pytest.mark.parametrize('adjacency', ['pairwise', 'edge_map'])
def test_room_with_furniture_decomposes_into_convex_cells(adjacency):
    room = [(0.0, 0.0), (0.0, 8.0), (12.0, 8.0), (12.0, 0.0)]
    furniture = [
        [(1.0, 1.0), (1.0, 3.0), (4.0, 3.0), (4.0, 1.0)],          # table
        [(6.0, 5.0), (7.0, 7.0), (8.0, 5.0)],                       # plant
        [(9.0, 1.0), (9.0, 2.0), (10.0, 2.5), (11.0, 2.0), (11.0, 1.0)],  # cabinet
    ]
    cfg = DecomposeConfig(adjacency_method=adjacency, check_result=True)
    polys = decompose(room, furniture, cfg)
    assert all(is_convex(p) for p in polys)
    expected = polygon_area(room) - sum(polygon_area(f) for f in furniture)
    assert abs(_area_sum(polys) - expected) <= 1e-9
    # with three holes the ring cannot collapse to a handful of cells
    assert len(polys) >= 4


def test_non_convex_region_is_decomposed_into_several_cells():
    shell = [(0.0, 0.0), (0.0, 6.0), (6.0, 6.0), (6.0, 0.0)]
    # a thin wall across most of the room
    wall = [(1.0, 2.9), (1.0, 3.1), (6.0 - 1e-3, 3.1), (6.0 - 1e-3, 2.9)]
    polys = decompose(shell, [wall])
    assert len(polys) >= 3
    assert all(is_convex(p) for p in polys)
