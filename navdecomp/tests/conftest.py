import pytest

BOX = [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)]


def square(cx, cy, half):
    """Axis-aligned square, clockwise."""
    return [(cx - half, cy - half), (cx - half, cy + half), (cx + half, cy + half), (cx + half, cy - half)]


SCENES = {
    'empty': (BOX, []),
    'centered_square': (BOX, [square(5.0, 5.0, 1.0)]),
    'two_squares': (BOX, [square(3.0, 3.0, 1.0), square(7.0, 7.0, 1.5)]),
    'mixed': (
        [(-5.0, -3.0), (-5.0, 3.0), (5.0, 3.0), (5.0, -3.0)],
        [
            [(-4.0, -2.0), (-3.0, 0.0), (-2.0, -2.0)],
            [(0.0, -1.0), (-0.5, 0.0), (0.0, 1.0), (1.0, 1.0), (1.5, 0.0), (1.0, -1.0)],
            square(3.5, 1.5, 0.5),
        ],
    ),
}


@pytest.fixture(params=sorted(SCENES))
def scene(request):
    box, obstacles = SCENES[request.param]
    return box, obstacles
