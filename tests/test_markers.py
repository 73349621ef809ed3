import numpy as np
import pytest

from voronoi_raster.data import MarkerSet, Point, generate_random_markers


def test_marker_set_keeps_order():
    markers = MarkerSet([Point(1, 2), (3, 4), Point(-5, 6)])
    assert len(markers) == 3
    assert markers[1] == Point(3, 4)
    assert list(markers) == [Point(1, 2), Point(3, 4), Point(-5, 6)]
    assert markers.as_array().tolist() == [[1, 2], [3, 4], [-5, 6]]
    assert markers.as_array().dtype == np.int64


def test_random_markers_stay_inside_canvas():
    markers = generate_random_markers(500, 17, 9, seed=3)
    points = markers.as_array()
    assert len(markers) == 500
    assert points[:, 0].min() >= 0 and points[:, 0].max() < 17
    assert points[:, 1].min() >= 0 and points[:, 1].max() < 9


def test_random_markers_are_reproducible_with_seed():
    first = generate_random_markers(10, 800, 600, seed=42)
    second = generate_random_markers(10, 800, 600, seed=42)
    assert list(first) == list(second)


def test_random_markers_use_given_generator():
    rng = np.random.default_rng(5)
    expected_rng = np.random.default_rng(5)
    markers = generate_random_markers(4, 100, 50, rng=rng)
    xs = expected_rng.integers(0, 100, size=4)
    ys = expected_rng.integers(0, 50, size=4)
    assert markers.as_array().tolist() == [[int(x), int(y)] for x, y in zip(xs, ys)]


@pytest.mark.parametrize("count, width, height", [(0, 10, 10), (3, 0, 10), (3, 10, 0)])
def test_random_markers_reject_degenerate_input(count, width, height):
    with pytest.raises(ValueError):
        generate_random_markers(count, width, height, seed=0)
