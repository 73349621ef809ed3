import numpy as np
import pytest

from voronoi_raster.converter import VoronoiRasterizer, squared_distance
from voronoi_raster.data import Canvas, MarkerSet, Point, generate_random_markers

BACKGROUND = 0xFF333333


def scan_nearest(width, height, markers):
    """Pixel-by-pixel scan keeping the first marker on ties."""
    labels = np.zeros((height, width), dtype=np.int64)
    for y in range(height):
        for x in range(width):
            best = 0
            for i in range(1, len(markers)):
                if (squared_distance(markers[i].x, markers[i].y, x, y)
                        < squared_distance(markers[best].x, markers[best].y, x, y)):
                    best = i
            labels[y, x] = best
    return labels


def test_squared_distance():
    assert squared_distance(0, 0, 3, 4) == 25
    assert squared_distance(-2, 5, 1, 1) == 25
    assert squared_distance(799, 599, 0, 0) == 799 ** 2 + 599 ** 2


def test_tie_goes_to_lower_index(palette):
    canvas = Canvas(11, 1, fill=BACKGROUND)
    markers = MarkerSet([Point(0, 0), Point(10, 0)])
    VoronoiRasterizer(palette).render(canvas, markers)
    assert canvas.get(5, 0) == palette[0]
    assert canvas.get(6, 0) == palette[1]


def test_tie_goes_to_lower_index_regardless_of_position(palette):
    markers = MarkerSet([Point(10, 0), Point(0, 0)])
    labels = VoronoiRasterizer(palette).label((11, 1), markers)
    assert labels[0, 5] == 0
    assert labels[0, 4] == 1


def test_duplicate_markers_resolve_to_first(palette):
    markers = MarkerSet([Point(2, 2), Point(2, 2)])
    labels = VoronoiRasterizer(palette).label((5, 5), markers)
    assert (labels == 0).all()


def test_matches_pixel_scan(palette):
    markers = generate_random_markers(12, 23, 17, seed=11)
    labels = VoronoiRasterizer(palette).label((23, 17), markers)
    np.testing.assert_array_equal(labels, scan_nearest(23, 17, markers))


def test_matches_pixel_scan_with_many_ties(palette):
    # Symmetric layout creates plenty of equidistant pixels.
    markers = MarkerSet([Point(0, 0), Point(8, 0), Point(0, 8), Point(8, 8), Point(4, 4)])
    labels = VoronoiRasterizer(palette).label((9, 9), markers)
    np.testing.assert_array_equal(labels, scan_nearest(9, 9, markers))


def test_markers_outside_canvas(palette):
    markers = MarkerSet([Point(-10, -10), Point(50, 3)])
    labels = VoronoiRasterizer(palette).label((8, 6), markers)
    np.testing.assert_array_equal(labels, scan_nearest(8, 6, markers))


def test_every_pixel_covered_by_marker_color(palette, markers):
    canvas = Canvas(40, 30, fill=BACKGROUND)
    VoronoiRasterizer(palette).render(canvas, markers)
    allowed = {palette[i % len(palette)] for i in range(len(markers))}
    assert set(np.unique(canvas.pixels).tolist()) <= allowed
    assert not (canvas.pixels == BACKGROUND).any()


def test_palette_index_wraps(palette):
    markers = MarkerSet([Point(0, 0), Point(10, 0), Point(20, 0), Point(30, 0)])
    canvas = Canvas(31, 1, fill=BACKGROUND)
    VoronoiRasterizer(palette).render(canvas, markers)
    assert canvas.get(30, 0) == palette[3 % len(palette)] == palette[0]
    assert canvas.get(20, 0) == palette[2]


def test_single_marker_colors_whole_canvas(palette):
    canvas = Canvas(16, 9, fill=BACKGROUND)
    VoronoiRasterizer(palette).render(canvas, MarkerSet([Point(7, 3)]))
    assert (canvas.pixels == palette[0]).all()


def test_render_is_deterministic(palette, markers):
    first = Canvas(40, 30, fill=BACKGROUND)
    second = first.copy()
    VoronoiRasterizer(palette).render(first, markers)
    VoronoiRasterizer(palette).render(second, markers)
    assert first == second


def test_full_size_canvas_does_not_overflow(palette):
    markers = MarkerSet([Point(0, 0), Point(799, 599)])
    labels = VoronoiRasterizer(palette).label((800, 600), markers)
    assert labels[0, 0] == 0
    assert labels[599, 799] == 1


def test_empty_marker_set_rejected(palette):
    with pytest.raises(ValueError):
        VoronoiRasterizer(palette).render(Canvas(4, 4), MarkerSet([]))


def test_empty_palette_rejected():
    with pytest.raises(ValueError):
        VoronoiRasterizer([])
