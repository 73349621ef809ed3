import pytest

from voronoi_raster.data import MarkerSet, Point
from voronoi_raster.utils import Config

ENV_KEYS = [
    "VORONOI_WIDTH",
    "VORONOI_HEIGHT",
    "VORONOI_MARKERS",
    "VORONOI_MARKER_RADIUS",
    "VORONOI_PALETTE",
    "VORONOI_BACKGROUND",
    "VORONOI_MARKER_COLOR",
    "VORONOI_OUTPUT",
    "VORONOI_SEED",
    "OUTPUT_DIR",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def palette():
    return [0xFF000001, 0xFF000002, 0xFF000003]


@pytest.fixture
def small_config(tmp_path, palette):
    return Config(
        env_path=None,
        width=40,
        height=30,
        marker_count=6,
        marker_radius=3,
        palette=palette,
        background_color=0xFF333333,
        marker_color=0xFF000000,
        output_dir=str(tmp_path),
        seed=1234,
    )


@pytest.fixture
def markers():
    return MarkerSet([Point(3, 4), Point(30, 5), Point(12, 25), Point(35, 28), Point(20, 15)])
