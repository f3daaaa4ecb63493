"""Pytest configuration for pcb_canvas tests."""
import pytest

from pcb_canvas.drawer import DEFAULT_PCB_COLOR_MAP, RecordingSurface
from pcb_canvas.pcb import Matrix


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "png: needs the cairo system library to rasterize SVG"
    )


@pytest.fixture
def surface():
    """A fresh recording surface."""
    return RecordingSurface()


@pytest.fixture
def identity():
    """Real units map 1:1 onto surface units."""
    return Matrix.identity()


@pytest.fixture
def flip_matrix():
    """10 px per mm, y-up real coordinates onto a y-down 200x200 surface."""
    return Matrix.compose(Matrix.translate(100, 100), Matrix.scale(10, -10))


@pytest.fixture
def color_map():
    return DEFAULT_PCB_COLOR_MAP


@pytest.fixture
def colors(color_map):
    """The colors the top layer renders with."""
    return {
        "copper": color_map.copper_color("top"),
        "mask": color_map.soldermask_color("top"),
        "substrate": color_map.substrate,
        "keepout": color_map.keepout,
        "drill": color_map.drill,
    }


@pytest.fixture
def cairosvg_available():
    """Skip when cairosvg or the cairo system library is missing."""
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError) as exc:
        pytest.skip(f"cairosvg unavailable: {exc}")
    return True
