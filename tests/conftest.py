"""Shared fixtures: a canvas drawing on a RecordingSurface."""
import pytest
from svgpathcanvas import PathCanvas, RecordingSurface


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def canvas(surface):
    return PathCanvas(surface)


@pytest.fixture
def strict_canvas(surface):
    """Canvas without the auto-open relaxation."""
    return PathCanvas(surface, auto_open=False)
