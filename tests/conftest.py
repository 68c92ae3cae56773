"""
Shared pytest fixtures for tiler tests.
"""

import pytest
from pubsub import pub

from tiler.commands import geometries
from tiler.geometry import ScreenRect
from tiler.host import LayoutHost


@pytest.fixture
def mock_window():
    """Factory fixture for creating mock window objects."""

    class MockWindow:
        def __init__(self, object_id=1, title="test"):
            self.object_id = object_id
            self.title = title

        def __hash__(self):
            return hash(self.object_id)

        def __eq__(self, other):
            if not isinstance(other, MockWindow):
                return False
            return self.object_id == other.object_id

        def __repr__(self):
            return f"MockWindow({self.object_id})"

    return MockWindow


@pytest.fixture
def recording_host():
    """Factory fixture for hosts that record every primitive call."""

    class RecordingHost(LayoutHost):
        def __init__(self, windows, screen):
            self.windows = list(windows)
            self.screen = screen
            self.calls = []

        def visible_windows(self):
            return list(self.windows)

        def screen_dimensions(self):
            return self.screen

        def move(self, window, x, y):
            self.calls.append(("move", window, x, y))

        def resize(self, window, width, height):
            self.calls.append(("resize", window, width, height))

        def hide(self, window):
            self.calls.append(("hide", window))

    return RecordingHost


@pytest.fixture
def assert_tiles_screen():
    """Check that placements cover the screen exactly, without overlaps."""

    def check(commands, windows, screen):
        rects = geometries(commands)
        assert set(rects) == set(windows)

        placed = list(rects.values())
        for rect in placed:
            assert rect is not None
            assert rect.area > 0
            assert rect.x >= 0 and rect.y >= 0
            assert rect.right <= screen.width
            assert rect.bottom <= screen.height

        for i, a in enumerate(placed):
            for b in placed[i + 1 :]:
                assert not a.overlaps(b), (a, b)

        assert sum(rect.area for rect in placed) == screen.width * screen.height

    return check


@pytest.fixture
def bus():
    """The pypubsub bus, with listeners cleared after each test."""
    yield pub
    pub.unsubAll()


@pytest.fixture
def standard_screen():
    """Standard 1920x1080 screen for layout tests."""
    return ScreenRect(1920, 1080)


@pytest.fixture
def small_screen():
    """1000x800 screen used by the reference scenarios."""
    return ScreenRect(1000, 800)


@pytest.fixture
def odd_screen():
    """Screen whose dimensions are not divisible by small counts."""
    return ScreenRect(1367, 769)
