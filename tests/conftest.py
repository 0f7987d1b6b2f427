import pytest

from chartpanel.data_model import Size
from chartpanel.panel import ChartPanel


class RecordingSurface:
    def __init__(self, width=800, height=600):
        self._size = Size(width, height)
        self.calls = []

    def size(self):
        return self._size

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("rect", x, y, width, height, color))

    def draw_line(self, x0, y0, x1, y1, color):
        self.calls.append(("line", x0, y0, x1, y1, color))

    def draw_text(self, text, x, y, color, font):
        self.calls.append(("text", text, x, y, color))

    def lines(self, color=None):
        return [c for c in self.calls if c[0] == "line" and (color is None or c[5] == color)]

    def texts(self):
        return [c for c in self.calls if c[0] == "text"]


class RecordingHost:
    def __init__(self):
        self.redraws = 0
        self.closed = 0
        self.maximize_toggles = 0
        self.cursor_visible = []

    def request_redraw(self):
        self.redraws += 1

    def close(self):
        self.closed += 1

    def toggle_maximized(self):
        self.maximize_toggles += 1

    def set_cursor_visible(self, visible):
        self.cursor_visible.append(visible)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def panel(host):
    return ChartPanel(host=host)
