import pytest

from hexmapper.application import Application
from hexmapper.window import Window


class RecordingWindow(Window):
    def __init__(self):
        super().__init__()
        self.events = []

    def update(self, dt):
        self.events.append(("update", dt))

    def handle_key_press(self, key, action):
        self.events.append(("key", key, action))

    def mouse_down(self, x, y):
        self.events.append(("down", x, y))

    def mouse_move(self, x, y):
        self.events.append(("move", x, y))

    def mouse_up(self, was_focused):
        self.events.append(("up", was_focused))

    def mouse_wheel(self, delta):
        self.events.append(("wheel", delta))

    def clear_focus(self):
        self.events.append(("clear",))


def test_pop_window_is_last_in_first_out():
    app = Application()
    first, second = RecordingWindow(), RecordingWindow()
    app.push_window(first)
    app.push_window(second)
    assert app.pop_window() is second
    assert app.pop_window() is first
    assert app.pop_window() is None


def test_input_goes_to_top_window_only():
    app = Application()
    bottom, top = RecordingWindow(), RecordingWindow()
    app.push_window(bottom)
    app.push_window(top)
    app.mouse_down(3, 4)
    app.mouse_move(5, 6)
    app.mouse_up(True)
    app.mouse_wheel(-120)
    app.handle_key_input(65, 1)
    app.clear_focus()
    assert top.events == [
        ("down", 3, 4),
        ("move", 5, 6),
        ("up", True),
        ("wheel", -120),
        ("key", 65, 1),
        ("clear",),
    ]
    assert bottom.events == []


def test_update_forwards_dt_to_top_window():
    app = Application()
    window = RecordingWindow()
    app.push_window(window)
    app.update(0.25)
    assert window.events == [("update", 0.25)]


def test_input_without_windows_is_ignored():
    app = Application()
    app.mouse_down(1, 1)
    app.update(0.1)
    assert app.top_window is None


def test_fps_reported_after_interval():
    app = Application()
    for _ in range(11):
        app.update(0.5)
    assert app.fps == 2


def test_fps_not_reported_before_interval():
    app = Application()
    for _ in range(5):
        app.update(1.0)
    assert app.fps is None


def test_resize_propagates_to_windows():
    app = Application()
    window = RecordingWindow()
    app.push_window(window)
    app.resize(1024, 768)
    assert (window.width, window.height) == (1024, 768)
    later = RecordingWindow()
    app.push_window(later)
    assert (later.width, later.height) == (1024, 768)


@pytest.mark.parametrize("size", [(0, 10), (10, 0), (-5, 5)])
def test_resize_rejects_non_positive_size(size):
    app = Application()
    with pytest.raises(ValueError):
        app.resize(*size)