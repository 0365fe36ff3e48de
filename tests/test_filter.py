from procdisplay.component import EventState, Rect
from procdisplay.config import Config, KeyCode, char_key
from procdisplay.filter import FilterComponent


class FakeScreen:
    def __init__(self, width, height):
        self.size = Rect(0, 0, width, height)
        self.cells = {}

    def put(self, x, y, text, style):
        for offset, ch in enumerate(text):
            self.cells[(x + offset, y)] = (ch, style)

    def row(self, y):
        return "".join(self.cells.get((x, y), (" ", None))[0] for x in range(self.size.width))


def test_starts_empty():
    component = FilterComponent(Config())
    assert component.is_filter_empty() is True
    assert component.input_str == ""


def test_typing_appends_characters():
    component = FilterComponent(Config())
    for ch in "bash":
        assert component.event(char_key(ch)) is EventState.CONSUMED
    assert component.input_str == "bash"
    assert component.is_filter_empty() is False


def test_backspace_removes_last_character():
    component = FilterComponent(Config())
    component.event(char_key("a"))
    component.event(char_key("b"))
    assert component.event(KeyCode.BACKSPACE) is EventState.CONSUMED
    assert component.input_str == "a"


def test_backspace_on_empty_is_consumed():
    component = FilterComponent(Config())
    assert component.event(KeyCode.BACKSPACE) is EventState.CONSUMED
    assert component.input_str == ""


def test_other_keys_not_consumed():
    component = FilterComponent(Config())
    assert component.event(KeyCode.ENTER) is EventState.NOT_CONSUMED
    assert component.event(KeyCode.DOWN) is EventState.NOT_CONSUMED
    assert component.input_str == ""


def test_reset_clears_input():
    component = FilterComponent(Config())
    component.event(char_key("z"))
    component.reset()
    assert component.is_filter_empty() is True


def test_draw_shows_title_and_input():
    config = Config()
    component = FilterComponent(config)
    for ch in "init":
        component.event(char_key(ch))
    screen = FakeScreen(30, 3)
    component.draw(screen, Rect(0, 0, 30, 3), True)
    assert " Filter " in screen.row(0)
    assert screen.row(1).strip("│ ") == "init"
    assert screen.cells[(1, 1)] == ("i", config.theme_config.component_in_focus)


def test_draw_out_of_focus_style():
    config = Config()
    component = FilterComponent(config)
    screen = FakeScreen(20, 3)
    component.draw(screen, Rect(0, 0, 20, 3), False)
    assert screen.cells[(0, 0)][1] == config.theme_config.component_out_of_focus


def test_draw_clips_long_input():
    component = FilterComponent(Config())
    for ch in "x" * 50:
        component.event(char_key(ch))
    screen = FakeScreen(40, 3)
    component.draw(screen, Rect(0, 0, 10, 3), True)
    assert all(x < 10 for x, _ in screen.cells)