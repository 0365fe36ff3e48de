import pytest

from procdisplay.component import (
    Component,
    DrawableComponent,
    EventState,
    Rect,
    common_nav,
    common_sort,
)
from procdisplay.config import KeyCode, KeyConfig, char_key
from procdisplay.process_items import ListSortOrder
from procdisplay.process_list import MoveSelection


def test_event_state_is_consumed():
    assert EventState.CONSUMED.is_consumed() is True
    assert EventState.NOT_CONSUMED.is_consumed() is False


def test_rect_inner_shrinks_by_margins():
    assert Rect(0, 0, 10, 4).inner(1, 1) == Rect(1, 1, 8, 2)


def test_rect_inner_vertical_only_keeps_width():
    area = Rect(3, 2, 7, 9)
    inner = area.inner(1, 0)
    assert inner.width == area.width
    assert inner.x == area.x
    assert inner.y == area.y + 1
    assert inner.height == area.height - 2


def test_rect_inner_too_small_is_empty():
    assert Rect(5, 5, 1, 1).inner(1, 1) == Rect()


def test_rect_rejects_negative_size():
    with pytest.raises(ValueError):
        Rect(0, 0, -1, 2)


@pytest.mark.parametrize(
    "specs",
    [(0.25, 0.75), (None, 3), (3, None), (None, None, None), (0.33, 0.33, 0.34), (50,)],
)
def test_split_vertical_covers_height(specs):
    area = Rect(2, 4, 17, 40)
    parts = area.split_vertical(*specs)
    assert len(parts) == len(specs)
    assert sum(part.height for part in parts) == area.height
    assert parts[0].y == area.y
    for upper, lower in zip(parts, parts[1:]):
        assert lower.y == upper.y + upper.height
    assert all(part.width == area.width and part.x == area.x for part in parts)


def test_split_vertical_percentages():
    parts = Rect(0, 0, 80, 40).split_vertical(0.25, 0.75)
    assert [part.height for part in parts] == [10, 30]


def test_split_vertical_fixed_length_after_fill():
    parts = Rect(0, 0, 20, 10).split_vertical(None, 3)
    assert parts[1].height == 3
    assert parts[0].height + parts[1].height == 10


def test_split_horizontal_covers_width():
    area = Rect(1, 1, 100, 5)
    parts = area.split_horizontal(0.33, 0.33, 0.34)
    assert sum(part.width for part in parts) == area.width
    for left, right in zip(parts, parts[1:]):
        assert right.x == left.x + left.width
    assert all(part.height == area.height for part in parts)


def test_split_overflowing_lengths_are_clipped():
    parts = Rect(0, 0, 5, 5).split_horizontal(4, 4)
    assert [part.width for part in parts] == [4, 1]


def test_split_errors():
    with pytest.raises(ValueError):
        Rect(0, 0, 5, 5).split_vertical()
    with pytest.raises(ValueError):
        Rect(0, 0, 5, 5).split_vertical(1.5)
    with pytest.raises(ValueError):
        Rect(0, 0, 5, 5).split_vertical(-1)
    with pytest.raises(TypeError):
        Rect(0, 0, 5, 5).split_vertical("half")


def test_common_nav_default_keys():
    keys = KeyConfig()
    assert common_nav(KeyCode.DOWN, keys) is MoveSelection.DOWN
    assert common_nav(KeyCode.UP, keys) is MoveSelection.UP
    assert common_nav(char_key("W"), keys) is MoveSelection.TOP
    assert common_nav(char_key("S"), keys) is MoveSelection.END
    assert common_nav(char_key("x"), keys) is None


def test_common_sort_default_keys():
    keys = KeyConfig()
    assert common_sort(char_key("c"), keys) is ListSortOrder.CPU_USAGE_INC
    assert common_sort(char_key("C"), keys) is ListSortOrder.CPU_USAGE_DEC
    assert common_sort(char_key("m"), keys) is ListSortOrder.MEMORY_USAGE_INC
    assert common_sort(char_key("M"), keys) is ListSortOrder.MEMORY_USAGE_DEC
    assert common_sort(char_key("p"), keys) is ListSortOrder.PID_INC
    assert common_sort(char_key("P"), keys) is ListSortOrder.PID_DEC
    assert common_sort(char_key("n"), keys) is ListSortOrder.NAME_INC
    assert common_sort(char_key("N"), keys) is ListSortOrder.NAME_DEC
    assert common_sort(KeyCode.DOWN, keys) is None


def test_common_nav_follows_custom_bindings():
    keys = KeyConfig(move_down=char_key("j"))
    assert common_nav(char_key("j"), keys) is MoveSelection.DOWN
    assert common_nav(KeyCode.DOWN, keys) is None


def test_abstract_components_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Component()
    with pytest.raises(TypeError):
        DrawableComponent()