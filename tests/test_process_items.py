import pytest

from procdisplay.process_items import (
    DEFAULT_SORT_ORDER,
    ListSortOrder,
    ProcessListItem,
    ProcessListItems,
)


def _item(pid, name, cpu, mem):
    return ProcessListItem(pid, name, cpu, mem, 0, 10, 10, "test")


def _three():
    return ProcessListItems([_item(1, "a", 1.0, 1), _item(2, "b", 2.0, 2), _item(3, "c", 3.0, 3)])


def test_item_default():
    instance = ProcessListItem()
    assert instance.pid == 0
    assert instance.name == ""
    assert instance.cpu_usage == 0.0
    assert instance.memory_usage == 0
    assert instance.start_time == 0
    assert instance.run_time == 0
    assert instance.accumulated_cpu_time == 0
    assert instance.status == ""


def test_item_new():
    instance = ProcessListItem(1, "a", 1.0, 1, 0, 10, 10, "test")
    assert instance.pid == 1
    assert instance.name == "a"
    assert instance.cpu_usage == 1.0
    assert instance.memory_usage == 1
    assert instance.start_time == 0
    assert instance.run_time == 10
    assert instance.accumulated_cpu_time == 10
    assert instance.status == "test"


def test_item_equality_by_pid():
    assert _item(1, "a", 1.0, 1) == _item(1, "z", 9.0, 1337)
    assert not (_item(1, "a", 1.0, 1) == _item(2, "a", 1.0, 1))
    assert len({_item(1, "a", 1.0, 1), _item(1, "b", 2.0, 2)}) == 1


def test_items_default():
    instance = ProcessListItems()
    assert len(instance) == 0
    assert instance.index_of(4) is None
    assert instance.get_item(0) is None


def test_items_new():
    item_0 = _item(1, "a", 1.0, 1)
    item_1 = _item(2, "b", 2.0, 2)
    instance = ProcessListItems([item_0, item_1])
    assert len(instance) == 2
    assert instance.index_of(1) == 0
    assert instance.index_of(2) == 1
    assert instance.index_of(3) is None
    assert instance.get_item(0) == item_0
    assert instance.get_item(1) == item_1
    assert instance.get_item(2) is None


def test_items_filter():
    item_0 = _item(1, "a", 1.0, 1)
    instance = ProcessListItems([item_0, _item(2, "b", 2.0, 2)])
    filtered = instance.filter("a")
    assert len(filtered) == 1
    assert filtered.get_item(0) == item_0
    assert filtered.get_item(1) is None
    assert filtered.index_of(1) == 0
    assert filtered.index_of(2) is None


def test_items_filter_matches_pid_text():
    instance = ProcessListItems([_item(123, "x", 1.0, 1), _item(45, "y", 1.0, 1)])
    filtered = instance.filter("23")
    assert [item.pid for item in filtered] == [123]


def test_update_items():
    instance = ProcessListItems([_item(1, "a", 1.0, 1), _item(2, "b", 2.0, 2)])
    new_items = [_item(1, "a", 7.0, 1337), _item(3, "c", 3.0, 3)]
    instance.sort_items(ListSortOrder.CPU_USAGE_INC)
    assert instance.index_of(1) == 0
    assert instance.index_of(2) == 1
    instance.update_items(new_items)
    instance.sort_items(ListSortOrder.CPU_USAGE_INC)
    assert instance.index_of(2) is None
    assert instance.index_of(3) == 0
    assert instance.index_of(1) == 1


@pytest.mark.parametrize(
    "order, expected",
    [
        (ListSortOrder.CPU_USAGE_INC, (0, 1, 2)),
        (ListSortOrder.CPU_USAGE_DEC, (2, 1, 0)),
        (ListSortOrder.NAME_INC, (0, 1, 2)),
        (ListSortOrder.NAME_DEC, (2, 1, 0)),
        (ListSortOrder.PID_INC, (0, 1, 2)),
        (ListSortOrder.PID_DEC, (2, 1, 0)),
        (ListSortOrder.MEMORY_USAGE_INC, (0, 1, 2)),
        (ListSortOrder.MEMORY_USAGE_DEC, (2, 1, 0)),
    ],
)
def test_sort_items(order, expected):
    instance = _three()
    instance.sort_items(ListSortOrder.CPU_USAGE_DEC)
    instance.sort_items(order)
    assert (instance.index_of(1), instance.index_of(2), instance.index_of(3)) == expected


def test_sort_is_stable_for_equal_keys():
    instance = ProcessListItems([_item(5, "a", 1.0, 1), _item(6, "b", 1.0, 1), _item(7, "c", 1.0, 1)])
    instance.sort_items(ListSortOrder.CPU_USAGE_DEC)
    assert [item.pid for item in instance] == [5, 6, 7]


def test_default_sort_order_sorts_by_cpu_descending():
    instance = _three()
    instance.sort_items(DEFAULT_SORT_ORDER)
    assert [item.pid for item in instance] == [3, 2, 1]
    assert DEFAULT_SORT_ORDER is ListSortOrder.CPU_USAGE_DEC


def test_iterate_yields_one_extra_row():
    instance = _three()
    assert [idx for idx, _ in instance.iterate(0, 1)] == [0, 1]
    assert [item.pid for _, item in instance.iterate(1, 1)] == [2, 3]


def test_iterate_zero_and_past_end():
    instance = _three()
    assert list(instance.iterate(0, 0)) == []
    assert [idx for idx, _ in instance.iterate(1, 5)] == [1, 2]
    assert list(instance.iterate(3, 2)) == []


def test_iterate_rejects_negative_start():
    with pytest.raises(ValueError):
        _three().iterate(-1, 2)