from procdisplay.dynamic_list import DynamicList


def test_empty_by_default():
    items = DynamicList()
    assert len(items) == 0
    assert items.as_list() == []
    assert items.get(0) is None


def test_filter_keeps_only_matching_and_preserves_order():
    source = [5, 2, 8, 3, 6, 1]
    items = DynamicList(source)
    filtered = items.filter(lambda x: x % 2 == 0)
    result = filtered.as_list()
    assert all(x % 2 == 0 for x in result)
    assert result == [x for x in source if x % 2 == 0]
    assert items.as_list() == source


def test_replace_all():
    items = DynamicList(["a", "b"])
    items.replace_all(["x", "y", "z"])
    assert items.as_list() == ["x", "y", "z"]
    assert len(items) == 3


def test_sort_matches_sorted_and_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]
    items = DynamicList(pairs)
    items.sort(key=lambda p: p[0])
    assert items.as_list() == sorted(pairs, key=lambda p: p[0])
    items.sort(key=lambda p: p[0], reverse=True)
    assert items.as_list() == sorted(pairs, key=lambda p: p[0], reverse=True)


def test_get_in_and_out_of_range():
    items = DynamicList(["p", "q"])
    assert items.get(1) == "q"
    assert items.get(2) is None
    assert items.get(-1) is None


def test_as_list_is_a_copy():
    items = DynamicList([1, 2])
    copy = items.as_list()
    copy.append(3)
    assert len(items) == 2
    assert list(items) == [1, 2]