import pytest

from roviews.base import Bag, Dict, List


class _TupleList(List):
    def __init__(self, *items):
        self._items = items

    def __len__(self):
        return len(self._items)

    def values(self):
        return iter(self._items)


class _SetBag(_TupleList, Bag):
    def has(self, value):
        return value in self._items


class _PairDict(Dict):
    def __init__(self, pairs):
        self._pairs = dict(pairs)

    def __len__(self):
        return len(self._pairs)

    def values(self):
        return iter(self._pairs.values())

    def keys(self):
        return iter(self._pairs.keys())

    def get(self, key, default=None):
        return self._pairs.get(key, default)

    def has(self, key):
        return key in self._pairs

    def items(self):
        return iter(self._pairs.items())


@pytest.mark.parametrize("cls", [List, Bag, Dict])
def test_abstract_classes_cannot_be_instantiated(cls):
    with pytest.raises(TypeError):
        cls()


def test_list_iteration_matches_values():
    view = _TupleList("x", "y")
    assert list(List.__iter__(view)) == ["x", "y"]
    assert list(List.__iter__(view)) == list(view.values())


def test_bag_contains_delegates_to_has():
    view = _SetBag("x", "y")
    assert Bag.__contains__(view, "x") is True
    assert Bag.__contains__(view, "z") is False


def test_dict_getitem_returns_value():
    view = _PairDict({"k": "v"})
    assert Dict.__getitem__(view, "k") == "v"


def test_dict_getitem_missing_raises_key_error():
    view = _PairDict({"k": "v"})
    with pytest.raises(KeyError):
        Dict.__getitem__(view, "missing")


def test_dict_getitem_allows_none_value():
    view = _PairDict({"k": None})
    assert Dict.__getitem__(view, "k") is None


def test_dict_contains_uses_keys_and_iterates_values():
    view = _PairDict({"k": "v"})
    assert Dict.__contains__(view, "k") is True
    assert Dict.__contains__(view, "v") is False
    assert list(List.__iter__(view)) == ["v"]