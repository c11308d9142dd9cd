import pytest

from roviews.lists import ListOfMapValues, ListOfSlice

_WANT = ["a", "b", "c"]


@pytest.mark.parametrize(
    "view, want_values",
    [
        pytest.param(ListOfMapValues({0: "a", 1: "b", 2: "c"}), _WANT, id="non-empty map"),
        pytest.param(ListOfMapValues({}), [], id="empty map"),
        pytest.param(ListOfMapValues(), [], id="nil map"),
        pytest.param(ListOfSlice(["a", "b", "c"]), _WANT, id="non-empty slice"),
        pytest.param(ListOfSlice([]), [], id="empty slice"),
        pytest.param(ListOfSlice(), [], id="nil slice"),
    ],
)
def test_list(view, want_values):
    assert len(view) == len(want_values)
    assert sorted(view.values()) == want_values
    assert sorted(view) == want_values


def test_list_of_map_values_accepts_unhashable_values():
    items = [[1], [2]]
    view = ListOfMapValues({"x": items[0], "y": items[1]})
    assert sorted(view.values()) == items


@pytest.mark.parametrize(
    "view, field",
    [
        pytest.param(ListOfSlice(["a"]), "sequence", id="slice"),
        pytest.param(ListOfMapValues({0: "a"}), "mapping", id="map"),
    ],
)
def test_list_is_read_only(view, field):
    with pytest.raises(AttributeError):
        setattr(view, field, None)
    assert list(view.values()) == ["a"]
    assert len(view) == 1