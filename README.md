# roviews

Read-only views of collections.

Use these views when an API has to hand out a collection but must not let
callers change it. Each view wraps an existing sequence (such as a `list`) or
mapping (such as a `dict`) and gives read access only. A view copies no data,
so any later change to the wrapped object shows through the view. The views
themselves are frozen dataclasses: the wrapped object cannot be swapped out.

## Installation

```
pip install roviews
```

## The interfaces

The abstract interfaces live in `roviews.base`:

- `List`: a sized collection of values. It supports `len(view)`, `view.values()`
  and iteration (which yields the same values as `values()`).
- `Bag`: a `List` that can also test membership. It supports `view.has(value)`
  and `value in view`.
- `Dict`: a `List` of values that are looked up by key. It supports:
  - `keys()`, an iterator over the keys
  - `items()`, an iterator over `(key, value)` pairs
  - `get(key, default=None)`
  - `has(key)`
  - `view[key]`, which raises `KeyError` for a missing key
  - `key in view`, which tests keys

  Note that iterating over a `Dict` yields its values, not its keys.

Do not rely on the order in which values come back.

Subclass these interfaces to write your own views.

## Ready-made views

| View | Module | Wraps | Kind |
| --- | --- | --- | --- |
| `ListOfSlice` | `roviews.lists` | a sequence | `List` |
| `ListOfMapValues` | `roviews.lists` | a mapping's values | `List` |
| `BagOfSlice` | `roviews.bags` | a sequence | `Bag` |
| `BagOfMapKeys` | `roviews.bags` | a mapping's keys | `Bag` |
| `BagOfMapValues` | `roviews.bags` | a mapping's values | `Bag` |
| `DictOfMap` | `roviews.dicts` | a mapping | `Dict` |
| `DictOfSlice` | `roviews.dicts` | a sequence, keyed by index | `Dict` |

`roviews.bags.ListOfMapKeys` is another name for `BagOfMapKeys`.

The sequence views take the wrapped object as `sequence`, and the mapping views
take it as `mapping`. Every view accepts `None` in its place, and `None` is
treated as an empty collection.

Notes on lookups:

- `BagOfMapKeys.has` is a key lookup in the mapping.
- `BagOfMapValues.has` and `BagOfSlice.has` scan the values one by one.
- `DictOfSlice.has(key)` is true only for an integer index from `0` to
  `len(view) - 1`. Negative indices count as missing.

## Example

```python
from roviews.bags import BagOfMapKeys
from roviews.dicts import DictOfMap, DictOfSlice

scores = {"a": 1, "b": 2, "c": 3}

names = BagOfMapKeys(scores)
len(names)        # 3
names.has("a")    # True
"d" in names      # False

table = DictOfMap(scores)
table.get("b", 0)   # 2
table.get("z", 0)   # 0
sorted(table.items())  # [('a', 1), ('b', 2), ('c', 3)]
sorted(table)          # [1, 2, 3]  (iteration yields values)

letters = DictOfSlice(["x", "y"])
letters.has(1)      # True
letters.has(-1)     # False
letters[0]          # 'x'
```

## Running the tests

```
pip install -e ".[test]"
pytest
```