# dbcache/services/identifiers.py
from collections.abc import Mapping, Sequence
from typing import Any, Iterable, Union

Collection = Union[Mapping, Sequence]


def _is_positional(collection: Collection) -> bool:
    """A collection is positional when its keys are exactly 0..n-1, in order."""
    if isinstance(collection, Mapping):
        return list(collection.keys()) == list(range(len(collection)))
    return isinstance(collection, Sequence) and not isinstance(collection, (str, bytes))


def _render(item: Any) -> str:
    # True -> "1"; False and None -> "".
    if item is True:
        return "1"
    if item is False or item is None:
        return ""
    return str(item)


def build_identifier(collection: Collection) -> str:
    """
    Render a mapping or sequence into a single cache identifier.

      {"test": "1", "test2": "2"} -> ":test:1:test2:2:"
      ["1", "2"]                  -> ":1:2:"
      {} / []                     -> ":"

    Mappings with dense zero-based integer keys are rendered like sequences.
    Order is preserved; nothing is sorted or escaped.
    """
    parts: Iterable[Any]
    if _is_positional(collection):
        values = collection.values() if isinstance(collection, Mapping) else collection
        parts = (f"{_render(value)}:" for value in values)
    else:
        parts = (f"{_render(key)}:{_render(value)}:" for key, value in collection.items())
    return ":" + "".join(parts)
