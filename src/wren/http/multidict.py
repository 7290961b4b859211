"""Read-only multi-valued string mappings.

Headers, query strings, and form bodies all carry the same shape: a
name may repeat, most readers want the first value, and a few want
every value. ``MultiDict`` is that shape once.
"""

from collections.abc import Iterable, Iterator, Mapping


class MultiDict(Mapping[str, str]):
    """Immutable mapping of name -> ordered values.

    ``__getitem__`` and ``get`` return the first value for a key.
    ``get_list`` returns all values for a key.
    """

    __slots__ = ("_data",)

    _data: dict[str, list[str]]

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        data: dict[str, list[str]] = {}
        for name, value in pairs:
            data.setdefault(self._key(name), []).append(value)
        object.__setattr__(self, "_data", data)

    @staticmethod
    def _key(name: str) -> str:
        return name

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        return self._data[self._key(key)][0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._key(key) in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"{type(self).__name__}({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(self._key(key))
        return values[0] if values else default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, in the order received."""
        return list(self._data.get(self._key(key), []))

    def items_all(self) -> Iterator[tuple[str, str]]:
        """Every (name, value) pair, repeated names included."""
        for name, values in self._data.items():
            for value in values:
                yield name, value
