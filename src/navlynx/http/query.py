"""Immutable query string parameters.

Implements ``Mapping[str, str]``. Duplicate keys resolve last-wins, the way
a query string is re-serialized after parsing.
"""

from collections.abc import Iterable, Iterator, Mapping
from urllib.parse import parse_qsl, urlencode


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Parsed query string as field name -> last value.
        _raw: Raw query string (without the leading ``?``).

    A malformed query string never raises: unparseable pairs are
    dropped and an empty string yields an empty mapping.
    """

    _data: dict[str, str]
    _raw: str

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: str = "") -> None:
        object.__setattr__(self, "_raw", query_string)
        # dict() keeps the last value of a repeated key
        object.__setattr__(self, "_data", dict(parse_qsl(query_string, keep_blank_values=True)))

    def __setattr__(self, name: str, value: object) -> None:
        msg = "QueryParams is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    @property
    def raw(self) -> str:
        """The query string exactly as received."""
        return self._raw

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the last value for *key*, or *default* if missing."""
        return self._data.get(key, default)

    def without(self, names: Iterable[str]) -> dict[str, str]:
        """Return the parameters minus *names* (last value per key)."""
        excluded = set(names)
        return {k: self[k] for k in self if k not in excluded}

    def only(self, names: Iterable[str]) -> dict[str, str]:
        """Return only the parameters listed in *names* (last value per key)."""
        included = set(names)
        return {k: self[k] for k in self if k in included}

    def matching(self, expected: Mapping[str, str]) -> dict[str, str]:
        """Return the parameters whose value equals *expected*'s value for that key.

        Values are compared as strings. Keys absent from the query are
        not added.
        """
        return {k: self[k] for k in self if k in expected and self[k] == str(expected[k])}


def encode_query(params: Mapping[str, object]) -> str:
    """Serialize *params* with keys in sorted order.

    Sorting makes two queries with the same pairs encode identically
    regardless of their original order.

    Example::

        >>> encode_query({"y": "2", "x": "1"})
        'x=1&y=2'
    """
    return urlencode(sorted((k, str(v)) for k, v in params.items()))
