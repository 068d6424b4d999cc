"""Immutable query string parameters.

Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
The last occurrence of a repeated key wins for plain lookups;
``get_list`` still sees every value.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import unquote_plus


def _split_query(raw: str) -> Iterator[tuple[str, str]]:
    """Yield decoded ``(key, value)`` pairs in query-string order.

    Pairs split on ``&``, then on the first ``=``. A piece without ``=``
    is a key with an empty value. Empty pieces (``a=1&&b=2``) are skipped.
    """
    for piece in raw.split("&"):
        if not piece:
            continue
        key, _, value = piece.partition("=")
        yield unquote_plus(key), unquote_plus(value)


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Parsed query string as field name -> list of values.
        _raw: Raw query string bytes.

    ``__getitem__`` returns the last value for a key.
    ``get_list`` returns all values for a key.
    """

    _data: dict[str, list[str]]
    _raw: bytes

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: bytes | str = b"") -> None:
        if isinstance(query_string, str):
            text = query_string
            query_string = text.encode("utf-8")
        else:
            text = query_string.decode("latin-1")
        object.__setattr__(self, "_raw", query_string)
        data: dict[str, list[str]] = {}
        for key, value in _split_query(text):
            data.setdefault(key, []).append(value)
        object.__setattr__(self, "_data", data)

    def __getitem__(self, key: str) -> str:
        return self._data[key][-1]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    def __setattr__(self, name: str, value: object) -> None:
        msg = "QueryParams is immutable"
        raise AttributeError(msg)

    @property
    def raw(self) -> bytes:
        """The query string exactly as received."""
        return self._raw

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the last value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[-1]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, in query-string order."""
        return list(self._data.get(key, []))


def parse_query(raw: bytes | str | None) -> QueryParams:
    """Parse a raw query string (without the leading ``?``).

    ``None`` and ``""`` both produce an empty mapping::

        parse_query("name=Danni")   # {"name": "Danni"}
        parse_query("a=1&a=2")      # {"a": "2"}
    """
    return QueryParams(raw or b"")
