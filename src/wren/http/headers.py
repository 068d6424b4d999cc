"""Request headers, keyed by lower-cased field name."""

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Read-only request headers with case-insensitive lookup.

    A field that arrives more than once is folded into one value joined
    with ``", "``, so ``ctx.headers["accept"]`` always yields a single
    string.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, str] | None = None) -> None:
        self._fields: dict[str, str] = {}
        for name, value in (fields or {}).items():
            self._fold(name, value)

    @classmethod
    def from_asgi(cls, raw: Iterable[tuple[bytes, bytes]]) -> "Headers":
        """Build from the ``headers`` list of an ASGI HTTP scope."""
        headers = cls()
        for name, value in raw:
            headers._fold(name.decode("latin-1"), value.decode("latin-1"))
        return headers

    def _fold(self, name: str, value: str) -> None:
        key = name.lower()
        seen = self._fields.get(key)
        self._fields[key] = value if seen is None else f"{seen}, {value}"

    def __getitem__(self, key: str) -> str:
        return self._fields[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Headers({self._fields!r})"
