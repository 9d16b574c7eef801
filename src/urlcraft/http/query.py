"""src/urlcraft/http/query.py

Ordered query parameters for urlcraft.
"""

from typing import Any, Iterable, Iterator, List, Mapping, Tuple, Union

from urlcraft.encoding.percent import QUERY, decode_text, encode

__all__ = ["Query"]

Pairs = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class Query:
    """
    Immutable sequence of query parameters.

    Keys may repeat and insertion order is kept for both output and equality.
    Keys and values are percent-encoded when the query is created, so the wire
    form is always available next to the logical pairs.
    """

    __slots__ = ("_pairs", "_encoded")

    def __init__(self, pairs: Iterable[Tuple[str, str]] = ()):
        self._pairs: Tuple[Tuple[str, str], ...] = tuple(_check_pairs(pairs))
        self._encoded: Tuple[Tuple[str, str], ...] = tuple(
            (encode(k, QUERY), encode(v, QUERY)) for k, v in self._pairs
        )

    @classmethod
    def create(cls, pairs: Pairs) -> "Query":
        """
        Build a query from a mapping or an iterable of ``(key, value)`` pairs.

        Mappings contribute their items in iteration order.
        """
        if isinstance(pairs, Mapping):
            return cls(pairs.items())
        return cls(pairs)

    @classmethod
    def of(cls, key: str, value: str) -> "Query":
        """Build a single-pair query."""
        return cls(((key, value),))

    @classmethod
    def empty(cls) -> "Query":
        return cls()

    @classmethod
    def parse(cls, raw: str) -> "Query":
        """
        Parse the wire form of a query (without the leading ``?``).

        Pairs are separated by ``&`` and split on the first ``=``; a pair
        without ``=`` has an empty value. ``+`` is kept literally.

        Raises:
            MalformedEncoding: If a key or value holds an invalid escape.
        """
        pairs = []
        for piece in raw.split("&"):
            if not piece:
                continue
            key, _, value = piece.partition("=")
            pairs.append((decode_text(key), decode_text(value)))
        return cls(pairs)

    def add(self, key: str, value: str) -> "Query":
        """Return a new query with one pair appended."""
        return Query(self._pairs + ((key, value),))

    def extend(self, pairs: Pairs) -> "Query":
        """Return a new query with pairs appended."""
        return Query(self._pairs + Query.create(pairs)._pairs)

    @property
    def pairs(self) -> Tuple[Tuple[str, str], ...]:
        """Logical (decoded) pairs."""
        return self._pairs

    @property
    def encoded_pairs(self) -> Tuple[Tuple[str, str], ...]:
        """Percent-encoded pairs, as written on the wire."""
        return self._encoded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get the first value of a key.

        Args:
            key: Parameter name (case-sensitive).
            default: Returned when the key is absent.
        """
        for k, v in self._pairs:
            if k == key:
                return v
        return default

    def get_all(self, key: str) -> List[str]:
        """All values of a key in insertion order, empty list if not found."""
        return [v for k, v in self._pairs if k == key]

    def keys(self) -> List[str]:
        """Distinct keys in order of first appearance."""
        return list(dict.fromkeys(k for k, _ in self._pairs))

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._pairs)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Query):
            return NotImplemented
        return self._pairs == other._pairs

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __str__(self) -> str:
        return "&".join(f"{k}={v}" for k, v in self._encoded)

    def __repr__(self) -> str:
        return f"Query({str(self)!r})"


def _check_pairs(pairs: Iterable[Tuple[str, str]]) -> Iterator[Tuple[str, str]]:
    for pair in pairs:
        if isinstance(pair, (str, bytes)):
            raise TypeError(f"Query pairs must be (key, value), got {pair!r}")
        try:
            key, value = pair
        except (TypeError, ValueError) as exc:
            raise TypeError(f"Query pairs must be (key, value), got {pair!r}") from exc
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(
                f"Query keys and values must be str, got {key!r}={value!r}"
            )
        yield key, value
