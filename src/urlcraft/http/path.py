"""src/urlcraft/http/path.py

URL path segments: splitting, percent-encoding and dot-segment removal.
"""

import logging
from typing import Iterable, Iterator, List, Tuple

from urlcraft.encoding.percent import PATH_SEGMENT, decode_text, encode

__all__ = ["Path", "remove_dot_segments"]

logger = logging.getLogger(__name__)


def remove_dot_segments(segments: Iterable[str]) -> Tuple[str, ...]:
    """
    Resolve ``.`` and ``..`` segments (RFC 3986 section 5.2.4).

    ``.`` is dropped. ``..`` drops the previous kept segment, and does
    nothing when there is none.
    """
    kept: List[str] = []
    for segment in segments:
        if segment == ".":
            continue
        if segment == "..":
            if kept:
                kept.pop()
            else:
                logger.debug("Ignoring '..' above the path root")
            continue
        kept.append(segment)
    return tuple(kept)


class Path:
    """
    Immutable, absolute URL path.

    Holds decoded segments; the wire form is computed once on construction.
    No segment is ever ``.`` or ``..``.
    """

    __slots__ = ("_segments", "_encoded", "_rooted")

    def __init__(self, segments: Iterable[str] = (), rooted: bool = True):
        """
        Args:
            segments: Decoded segments. ``/`` inside a segment is data
                and will be encoded as ``%2F``.
            rooted: Whether an empty path renders as ``/``. Ignored when
                segments remain after dot removal.
        """
        segments = tuple(segments)
        for segment in segments:
            if not isinstance(segment, str):
                raise TypeError(
                    f"Path segments must be str, got {type(segment).__name__}"
                )
        self._segments = remove_dot_segments(segments)
        self._encoded = tuple(encode(s, PATH_SEGMENT) for s in self._segments)
        # a path with segments always renders with a leading slash
        self._rooted = rooted or bool(self._segments)

    @classmethod
    def of(cls, *segments: str) -> "Path":
        """
        Build a rooted path from segments that may contain ``/``.

        Every argument is split on ``/`` and each piece percent-decoded, so
        ``Path.of("a/b")``, ``Path.of("a", "b")`` and ``Path.of("/a/b")``
        are equal, and already-encoded input is accepted as-is. Empty pieces
        are dropped, except that a trailing ``/`` on the last argument is
        kept as a final empty segment.

        Raises:
            MalformedEncoding: If a piece holds an invalid percent-escape.
        """
        pieces: List[str] = []
        for segment in segments:
            if not isinstance(segment, str):
                raise TypeError(
                    f"Path segments must be str, got {type(segment).__name__}"
                )
            pieces.extend(decode_text(p) for p in segment.split("/") if p)

        resolved = remove_dot_segments(pieces)
        if resolved and segments and segments[-1].endswith("/"):
            resolved += ("",)
        return cls(resolved)

    @classmethod
    def empty(cls) -> "Path":
        """Path with no segments that renders as an empty string."""
        return cls((), rooted=False)

    @property
    def segments(self) -> Tuple[str, ...]:
        """Decoded segments."""
        return self._segments

    @property
    def encoded_segments(self) -> Tuple[str, ...]:
        """Percent-encoded segments."""
        return self._encoded

    @property
    def rooted(self) -> bool:
        return self._rooted

    @property
    def is_empty(self) -> bool:
        return not self._segments

    @property
    def filename(self) -> str:
        """Last segment, empty for a directory path or an empty path."""
        return self._segments[-1] if self._segments else ""

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._segments == other._segments and self._rooted == other._rooted

    def __hash__(self) -> int:
        return hash((self._segments, self._rooted))

    def __str__(self) -> str:
        if not self._segments and not self._rooted:
            return ""
        return "/" + "/".join(self._encoded)

    def __repr__(self) -> str:
        return f"Path({str(self)!r})"
