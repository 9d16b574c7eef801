"""src/urlcraft/encoding/percent.py

Percent-encoding (RFC 3986 section 2.1) against named character classes.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Union

from urlcraft.exceptions import MalformedEncoding
from urlcraft.utils.validators import is_hex

__all__ = [
    "CharacterClass",
    "UNRESERVED",
    "SUB_DELIMS",
    "PATH_SEGMENT",
    "QUERY",
    "encode",
    "decode",
    "decode_text",
    "normalize_case",
]


@dataclass(frozen=True)
class CharacterClass:
    """
    Named set of ASCII characters that may appear unescaped in a URL component.

    Membership is tested with ``in``. Derived classes are built with
    :meth:`union` and :meth:`without`.

    Attributes:
        name: Label used in reprs.
        chars: Member characters. Equality compares members only.
    """

    name: str = field(compare=False)
    chars: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        chars = frozenset(self.chars)
        for c in chars:
            if len(c) != 1 or not c.isascii():
                raise ValueError(f"Character class members must be ASCII: {c!r}")
        object.__setattr__(self, "chars", chars)

    def union(
        self, name: str, *others: Union["CharacterClass", str]
    ) -> "CharacterClass":
        """Return a new class with the members of self and of every other."""
        chars = set(self.chars)
        for other in others:
            chars.update(other.chars if isinstance(other, CharacterClass) else other)
        return CharacterClass(name, frozenset(chars))

    def without(self, name: str, chars: str) -> "CharacterClass":
        """Return a new class with chars removed."""
        return CharacterClass(name, self.chars - frozenset(chars))

    def __contains__(self, char: object) -> bool:
        return char in self.chars

    def __repr__(self) -> str:
        return f"CharacterClass({self.name!r})"


# RFC 3986 section 2.3
UNRESERVED = CharacterClass(
    "unreserved",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~",
)

# RFC 3986 section 2.2
SUB_DELIMS = CharacterClass("sub-delims", "!$&'()*+,;=")

# pchar minus pct-encoded
PATH_SEGMENT = UNRESERVED.union("path-segment", SUB_DELIMS, ":@")

# '&' and '=' separate pairs, so they are escaped inside keys and values
QUERY = UNRESERVED.union("query", SUB_DELIMS, ":@/?").without("query", "&=")


def _utf8(text: str, context: Optional[str] = None) -> bytes:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise MalformedEncoding(
            f"Text is not encodable as UTF-8 in {context or text!r}: {exc}"
        ) from exc


def encode(raw: Union[bytes, str], allowed: CharacterClass) -> str:
    """
    Percent-encode raw against an allowed character class.

    Text is UTF-8 encoded first. Bytes that are ASCII members of allowed are
    emitted as-is, every other byte becomes ``%XX`` with uppercase hex.

    Raises:
        TypeError: If raw is neither bytes nor str.
        MalformedEncoding: If raw holds a lone surrogate.
    """
    if isinstance(raw, str):
        raw = _utf8(raw)
    elif not isinstance(raw, (bytes, bytearray)):
        raise TypeError(f"Expected bytes or str, got {type(raw).__name__}")

    out = []
    for byte in raw:
        char = chr(byte)
        if byte < 0x80 and char in allowed:
            out.append(char)
        else:
            out.append(f"%{byte:02X}")
    return "".join(out)


def decode(encoded: str) -> bytes:
    """
    Reverse ``%XX`` escapes into raw bytes.

    Characters outside escapes are passed through as their UTF-8 bytes.
    Hex digits are accepted in either case.

    Raises:
        MalformedEncoding: If a '%' is not followed by exactly two hex digits,
            or if encoded holds a lone surrogate.
    """
    if "%" not in encoded:
        return _utf8(encoded)

    out = bytearray()
    i = 0
    length = len(encoded)
    while i < length:
        char = encoded[i]
        if char == "%":
            hexpair = encoded[i + 1 : i + 3]
            if len(hexpair) != 2 or not is_hex(hexpair):
                raise MalformedEncoding(
                    f"Invalid percent-escape at index {i} in {encoded!r}"
                )
            out.append(int(hexpair, 16))
            i += 3
        else:
            out.extend(_utf8(char, encoded))
            i += 1
    return bytes(out)


def decode_text(encoded: str) -> str:
    """
    Decode percent-escapes and interpret the result as UTF-8 text.

    Raises:
        MalformedEncoding: On a bad escape or on invalid UTF-8.
    """
    try:
        return decode(encoded).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedEncoding(
            f"Decoded bytes are not valid UTF-8 in {encoded!r}: {exc}"
        ) from exc


def normalize_case(encoded: str) -> str:
    """
    Uppercase the hex digits of every percent-escape.

    RFC 3986 section 6.2.2.1: ``%c3%a8`` and ``%C3%A8`` are equivalent.

    Raises:
        MalformedEncoding: If a '%' is not followed by two hex digits.
    """
    parts = encoded.split("%")
    out = [parts[0]]
    for part in parts[1:]:
        hexpair = part[:2]
        if len(hexpair) != 2 or not is_hex(hexpair):
            raise MalformedEncoding(f"Invalid percent-escape in {encoded!r}")
        out.append(hexpair.upper() + part[2:])
    return "%".join(out)
