"""src/urlcraft/net/host.py

Host classification (RFC 3986 section 3.2.2).

A host is exactly one of a registered name, an IPv4 address or an IPv6
literal. ``classify`` picks the variant and validates it; every variant
validates its own parts on construction, so an invalid host never exists.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from urlcraft.encoding.percent import decode_text
from urlcraft.exceptions import InvalidHost, MalformedEncoding
from urlcraft.utils.validators import is_hex

__all__ = [
    "Host",
    "RegisteredName",
    "IPv4Address",
    "IPv6Address",
    "classify",
]

# Anything shaped like a dotted quad must be a valid IPv4 address.
_DOTTED_QUAD = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+")

_LABEL = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?")


@dataclass(frozen=True, eq=False)
class RegisteredName:
    """
    DNS-style host name.

    Case is preserved for output but ignored by equality and hashing.
    Percent-encoded input is stored decoded, so ``ex%41mple.com`` prints as
    ``exAmple.com``.
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"Host name must be str, got {type(self.name).__name__}")
        if not self.name:
            raise InvalidHost("Host name is empty")
        for label in self.name.split("."):
            if not _LABEL.fullmatch(label):
                raise InvalidHost(f"Invalid label {label!r} in host {self.name!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegisteredName):
            return NotImplemented
        return self.name.lower() == other.name.lower()

    def __hash__(self) -> int:
        return hash(("name", self.name.lower()))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class IPv4Address:
    """IPv4 address as four octets."""

    octets: Tuple[int, int, int, int]

    def __post_init__(self) -> None:
        octets = tuple(self.octets)
        if len(octets) != 4 or not all(
            isinstance(o, int) and 0 <= o <= 255 for o in octets
        ):
            raise InvalidHost(f"Invalid IPv4 octets: {self.octets!r}")
        object.__setattr__(self, "octets", octets)

    @classmethod
    def parse(cls, text: str) -> "IPv4Address":
        """
        Parse dotted-decimal text.

        Each octet must be in [0, 255] and written without leading zeros,
        a lone ``0`` excepted.

        Raises:
            InvalidHost: If text is not a dotted quad or an octet is invalid.
        """
        if not _DOTTED_QUAD.fullmatch(text):
            raise InvalidHost(f"Invalid IPv4 address: {text!r}")

        octets = []
        for part in text.split("."):
            if len(part) > 1 and part[0] == "0":
                raise InvalidHost(f"Leading zero in IPv4 octet {part!r} of {text!r}")
            value = int(part)
            if value > 255:
                raise InvalidHost(f"IPv4 octet {part!r} out of range in {text!r}")
            octets.append(value)
        return cls(tuple(octets))  # type: ignore[arg-type]

    def __str__(self) -> str:
        return ".".join(str(o) for o in self.octets)


@dataclass(frozen=True)
class IPv6Address:
    """
    IPv6 address as eight 16-bit groups.

    Rendered in brackets using the RFC 5952 text form: lowercase hex, the
    longest run of two or more zero groups compressed to ``::``. IPv4-mapped
    addresses render their low 32 bits as a dotted quad.
    """

    groups: Tuple[int, ...]

    def __post_init__(self) -> None:
        groups = tuple(self.groups)
        if len(groups) != 8 or not all(
            isinstance(g, int) and 0 <= g <= 0xFFFF for g in groups
        ):
            raise InvalidHost(f"Invalid IPv6 groups: {self.groups!r}")
        object.__setattr__(self, "groups", groups)

    @classmethod
    def parse(cls, text: str) -> "IPv6Address":
        """
        Parse IPv6 text without brackets.

        Raises:
            InvalidHost: On bad hex groups, more than one ``::``, a wrong
                number of groups, or a malformed embedded IPv4 address.
        """
        if text.count("::") > 1 or ":::" in text:
            raise InvalidHost(f"Multiple '::' in IPv6 address {text!r}")

        if "::" in text:
            head, tail = text.split("::")
            head_groups = _hex_groups(head.split(":") if head else [], text, False)
            tail_groups = _hex_groups(tail.split(":") if tail else [], text, True)
            # '::' stands for at least one zero group
            missing = 8 - len(head_groups) - len(tail_groups)
            if missing < 1:
                raise InvalidHost(f"Too many groups in IPv6 address {text!r}")
            groups = head_groups + [0] * missing + tail_groups
        else:
            groups = _hex_groups(text.split(":"), text, True)
            if len(groups) != 8:
                raise InvalidHost(
                    f"IPv6 address {text!r} has {len(groups)} groups, expected 8"
                )
        return cls(tuple(groups))

    @property
    def compressed_range(self) -> Optional[Tuple[int, int]]:
        """Half-open group range replaced by ``::`` on output, if any."""
        best: Optional[Tuple[int, int]] = None
        start = None
        # trailing sentinel closes a run that reaches the last group
        for i, group in enumerate(self.groups + (1,)):
            if group == 0:
                if start is None:
                    start = i
                continue
            if start is not None:
                if i - start >= 2 and (best is None or i - start > best[1] - best[0]):
                    best = (start, i)
                start = None
        return best

    @property
    def is_ipv4_mapped(self) -> bool:
        """True for ``::ffff:a.b.c.d`` addresses."""
        return self.groups[:6] == (0, 0, 0, 0, 0, 0xFFFF)

    def __str__(self) -> str:
        if self.is_ipv4_mapped:
            high, low = self.groups[6], self.groups[7]
            return f"[::ffff:{high >> 8}.{high & 0xFF}.{low >> 8}.{low & 0xFF}]"

        hexes = [format(g, "x") for g in self.groups]
        compressed = self.compressed_range
        if compressed is None:
            return "[" + ":".join(hexes) + "]"
        start, end = compressed
        return "[" + ":".join(hexes[:start]) + "::" + ":".join(hexes[end:]) + "]"


Host = Union[RegisteredName, IPv4Address, IPv6Address]


def _hex_groups(parts: List[str], text: str, allow_ipv4_tail: bool) -> List[int]:
    groups: List[int] = []
    for index, part in enumerate(parts):
        if "." in part and allow_ipv4_tail and index == len(parts) - 1:
            octets = IPv4Address.parse(part).octets
            groups.append(octets[0] << 8 | octets[1])
            groups.append(octets[2] << 8 | octets[3])
        elif len(part) <= 4 and is_hex(part):
            groups.append(int(part, 16))
        else:
            raise InvalidHost(f"Invalid group {part!r} in IPv6 address {text!r}")
        if len(groups) > 8:
            raise InvalidHost(f"Too many groups in IPv6 address {text!r}")
    return groups


def classify(raw: str) -> Host:
    """
    Parse a host string into a registered name, IPv4 or IPv6 address.

    Checks run in order: bracketed IPv6 literal, dotted-quad IPv4, then
    registered name. IPv4 text is also a syntactically valid registered name,
    so it has to be tried first.

    Raises:
        InvalidHost: If raw is not a valid host of any kind.
    """
    if not isinstance(raw, str):
        raise TypeError(f"Host must be str, got {type(raw).__name__}")

    if raw.startswith("[") or raw.endswith("]"):
        if not (raw.startswith("[") and raw.endswith("]")) or len(raw) < 2:
            raise InvalidHost(f"Unbalanced brackets in host {raw!r}")
        return IPv6Address.parse(raw[1:-1])

    if _DOTTED_QUAD.fullmatch(raw):
        return IPv4Address.parse(raw)

    try:
        name = decode_text(raw)
    except MalformedEncoding as exc:
        raise InvalidHost(f"Invalid percent-encoding in host {raw!r}") from exc

    if name != raw and _DOTTED_QUAD.fullmatch(name):
        return IPv4Address.parse(name)
    return RegisteredName(name)
