"""src/urlcraft/net/authority.py

Splitting of ``host[:port]`` authorities (RFC 3986 section 3.2).
"""

import logging
from typing import NamedTuple, Optional

from urlcraft.exceptions import InvalidHost
from urlcraft.net.host import Host, classify
from urlcraft.net.port import UNSPECIFIED_PORT, validate
from urlcraft.utils.validators import is_decimal

__all__ = ["Authority", "split"]

logger = logging.getLogger(__name__)


class Authority(NamedTuple):
    """
    Validated host and optional port.

    ``port`` is ``UNSPECIFIED_PORT`` when the authority carried no port.
    """

    host: Host
    port: int = UNSPECIFIED_PORT

    @property
    def has_port(self) -> bool:
        """True if an explicit port was given."""
        return self.port != UNSPECIFIED_PORT

    def __str__(self) -> str:
        if self.has_port:
            return f"{self.host}:{self.port}"
        return str(self.host)


def split(raw: str) -> Authority:
    """
    Split ``host[:port]`` on the last colon outside IPv6 brackets.

    Raises:
        InvalidHost: If the host is invalid or the port part is not decimal.
        InvalidPort: If the port is out of range.
    """
    if not isinstance(raw, str):
        raise TypeError(f"Authority must be str, got {type(raw).__name__}")

    port_text: Optional[str]
    if raw.startswith("["):
        close = raw.find("]")
        if close == -1:
            raise InvalidHost(f"Unterminated IPv6 literal in {raw!r}")
        host_text, rest = raw[: close + 1], raw[close + 1 :]
        if rest and not rest.startswith(":"):
            raise InvalidHost(f"Unexpected {rest!r} after IPv6 literal in {raw!r}")
        port_text = rest[1:] if rest else None
    else:
        host_text, sep, port_text = raw.rpartition(":")
        if not sep:
            host_text, port_text = raw, None

    host = classify(host_text)

    if port_text is None:
        port = UNSPECIFIED_PORT
    elif is_decimal(port_text):
        port = validate(int(port_text))
    else:
        raise InvalidHost(f"Port {port_text!r} is not decimal in {raw!r}")

    logger.debug("Split authority %r into host=%s port=%d", raw, host, port)
    return Authority(host, port)
