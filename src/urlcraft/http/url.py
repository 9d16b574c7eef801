"""src/urlcraft/http/url.py

Immutable URL value object and its builder.
"""

import logging
import urllib.parse
from typing import Optional, Union

from urlcraft.exceptions import InvalidHost
from urlcraft.http.path import Path
from urlcraft.http.query import Pairs, Query
from urlcraft.net.authority import Authority, split
from urlcraft.net.host import Host, IPv4Address, IPv6Address, RegisteredName
from urlcraft.net.port import UNSPECIFIED_PORT, validate
from urlcraft.net.scheme import Scheme

__all__ = ["Url", "Builder", "http", "https"]

logger = logging.getLogger(__name__)


class Url:
    """
    Immutable, RFC 3986 compliant HTTP or HTTPS URL.

    Build one from components::

        url = https("www.wolframalpha.com").path("input/").query("i", "π²").build()
        str(url)  # 'https://www.wolframalpha.com/input/?i=%CF%80%C2%B2'

    The port is always known: when none was given it is the scheme's default,
    and the default is left out of the string form. The fragment is kept and
    written verbatim, without percent-encoding.
    """

    __slots__ = ("_scheme", "_host", "_port", "_path", "_query", "_fragment")

    def __init__(
        self,
        scheme: Scheme,
        host: Host,
        port: int = UNSPECIFIED_PORT,
        path: Optional[Path] = None,
        query: Optional[Query] = None,
        fragment: str = "",
    ):
        if not isinstance(host, (RegisteredName, IPv4Address, IPv6Address)):
            raise TypeError(f"Host must be a classified host, got {host!r}")
        if not isinstance(fragment, str):
            raise TypeError(f"Fragment must be str, got {type(fragment).__name__}")
        self._scheme = scheme
        self._host = host
        self._port = scheme.default_port if port == UNSPECIFIED_PORT else validate(port)
        self._path = path if path is not None else Path.empty()
        self._query = query if query is not None else Query.empty()
        self._fragment = fragment

    @staticmethod
    def http(host: str) -> "Builder":
        """Start building an ``http`` URL; see :func:`http`."""
        return Builder(Scheme.HTTP, host)

    @staticmethod
    def https(host: str) -> "Builder":
        """Start building an ``https`` URL; see :func:`https`."""
        return Builder(Scheme.HTTPS, host)

    @classmethod
    def parse(cls, text: str) -> "Url":
        """
        Parse an absolute http or https URL.

        Path segments and query pairs are percent-decoded; the fragment is
        taken as-is. ``Url.parse(str(url)) == url`` for any built URL.

        Raises:
            InvalidScheme: If the scheme is not http or https.
            InvalidHost: On a bad host, a userinfo part, or a non-decimal port.
            InvalidPort: If the port is out of range.
            MalformedEncoding: On invalid percent-escapes in path or query.
        """
        try:
            parsed = urllib.parse.urlsplit(text)
        except ValueError as exc:
            raise InvalidHost(f"Cannot split URL {text!r}: {exc}") from exc

        scheme = Scheme.from_name(parsed.scheme)
        if "@" in parsed.netloc:
            raise InvalidHost(f"Userinfo is not supported: {text!r}")
        authority = split(parsed.netloc)

        return cls(
            scheme,
            authority.host,
            authority.port,
            Path.of(parsed.path) if parsed.path else Path.empty(),
            Query.parse(parsed.query),
            parsed.fragment,
        )

    @property
    def scheme(self) -> Scheme:
        return self._scheme

    @property
    def host(self) -> Host:
        return self._host

    @property
    def port(self) -> int:
        """Effective port; the scheme default when none was given."""
        return self._port

    @property
    def path(self) -> Path:
        return self._path

    @property
    def query(self) -> Query:
        return self._query

    @property
    def fragment(self) -> str:
        """Fragment, not encoded."""
        return self._fragment

    @property
    def authority(self) -> Authority:
        """Host and port as written, the port unspecified when it is the default."""
        if self._port == self._scheme.default_port:
            return Authority(self._host)
        return Authority(self._host, self._port)

    def builder(self) -> "Builder":
        """Return a new builder holding this URL's components."""
        builder = Builder(self._scheme, str(self.authority))
        builder._path = self._path
        builder._query = self._query
        builder._fragment = self._fragment
        return builder

    def to_split_result(self) -> urllib.parse.SplitResult:
        """Convert to the standard library's ``SplitResult``."""
        return urllib.parse.SplitResult(
            self._scheme.scheme_name,
            str(self.authority),
            str(self._path),
            str(self._query),
            self._fragment,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Url):
            return NotImplemented
        return (
            self._scheme == other._scheme
            and self._port == other._port
            and self._host == other._host
            and self._path == other._path
            and self._query == other._query
            and self._fragment == other._fragment
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._scheme,
                self._port,
                self._host,
                self._path,
                self._query,
                self._fragment,
            )
        )

    def __str__(self) -> str:
        url = f"{self._scheme}://{self.authority}{self._path}"
        if self._query:
            url += f"?{self._query}"
        if self._fragment:
            url += f"#{self._fragment}"
        return url

    def __repr__(self) -> str:
        return f"Url({str(self)!r})"


class Builder:
    """
    Fluent builder for :class:`Url`.

    Every setter validates its input immediately and raises on bad input, so
    :meth:`build` always succeeds. Builders are not meant to be shared.
    """

    __slots__ = ("_scheme", "_host", "_port", "_path", "_query", "_fragment")

    def __init__(self, scheme: Scheme, host: str):
        """
        Args:
            scheme: URL scheme; its default port is used unless overridden.
            host: ``host[:port]``. An explicit port overrides the default.
        """
        self._scheme = scheme
        self._port = scheme.default_port
        authority = split(host)
        self._host: Host = authority.host
        if authority.has_port:
            self.port(authority.port)
        self._path = Path.empty()
        self._query = Query.empty()
        self._fragment = ""

    def port(self, port: int) -> "Builder":
        """Set the port. Raises InvalidPort if out of range."""
        self._port = validate(port)
        return self

    def path(self, *segments: str) -> "Builder":
        """Replace the path; see :meth:`Path.of`."""
        self._path = Path.of(*segments)
        return self

    def query(self, key: Union[str, Pairs], value: Optional[str] = None) -> "Builder":
        """
        Replace the query parameters.

        Call as ``query(key, value)`` for one pair, or ``query(pairs)`` with a
        mapping or an iterable of ``(key, value)`` tuples.

        Each call discards the previous query; to add pairs to an existing
        query use :meth:`Query.add` or :meth:`Query.extend`.
        """
        if value is None:
            if isinstance(key, str):
                raise TypeError(f"Missing value for query key {key!r}")
            self._query = Query.create(key)
        else:
            self._query = Query.of(key, value)  # type: ignore[arg-type]
        return self

    def fragment(self, fragment: str) -> "Builder":
        """Set the fragment. It is written verbatim, never encoded."""
        if not isinstance(fragment, str):
            raise TypeError(f"Fragment must be str, got {type(fragment).__name__}")
        self._fragment = fragment
        return self

    def build(self) -> Url:
        """Return the immutable URL."""
        url = Url(
            self._scheme,
            self._host,
            self._port,
            self._path,
            self._query,
            self._fragment,
        )
        logger.debug("Built %r", url)
        return url


def http(host: str) -> Builder:
    """
    Start building an ``http`` URL.

    Args:
        host: Registered name, IPv4 address or bracketed IPv6 literal,
            optionally followed by ``:port``.

    Raises:
        InvalidHost: If the host or port text is malformed.
        InvalidPort: If the port is out of range.
    """
    return Builder(Scheme.HTTP, host)


def https(host: str) -> Builder:
    """Start building an ``https`` URL; see :func:`http`."""
    return Builder(Scheme.HTTPS, host)
