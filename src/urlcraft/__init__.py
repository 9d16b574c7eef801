"""src/urlcraft/__init__.py

urlcraft - Immutable, RFC 3986 compliant HTTP and HTTPS URLs for Python.

urlcraft builds URLs from their components and guarantees that the string it
produces is correctly percent-encoded and structurally valid. It is built
entirely on Python's standard library.

Key Features:
    - Zero external dependencies
    - Immutable URL values with a fluent builder
    - Host validation: registered names, IPv4 and IPv6 literals
    - Per-component percent-encoding of path segments and query parameters
    - Dot-segment removal in paths
    - Insertion-ordered query parameters
    - Full type hints (PEP 561)

Example:
    Building a URL::

        from urlcraft import https

        url = https("www.wolframalpha.com").path("input/").query("i", "π²").build()
        print(url)  # https://www.wolframalpha.com/input/?i=%CF%80%C2%B2

    Explicit ports and IPv6 hosts::

        from urlcraft import http

        url = http("[::1]:9000").path("wiki", "Molière").build()
        print(url)  # http://[::1]:9000/wiki/Moli%C3%A8re

    Parsing::

        from urlcraft import Url

        url = Url.parse("https://example.com/a/../b?x=1#top")
        print(url.path.segments)  # ('b',)
"""

from urlcraft.encoding.percent import (
    PATH_SEGMENT,
    QUERY,
    UNRESERVED,
    CharacterClass,
    decode,
    decode_text,
    encode,
)
from urlcraft.exceptions import (
    InvalidHost,
    InvalidPath,
    InvalidPort,
    InvalidScheme,
    MalformedEncoding,
    UrlcraftError,
)
from urlcraft.http.path import Path
from urlcraft.http.query import Query
from urlcraft.http.url import Builder, Url, http, https
from urlcraft.net.authority import Authority, split
from urlcraft.net.host import Host, IPv4Address, IPv6Address, RegisteredName, classify
from urlcraft.net.scheme import Scheme
from urlcraft.version import __version__

__all__ = [
    "Url",
    "Builder",
    "http",
    "https",
    "Scheme",
    "Host",
    "RegisteredName",
    "IPv4Address",
    "IPv6Address",
    "classify",
    "Authority",
    "split",
    "Path",
    "Query",
    "CharacterClass",
    "UNRESERVED",
    "PATH_SEGMENT",
    "QUERY",
    "encode",
    "decode",
    "decode_text",
    "UrlcraftError",
    "InvalidHost",
    "InvalidPort",
    "InvalidScheme",
    "InvalidPath",
    "MalformedEncoding",
    "__version__",
]
