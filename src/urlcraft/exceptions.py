"""src/urlcraft/exceptions.py

urlcraft Exceptions hierarchy.
"""


class UrlcraftError(Exception):
    """Base exception for all urlcraft errors."""


class InvalidHost(UrlcraftError):
    """
    Host is not a valid registered name, IPv4 address or IPv6 literal.
    Also raised for an authority whose port part is not decimal.
    """


class InvalidPort(UrlcraftError):
    """Port is outside of [0, 65535]."""


class InvalidScheme(UrlcraftError):
    """Scheme is neither http nor https."""


class InvalidPath(UrlcraftError):
    """
    Path segment content rejected.
    Reserved: every decodable segment is currently accepted.
    """


class MalformedEncoding(UrlcraftError):
    """
    Percent-encoding could not be decoded.
    Raised for a '%' not followed by two hex digits, or for bytes
    that are not valid UTF-8 when text was requested.
    """
