"""src/urlcraft/net/scheme.py

Supported URL schemes and their default ports.
"""

from enum import Enum

from urlcraft.exceptions import InvalidScheme

__all__ = ["Scheme"]


class Scheme(Enum):
    """HTTP and HTTPS. Adding a scheme means adding a member here."""

    HTTP = ("http", 80)
    HTTPS = ("https", 443)

    def __init__(self, scheme_name: str, default_port: int):
        self.scheme_name = scheme_name
        self.default_port = default_port

    @classmethod
    def from_name(cls, name: str) -> "Scheme":
        """
        Look up a scheme by name, case-insensitively.

        Raises:
            InvalidScheme: If name is not a supported scheme.
        """
        lowered = name.lower()
        for scheme in cls:
            if scheme.scheme_name == lowered:
                return scheme
        raise InvalidScheme(f"Unsupported scheme: {name!r}")

    def __str__(self) -> str:
        return self.scheme_name
