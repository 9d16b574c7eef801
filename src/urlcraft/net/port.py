"""src/urlcraft/net/port.py

Port validation (RFC 3986 section 3.2.3).
"""

from urlcraft.exceptions import InvalidPort

__all__ = ["MIN_PORT", "MAX_PORT", "UNSPECIFIED_PORT", "validate"]

MIN_PORT = 0
MAX_PORT = 65535

# Internal default meaning "use the scheme's port"; never valid caller input.
UNSPECIFIED_PORT = -1


def validate(port: int) -> int:
    """
    Range-check a port number.

    Returns:
        The port, unchanged.

    Raises:
        InvalidPort: If port is not an int in [0, 65535].
    """
    if isinstance(port, bool) or not isinstance(port, int):
        raise InvalidPort(f"Port must be an int, got {type(port).__name__}")
    if port < MIN_PORT or port > MAX_PORT:
        raise InvalidPort(f"Port {port} out of range [{MIN_PORT}, {MAX_PORT}]")
    return port
