"""tests/unit/test_exceptions.py"""

import pytest

from urlcraft.exceptions import (
    InvalidHost,
    InvalidPath,
    InvalidPort,
    InvalidScheme,
    MalformedEncoding,
    UrlcraftError,
)


def test_exception_hierarchy():
    """Verify the inheritance structure of urlcraft exceptions."""
    assert issubclass(UrlcraftError, Exception)
    for exc in (InvalidHost, InvalidPort, InvalidScheme, InvalidPath, MalformedEncoding):
        assert issubclass(exc, UrlcraftError)


def test_errors_are_distinct():
    """Verify no error is a subclass of another leaf error."""
    assert not issubclass(InvalidHost, InvalidPort)
    assert not issubclass(MalformedEncoding, InvalidHost)


@pytest.mark.parametrize(
    "exception_class",
    [
        UrlcraftError,
        InvalidHost,
        InvalidPort,
        InvalidScheme,
        InvalidPath,
        MalformedEncoding,
    ],
)
def test_exceptions_accept_message(exception_class):
    """Verify that exceptions can be raised with a message."""
    message = f"Testing {exception_class.__name__}"
    with pytest.raises(exception_class) as exc_info:
        raise exception_class(message)
    assert message in str(exc_info.value)


def test_catch_all_with_base():
    """Verify the base class catches validation errors from the API."""
    from urlcraft import http

    with pytest.raises(UrlcraftError):
        http("999.1.1.1")
