import pytest

from urlcraft import https


@pytest.fixture
def sample_url():
    """Fixture providing a URL that uses every component."""
    return (
        https("www.example.com:8443")
        .path("docs", "Molière", "index.html")
        .query([("q", "π²"), ("page", "2")])
        .fragment("top")
        .build()
    )
