"""Global test fixtures for denodo-search."""

from pathlib import Path

import pytest
from pytest import fixture
from requests import Response


def pytest_addoption(parser):
    """Add custom pytest command line options."""
    parser.addoption(
        "--e2e",
        action="store_true",
        default=False,
        help="run end-to-end tests",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "e2e: mark test as end-to-end test")


def pytest_collection_modifyitems(config, items):
    """Skip end-to-end tests unless --e2e option is used."""
    if config.getoption("--e2e"):
        # When --e2e is used, run all tests including end-to-end tests
        return

    skip_e2e = pytest.mark.skip(reason="need --e2e option to run")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


def make_response(
    status_code: int = 200,
    content: bytes = b"",
    encoding: str | None = "utf-8",
    headers: dict | None = None,
    url: str = "https://auth.denodo.com/login",
) -> Response:
    """Build a real requests.Response without touching the network."""
    response = Response()
    response.status_code = status_code
    response._content = content
    response.encoding = encoding
    response.url = url
    response.headers.update(headers or {})
    return response


@fixture(scope="session")
def fixtures_dir() -> Path:
    """Return path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@fixture(scope="session")
def login_page_html(fixtures_dir) -> str:
    """Sanitized copy of the Denodo CAS login page."""
    return (fixtures_dir / "login_page.html").read_text(encoding="utf-8")


@fixture(scope="session")
def credentials_path(fixtures_dir) -> Path:
    """Credentials file with username, password and _eventId."""
    return fixtures_dir / "credentials.txt"


@fixture
def login_page_response(login_page_html) -> Response:
    return make_response(200, login_page_html.encode("utf-8"))


@fixture
def response_factory():
    """Return a factory building requests.Response objects."""
    return make_response
