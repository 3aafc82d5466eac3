"""DenodoSession class for authenticating against Denodo and searching."""

import logging
from collections.abc import Sequence
from enum import Enum
from urllib.parse import quote

from requests import RequestException, Response, Session

from .config import DEFAULT_TIMEOUT
from .errors import ErrorKind, ParseError, RequestError

logger = logging.getLogger(__name__)

AUTH_URL = "https://auth.denodo.com/login"
SEARCH_BASE_URL = "https://search.denodo.com/results/ajax"
SEARCH_ENDPOINT = "casesCaseComments"
SEARCH_VERSION = 8


class ExecutorState(Enum):
    """Progress of the login-then-search request chain."""

    INIT = "init"
    LOGIN_SENT = "login sent"
    LOGIN_OK = "login ok"
    LOGIN_FAILED = "login failed"
    SEARCH_SENT = "search sent"
    SEARCH_OK = "search ok"
    SEARCH_FAILED = "search failed"


class DenodoSession(Session):
    """Session class for the Denodo auth and search portals.

    Cookies set by the login page and the login POST are kept in the
    session's in-memory jar and sent with the search request.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        super().__init__()
        self.timeout = timeout
        self.state = ExecutorState.INIT

    def fetch_login_page(self) -> str:
        """GET the login page and return its HTML."""
        response = self.send_request("GET", AUTH_URL, "login page")
        if not response.ok:
            raise RequestError(
                f"Error sending request; HTTP response: {response.status_code}",
                "login page",
                ErrorKind.HTTP,
                response.status_code,
                response,
            )
        logger.info("Retrieved auth page")
        try:
            return decode_body(response)
        except (UnicodeDecodeError, LookupError) as e:
            raise ParseError(
                f"Error parsing text for response: {e}", ErrorKind.DECODE
            ) from e

    def login(self, fields: Sequence[tuple[str, str]]) -> Response:
        """POST the login form fields, in order, as a URL-encoded body."""
        self.state = ExecutorState.LOGIN_SENT
        try:
            response = self.send_request("POST", AUTH_URL, "login", data=list(fields))
        except RequestError:
            self.state = ExecutorState.LOGIN_FAILED
            raise
        if response.status_code != 200:
            self.state = ExecutorState.LOGIN_FAILED
            raise RequestError(
                f"Error sending request; HTTP response: {response.status_code}, "
                f"Body: {best_effort_text(response)!r}",
                "login",
                ErrorKind.HTTP,
                response.status_code,
                response,
            )
        self.state = ExecutorState.LOGIN_OK
        logger.info("Authenticated successfully")
        log_cookies_and_headers(response)
        return response

    def search(self, search_term: str) -> str:
        """GET the case comments search results for search_term."""
        if self.state is not ExecutorState.LOGIN_OK:
            raise RequestError(
                f"Cannot search before a successful login (state: {self.state.value})",
                "search",
            )
        self.state = ExecutorState.SEARCH_SENT
        try:
            response = self.send_request("GET", search_url(search_term), "search")
        except RequestError:
            self.state = ExecutorState.SEARCH_FAILED
            raise
        if response.status_code != 200:
            self.state = ExecutorState.SEARCH_FAILED
            raise RequestError(
                f"failed to search; HTTP status code: {response.status_code}",
                "search",
                ErrorKind.HTTP,
                response.status_code,
                response,
            )
        try:
            text = decode_body(response)
        except (UnicodeDecodeError, LookupError) as e:
            self.state = ExecutorState.SEARCH_FAILED
            raise RequestError(
                f"Could not parse text from response: {e}",
                "search",
                ErrorKind.DECODE,
                response.status_code,
                response,
            ) from e
        self.state = ExecutorState.SEARCH_OK
        logger.info("Searched successfully")
        return text

    def send_request(self, method: str, url: str, stage: str, **kwargs) -> Response:
        """Perform a request with the session timeout and wrap transport errors."""
        logger.debug(f"{method} {url}")
        try:
            return self.request(method, url, timeout=self.timeout, **kwargs)
        except RequestException as e:
            raise RequestError(
                f"Request to {stage} endpoint failed: {e}", stage
            ) from e

    def print_cookies(self) -> None:
        """Print all cookies in the session."""
        if self.cookies:
            print("Cookies received:")
            for cookie in self.cookies:
                print(f"  {cookie.name}: {cookie.value}")
        else:
            print("No cookies received")


def execute_requests(
    session: DenodoSession, search_term: str, fields: Sequence[tuple[str, str]]
) -> str:
    """Log in with fields, then search for search_term and return the raw body.

    Raises:
        RequestError: If either request fails; the search is not sent when
            the login fails
    """
    session.login(fields)
    return session.search(search_term)


def search_url(search_term: str) -> str:
    """Build the search URL with search_term percent-encoded as the filter."""
    return (
        f"{SEARCH_BASE_URL}/{SEARCH_ENDPOINT}"
        f"?filter={quote(search_term, safe='')}&version={SEARCH_VERSION}"
    )


def decode_body(response: Response) -> str:
    """Decode the response body strictly, using the declared charset."""
    return response.content.decode(response.encoding or "utf-8")


def best_effort_text(response: Response) -> str:
    try:
        return decode_body(response)
    except (UnicodeDecodeError, LookupError):
        return response.content.decode("utf-8", errors="replace")


def log_cookies_and_headers(response: Response) -> None:
    """Log the cookies and headers returned by a response."""
    cookies = list(response.cookies)
    logger.info(f"num cookies: {len(cookies)}")
    for cookie in cookies:
        logger.debug(f"Cookie name: {cookie.name}, cookie value: {cookie.value}")
    for k, v in response.headers.items():
        logger.debug(f"Authentication header {k}, value: {v}")
