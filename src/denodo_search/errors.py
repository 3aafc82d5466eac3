"""Exception types raised by denodo-search."""

from enum import Enum

from requests import Response


class ErrorKind(Enum):
    """What went wrong, so callers can branch without parsing messages."""

    CONFIG = "config"
    TOKEN = "token"
    IO = "io"
    HTTP = "http"
    DECODE = "decode"
    TRANSPORT = "transport"


class DenodoSearchError(Exception):
    """Base class for every error reported by the command line tool."""

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.kind = kind


class ConfigError(DenodoSearchError):
    """Exception raised when command line arguments or settings are invalid."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.CONFIG)


class ParseError(DenodoSearchError):
    """Exception raised when the login token or credentials cannot be parsed."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.TOKEN):
        super().__init__(message, kind)


class RequestError(DenodoSearchError):
    """Exception raised when a request to a Denodo endpoint fails.

    Args:
        message: Human-readable description of the failure
        stage: Which request failed ("login page", "login" or "search")
        kind: TRANSPORT, HTTP or DECODE
        status_code: HTTP status of the response, when one was received
        response: The requests.Response object, when one was received
    """

    def __init__(
        self,
        message: str,
        stage: str,
        kind: ErrorKind = ErrorKind.TRANSPORT,
        status_code: int | None = None,
        response: Response = None,
    ):
        super().__init__(message, kind)
        self.stage = stage
        self.status_code = status_code
        self.response = response
