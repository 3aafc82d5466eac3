"""denodo-search package for querying Denodo support case comments."""

from importlib.metadata import PackageNotFoundError, version

from .config import parse_config, resolve_timeout
from .credentials import (
    EXPECTED_FIELD_COUNT,
    extract_execution_token,
    parse_credentials,
    read_credentials,
    resolve_login_fields,
)
from .errors import ConfigError, DenodoSearchError, ErrorKind, ParseError, RequestError
from .session import DenodoSession, ExecutorState, execute_requests, search_url

try:
    __version__ = version("denodo-search")
except PackageNotFoundError:
    # Package is not installed, use fallback version
    __version__ = "UNKNOWN"

__all__ = [
    "EXPECTED_FIELD_COUNT",
    "ConfigError",
    "DenodoSearchError",
    "DenodoSession",
    "ErrorKind",
    "ExecutorState",
    "ParseError",
    "RequestError",
    "execute_requests",
    "extract_execution_token",
    "parse_config",
    "parse_credentials",
    "read_credentials",
    "resolve_login_fields",
    "resolve_timeout",
    "search_url",
]
