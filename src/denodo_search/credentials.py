"""Login form assembly: execution token plus credentials file fields.

The Denodo login page is a CAS form carrying a hidden ``execution`` input
that must be posted back along with the user's credentials. Credentials are
kept in a plain text file with one ``name=value`` pair per line, e.g.::

    username=alice
    password=secret
    _eventId=submit

Lines without ``=`` (blank lines, comments) are ignored.
"""

from logging import getLogger
from pathlib import Path
from re import compile

from .errors import ErrorKind, ParseError
from .session import DenodoSession
from .utils import mask_value

logger = getLogger(__name__)

# Attribute order and quoting must match the portal's markup exactly.
EXECUTION_PATTERN = compile(r'<input type="hidden" name="execution" value="([^"]+)"/>')
EXECUTION_FIELD = "execution"
CREDENTIAL_FIELD_COUNT = 3
EXPECTED_FIELD_COUNT = 1 + CREDENTIAL_FIELD_COUNT


def extract_execution_token(html: str) -> str:
    """Return the value of the first hidden ``execution`` input in html.

    Raises:
        ParseError: If no such input is present
    """
    match = EXECUTION_PATTERN.search(html)
    if not match or not match.group(1):
        raise ParseError("execution token not found")
    return match.group(1)


def read_credentials(path: str | Path) -> str:
    """Read the credentials file as UTF-8 text."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(
            f"could not open password file {path}: {e}", ErrorKind.IO
        ) from e


def parse_credentials(text: str, show_values: bool = False) -> list[tuple[str, str]]:
    """Split each line on its first ``=`` into a (name, value) pair."""
    properties = []
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        name, sep, value = line.partition("=")
        if not sep:
            continue
        properties.append((name, value))
        shown = value if show_values else mask_value(name, value)
        logger.info(f"property name: {name} property value: {shown}")
    return properties


def resolve_login_fields(
    session: DenodoSession, credentials_file: str | Path, show_values: bool = False
) -> list[tuple[str, str]]:
    """Build the ordered login form: execution token, then credentials.

    Args:
        session: Session used to fetch the login page; its cookies are kept
            for the login POST
        credentials_file: Path to the ``name=value`` credentials file
        show_values: Log credential values in plaintext instead of masked

    Returns:
        List of EXPECTED_FIELD_COUNT (name, value) pairs

    Raises:
        RequestError: If the login page cannot be fetched
        ParseError: If the token is missing, the file is unreadable, or the
            file does not hold exactly CREDENTIAL_FIELD_COUNT pairs
    """
    html = session.fetch_login_page()
    fields = [(EXECUTION_FIELD, extract_execution_token(html))]
    fields.extend(parse_credentials(read_credentials(credentials_file), show_values))
    if len(fields) != EXPECTED_FIELD_COUNT:
        raise ParseError(
            "username and password not present in password file: "
            f"expected {CREDENTIAL_FIELD_COUNT} fields, found {len(fields) - 1}",
            ErrorKind.CONFIG,
        )
    return fields
