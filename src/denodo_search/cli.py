"""Command line interface for denodo-search."""

import logging
from argparse import ArgumentParser, Namespace
from sys import exit

from .config import parse_config, resolve_timeout
from .credentials import resolve_login_fields
from .errors import ConfigError, DenodoSearchError, RequestError
from .session import DenodoSession, execute_requests
from .utils import err


def main(argv=None):
    """Entry point for searching Denodo support case comments."""
    parser = make_parser("Log in to the Denodo portal and search case comments")
    args = parse_arguments(parser, argv)
    config_logging(args)
    try:
        search_term, credentials_file = parse_config([parser.prog, *args.arguments])
        timeout = resolve_timeout(args.timeout)
    except ConfigError as e:
        err(f"{parser.prog}: {e}")
        exit(1)

    with DenodoSession(timeout=timeout) as session:
        try:
            fields = resolve_login_fields(
                session, credentials_file, args.show_credentials
            )
            output = execute_requests(session, search_term, fields)
        except RequestError as e:
            err(f"Error executing requests to Denodo endpoints: {e}")
            exit(1)
        except DenodoSearchError as e:
            err(f"Error preparing Denodo login: {e}")
            exit(1)
        if args.verbose:
            session.print_cookies()

    print(f"search output: {output}")


def parse_arguments(parser: ArgumentParser, argv=None) -> Namespace:
    """Parse command line arguments."""
    parser.add_argument(
        "arguments",
        nargs="*",
        metavar="ARG",
        help="search term, then path to the credentials file (name=value lines); "
        "put -- before a search term that starts with -",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        metavar="SECONDS",
        help="Per-request timeout. "
        "Resolution order: 1. --timeout "
        "2. $DENODO_SEARCH_TIMEOUT "
        "3. config file "
        "4. 30 seconds",
    )
    parser.add_argument(
        "--show-credentials",
        action="store_true",
        help="Log credential values in plaintext",
    )
    return parser.parse_args(argv)


def make_parser(description: str) -> ArgumentParser:
    parser = ArgumentParser(prog="denodo-search", description=description)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress INFO and below messages"
    )
    return parser


def config_logging(args) -> None:
    """Configure logging based on command line arguments."""
    if args.quiet:
        log_level = logging.WARNING
    elif args.verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


if __name__ == "__main__":
    main()
