"""Command line configuration for denodo-search."""

import logging
import math
import os
import tomllib
from collections.abc import Sequence

from .errors import ConfigError

logger = logging.getLogger(__name__)

USAGE = "Two arguments should be provided: 'search term' 'credentials file'"
CONFIG_PATH = "~/.config/denodo-search/config.toml"
TIMEOUT_ENV_VAR = "DENODO_SEARCH_TIMEOUT"
DEFAULT_TIMEOUT = 30.0


def parse_config(args: Sequence[str]) -> tuple[str, str]:
    """Return (search term, credentials file) from an argv-style sequence.

    Raises:
        ConfigError: If args is not exactly program name plus two arguments
    """
    if len(args) != 3:
        raise ConfigError(USAGE)
    return args[1], args[2]


def resolve_timeout(option: float | None = None, config_path: str = CONFIG_PATH) -> float:
    """Resolve the per-request timeout in seconds."""
    # 1. Command-line option
    if option is not None:
        return check_timeout(option, "--timeout")

    # 2. Environment variable
    env_value = os.environ.get(TIMEOUT_ENV_VAR)
    if env_value:
        return check_timeout(env_value, f"${TIMEOUT_ENV_VAR}")

    # 3. Config file (~/.config/denodo-search/config.toml)
    path = os.path.expanduser(config_path)
    if os.path.exists(path):
        with open(path, "rb") as f:
            try:
                config = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid config file {path}: {e}") from e
        if "timeout" in config:
            logger.debug(f"Using timeout from {path}")
            return check_timeout(config["timeout"], path)

    # 4. Fallback
    return DEFAULT_TIMEOUT


def check_timeout(value, source: str) -> float:
    """Convert a timeout setting to a positive float."""
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid timeout from {source}: {value!r}") from None
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigError(f"Timeout from {source} must be a positive number, got {timeout}")
    return timeout
