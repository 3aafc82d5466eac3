"""Utility functions for denodo-search."""

import sys

SENSITIVE_KEYS = {"password", "passwd", "pass", "secret", "token"}
MASK = "********"


def mask_value(name: str, value: str) -> str:
    """Mask value if name looks like a secret."""
    if name.lower() in SENSITIVE_KEYS:
        return MASK
    return value


def err(*objects, sep=" ", end="\n", flush=False) -> None:
    """Print to stderr"""
    print(*objects, sep=sep, end=end, flush=flush, file=sys.stderr)
