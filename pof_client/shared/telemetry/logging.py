"""Logging configuration for the client."""

import logging
import sys

from pof_client.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(debug: bool | None = None) -> None:
    """Configure process-wide logging on stderr.

    stdout stays free for command output (run_proof_flow prints JSON there).
    Level is DEBUG when debug (default: settings.debug) is true, otherwise
    INFO; httpx and httpcore are held at WARNING unless debugging.
    """
    if debug is None:
        debug = get_settings().debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
