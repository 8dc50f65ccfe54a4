"""
Logging configuration.

Every module logs through ``logging.getLogger(__name__)``; this module wires
the ``procon_gardener`` logger to a rich handler on stderr.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


APP_LOGGER = "procon_gardener"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Set up the application logger.

    Args:
        verbose: log DEBUG records as well (default: INFO)

    Returns:
        The configured application logger
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        log_time_format="[%X]",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
