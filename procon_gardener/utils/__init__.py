"""Utility functions."""

from .logger import setup_logging
from .rate_limiter import Throttle
from .terminal import console, open_in_editor

__all__ = ["console", "open_in_editor", "setup_logging", "Throttle"]
