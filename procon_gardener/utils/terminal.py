"""Utility functions for terminal output and external programs."""

import logging
import os
import shlex
import subprocess
from pathlib import Path

import click
from rich.console import Console

from ..errors import ConfigError

console = Console()
logger = logging.getLogger(__name__)


def open_in_editor(path: Path) -> None:
    """
    Open a file for editing.
    Uses $EDITOR when set, otherwise the program registered with the OS.
    """
    editor = os.environ.get("EDITOR")
    if editor:
        logger.debug("Opening %s with %s", path, editor)
        try:
            subprocess.run(shlex.split(editor) + [str(path)], check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            raise ConfigError(f"Editor {editor!r} failed: {e}", path) from e
        return

    logger.debug("Opening %s with the default application", path)
    if click.launch(str(path)) != 0:
        raise ConfigError("Could not open the config file", path)
