"""Exceptions raised by the archival pipeline."""

from pathlib import Path
from typing import Optional, Union


class GardenerError(Exception):
    """Base class for every error the CLI reports to the user."""


class _UrlError(GardenerError):
    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url

    def __str__(self) -> str:
        message = super().__str__()
        if self.url:
            return f"{message} ({self.url})"
        return message


class _PathError(GardenerError):
    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        if self.path:
            return f"{message} ({self.path})"
        return message


class NetworkError(_UrlError):
    """Transport failure or non-success HTTP status."""


class DecodeError(_UrlError):
    """Malformed gzip/JSON body or submission record."""


class ParseError(_UrlError):
    """Submission page does not have the expected structure."""


class EmptyContentError(_UrlError):
    """A source code block on a submission page is empty."""


class ArchiveIOError(_PathError):
    """Creating a directory or writing a source file failed."""


class VCSError(_PathError):
    """Opening, staging or committing in the archive repository failed."""


class ConfigError(_PathError):
    """Configuration file is missing, unreadable or incomplete."""
