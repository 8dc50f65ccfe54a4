"""Submission filtering, file layout and archiving."""

from .archiver import Archiver
from .filters import directory_path, drop_duplicates, keep_accepted, keep_unarchived, pending_submissions
from .languages import language_to_filename
from .pipeline import ArchiveReport, archive_submissions
from .repository import GitRepository, NoRepository, open_repository

__all__ = [
    "Archiver",
    "ArchiveReport",
    "GitRepository",
    "NoRepository",
    "archive_submissions",
    "directory_path",
    "drop_duplicates",
    "keep_accepted",
    "keep_unarchived",
    "language_to_filename",
    "open_repository",
    "pending_submissions",
]
