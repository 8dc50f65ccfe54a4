"""Write scraped source code into the archive tree and commit it."""

import logging
from pathlib import Path
from typing import List, Sequence, Union

from .filters import directory_path
from .languages import language_to_filename
from .repository import open_repository
from ..client.models import Submission
from ..errors import ArchiveIOError


logger = logging.getLogger(__name__)


def commit_message(submission: Submission) -> str:
    execution_time = submission.execution_time if submission.execution_time is not None else 0
    return (
        f"✅ {submission.contest_id} {submission.problem_id} "
        f"{execution_time}ms {submission.url}"
    )


def block_filename(filename: str, index: int) -> str:
    """Name of the ``index``-th code block: Main.cpp, Main_2.cpp, Main_3.cpp..."""
    if index == 0:
        return filename
    path = Path(filename)
    return f"{path.stem}_{index + 1}{path.suffix}"


class Archiver:
    """Stores submissions under ``repo_path`` and commits them if it is a git repository."""

    def __init__(self, repo_path: Union[str, Path], user_email: str = ""):
        self.repo_path = Path(repo_path)
        self.user_email = user_email
        self._repository = None

    @property
    def repository(self):
        """Version control handle, probed on first use."""
        if self._repository is None:
            self._repository = open_repository(self.repo_path)
        return self._repository

    def close(self):
        if self._repository is not None:
            self._repository.close()
            self._repository = None

    def write_file(self, code: str, directory: Path, filename: str) -> Path:
        path = directory / filename
        try:
            directory.mkdir(mode=0o700, parents=True, exist_ok=True)
            # Bytes as scraped, no newline translation
            path.write_bytes(code.encode("utf-8"))
        except OSError as e:
            raise ArchiveIOError(f"Failed to archive the code: {e}", path) from e
        return path

    def archive(self, codes: Sequence[str], submission: Submission) -> List[Path]:
        """
        Write every code block of a submission and commit each file.

        Args:
            codes: Source code blocks scraped from the submission page
            submission: The submission they belong to

        Returns:
            Paths of the written files
        """
        filename = language_to_filename(submission.language)
        directory = directory_path(self.repo_path, submission)
        message = commit_message(submission)

        written = []
        for index, code in enumerate(codes):
            path = self.write_file(code, directory, block_filename(filename, index))
            logger.info("Archived the code at %s", path)
            self.repository.commit_file(
                path,
                message,
                author_name=submission.user_id,
                author_email=self.user_email,
                epoch_second=submission.epoch_second,
            )
            written.append(path)
        return written
