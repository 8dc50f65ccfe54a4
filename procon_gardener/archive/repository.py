"""
Version control handle for the archive root.

``open_repository`` probes the archive root once and returns either a git
working tree or a handle that records nothing.
"""

import logging
from pathlib import Path
from typing import Union

import git
from git.exc import GitError

from ..errors import VCSError


logger = logging.getLogger(__name__)


class NoRepository:
    """Archive root that is not under version control."""

    def __init__(self, root: Path):
        self.root = root

    def commit_file(self, path: Path, message: str, author_name: str, author_email: str, epoch_second: int) -> None:
        logger.debug("%s is not a git repository, skipping commit", self.root)

    def close(self) -> None:
        pass


class GitRepository:
    """Archive root that is a git working tree."""

    def __init__(self, root: Path):
        self.root = root
        try:
            self.repo = git.Repo(root)
        except (GitError, OSError) as e:
            raise VCSError(f"Cannot open git repository: {e}", root) from e

    def commit_file(self, path: Path, message: str, author_name: str, author_email: str, epoch_second: int) -> None:
        """Stage a single file and commit it, dated at ``epoch_second`` (UTC)."""
        relative = Path(path).relative_to(self.root).as_posix()
        actor = git.Actor(author_name, author_email)
        date = f"{epoch_second} +0000"
        try:
            self.repo.index.add([relative])
            commit = self.repo.index.commit(
                message,
                author=actor,
                committer=actor,
                author_date=date,
                commit_date=date,
            )
        except (GitError, OSError, ValueError) as e:
            raise VCSError(f"Cannot commit {relative}: {e}", self.root) from e
        logger.debug("Committed %s as %s", relative, commit.hexsha[:7])

    def close(self) -> None:
        """Stop the git helper processes GitPython keeps alive."""
        self.repo.close()


def open_repository(root: Union[str, Path]) -> Union[GitRepository, NoRepository]:
    root = Path(root)
    if (root / ".git").is_dir():
        return GitRepository(root)
    return NoRepository(root)
