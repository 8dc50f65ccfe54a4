"""Reduce the submission history to what still needs archiving."""

from pathlib import Path
from typing import Iterable, List, Union

from ..client.models import Submission


def directory_path(repo_path: Union[str, Path], submission: Submission) -> Path:
    """Archive directory of a submission: root/contest/problem/id."""
    return Path(repo_path) / submission.contest_id / submission.problem_id / str(submission.id)


def keep_accepted(submissions: Iterable[Submission]) -> List[Submission]:
    return [s for s in submissions if s.is_accepted]


def keep_unarchived(repo_path: Union[str, Path], submissions: Iterable[Submission]) -> List[Submission]:
    """Drop submissions whose archive directory already exists, even if incomplete."""
    return [s for s in submissions if not directory_path(repo_path, s).is_dir()]


def sort_oldest_first(submissions: Iterable[Submission]) -> List[Submission]:
    return sorted(submissions, key=lambda s: s.epoch_second)


def drop_duplicates(submissions: Iterable[Submission]) -> List[Submission]:
    """Keep the first record of each submission id.

    Pages overlap at the watermark second, so a record can be fetched twice.
    """
    seen = set()
    unique = []
    for s in submissions:
        if s.id not in seen:
            seen.add(s.id)
            unique.append(s)
    return unique


def pending_submissions(repo_path: Union[str, Path], submissions: Iterable[Submission]) -> List[Submission]:
    """Accepted, not yet archived submissions in chronological order."""
    unique = drop_duplicates(keep_accepted(submissions))
    return sort_oldest_first(keep_unarchived(repo_path, unique))
