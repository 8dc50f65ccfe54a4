"""End-to-end archival run: fetch, filter, scrape, archive."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .archiver import Archiver
from .filters import keep_accepted, pending_submissions
from ..client.client import AtCoderClient
from ..config.global_config import ServiceConfig


logger = logging.getLogger(__name__)


@dataclass
class ArchiveReport:
    """Summary of one archival run."""

    fetched: int = 0
    accepted: int = 0
    archived: int = 0
    files: List[Path] = field(default_factory=list)


def archive_submissions(
    service: ServiceConfig,
    client: AtCoderClient,
    archiver: Optional[Archiver] = None,
) -> ArchiveReport:
    """
    Archive every accepted submission of ``service.user_id`` not yet on disk.

    The first error aborts the whole run; submissions archived before it stay
    archived and are skipped next time.
    """
    repo_path = service.repository
    owns_archiver = archiver is None
    if owns_archiver:
        archiver = Archiver(repo_path, service.user_email)
    report = ArchiveReport()

    try:
        submissions = client.fetch_submissions(service.user_id)
        report.fetched = len(submissions)
        report.accepted = len(keep_accepted(submissions))

        pending = pending_submissions(repo_path, submissions)
        logger.info("Archiving %d code...", len(pending))

        for submission in pending:
            codes = client.scrape_source(submission)
            report.files.extend(archiver.archive(codes, submission))
            report.archived += 1
    finally:
        if owns_archiver:
            archiver.close()

    return report
