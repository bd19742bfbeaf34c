"""Roll session records up into per-project and daily totals."""

import logging
from dataclasses import dataclass, field

from ccreceipt.proof_log import SessionRecord

log = logging.getLogger(__name__)


@dataclass
class ProjectTotals:
    name: str
    minutes: int = 0
    sessions: int = 0
    lines_added: int = 0
    files: int = 0


@dataclass
class Report:
    projects: list[ProjectTotals] = field(default_factory=list)
    total_minutes: int = 0
    total_sessions: int = 0
    total_lines: int = 0
    total_files: int = 0


def aggregate(sessions: list[SessionRecord]) -> Report:
    """Sum sessions by project, busiest project first.

    Sessions without a project are left out of every total, including the
    global ones. Projects with equal minutes keep first-seen order.
    """
    buckets: dict[str, ProjectTotals] = {}
    report = Report()
    skipped = 0

    for s in sessions:
        if not s.project:
            skipped += 1
            continue
        report.total_sessions += 1
        report.total_minutes += s.duration_minutes
        report.total_lines += s.lines_added
        report.total_files += s.files_changed

        b = buckets.get(s.project)
        if b is None:
            b = buckets[s.project] = ProjectTotals(name=s.project)
        b.minutes += s.duration_minutes
        b.sessions += 1
        b.lines_added += s.lines_added
        b.files += s.files_changed

    if skipped:
        log.debug("Skipped %d sessions without a project", skipped)

    report.projects = sorted(buckets.values(), key=lambda p: p.minutes, reverse=True)
    return report
