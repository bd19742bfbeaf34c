"""Parse daily proof-log markdown into session records."""

import logging
import re
from dataclasses import dataclass, replace
from typing import NamedTuple

log = logging.getLogger(__name__)

# Labels are written by the logging hook in Japanese; treat them as opaque markers.
# re.ASCII keeps \d to [0-9] so full-width digits never reach int().
SESSION_HEADER = re.compile(r"^### (\d{4}-\d{2}-\d{2}) (\d{2}:\d{2})-(\d{2}:\d{2}) JST", re.ASCII)
WHERE_LINE = re.compile(r"^- どこで: (.+)$", re.ASCII)
WHO_LINE = re.compile(r"^- 誰が: CC: (\d+)件", re.ASCII)
WHAT_LINE = re.compile(r"^- 何を: (\d+)ファイル変更 \(\+(\d+)/-(\d+)\)", re.ASCII)
DURATION_LINE = re.compile(r"^- いつ: .+JST（(\d+)分）", re.ASCII)

HEADER = "header"
WHERE = "where"
WHO = "who"
WHAT = "what"
DURATION = "duration"


@dataclass(frozen=True)
class SessionRecord:
    duration_minutes: int = 0
    project: str | None = None
    cc_actions: int = 0  # parsed, not aggregated
    files_changed: int = 0
    lines_added: int = 0
    lines_removed: int = 0


class LogEvent(NamedTuple):
    kind: str
    values: tuple


def classify_line(line: str) -> LogEvent | None:
    """Classify one trimmed line, or return None when it is not a known shape."""
    if m := SESSION_HEADER.match(line):
        return LogEvent(HEADER, m.groups())
    if m := DURATION_LINE.match(line):
        return LogEvent(DURATION, (int(m.group(1)),))
    if m := WHERE_LINE.match(line):
        return LogEvent(WHERE, (m.group(1).strip(),))
    if m := WHO_LINE.match(line):
        return LogEvent(WHO, (int(m.group(1)),))
    if m := WHAT_LINE.match(line):
        return LogEvent(WHAT, tuple(int(g) for g in m.groups()))
    return None


def _apply(current: SessionRecord, event: LogEvent) -> SessionRecord:
    """Return *current* with the detail carried by *event* filled in."""
    if event.kind == DURATION:
        return replace(current, duration_minutes=event.values[0])
    if event.kind == WHERE:
        return replace(current, project=event.values[0])
    if event.kind == WHO:
        return replace(current, cc_actions=event.values[0])
    if event.kind == WHAT:
        files, added, removed = event.values
        return replace(current, files_changed=files, lines_added=added, lines_removed=removed)
    return current


def iter_events(text: str):
    """Yield a LogEvent for every recognized line of *text*, in order."""
    for raw in text.split("\n"):
        event = classify_line(raw.strip())
        if event is not None:
            yield event


def parse_proof_log(text: str) -> list[SessionRecord]:
    """Parse a whole proof-log into session records.

    A header opens a new record and seals the previous one; detail lines fill
    in the open record. Detail lines before the first header and lines that
    match no known shape (including ones with non-numeric counts) are skipped.
    """
    sessions: list[SessionRecord] = []
    current: SessionRecord | None = None

    for event in iter_events(text):
        if event.kind == HEADER:
            if current is not None:
                sessions.append(current)
            current = SessionRecord()
            continue
        if current is None:
            continue
        current = _apply(current, event)

    if current is not None:
        sessions.append(current)

    log.debug("Parsed %d sessions", len(sessions))
    return sessions
