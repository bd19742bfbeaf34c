"""Render a Report as a fixed-width box-drawing receipt."""

import math
from dataclasses import dataclass
from datetime import date

from rich.cells import cell_len

from ccreceipt.aggregate import Report
from ccreceipt.dates import day_name, format_day

NARROW_WIDTH = 36
WIDE_WIDTH = 44
NAME_LIMIT = 20
INVOCATION_HINT = "uvx cc-receipt"


@dataclass
class ReceiptOptions:
    sleep_hours: int = 7
    wide: bool = False

    @property
    def width(self) -> int:
        return WIDE_WIDTH if self.wide else NARROW_WIDTH


# --- Formatting ---

def fmt_duration(minutes: int) -> str:
    """Format minutes as '45m', '2h' or '1h 05m'."""
    h, m = divmod(minutes, 60)
    if h == 0:
        return f"{m}m"
    if m == 0:
        return f"{h}h"
    return f"{h}h {m:02d}m"


def fmt_num(n: int) -> str:
    """Format an integer with thousands separators."""
    return f"{n:,}"


def truncate(text: str, max_length: int = NAME_LIMIT) -> str:
    """Truncate text to max_length, appending '…' if truncated."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 1] + "…"


def verdict(total_minutes: int, sleep_minutes: int) -> str:
    """Compare AI active time against human sleep."""
    ratio = total_minutes / max(sleep_minutes, 1)
    if total_minutes == 0:
        return "NO ACTIVITY RECORDED"
    if ratio >= 2:
        return "AI WORKED WHILE YOU SLEPT"
    if ratio >= 1:
        # Half rounds up, not to even.
        return f"AI: {math.floor(ratio * 100 + 0.5)}% OF YOUR SLEEP"
    if ratio >= 0.5:
        return "AI HALF-WORKING"
    return "LIGHT AI ACTIVITY"


# --- Layout ---

def pad_row(left: str, right: str, width: int) -> str:
    """Bordered row with *left* flush left and *right* flush right.

    At least one space separates them; an over-long row overflows the border
    rather than losing text.
    """
    spaces = max(1, width - cell_len(left) - cell_len(right))
    return f"║ {left}{' ' * spaces}{right} ║"


def center_row(s: str, width: int) -> str:
    """Bordered row with *s* centered, extra space going to the right."""
    spaces = max(0, width - cell_len(s))
    left = spaces // 2
    return f"║ {' ' * left}{s}{' ' * (spaces - left)} ║"


def top_rule(w: int) -> str:
    return f"╔{'═' * w}╗"


def header_rule(w: int) -> str:
    return f"╠{'═' * w}╣"


def divider(w: int) -> str:
    return f"╟{'─' * w}╢"


def bottom_rule(w: int) -> str:
    return f"╚{'═' * w}╝"


def hint_line(w: int, hint: str = INVOCATION_HINT) -> str:
    return " " * ((w + 2 - cell_len(hint)) // 2) + hint


# --- Sections ---

def _header(target: date, w: int) -> list[str]:
    inner = w - 2
    return [
        top_rule(w),
        center_row("AI  WORK  RECEIPT", inner),
        center_row(f"{format_day(target)}  ({day_name(target)})", inner),
        header_rule(w),
    ]


def _ghost_day(w: int) -> list[str]:
    inner = w - 2
    return [
        center_row("", inner),
        center_row("👻  GHOST DAY", inner),
        center_row("AI worked autonomously.", inner),
        center_row("No sessions logged.", inner),
        center_row("", inner),
    ]


def _projects(report: Report, w: int) -> list[str]:
    if not report.projects:
        return []
    inner = w - 2
    out = [center_row("— PROJECTS —", inner)]
    for p in report.projects:
        out.append(pad_row(truncate(p.name), fmt_duration(p.minutes), inner))
        parts = []
        if p.sessions > 0:
            parts.append(f"{fmt_num(p.sessions)} sessions")
        if p.lines_added > 0:
            parts.append(f"+{fmt_num(p.lines_added)} lines")
        if parts:
            out.append(center_row(f"↳ {'  '.join(parts)}", inner))
    out.append(divider(w))
    return out


def _totals(report: Report, w: int) -> list[str]:
    inner = w - 2
    out = [pad_row("AI ACTIVE TIME", fmt_duration(report.total_minutes), inner)]
    if report.total_sessions > 0:
        out.append(pad_row("SESSIONS", fmt_num(report.total_sessions), inner))
    if report.total_lines > 0:
        out.append(pad_row("LINES ADDED", f"+{fmt_num(report.total_lines)}", inner))
    if report.total_files > 0:
        out.append(pad_row("FILES TOUCHED", fmt_num(report.total_files), inner))
    out.append(divider(w))
    return out


def _sleep(sleep_minutes: int, w: int) -> list[str]:
    inner = w - 2
    return [
        pad_row("YOUR SLEEP", fmt_duration(sleep_minutes), inner),
        pad_row("AI SLEEP", "0m", inner),
        divider(w),
    ]


def render_receipt(target: date, report: Report | None, options: ReceiptOptions | None = None) -> str:
    """Render the receipt for *target*.

    A *report* of None means no proof-log exists for the day and yields the
    ghost-day variant, which has no totals or verdict.
    """
    options = options or ReceiptOptions()
    w = options.width
    out = _header(target, w)

    if report is None:
        out.extend(_ghost_day(w))
    else:
        sleep_minutes = options.sleep_hours * 60
        out.extend(_projects(report, w))
        out.extend(_totals(report, w))
        out.extend(_sleep(sleep_minutes, w))
        out.append(center_row(verdict(report.total_minutes, sleep_minutes), w - 2))

    out.append(bottom_rule(w))
    out.append("")
    out.append(hint_line(w))
    return "\n".join(out)
