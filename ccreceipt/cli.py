"""Print an ASCII receipt of the AI's daily work from the proof-log."""

import argparse
import logging
import os
import sys
from datetime import date
from pathlib import Path

import orjson
from rich.console import Console
from rich.logging import RichHandler

from ccreceipt.aggregate import Report, aggregate
from ccreceipt.dates import parse_day, yesterday
from ccreceipt.proof_log import parse_proof_log
from ccreceipt.receipt import ReceiptOptions, render_receipt, verdict

log = logging.getLogger(__name__)

DEFAULT_LOG_DIR = "~/ops/proof-log"
LOG_DIR_ENV = "CC_RECEIPT_DIR"
LOG_SUFFIX = ".md"

# Receipt text goes out verbatim: no markup, emoji codes or highlighting.
console = Console(soft_wrap=True, markup=False, emoji=False, highlight=False)


def default_log_dir() -> str:
    """Return the proof-log dir. Honors CC_RECEIPT_DIR, defaults to ~/ops/proof-log."""
    return os.environ.get(LOG_DIR_ENV) or DEFAULT_LOG_DIR


def resolve_log_file(log_dir: str, target: date) -> Path:
    """Return path: <log_dir>/<YYYY-MM-DD>.md with ~ expanded."""
    return Path(log_dir).expanduser().resolve() / f"{target.isoformat()}{LOG_SUFFIX}"


def load_report(path: Path) -> Report | None:
    """Read and aggregate the proof-log at *path*; None when there is no file.

    Raises OSError or UnicodeDecodeError if the file exists but can't be read.
    """
    log.debug("Reading %s", path)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log.debug("No proof-log at %s, ghost day", path)
        return None
    return aggregate(parse_proof_log(content))


def report_json(target: date, report: Report | None, sleep_hours: int) -> None:
    """Output the aggregated day as JSON for programmatic use."""
    sleep_minutes = sleep_hours * 60
    data = report or Report()
    output = {
        "date": target.isoformat(),
        "ghost_day": report is None,
        "projects": [
            {
                "name": p.name,
                "minutes": p.minutes,
                "sessions": p.sessions,
                "lines_added": p.lines_added,
                "files": p.files,
            }
            for p in data.projects
        ],
        "total_minutes": data.total_minutes,
        "total_sessions": data.total_sessions,
        "total_lines": data.total_lines,
        "total_files": data.total_files,
        "sleep_minutes": sleep_minutes,
        "verdict": None if report is None else verdict(data.total_minutes, sleep_minutes),
    }
    print(orjson.dumps(output, option=orjson.OPT_INDENT_2).decode())


def _date_arg(s: str) -> date:
    try:
        return parse_day(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{s}' (expected YYYY-MM-DD)")


def _hours_arg(s: str) -> int:
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hours '{s}'")
    if n < 0:
        raise argparse.ArgumentTypeError(f"hours must not be negative, got {n}")
    return n


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cc-receipt",
        description="ASCII receipt of your AI's daily work, read from the proof-log.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n"
               "  cc-receipt                      Yesterday's receipt\n"
               "  cc-receipt --date=2026-02-27\n"
               "  cc-receipt --sleep=8            Set your sleep hours\n"
               "  cc-receipt --wide               Wider receipt format\n",
    )
    parser.add_argument("--date", type=_date_arg, help="Specific date, YYYY-MM-DD (default: yesterday)")
    parser.add_argument("--dir", dest="log_dir", default=default_log_dir(),
                        help=f"Proof-log directory (default: ${LOG_DIR_ENV} or {DEFAULT_LOG_DIR})")
    parser.add_argument("--sleep", type=_hours_arg, default=7, help="Your sleep hours for comparison (default: 7)")
    parser.add_argument("--wide", action="store_true", help="Wider receipt format")
    parser.add_argument("--json", "-j", action="store_true", help="Output as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug details to stderr")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    target = args.date or yesterday()
    path = resolve_log_file(args.log_dir, target)

    try:
        report = load_report(path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: Cannot read {path}: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        report_json(target, report, args.sleep)
        return

    console.print(render_receipt(target, report, ReceiptOptions(sleep_hours=args.sleep, wide=args.wide)))


if __name__ == "__main__":
    main()
