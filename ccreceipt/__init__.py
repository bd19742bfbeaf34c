"""ASCII receipt of an AI's daily work, read from the proof-log."""

from ccreceipt.aggregate import ProjectTotals, Report, aggregate
from ccreceipt.proof_log import SessionRecord, parse_proof_log
from ccreceipt.receipt import ReceiptOptions, render_receipt

__version__ = "0.1.0"

__all__ = [
    "ProjectTotals",
    "ReceiptOptions",
    "Report",
    "SessionRecord",
    "aggregate",
    "parse_proof_log",
    "render_receipt",
]
