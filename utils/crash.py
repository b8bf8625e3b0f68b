"""Last-resort reporting for exceptions nothing else caught."""

import json
import os
import sys
import traceback

from utils.ksuid import generate_ksuid
from utils.timestamp import format_timestamp

# Default crash log path, can be overridden by configure()
_crash_log = "logs/crash.log"
# Zero-argument callable returning a dict attached to every crash record
_context_provider = None


def configure(crash_file, context_provider=None):
    """Set crash log path and, optionally, what state to attach to reports."""
    global _crash_log, _context_provider
    _crash_log = crash_file
    _context_provider = context_provider


def _collect_context():
    if _context_provider is None:
        return None
    try:
        return _context_provider()
    except Exception as exc:
        return {"context_error": repr(exc)}


def _write_crash(record):
    """Append one JSON line to the crash log. Never raises."""
    try:
        log_dir = os.path.dirname(_crash_log)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(_crash_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(record, default=str) + "\n")
    except Exception:
        pass


def log_crash(exc_type, exc_value, exc_tb):
    """sys.excepthook replacement: report to stderr and the crash log. Never raises."""
    crash_id = generate_ksuid()
    timestamp = format_timestamp()
    exc_name = exc_type.__name__ if exc_type else "Unknown"
    exc_msg = str(exc_value) if exc_value else ""
    tb = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))

    sys.stderr.write(f"\n{'=' * 60}\nCRASH [{crash_id}] {timestamp}\n{'=' * 60}\n")
    sys.stderr.write(f"{exc_name}: {exc_msg}\n{'-' * 60}\n{tb}{'=' * 60}\n\n")

    record = {"id": crash_id, "timestamp": timestamp, "type": exc_name, "msg": exc_msg, "traceback": tb}
    context = _collect_context()
    if context:
        record["context"] = context
    error_id = getattr(exc_value, "error_id", None)
    if error_id:
        record["error_id"] = error_id
    _write_crash(record)


def install_crash_handler():
    """Install global sync exception handler."""
    sys.excepthook = log_crash
