"""
Logging utilities for catalog tools.

Every helper writes a detailed line to the log (console or file) and a
short, prefixed line to the status callback the CLI passes in.
"""

import logging
import os
from typing import Callable, Dict, Optional

StatusFn = Optional[Callable[[str], None]]

BANNER = "=" * 60


def setup_logging(log_file: Optional[str] = None, verbose: bool = False):
    """
    Configure root logging for a CLI run.

    Calling it again replaces the previous handlers.

    Args:
        log_file: Optional log file path (directory is created if missing)
        verbose: Log DEBUG messages when True
    """
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

    logging.basicConfig(
        filename=log_file or None,
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        force=True,
    )


def _notify(status_fn: StatusFn, text: str):
    if not status_fn:
        return
    try:
        status_fn(text)
    except Exception as e:
        logging.warning(f"Status update failed: {e}")


def _with_details(label: str, msg: str, details: Optional[str]) -> str:
    return f"{label}: {msg} | {details}" if details else f"{label}: {msg}"


def log_and_status(status_fn: StatusFn, msg: str):
    """Log an info message and show it unchanged on the status callback."""
    logging.info(msg)
    _notify(status_fn, msg)


def log_section_header(status_fn: StatusFn, title: str):
    log_and_status(status_fn, f"{BANNER}\n{title}\n{BANNER}")


def log_success(status_fn: StatusFn, msg: str, details: Optional[str] = None):
    logging.info(_with_details("SUCCESS", msg, details))
    _notify(status_fn, f"✅ {msg}")


def log_warning(status_fn: StatusFn, msg: str, details: Optional[str] = None):
    logging.warning(_with_details("WARNING", msg, details))
    _notify(status_fn, f"⚠ {msg}")


def log_error(
    status_fn: StatusFn,
    msg: str,
    details: Optional[str] = None,
    exc: Optional[BaseException] = None
):
    """
    Log an error, with the exception's traceback when one is given.

    The status callback only gets the short message.
    """
    tech_msg = _with_details("ERROR", msg, details)
    if exc is not None:
        logging.error(f"{tech_msg} | Exception: {type(exc).__name__}: {exc}", exc_info=exc)
    else:
        logging.error(tech_msg)
    _notify(status_fn, f"❌ {msg}")


def log_summary(status_fn: StatusFn, title: str, stats: Dict[str, object]):
    """Log a framed block with one "key: value" line per statistic."""
    body = [f"{key}: {value}" for key, value in stats.items()]
    log_and_status(status_fn, "\n".join(["", BANNER, title, BANNER, *body, BANNER]))
