"""
Design (utils.py)
- Purpose: Reusable helpers: user-facing date formatting, numbered result listings,
           and the desktop notification shown after an export.
- Inputs: Various helper parameters (dates, reports, export paths).
- Outputs: Helper results (strings).
- Side effects: notify_export pops an OS notification via plyer.
- Thread-safety: Stateless; safe to call from any thread.
"""

from datetime import date
from pathlib import Path
from typing import Iterable, List

from loguru import logger
from plyer import notification

from .config import APP_NAME, INPUT_DATE_FORMAT, NOTIFY_TIMEOUT_SEC
from .models import Report, ReportKind


def format_display_date(value: date) -> str:
    """Render a date the way users type it (YYYY/MM/DD)."""
    return value.strftime(INPUT_DATE_FORMAT)


def numbered_summaries(reports: Iterable[Report]) -> List[str]:
    """["1. <summary>", "2. <summary>", ...]"""
    return [f"{i}. {r.render_summary()}" for i, r in enumerate(reports, start=1)]


def notify_export(path: Path, kind: ReportKind) -> None:
    """
    Purpose: Tell the user an export file is ready.
    Side effects: OS notification. Platforms without a notification backend only get a
                  warning in the log; the export itself already succeeded.
    """
    try:
        notification.notify(
            title=f"{kind.label} report exported",
            message=str(path),
            app_name=APP_NAME,
            timeout=NOTIFY_TIMEOUT_SEC,
        )
    except Exception as exc:  # plyer raises backend-specific errors (NotImplementedError, dbus, ...)
        logger.warning("Desktop notification failed: {}", exc)
