"""
Design (export.py)
- Purpose: Write human-readable dump files of one report kind.
- Inputs: Reports already filtered to one kind, the kind, destination folder, generation time.
- Outputs: Path of the written file.
- Side effects: Creates the destination folder; writes (or overwrites) one text file.
- Failure: ReportIOError when the folder cannot be created or the file cannot be written.

File layout:
    <Kind> report generated on YYYY-MM-DD HH:MM:SS
    ----------------------------------------
    <summary line per report>
"""

from datetime import datetime
from pathlib import Path
from typing import Iterable

from loguru import logger

from .config import (
    EXPORT_FILENAME_PREFIX,
    EXPORT_SEPARATOR,
    EXPORT_TIMESTAMP_FORMAT,
    EXPORT_TITLE_TIMESTAMP_FORMAT,
)
from .exceptions import ReportIOError
from .models import Report, ReportKind


def export_filename(kind: ReportKind, generated_at: datetime) -> str:
    """e.g. Report_Hardware_2024-02-01_14-03-09.txt (two exports in the same second share a name)."""
    return f"{EXPORT_FILENAME_PREFIX}_{kind.label}_{generated_at.strftime(EXPORT_TIMESTAMP_FORMAT)}.txt"


def write_export(reports: Iterable[Report], kind: ReportKind, folder: Path, generated_at: datetime) -> Path:
    lines = [
        f"{kind.label} report generated on {generated_at.strftime(EXPORT_TITLE_TIMESTAMP_FORMAT)}",
        EXPORT_SEPARATOR,
    ]
    lines.extend(r.render_summary() for r in reports)

    path = folder / export_filename(kind, generated_at)
    try:
        folder.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
    except OSError as exc:
        raise ReportIOError(f"Could not write export file {path}: {exc}") from exc

    logger.info("Exported {} {} report(s) to {}", len(lines) - 2, kind.value, path)
    return path
