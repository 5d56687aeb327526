"""
Design (repository.py)
- Purpose: Own the report collection behind a small API so the UI never touches the list
           directly. Every add rewrites the data file; queries never fail.
- Inputs: Validated report objects, query keys (equipment id, severity, date, kind).
- Outputs: Fresh lists (copies) of matching reports, dates, export file paths.
- Side effects: add_report() rewrites the data file; export_reports() writes a text file;
                load() reads the data file.
- Thread-safety: Single-threaded by design (one console session drives everything).
"""

from datetime import date, datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional

from loguru import logger

from .export import write_export
from .exceptions import ReportIOError
from .models import Report, ReportKind, Severity
from .storage import load_reports, save_reports


class ReportRepository:
    """
    Design (ReportRepository)
    - State:
        _reports: [Report] in insertion order (no uniqueness on any field)
        _data_path: JSON file holding the whole collection
        _reports_dir: folder receiving export files
        _clock: returns "now" for export file names (injected for tests)
        _on_export: optional hook called with (path, kind) after a successful export
    """

    def __init__(
        self,
        data_path: Path,
        reports_dir: Path,
        clock: Callable[[], datetime] = datetime.now,
        on_export: Optional[Callable[[Path, ReportKind], None]] = None,
    ) -> None:
        self._reports: List[Report] = []
        self._data_path = Path(data_path)
        self._reports_dir = Path(reports_dir)
        self._clock = clock
        self._on_export = on_export

    def __len__(self) -> int:
        return len(self._reports)

    # -------- persistence --------

    def load(self) -> bool:
        """
        Purpose: Replace the in-memory collection with the persisted one (startup).
        Outputs: True if the file was read (or absent), False if it could not be loaded.
        Side effects: On failure the error is logged and the collection is left empty.
        """
        try:
            self._reports = load_reports(self._data_path)
        except ReportIOError as exc:
            logger.error("Could not load reports, continuing with an empty collection: {}", exc)
            self._reports = []
            return False
        return True

    def _flush(self) -> bool:
        try:
            save_reports(self._reports, self._data_path)
        except ReportIOError as exc:
            logger.error("Could not persist {} report(s): {}", len(self._reports), exc)
            return False
        return True

    # -------- mutation --------

    def add_report(self, report: Report) -> bool:
        """
        Purpose: Append an already-validated report and rewrite the data file.
        Outputs: True when persisted, False when the flush failed. The report stays in memory
                 either way, so the next successful flush writes it too.
        """
        self._reports.append(report)
        logger.info("Added {} report for equipment {}", report.kind.value, report.equipment_id)
        return self._flush()

    # -------- queries --------

    def reports(self) -> List[Report]:
        """Copy of the whole collection, in insertion order."""
        return list(self._reports)

    def find_by_equipment_id(self, equipment_id: str) -> List[Report]:
        """Exact, case-sensitive match on equipment id."""
        results = [r for r in self._reports if r.equipment_id == equipment_id]
        logger.debug("find_by_equipment_id({!r}) -> {} match(es)", equipment_id, len(results))
        return results

    def find_by_severity(self, severity: Severity) -> List[Report]:
        results = [r for r in self._reports if r.severity is severity]
        logger.debug("find_by_severity({}) -> {} match(es)", severity.name, len(results))
        return results

    def find_since(self, since: date) -> List[Report]:
        """Reports dated on or after `since`."""
        results = [r for r in self._reports if r.report_date >= since]
        logger.debug("find_since({}) -> {} match(es)", since.isoformat(), len(results))
        return results

    def find_by_kind(self, kind: ReportKind) -> List[Report]:
        return [r for r in self._reports if r.kind is kind]

    def distinct_equipment_ids(self) -> List[str]:
        """Unique equipment ids in first-seen order."""
        return list(dict.fromkeys(r.equipment_id for r in self._reports))

    def severities_by_equipment(self) -> Dict[str, List[Severity]]:
        """{equipment_id -> [severity of each of its reports]}, ids in first-seen order."""
        grouped: Dict[str, List[Severity]] = {}
        for r in self._reports:
            grouped.setdefault(r.equipment_id, []).append(r.severity)
        return grouped

    def earliest_date(self) -> Optional[date]:
        if not self._reports:
            return None
        return min(r.report_date for r in self._reports)

    def latest_date(self) -> Optional[date]:
        if not self._reports:
            return None
        return max(r.report_date for r in self._reports)

    # -------- export --------

    def export_reports(self, kind: ReportKind) -> Path:
        """
        Purpose: Dump every report of `kind` to a new timestamped text file.
        Outputs: Path written.
        Raises: ReportIOError if the folder or file cannot be written.
        Side effects: Calls the on_export hook after a successful write.
        """
        path = write_export(self.find_by_kind(kind), kind, self._reports_dir, self._clock())
        if self._on_export is not None:
            self._on_export(path, kind)
        return path
