"""
Design (storage.py)
- Purpose: Load and save the report collection to/from disk (JSON).
- Inputs: Path (from get_data_path()), list of reports for save.
- Outputs: list of reports on load; None on save.
- Side effects: Reads/writes the data file; creates the parent directory when saving.
- Failure: Missing file loads as an empty list. Unreadable/undecodable data and failed
           writes raise ReportIOError (ReportFormatError for bad content); callers decide
           whether to carry on.
- Thread-safety: Call from the main thread only (after repository mutations).

On-disk layout:
    {"format_version": 1,
     "reports": [{"kind": "hardware", "equipment_id": ..., ...}, ...]}
"""

import json
import os
import stat
import tempfile
from datetime import date
from pathlib import Path
from typing import Any, Dict, List

from loguru import logger

from .config import DATA_FILENAME, DATA_FOLDER, DATA_FORMAT_VERSION, HOME_ENV_VAR
from .exceptions import ReportFormatError, ReportIOError
from .models import HardwareReport, Report, ReportKind, Severity, SoftwareReport
from .validator import parse_equipment_id, parse_version


def get_base_dir() -> Path:
    """
    Base directory for data/, reports/ and logs/. The EQUIPMENT_REPORTS_HOME environment
    variable wins; otherwise paths stay relative to the working directory.
    """
    home = os.environ.get(HOME_ENV_VAR)
    if home:
        return Path(home).expanduser()
    return Path(".")


def get_data_path() -> Path:
    """Resolve the path of the persisted report collection."""
    return get_base_dir() / DATA_FOLDER / DATA_FILENAME


# -------- encoding --------

def _report_to_dict(report: Report) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "kind": report.kind.value,
        "equipment_id": report.equipment_id,
        "description": report.description,
        "severity": report.severity.name,
        "report_date": report.report_date.isoformat(),
    }
    if report.kind is ReportKind.HARDWARE:
        data.update(
            component_type=report.component_type,
            serial_number=report.serial_number,
            needs_replacement=report.needs_replacement,
        )
    else:
        data.update(
            operating_system=report.operating_system,
            software_name=report.software_name,
            version=report.version,
        )
    return data


def _text(item: Dict[str, Any], key: str) -> str:
    value = item[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {value!r}")
    return value


def _report_from_dict(item: Any, index: int) -> Report:
    """Decode one entry, re-checking the invariants the validator enforces on input."""
    if not isinstance(item, dict):
        raise ReportFormatError(f"Report #{index} is not an object")
    try:
        kind = ReportKind(item["kind"])
        equipment_id = _text(item, "equipment_id")
        parse_equipment_id(equipment_id)  # rejects blank ids; stored value is kept as is
        common = dict(
            equipment_id=equipment_id,
            description=_text(item, "description"),
            severity=Severity[item["severity"]],
            report_date=date.fromisoformat(item["report_date"]),
        )
        if kind is ReportKind.HARDWARE:
            serial = item["serial_number"]
            if isinstance(serial, bool) or not isinstance(serial, int) or serial <= 0:
                raise ValueError(f"serial_number must be a positive integer, got {serial!r}")
            replace = item["needs_replacement"]
            if not isinstance(replace, bool):
                raise TypeError(f"needs_replacement must be true or false, got {replace!r}")
            return HardwareReport(
                **common,
                component_type=_text(item, "component_type"),
                serial_number=serial,
                needs_replacement=replace,
            )
        return SoftwareReport(
            **common,
            operating_system=_text(item, "operating_system"),
            software_name=_text(item, "software_name"),
            version=parse_version(_text(item, "version")),
        )
    # validation errors are ValueErrors too
    except (KeyError, TypeError, ValueError) as exc:
        raise ReportFormatError(f"Report #{index} is malformed: {exc}") from exc


# -------- public API --------

def load_reports(path: Path) -> List[Report]:
    """
    Load reports from the JSON file. Returns an empty list when the file does not exist.
    Raises ReportIOError if the file cannot be read, ReportFormatError if it cannot be decoded.
    """
    if not path.exists():
        logger.info("No data file at {}; starting with an empty collection", path)
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ReportFormatError(f"Data file {path} is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise ReportIOError(f"Could not read data file {path}: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("reports"), list):
        raise ReportFormatError(f"Data file {path} has an unexpected layout")
    version = data.get("format_version")
    if version != DATA_FORMAT_VERSION:
        raise ReportFormatError(f"Data file {path} has unsupported format_version {version!r}")

    reports = [_report_from_dict(item, i) for i, item in enumerate(data["reports"])]
    logger.info("Loaded {} report(s) from {}", len(reports), path)
    return reports


def _target_mode(path: Path) -> int:
    """Permission bits for the rewritten file: keep the existing file's, else the umask default."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def save_reports(reports: List[Report], path: Path) -> None:
    """
    Rewrite the whole collection. Data goes to a temp file in the same directory which then
    replaces the target, so an interrupted save leaves the previous file intact.
    The replaced file keeps its permission bits (temp files are created owner-only).
    Raises ReportIOError on any file system failure.
    """
    data = {
        "format_version": DATA_FORMAT_VERSION,
        "reports": [_report_to_dict(r) for r in reports],
    }
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_name = f.name
            json.dump(data, f, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as exc:
        raise ReportIOError(f"Could not save data file {path}: {exc}") from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
    logger.debug("Saved {} report(s) to {}", len(reports), path)
