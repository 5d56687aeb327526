"""
Design (validator.py)
- Purpose: Turn untrusted console input into validated domain values.
- Inputs: Raw strings as typed by the user.
- Outputs: Severity / int / str / date / bool / ReportKind, or a typed ReportValidationError.
- Side effects: None (pure functions).
- Thread-safety: Stateless; safe to call from anywhere.
"""

import re
from datetime import date, datetime

from .config import INPUT_DATE_FORMAT, INPUT_DATE_HINT
from .exceptions import (
    InvalidDateFormatError,
    InvalidEquipmentIdError,
    InvalidReportKindError,
    InvalidSerialNumberError,
    InvalidSeverityError,
    InvalidVersionFormatError,
)
from .models import ReportKind, Severity

_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)
_VERSION_RE = re.compile(r"\d+\.\d+\.\d+", re.ASCII)
# strptime accepts single-digit months/days; require the zero-padded shape first
_DATE_RE = re.compile(r"\d{4}/\d{2}/\d{2}", re.ASCII)

_YES_ANSWERS = {"s", "si", "sí", "y", "yes"}

_KIND_ALIASES = {
    "1": ReportKind.HARDWARE,
    "hardware": ReportKind.HARDWARE,
    "2": ReportKind.SOFTWARE,
    "software": ReportKind.SOFTWARE,
}


def parse_severity(raw: str) -> Severity:
    """
    Purpose: Case-insensitive match against HIGH / MEDIUM / LOW.
    Inputs: raw (e.g., "high", "Medium").
    Outputs: Severity member.
    Raises: InvalidSeverityError for anything else.
    """
    key = (raw or "").strip().upper()
    try:
        return Severity[key]
    except KeyError:
        names = ", ".join(s.name for s in Severity)
        raise InvalidSeverityError(f"Invalid severity {raw!r}. Must be one of {names}.") from None


def parse_serial_number(raw: str) -> int:
    """
    Purpose: Parse a component serial number.
    Inputs: raw decimal string.
    Outputs: Positive int.
    Raises: InvalidSerialNumberError if not an integer, or if <= 0 (distinct messages).
    """
    text = (raw or "").strip()
    if not _INTEGER_RE.fullmatch(text):
        raise InvalidSerialNumberError(f"Serial number must be an integer, got {raw!r}.")
    value = int(text)
    if value <= 0:
        raise InvalidSerialNumberError(f"Serial number must be a positive integer, got {value}.")
    return value


def parse_version(raw: str) -> str:
    """
    Purpose: Check a software version has the A.B.C numeric shape.
    Outputs: The input string, unchanged.
    Raises: InvalidVersionFormatError unless the whole string matches.
    """
    if raw is None or not _VERSION_RE.fullmatch(raw):
        raise InvalidVersionFormatError(
            f"Invalid version {raw!r}. Expected A.B.C where A, B and C are numbers."
        )
    return raw


def parse_date(raw: str) -> date:
    """
    Purpose: Strict YYYY/MM/DD parse (no leniency: 2024/13/40 and 2024/02/30 fail).
    Outputs: datetime.date.
    Raises: InvalidDateFormatError.
    """
    text = (raw or "").strip()
    message = f"Invalid date {raw!r}. Use the format {INPUT_DATE_HINT}."
    if not _DATE_RE.fullmatch(text):
        raise InvalidDateFormatError(message)
    try:
        return datetime.strptime(text, INPUT_DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateFormatError(message) from None


def parse_equipment_id(raw: str) -> str:
    """Strip surrounding whitespace; reject empty ids."""
    text = (raw or "").strip()
    if not text:
        raise InvalidEquipmentIdError("Equipment ID cannot be empty.")
    return text


def parse_yes_no(raw: str) -> bool:
    """True for S/Si/Y/Yes (any case); anything else, including empty input, is False."""
    return (raw or "").strip().lower() in _YES_ANSWERS


def parse_report_kind(raw: str) -> ReportKind:
    """Accept a menu number ("1"/"2") or the kind name ("hardware"/"software")."""
    kind = _KIND_ALIASES.get((raw or "").strip().lower())
    if kind is None:
        raise InvalidReportKindError(f"Invalid report type {raw!r}. Choose 1 (Hardware) or 2 (Software).")
    return kind
