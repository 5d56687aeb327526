"""
Design (models.py)
- Purpose: Define typed data structures for domain entities (fault reports).
- Inputs: Field values (already validated; see validator.py).
- Outputs: Dataclass instances; one-line summaries for exports and listings.
- Side effects: None.
- Thread-safety: Plain containers; the repository owns the collection.

A report is a closed set of two variants, HardwareReport and SoftwareReport.
Code that needs to branch on the variant matches on `report.kind`.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Union

from .config import FIELD_DELIMITER


class Severity(Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class ReportKind(Enum):
    HARDWARE = "hardware"
    SOFTWARE = "software"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass
class _ReportBase:
    """
    Design (_ReportBase)
    - Purpose: Fields shared by every report variant.
    - Fields:
        equipment_id: free-text device identifier (non-empty, not unique).
        description: what went wrong.
        severity: HIGH / MEDIUM / LOW.
        report_date: calendar date of the report (no time component).
    """
    equipment_id: str
    description: str
    severity: Severity
    report_date: date

    def _common_fields(self) -> list[str]:
        return [
            self.equipment_id,
            self.description,
            self.severity.name,
            self.report_date.isoformat(),
        ]


@dataclass
class HardwareReport(_ReportBase):
    """
    Design (HardwareReport)
    - Purpose: Fault in a physical component.
    - Fields (in addition to the common ones):
        component_type: e.g. "fan", "PSU".
        serial_number: positive integer.
        needs_replacement: whether the component has to be swapped.
    """
    component_type: str
    serial_number: int
    needs_replacement: bool = False

    @property
    def kind(self) -> ReportKind:
        return ReportKind.HARDWARE

    def render_summary(self) -> str:
        fields = self._common_fields() + [
            self.component_type,
            str(self.serial_number),
            "Yes" if self.needs_replacement else "No",
        ]
        return FIELD_DELIMITER.join(fields)


@dataclass
class SoftwareReport(_ReportBase):
    """
    Design (SoftwareReport)
    - Purpose: Fault in installed software.
    - Fields (in addition to the common ones):
        operating_system: OS the software runs on.
        software_name: affected program.
        version: "A.B.C" numeric version string.
    """
    operating_system: str
    software_name: str
    version: str

    @property
    def kind(self) -> ReportKind:
        return ReportKind.SOFTWARE

    def render_summary(self) -> str:
        fields = self._common_fields() + [
            self.operating_system,
            self.software_name,
            self.version,
        ]
        return FIELD_DELIMITER.join(fields)


Report = Union[HardwareReport, SoftwareReport]


def render_summary(report: Report) -> str:
    """Dash-delimited one-line summary of any report variant."""
    return report.render_summary()
