"""
Design (ui.py)
- Purpose: Console menu for registering, querying and exporting reports.
- Inputs: ReportRepository (shared state); input/output callables (default: input/print).
- Outputs: None (prints results, writes to the repository).
- Side effects: Reads the console; export writes files through the repository.
- Failure: Validation errors abort only the current action and return to the menu.
"""

from typing import Callable, List, Optional

from .config import INPUT_DATE_HINT
from .exceptions import ReportIOError, ReportValidationError
from .models import HardwareReport, Report, ReportKind, Severity, SoftwareReport
from .repository import ReportRepository
from .utils import format_display_date, numbered_summaries
from .validator import (
    parse_date,
    parse_equipment_id,
    parse_report_kind,
    parse_serial_number,
    parse_severity,
    parse_version,
    parse_yes_no,
)

SEVERITY_CHOICES = {"1": Severity.HIGH, "2": Severity.MEDIUM, "3": Severity.LOW}


class ConsoleUI:
    """
    Design (ConsoleUI)
    - Purpose: Encapsulate all prompts and menu dispatch.
    - Public methods:
        run(): loop on the main menu until "Exit" (or end of input)
        register_report / query_by_equipment_id / query_by_severity /
        query_since_date / export_report: one menu action each
    """

    def __init__(
        self,
        repo: ReportRepository,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ):
        self.repo = repo
        self._input = input_func
        self._print = output_func

        self.actions = {
            "1": self.register_report,
            "2": self.query_by_equipment_id,
            "3": self.query_by_severity,
            "4": self.query_since_date,
            "5": self.export_report,
        }

    # ---------- main loop ----------

    def run(self) -> None:
        self._print("Electronic Equipment Report Manager")
        while True:
            self.show_main_menu()
            try:
                option = self._ask("Select an option: ")
            except EOFError:
                break
            if option == "6":
                break
            action = self.actions.get(option)
            if action is None:
                self._print("Invalid option. Try again.")
                continue
            try:
                action()
            except EOFError:
                break
        self._print("Thanks for using the system. Goodbye!")

    def show_main_menu(self) -> None:
        self._print("\n----- MAIN MENU -----")
        self._print("1. Register new report")
        self._print("2. Query reports by equipment ID")
        self._print("3. Query reports by severity")
        self._print("4. Query reports since a date")
        self._print("5. Export reports")
        self._print("6. Exit")

    # ---------- menu actions ----------

    def register_report(self) -> None:
        """
        Purpose: Prompt for every field of a hardware or software report and store it.
        Side effects: Adds to the repository (which rewrites the data file).
        """
        self._print("\n----- REGISTER REPORT -----")
        try:
            kind = parse_report_kind(self._ask("Report type (1. Hardware, 2. Software): "))
            equipment_id = parse_equipment_id(self._ask("Equipment ID: "))
            description = self._ask("Description: ")
            severity = parse_severity(self._ask("Severity (HIGH, MEDIUM, LOW): "))
            report_date = parse_date(self._ask(f"Report date ({INPUT_DATE_HINT}): "))

            if kind is ReportKind.HARDWARE:
                component_type = self._ask("Component type: ")
                serial_number = parse_serial_number(self._ask("Component serial number: "))
                needs_replacement = parse_yes_no(self._ask("Does the component need replacing? (Y/N): "))
                report: Report = HardwareReport(
                    equipment_id=equipment_id,
                    description=description,
                    severity=severity,
                    report_date=report_date,
                    component_type=component_type,
                    serial_number=serial_number,
                    needs_replacement=needs_replacement,
                )
            else:
                operating_system = self._ask("Operating system: ")
                software_name = self._ask("Software name: ")
                version = parse_version(self._ask("Software version (A.B.C): "))
                report = SoftwareReport(
                    equipment_id=equipment_id,
                    description=description,
                    severity=severity,
                    report_date=report_date,
                    operating_system=operating_system,
                    software_name=software_name,
                    version=version,
                )
        except ReportValidationError as exc:
            self._print(f"Could not register the report: {exc}")
            return

        if self.repo.add_report(report):
            self._print("Report registered successfully.")
        else:
            self._print("Report registered, but it could not be saved to disk (see log).")

    def query_by_equipment_id(self) -> None:
        self._print("\n----- QUERY BY EQUIPMENT ID -----")
        grouped = self.repo.severities_by_equipment()
        if not grouped:
            self._print("No reports registered.")
            return

        self._print("Available reports:")
        for equipment_id, severities in grouped.items():
            self._print(f"Equipment ID: {equipment_id}")
            for severity in severities:
                self._print(f"  - Severity: {severity.name}")

        equipment_id = self._ask("\nEquipment ID to query: ")
        self._show_results(
            self.repo.find_by_equipment_id(equipment_id),
            "No reports found for that equipment ID.",
        )

    def query_by_severity(self) -> None:
        self._print("\n----- QUERY BY SEVERITY -----")
        for key, severity in SEVERITY_CHOICES.items():
            self._print(f"{key}. {severity.name}")
        severity = SEVERITY_CHOICES.get(self._ask("Select a severity: "))
        if severity is None:
            self._print("Invalid option.")
            return
        self._show_results(
            self.repo.find_by_severity(severity),
            "No reports found with that severity.",
        )

    def query_since_date(self) -> None:
        self._print("\n----- QUERY SINCE A DATE -----")
        earliest, latest = self.repo.earliest_date(), self.repo.latest_date()
        if earliest is None or latest is None:
            self._print("No reports registered.")
            return
        self._print(f"Available date range: {format_display_date(earliest)} to {format_display_date(latest)}")

        try:
            since = parse_date(self._ask(f"Query reports since ({INPUT_DATE_HINT}): "))
        except ReportValidationError as exc:
            self._print(str(exc))
            return
        self._show_results(self.repo.find_since(since), "No reports found since that date.")

    def export_report(self) -> None:
        self._print("\n----- EXPORT REPORTS -----")
        try:
            kind = parse_report_kind(self._ask("Report type (1. Hardware, 2. Software): "))
        except ReportValidationError:
            self._print("Invalid option.")
            return
        try:
            path = self.repo.export_reports(kind)
        except ReportIOError as exc:
            self._print(f"Could not export the report: {exc}")
            return
        self._print(f"{kind.label} report exported: {path}")

    # ---------- helpers ----------

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _show_results(self, reports: List[Report], empty_message: Optional[str] = None) -> None:
        if not reports:
            if empty_message:
                self._print(empty_message)
            return
        self._print("\nReports found:")
        for line in numbered_summaries(reports):
            self._print(line)
