"""
Unit Tests for the Console Menu
===============================
Menu flows driven by scripted input; output collected into a list.
"""

from datetime import date

import pytest

from equipment_reports.models import HardwareReport, ReportKind, Severity, SoftwareReport
from equipment_reports.ui import ConsoleUI


def scripted(*answers):
    """input() replacement that replays answers, then behaves like end of input."""
    remaining = iter(answers)

    def _input(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return _input


@pytest.fixture
def output():
    return []


def make_ui(repo, output, *answers):
    return ConsoleUI(repo, input_func=scripted(*answers), output_func=output.append)


# =============================================================================
# REGISTER
# =============================================================================

class TestRegister:

    def test_hardware_report(self, repo, output, hardware_report):
        make_ui(repo, output, "1", "EQ1", "fan noise", "low", "2024/01/10", "fan", "42", "N").register_report()

        assert repo.reports() == [hardware_report]
        assert "Report registered successfully." in output

    def test_software_report(self, repo, output, software_report):
        make_ui(repo, output, "2", "EQ1", "crash", "HIGH", "2024/02/01", "Linux", "app", "1.0.0").register_report()

        assert repo.reports() == [software_report]

    def test_replacement_answer(self, repo, output):
        make_ui(repo, output, "hardware", "EQ3", "dead", "medium", "2024/03/01", "disk", "7", "S").register_report()

        [report] = repo.reports()
        assert isinstance(report, HardwareReport)
        assert report.needs_replacement is True

    @pytest.mark.parametrize("answers", [
        ("3",),
        ("1", ""),
        ("1", "EQ1", "d", "urgent"),
        ("1", "EQ1", "d", "low", "2024/13/40"),
        ("1", "EQ1", "d", "low", "2024/01/10", "fan", "0"),
        ("2", "EQ1", "d", "low", "2024/01/10", "Linux", "app", "1.2"),
    ])
    def test_invalid_input_aborts_without_adding(self, repo, output, answers):
        make_ui(repo, output, *answers).register_report()

        assert len(repo) == 0
        assert output[-1].startswith("Could not register the report:")

    def test_unsaved_report_is_reported(self, tmp_path, reports_dir, output):
        from equipment_reports.repository import ReportRepository

        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        repo = ReportRepository(blocker / "reports.json", reports_dir)
        make_ui(repo, output, "2", "EQ1", "crash", "high", "2024/02/01", "Linux", "app", "1.0.0").register_report()

        assert len(repo) == 1
        assert "could not be saved" in output[-1]


# =============================================================================
# QUERIES
# =============================================================================

class TestQueries:

    @pytest.fixture
    def loaded(self, repo, hardware_report, software_report):
        repo.add_report(hardware_report)
        repo.add_report(software_report)
        return repo

    def test_by_equipment_id_lists_available_then_results(self, loaded, output, hardware_report, software_report):
        make_ui(loaded, output, "EQ1").query_by_equipment_id()

        assert "Equipment ID: EQ1" in output
        assert "  - Severity: LOW" in output
        assert "  - Severity: HIGH" in output
        assert output[-2:] == [
            f"1. {hardware_report.render_summary()}",
            f"2. {software_report.render_summary()}",
        ]

    def test_by_equipment_id_no_match(self, loaded, output):
        make_ui(loaded, output, "EQ9").query_by_equipment_id()
        assert output[-1] == "No reports found for that equipment ID."

    def test_by_equipment_id_empty_store(self, repo, output):
        make_ui(repo, output).query_by_equipment_id()
        assert output[-1] == "No reports registered."

    def test_by_severity(self, loaded, output, software_report):
        make_ui(loaded, output, "1").query_by_severity()
        assert output[-1] == f"1. {software_report.render_summary()}"

    def test_by_severity_invalid_option(self, loaded, output):
        make_ui(loaded, output, "9").query_by_severity()
        assert output[-1] == "Invalid option."

    def test_since_date_shows_range(self, loaded, output, software_report):
        make_ui(loaded, output, "2024/01/11").query_since_date()

        assert "Available date range: 2024/01/10 to 2024/02/01" in output
        assert output[-1] == f"1. {software_report.render_summary()}"

    def test_since_date_bad_input(self, loaded, output):
        make_ui(loaded, output, "11-01-2024").query_since_date()
        assert "YYYY/MM/DD" in output[-1]

    def test_since_date_empty_store(self, repo, output):
        make_ui(repo, output).query_since_date()
        assert output[-1] == "No reports registered."


# =============================================================================
# EXPORT & MAIN LOOP
# =============================================================================

class TestExportAndLoop:

    def test_export(self, repo, output, reports_dir, software_report):
        repo.add_report(software_report)
        make_ui(repo, output, "2").export_report()

        [path] = list(reports_dir.iterdir())
        assert output[-1] == f"Software report exported: {path}"

    def test_export_invalid_option(self, repo, output, reports_dir):
        make_ui(repo, output, "7").export_report()
        assert output[-1] == "Invalid option."
        assert not reports_dir.exists()

    def test_export_failure_is_reported(self, tmp_path, data_path, output):
        from equipment_reports.repository import ReportRepository

        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        repo = ReportRepository(data_path, blocker / "out")
        make_ui(repo, output, "1").export_report()

        assert output[-1].startswith("Could not export the report:")

    def test_run_until_exit(self, repo, output):
        make_ui(
            repo, output,
            "x",
            "2",
            "1", "1", "EQ5", "noisy", "low", "2024/05/05", "fan", "12", "n",
            "6",
        ).run()

        assert "Invalid option. Try again." in output
        assert "No reports registered." in output
        assert repo.distinct_equipment_ids() == ["EQ5"]
        assert output[-1] == "Thanks for using the system. Goodbye!"

    def test_run_stops_at_end_of_input(self, repo, output):
        make_ui(repo, output, "1", "2", "EQ1").run()
        assert output[-1] == "Thanks for using the system. Goodbye!"
        assert len(repo) == 0


def test_report_kinds_are_registered_in_order(repo, output):
    ui = make_ui(
        repo, output,
        "1", "1", "A", "d", "low", "2024/01/01", "fan", "1", "n",
        "1", "2", "B", "d", "high", "2024/01/02", "Linux", "app", "2.0.0",
        "6",
    )
    ui.run()

    assert [r.kind for r in repo.reports()] == [ReportKind.HARDWARE, ReportKind.SOFTWARE]
    assert isinstance(repo.reports()[1], SoftwareReport)
    assert repo.find_by_severity(Severity.HIGH)[0].report_date == date(2024, 1, 2)
