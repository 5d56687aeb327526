"""
Shared fixtures: sample reports, a repository rooted in tmp_path, loguru capture.
"""

import sys
from datetime import date, datetime

import pytest
from loguru import logger

from equipment_reports.models import HardwareReport, Severity, SoftwareReport
from equipment_reports.repository import ReportRepository

FIXED_NOW = datetime(2024, 2, 1, 14, 3, 9)


@pytest.fixture
def hardware_report():
    return HardwareReport(
        equipment_id="EQ1",
        description="fan noise",
        severity=Severity.LOW,
        report_date=date(2024, 1, 10),
        component_type="fan",
        serial_number=42,
        needs_replacement=False,
    )


@pytest.fixture
def software_report():
    return SoftwareReport(
        equipment_id="EQ1",
        description="crash",
        severity=Severity.HIGH,
        report_date=date(2024, 2, 1),
        operating_system="Linux",
        software_name="app",
        version="1.0.0",
    )


@pytest.fixture
def mixed_reports(hardware_report, software_report):
    return [
        hardware_report,
        software_report,
        HardwareReport(
            equipment_id="EQ2",
            description="burnt PSU",
            severity=Severity.HIGH,
            report_date=date(2023, 12, 24),
            component_type="PSU",
            serial_number=900001,
            needs_replacement=True,
        ),
        SoftwareReport(
            equipment_id="eq1",
            description="slow boot",
            severity=Severity.MEDIUM,
            report_date=date(2024, 1, 10),
            operating_system="Windows 11",
            software_name="firmware-tool",
            version="10.20.300",
        ),
    ]


@pytest.fixture
def data_path(tmp_path):
    return tmp_path / "data" / "reports.json"


@pytest.fixture
def reports_dir(tmp_path):
    return tmp_path / "reports"


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def repo(data_path, reports_dir, fixed_now):
    return ReportRepository(data_path, reports_dir, clock=lambda: fixed_now)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def restore_logging():
    """Undo setup_logging() so later tests keep loguru's default stderr sink."""
    yield
    logger.remove()
    logger.add(sys.stderr)
