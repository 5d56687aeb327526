"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: None.
- Outputs: Constants (file names, folders, formats, log defaults).
- Side effects: None.
- Thread-safety: N/A (read-only constants).
"""

# Persistence: data file location (path resolved in storage module)
DATA_FOLDER = "data"
DATA_FILENAME = "reports.json"

# Bump when the on-disk layout changes; storage refuses unknown versions
DATA_FORMAT_VERSION = 1

# Optional base directory override for data/, reports/ and logs/
HOME_ENV_VAR = "EQUIPMENT_REPORTS_HOME"

# Export files land here, one per export call
REPORTS_FOLDER = "reports"
EXPORT_FILENAME_PREFIX = "Report"
EXPORT_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"   # second resolution; same-second exports overwrite
EXPORT_TITLE_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
EXPORT_SEPARATOR = "-" * 40

# Summary line: fields joined by this delimiter
FIELD_DELIMITER = "-"

# User-facing date format (input prompts and displayed ranges)
INPUT_DATE_FORMAT = "%Y/%m/%d"
INPUT_DATE_HINT = "YYYY/MM/DD"

## Logging
LOG_LEVEL = "INFO"
LOG_FOLDER = "logs"
LOG_RETENTION = "30 days"

# Desktop notification shown after an export (only when enabled from the CLI)
NOTIFY_TIMEOUT_SEC = 5
APP_NAME = "Equipment Reports"
