"""
Typed exceptions for the Timesheet Dashboard.

Hierarchy:

    DashboardError
    +-- DataValidationError          malformed record or duplicate id
    |   +-- InvalidStatusError       status label outside the known vocabulary
    +-- ReferentialIntegrityError    work row points at an unknown employee/project
    +-- CSVImportError               unreadable CSV or missing required columns

Every class carries a machine-readable ``code``. Zero divisors (no employees,
no remaining months) are not errors; the engine returns 0 for those.
"""


class DashboardError(Exception):
    """Base exception for all dashboard errors."""

    code: str = "DASHBOARD_ERROR"


class DataValidationError(DashboardError):
    """A record violates a field-level invariant."""

    code: str = "DATA_VALIDATION_ERROR"


class InvalidStatusError(DataValidationError):
    """Project status label is not one of Completed, In Progress, Planning."""

    code: str = "INVALID_STATUS"

    def __init__(self, label):
        self.label = label
        super().__init__(f"Unknown project status: {label!r}")


class ReferentialIntegrityError(DashboardError):
    """A work assignment references an employee or project that does not exist."""

    code: str = "REFERENTIAL_INTEGRITY_VIOLATION"

    def __init__(self, entity: str, entity_id, context: str = ''):
        self.entity = entity
        self.entity_id = entity_id
        message = f"Work assignment references unknown {entity} id {entity_id}"
        if context:
            message = f"{message} ({context})"
        super().__init__(message)


class CSVImportError(DashboardError):
    """CSV file could not be parsed into records."""

    code: str = "CSV_IMPORT_ERROR"

    def __init__(self, message: str, missing_columns=None):
        self.missing_columns = list(missing_columns or [])
        super().__init__(message)
