"""
Domain types for the Timesheet Dashboard.

Base records (Employee, Project, WorkAssignment) are immutable snapshot values
loaded once per session. Derived records (ProjectSummary, OverallTotals,
AssignmentSeries, MonthlyProjection, YearProjection) are produced fresh by
DataProcessor on every call and never mutated afterwards.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional, Tuple

from utils.exceptions import DataValidationError, InvalidStatusError


class ProjectStatus(Enum):
    """Closed set of project statuses."""

    COMPLETED = 'Completed'
    IN_PROGRESS = 'In Progress'
    PLANNING = 'Planning'

    @classmethod
    def from_label(cls, label) -> 'ProjectStatus':
        """
        Normalize a raw status label.

        Matching is case-insensitive and ignores surrounding whitespace,
        so 'in progress', 'IN PROGRESS' and ' In Progress ' all map to
        IN_PROGRESS.

        Raises:
            InvalidStatusError: label is not a known status
        """
        if isinstance(label, cls):
            return label
        normalized = str(label).strip().lower()
        for status in cls:
            if status.value.lower() == normalized:
                return status
        raise InvalidStatusError(label)

    @property
    def is_active(self) -> bool:
        return self is not ProjectStatus.COMPLETED


def _to_date(value, field_name):
    if value is None or isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, datetime):
        return value.date()
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise DataValidationError(f"Invalid {field_name}: {value!r}") from None


def _check_id(value, entity):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise DataValidationError(f"{entity} id must be a positive integer, got {value!r}")


def _check_non_negative(value, field_name, owner):
    # NaN fails this comparison too
    if not value >= 0:
        raise DataValidationError(f"{field_name} must be non-negative for {owner}, got {value}")


@dataclass(frozen=True)
class Employee:
    id: int
    first_name: str
    last_name: str
    annual_salary: float
    hourly_rate: float

    def __post_init__(self):
        _check_id(self.id, 'Employee')
        _check_non_negative(self.annual_salary, 'annual_salary', f"employee {self.id}")
        _check_non_negative(self.hourly_rate, 'hourly_rate', f"employee {self.id}")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Project:
    id: int
    name: str
    status: ProjectStatus
    start_date: date
    end_date: Optional[date] = None
    description: str = ''

    def __post_init__(self):
        _check_id(self.id, 'Project')
        # Frozen dataclass: normalize raw inputs in place
        object.__setattr__(self, 'status', ProjectStatus.from_label(self.status))
        object.__setattr__(self, 'start_date', _to_date(self.start_date, 'start_date'))
        object.__setattr__(self, 'end_date', _to_date(self.end_date, 'end_date'))

        if self.start_date is None:
            raise DataValidationError(f"Project {self.id} has no start_date")
        if self.end_date is not None and self.end_date < self.start_date:
            raise DataValidationError(
                f"Project {self.id} ends ({self.end_date}) before it starts ({self.start_date})"
            )

    @property
    def is_active(self) -> bool:
        return self.status.is_active


@dataclass(frozen=True)
class WorkAssignment:
    """
    Hours and monetary value one employee has logged against one project.

    monetary_value is taken as given; it is not reconciled against
    hours_worked * hourly_rate.
    """

    project_id: int
    employee_id: int
    hours_worked: float
    monetary_value: float

    def __post_init__(self):
        owner = f"project {self.project_id} / employee {self.employee_id}"
        _check_non_negative(self.hours_worked, 'hours_worked', owner)
        _check_non_negative(self.monetary_value, 'monetary_value', owner)


@dataclass(frozen=True)
class ProjectSummary:
    project_id: int
    project_name: str
    project_status: ProjectStatus
    total_hours: float
    total_value: float
    employee_count: int
    average_hours_per_employee: float
    average_value_per_employee: float


@dataclass(frozen=True)
class OverallTotals:
    total_hours: float = 0
    total_value: float = 0
    # Summed per project, so an employee on two projects counts twice
    total_employees: int = 0


@dataclass(frozen=True)
class AssignmentSeries:
    """Parallel chart series: one label, hours figure and value figure per entry."""

    labels: Tuple[str, ...] = ()
    hours: Tuple[float, ...] = ()
    values: Tuple[float, ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.labels) == 0


@dataclass(frozen=True)
class MonthlyProjection:
    month: str
    # Not wrapped: December + 1 is 12
    month_index: int
    projected_hours: float
    projected_value: float
    cumulative_hours: float
    cumulative_value: float


@dataclass(frozen=True)
class YearProjection:
    total_projected_hours: float = 0
    total_projected_value: float = 0
    active_projects: int = 0
    active_employees: int = 0
    average_hours_per_month: float = 0
    average_value_per_month: float = 0
    remaining_months: int = 0
    monthly_breakdown: Tuple[MonthlyProjection, ...] = field(default_factory=tuple)
