import pandas as pd
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence
from utils.constants import MONTH_NAMES, MONTHS_PER_YEAR
from utils.exceptions import ReferentialIntegrityError
from utils.logger import get_logger
from utils.models import (
    AssignmentSeries,
    Employee,
    MonthlyProjection,
    OverallTotals,
    Project,
    ProjectSummary,
    WorkAssignment,
    YearProjection,
)

logger = get_logger(__name__)

SUMMARY_COLUMNS = [
    'project_id', 'project_name', 'project_status', 'total_hours', 'total_value',
    'employee_count', 'average_hours_per_employee', 'average_value_per_employee'
]
PROJECTION_COLUMNS = [
    'month', 'month_index', 'projected_hours', 'projected_value',
    'cumulative_hours', 'cumulative_value'
]
EMPLOYEE_COLUMNS = ['id', 'full_name', 'first_name', 'last_name', 'annual_salary', 'hourly_rate']


def month_name(month_index: int) -> str:
    """Month name for a 0-based index; indexes past December wrap into the next year."""
    return MONTH_NAMES[month_index % MONTHS_PER_YEAR]


def _safe_divide(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0


class DataProcessor:
    """Aggregate and project employee/project work data"""

    @staticmethod
    def calculate_project_summaries(
        projects: Sequence[Project],
        work_assignments: Sequence[WorkAssignment]
    ) -> List[ProjectSummary]:
        """
        Roll up work assignments into one summary per project.

        Output keeps the order of ``projects``. A project without any work
        assignments gets a summary of zeros (averages included).
        """
        summaries = []

        for project in projects:
            project_work = [work for work in work_assignments if work.project_id == project.id]

            total_hours = sum(work.hours_worked for work in project_work)
            total_value = sum(work.monetary_value for work in project_work)
            employee_count = len({work.employee_id for work in project_work})

            summaries.append(ProjectSummary(
                project_id=project.id,
                project_name=project.name,
                project_status=project.status,
                total_hours=total_hours,
                total_value=total_value,
                employee_count=employee_count,
                average_hours_per_employee=_safe_divide(total_hours, employee_count),
                average_value_per_employee=_safe_divide(total_value, employee_count)
            ))

        logger.debug(f"Calculated {len(summaries)} project summaries from {len(work_assignments)} work assignments")
        return summaries

    @staticmethod
    def calculate_overall_totals(summaries: Sequence[ProjectSummary]) -> OverallTotals:
        """Sum hours, value and employee counts across project summaries"""
        return OverallTotals(
            total_hours=sum(summary.total_hours for summary in summaries),
            total_value=sum(summary.total_value for summary in summaries),
            total_employees=sum(summary.employee_count for summary in summaries)
        )

    @staticmethod
    def calculate_assignment_series_for_project(
        project_id: int,
        employees: Sequence[Employee],
        work_assignments: Sequence[WorkAssignment]
    ) -> AssignmentSeries:
        """
        Build the per-employee hours/value series for one project.

        Only employees with work on the project appear, ordered by ascending
        employee id. Rows repeated for the same employee are summed.

        Raises:
            ReferentialIntegrityError: a work row's employee id has no Employee record
        """
        employees_by_id = {employee.id: employee for employee in employees}
        project_work = [work for work in work_assignments if work.project_id == project_id]

        if not project_work:
            return AssignmentSeries()

        hours_by_employee: Dict[int, float] = {}
        value_by_employee: Dict[int, float] = {}
        for work in project_work:
            if work.employee_id not in employees_by_id:
                logger.error(f"Project {project_id} has work for unknown employee {work.employee_id}")
                raise ReferentialIntegrityError('employee', work.employee_id, f"project {project_id}")
            hours_by_employee[work.employee_id] = hours_by_employee.get(work.employee_id, 0) + work.hours_worked
            value_by_employee[work.employee_id] = value_by_employee.get(work.employee_id, 0) + work.monetary_value

        employee_ids = sorted(hours_by_employee)
        return AssignmentSeries(
            labels=tuple(employees_by_id[employee_id].full_name for employee_id in employee_ids),
            hours=tuple(hours_by_employee[employee_id] for employee_id in employee_ids),
            values=tuple(value_by_employee[employee_id] for employee_id in employee_ids)
        )

    @staticmethod
    def calculate_assignment_series_for_employee(
        employee_id: int,
        projects: Sequence[Project],
        work_assignments: Sequence[WorkAssignment]
    ) -> AssignmentSeries:
        """
        Build the per-project hours/value series for one employee.

        Projects are ordered by ascending project id.

        Raises:
            ReferentialIntegrityError: a work row's project id has no Project record
        """
        projects_by_id = {project.id: project for project in projects}
        employee_work = [work for work in work_assignments if work.employee_id == employee_id]

        if not employee_work:
            return AssignmentSeries()

        hours_by_project: Dict[int, float] = {}
        value_by_project: Dict[int, float] = {}
        for work in employee_work:
            if work.project_id not in projects_by_id:
                logger.error(f"Employee {employee_id} has work on unknown project {work.project_id}")
                raise ReferentialIntegrityError('project', work.project_id, f"employee {employee_id}")
            hours_by_project[work.project_id] = hours_by_project.get(work.project_id, 0) + work.hours_worked
            value_by_project[work.project_id] = value_by_project.get(work.project_id, 0) + work.monetary_value

        project_ids = sorted(hours_by_project)
        return AssignmentSeries(
            labels=tuple(projects_by_id[project_id].name for project_id in project_ids),
            hours=tuple(hours_by_project[project_id] for project_id in project_ids),
            values=tuple(value_by_project[project_id] for project_id in project_ids)
        )

    @staticmethod
    def calculate_average_annual_salary(employees: Sequence[Employee]) -> float:
        return _safe_divide(sum(employee.annual_salary for employee in employees), len(employees))

    @staticmethod
    def calculate_average_hourly_rate(employees: Sequence[Employee]) -> float:
        return _safe_divide(sum(employee.hourly_rate for employee in employees), len(employees))

    @staticmethod
    def calculate_year_projection(
        current_date: date,
        employees: Sequence[Employee],
        projects: Sequence[Project],
        work_assignments: Sequence[WorkAssignment]
    ) -> YearProjection:
        """
        Project hours and monetary value for the rest of the calendar year.

        Linear extrapolation from the historical run-rate:

        - Rate per employee per month = all historical hours (or value) divided
          by (distinct employees across ALL work assignments * 12).
        - Projected per month = rate * distinct employees working on active
          (not Completed) projects.

        The rate uses the global headcount while the scaling uses the active
        headcount; the two sets differ whenever a completed project had its
        own staff.

        Args:
            current_date: date the projection is made on; its month counts as
                the first remaining month
            employees: employee snapshot (accepted for a uniform signature)
            projects: project snapshot
            work_assignments: historical work rows

        Returns:
            YearProjection with one MonthlyProjection per remaining month
        """
        active_projects = [project for project in projects if project.is_active]
        active_project_ids = {project.id for project in active_projects}

        current_month = current_date.month - 1
        remaining_months = max(0, MONTHS_PER_YEAR - current_month)

        total_historical_hours = sum(work.hours_worked for work in work_assignments)
        total_historical_value = sum(work.monetary_value for work in work_assignments)

        unique_employee_count = len({work.employee_id for work in work_assignments})
        employee_months = unique_employee_count * MONTHS_PER_YEAR
        average_hours_per_employee_per_month = _safe_divide(total_historical_hours, employee_months)
        average_value_per_employee_per_month = _safe_divide(total_historical_value, employee_months)

        active_employee_count = len({
            work.employee_id for work in work_assignments if work.project_id in active_project_ids
        })

        projected_hours_per_month = average_hours_per_employee_per_month * active_employee_count
        projected_value_per_month = average_value_per_employee_per_month * active_employee_count

        monthly_breakdown = tuple(
            MonthlyProjection(
                month=month_name(current_month + i),
                month_index=current_month + i,
                projected_hours=projected_hours_per_month,
                projected_value=projected_value_per_month,
                cumulative_hours=projected_hours_per_month * (i + 1),
                cumulative_value=projected_value_per_month * (i + 1)
            )
            for i in range(remaining_months)
        )

        logger.debug(
            f"Year projection from {current_date}: {remaining_months} months, "
            f"{len(active_projects)} active projects, {active_employee_count} active employees"
        )

        return YearProjection(
            total_projected_hours=projected_hours_per_month * remaining_months,
            total_projected_value=projected_value_per_month * remaining_months,
            active_projects=len(active_projects),
            active_employees=active_employee_count,
            average_hours_per_month=projected_hours_per_month,
            average_value_per_month=projected_value_per_month,
            remaining_months=remaining_months,
            monthly_breakdown=monthly_breakdown
        )

    @staticmethod
    def summaries_to_dataframe(summaries: Iterable[ProjectSummary]) -> pd.DataFrame:
        """Flatten project summaries for tables and charts"""
        rows = [
            {
                'project_id': summary.project_id,
                'project_name': summary.project_name,
                'project_status': summary.project_status.value,
                'total_hours': summary.total_hours,
                'total_value': summary.total_value,
                'employee_count': summary.employee_count,
                'average_hours_per_employee': summary.average_hours_per_employee,
                'average_value_per_employee': summary.average_value_per_employee
            }
            for summary in summaries
        ]
        return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)

    @staticmethod
    def projection_to_dataframe(projection: Optional[YearProjection]) -> pd.DataFrame:
        """Flatten a year projection's monthly breakdown"""
        if projection is None:
            return pd.DataFrame(columns=PROJECTION_COLUMNS)

        rows = [
            {
                'month': month.month,
                'month_index': month.month_index,
                'projected_hours': month.projected_hours,
                'projected_value': month.projected_value,
                'cumulative_hours': month.cumulative_hours,
                'cumulative_value': month.cumulative_value
            }
            for month in projection.monthly_breakdown
        ]
        return pd.DataFrame(rows, columns=PROJECTION_COLUMNS)

    @staticmethod
    def employees_to_dataframe(employees: Iterable[Employee]) -> pd.DataFrame:
        rows = [
            {
                'id': employee.id,
                'full_name': employee.full_name,
                'first_name': employee.first_name,
                'last_name': employee.last_name,
                'annual_salary': employee.annual_salary,
                'hourly_rate': employee.hourly_rate
            }
            for employee in employees
        ]
        return pd.DataFrame(rows, columns=EMPLOYEE_COLUMNS)
