import pandas as pd
from pathlib import Path
from typing import List, Optional
from utils.constants import (
    DEFAULT_DATA_DIR,
    EMPLOYEES_CSV,
    PROJECTS_CSV,
    UNKNOWN_PROJECT_NAME,
    WORK_ASSIGNMENTS_CSV,
)
from utils.csv_importer import EmployeeCSVImporter, ProjectCSVImporter, WorkAssignmentCSVImporter
from utils.exceptions import DataValidationError, ReferentialIntegrityError
from utils.logger import get_logger
from utils.models import Employee, Project, WorkAssignment

logger = get_logger(__name__)


class DataRepository:
    """
    In-memory snapshot of employees, projects and work assignments.

    The three relations are supplied together and validated as a unit, so the
    engine is never fed a partial snapshot. The snapshot is read-only; loading
    new data means building a new repository.
    """

    def __init__(self, employees, projects, work_assignments):
        """Store the snapshot and validate ids and references"""
        self._employees = tuple(employees)
        self._projects = tuple(projects)
        self._work_assignments = tuple(work_assignments)

        self._employees_by_id = self._index(self._employees, 'employee')
        self._projects_by_id = self._index(self._projects, 'project')
        self.validate_references()

        logger.info(
            f"Loaded snapshot: {len(self._employees)} employees, {len(self._projects)} projects, "
            f"{len(self._work_assignments)} work assignments"
        )

    @staticmethod
    def _index(records, entity):
        indexed = {}
        for record in records:
            if record.id in indexed:
                raise DataValidationError(f"Duplicate {entity} id {record.id}")
            indexed[record.id] = record
        return indexed

    def validate_references(self):
        """Raise ReferentialIntegrityError for work rows pointing at unknown employees or projects"""
        for work in self._work_assignments:
            if work.employee_id not in self._employees_by_id:
                logger.error(f"Work assignment on project {work.project_id} references unknown employee {work.employee_id}")
                raise ReferentialIntegrityError('employee', work.employee_id, f"project {work.project_id}")
            if work.project_id not in self._projects_by_id:
                logger.error(f"Work assignment for employee {work.employee_id} references unknown project {work.project_id}")
                raise ReferentialIntegrityError('project', work.project_id, f"employee {work.employee_id}")

    # Constructors
    @classmethod
    def from_sample_data(cls):
        """Repository over the bundled demo dataset"""
        from utils.sample_data import generate_sample_data

        employees, projects, work_assignments = generate_sample_data()
        return cls(employees, projects, work_assignments)

    @classmethod
    def from_csv(cls, employees_csv, projects_csv, work_assignments_csv):
        """Repository from three CSV paths or file-like objects"""
        employees, _ = EmployeeCSVImporter(employees_csv).import_all()
        projects, _ = ProjectCSVImporter(projects_csv).import_all()
        work_assignments, _ = WorkAssignmentCSVImporter(work_assignments_csv).import_all()
        return cls(employees, projects, work_assignments)

    @classmethod
    def from_directory(cls, data_dir=DEFAULT_DATA_DIR):
        """Repository from employees.csv, projects.csv and work_assignments.csv in data_dir"""
        data_path = Path(data_dir)
        logger.info(f"Loading snapshot from {data_path}")
        return cls.from_csv(
            data_path / EMPLOYEES_CSV,
            data_path / PROJECTS_CSV,
            data_path / WORK_ASSIGNMENTS_CSV
        )

    # Employee methods
    def get_employees(self) -> List[Employee]:
        return list(self._employees)

    def get_employee_by_id(self, employee_id) -> Optional[Employee]:
        return self._employees_by_id.get(employee_id)

    # Project methods
    def get_projects(self) -> List[Project]:
        return list(self._projects)

    def get_project_by_id(self, project_id) -> Optional[Project]:
        return self._projects_by_id.get(project_id)

    def get_project_name(self, project_id) -> str:
        project = self.get_project_by_id(project_id)
        return project.name if project else UNKNOWN_PROJECT_NAME

    def get_active_projects(self) -> List[Project]:
        """Projects whose status is not Completed"""
        return [project for project in self._projects if project.is_active]

    # Work assignment methods
    def get_work_assignments(self) -> List[WorkAssignment]:
        return list(self._work_assignments)

    def get_work_by_project(self, project_id) -> List[WorkAssignment]:
        return [work for work in self._work_assignments if work.project_id == project_id]

    def get_work_by_employee(self, employee_id) -> List[WorkAssignment]:
        return [work for work in self._work_assignments if work.employee_id == employee_id]

    def is_empty(self):
        """Check if the snapshot holds no records at all"""
        return not (self._employees or self._projects or self._work_assignments)

    def get_summary(self):
        """Record counts for the loaded snapshot"""
        return {
            'employees': len(self._employees),
            'projects': len(self._projects),
            'active_projects': len(self.get_active_projects()),
            'work_assignments': len(self._work_assignments)
        }

    # Export
    def to_dataframes(self):
        """
        Snapshot as three DataFrames in the CSV import format.

        Returns:
            dict: {'employees': df, 'projects': df, 'work_assignments': df}
        """
        employees_df = pd.DataFrame(
            [
                {
                    'id': e.id,
                    'first_name': e.first_name,
                    'last_name': e.last_name,
                    'full_name': e.full_name,
                    'annual_salary': e.annual_salary,
                    'hourly_rate': e.hourly_rate
                }
                for e in self._employees
            ],
            columns=['id', 'first_name', 'last_name', 'full_name', 'annual_salary', 'hourly_rate']
        )
        projects_df = pd.DataFrame(
            [
                {
                    'id': p.id,
                    'name': p.name,
                    'description': p.description,
                    'status': p.status.value,
                    'start_date': p.start_date.isoformat(),
                    'end_date': p.end_date.isoformat() if p.end_date else None
                }
                for p in self._projects
            ],
            columns=['id', 'name', 'description', 'status', 'start_date', 'end_date']
        )
        work_df = pd.DataFrame(
            [
                {
                    'project_id': w.project_id,
                    'employee_id': w.employee_id,
                    'hours_worked': w.hours_worked,
                    'monetary_value': w.monetary_value
                }
                for w in self._work_assignments
            ],
            columns=['project_id', 'employee_id', 'hours_worked', 'monetary_value']
        )
        return {'employees': employees_df, 'projects': projects_df, 'work_assignments': work_df}

    def export_to_csv(self, data_dir=DEFAULT_DATA_DIR):
        """Write the snapshot as CSV files readable by from_directory()"""
        data_path = Path(data_dir)
        data_path.mkdir(parents=True, exist_ok=True)

        frames = self.to_dataframes()
        frames['employees'].to_csv(data_path / EMPLOYEES_CSV, index=False)
        frames['projects'].to_csv(data_path / PROJECTS_CSV, index=False)
        frames['work_assignments'].to_csv(data_path / WORK_ASSIGNMENTS_CSV, index=False)

        logger.info(f"Exported snapshot to {data_path}")
        return data_path
