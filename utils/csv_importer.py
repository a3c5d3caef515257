"""
CSV importers for the three snapshot relations.

Each importer follows the same protocol: parse_csv() -> extract_*() ->
get_summary(), with import_all() running all three.
"""

import pandas as pd
from datetime import datetime
from utils.exceptions import CSVImportError, DataValidationError
from utils.logger import get_logger
from utils.models import Employee, Project, WorkAssignment

logger = get_logger(__name__)

DATE_FORMATS = [
    '%Y-%m-%d',      # "2024-12-25"
    '%m/%d/%Y',      # "12/25/2024"
    '%d-%b-%y',      # "25-Dec-24"
    '%b %d, %Y'      # "Dec 25, 2024"
]


class BaseCSVImporter:
    """Shared CSV reading, column validation and cell parsing"""

    required_columns = []
    id_column = None

    def __init__(self, csv_path):
        """Initialize importer with a CSV path or file-like object (e.g. a Streamlit upload)"""
        self.csv_path = csv_path
        self.df = None
        self.dropped_rows = 0

    def parse_csv(self):
        """Parse the CSV file and validate its columns"""
        try:
            # utf-8-sig handles the BOM Excel adds
            self.df = pd.read_csv(self.csv_path, encoding='utf-8-sig')
        except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
            raise CSVImportError(f"Could not read CSV {self._source_name()}: {e}") from e

        self.df.columns = self.df.columns.str.strip()

        missing_columns = [col for col in self.required_columns if col not in self.df.columns]
        if missing_columns:
            raise CSVImportError(
                f"Missing required columns in {self._source_name()}: {missing_columns}",
                missing_columns=missing_columns
            )

        # Drop blank/footer rows that carry no key
        if self.id_column:
            before = len(self.df)
            self.df = self.df.dropna(subset=[self.id_column])
            self.dropped_rows = before - len(self.df)
            if self.dropped_rows:
                logger.warning(f"Skipped {self.dropped_rows} rows without {self.id_column} in {self._source_name()}")

        return self

    def _source_name(self):
        return getattr(self.csv_path, 'name', str(self.csv_path))

    def _require_parsed(self):
        if self.df is None:
            self.parse_csv()

    @staticmethod
    def _parse_date(date_str):
        """
        Convert a date cell to a date object.
        Handles 'YYYY-MM-DD', 'MM/DD/YYYY', 'DD-Mon-YY' and 'Mon DD, YYYY'.
        Empty cells give None.
        """
        if pd.isna(date_str) or str(date_str).strip() == '':
            return None

        cleaned = str(date_str).strip()
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(cleaned, fmt).date()
            except ValueError:
                continue

        raise DataValidationError(f"Unrecognized date format: {date_str!r}")

    @staticmethod
    def _parse_number(value):
        """Convert a numeric cell like '$4,327.20' or '1,200' to float; empty cells give 0"""
        if pd.isna(value):
            return 0.0
        cleaned = str(value).strip().replace('$', '').replace(',', '')
        if cleaned == '':
            return 0.0
        try:
            return float(cleaned)
        except ValueError:
            raise DataValidationError(f"Invalid number: {value!r}") from None

    @staticmethod
    def _parse_id(value, column):
        """Convert an id cell (possibly read as float, e.g. 3.0) to int"""
        try:
            number = float(str(value).strip())
        except ValueError:
            raise DataValidationError(f"Invalid {column}: {value!r}") from None
        if not number.is_integer():
            raise DataValidationError(f"Invalid {column}: {value!r}")
        return int(number)

    @staticmethod
    def _parse_text(value, default=''):
        return str(value).strip() if pd.notna(value) else default


class EmployeeCSVImporter(BaseCSVImporter):
    """
    Imports employees from CSV files with format:
    id, first_name, last_name, annual_salary, hourly_rate[, full_name]

    full_name is optional; when present it must equal "first_name last_name".
    """

    required_columns = ['id', 'first_name', 'last_name', 'annual_salary', 'hourly_rate']
    id_column = 'id'

    def __init__(self, csv_path):
        super().__init__(csv_path)
        self.employees = []

    def extract_employees(self):
        """Extract Employee records from the parsed CSV"""
        self._require_parsed()
        self.employees = []

        for idx, row in self.df.iterrows():
            try:
                employee = Employee(
                    id=self._parse_id(row['id'], 'id'),
                    first_name=self._parse_text(row['first_name']),
                    last_name=self._parse_text(row['last_name']),
                    annual_salary=self._parse_number(row['annual_salary']),
                    hourly_rate=self._parse_number(row['hourly_rate'])
                )
                full_name = self._parse_text(row.get('full_name'))
                if full_name and full_name != employee.full_name:
                    raise DataValidationError(
                        f"full_name {full_name!r} does not match first/last name {employee.full_name!r}"
                    )
            except DataValidationError as e:
                logger.error(f"Invalid employee row {idx + 2} in {self._source_name()}: {e}")
                raise

            self.employees.append(employee)

        return self

    def get_summary(self):
        """Get summary statistics of the import"""
        if self.df is None:
            return {}

        return {
            'total_rows': len(self.df),
            'skipped_rows': self.dropped_rows,
            'total_employees': len(self.employees),
            'total_annual_salary': sum(e.annual_salary for e in self.employees)
        }

    def import_all(self):
        """
        Parse CSV and extract all employee data
        Returns: (employees, summary)
        """
        self.parse_csv()
        self.extract_employees()

        return self.employees, self.get_summary()


class ProjectCSVImporter(BaseCSVImporter):
    """
    Imports projects from CSV files with format:
    id, name, status, start_date[, end_date, description]

    Status labels are matched case-insensitively against
    Completed / In Progress / Planning.
    """

    required_columns = ['id', 'name', 'status', 'start_date']
    id_column = 'id'

    def __init__(self, csv_path):
        super().__init__(csv_path)
        self.projects = []

    def extract_projects(self):
        """Extract Project records from the parsed CSV"""
        self._require_parsed()
        self.projects = []

        for idx, row in self.df.iterrows():
            try:
                project = Project(
                    id=self._parse_id(row['id'], 'id'),
                    name=self._parse_text(row['name']),
                    description=self._parse_text(row.get('description')),
                    status=self._parse_text(row['status']),
                    start_date=self._parse_date(row['start_date']),
                    end_date=self._parse_date(row.get('end_date'))
                )
            except DataValidationError as e:
                logger.error(f"Invalid project row {idx + 2} in {self._source_name()}: {e}")
                raise

            self.projects.append(project)

        return self

    def get_summary(self):
        """Get summary statistics of the import"""
        if self.df is None:
            return {}

        by_status = {}
        for project in self.projects:
            by_status[project.status.value] = by_status.get(project.status.value, 0) + 1

        return {
            'total_rows': len(self.df),
            'skipped_rows': self.dropped_rows,
            'total_projects': len(self.projects),
            'active_projects': sum(1 for p in self.projects if p.is_active),
            'by_status': by_status
        }

    def import_all(self):
        """
        Parse CSV and extract all project data
        Returns: (projects, summary)
        """
        self.parse_csv()
        self.extract_projects()

        return self.projects, self.get_summary()


class WorkAssignmentCSVImporter(BaseCSVImporter):
    """
    Imports work assignments from CSV files with format:
    project_id, employee_id, hours_worked, monetary_value
    """

    required_columns = ['project_id', 'employee_id', 'hours_worked', 'monetary_value']
    # Blank keys raise in extract_work_assignments instead of being skipped
    id_column = None

    def __init__(self, csv_path):
        super().__init__(csv_path)
        self.work_assignments = []

    def extract_work_assignments(self):
        """Extract WorkAssignment records from the parsed CSV"""
        self._require_parsed()
        self.work_assignments = []

        for idx, row in self.df.iterrows():
            for key in ('project_id', 'employee_id'):
                if pd.isna(row[key]):
                    logger.error(f"Work assignment row {idx + 2} in {self._source_name()} has no {key}")
                    raise DataValidationError(f"Work assignment row {idx + 2} has no {key}")
            try:
                work = WorkAssignment(
                    project_id=self._parse_id(row['project_id'], 'project_id'),
                    employee_id=self._parse_id(row['employee_id'], 'employee_id'),
                    hours_worked=self._parse_number(row['hours_worked']),
                    monetary_value=self._parse_number(row['monetary_value'])
                )
            except DataValidationError as e:
                logger.error(f"Invalid work assignment row {idx + 2} in {self._source_name()}: {e}")
                raise

            self.work_assignments.append(work)

        return self

    def get_summary(self):
        """Get summary statistics of the import"""
        if self.df is None:
            return {}

        return {
            'total_rows': len(self.df),
            'skipped_rows': self.dropped_rows,
            'work_assignments': len(self.work_assignments),
            'unique_projects': len({w.project_id for w in self.work_assignments}),
            'unique_employees': len({w.employee_id for w in self.work_assignments}),
            'total_hours': sum(w.hours_worked for w in self.work_assignments),
            'total_value': sum(w.monetary_value for w in self.work_assignments)
        }

    def import_all(self):
        """
        Parse CSV and extract all work assignment data
        Returns: (work_assignments, summary)
        """
        self.parse_csv()
        self.extract_work_assignments()

        return self.work_assignments, self.get_summary()
