"""
test_csv_importer.py: CSV parsing for employees, projects and work assignments.
"""

import io
from datetime import date

import pytest

from utils.csv_importer import (
    BaseCSVImporter,
    EmployeeCSVImporter,
    ProjectCSVImporter,
    WorkAssignmentCSVImporter,
)
from utils.exceptions import CSVImportError, DataValidationError, InvalidStatusError
from utils.models import ProjectStatus


def _write(tmp_path, name, text, encoding='utf-8'):
    path = tmp_path / name
    path.write_text(text, encoding=encoding)
    return path


class TestParsers:

    @pytest.mark.parametrize("raw", ['2024-12-25', '12/25/2024', '25-Dec-24', 'Dec 25, 2024'])
    def test_date_formats(self, raw):
        assert BaseCSVImporter._parse_date(raw) == date(2024, 12, 25)

    @pytest.mark.parametrize("raw", ['', '   ', None, float('nan')])
    def test_empty_date_is_none(self, raw):
        assert BaseCSVImporter._parse_date(raw) is None

    def test_bad_date_raises(self):
        with pytest.raises(DataValidationError):
            BaseCSVImporter._parse_date('25th of December')

    @pytest.mark.parametrize("raw, expected", [
        ('$4,327.20', 4327.20),
        ('1,200', 1200.0),
        (36.06, 36.06),
        ('', 0.0),
        (float('nan'), 0.0),
    ])
    def test_numbers(self, raw, expected):
        assert BaseCSVImporter._parse_number(raw) == pytest.approx(expected)

    def test_bad_number_raises(self):
        with pytest.raises(DataValidationError):
            BaseCSVImporter._parse_number('about 40')

    @pytest.mark.parametrize("raw, expected", [(3, 3), (3.0, 3), ('7', 7), (' 12 ', 12)])
    def test_ids(self, raw, expected):
        assert BaseCSVImporter._parse_id(raw, 'id') == expected

    @pytest.mark.parametrize("raw", ['abc', 2.5])
    def test_bad_ids_raise(self, raw):
        with pytest.raises(DataValidationError):
            BaseCSVImporter._parse_id(raw, 'id')


class TestEmployeeCSVImporter:

    def test_import_with_bom_and_padded_headers(self, tmp_path):
        path = _write(
            tmp_path, 'employees.csv',
            ' id , first_name,last_name ,annual_salary,hourly_rate\n'
            '1,John,Doe,"$75,000",36.06\n'
            '2,Jane,Smith,85000,$40.87\n',
            encoding='utf-8-sig'
        )
        employees, summary = EmployeeCSVImporter(path).import_all()

        assert [e.full_name for e in employees] == ['John Doe', 'Jane Smith']
        assert employees[0].annual_salary == 75000
        assert employees[1].hourly_rate == pytest.approx(40.87)
        assert summary['total_employees'] == 2
        assert summary['total_annual_salary'] == 160000

    def test_matching_full_name_accepted(self):
        csv = io.StringIO('id,first_name,last_name,full_name,annual_salary,hourly_rate\n'
                          '1,John,Doe,John Doe,75000,36.06\n')
        employees, _ = EmployeeCSVImporter(csv).import_all()
        assert employees[0].full_name == 'John Doe'

    def test_mismatched_full_name_rejected(self):
        csv = io.StringIO('id,first_name,last_name,full_name,annual_salary,hourly_rate\n'
                          '1,John,Doe,Johnny Doe,75000,36.06\n')
        with pytest.raises(DataValidationError, match='does not match'):
            EmployeeCSVImporter(csv).import_all()

    def test_missing_columns(self):
        csv = io.StringIO('id,first_name,last_name\n1,John,Doe\n')
        with pytest.raises(CSVImportError) as exc_info:
            EmployeeCSVImporter(csv).import_all()

        assert exc_info.value.missing_columns == ['annual_salary', 'hourly_rate']
        assert exc_info.value.code == 'CSV_IMPORT_ERROR'

    def test_rows_without_id_are_skipped(self):
        csv = io.StringIO('id,first_name,last_name,annual_salary,hourly_rate\n'
                          '1,John,Doe,75000,36.06\n'
                          ',,,,\n')
        importer = EmployeeCSVImporter(csv)
        employees, summary = importer.import_all()

        assert len(employees) == 1
        assert importer.dropped_rows == 1
        assert summary['skipped_rows'] == 1

    def test_negative_salary_rejected(self):
        csv = io.StringIO('id,first_name,last_name,annual_salary,hourly_rate\n'
                          '1,John,Doe,-5,36.06\n')
        with pytest.raises(DataValidationError):
            EmployeeCSVImporter(csv).import_all()

    def test_empty_file(self, tmp_path):
        path = _write(tmp_path, 'employees.csv', '')
        with pytest.raises(CSVImportError):
            EmployeeCSVImporter(path).import_all()

    def test_summary_before_parsing_is_empty(self):
        assert EmployeeCSVImporter(io.StringIO('')).get_summary() == {}


class TestProjectCSVImporter:

    CSV = (
        'id,name,status,start_date,end_date,description\n'
        '1,Portal,in progress,2024-01-15,06/30/2024,Customer portal\n'
        '2,Mobile,COMPLETED,"Nov 01, 2023",,\n'
        '3,API,Planning,01-Apr-24,,Integration work\n'
    )

    def test_import_normalizes_status_and_dates(self, tmp_path):
        projects, summary = ProjectCSVImporter(_write(tmp_path, 'projects.csv', self.CSV)).import_all()

        assert [p.status for p in projects] == [
            ProjectStatus.IN_PROGRESS, ProjectStatus.COMPLETED, ProjectStatus.PLANNING
        ]
        assert projects[0].end_date == date(2024, 6, 30)
        assert projects[1].start_date == date(2023, 11, 1)
        assert projects[1].end_date is None
        assert projects[1].description == ''
        assert projects[2].start_date == date(2024, 4, 1)

        assert summary['total_projects'] == 3
        assert summary['active_projects'] == 2
        assert summary['by_status'] == {'In Progress': 1, 'Completed': 1, 'Planning': 1}

    def test_unknown_status_rejected(self):
        csv = io.StringIO('id,name,status,start_date\n1,Portal,On Hold,2024-01-15\n')
        with pytest.raises(InvalidStatusError):
            ProjectCSVImporter(csv).import_all()

    def test_missing_start_date_rejected(self):
        csv = io.StringIO('id,name,status,start_date\n1,Portal,Planning,\n')
        with pytest.raises(DataValidationError, match='no start_date'):
            ProjectCSVImporter(csv).import_all()

    def test_optional_columns_may_be_absent(self):
        csv = io.StringIO('id,name,status,start_date\n1,Portal,Planning,2024-01-15\n')
        projects, _ = ProjectCSVImporter(csv).import_all()

        assert projects[0].end_date is None
        assert projects[0].description == ''


class TestWorkAssignmentCSVImporter:

    def test_import_and_summary(self):
        csv = io.StringIO('project_id,employee_id,hours_worked,monetary_value\n'
                          '1,1,120,"$4,327.20"\n'
                          '1,2,95,3882.65\n'
                          '2,1,10,100\n')
        work, summary = WorkAssignmentCSVImporter(csv).import_all()

        assert len(work) == 3
        assert work[0].monetary_value == pytest.approx(4327.20)
        assert summary['unique_projects'] == 2
        assert summary['unique_employees'] == 2
        assert summary['total_hours'] == 225
        assert summary['total_value'] == pytest.approx(8309.85)

    def test_missing_project_id_rejected(self):
        csv = io.StringIO('project_id,employee_id,hours_worked,monetary_value\n'
                          ',1,10,100\n')
        with pytest.raises(DataValidationError, match='no project_id'):
            WorkAssignmentCSVImporter(csv).import_all()

    def test_missing_employee_id_rejected(self):
        """A row with hours but no employee must fail the import, not vanish from the totals."""
        csv = io.StringIO('project_id,employee_id,hours_worked,monetary_value\n'
                          '1,1,10,100\n'
                          '1,,500,5000\n')
        with pytest.raises(DataValidationError, match='row 3 has no employee_id'):
            WorkAssignmentCSVImporter(csv).import_all()

    def test_blank_rows_are_not_skipped(self):
        csv = io.StringIO('project_id,employee_id,hours_worked,monetary_value\n'
                          '1,1,10,100\n'
                          ',,,\n')
        importer = WorkAssignmentCSVImporter(csv)
        with pytest.raises(DataValidationError):
            importer.import_all()
        assert importer.dropped_rows == 0

    def test_negative_hours_rejected(self):
        csv = io.StringIO('project_id,employee_id,hours_worked,monetary_value\n'
                          '1,1,-4,100\n')
        with pytest.raises(DataValidationError):
            WorkAssignmentCSVImporter(csv).import_all()

    def test_missing_columns(self):
        csv = io.StringIO('project_id,employee_id,hours\n1,1,4\n')
        with pytest.raises(CSVImportError) as exc_info:
            WorkAssignmentCSVImporter(csv).import_all()
        assert exc_info.value.missing_columns == ['hours_worked', 'monetary_value']
