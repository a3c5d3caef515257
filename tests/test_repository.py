"""
test_repository.py: Snapshot validation, lookups and CSV export/reload.
"""

from datetime import date

import pytest

from utils.constants import EMPLOYEES_CSV, PROJECTS_CSV, UNKNOWN_PROJECT_NAME, WORK_ASSIGNMENTS_CSV
from utils.data_processor import DataProcessor
from utils.exceptions import DataValidationError, ReferentialIntegrityError
from utils.models import Employee, Project, WorkAssignment
from utils.repository import DataRepository


@pytest.fixture
def repository(employees, projects, work_assignments):
    return DataRepository(employees, projects, work_assignments)


class TestValidation:

    def test_unknown_employee_rejected(self, employees, projects):
        work = [WorkAssignment(project_id=10, employee_id=99, hours_worked=1, monetary_value=1)]
        with pytest.raises(ReferentialIntegrityError) as exc_info:
            DataRepository(employees, projects, work)

        assert exc_info.value.entity == 'employee'
        assert exc_info.value.entity_id == 99
        assert exc_info.value.code == 'REFERENTIAL_INTEGRITY_VIOLATION'

    def test_unknown_project_rejected(self, employees, projects):
        work = [WorkAssignment(project_id=404, employee_id=1, hours_worked=1, monetary_value=1)]
        with pytest.raises(ReferentialIntegrityError) as exc_info:
            DataRepository(employees, projects, work)
        assert exc_info.value.entity == 'project'

    def test_duplicate_employee_id_rejected(self, employees, projects, work_assignments):
        clash = Employee(id=1, first_name='Other', last_name='Person', annual_salary=1, hourly_rate=1)
        with pytest.raises(DataValidationError, match='Duplicate employee id 1'):
            DataRepository(employees + [clash], projects, work_assignments)

    def test_duplicate_project_id_rejected(self, employees, projects, work_assignments):
        clash = Project(id=10, name='Alpha again', status='Planning', start_date=date(2024, 1, 1))
        with pytest.raises(DataValidationError):
            DataRepository(employees, projects + [clash], work_assignments)

    def test_empty_snapshot_is_valid(self):
        repo = DataRepository([], [], [])
        assert repo.is_empty()
        assert repo.get_summary() == {
            'employees': 0, 'projects': 0, 'active_projects': 0, 'work_assignments': 0
        }


class TestQueries:

    def test_lookups(self, repository):
        assert repository.get_employee_by_id(3).full_name == 'Grace Hopper'
        assert repository.get_employee_by_id(42) is None
        assert repository.get_project_by_id(20).name == 'Beta'

    def test_project_name_falls_back_for_unknown_id(self, repository):
        assert repository.get_project_name(10) == 'Alpha'
        assert repository.get_project_name(999) == UNKNOWN_PROJECT_NAME

    def test_active_projects_exclude_completed(self, repository):
        assert [p.name for p in repository.get_active_projects()] == ['Alpha', 'Gamma']

    def test_work_filters(self, repository):
        assert len(repository.get_work_by_project(10)) == 2
        assert repository.get_work_by_project(30) == []
        assert {w.project_id for w in repository.get_work_by_employee(2)} == {10, 20}

    def test_getters_return_copies(self, repository):
        repository.get_employees().clear()
        assert len(repository.get_employees()) == 3

    def test_summary(self, repository):
        assert repository.get_summary() == {
            'employees': 3, 'projects': 3, 'active_projects': 2, 'work_assignments': 4
        }
        assert not repository.is_empty()


class TestSampleData:

    def test_sample_repository_loads(self):
        repo = DataRepository.from_sample_data()
        assert repo.get_summary() == {
            'employees': 25, 'projects': 5, 'active_projects': 4, 'work_assignments': 50
        }

    def test_sample_statuses(self):
        repo = DataRepository.from_sample_data()
        statuses = {p.id: p.status.value for p in repo.get_projects()}
        assert statuses[2] == 'Completed'
        assert statuses[4] == 'Planning'


class TestExport:

    def test_to_dataframes_shape(self, repository):
        frames = repository.to_dataframes()

        assert set(frames) == {'employees', 'projects', 'work_assignments'}
        assert list(frames['employees']['full_name']) == ['Ada Lovelace', 'Alan Turing', 'Grace Hopper']
        assert frames['projects'].loc[1, 'end_date'] == '2024-02-01'
        assert frames['projects'].loc[0, 'status'] == 'In Progress'

    def test_export_writes_three_files(self, repository, tmp_path):
        path = repository.export_to_csv(tmp_path / 'snapshot')

        for filename in (EMPLOYEES_CSV, PROJECTS_CSV, WORK_ASSIGNMENTS_CSV):
            assert (path / filename).exists()

    def test_export_then_reload_gives_same_aggregates(self, tmp_path):
        exported = DataRepository.from_sample_data()
        exported.export_to_csv(tmp_path)
        reloaded = DataRepository.from_directory(tmp_path)

        assert reloaded.get_summary() == exported.get_summary()
        assert reloaded.get_employees() == exported.get_employees()
        assert reloaded.get_projects() == exported.get_projects()

        before = DataProcessor.calculate_project_summaries(exported.get_projects(), exported.get_work_assignments())
        after = DataProcessor.calculate_project_summaries(reloaded.get_projects(), reloaded.get_work_assignments())
        for old, new in zip(before, after):
            assert new.total_hours == pytest.approx(old.total_hours)
            assert new.total_value == pytest.approx(old.total_value)
            assert new.employee_count == old.employee_count
