"""
Shared pytest fixtures for the Timesheet Dashboard test suite.

All tests are pure unit tests over in-memory snapshots; no Streamlit runtime
is started.
"""

from datetime import date

import pytest

from utils.models import Employee, Project, WorkAssignment
from utils.sample_data import generate_sample_data


@pytest.fixture(scope="session")
def sample_snapshot():
    """Bundled demo data: (employees, projects, work_assignments)."""
    return generate_sample_data()


# ---------------------------------------------------------------------------
# Small hand-built snapshot
#
#   Project 10 "Alpha"  In Progress   employees 1 (40h/$400), 2 (60h/$900)
#   Project 20 "Beta"   Completed     employees 2 (30h/$300), 3 (10h/$150)
#   Project 30 "Gamma"  Planning      no work
# ---------------------------------------------------------------------------

@pytest.fixture
def employees():
    return [
        Employee(id=1, first_name='Ada', last_name='Lovelace', annual_salary=90000, hourly_rate=43.27),
        Employee(id=2, first_name='Alan', last_name='Turing', annual_salary=80000, hourly_rate=38.46),
        Employee(id=3, first_name='Grace', last_name='Hopper', annual_salary=70000, hourly_rate=33.65),
    ]


@pytest.fixture
def projects():
    return [
        Project(id=10, name='Alpha', status='In Progress', start_date=date(2024, 1, 1)),
        Project(id=20, name='Beta', status='Completed', start_date=date(2023, 6, 1), end_date=date(2024, 2, 1)),
        Project(id=30, name='Gamma', status='Planning', start_date=date(2024, 5, 1)),
    ]


@pytest.fixture
def work_assignments():
    return [
        WorkAssignment(project_id=10, employee_id=2, hours_worked=60, monetary_value=900),
        WorkAssignment(project_id=10, employee_id=1, hours_worked=40, monetary_value=400),
        WorkAssignment(project_id=20, employee_id=2, hours_worked=30, monetary_value=300),
        WorkAssignment(project_id=20, employee_id=3, hours_worked=10, monetary_value=150),
    ]
