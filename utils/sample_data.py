from datetime import date
from utils.logger import get_logger
from utils.models import Employee, Project, WorkAssignment

logger = get_logger(__name__)


def generate_sample_data():
    """
    Build the bundled demo snapshot.

    Returns:
        tuple: (employees, projects, work_assignments)
    """

    # Sample employees
    employees = [
        {'id': 1, 'first_name': 'John', 'last_name': 'Doe', 'annual_salary': 75000, 'hourly_rate': 36.06},
        {'id': 2, 'first_name': 'Jane', 'last_name': 'Smith', 'annual_salary': 85000, 'hourly_rate': 40.87},
        {'id': 3, 'first_name': 'Mike', 'last_name': 'Johnson', 'annual_salary': 65000, 'hourly_rate': 31.25},
        {'id': 4, 'first_name': 'Sarah', 'last_name': 'Williams', 'annual_salary': 90000, 'hourly_rate': 43.27},
        {'id': 5, 'first_name': 'David', 'last_name': 'Brown', 'annual_salary': 70000, 'hourly_rate': 33.65},
        {'id': 6, 'first_name': 'Emily', 'last_name': 'Davis', 'annual_salary': 82000, 'hourly_rate': 39.42},
        {'id': 7, 'first_name': 'Robert', 'last_name': 'Miller', 'annual_salary': 95000, 'hourly_rate': 45.67},
        {'id': 8, 'first_name': 'Lisa', 'last_name': 'Wilson', 'annual_salary': 78000, 'hourly_rate': 37.50},
        {'id': 9, 'first_name': 'James', 'last_name': 'Taylor', 'annual_salary': 88000, 'hourly_rate': 42.31},
        {'id': 10, 'first_name': 'Amanda', 'last_name': 'Anderson', 'annual_salary': 72000, 'hourly_rate': 34.62},
        {'id': 11, 'first_name': 'Christopher', 'last_name': 'Thomas', 'annual_salary': 92000, 'hourly_rate': 44.23},
        {'id': 12, 'first_name': 'Jessica', 'last_name': 'Jackson', 'annual_salary': 76000, 'hourly_rate': 36.54},
        {'id': 13, 'first_name': 'Daniel', 'last_name': 'White', 'annual_salary': 83000, 'hourly_rate': 39.90},
        {'id': 14, 'first_name': 'Ashley', 'last_name': 'Harris', 'annual_salary': 68000, 'hourly_rate': 32.69},
        {'id': 15, 'first_name': 'Matthew', 'last_name': 'Martin', 'annual_salary': 87000, 'hourly_rate': 41.83},
        {'id': 16, 'first_name': 'Nicole', 'last_name': 'Thompson', 'annual_salary': 74000, 'hourly_rate': 35.58},
        {'id': 17, 'first_name': 'Andrew', 'last_name': 'Garcia', 'annual_salary': 91000, 'hourly_rate': 43.75},
        {'id': 18, 'first_name': 'Stephanie', 'last_name': 'Martinez', 'annual_salary': 79000, 'hourly_rate': 37.98},
        {'id': 19, 'first_name': 'Joshua', 'last_name': 'Robinson', 'annual_salary': 86000, 'hourly_rate': 41.35},
        {'id': 20, 'first_name': 'Melissa', 'last_name': 'Clark', 'annual_salary': 73000, 'hourly_rate': 35.10},
        {'id': 21, 'first_name': 'Ryan', 'last_name': 'Rodriguez', 'annual_salary': 89000, 'hourly_rate': 42.79},
        {'id': 22, 'first_name': 'Rebecca', 'last_name': 'Lewis', 'annual_salary': 77000, 'hourly_rate': 37.02},
        {'id': 23, 'first_name': 'Kevin', 'last_name': 'Lee', 'annual_salary': 84000, 'hourly_rate': 40.38},
        {'id': 24, 'first_name': 'Laura', 'last_name': 'Walker', 'annual_salary': 71000, 'hourly_rate': 34.13},
        {'id': 25, 'first_name': 'Brian', 'last_name': 'Hall', 'annual_salary': 93000, 'hourly_rate': 44.71},
    ]

    # Sample projects
    projects = [
        {
            'id': 1,
            'name': 'E-commerce Platform',
            'description': 'Full-stack e-commerce solution with payment integration',
            'status': 'In Progress',
            'start_date': date(2024, 1, 15),
            'end_date': date(2024, 6, 30)
        },
        {
            'id': 2,
            'name': 'Mobile App Development',
            'description': 'Cross-platform mobile application for iOS and Android',
            'status': 'Completed',
            'start_date': date(2023, 11, 1),
            'end_date': date(2024, 3, 15)
        },
        {
            'id': 3,
            'name': 'Data Analytics Dashboard',
            'description': 'Real-time analytics dashboard with data visualization',
            'status': 'In Progress',
            'start_date': date(2024, 2, 1),
            'end_date': date(2024, 8, 31)
        },
        {
            'id': 4,
            'name': 'API Integration Services',
            'description': 'Third-party API integration and microservices development',
            'status': 'Planning',
            'start_date': date(2024, 4, 1),
            'end_date': date(2024, 9, 30)
        },
        {
            'id': 5,
            'name': 'Cloud Migration Project',
            'description': 'Legacy system migration to cloud infrastructure',
            'status': 'In Progress',
            'start_date': date(2024, 3, 1),
            'end_date': date(2024, 12, 31)
        },
    ]

    # (project_id, employee_id, hours_worked, monetary_value)
    work_rows = [
        # E-commerce Platform
        (1, 1, 120, 4327.20), (1, 2, 95, 3882.65), (1, 3, 80, 2500.00), (1, 4, 110, 4759.70),
        (1, 5, 75, 2523.75), (1, 6, 85, 3487.00), (1, 7, 100, 4567.00), (1, 8, 90, 3525.00),
        (1, 9, 105, 4624.55), (1, 10, 70, 2423.40),
        # Mobile App Development
        (2, 11, 85, 3759.55), (2, 12, 95, 3473.00), (2, 13, 110, 4389.00), (2, 14, 65, 2124.85),
        (2, 15, 100, 4183.00), (2, 16, 80, 2846.40), (2, 17, 115, 4981.25), (2, 18, 90, 3418.20),
        (2, 19, 105, 4441.75), (2, 20, 75, 2632.50),
        # Data Analytics Dashboard
        (3, 21, 95, 4065.05), (3, 22, 85, 3186.70), (3, 23, 100, 4038.00), (3, 24, 70, 2389.10),
        (3, 25, 110, 5118.10), (3, 1, 60, 2163.60), (3, 2, 85, 3473.95), (3, 3, 70, 2187.50),
        (3, 4, 95, 4110.65), (3, 5, 65, 2187.25),
        # API Integration Services
        (4, 6, 80, 3281.60), (4, 7, 105, 4795.35), (4, 8, 90, 3525.00), (4, 9, 115, 5068.65),
        (4, 10, 75, 2596.50), (4, 11, 100, 4423.00), (4, 12, 85, 3109.00), (4, 13, 110, 4389.00),
        (4, 14, 65, 2124.85), (4, 15, 95, 3973.85),
        # Cloud Migration Project
        (5, 16, 120, 4270.80), (5, 17, 95, 4111.25), (5, 18, 100, 3798.00), (5, 19, 85, 3651.75),
        (5, 20, 110, 3853.50), (5, 21, 75, 3207.75), (5, 22, 105, 3932.70), (5, 23, 90, 3634.20),
        (5, 24, 115, 3927.65), (5, 25, 80, 3576.80),
    ]

    employee_records = [Employee(**employee) for employee in employees]
    project_records = [Project(**project) for project in projects]
    work_records = [
        WorkAssignment(project_id=project_id, employee_id=employee_id,
                       hours_worked=hours, monetary_value=value)
        for project_id, employee_id, hours, value in work_rows
    ]

    logger.info(
        f"Generated sample data: {len(employee_records)} employees, "
        f"{len(project_records)} projects, {len(work_records)} work assignments"
    )

    return employee_records, project_records, work_records
