"""
Configuration constants for the Timesheet Dashboard.
"""

MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
]

MONTHS_PER_YEAR = 12

# Badge colours per status label (matches ProjectStatus values)
PROJECT_STATUS_COLORS = {
    'Completed': 'green',
    'In Progress': 'yellow',
    'Planning': 'blue',
}
DEFAULT_STATUS_COLOR = 'gray'

EMPLOYEE_GRID_COLUMNS = ['Employee', 'Annual Salary', 'Hourly Rate']

EMPLOYEES_PER_PAGE = 5
MAX_VISIBLE_PAGES = 5

UNKNOWN_PROJECT_NAME = 'Unknown Project'

# Snapshot CSV files
DEFAULT_DATA_DIR = 'data'
EMPLOYEES_CSV = 'employees.csv'
PROJECTS_CSV = 'projects.csv'
WORK_ASSIGNMENTS_CSV = 'work_assignments.csv'

# Chart colours
HOURS_COLOR = 'rgba(59, 130, 246, 0.8)'
VALUE_COLOR = 'rgba(147, 51, 234, 0.8)'

# Excel report
EXCEL_REPORT_FILE = 'timesheet_report.xlsx'
XLSX_MIME = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
