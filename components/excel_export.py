"""
Excel report export

Writes the project summaries and the year projection to a two-sheet workbook
for download.
"""

from io import BytesIO
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from utils.logger import get_logger

logger = get_logger(__name__)

SUMMARY_SHEET = "Project Summaries"
PROJECTION_SHEET = "Year Projection"

HEADER_FILL = PatternFill(start_color="DBEAFE", end_color="DBEAFE", fill_type="solid")
CURRENCY_FORMAT = '"$"#,##0.00'
HOURS_FORMAT = '#,##0.0'


def export_report_to_excel(summaries, totals, projection):
    """Export project summaries and the year projection to Excel with formatting"""

    wb = Workbook()

    # Remove default sheet
    wb.remove(wb.active)

    write_summary_sheet(wb.create_sheet(SUMMARY_SHEET), summaries, totals)
    write_projection_sheet(wb.create_sheet(PROJECTION_SHEET), projection)

    excel_file = BytesIO()
    wb.save(excel_file)
    excel_file.seek(0)

    logger.info(f"Exported Excel report: {len(summaries)} projects, "
                f"{len(projection.monthly_breakdown)} projected months")
    return excel_file


def _write_header(ws, headers):
    for col, header in enumerate(headers, start=1):
        cell = ws.cell(1, col, header)
        cell.font = Font(bold=True)
        cell.fill = HEADER_FILL


def write_summary_sheet(ws, summaries, totals):
    """One row per project followed by a bold totals row"""
    _write_header(ws, [
        "Project", "Status", "Total Hours", "Total Value",
        "Employees", "Avg Hours / Employee", "Avg Value / Employee"
    ])

    row = 2
    for summary in summaries:
        ws.cell(row, 1, summary.project_name)
        ws.cell(row, 2, summary.project_status.value)
        ws.cell(row, 3, summary.total_hours).number_format = HOURS_FORMAT
        ws.cell(row, 4, summary.total_value).number_format = CURRENCY_FORMAT
        ws.cell(row, 5, summary.employee_count)
        ws.cell(row, 6, summary.average_hours_per_employee).number_format = HOURS_FORMAT
        ws.cell(row, 7, summary.average_value_per_employee).number_format = CURRENCY_FORMAT
        row += 1

    ws.cell(row, 1, "Total").font = Font(bold=True)
    ws.cell(row, 3, totals.total_hours).number_format = HOURS_FORMAT
    ws.cell(row, 4, totals.total_value).number_format = CURRENCY_FORMAT
    ws.cell(row, 5, totals.total_employees)
    for col in (3, 4, 5):
        ws.cell(row, col).font = Font(bold=True)

    ws.column_dimensions['A'].width = 30


def write_projection_sheet(ws, projection):
    """Monthly breakdown with the projection totals underneath"""
    _write_header(ws, [
        "Month", "Projected Hours", "Projected Value", "Cumulative Hours", "Cumulative Value"
    ])

    row = 2
    for month in projection.monthly_breakdown:
        ws.cell(row, 1, month.month)
        ws.cell(row, 2, month.projected_hours).number_format = HOURS_FORMAT
        ws.cell(row, 3, month.projected_value).number_format = CURRENCY_FORMAT
        ws.cell(row, 4, month.cumulative_hours).number_format = HOURS_FORMAT
        ws.cell(row, 5, month.cumulative_value).number_format = CURRENCY_FORMAT
        row += 1

    row += 1
    for label, value in [
        ("Remaining Months", projection.remaining_months),
        ("Active Projects", projection.active_projects),
        ("Active Employees", projection.active_employees),
        ("Total Projected Hours", projection.total_projected_hours),
        ("Total Projected Value", projection.total_projected_value),
    ]:
        ws.cell(row, 1, label).font = Font(bold=True)
        ws.cell(row, 2, value)
        row += 1

    ws.column_dimensions['A'].width = 24
