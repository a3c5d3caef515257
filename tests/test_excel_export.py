"""
test_excel_export.py: Two-sheet Excel report built with openpyxl.
"""

from datetime import date

import pytest
from openpyxl import load_workbook

from components.excel_export import PROJECTION_SHEET, SUMMARY_SHEET, export_report_to_excel
from utils.data_processor import DataProcessor


@pytest.fixture
def workbook(employees, projects, work_assignments):
    summaries = DataProcessor.calculate_project_summaries(projects, work_assignments)
    totals = DataProcessor.calculate_overall_totals(summaries)
    projection = DataProcessor.calculate_year_projection(
        date(2024, 11, 1), employees, projects, work_assignments
    )
    return load_workbook(export_report_to_excel(summaries, totals, projection))


class TestExcelReport:

    def test_sheets(self, workbook):
        assert workbook.sheetnames == [SUMMARY_SHEET, PROJECTION_SHEET]

    def test_summary_rows_and_totals(self, workbook):
        ws = workbook[SUMMARY_SHEET]

        assert ws.cell(1, 1).value == "Project"
        assert [ws.cell(row, 1).value for row in range(2, 5)] == ['Alpha', 'Beta', 'Gamma']
        assert ws.cell(2, 2).value == 'In Progress'
        assert ws.cell(2, 4).value == 1300
        assert ws.cell(5, 1).value == "Total"
        assert ws.cell(5, 3).value == 140
        assert ws.cell(5, 5).value == 4

    def test_projection_months(self, workbook):
        ws = workbook[PROJECTION_SHEET]

        assert ws.cell(2, 1).value == 'November'
        assert ws.cell(3, 1).value == 'December'
        assert ws.cell(5, 1).value == "Remaining Months"
        assert ws.cell(5, 2).value == 2
