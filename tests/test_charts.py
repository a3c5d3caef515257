"""
test_charts.py: Plotly figure builders.
"""

from datetime import date

from components.charts import (
    build_employee_breakdown_chart,
    build_project_breakdown_chart,
    build_projects_summary_chart,
    build_year_projection_chart,
)
from utils.data_processor import DataProcessor
from utils.models import AssignmentSeries, YearProjection


class TestBreakdownCharts:

    def test_project_breakdown_has_hours_and_value_bars(self, employees, work_assignments):
        series = DataProcessor.calculate_assignment_series_for_project(10, employees, work_assignments)
        fig = build_project_breakdown_chart(series, 'Alpha')

        assert [trace.name for trace in fig.data] == ['Hours Worked', 'Monetary Value ($)']
        assert list(fig.data[0].x) == ['Ada Lovelace', 'Alan Turing']
        assert list(fig.data[1].y) == [400, 900]
        assert fig.data[1].yaxis == 'y2'
        assert fig.layout.title.text == 'Project Breakdown - Alpha'
        assert fig.layout.barmode == 'group'

    def test_empty_series_gets_annotation(self):
        fig = build_project_breakdown_chart(AssignmentSeries(), 'Gamma')

        assert len(fig.layout.annotations) == 1
        assert fig.data[0].x is None or len(fig.data[0].x) == 0

    def test_employee_breakdown(self, projects, work_assignments):
        series = DataProcessor.calculate_assignment_series_for_employee(2, projects, work_assignments)
        fig = build_employee_breakdown_chart(series, 'Alan Turing')

        assert list(fig.data[0].x) == ['Alpha', 'Beta']
        assert 'Alan Turing' in fig.layout.title.text


class TestSummaryCharts:

    def test_projects_summary_lines(self, projects, work_assignments):
        summaries = DataProcessor.calculate_project_summaries(projects, work_assignments)
        fig = build_projects_summary_chart(summaries)

        assert [trace.name for trace in fig.data] == ['Total Hours', 'Monetary Value ($)']
        assert list(fig.data[0].x) == ['Alpha', 'Beta', 'Gamma']
        assert list(fig.data[0].y) == [100, 40, 0]

    def test_year_projection_chart(self, employees, projects, work_assignments):
        projection = DataProcessor.calculate_year_projection(
            date(2024, 10, 1), employees, projects, work_assignments
        )
        fig = build_year_projection_chart(projection)

        assert [trace.type for trace in fig.data] == ['bar', 'scatter']
        assert list(fig.data[0].x) == ['October', 'November', 'December']

    def test_year_projection_chart_without_months(self):
        fig = build_year_projection_chart(YearProjection())
        assert len(fig.data) == 2
