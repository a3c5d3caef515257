"""
Chart Components

Plotly figure builders for the dashboard pages. Each builder takes engine
output as-is and returns a go.Figure; pages only call st.plotly_chart on it.
"""

import plotly.graph_objects as go
from utils.constants import HOURS_COLOR, VALUE_COLOR
from utils.logger import get_logger

logger = get_logger(__name__)


def _dual_axis_layout(fig, title, xaxis_title, height=450):
    fig.update_layout(
        title=title,
        xaxis_title=xaxis_title,
        yaxis=dict(title='Hours', rangemode='tozero'),
        yaxis2=dict(title='Monetary Value ($)', overlaying='y', side='right', rangemode='tozero'),
        legend=dict(orientation='h', yanchor='bottom', y=1.02, xanchor='right', x=1),
        hovermode='x unified',
        height=height
    )
    return fig


def _grouped_bars(series):
    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=list(series.labels),
        y=list(series.hours),
        name='Hours Worked',
        marker_color=HOURS_COLOR,
        offsetgroup=0,
        yaxis='y'
    ))
    fig.add_trace(go.Bar(
        x=list(series.labels),
        y=list(series.values),
        name='Monetary Value ($)',
        marker_color=VALUE_COLOR,
        offsetgroup=1,
        yaxis='y2'
    ))
    fig.update_layout(barmode='group')
    return fig


def build_project_breakdown_chart(series, project_name):
    """Grouped bars of hours and monetary value per employee on one project"""
    fig = _grouped_bars(series)
    _dual_axis_layout(fig, f"Project Breakdown - {project_name}", 'Employees')

    if series.is_empty:
        logger.debug(f"No work data to chart for project {project_name}")
        fig.add_annotation(text='No work recorded for this project', showarrow=False,
                           xref='paper', yref='paper', x=0.5, y=0.5)

    return fig


def build_employee_breakdown_chart(series, employee_name):
    """Grouped bars of hours and monetary value per project for one employee"""
    fig = _grouped_bars(series)
    _dual_axis_layout(fig, f"Work by Project - {employee_name}", 'Projects', height=400)
    return fig


def build_projects_summary_chart(summaries):
    """Line chart of total hours vs total monetary value per project"""
    project_names = [summary.project_name for summary in summaries]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=project_names,
        y=[summary.total_hours for summary in summaries],
        mode='lines+markers',
        name='Total Hours',
        line=dict(color=HOURS_COLOR, width=3, shape='spline'),
        marker=dict(size=10),
        yaxis='y'
    ))
    fig.add_trace(go.Scatter(
        x=project_names,
        y=[summary.total_value for summary in summaries],
        mode='lines+markers',
        name='Monetary Value ($)',
        line=dict(color=VALUE_COLOR, width=3, shape='spline'),
        marker=dict(size=10),
        yaxis='y2'
    ))

    return _dual_axis_layout(fig, 'Projects Summary - Hours vs Monetary Value', 'Projects')


def build_year_projection_chart(projection):
    """Monthly projected hours as bars with cumulative hours as a line"""
    months = [month.month for month in projection.monthly_breakdown]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=months,
        y=[month.projected_hours for month in projection.monthly_breakdown],
        name='Projected Hours',
        marker_color=HOURS_COLOR
    ))
    fig.add_trace(go.Scatter(
        x=months,
        y=[month.cumulative_hours for month in projection.monthly_breakdown],
        mode='lines+markers',
        name='Cumulative Hours',
        line=dict(color=VALUE_COLOR, width=3)
    ))

    fig.update_layout(
        title='Projected Hours - Remainder of Year',
        xaxis_title='Month',
        yaxis_title='Hours',
        hovermode='x unified',
        height=400
    )
    return fig
