"""
Projects Summary tab - totals and per-employee averages for every project.
"""
import streamlit as st
from components.charts import build_projects_summary_chart
from utils.display_helpers import format_currency


def render_projects_summary_tab(repo, processor):
    """Render the Projects Summary tab."""
    summaries = processor.calculate_project_summaries(repo.get_projects(), repo.get_work_assignments())

    if not summaries:
        st.info("No projects found")
        return

    totals = processor.calculate_overall_totals(summaries)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Total Hours", f"{totals.total_hours:,.0f}")
    with col2:
        st.metric("Total Monetary Value", format_currency(totals.total_value))
    with col3:
        st.metric("Employee Assignments", totals.total_employees,
                  help="Summed per project; an employee on two projects counts twice")

    st.plotly_chart(build_projects_summary_chart(summaries), use_container_width=True)

    display_df = processor.summaries_to_dataframe(summaries)
    display_df['total_value'] = display_df['total_value'].apply(format_currency)
    display_df['average_value_per_employee'] = display_df['average_value_per_employee'].apply(format_currency)
    display_df['average_hours_per_employee'] = display_df['average_hours_per_employee'].round(1)
    display_df = display_df.rename(columns={
        'project_id': 'ID',
        'project_name': 'Project',
        'project_status': 'Status',
        'total_hours': 'Total Hours',
        'total_value': 'Total Value',
        'employee_count': 'Employees',
        'average_hours_per_employee': 'Avg Hours / Employee',
        'average_value_per_employee': 'Avg Value / Employee'
    })
    st.dataframe(display_df, use_container_width=True, hide_index=True)
