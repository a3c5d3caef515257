"""
Project Breakdown tab - hours and monetary value per employee for one project.
"""
import streamlit as st
import pandas as pd
from components.charts import build_project_breakdown_chart
from utils.display_helpers import format_currency, format_project_badge
from utils.exceptions import ReferentialIntegrityError
from utils.logger import get_logger

logger = get_logger(__name__)


def render_project_breakdown_tab(repo, processor):
    """Render the Project Breakdown tab."""
    projects = repo.get_projects()

    if not projects:
        st.info("No projects found")
        return

    project_ids = [p.id for p in projects]
    # Open on the third project when there is one
    default_index = min(2, len(project_ids) - 1)
    selected_id = st.selectbox(
        "Select Project",
        options=project_ids,
        index=default_index,
        format_func=repo.get_project_name,
        key="project_breakdown_select"
    )
    project = repo.get_project_by_id(selected_id)

    summary = processor.calculate_project_summaries([project], repo.get_work_assignments())[0]

    st.markdown(format_project_badge(project, separator=" &nbsp; "), unsafe_allow_html=True)
    if project.description:
        st.caption(project.description)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Total Hours", f"{summary.total_hours:,.0f}")
    with col2:
        st.metric("Total Monetary Value", format_currency(summary.total_value))
    with col3:
        st.metric("Employees", summary.employee_count)

    try:
        series = processor.calculate_assignment_series_for_project(
            project.id, repo.get_employees(), repo.get_work_assignments()
        )
    except ReferentialIntegrityError as e:
        logger.error(f"Cannot chart project {project.id}: {e}")
        st.error(f"Data integrity problem: {e}")
        return

    st.plotly_chart(build_project_breakdown_chart(series, project.name), use_container_width=True)

    if not series.is_empty:
        breakdown_df = pd.DataFrame({
            'Employee': series.labels,
            'Hours Worked': series.hours,
            'Monetary Value': [format_currency(v) for v in series.values]
        })
        st.dataframe(breakdown_df, use_container_width=True, hide_index=True)
