"""
Employee Detail tab - one employee's work across projects.
"""
import streamlit as st
import pandas as pd
from components.charts import build_employee_breakdown_chart
from utils.display_helpers import format_currency, format_hourly_rate
from utils.exceptions import ReferentialIntegrityError
from utils.logger import get_logger

logger = get_logger(__name__)


def render_employee_detail_tab(repo, processor):
    """Render the Employee Detail tab."""
    employees = repo.get_employees()

    if not employees:
        st.info("No employees found")
        return

    employee_options = {e.id: e.full_name for e in employees}
    selected_id = st.selectbox(
        "Select Employee",
        options=list(employee_options),
        format_func=lambda employee_id: employee_options[employee_id],
        key="employee_detail_select"
    )
    employee = repo.get_employee_by_id(selected_id)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Annual Salary", format_currency(employee.annual_salary))
    with col2:
        st.metric("Hourly Rate", format_hourly_rate(employee.hourly_rate))
    with col3:
        st.metric("Projects", len({w.project_id for w in repo.get_work_by_employee(employee.id)}))

    try:
        series = processor.calculate_assignment_series_for_employee(
            employee.id, repo.get_projects(), repo.get_work_assignments()
        )
    except ReferentialIntegrityError as e:
        logger.error(f"Cannot chart employee {employee.id}: {e}")
        st.error(f"Data integrity problem: {e}")
        return

    if series.is_empty:
        st.info(f"{employee.full_name} has no recorded work")
        return

    st.plotly_chart(build_employee_breakdown_chart(series, employee.full_name), use_container_width=True)

    detail_df = pd.DataFrame({
        'Project': series.labels,
        'Hours': series.hours,
        'Monetary Value': [format_currency(v) for v in series.values]
    })
    st.dataframe(detail_df, use_container_width=True, hide_index=True)
