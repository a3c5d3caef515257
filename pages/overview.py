import streamlit as st
from datetime import date
from components.charts import build_projects_summary_chart
from utils.display_helpers import format_currency, format_hourly_rate
from utils.logger import get_logger

logger = get_logger(__name__)

repo = st.session_state.repository
processor = st.session_state.data_processor

st.markdown("### 📊 Dashboard Overview")

employees = repo.get_employees()
projects = repo.get_projects()
work_assignments = repo.get_work_assignments()

summaries = processor.calculate_project_summaries(projects, work_assignments)
totals = processor.calculate_overall_totals(summaries)
projection = processor.calculate_year_projection(date.today(), employees, projects, work_assignments)

# KPI row
col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric("Total Hours", f"{totals.total_hours:,.0f}")
with col2:
    st.metric("Total Monetary Value", format_currency(totals.total_value))
with col3:
    st.metric("Average Annual Salary", format_currency(processor.calculate_average_annual_salary(employees)))
with col4:
    st.metric("Average Hourly Rate", format_hourly_rate(processor.calculate_average_hourly_rate(employees)))

col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric("Employees", len(employees))
with col2:
    st.metric("Active Projects", projection.active_projects)
with col3:
    st.metric("Projected Hours (Rest of Year)", f"{projection.total_projected_hours:,.0f}")
with col4:
    st.metric("Projected Value (Rest of Year)", format_currency(projection.total_projected_value))

st.markdown("---")

if summaries:
    st.plotly_chart(build_projects_summary_chart(summaries), use_container_width=True)
else:
    st.info("No projects loaded")
